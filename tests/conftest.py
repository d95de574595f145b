import os

# konfiguracja przed importem storefront - settings czytane sa przy imporcie
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"
os.environ["LABEL_POLICY"] = "register"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.api.deps import get_lock_service
from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import AdminModel, ProductModel, UserModel
from storefront.main import app
from storefront.services.lock_service import LockService
from storefront.utils.security import hash_password


class FakeLockService(LockService):
    """Lock w pamieci procesu zamiast Redisa."""

    def __init__(self):
        self.locks = {}

    def acquire(self, key, token, ttl):
        if key in self.locks:
            return False
        self.locks[key] = token
        return True

    def release(self, key, token):
        if self.locks.get(key) == token:
            del self.locks[key]
            return True
        return False


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def lock_service():
    return FakeLockService()


@pytest.fixture
def client(lock_service):
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def create_product(db, **overrides) -> ProductModel:
    data = {
        "name": "Phone X",
        "description": "A phone",
        "price": Decimal("1000"),
        "image": "https://example.com/x.png",
        "category": "Phones",
        "brand": "Apple",
        "stock": 5,
    }
    data.update(overrides)
    product = ProductModel(**data)
    db.add(product)
    db.commit()
    return product


def create_user(db, email="user@example.com", name="User") -> UserModel:
    user = UserModel(name=name, email=email, password_hash=hash_password("secret1"))
    db.add(user)
    db.commit()
    return user


def create_admin(db, email="admin@example.com") -> AdminModel:
    admin = AdminModel(name="Admin", email=email, password_hash=hash_password("admin1234"))
    db.add(admin)
    db.commit()
    return admin


@pytest.fixture
def user_headers(client):
    res = client.post(
        "/users/register",
        json={"name": "Ada", "email": "ada@example.com", "password": "secret1"},
    )
    assert res.status_code == 201
    return {"Authorization": f"Bearer {res.json()['data']['token']}"}


@pytest.fixture
def admin_headers(client):
    res = client.post(
        "/admin/register",
        json={"name": "Boss", "email": "boss@example.com", "password": "admin1234"},
    )
    assert res.status_code == 201
    return {"Authorization": f"Bearer {res.json()['data']['token']}"}


@pytest.fixture
def product_factory():
    """Tworzy produkt we wlasnej sesji, zwraca jego id."""

    def make(**overrides) -> str:
        session = SessionLocal()
        try:
            return create_product(session, **overrides).id
        finally:
            session.close()

    return make


def fetch_product(product_id: str) -> ProductModel | None:
    session = SessionLocal()
    try:
        return session.get(ProductModel, product_id)
    finally:
        session.close()
