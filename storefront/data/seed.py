# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import AdminModel, ProductModel
from storefront.utils.logging import get_logger
from storefront.utils.security import hash_password

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {
        "name": "iPhone 14",
        "description": "A15 Bionic with stunning display.",
        "price": "650000",
        "image": "https://images.unsplash.com/photo-1603899123335-4a9d94dfbd89",
        "category": "Phones",
        "brand": "Apple",
        "stock": 15,
    },
    {
        "name": "Galaxy A54",
        "description": "Bright AMOLED screen and long battery life.",
        "price": "320000",
        "image": "https://images.unsplash.com/photo-1511707171634-5f897ff02aa9",
        "category": "Phones",
        "brand": "Android",
        "stock": 20,
    },
    {
        "name": "Reno 10",
        "description": "Slim body with portrait camera.",
        "price": "280000",
        "image": "https://images.unsplash.com/photo-1598327105666-5b89351aff97",
        "category": "Phones",
        "brand": "Oppo",
        "stock": 12,
    },
    {
        "name": "Fast Charger 20W",
        "description": "USB-C power adapter.",
        "price": "15000",
        "image": "https://images.unsplash.com/photo-1583863788434-e58a36330cf0",
        "category": "Accessories",
        "brand": "Accessories",
        "stock": 60,
    },
]

DEFAULT_ADMIN_EMAIL = "admin@shop.com"
DEFAULT_ADMIN_PASSWORD = "admin1234"


def seed() -> bool:
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        # tylko gdy baza pusta
        if db.query(ProductModel).first():
            logger.info("Products already exist, skipping seed")
            return False

        for p in DEMO_PRODUCTS:
            db.add(ProductModel(**{**p, "price": Decimal(p["price"])}))

        if not db.query(AdminModel).filter(AdminModel.email == DEFAULT_ADMIN_EMAIL).first():
            db.add(
                AdminModel(
                    name="Admin",
                    email=DEFAULT_ADMIN_EMAIL,
                    password_hash=hash_password(DEFAULT_ADMIN_PASSWORD),
                )
            )

        db.commit()
        logger.info(f"Seeded {len(DEMO_PRODUCTS)} products")
        return True
    finally:
        db.close()


if __name__ == "__main__":
    seed()
