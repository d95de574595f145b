import pytest

from conftest import fetch_product
from storefront.data.database import SessionLocal
from storefront.services.product_service import ProductService
from storefront.domain.errors import ValidationError

NEW_PRODUCT = {
    "name": "Galaxy",
    "description": "Android phone",
    "price": 500,
    "image": "https://example.com/g.png",
    "category": "Phones",
    "brand": "Android",
    "stock": 4,
}


def test_create_product_requires_admin(client, user_headers):
    assert client.post("/products", json=NEW_PRODUCT).status_code == 401
    assert client.post("/products", json=NEW_PRODUCT, headers=user_headers).status_code == 403


def test_create_and_get_product(client, admin_headers):
    res = client.post("/products", json=NEW_PRODUCT, headers=admin_headers)

    assert res.status_code == 201
    created = res.json()["data"]
    assert created["price"] == 500
    assert created["stock"] == 4

    res = client.get(f"/products/{created['id']}")
    assert res.status_code == 200
    assert res.json()["data"]["name"] == "Galaxy"


def test_negative_price_and_stock_rejected(client, admin_headers):
    assert client.post("/products", json={**NEW_PRODUCT, "price": -1}, headers=admin_headers).status_code == 400
    assert client.post("/products", json={**NEW_PRODUCT, "stock": -1}, headers=admin_headers).status_code == 400


def test_missing_fields_rejected(client, admin_headers):
    payload = {k: v for k, v in NEW_PRODUCT.items() if k != "image"}

    res = client.post("/products", json=payload, headers=admin_headers)

    assert res.status_code == 400
    assert res.json()["success"] is False


def test_get_unknown_product(client):
    res = client.get("/products/nope")

    assert res.status_code == 404
    assert res.json()["message"] == "Product not found."


def test_list_filters_by_category_and_brand(client, product_factory):
    product_factory(name="iPhone", category="Phones", brand="Apple")
    product_factory(name="Case", category="Accessories", brand="Apple")
    product_factory(name="Pixel", category="Phones", brand="Android")

    names = lambda res: sorted(p["name"] for p in res.json()["data"])

    assert names(client.get("/products")) == ["Case", "Pixel", "iPhone"]
    assert names(client.get("/products", params={"category": "Phones"})) == ["Pixel", "iPhone"]
    assert names(client.get("/products", params={"brand": "Apple"})) == ["Case", "iPhone"]
    assert names(client.get("/products", params={"category": "Phones", "brand": "Apple"})) == ["iPhone"]


def test_update_product(client, admin_headers, product_factory):
    product_id = product_factory(stock=1)

    res = client.put(f"/products/{product_id}", json={"stock": 9, "price": 1200}, headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["data"]["stock"] == 9
    assert fetch_product(product_id).price == 1200


def test_update_product_strips_name(client, admin_headers, product_factory):
    product_id = product_factory()

    res = client.put(f"/products/{product_id}", json={"name": "  Pixel 9  "}, headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["data"]["name"] == "Pixel 9"
    assert fetch_product(product_id).name == "Pixel 9"


def test_update_product_blank_name(client, admin_headers, product_factory):
    product_id = product_factory()

    res = client.put(f"/products/{product_id}", json={"name": "   "}, headers=admin_headers)

    assert res.status_code == 400


def test_update_unknown_product(client, admin_headers):
    res = client.put("/products/nope", json={"stock": 1}, headers=admin_headers)

    assert res.status_code == 404


def test_delete_product_also_removes_cart_lines(client, admin_headers, user_headers, product_factory):
    product_id = product_factory()
    client.post("/cart", json={"productId": product_id, "quantity": 1}, headers=user_headers)

    res = client.delete(f"/products/{product_id}", headers=admin_headers)

    assert res.status_code == 200
    assert fetch_product(product_id) is None
    assert client.get("/cart", headers=user_headers).json()["data"]["items"] == []


def test_categories_endpoint_lists_distinct_values(client, product_factory):
    product_factory(category="Phones", brand="Apple")
    product_factory(category="Phones", brand="Oppo")

    data = client.get("/products/categories").json()["data"]

    assert data["brands"] == [{"name": "Apple", "label": "Apple"}, {"name": "Oppo", "label": "Oppo"}]
    assert data["categories"] == [{"name": "Phones", "label": "Phones"}]


@pytest.fixture
def session():
    s = SessionLocal()
    yield s
    s.close()


def test_register_policy_keeps_new_labels(session):
    product = ProductService(session, label_policy="register").create_product({**NEW_PRODUCT, "brand": "Nokia"})

    assert product.brand == "Nokia"


def test_known_labels_are_matched_case_insensitively(session, product_factory):
    product_factory(brand="Apple")

    product = ProductService(session, label_policy="reject").create_product({**NEW_PRODUCT, "brand": "apple"})

    assert product.brand == "Apple"


def test_fallback_policy(session, product_factory):
    product_factory(category="Phones", brand="Apple")

    product = ProductService(session, label_policy="fallback").create_product(
        {**NEW_PRODUCT, "category": "Tablets", "brand": "Nokia"}
    )

    assert product.category == "Uncategorized"
    assert product.brand == "Unbranded"


def test_reject_policy(session, product_factory):
    product_factory(category="Phones", brand="Apple")

    with pytest.raises(ValidationError):
        ProductService(session, label_policy="reject").create_product({**NEW_PRODUCT, "brand": "Nokia"})


def test_unknown_policy_name(session):
    with pytest.raises(ValueError):
        ProductService(session, label_policy="whatever")
