from conftest import fetch_product
from storefront.data.database import SessionLocal
from storefront.data.models import OrderModel


def fill_cart(client, headers, product_id, quantity):
    res = client.post("/cart", json={"productId": product_id, "quantity": quantity}, headers=headers)
    assert res.status_code == 201


def test_checkout_creates_order(client, user_headers, product_factory):
    product_id = product_factory(price=1000, stock=5)
    fill_cart(client, user_headers, product_id, 2)

    res = client.post("/order", json={"paymentMethod": "paystack"}, headers=user_headers)

    assert res.status_code == 201
    order = res.json()["data"]
    assert order["total_price"] == 2000
    assert order["status"] == "pending"
    assert order["payment_method"] == "paystack"
    assert order["items"][0]["product_id"] == product_id
    assert order["items"][0]["quantity"] == 2
    assert fetch_product(product_id).stock == 3
    assert client.get("/cart", headers=user_headers).json()["data"]["items"] == []


def test_checkout_without_body_defaults_payment(client, user_headers, product_factory):
    fill_cart(client, user_headers, product_factory(), 1)

    res = client.post("/order", headers=user_headers)

    assert res.status_code == 201
    assert res.json()["data"]["payment_method"] == "whatsapp"


def test_checkout_empty_cart(client, user_headers):
    res = client.post("/order", headers=user_headers)

    assert res.status_code == 400
    assert res.json()["message"] == "Cart is empty"
    session = SessionLocal()
    try:
        assert session.query(OrderModel).count() == 0
    finally:
        session.close()


def test_checkout_stock_changed_after_add(client, user_headers, admin_headers, product_factory):
    product_id = product_factory(name="Hot item", stock=3)
    fill_cart(client, user_headers, product_id, 3)
    client.put(f"/products/{product_id}", json={"stock": 2}, headers=admin_headers)

    res = client.post("/order", headers=user_headers)

    assert res.status_code == 400
    assert "Hot item" in res.json()["message"]
    assert fetch_product(product_id).stock == 2
    assert len(client.get("/cart", headers=user_headers).json()["data"]["items"]) == 1


def test_order_snapshot_survives_product_changes(client, user_headers, admin_headers, product_factory):
    product_id = product_factory(name="Phone", price=1000, stock=5)
    fill_cart(client, user_headers, product_id, 1)
    client.post("/order", headers=user_headers)

    client.put(f"/products/{product_id}", json={"price": 5000, "name": "Renamed"}, headers=admin_headers)

    orders = client.get("/order/my-orders", headers=user_headers).json()["data"]
    assert orders[0]["total_price"] == 1000
    assert orders[0]["items"][0]["name"] == "Phone"
    assert orders[0]["items"][0]["unit_price"] == 1000


def test_my_orders_only_shows_own(client, user_headers, product_factory):
    other = client.post(
        "/users/register", json={"name": "Bo", "email": "bo@example.com", "password": "secret1"}
    ).json()["data"]["token"]
    other_headers = {"Authorization": f"Bearer {other}"}
    product_id = product_factory(stock=10)
    fill_cart(client, other_headers, product_id, 1)
    client.post("/order", headers=other_headers)

    assert client.get("/order/my-orders", headers=user_headers).json()["data"] == []
    assert len(client.get("/order/my-orders", headers=other_headers).json()["data"]) == 1


def test_all_orders_paginated(client, user_headers, admin_headers, product_factory):
    product_id = product_factory(stock=10)
    for _ in range(3):
        fill_cart(client, user_headers, product_id, 1)
        assert client.post("/order", headers=user_headers).status_code == 201

    res = client.get("/order/all", params={"page": 2, "limit": 2}, headers=admin_headers)

    assert res.status_code == 200
    page = res.json()["data"]
    assert page["total"] == 3
    assert page["pages"] == 2
    assert page["page"] == 2
    assert len(page["items"]) == 1
    assert page["items"][0]["user"] == {
        "id": page["items"][0]["user_id"],
        "name": "Ada",
        "email": "ada@example.com",
    }


def test_all_orders_bad_paging(client, admin_headers):
    assert client.get("/order/all", params={"page": 0}, headers=admin_headers).status_code == 400
    assert client.get("/order/all", params={"limit": 500}, headers=admin_headers).status_code == 400


def test_status_transitions(client, user_headers, admin_headers, product_factory):
    fill_cart(client, user_headers, product_factory(), 1)
    order_id = client.post("/order", headers=user_headers).json()["data"]["id"]

    def set_status(status):
        return client.patch(f"/order/{order_id}/status", json={"status": status}, headers=admin_headers)

    assert set_status("shipped").status_code == 409
    assert set_status("processing").json()["data"]["status"] == "processing"
    assert set_status("shipped").status_code == 200
    assert set_status("completed").status_code == 200
    assert set_status("pending").status_code == 409
    assert set_status("lost").status_code == 400


def test_status_update_requires_admin(client, user_headers):
    res = client.patch("/order/whatever/status", json={"status": "processing"}, headers=user_headers)

    assert res.status_code == 403


def test_status_update_unknown_order(client, admin_headers):
    res = client.patch("/order/nope/status", json={"status": "processing"}, headers=admin_headers)

    assert res.status_code == 404
