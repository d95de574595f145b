from conftest import fetch_product
from storefront.domain.labels import merge_labels


def test_merge_stored_wins_on_collision():
    merged = merge_labels(
        stored=[("Phones", "Mobile phones"), ("Tablets", None)],
        derived=["Phones", "Accessories"],
    )

    assert merged == [
        {"name": "Accessories", "label": "Accessories"},
        {"name": "Phones", "label": "Mobile phones"},
        {"name": "Tablets", "label": "Tablets"},
    ]


def test_merge_skips_blank_derived_values():
    assert merge_labels(stored=[], derived=["", None, "Phones"]) == [{"name": "Phones", "label": "Phones"}]


def test_add_category_requires_admin(client, user_headers):
    res = client.post("/categories", json={"category": "Tablets"}, headers=user_headers)

    assert res.status_code == 403


def test_add_category_and_list(client, admin_headers):
    res = client.post("/categories", json={"category": "Tablets", "label": "All tablets"}, headers=admin_headers)

    assert res.status_code == 201
    categories = client.get("/categories").json()["data"]["categories"]
    assert {"name": "Tablets", "label": "All tablets"} in categories


def test_add_category_conflicts_with_product_values(client, admin_headers, product_factory):
    product_factory(category="Phones")

    res = client.post("/categories", json={"category": "Phones"}, headers=admin_headers)

    assert res.status_code == 409
    assert res.json()["message"] == "Category already exists."


def test_add_blank_category(client, admin_headers):
    res = client.post("/categories", json={"category": "  "}, headers=admin_headers)

    assert res.status_code == 400


def test_delete_category_reassigns_products(client, admin_headers, product_factory):
    phone = product_factory(category="Phones")

    res = client.request("DELETE", "/categories", json={"category": "Phones"}, headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["data"] == {"reassigned": 1}
    assert fetch_product(phone).category == "Uncategorized"
    names = [c["name"] for c in client.get("/categories").json()["data"]["categories"]]
    assert "Phones" not in names
    assert "Uncategorized" in names


def test_delete_stored_category_without_products(client, admin_headers):
    client.post("/categories", json={"category": "Tablets"}, headers=admin_headers)

    res = client.request("DELETE", "/categories", json={"category": "Tablets"}, headers=admin_headers)

    assert res.status_code == 200
    names = [c["name"] for c in client.get("/categories").json()["data"]["categories"]]
    assert "Tablets" not in names


def test_delete_unknown_category(client, admin_headers):
    res = client.request("DELETE", "/categories", json={"category": "Nope"}, headers=admin_headers)

    assert res.status_code == 404


def test_brand_lifecycle(client, admin_headers, product_factory):
    product_id = product_factory(brand="Oppo")

    assert client.post("/brands", json={"brand": "Oppo"}, headers=admin_headers).status_code == 409
    assert client.post("/brands", json={"brand": "Nokia"}, headers=admin_headers).status_code == 201

    brands = [b["name"] for b in client.get("/products/categories").json()["data"]["brands"]]
    assert brands == ["Nokia", "Oppo"]

    res = client.request("DELETE", "/brands", json={"brand": "Oppo"}, headers=admin_headers)
    assert res.status_code == 200
    assert fetch_product(product_id).brand == "Unbranded"

    res = client.request("DELETE", "/brands", json={"brand": "Oppo"}, headers=admin_headers)
    assert res.status_code == 404


def test_add_category_differing_only_in_case_conflicts(client, admin_headers, product_factory):
    product_factory(category="Phones")

    res = client.post("/categories", json={"category": "phones"}, headers=admin_headers)

    assert res.status_code == 409
    names = [c["name"] for c in client.get("/categories").json()["data"]["categories"]]
    assert names.count("Phones") == 1
    assert "phones" not in names


def test_delete_category_matches_name_case_insensitively(client, admin_headers, product_factory):
    phone = product_factory(category="Phones")

    res = client.request("DELETE", "/categories", json={"category": "phones"}, headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["data"] == {"reassigned": 1}
    assert fetch_product(phone).category == "Uncategorized"


def test_delete_stored_brand_with_other_case(client, admin_headers):
    client.post("/brands", json={"brand": "Nokia"}, headers=admin_headers)

    res = client.request("DELETE", "/brands", json={"brand": "NOKIA"}, headers=admin_headers)

    assert res.status_code == 200
    brands = [b["name"] for b in client.get("/categories").json()["data"]["brands"]]
    assert "Nokia" not in brands
