from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)

EXAMPLE = {
    "name": "product1",
    "price": 1000,
    "discount": 800,
    "review_count": 99,
    "image_url": "https://example.com/image.jpg",
}


def _create(body):
    res = client.post("/products", json=body)
    assert res.status_code == 201
    return res


def _only_product():
    body = client.get("/products").json()
    assert len(body) == 1
    return body[0]


def test_list_products_empty():
    res = client.get("/products")
    assert res.status_code == 200
    assert res.json() == []


def test_create_then_get_by_id():
    res = _create(EXAMPLE)
    assert res.json() == {"message": "Product inserted successfully."}

    new_id = _only_product()["id"]
    res = client.get(f"/products/{new_id}")
    assert res.status_code == 200
    body = res.json()
    assert isinstance(body, list)
    assert len(body) == 1
    assert body[0] == {"id": new_id, **EXAMPLE}


def test_list_returns_all_rows():
    _create(EXAMPLE)
    _create({**EXAMPLE, "name": "product2"})
    res = client.get("/products")
    assert res.status_code == 200
    names = sorted(p["name"] for p in res.json())
    assert names == ["product1", "product2"]


def test_create_with_missing_fields_stores_nulls():
    _create({"name": "bare"})
    p = _only_product()
    assert p["name"] == "bare"
    assert p["price"] is None
    assert p["discount"] is None
    assert p["review_count"] is None
    assert p["image_url"] is None


def test_create_without_body_inserts_empty_row():
    res = client.post("/products")
    assert res.status_code == 201
    assert res.json() == {"message": "Product inserted successfully."}
    p = _only_product()
    assert [p[k] for k in EXAMPLE] == [None] * len(EXAMPLE)


def test_create_passes_loose_values_to_store():
    res = client.post("/products", json={"name": 123, "review_count": 99.5})
    assert res.status_code == 201
    p = _only_product()
    assert p["name"] == "123"
    assert p["review_count"] == 99.5


def test_update_without_body_clears_row():
    _create(EXAMPLE)
    new_id = _only_product()["id"]
    res = client.put(f"/products/{new_id}")
    assert res.status_code == 201
    p = client.get(f"/products/{new_id}").json()[0]
    assert p["name"] is None
    assert p["price"] is None


def test_get_missing_product_is_404():
    res = client.get("/products/999999")
    assert res.status_code == 404
    assert res.json() == {"message": "Product not found."}


def test_get_non_numeric_id_is_404():
    res = client.get("/products/abc")
    assert res.status_code == 404
    assert res.json() == {"message": "Product not found."}


def test_get_accepts_integral_float_id():
    _create(EXAMPLE)
    new_id = _only_product()["id"]
    res = client.get(f"/products/{new_id}.0")
    assert res.status_code == 200
    assert res.json()[0]["id"] == new_id


def test_get_accepts_hex_id():
    _create(EXAMPLE)
    new_id = _only_product()["id"]
    res = client.get(f"/products/{hex(new_id)}")
    assert res.status_code == 200
    assert res.json()[0]["id"] == new_id


def test_update_overwrites_every_column():
    _create(EXAMPLE)
    new_id = _only_product()["id"]

    res = client.put(f"/products/{new_id}", json={"name": "renamed", "price": 5})
    assert res.status_code == 201
    assert res.json() == {"message": "Product updated successfully."}

    p = client.get(f"/products/{new_id}").json()[0]
    assert p["id"] == new_id
    assert p["name"] == "renamed"
    assert p["price"] == 5
    # no patch semantics: omitted fields are cleared
    assert p["discount"] is None
    assert p["review_count"] is None
    assert p["image_url"] is None


def test_update_missing_product_still_reports_success():
    res = client.put("/products/999999", json=EXAMPLE)
    assert res.status_code == 201
    assert res.json() == {"message": "Product updated successfully."}
    assert client.get("/products").json() == []


def test_update_non_numeric_id_reports_success():
    _create(EXAMPLE)
    res = client.put("/products/abc", json={"name": "x"})
    assert res.status_code == 201
    assert _only_product()["name"] == "product1"


def test_delete_then_get_is_404():
    _create(EXAMPLE)
    new_id = _only_product()["id"]

    res = client.delete(f"/products/{new_id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Product deleted successfully."}

    res = client.get(f"/products/{new_id}")
    assert res.status_code == 404


def test_delete_missing_product_still_reports_success():
    res = client.delete("/products/999999")
    assert res.status_code == 200
    assert res.json() == {"message": "Product deleted successfully."}


def test_create_rejects_non_object_body():
    res = client.post("/products", json=["not", "an", "object"])
    assert res.status_code == 422


def test_unknown_route_falls_through_to_404():
    res = client.get("/items")
    assert res.status_code == 404
