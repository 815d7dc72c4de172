from decimal import Decimal

import pytest

from app.data.models import ProductModel
from app.domain.errors import ProductNotFound
from app.domain.schemas import ProductIn
from app.services.product_service import ProductService
from conftest import headers

PAYLOAD = {
    "name": "Mechanical Keyboard",
    "description": "Brown switches",
    "price": "199.99",
    "stockQuantity": 12,
    "category": "Peripherals",
    "imageUrl": "https://cdn.example.com/kb.png",
}


@pytest.fixture
def products(db):
    return ProductService(db)


def test_create_and_get(products):
    created = products.create_product(ProductIn(**PAYLOAD))

    fetched = products.get_product(created.id)
    assert fetched.name == "Mechanical Keyboard"
    assert fetched.price == Decimal("199.99")
    assert fetched.stock_quantity == 12
    assert fetched.active is True


def test_soft_delete_keeps_row(products, db, make_product):
    product = make_product()

    products.soft_delete(product.id)

    db.expire_all()
    assert db.get(ProductModel, product.id).active is False
    assert products.list_active() == []
    assert products.get_product(product.id).active is False


def test_missing_product(products):
    with pytest.raises(ProductNotFound):
        products.get_product(1)
    with pytest.raises(ProductNotFound):
        products.update_product(1, ProductIn(**PAYLOAD))
    with pytest.raises(ProductNotFound):
        products.soft_delete(1)


def test_search_matches_name_or_category_case_insensitive(products, make_product):
    keyboard = make_product(name="Keyboard", category="Peripherals")
    monitor = make_product(name="Monitor", category="Displays")
    make_product(name="Old keyboard", active=False)
    make_product(name="Keyboard cover", stock=0)

    assert [p.id for p in products.search("KEYB")] == [keyboard.id]
    assert [p.id for p in products.search("display")] == [monitor.id]
    assert products.search("chair") == []


def test_list_active_excludes_inactive(products, make_product):
    active = make_product(name="Mouse")
    make_product(name="Trackball", active=False)

    assert [p.id for p in products.list_active()] == [active.id]


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

def test_admin_creates_product(client, admin):
    resp = client.post("/api/products", json=PAYLOAD, headers=headers(admin))

    assert resp.status_code == 201
    body = resp.json()
    assert body["stockQuantity"] == 12
    assert body["imageUrl"] == PAYLOAD["imageUrl"]
    assert body["active"] is True


def test_customer_cannot_create_product(client, customer):
    resp = client.post("/api/products", json=PAYLOAD, headers=headers(customer))

    assert resp.status_code == 403


def test_create_product_requires_identity(client):
    assert client.post("/api/products", json=PAYLOAD).status_code == 401
    assert client.post("/api/products", json=PAYLOAD, headers={"X-User-ID": "abc"}).status_code == 401
    assert client.post("/api/products", json=PAYLOAD, headers={"X-User-ID": "999"}).status_code == 401


def test_negative_stock_rejected(client, admin):
    resp = client.post("/api/products", json={**PAYLOAD, "stockQuantity": -1}, headers=headers(admin))

    assert resp.status_code == 422


def test_update_and_delete(client, admin, make_product):
    product = make_product()

    resp = client.put(f"/api/products/{product.id}", json={**PAYLOAD, "price": "150.00"}, headers=headers(admin))
    assert resp.status_code == 200
    assert Decimal(resp.json()["price"]) == Decimal("150.00")

    assert client.delete(f"/api/products/{product.id}", headers=headers(admin)).status_code == 204
    assert client.get("/api/products").json() == []
    assert client.get(f"/api/products/{product.id}").json()["active"] is False

    assert client.put("/api/products/999", json=PAYLOAD, headers=headers(admin)).status_code == 404
    assert client.delete("/api/products/999", headers=headers(admin)).status_code == 404


def test_public_reads(client, make_product):
    product = make_product(name="Monitor", category="Displays")

    assert [p["id"] for p in client.get("/api/products").json()] == [product.id]
    assert [p["id"] for p in client.get("/api/products/search", params={"keyword": "moni"}).json()] == [product.id]
    assert client.get("/api/products/404").status_code == 404
