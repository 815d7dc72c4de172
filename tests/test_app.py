from fastapi.testclient import TestClient

from app.data.database import make_session_factory
from app.data.models import UserModel, ProductModel
from app.data.seed import seed, PRODUCTS
from app.main import create_app


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_seed_only_fills_empty_database(engine, db):
    factory = make_session_factory(engine)

    seed(factory)
    seed(factory)

    assert db.query(UserModel).count() == 1
    assert db.query(UserModel).one().role == "ADMIN"
    assert db.query(ProductModel).count() == len(PRODUCTS)


def test_seed_on_startup(engine, lock_service):
    app = create_app(engine=engine, lock_service=lock_service, seed_on_startup=True)

    with TestClient(app) as c:
        assert len(c.get("/api/products").json()) == len(PRODUCTS)
