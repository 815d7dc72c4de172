import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["CART_LOCK_WAIT_ATTEMPTS"] = "2"
os.environ["CART_LOCK_WAIT_SECONDS"] = "0"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.data.database import Base, make_session_factory
from app.data.models import UserModel, ProductModel
from app.domain.enums import UserRole
from app.main import create_app
from app.services.lock_service import LockService
from app.utils.clock import utcnow


class FakeRedis:
    """Minimalny odpowiednik SET NX EX i skryptu compare-and-delete."""

    def __init__(self):
        self.store = {}

    def set(self, name, value, nx=False, ex=None):
        if nx and name in self.store:
            return None
        self.store[name] = value
        return True

    def eval(self, script, numkeys, key, token):
        if self.store.get(key) == token:
            del self.store[key]
            return 1
        return 0


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = make_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def lock_service(fake_redis):
    return LockService(client=fake_redis)


@pytest.fixture
def client(engine, lock_service):
    app = create_app(engine=engine, lock_service=lock_service, seed_on_startup=False)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(first_name="Jan", role=UserRole.CUSTOMER):
        counter["n"] += 1
        now = utcnow()
        user = UserModel(
            first_name=first_name,
            last_name="Kowalski",
            email=f"user{counter['n']}@example.com",
            role=role.value,
            created_at=now,
            updated_at=now,
        )
        db.add(user)
        db.commit()
        return user

    return _make


@pytest.fixture
def make_product(db):
    def _make(name="Keyboard", price="10.00", stock=5, category="Peripherals", active=True):
        now = utcnow()
        product = ProductModel(
            name=name,
            price=Decimal(price),
            stock_quantity=stock,
            category=category,
            active=active,
            created_at=now,
            updated_at=now,
        )
        db.add(product)
        db.commit()
        return product

    return _make


@pytest.fixture
def customer(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(first_name="Admin", role=UserRole.ADMIN)


def headers(user):
    return {"X-User-ID": str(user.id)}
