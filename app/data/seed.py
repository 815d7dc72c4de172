# app/data/seed.py
from decimal import Decimal

from app.data.database import SessionLocal
from app.data.models import UserModel, ProductModel
from app.domain.enums import UserRole
from app.utils.clock import utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {"name": "Keyboard", "price": Decimal("199.99"), "stock_quantity": 25, "category": "Peripherals"},
    {"name": "Mouse", "price": Decimal("49.50"), "stock_quantity": 100, "category": "Peripherals"},
    {"name": "Monitor", "price": Decimal("899.00"), "stock_quantity": 10, "category": "Displays"},
]


def seed(session_factory=SessionLocal):
    db = session_factory()
    try:
        # not forcing: only seed if empty
        if db.query(UserModel).first():
            return
        now = utcnow()
        db.add(
            UserModel(
                first_name="Admin",
                last_name="",
                email="admin@example.com",
                role=UserRole.ADMIN.value,
                created_at=now,
                updated_at=now,
            )
        )
        for p in PRODUCTS:
            db.add(ProductModel(active=True, created_at=now, updated_at=now, **p))
        db.commit()
        logger.info(f"Seeded admin user and {len(PRODUCTS)} products")
    finally:
        db.close()
