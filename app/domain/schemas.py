# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel
from typing import List
from decimal import Decimal
from datetime import datetime

from app.domain.enums import UserRole, OrderStatus


class ApiModel(BaseModel):
    """JSON w camelCase, snake_case tez przyjmowany na wejsciu."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =====================================================
# PRODUCTS
# =====================================================
class ProductIn(ApiModel):
    """Schema dla tworzenia / aktualizacji produktu."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock_quantity: int = Field(..., ge=0, description="Stan magazynowy (>= 0)")
    category: str | None = Field(None, max_length=100)
    image_url: str | None = Field(None, max_length=500)


class ProductOut(ApiModel):
    id: int
    name: str
    description: str | None = None
    price: Decimal
    stock_quantity: int
    category: str | None = None
    image_url: str | None = None
    active: bool


# =====================================================
# CART
# =====================================================
class CartItemIn(ApiModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")
    quantity: int = Field(..., gt=0, description="Ilość produktu (musi być > 0)")


class CartItemOut(ApiModel):
    """Linia koszyka (response)."""

    id: int
    user_name: str | None = None
    product_name: str | None = None
    product_id: int
    quantity: int
    price: Decimal


# =====================================================
# ORDERS
# =====================================================
class OrderItemOut(ApiModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    price: Decimal


class OrderOut(ApiModel):
    """Snapshot zamowienia (response)."""

    id: int
    user_id: int
    total_amount: Decimal
    status: OrderStatus
    items: List[OrderItemOut]
    created_at: datetime


# =====================================================
# USERS
# =====================================================
class UserCreate(ApiModel):
    """Schema dla rejestracji użytkownika (zawsze CUSTOMER)."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field("", max_length=100)
    email: EmailStr
    phone: str | None = Field(None, max_length=32)


class UserUpdate(UserCreate):
    role: UserRole | None = None


class UserRead(ApiModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    role: UserRole
