from sqlalchemy import Column, Integer, String, DateTime

from app.data.database import Base
from app.domain.enums import UserRole


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False, default="")
    email = Column(String(255), nullable=False, unique=True)
    phone = Column(String(32), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.CUSTOMER.value)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
