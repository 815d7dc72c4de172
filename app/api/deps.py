# app/api/deps.py
from fastapi import Header, Request

from app.services.lock_service import LockService


def current_user_id(user_id: int = Header(..., alias="X-User-ID", gt=0)) -> int:
    return user_id


def get_lock_service(request: Request) -> LockService:
    return request.app.state.lock_service
