# app/api/routers/orders.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import current_user_id, get_lock_service
from app.data.database import get_db
from app.domain.errors import CartLockedError, OrderNotFound
from app.domain.schemas import OrderOut
from app.services.lock_service import LockService
from app.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_service(db: Session, lock_service: LockService):
    return OrderService(db, lock_service=lock_service)


@router.post("", response_model=OrderOut, status_code=201)
def create_order(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    """
    Tworzy zamówienie z koszyka użytkownika i czyści koszyk.
    Wysyła powiadomienie asynchronicznie.
    """
    svc = get_service(db, lock_service)
    try:
        return svc.create_order(user_id)
    except CartLockedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        # pusty koszyk, brak usera
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=List[OrderOut])
def list_orders(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    return get_service(db, lock_service).list_orders(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    """
    Pobiera szczegóły zamówienia.
    """
    svc = get_service(db, lock_service)
    try:
        return svc.get_order(order_id, user_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except OrderNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
