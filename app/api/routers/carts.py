#app/api/routers/carts.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import current_user_id, get_lock_service
from app.data.database import get_db
from app.domain.errors import CartLockedError
from app.domain.schemas import CartItemIn, CartItemOut
from app.services.cart_service import CartService
from app.services.lock_service import LockService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session, lock_service: LockService):
    return CartService(db=db, lock_service=lock_service)


@router.post("", response_model=CartItemOut, status_code=201)
def add_to_cart(
    payload: CartItemIn,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    svc = get_service(db, lock_service)
    try:
        return svc.add_item(user_id, payload.product_id, payload.quantity)
    except CartLockedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        # brak produktu / usera, brak na stanie
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/items/{product_id}")
def remove_from_cart(
    product_id: int,
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    svc = get_service(db, lock_service)
    try:
        svc.remove_item(user_id, product_id)
    except CartLockedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"detail": "Product removed from cart"}


@router.get("", response_model=List[CartItemOut])
def get_cart(
    user_id: int = Depends(current_user_id),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    return get_service(db, lock_service).list_items(user_id)
