# app/api/routers/products.py
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import ProductNotFound
from app.domain.schemas import ProductIn, ProductOut
from app.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(db: Session):
    return ProductService(db)


@router.post("", response_model=ProductOut, status_code=201)
def create_product(payload: ProductIn, db: Session = Depends(get_db)):
    return get_service(db).create_product(payload)


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return get_service(db).list_active()


@router.get("/search", response_model=List[ProductOut])
def search_products(keyword: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    return get_service(db).search(keyword)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        return get_service(db).get_product(product_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, payload: ProductIn, db: Session = Depends(get_db)):
    try:
        return get_service(db).update_product(product_id, payload)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    try:
        get_service(db).soft_delete(product_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
