# app/services/product_service.py
from typing import List
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.errors import ProductNotFound
from app.domain.schemas import ProductIn, ProductOut
from app.repos.product_repo import ProductRepo
from app.utils.clock import utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """Katalog produktow. Usuwanie tylko miekkie (active=False)."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def create_product(self, payload: ProductIn) -> ProductOut:
        now = utcnow()
        product = ProductModel(active=True, created_at=now, updated_at=now)
        self._apply(product, payload)

        created = self.repo.create_product(product)
        logger.info(f"Created product {created.id} ({created.name})")
        return ProductOut.model_validate(created)

    def update_product(self, product_id: int, payload: ProductIn) -> ProductOut:
        product = self._require(product_id)
        self._apply(product, payload)
        product.updated_at = utcnow()

        saved = self.repo.save(product)
        logger.info(f"Updated product {product_id}")
        return ProductOut.model_validate(saved)

    def get_product(self, product_id: int) -> ProductOut:
        return ProductOut.model_validate(self._require(product_id))

    def list_active(self) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.list_active()]

    def search(self, keyword: str) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.search(keyword)]

    def soft_delete(self, product_id: int) -> None:
        product = self._require(product_id)
        product.active = False
        product.updated_at = utcnow()
        self.repo.save(product)
        logger.info(f"Deactivated product {product_id}")

    def _require(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise ProductNotFound(product_id)
        return product

    @staticmethod
    def _apply(product: ProductModel, payload: ProductIn) -> None:
        product.name = payload.name
        product.description = payload.description
        product.price = payload.price
        product.stock_quantity = payload.stock_quantity
        product.category = payload.category
        product.image_url = payload.image_url
