# app/repos/product_repo.py
from sqlalchemy import select, or_, func
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_active(self) -> list[ProductModel]:
        return list(
            self.db.execute(
                select(ProductModel)
                .where(ProductModel.active.is_(True))
                .order_by(ProductModel.id)
            ).scalars()
        )

    def search(self, keyword: str) -> list[ProductModel]:
        pattern = f"%{keyword.lower()}%"
        return list(
            self.db.execute(
                select(ProductModel)
                .where(
                    ProductModel.active.is_(True),
                    ProductModel.stock_quantity > 0,
                    or_(
                        func.lower(ProductModel.name).like(pattern),
                        func.lower(ProductModel.category).like(pattern),
                    ),
                )
                .order_by(ProductModel.id)
            ).scalars()
        )

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def save(self, product: ProductModel) -> ProductModel:
        self.db.commit()
        self.db.refresh(product)
        return product
