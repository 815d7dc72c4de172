from decimal import Decimal
from typing import Dict, Any, List
from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel
from app.domain.errors import ProductNotFound, UserNotFound, CartItemNotFound, OutOfStockError
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.repos.user_repo import UserRepo
from app.services.lock_service import LockService
from app.utils.clock import utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Prosta implementacja cqrs i proste use case dla domeny cart
    commands (add, remove, clear) modyfikuja stan pod lockiem koszyka uzytkownika
    query (list) tylko odczyt
    """

    def __init__(self, db: Session, lock_service: LockService):
        self.repo = CartRepo(db)
        self.product_repo = ProductRepo(db)
        self.user_repo = UserRepo(db)
        self.lock_service = lock_service

    #query - odczyt
    def list_items(self, user_id: int) -> List[Dict[str, Any]]:
        #nieznany user -> pusta lista, bez bledu
        return [self._to_line(i) for i in self.repo.get_cart_items(user_id)]

    #commands
    def add_item(self, user_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

        with self.lock_service.hold_cart(user_id):
            product = self.product_repo.get_product(product_id)
            if not product or not product.active:
                raise ProductNotFound(product_id)

            user = self.user_repo.get_user(user_id)
            if not user:
                raise UserNotFound(user_id)

            #porownanie z zadana iloscia, nie z suma w koszyku
            if quantity > product.stock_quantity:
                logger.warning(
                    f"User {user_id} requested {quantity} of product {product_id}, "
                    f"only {product.stock_quantity} in stock"
                )
                raise OutOfStockError(product_id, quantity, product.stock_quantity)

            try:
                now = utcnow()
                item = self.repo.get_cart_item(user_id, product_id)

                if item:
                    logger.info(
                        f"Product {product_id} already in cart of user {user_id}, "
                        f"quantity {item.quantity} -> {item.quantity + quantity}"
                    )
                    item.quantity += quantity
                    #cena linii liczona od aktualnej ceny produktu
                    item.price = Decimal(product.price) * item.quantity
                    item.updated_at = now
                else:
                    logger.info(f"Adding product {product_id} to cart of user {user_id}")
                    item = self.repo.add_cart_item(
                        CartItemModel(
                            user_id=user_id,
                            product_id=product_id,
                            quantity=quantity,
                            price=Decimal(product.price) * quantity,
                            created_at=now,
                            updated_at=now,
                        )
                    )

                self.repo.commit()
            except Exception as e:
                logger.error(f"Failed to add product {product_id} to cart of user {user_id}: {e}")
                self.repo.rollback()
                raise

            return self._to_line(item)

    def remove_item(self, user_id: int, product_id: int) -> None:
        with self.lock_service.hold_cart(user_id):
            item = self.repo.get_cart_item(user_id, product_id)
            if not item:
                raise CartItemNotFound(user_id, product_id)

            self.repo.delete_cart_item(item)
            self.repo.commit()

        logger.info(f"Removed product {product_id} from cart of user {user_id}")

    def clear(self, user_id: int) -> int:
        with self.lock_service.hold_cart(user_id):
            deleted = self.repo.delete_all_for_user(user_id)
            self.repo.commit()

        logger.info(f"Cleared {deleted} lines from cart of user {user_id}")
        return deleted

    @staticmethod
    def _to_line(item: CartItemModel) -> Dict[str, Any]:
        return {
            "id": item.id,
            "user_name": item.user.first_name if item.user else None,
            "product_name": item.product.name if item.product else None,
            "product_id": item.product_id,
            "quantity": item.quantity,
            "price": item.price,
        }
