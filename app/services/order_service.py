# app/services/order_service.py
from decimal import Decimal
from typing import Dict, Any, List
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.domain.enums import OrderStatus
from app.domain.errors import EmptyCartError, UserNotFound, OrderNotFound
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.repos.user_repo import UserRepo
from app.services.lock_service import LockService
from app.services.notification_service import NotificationService
from app.utils.clock import utcnow
from app.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Zamowienie jest niezmiennym snapshotem koszyka z chwili zakupu.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        notification_service: NotificationService | None = None,
    ):
        self.db = db
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.user_repo = UserRepo(db)
        self.lock_service = lock_service
        self.notification_service = notification_service or NotificationService()

    def create_order(self, user_id: int) -> Dict[str, Any]:
        """
        Use Case: Tworzenie zamówienia z koszyka.

        1. Koszyk nie moze byc pusty, user musi istniec
        2. Oblicza total z cen linii koszyka
        3. Kopiuje linie do pozycji zamowienia (snapshot cen)
        4. Zapis zamowienia i czyszczenie koszyka w jednej transakcji
        5. Wysyła powiadomienie (async) po commicie
        """
        with self.lock_service.hold_cart(user_id):
            order = self._place_order(user_id)

        logger.info(f"Order {order.id} created for user {user_id}, total {order.total_amount}")

        self.notification_service.send_order_notification(user_id, order.id)

        return self._to_dict(order)

    def _place_order(self, user_id: int) -> OrderModel:
        lines = self.cart_repo.get_cart_items(user_id)
        if not lines:
            raise EmptyCartError(user_id)

        user = self.user_repo.get_user(user_id)
        if not user:
            raise UserNotFound(user_id)

        total = sum((line.price for line in lines), Decimal("0.00"))

        try:
            now = utcnow()
            order = OrderModel(
                user_id=user.id,
                status=OrderStatus.CONFIRMED.value,
                total_amount=total,
                created_at=now,
                updated_at=now,
            )

            for line in lines:
                order.items.append(
                    OrderItemModel(
                        product_id=line.product_id,
                        quantity=line.quantity,
                        unit_price=(Decimal(line.price) / line.quantity).quantize(CENT),
                        price=line.price,
                    )
                )

            self.repo.add_order(order)
            #tylko zamowione linie, nie wszystko co w miedzyczasie trafilo do koszyka
            self.cart_repo.delete_cart_items([line.id for line in lines])

            self.db.commit()
        except Exception as e:
            logger.error(f"Order creation for user {user_id} rolled back: {e}")
            self.db.rollback()
            raise

        return order

    def get_order(self, order_id: int, user_id: int) -> Dict[str, Any]:
        """
        Use Case: Pobranie zamówienia (Query).
        """
        order = self.repo.get_order(order_id)

        if not order:
            raise OrderNotFound(order_id)

        if order.user_id != user_id:
            raise PermissionError("Access to order denied")

        return self._to_dict(order)

    def list_orders(self, user_id: int) -> List[Dict[str, Any]]:
        return [self._to_dict(o) for o in self.repo.list_orders(user_id)]

    @staticmethod
    def _to_dict(order: OrderModel) -> Dict[str, Any]:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "total_amount": order.total_amount,
            "status": order.status,
            "items": [
                {
                    "id": i.id,
                    "product_id": i.product_id,
                    "quantity": i.quantity,
                    "unit_price": i.unit_price,
                    "price": i.price,
                }
                for i in order.items
            ],
            "created_at": order.created_at,
        }
