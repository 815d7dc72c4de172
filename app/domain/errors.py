# app/domain/errors.py
"""
Bledy domenowe.
Routery tlumacza je na HTTPException (400/404/409), PermissionError na 403.
"""


class NotFoundError(ValueError):
    pass


class ProductNotFound(NotFoundError):
    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class UserNotFound(NotFoundError):
    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class CartItemNotFound(NotFoundError):
    def __init__(self, user_id: int, product_id: int):
        super().__init__(f"Product {product_id} is not in the cart of user {user_id}")
        self.user_id = user_id
        self.product_id = product_id


class OrderNotFound(NotFoundError):
    def __init__(self, order_id: int):
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class OutOfStockError(ValueError):
    def __init__(self, product_id: int, requested: int, available: int):
        super().__init__(
            f"Product {product_id} out of stock: requested {requested}, available {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class EmptyCartError(ValueError):
    def __init__(self, user_id: int):
        super().__init__(f"Cart of user {user_id} is empty")
        self.user_id = user_id


class DuplicateEmailError(ValueError):
    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email


class CartLockedError(RuntimeError):
    """Koszyk jest modyfikowany przez inna operacje."""

    def __init__(self, user_id: int):
        super().__init__(f"Cart of user {user_id} is being modified by another request")
        self.user_id = user_id
