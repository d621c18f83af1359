"""
Order lifecycle exceptions.

create_order() reports business failures by raising these exceptions, while
update_order() and remove_order() return False for expected negative outcomes
(unknown id, non-positive quantity) and never raise for them.

Example:
    >>> from libs.orders.exceptions import OutOfStock, PaymentFailed
    >>> try:
    ...     manager.create_order("Webcam", 2)
    ... except OutOfStock as e:
    ...     logger.info(f"Not enough {e.product}")
    ... except PaymentFailed as e:
    ...     logger.warning(f"Order {e.order_id} rejected, stock released")
"""

from libs.common.exceptions import OrderPlatformError


class OrderError(OrderPlatformError):
    """Base exception for order lifecycle failures."""

    pass


class InvalidArgument(OrderError, ValueError):
    """
    Raised when create_order() receives a non-positive quantity or an empty
    product, before any collaborator is called.
    """

    pass


class OutOfStock(OrderError):
    """
    Raised when the stock checker reports insufficient stock.

    Nothing is reserved and no order id is consumed.
    """

    def __init__(self, product: str, quantity: int) -> None:
        super().__init__(f"Insufficient stock for {product!r}: requested {quantity}")
        self.product = product
        self.quantity = quantity


class PaymentFailed(OrderError):
    """
    Raised when payment is declined.

    Always raised after the reserved stock was released, so inventory is back
    to its state before the create_order() call.
    """

    def __init__(self, order_id: int, product: str, quantity: int) -> None:
        super().__init__(
            f"Payment declined for order {order_id} ({quantity} x {product!r}); stock released"
        )
        self.order_id = order_id
        self.product = product
        self.quantity = quantity


class OrderStoreError(OrderError):
    """Raised on store misuse: adding a duplicate id or replacing a missing one."""

    pass


class InsufficientStock(OrderError):
    """Raised by the in-memory inventory when a reduction would go below zero."""

    pass
