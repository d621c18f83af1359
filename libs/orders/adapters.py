"""
In-memory collaborators for OrderManager.

These satisfy the protocols in libs/orders/protocols.py without any external
system and are meant for local wiring, demos and integration tests. Stock
levels live only as long as the process.

Example:
    >>> from libs.orders.manager import OrderManager
    >>> inventory = InMemoryInventory({"Laptop": 5})
    >>> payments = RecordingPaymentProcessor()
    >>> notifier = LoggingNotifier()
    >>> manager = OrderManager(inventory, payments, notifier)
    >>> order = manager.create_order("Laptop", 2)
    >>> inventory.available("Laptop")
    3
"""

import threading
from collections.abc import Mapping

from libs.common.logging.config import get_logger, log_with_context
from libs.orders.exceptions import InsufficientStock
from libs.orders.models import Order

logger = get_logger(__name__)


def _require_non_negative(quantity: int) -> None:
    if quantity < 0:
        raise ValueError(f"Quantity must be non-negative, got {quantity}")


class InMemoryInventory:
    """
    Thread-safe per-product stock levels.

    Unknown products have zero stock. reduce_stock() refuses to go below zero
    so a reservation made without a preceding check_stock() cannot oversell.
    """

    def __init__(self, initial_stock: Mapping[str, int] | None = None) -> None:
        self._stock: dict[str, int] = {}
        self._lock = threading.Lock()
        for product, quantity in (initial_stock or {}).items():
            _require_non_negative(quantity)
            self._stock[product] = quantity

    def available(self, product: str) -> int:
        """Return units of ``product`` currently available."""
        with self._lock:
            return self._stock.get(product, 0)

    def check_stock(self, product: str, quantity: int) -> bool:
        with self._lock:
            return self._stock.get(product, 0) >= quantity

    def reduce_stock(self, product: str, quantity: int) -> None:
        """
        Take ``quantity`` units of ``product`` out of available stock.

        Raises:
            InsufficientStock: If fewer than ``quantity`` units are available
            ValueError: If quantity is negative
        """
        _require_non_negative(quantity)
        with self._lock:
            current = self._stock.get(product, 0)
            if current < quantity:
                raise InsufficientStock(
                    f"Cannot reduce {product!r} by {quantity}: only {current} available"
                )
            self._stock[product] = current - quantity
        logger.debug(f"Stock reduced: {product} {current} -> {current - quantity}")

    def increase_stock(self, product: str, quantity: int) -> None:
        """
        Return ``quantity`` units of ``product`` to available stock.

        Raises:
            ValueError: If quantity is negative
        """
        _require_non_negative(quantity)
        with self._lock:
            current = self._stock.get(product, 0)
            self._stock[product] = current + quantity
        logger.debug(f"Stock increased: {product} {current} -> {current + quantity}")


class RecordingPaymentProcessor:
    """
    Payment processor that approves orders up to a per-order quantity limit.

    Attributes:
        max_quantity: Largest quantity approved per order (None: no limit)
        charged_order_ids: Ids of approved orders, in charge order
        declined_order_ids: Ids of declined orders, in attempt order
    """

    def __init__(self, max_quantity: int | None = None) -> None:
        self.max_quantity = max_quantity
        self.charged_order_ids: list[int] = []
        self.declined_order_ids: list[int] = []

    def process_payment(self, order: Order) -> bool:
        if self.max_quantity is not None and order.quantity > self.max_quantity:
            self.declined_order_ids.append(order.id)
            logger.info(
                f"Payment declined for order {order.id}: "
                f"quantity {order.quantity} > limit {self.max_quantity}"
            )
            return False
        self.charged_order_ids.append(order.id)
        return True


class LoggingNotifier:
    """Notifier that logs a structured confirmation and keeps what it sent."""

    def __init__(self) -> None:
        self.sent: list[Order] = []

    def send_confirmation(self, order: Order) -> None:
        self.sent.append(order)
        log_with_context(
            logger,
            "INFO",
            f"Confirmation sent for order {order.id}",
            order_id=order.id,
            product=order.product,
            quantity=order.quantity,
        )
