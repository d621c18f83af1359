"""
Order management library.

This library provides:
- OrderManager: order lifecycle with stock reservation and compensation
- Collaborator protocols (StockChecker, PaymentProcessor, Notifier)
- In-memory collaborators for local wiring and tests

Example:
    >>> from libs.orders import (
    ...     InMemoryInventory, LoggingNotifier, OrderManager, RecordingPaymentProcessor
    ... )
    >>> manager = OrderManager(
    ...     InMemoryInventory({"Laptop": 3}),
    ...     RecordingPaymentProcessor(),
    ...     LoggingNotifier(),
    ... )
    >>> order = manager.create_order("Laptop", 1)
    >>> (order.product, order.quantity, order.is_paid)
    ('Laptop', 1, True)
"""

from libs.orders.adapters import InMemoryInventory, LoggingNotifier, RecordingPaymentProcessor
from libs.orders.exceptions import (
    InsufficientStock,
    InvalidArgument,
    OrderError,
    OrderStoreError,
    OutOfStock,
    PaymentFailed,
)
from libs.orders.id_generator import OrderIdGenerator
from libs.orders.manager import OrderManager, build_order_manager
from libs.orders.models import Order, OrderState
from libs.orders.order_store import OrderStore
from libs.orders.protocols import Notifier, PaymentProcessor, StockChecker

__all__ = [
    # Manager
    "OrderManager",
    "build_order_manager",
    # Models
    "Order",
    "OrderState",
    "OrderStore",
    "OrderIdGenerator",
    # Collaborator protocols
    "StockChecker",
    "PaymentProcessor",
    "Notifier",
    # In-memory collaborators
    "InMemoryInventory",
    "RecordingPaymentProcessor",
    "LoggingNotifier",
    # Exceptions
    "OrderError",
    "InvalidArgument",
    "OutOfStock",
    "PaymentFailed",
    "OrderStoreError",
    "InsufficientStock",
]
