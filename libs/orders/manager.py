"""
Order lifecycle management with stock reservation and compensation.

OrderManager places orders by reserving stock before payment and releasing the
reservation again when payment does not go through. Without the release, every
declined card would permanently shrink available inventory.

Lifecycle of one create_order() call:
    1. check_stock(product, qty)   -> False: OutOfStock (nothing reserved)
    2. reduce_stock(product, qty)     reservation is provisional
    3. allocate id, build Order(is_paid=False)
    4. process_payment(order)
         True  -> store paid order, send_confirmation(order), return it
         False -> increase_stock(product, qty), raise PaymentFailed
         raise -> increase_stock(product, qty), re-raise

Every public operation runs under one re-entrant lock, so two callers can
never both pass the stock check for the last unit before either reserves it.

See Also:
    - libs/orders/protocols.py for the collaborator contracts
    - libs/orders/adapters.py for in-memory collaborators
"""

import logging
import threading

from config.settings import Settings, get_settings
from libs.common.logging.config import configure_logging
from libs.common.logging.context import OperationContext
from libs.orders.exceptions import InvalidArgument, OutOfStock, PaymentFailed
from libs.orders.id_generator import OrderIdGenerator
from libs.orders.models import Order, OrderState
from libs.orders.order_store import OrderStore
from libs.orders.protocols import Notifier, PaymentProcessor, StockChecker

logger = logging.getLogger(__name__)


class OrderManager:
    """
    Owns the live orders and coordinates inventory, payment and notification.

    Attributes:
        stock_checker: Inventory collaborator (check/reserve/release)
        payment_processor: Payment collaborator
        notifier: Confirmation collaborator

    Example:
        >>> manager = OrderManager(inventory, payments, notifier)
        >>> order = manager.create_order("Laptop", 1)
        >>> order.is_paid
        True
        >>> manager.update_order(order.id, 3)
        True
        >>> manager.remove_order(order.id)
        True
        >>> manager.get_orders()
        []

    Notes:
        - Stored orders are always paid and have quantity > 0
        - Ids are never reused, even after removal or a declined payment
        - update_order() does not adjust the reservation or re-bill
    """

    def __init__(
        self,
        stock_checker: StockChecker,
        payment_processor: PaymentProcessor,
        notifier: Notifier,
        first_order_id: int = 1,
    ) -> None:
        """
        Initialize the order manager.

        Args:
            stock_checker: Inventory collaborator
            payment_processor: Payment collaborator
            notifier: Confirmation collaborator
            first_order_id: First id handed out (default: 1)
        """
        self.stock_checker = stock_checker
        self.payment_processor = payment_processor
        self.notifier = notifier
        self._ids = OrderIdGenerator(start=first_order_id)
        self._orders = OrderStore()
        self._lock = threading.RLock()

    def create_order(self, product: str, quantity: int) -> Order:
        """
        Reserve stock, charge, store and confirm a new order.

        Args:
            product: Product identifier (non-empty)
            quantity: Units to order (positive)

        Returns:
            The stored, paid order

        Raises:
            InvalidArgument: If quantity is not a positive int or product is
                not a non-empty str (no collaborator is called)
            OutOfStock: If the stock checker reports insufficient stock
            PaymentFailed: If payment is declined (reserved stock already
                released)
        """
        # Everything Order would reject must fail here, before stock is reserved
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidArgument(f"Quantity must be an int, got {quantity!r}")
        if quantity <= 0:
            raise InvalidArgument(f"Quantity must be positive, got {quantity}")
        if not isinstance(product, str) or not product:
            raise InvalidArgument(f"Product must be a non-empty string, got {product!r}")

        with self._lock, OperationContext():
            if not self.stock_checker.check_stock(product, quantity):
                logger.info(
                    f"Order blocked: insufficient stock for {product} x{quantity}",
                    extra={"context": {"product": product, "quantity": quantity}},
                )
                raise OutOfStock(product, quantity)

            self.stock_checker.reduce_stock(product, quantity)

            order = Order(id=self._ids.next_id(), product=product, quantity=quantity)
            logger.debug(
                f"Stock reserved for order {order.id}: {product} x{quantity}",
                extra={"context": self._context(order, OrderState.PENDING)},
            )

            try:
                paid = self.payment_processor.process_payment(order)
            except Exception:
                self._release_reservation(order)
                logger.exception(
                    f"Payment error for order {order.id}, reservation released",
                    extra={"context": self._context(order, OrderState.REJECTED)},
                )
                raise

            if not paid:
                self._release_reservation(order)
                logger.warning(
                    f"Payment declined for order {order.id}, reservation released",
                    extra={"context": self._context(order, OrderState.REJECTED)},
                )
                raise PaymentFailed(order.id, product, quantity)

            order = order.model_copy(update={"is_paid": True})
            self._orders.add(order)
            logger.info(
                f"Order created: {order.id} {product} x{quantity}",
                extra={"context": self._context(order, OrderState.ACTIVE)},
            )

            self.notifier.send_confirmation(order)
            return order

    def update_order(self, order_id: int, new_quantity: int) -> bool:
        """
        Change the quantity of a live order.

        The stock reservation and the payment are left as they were: growing
        an order neither reserves more stock nor charges more.

        Orders are immutable, so the stored order is replaced by an updated
        copy. An Order obtained earlier (for example the one create_order()
        returned) keeps its old quantity; re-read it with get_order().

        Args:
            order_id: Id of the order to update
            new_quantity: Replacement quantity

        Returns:
            True if updated; False if the id is unknown or new_quantity is not
            a positive int
        """
        with self._lock, OperationContext():
            order = self._orders.get(order_id)
            if order is None:
                logger.debug(f"Update ignored: order {order_id} not found")
                return False
            # model_copy() skips validation, so the type is checked here
            if isinstance(new_quantity, bool) or not isinstance(new_quantity, int):
                logger.debug(
                    f"Update ignored: non-integer quantity {new_quantity!r} for order {order_id}"
                )
                return False
            if new_quantity <= 0:
                logger.debug(
                    f"Update ignored: non-positive quantity {new_quantity} for order {order_id}"
                )
                return False

            self._orders.replace(order.model_copy(update={"quantity": new_quantity}))

            context = {
                "order_id": order_id,
                "product": order.product,
                "previous_quantity": order.quantity,
                "quantity": new_quantity,
            }
            if new_quantity > order.quantity:
                # TODO: reserve and bill the extra units once inventory supports
                # partial reservations per order.
                logger.warning(
                    f"Order {order_id} grew {order.quantity} -> {new_quantity} "
                    "without additional stock reservation or payment",
                    extra={"context": context},
                )
            else:
                logger.info(
                    f"Order updated: {order_id} quantity {order.quantity} -> {new_quantity}",
                    extra={"context": context},
                )
            return True

    def remove_order(self, order_id: int) -> bool:
        """
        Remove a live order and return its stock to inventory.

        Args:
            order_id: Id of the order to remove

        Returns:
            True if removed; False if no such order (including an order that
            was already removed)
        """
        with self._lock, OperationContext():
            order = self._orders.get(order_id)
            if order is None:
                logger.debug(f"Remove ignored: order {order_id} not found")
                return False

            self.stock_checker.increase_stock(order.product, order.quantity)
            self._orders.pop(order_id)
            logger.info(
                f"Order removed: {order_id}, released {order.product} x{order.quantity}",
                extra={"context": self._context(order, OrderState.REMOVED)},
            )
            return True

    def get_orders(self) -> list[Order]:
        """Return live orders in creation order as a new list."""
        with self._lock:
            return self._orders.values()

    def get_order(self, order_id: int) -> Order | None:
        """Return the live order with ``order_id``, or None."""
        with self._lock:
            return self._orders.get(order_id)

    def _release_reservation(self, order: Order) -> None:
        """Compensate a failed payment by returning the reserved stock."""
        self.stock_checker.increase_stock(order.product, order.quantity)

    @staticmethod
    def _context(order: Order, state: OrderState) -> dict[str, object]:
        return {
            "order_id": order.id,
            "product": order.product,
            "quantity": order.quantity,
            "state": state.value,
        }


def build_order_manager(
    stock_checker: StockChecker,
    payment_processor: PaymentProcessor,
    notifier: Notifier,
    settings: Settings | None = None,
    setup_logging: bool = False,
) -> OrderManager:
    """
    Wire an OrderManager from settings.

    Args:
        stock_checker: Inventory collaborator
        payment_processor: Payment collaborator
        notifier: Confirmation collaborator
        settings: Settings to use (default: cached get_settings())
        setup_logging: Also configure JSON logging on the root logger from
            settings.component_name and settings.log_level (default: False,
            leave logging to the embedding process)

    Returns:
        OrderManager whose first id is settings.first_order_id

    Raises:
        ConfigurationError: If settings are loaded from the environment and
            are invalid
    """
    settings = settings or get_settings()
    if setup_logging:
        configure_logging(settings.component_name, log_level=settings.log_level)
    return OrderManager(
        stock_checker,
        payment_processor,
        notifier,
        first_order_id=settings.first_order_id,
    )
