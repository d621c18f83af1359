"""
In-memory order store keyed by order id.

A plain dict gives O(1) lookup by id and, since dicts keep insertion order,
iteration in creation order without a separate index. Replacing a value keeps
its position, so an updated order stays where it was created.
"""

from collections.abc import Iterator

from libs.orders.exceptions import OrderStoreError
from libs.orders.models import Order


class OrderStore:
    """
    Id -> Order mapping owned by OrderManager.

    The store itself does no locking; OrderManager serializes access.

    Example:
        >>> store = OrderStore()
        >>> store.add(Order(id=1, product="Desk", quantity=1, is_paid=True))
        >>> 1 in store, len(store)
        (True, 1)
    """

    def __init__(self) -> None:
        self._orders: dict[int, Order] = {}

    def __len__(self) -> int:
        return len(self._orders)

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._orders

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders.values())

    def get(self, order_id: int) -> Order | None:
        """Return the order with ``order_id``, or None."""
        return self._orders.get(order_id)

    def add(self, order: Order) -> None:
        """
        Insert a new order at the end of the creation order.

        Raises:
            OrderStoreError: If an order with the same id is already stored
        """
        if order.id in self._orders:
            raise OrderStoreError(f"Order {order.id} already stored")
        self._orders[order.id] = order

    def replace(self, order: Order) -> Order:
        """
        Swap the stored value for ``order.id`` keeping its position.

        Returns:
            The previously stored order

        Raises:
            OrderStoreError: If no order with that id is stored
        """
        previous = self._orders.get(order.id)
        if previous is None:
            raise OrderStoreError(f"Order {order.id} not stored")
        self._orders[order.id] = order
        return previous

    def pop(self, order_id: int) -> Order | None:
        """Remove and return the order with ``order_id``, or None if absent."""
        return self._orders.pop(order_id, None)

    def values(self) -> list[Order]:
        """Return a new list of stored orders in creation order."""
        return list(self._orders.values())
