"""
Monotonic order id allocation.

Ids are plain integers handed out in increasing order for the lifetime of the
generator and never reused. OrderManager allocates one id per order object it
constructs, which happens after the stock check passes and before payment is
attempted; an order rejected by payment therefore still consumes its id.
"""


class OrderIdGenerator:
    """
    Process-lifetime counter for order ids.

    Not thread-safe on its own: OrderManager only calls it while holding its
    operation lock.

    Example:
        >>> ids = OrderIdGenerator(start=100)
        >>> ids.next_id(), ids.next_id()
        (100, 101)
        >>> ids.peek()
        102
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError(f"start must be >= 1, got {start}")
        self._next = start

    def next_id(self) -> int:
        """Allocate and return the next id."""
        order_id = self._next
        self._next += 1
        return order_id

    def peek(self) -> int:
        """Return the id the next call to next_id() will hand out."""
        return self._next
