"""Protocol definitions for the collaborators OrderManager depends on.

OrderManager only talks to these capabilities, which are injected at
construction. Production bindings (inventory database, payment gateway,
e-mail or SMS channel) and test doubles both satisfy them structurally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from libs.orders.models import Order


@runtime_checkable
class StockChecker(Protocol):
    """Protocol for inventory access.

    All three calls are synchronous and side-effecting on inventory state
    owned outside the order manager.
    """

    def check_stock(self, product: str, quantity: int) -> bool:
        """Return True if ``quantity`` units of ``product`` are available."""
        ...

    def reduce_stock(self, product: str, quantity: int) -> None:
        """Reserve ``quantity`` units of ``product``."""
        ...

    def increase_stock(self, product: str, quantity: int) -> None:
        """Return ``quantity`` units of ``product`` to available stock."""
        ...


@runtime_checkable
class PaymentProcessor(Protocol):
    """Protocol for charging an order."""

    def process_payment(self, order: Order) -> bool:
        """Charge for ``order``; return True on success."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """Protocol for confirming an order to the customer (fire-and-forget)."""

    def send_confirmation(self, order: Order) -> None:
        """Send a confirmation for ``order``."""
        ...


__all__ = [
    "Notifier",
    "PaymentProcessor",
    "StockChecker",
]
