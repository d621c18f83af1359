"""
Order data model and lifecycle states.

Orders are frozen pydantic models: an order handed to a caller is a value, and
the only way to change a stored order is through OrderManager, which replaces
the stored value with an updated copy.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OrderState(str, Enum):
    """
    Lifecycle state of an order inside OrderManager.

    PENDING -> ACTIVE -> REMOVED, or PENDING -> REJECTED. Only ACTIVE orders
    are stored and visible to callers; the state is used for logging.
    """

    PENDING = "pending"
    ACTIVE = "active"
    REJECTED = "rejected"
    REMOVED = "removed"


class Order(BaseModel):
    """
    A placed order for a quantity of one product.

    Examples:
        >>> order = Order(id=1, product="Laptop", quantity=1)
        >>> order.is_paid
        False
        >>> order.model_copy(update={"is_paid": True}).is_paid
        True
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique identifier assigned by OrderManager")
    product: str = Field(..., min_length=1, description="Product identifier (e.g., 'Laptop')")
    quantity: int = Field(..., gt=0, description="Ordered units (must be positive)")
    is_paid: bool = Field(default=False, description="True once payment succeeded")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="UTC time the order was constructed",
    )
