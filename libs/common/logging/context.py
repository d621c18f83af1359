"""Operation ID generation and context propagation.

Every public call into an order manager runs under an operation ID so that all
log lines emitted while handling that call (including lines logged by injected
collaborators) can be grouped together.

Operation IDs are UUIDv4 strings stored in a context variable, which keeps them
isolated per thread and per asyncio task.

Example:
    >>> from libs.common.logging.context import OperationContext, get_operation_id
    >>> with OperationContext("op-123"):
    ...     get_operation_id()
    'op-123'
    >>> get_operation_id() is None
    True
"""

import contextvars
import uuid
from types import TracebackType

_operation_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation_id", default=None
)


def generate_operation_id() -> str:
    """Generate a new unique operation ID (UUID v4 string)."""
    return str(uuid.uuid4())


def get_operation_id() -> str | None:
    """Get the operation ID of the current context, or None if unset."""
    return _operation_id_var.get()


def set_operation_id(operation_id: str) -> None:
    """Set the operation ID for the current context.

    Args:
        operation_id: The operation ID to set

    Raises:
        ValueError: If operation_id is empty or None
    """
    if not operation_id:
        raise ValueError("Operation ID cannot be empty")
    _operation_id_var.set(operation_id)


def clear_operation_id() -> None:
    """Clear the operation ID from the current context."""
    _operation_id_var.set(None)


class OperationContext:
    """Context manager for a scoped operation ID.

    Nested contexts keep the outermost ID: a call made while an operation is
    already running (for example a driver wrapping several manager calls in one
    operation) is logged under the caller's ID instead of a fresh one.

    Args:
        operation_id: The operation ID to set. If None, reuses the current ID
            when one is set, otherwise generates a new one.

    Example:
        >>> with OperationContext() as op_id:
        ...     op_id == get_operation_id()
        True
    """

    def __init__(self, operation_id: str | None = None) -> None:
        self.operation_id = operation_id or get_operation_id() or generate_operation_id()
        self.previous_operation_id: str | None = None

    def __enter__(self) -> str:
        self.previous_operation_id = get_operation_id()
        set_operation_id(self.operation_id)
        return self.operation_id

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Restore the operation ID that was active before entering."""
        if self.previous_operation_id is not None:
            set_operation_id(self.previous_operation_id)
        else:
            clear_operation_id()
