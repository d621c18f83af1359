"""
Exception hierarchy for the order platform.

This module defines the base exceptions shared by every library in the
platform. Domain-specific failures (for example order lifecycle errors in
``libs.orders.exceptions``) subclass :class:`OrderPlatformError` so callers
can catch everything the platform raises with a single clause.
"""


class OrderPlatformError(Exception):
    """
    Base exception for all order platform errors.

    Example:
        >>> try:
        ...     manager.create_order("Laptop", 1)
        ... except OrderPlatformError as e:
        ...     logger.error(f"Order platform error: {e}")
    """

    pass


class ConfigurationError(OrderPlatformError):
    """
    Raised when settings are missing or invalid.

    Example:
        >>> try:
        ...     settings = get_settings()
        ... except ConfigurationError as e:
        ...     logger.error(f"Refusing to start: {e}")
    """

    pass
