"""Common utilities and exceptions."""

from libs.common.exceptions import ConfigurationError, OrderPlatformError

__all__ = [
    "OrderPlatformError",
    "ConfigurationError",
]
