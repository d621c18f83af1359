"""Structured logging library.

Provides JSON logging with operation ID correlation for every component of the
order platform.

Usage:
    # At startup of whatever process embeds the order manager
    from libs.common.logging import configure_logging
    configure_logging(component_name="order_manager", log_level="INFO")

    # Inside libraries
    from libs.common.logging import get_logger, log_with_context
    logger = get_logger(__name__)
    log_with_context(logger, "INFO", "Order created", order_id=1, product="Laptop")
"""

from libs.common.logging.config import (
    OperationIdFilter,
    configure_logging,
    get_logger,
    log_with_context,
)
from libs.common.logging.context import (
    OperationContext,
    clear_operation_id,
    generate_operation_id,
    get_operation_id,
    set_operation_id,
)
from libs.common.logging.formatter import JSONFormatter

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "log_with_context",
    "OperationIdFilter",
    # Operation ID management
    "generate_operation_id",
    "get_operation_id",
    "set_operation_id",
    "clear_operation_id",
    "OperationContext",
    # Formatter (for advanced usage)
    "JSONFormatter",
]
