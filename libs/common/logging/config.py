"""Centralized logging configuration.

Drivers embedding an order manager call configure_logging() once at startup so
every library logs JSON lines with the same schema and the current operation
ID.

Example:
    >>> from libs.common.logging.config import configure_logging
    >>> logger = configure_logging(component_name="order_manager", log_level="INFO")
    >>> logger.info("Component started", extra={"context": {"first_order_id": 1}})
"""

import logging
import sys

from libs.common.logging.context import get_operation_id
from libs.common.logging.formatter import JSONFormatter


class OperationIdFilter(logging.Filter):
    """Logging filter that stamps the current operation ID on every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.operation_id = get_operation_id()
        return True


def configure_logging(
    component_name: str,
    log_level: str = "INFO",
    include_context: bool = True,
) -> logging.Logger:
    """Configure structured JSON logging on the root logger.

    Sets up:
    - JSON formatted output to stdout
    - Operation ID injection on all records
    - The requested minimum level

    Args:
        component_name: Name reported in the "component" field
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        include_context: Whether to include context dict in output

    Returns:
        Configured root logger instance

    Raises:
        ValueError: If log_level is invalid
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(
        JSONFormatter(
            component_name=component_name,
            include_context=include_context,
        )
    )
    handler.addFilter(OperationIdFilter())

    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger by name (typically __name__); None returns the root logger."""
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context_fields: object,
) -> None:
    """Log a message with additional context fields.

    Context fields appear in the "context" dict of the JSON output.

    Example:
        >>> log_with_context(logger, "INFO", "Order removed", order_id=7, product="Desk")
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra={"context": context_fields})
