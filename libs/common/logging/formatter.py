"""JSON log formatter for structured logging.

Example log output:
    {
        "timestamp": "2026-10-17T10:30:00.000Z",
        "level": "INFO",
        "component": "order_manager",
        "operation_id": "abc123-def456",
        "message": "Order created",
        "context": {
            "order_id": 1,
            "product": "Laptop",
            "quantity": 1
        }
    }
"""

import json
import logging
import traceback
from datetime import UTC, datetime
from types import TracebackType
from typing import Any

# LogRecord attributes that are never copied into "context"
_RESERVED_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "operation_id",
        "context",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class JSONFormatter(logging.Formatter):
    """Formatter that renders log records as single-line JSON.

    Attributes:
        component_name: Name of the component emitting logs
        include_context: Whether to include extra context fields

    Example:
        >>> formatter = JSONFormatter(component_name="order_manager")
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
        >>> logger = logging.getLogger(__name__)
        >>> logger.addHandler(handler)
        >>> logger.info("Order created", extra={"context": {"order_id": 1}})
    """

    def __init__(
        self, component_name: str, include_context: bool = True, *args: Any, **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.component_name = component_name
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format

        Returns:
            JSON string representation of the log record
        """
        log_entry: dict[str, Any] = {
            "timestamp": self._format_timestamp(record.created),
            "level": record.levelname,
            "component": self.component_name,
            "operation_id": getattr(record, "operation_id", None),
            "message": record.getMessage(),
        }

        if self.include_context:
            context = self._extract_context(record)
            if context:
                log_entry["context"] = context

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self._format_exception(record.exc_info),
            }

        log_entry["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_entry, default=str)

    def _format_timestamp(self, created: float) -> str:
        """Format a Unix timestamp as ISO 8601 UTC with millisecond precision."""
        dt = datetime.fromtimestamp(created, tz=UTC)
        return dt.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    def _extract_context(self, record: logging.LogRecord) -> dict[str, Any] | None:
        """Extract the context dict from a log record.

        Prefers an explicit ``context`` dict passed via ``extra``; otherwise
        collects any non-standard attributes set on the record.
        """
        context = getattr(record, "context", None)
        if context and isinstance(context, dict):
            return dict(context)

        extra = {
            key: value for key, value in record.__dict__.items() if key not in _RESERVED_FIELDS
        }
        return extra if extra else None

    def _format_exception(
        self,
        exc_info: tuple[type[BaseException] | None, BaseException | None, TracebackType | None],
    ) -> str:
        return "".join(traceback.format_exception(*exc_info))
