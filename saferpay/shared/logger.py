"""
Shared Logger

Logging collaborator for the Saferpay client.

The client only depends on ``log(level, message, context)``. ContextLogger
forwards to stdlib logging with the context attached as ``extra_data`` so the
JSONFormatter can render it. SaferpayClient.from_settings logs through a
ContextLogger; NullLogger is the default of the plain constructor.
"""

import json
import logging
from datetime import UTC, datetime
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerProtocol(Protocol):
    """Structured diagnostic sink used by SaferpayClient."""

    def log(self, level: int, message: str, context: dict[str, Any] | None = None) -> None: ...


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data["extra"] = extra_data

        return json.dumps(log_data, default=str)


class ContextLogger:
    """Logger with context support."""

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        """
        Initialize context logger.

        Args:
            name: Logger name
            context: Default context to include in all logs
        """
        self._logger = logging.getLogger(name)
        self._context = context or {}

    @property
    def name(self) -> str:
        return self._logger.name

    def with_context(self, **kwargs) -> "ContextLogger":
        """Create new logger with additional context."""
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def log(self, level: int, message: str, context: dict[str, Any] | None = None) -> None:
        """Log with default context merged with the call context."""
        extra = {**self._context, **(context or {})}
        self._logger.log(level, message, extra={"extra_data": extra})

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs) -> None:
        """Log critical message."""
        self.log(logging.CRITICAL, message, kwargs)


class NullLogger(ContextLogger):
    """Discards every record. Default logger of SaferpayClient."""

    def __init__(self) -> None:
        super().__init__("saferpay.null")

    def log(self, level: int, message: str, context: dict[str, Any] | None = None) -> None:
        return None


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    """
    Get a context-aware logger.

    Args:
        name: Logger name (typically __name__)
        context: Default context

    Returns:
        ContextLogger instance
    """
    return ContextLogger(name, context)
