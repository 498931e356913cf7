"""
Shared utilities module

Logging collaborator used across the client.
"""

from .logger import (
    ContextLogger,
    JSONFormatter,
    LoggerProtocol,
    NullLogger,
    get_logger,
)

__all__ = [
    "ContextLogger",
    "JSONFormatter",
    "LoggerProtocol",
    "NullLogger",
    "get_logger",
]
