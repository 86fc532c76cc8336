"""LoggerProtocol: the structured logging port used by application handlers.

Events are snake_case names plus keyword fields, never formatted strings:

    logger.info("sales_order_item_added", order_id=order.id, quantity=2)

Levels as used in this codebase:
    - DEBUG: diagnostics, off by default
    - INFO: accepted operations (order created, item added, transition applied)
    - WARNING: operations refused by a business rule
    - ERROR / CRITICAL: unexpected failures, optionally with the exception

``bind``/``with_context`` derive a logger that stamps fixed fields (such as
``order_id``) on every event; the original is left as it was.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Port implemented by ConsoleAdapter (and by MagicMock in tests)."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Record a failure.

        Args:
            message: snake_case event name.
            error: Exception to describe; adapters add its type and text.
            **context: Event fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a derived logger that adds ``context`` to every event."""
        ...

    def with_context(self, **context: Any) -> LoggerProtocol: ...
