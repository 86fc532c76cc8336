"""structlog-backed LoggerProtocol adapter writing to stdout.

Every event carries an ISO-8601 UTC timestamp and its level. The container
asks for JSON lines outside development and for the colored console renderer
in development.

ConsoleAdapter satisfies LoggerProtocol structurally; it does not subclass it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _configure(*, use_json: bool, log_level: str) -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    # Unknown level names fall back to INFO.
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def _with_error(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json: Emit one JSON object per line instead of colored text.
        log_level: Lowest level that is emitted (DEBUG, INFO, WARNING, ...).
    """

    def __init__(self, *, use_json: bool = False, log_level: str = "INFO") -> None:
        _configure(use_json=use_json, log_level=log_level)
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Emit an error event.

        Args:
            message: snake_case event name.
            error: Exception whose type and text are added as
                ``error_type`` / ``error_message``.
            **context: Event fields.
        """
        self._logger.error(message, **_with_error(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Emit a critical event (same extras as ``error``)."""
        self._logger.critical(message, **_with_error(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Derive an adapter whose events always include ``context``.

        structlog is not reconfigured; the new adapter wraps the bound logger.
        """
        derived = ConsoleAdapter.__new__(ConsoleAdapter)
        derived._logger = self._logger.bind(**context)
        return derived

    def with_context(self, **context: Any) -> ConsoleAdapter:
        return self.bind(**context)
