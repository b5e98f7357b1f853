"""LoggerProtocol definition for structured logging.

Handlers and the dispatcher log through this protocol so the backend
(structlog console/JSON today) can change without touching them.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("player_added_to_team", team_id=str(team_id), squad_number=7)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: an event name plus key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Exception whose type and message are added to the context.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that includes ``context`` in every event."""
        ...
