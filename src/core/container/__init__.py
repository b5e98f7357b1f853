"""Container module - Centralized dependency injection.

The container is organized into modules by concern:
- infrastructure: Settings, database, sessions, logging
- handler_factory: Type-hint driven handler construction
- dispatch: Request-scoped dispatcher for FastAPI routes

Usage:
    from src.core.container import get_db_session, get_dispatcher, get_logger
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
)

# Handler wiring
from src.core.container.handler_factory import create_handler

# Dispatcher
from src.core.container.dispatch import get_dispatcher

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    # Handlers
    "create_handler",
    # Dispatcher
    "get_dispatcher",
]
