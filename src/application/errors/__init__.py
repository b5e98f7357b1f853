"""Application layer errors.

Handlers return core ``DomainError`` values; the presentation layer wraps
them in ``ApplicationError`` to pick an HTTP status and problem title.

Exports:
    ApplicationError: Domain error wrapped with an application-level code
    ApplicationErrorCode: Application-level error code enum
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
]
