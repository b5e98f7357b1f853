"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from src.core.errors import DomainError, ValidationError, NotFoundError
"""

from src.core.errors.common_errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RequestValidationError,
    ValidationError,
    not_found,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "RequestValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthorizationError",
    "not_found",
]
