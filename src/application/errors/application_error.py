"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (CQRS command/query execution failures).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    These codes represent failures at the application layer (command/query handlers),
    typically wrapping domain errors with additional context.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.VALIDATION_FAILED,
        ...     message="One or more validation errors occurred",
        ... )
    """

    VALIDATION_FAILED = "validation_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_ERROR = "internal_error"


# Most specific first: RequestValidationError subclasses ValidationError.
_DOMAIN_ERROR_CODES: tuple[tuple[type[DomainError], ApplicationErrorCode], ...] = (
    (ValidationError, ApplicationErrorCode.VALIDATION_FAILED),
    (NotFoundError, ApplicationErrorCode.NOT_FOUND),
    (ConflictError, ApplicationErrorCode.CONFLICT),
    (AuthorizationError, ApplicationErrorCode.FORBIDDEN),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Wraps domain errors with application-specific context. Routers convert
    every handler ``Failure`` into one of these before building the HTTP
    problem response.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError.from_domain_error(
        ...     ConflictError(
        ...         code=ErrorCode.SQUAD_NUMBER_TAKEN,
        ...         message="Squad number 7 is already taken",
        ...         resource_type="TeamMembership",
        ...     )
        ... )
        >>> error.code
        <ApplicationErrorCode.CONFLICT: 'conflict'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Field name to messages, empty unless the domain error is a validation one."""
        if isinstance(self.domain_error, ValidationError):
            return self.domain_error.field_errors
        return {}

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Wrap a handler's domain error, picking the code from its type.

        Unknown DomainError subclasses map to INTERNAL_ERROR.
        """
        code = next(
            (
                app_code
                for error_type, app_code in _DOMAIN_ERROR_CODES
                if isinstance(error, error_type)
            ),
            ApplicationErrorCode.INTERNAL_ERROR,
        )
        return cls(
            code=code,
            message=error.message,
            domain_error=error,
            details=error.details,
        )
