"""Common error classes used across all domains and layers.

These are generic errors that don't belong to any specific aggregate.
Handlers return them inside ``Failure``; the presentation layer maps each
type to an HTTP status.

Error Types:
- ValidationError: A single field-level or business validation failure
- RequestValidationError: Declarative rule failures collected per field
- NotFoundError: Referenced entity absent
- ConflictError: Uniqueness or state conflicts (duplicate squad number)
- AuthorizationError: Caller lacks permission (Forbidden)

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.TEAM_NOT_FOUND,
        message=f"Team with ID '{team_id}' was not found",
        resource_type="Team",
        resource_id=str(team_id),
    ))
"""

from dataclasses import dataclass
from dataclasses import field as dataclass_field

from src.core.enums import ErrorCode
from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Wire name of the field that failed validation.
        details: Additional context.
    """

    field: str | None = None

    @property
    def field_errors(self) -> dict[str, list[str]]:
        """Per-field message map (single entry for a single-field failure)."""
        if self.field is None:
            return {}
        return {self.field: [self.message]}


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestValidationError(ValidationError):
    """Collected declarative rule violations.

    Attributes:
        errors: Mapping of wire field name to the list of messages for it.
    """

    errors: dict[str, list[str]] = dataclass_field(default_factory=dict)

    @property
    def field_errors(self) -> dict[str, list[str]]:
        return self.errors


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Team, Player, etc.).
        resource_id: Key of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (squad_number, coach_id, etc.).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        required_permission: Permission that was required.
        details: Additional context.
    """

    required_permission: str | None = None


def not_found(resource_type: str, resource_id: object, code: ErrorCode) -> NotFoundError:
    """Build the standard not-found error for an entity type and key."""
    return NotFoundError(
        code=code,
        message=f"{resource_type} with ID '{resource_id}' was not found",
        resource_type=resource_type,
        resource_id=str(resource_id),
    )
