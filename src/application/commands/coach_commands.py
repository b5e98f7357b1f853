"""Coach commands (CQRS write operations)."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.core.validation import Email, MaxLength, OneOf, Required
from src.domain.enums import CoachRole


@dataclass(frozen=True, kw_only=True)
class UpdateCoach:
    """Replace a coach's profile and team assignments.

    Attributes:
        coach_id: Coach to update.
        first_name: Given name.
        last_name: Family name.
        role: Default role label (headcoach, assistantcoach, ...).
        photo: Photo URL.
        email: Contact email.
        phone: Contact phone.
        date_of_birth: Date of birth.
        association_id: Governing body registration number.
        biography: Free text.
        specializations: Tags.
        team_ids: Replacement team assignments; every team must belong to
            the coach's club.
    """

    coach_id: UUID
    first_name: str
    last_name: str
    role: str
    photo: str | None = None
    email: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None
    association_id: str | None = None
    biography: str | None = None
    specializations: list[str] = field(default_factory=list)
    team_ids: list[UUID] = field(default_factory=list)
    is_archived: bool = False


UPDATE_COACH_RULES = (
    Required("first_name"),
    MaxLength("first_name", 100),
    Required("last_name"),
    MaxLength("last_name", 100),
    MaxLength("phone", 20),
    Email("email"),
    MaxLength("association_id", 50),
    Required("role"),
    OneOf("role", CoachRole.labels()),
    MaxLength("biography", 2000),
    MaxLength("photo", 2000),
)
