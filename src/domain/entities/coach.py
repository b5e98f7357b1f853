"""Coach domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from src.domain.enums.coach_role import CoachRole


@dataclass(frozen=True, kw_only=True)
class CoachTeam:
    """Team a coach is assigned to, with the role held there."""

    team_id: UUID
    name: str
    role: CoachRole


@dataclass
class Coach:
    """Club coach.

    A coach may be linked to a user account; that link identifies the caller
    when evaluations are created, changed or deleted.

    Attributes:
        id: Unique coach identifier.
        club_id: Owning club; a coach only coaches this club's teams.
        first_name: Given name.
        last_name: Family name.
        role: Default role for new team assignments.
        user_id: Linked user account, optional.
        photo: Photo URL or data URI.
        email: Contact email.
        phone: Contact phone.
        date_of_birth: Date of birth.
        association_id: Coaching licence number.
        biography: Free text.
        specializations: Ordered specialisation tags.
        teams: Current team assignments (read side only).
        is_archived: Soft-delete flag.
    """

    id: UUID
    club_id: UUID
    first_name: str
    last_name: str
    role: CoachRole = CoachRole.ASSISTANT_COACH
    user_id: UUID | None = None
    photo: str | None = None
    email: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None
    association_id: str | None = None
    biography: str | None = None
    specializations: list[str] = field(default_factory=list)
    teams: list[CoachTeam] = field(default_factory=list)
    is_archived: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
