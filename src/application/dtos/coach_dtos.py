"""Coach DTOs (Data Transfer Objects)."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.domain.entities.coach import Coach


@dataclass
class CoachTeamResult:
    id: UUID
    name: str
    role: str


@dataclass
class CoachResult:
    """Coach profile with team assignments.

    Attributes:
        id: Coach identifier.
        club_id: Owning club.
        first_name: Given name.
        last_name: Family name.
        photo_url: Photo URL.
        email: Contact email.
        phone: Contact phone.
        date_of_birth: Date of birth.
        association_id: Registration number.
        role: Default role label.
        biography: Free text.
        specializations: Tags.
        teams: Assigned teams with the coach's role in each.
        is_archived: Soft-delete flag.
    """

    id: UUID
    club_id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    email: str | None
    phone: str | None
    date_of_birth: date | None
    association_id: str | None
    role: str
    biography: str | None
    specializations: list[str] = field(default_factory=list)
    teams: list[CoachTeamResult] = field(default_factory=list)
    is_archived: bool = False


def to_coach_result(coach: Coach) -> CoachResult:
    return CoachResult(
        id=coach.id,
        club_id=coach.club_id,
        first_name=coach.first_name,
        last_name=coach.last_name,
        photo_url=coach.photo,
        email=coach.email,
        phone=coach.phone,
        date_of_birth=coach.date_of_birth,
        association_id=coach.association_id,
        role=coach.role.label,
        biography=coach.biography,
        specializations=list(coach.specializations),
        teams=[
            CoachTeamResult(id=t.team_id, name=t.name, role=t.role.label)
            for t in coach.teams
        ],
        is_archived=coach.is_archived,
    )
