"""Team domain entity and team read models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from src.domain.enums.coach_role import CoachRole
from src.domain.enums.level import Level


@dataclass
class Team:
    """A squad within an age group.

    Attributes:
        id: Unique team identifier.
        club_id: Owning club (denormalised from the age group).
        age_group_id: Parent age group.
        name: Team name ("Blues").
        short_name: Optional abbreviation.
        level: Playing level.
        season: Season label the team plays in.
        primary_color: Hex colour, optional.
        secondary_color: Hex colour, optional.
        is_archived: Archived teams are read-only and hidden from listings.
    """

    id: UUID
    club_id: UUID
    age_group_id: UUID
    name: str
    level: Level
    season: str
    short_name: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    is_archived: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class TeamMembership:
    """A player's place on a team (row of ``player_teams``)."""

    team_id: UUID
    player_id: UUID
    squad_number: int | None = None


@dataclass(frozen=True, kw_only=True)
class TeamMember:
    """Player as listed on a team sheet."""

    player_id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    preferred_positions: list[str] = field(default_factory=list)
    overall_rating: int | None = None
    squad_number: int | None = None
    date_of_birth: date | None = None


@dataclass(frozen=True, kw_only=True)
class TeamCoachAssignment:
    """A coach's assignment to a team (row of ``team_coaches``)."""

    team_id: UUID
    coach_id: UUID
    role: CoachRole


@dataclass(frozen=True, kw_only=True)
class TeamStaffMember:
    """Coach as listed on a team's staff page."""

    coach_id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    role: CoachRole
    is_archived: bool = False
