"""Team commands (CQRS write operations).

Covers the team aggregate itself and its two association tables: player
memberships (with squad numbers) and coach assignments (with roles).

Reference:
    - src/core/validation.py
"""

from dataclasses import dataclass
from uuid import UUID

from src.core.validation import HexColor, MaxLength, OneOf, Range, Required
from src.domain.enums import CoachRole, Level

MIN_SQUAD_NUMBER = 1
MAX_SQUAD_NUMBER = 99


@dataclass(frozen=True, kw_only=True)
class CreateTeam:
    """Create a team in an age group of a club.

    Attributes:
        club_id: Owning club.
        age_group_id: Age group the team plays in (must belong to the club).
        name: Team name.
        short_name: Abbreviated name.
        level: Level label.
        season: Season label.
        primary_color: Hex colour.
        secondary_color: Hex colour.
    """

    club_id: UUID | None
    age_group_id: UUID | None
    name: str
    level: str
    season: str
    short_name: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateTeam:
    """Replace a team's details; archived teams cannot be updated."""

    team_id: UUID
    name: str
    level: str
    season: str
    short_name: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None


@dataclass(frozen=True, kw_only=True)
class ArchiveTeam:
    team_id: UUID
    is_archived: bool = True


@dataclass(frozen=True, kw_only=True)
class AddPlayerToTeam:
    """Add a player to a team's squad.

    Attributes:
        team_id: Team to join.
        player_id: Player joining.
        squad_number: Shirt number (1-99), unique within the team.
    """

    team_id: UUID
    player_id: UUID | None
    squad_number: int | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateTeamPlayerSquadNumber:
    team_id: UUID
    player_id: UUID
    squad_number: int | None


@dataclass(frozen=True, kw_only=True)
class RemovePlayerFromTeam:
    team_id: UUID
    player_id: UUID


@dataclass(frozen=True, kw_only=True)
class AssignCoachToTeam:
    """Assign a coach of the team's club to the team with a role."""

    team_id: UUID
    coach_id: UUID | None
    role: str


@dataclass(frozen=True, kw_only=True)
class RemoveCoachFromTeam:
    team_id: UUID
    coach_id: UUID


@dataclass(frozen=True, kw_only=True)
class UpdateTeamCoachRole:
    team_id: UUID
    coach_id: UUID
    role: str


_TEAM_RULES = (
    Required("name"),
    MaxLength("name", 100),
    MaxLength("short_name", 50),
    Required("level"),
    OneOf("level", Level.labels()),
    Required("season"),
    MaxLength("season", 20),
    HexColor("primary_color"),
    HexColor("secondary_color"),
)

CREATE_TEAM_RULES = (Required("club_id"), Required("age_group_id"), *_TEAM_RULES)

UPDATE_TEAM_RULES = _TEAM_RULES

ADD_PLAYER_TO_TEAM_RULES = (
    Required("player_id"),
    Range("squad_number", MIN_SQUAD_NUMBER, MAX_SQUAD_NUMBER),
)

UPDATE_SQUAD_NUMBER_RULES = (
    Required("squad_number"),
    Range("squad_number", MIN_SQUAD_NUMBER, MAX_SQUAD_NUMBER),
)

ASSIGN_COACH_RULES = (
    Required("coach_id"),
    Required("role"),
    OneOf("role", CoachRole.labels()),
)

UPDATE_COACH_ROLE_RULES = (Required("role"), OneOf("role", CoachRole.labels()))
