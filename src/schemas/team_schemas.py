"""Team, squad and coaching staff schemas.

Reference:
    - src/application/dtos/team_dtos.py
"""

from datetime import date
from uuid import UUID

from pydantic import Field

from src.application.commands.team_commands import (
    AddPlayerToTeam,
    ArchiveTeam,
    AssignCoachToTeam,
    CreateTeam,
    UpdateTeam,
    UpdateTeamCoachRole,
    UpdateTeamPlayerSquadNumber,
)
from src.schemas.club_schemas import ClubBriefResponse
from src.schemas.common_schemas import CamelModel, CamelResponse
from src.schemas.match_schemas import MatchSummaryResponse


# =============================================================================
# Request Schemas
# =============================================================================


class CreateTeamRequest(CamelModel):
    club_id: UUID | None = None
    age_group_id: UUID | None = None
    name: str | None = None
    short_name: str | None = None
    level: str | None = None
    season: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None

    def to_command(self) -> CreateTeam:
        return CreateTeam(**self.model_dump())


class UpdateTeamRequest(CamelModel):
    name: str | None = None
    short_name: str | None = None
    level: str | None = None
    season: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None

    def to_command(self, team_id: UUID) -> UpdateTeam:
        return UpdateTeam(team_id=team_id, **self.model_dump())


class ArchiveTeamRequest(CamelModel):
    is_archived: bool = True

    def to_command(self, team_id: UUID) -> ArchiveTeam:
        return ArchiveTeam(team_id=team_id, is_archived=self.is_archived)


class AddPlayerToTeamRequest(CamelModel):
    """Add a player to the squad, optionally with a shirt number."""

    player_id: UUID | None = None
    squad_number: int | None = Field(None, examples=[7])

    def to_command(self, team_id: UUID) -> AddPlayerToTeam:
        return AddPlayerToTeam(
            team_id=team_id,
            player_id=self.player_id,
            squad_number=self.squad_number,
        )


class UpdateSquadNumberRequest(CamelModel):
    squad_number: int | None = None

    def to_command(self, team_id: UUID, player_id: UUID) -> UpdateTeamPlayerSquadNumber:
        return UpdateTeamPlayerSquadNumber(
            team_id=team_id,
            player_id=player_id,
            squad_number=self.squad_number,
        )


class AssignCoachRequest(CamelModel):
    coach_id: UUID | None = None
    role: str | None = Field(None, examples=["headcoach"])

    def to_command(self, team_id: UUID) -> AssignCoachToTeam:
        return AssignCoachToTeam(team_id=team_id, coach_id=self.coach_id, role=self.role)


class UpdateCoachRoleRequest(CamelModel):
    role: str | None = None

    def to_command(self, team_id: UUID, coach_id: UUID) -> UpdateTeamCoachRole:
        return UpdateTeamCoachRole(team_id=team_id, coach_id=coach_id, role=self.role)


# =============================================================================
# Response Schemas
# =============================================================================


class TeamColorsResponse(CamelResponse):
    primary: str | None
    secondary: str | None


class TeamStatsResponse(CamelResponse):
    player_count: int
    matches_played: int
    wins: int
    draws: int
    losses: int
    win_rate: float
    goal_difference: int
    coach_count: int | None = None
    goals_for: int = 0
    goals_against: int = 0


class TeamResponse(CamelResponse):
    id: UUID
    club_id: UUID
    age_group_id: UUID
    name: str
    short_name: str | None
    level: str
    season: str
    colors: TeamColorsResponse
    is_archived: bool
    stats: TeamStatsResponse | None = None


class PerformerResponse(CamelResponse):
    player_id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    average_rating: float
    matches_rated: int


class TeamOverviewResponse(CamelResponse):
    """Team dashboard: statistics, fixtures, results and performers."""

    team: TeamResponse
    statistics: TeamStatsResponse
    upcoming_matches: list[MatchSummaryResponse] = Field(default_factory=list)
    previous_results: list[MatchSummaryResponse] = Field(default_factory=list)
    top_performers: list[PerformerResponse] = Field(default_factory=list)
    underperforming: list[PerformerResponse] = Field(default_factory=list)


class TeamPlayerResponse(CamelResponse):
    id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    preferred_positions: list[str]
    overall_rating: int | None
    squad_number: int | None


class TeamMembershipResponse(CamelResponse):
    player_id: UUID
    team_id: UUID
    squad_number: int | None


class TeamCoachResponse(CamelResponse):
    id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    role: str
    is_archived: bool


class TeamCoachAssignmentResponse(CamelResponse):
    team_id: UUID
    coach_id: UUID
    role: str


class TeamDetailResponse(TeamResponse):
    coach_ids: list[UUID] = Field(default_factory=list)


class ClubTeamResponse(TeamResponse):
    """Team in a club-wide list with its staff and player count."""

    age_group_name: str | None = None
    squad_size: int | None = None
    coaches: list[TeamCoachResponse] = Field(default_factory=list)
    player_count: int = 0


class MyTeamResponse(TeamResponse):
    age_group_name: str | None = None
    squad_size: int | None = None
    club: ClubBriefResponse | None = None


class SquadPlayerResponse(CamelResponse):
    id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    date_of_birth: date | None
    preferred_position: str | None
    preferred_positions: list[str]
    overall_rating: int | None
    squad_number: int | None
