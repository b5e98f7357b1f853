"""Age group request and response schemas."""

from uuid import UUID

from pydantic import Field

from src.application.commands.age_group_commands import CreateAgeGroup, UpdateAgeGroup
from src.schemas.common_schemas import CamelModel, CamelResponse


class CreateAgeGroupRequest(CamelModel):
    club_id: UUID | None = None
    name: str | None = Field(None, examples=["Under 12s"])
    code: str | None = Field(None, examples=["U12"])
    level: str | None = Field(None, examples=["youth"])
    season: str | None = Field(None, examples=["2024/25"])
    default_squad_size: int = 11
    description: str | None = None

    def to_command(self) -> CreateAgeGroup:
        return CreateAgeGroup(**self.model_dump())


class UpdateAgeGroupRequest(CamelModel):
    name: str | None = None
    code: str | None = None
    level: str | None = None
    season: str | None = None
    default_squad_size: int = 11
    description: str | None = None
    seasons: list[str] = Field(default_factory=list)
    default_season: str | None = None
    is_archived: bool = False

    def to_command(self, age_group_id: UUID) -> UpdateAgeGroup:
        return UpdateAgeGroup(age_group_id=age_group_id, **self.model_dump())


class AgeGroupResponse(CamelResponse):
    """Age group with its season list.

    ``teamCount`` is only filled in by listings.
    """

    id: UUID
    club_id: UUID
    name: str
    code: str
    level: str
    season: str
    default_squad_size: int
    seasons: list[str] = Field(default_factory=list)
    default_season: str | None = None
    description: str | None = None
    is_archived: bool = False
    team_count: int | None = None


class AgeGroupStatisticsResponse(CamelResponse):
    player_count: int
    team_count: int
    matches_played: int
    wins: int
    draws: int
    losses: int
    win_rate: float
    goal_difference: int
