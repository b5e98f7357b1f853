"""Match request and response schemas.

Reference:
    - src/application/dtos/match_dtos.py
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.application.commands.match_commands import (
    CreateMatch,
    PerformanceRatingInput,
    UpdateMatch,
)
from src.schemas.common_schemas import CamelModel, CamelResponse


# =============================================================================
# Request Schemas
# =============================================================================


class PerformanceRatingRequest(CamelModel):
    player_id: UUID | None = None
    rating: float | None = None


class MatchRequest(CamelModel):
    """Fields shared by match create and update (full replace)."""

    season_id: str | None = None
    squad_size: int = 11
    opposition: str | None = None
    match_date: datetime | None = None
    meet_time: datetime | None = None
    kick_off_time: datetime | None = None
    location: str | None = None
    is_home: bool = True
    competition: str | None = None
    primary_kit_id: UUID | None = None
    secondary_kit_id: UUID | None = None
    goalkeeper_kit_id: UUID | None = None
    home_score: int | None = None
    away_score: int | None = None
    status: str = Field("scheduled", examples=["scheduled", "completed"])
    notes: str | None = None
    weather_condition: str | None = None
    weather_temperature: int | None = None
    is_locked: bool = False
    performance_ratings: list[PerformanceRatingRequest] = Field(default_factory=list)

    def _fields(self) -> dict:
        data = self.model_dump(exclude={"performance_ratings"})
        data["performance_ratings"] = [
            PerformanceRatingInput(player_id=r.player_id, rating=r.rating)
            for r in self.performance_ratings
        ]
        return data


class CreateMatchRequest(MatchRequest):
    team_id: UUID | None = None

    def to_command(self) -> CreateMatch:
        return CreateMatch(**self._fields())


class UpdateMatchRequest(MatchRequest):
    def to_command(self, match_id: UUID) -> UpdateMatch:
        return UpdateMatch(match_id=match_id, **self._fields())


# =============================================================================
# Response Schemas
# =============================================================================


class MatchScoreResponse(CamelResponse):
    home: int
    away: int


class MatchWeatherResponse(CamelResponse):
    condition: str | None
    temperature: int | None


class PerformanceRatingResponse(CamelResponse):
    player_id: UUID | None = None
    rating: float | None = None


class MatchSummaryResponse(CamelResponse):
    """Fixture or result row in listings and dashboards."""

    id: UUID
    team_id: UUID
    opposition: str
    match_date: datetime
    location: str | None
    is_home: bool
    competition: str | None
    status: str
    score: MatchScoreResponse | None


class MatchResponse(CamelResponse):
    """Full match with score, weather and performance ratings."""

    id: UUID
    team_id: UUID
    age_group_id: UUID | None
    club_id: UUID | None
    season_id: str
    squad_size: int
    opposition: str
    match_date: datetime
    meet_time: datetime | None
    kick_off_time: datetime | None
    location: str | None
    is_home: bool
    competition: str | None
    primary_kit_id: UUID | None
    secondary_kit_id: UUID | None
    goalkeeper_kit_id: UUID | None
    score: MatchScoreResponse | None
    status: str
    notes: str | None
    weather: MatchWeatherResponse
    is_locked: bool
    performance_ratings: list[PerformanceRatingResponse] = Field(default_factory=list)


class ClubMatchResponse(MatchSummaryResponse):
    team_name: str
    age_group_id: UUID
    age_group_name: str | None


class ClubMatchesResponse(CamelResponse):
    matches: list[ClubMatchResponse] = Field(default_factory=list)
    total_count: int = 0
