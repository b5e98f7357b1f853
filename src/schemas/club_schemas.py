"""Club request and response schemas.

Reference:
    - src/application/dtos/club_dtos.py
"""

from uuid import UUID

from pydantic import Field

from src.application.commands.club_commands import UpdateClub
from src.schemas.common_schemas import CamelModel, CamelResponse
from src.schemas.match_schemas import MatchSummaryResponse


# =============================================================================
# Request Schemas
# =============================================================================


class UpdateClubRequest(CamelModel):
    """Full replacement of a club's profile."""

    name: str | None = None
    short_name: str | None = None
    logo: str | None = None
    primary_color: str | None = Field(None, examples=["#1A2B3C"])
    secondary_color: str | None = None
    accent_color: str | None = None
    city: str | None = None
    country: str | None = None
    venue: str | None = None
    address: str | None = None
    founded: int | None = None
    history: str | None = None
    ethos: str | None = None
    principles: list[str] = Field(default_factory=list)

    def to_command(self, club_id: UUID) -> UpdateClub:
        return UpdateClub(club_id=club_id, **self.model_dump())


# =============================================================================
# Response Schemas
# =============================================================================


class ClubColorsResponse(CamelResponse):
    primary: str | None
    secondary: str | None
    accent: str | None


class ClubLocationResponse(CamelResponse):
    city: str
    country: str
    venue: str
    address: str | None = None


class ClubSummaryResponse(CamelResponse):
    """Club as shown in listings."""

    id: UUID
    name: str
    short_name: str
    logo: str | None
    colors: ClubColorsResponse
    location: ClubLocationResponse


class ClubDetailResponse(ClubSummaryResponse):
    """Club profile page."""

    founded: int | None = None
    history: str | None = None
    ethos: str | None = None
    principles: list[str] = Field(default_factory=list)


class ClubStatisticsResponse(CamelResponse):
    """Club dashboard counts and match record.

    Attributes:
        win_rate: Percentage of completed matches won, one decimal place.
        upcoming_matches: Next scheduled matches, soonest first.
        previous_results: Latest completed matches, newest first.
    """

    age_group_count: int
    team_count: int
    player_count: int
    coach_count: int
    matches_played: int
    wins: int
    draws: int
    losses: int
    win_rate: float
    goal_difference: int
    upcoming_matches: list[MatchSummaryResponse] = Field(default_factory=list)
    previous_results: list[MatchSummaryResponse] = Field(default_factory=list)


class MyClubResponse(ClubSummaryResponse):
    """Club the caller coaches in."""

    founded: int | None = None
    team_count: int = 0
    player_count: int = 0


class ClubBriefResponse(CamelResponse):
    id: UUID
    name: str
    short_name: str
    logo: str | None
    colors: ClubColorsResponse
    founded: int | None = None
