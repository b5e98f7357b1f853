"""Match domain entity.

A match is always played by one of our teams against a named opposition.
``home_score``/``away_score`` are from the venue's point of view, so our
goals depend on ``is_home``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums.match_status import MatchStatus


@dataclass
class PerformanceRating:
    """Post-match rating (0-10) of one player."""

    player_id: UUID
    rating: float


@dataclass
class Match:
    """Fixture or result of a team.

    Attributes:
        id: Unique match identifier.
        team_id: Our team.
        season_id: Season label.
        squad_size: Players per side.
        opposition: Opponent name.
        match_date: Kick-off date and time.
        status: Lifecycle status.
        is_home: True when played at our venue.
        home_score: Goals of the home side, None until played.
        away_score: Goals of the away side, None until played.
        performance_ratings: Player ratings for the match.
        is_locked: Locked matches are no longer edited in the UI.
    """

    id: UUID
    team_id: UUID
    season_id: str
    squad_size: int
    opposition: str
    match_date: datetime
    status: MatchStatus = MatchStatus.SCHEDULED
    is_home: bool = True
    meet_time: datetime | None = None
    kick_off_time: datetime | None = None
    location: str | None = None
    competition: str | None = None
    primary_kit_id: UUID | None = None
    secondary_kit_id: UUID | None = None
    goalkeeper_kit_id: UUID | None = None
    home_score: int | None = None
    away_score: int | None = None
    notes: str | None = None
    weather_condition: str | None = None
    weather_temperature: int | None = None
    is_locked: bool = False
    performance_ratings: list[PerformanceRating] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == MatchStatus.COMPLETED

    @property
    def has_score(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    @property
    def goals_for(self) -> int:
        """Goals scored by our team (0 when no score is recorded)."""
        scored = self.home_score if self.is_home else self.away_score
        return scored or 0

    @property
    def goals_against(self) -> int:
        conceded = self.away_score if self.is_home else self.home_score
        return conceded or 0

