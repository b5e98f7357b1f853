"""Match commands (CQRS write operations).

Match updates are full replace; performance ratings in the command replace
the stored ones.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.core.validation import MaxLength, OneOf, Range, Required
from src.domain.enums import SQUAD_SIZES, MatchStatus


@dataclass(frozen=True, kw_only=True)
class PerformanceRatingInput:
    player_id: UUID
    rating: float


@dataclass(frozen=True, kw_only=True)
class CreateMatch:
    """Schedule (or record) a match for a team.

    Attributes:
        team_id: Team playing.
        season_id: Season label, e.g. "2024/25".
        squad_size: Players per side.
        opposition: Opponent name.
        match_date: Kick-off date and time.
        status: Status label; defaults to scheduled.
        home_score: Home side goals, once known.
        away_score: Away side goals, once known.
        performance_ratings: Player ratings (0-10).
    """

    team_id: UUID | None
    season_id: str
    opposition: str
    match_date: datetime | None
    squad_size: int = 11
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
    status: str = "scheduled"
    notes: str | None = None
    weather_condition: str | None = None
    weather_temperature: int | None = None
    is_locked: bool = False
    performance_ratings: list[PerformanceRatingInput] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class UpdateMatch:
    """Replace a match; ``team_id`` cannot change."""

    match_id: UUID
    season_id: str
    opposition: str
    match_date: datetime | None
    squad_size: int = 11
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
    status: str = "scheduled"
    notes: str | None = None
    weather_condition: str | None = None
    weather_temperature: int | None = None
    is_locked: bool = False
    performance_ratings: list[PerformanceRatingInput] = field(default_factory=list)


_MATCH_RULES = (
    Required("season_id"),
    MaxLength("season_id", 20),
    OneOf("squad_size", SQUAD_SIZES),
    Required("opposition"),
    MaxLength("opposition", 200),
    Required("match_date"),
    MaxLength("location", 500),
    MaxLength("competition", 200),
    MaxLength("notes", 4000),
    Required("status"),
    OneOf("status", MatchStatus.labels()),
    Range("home_score", minimum=0),
    Range("away_score", minimum=0),
    Required("performance_ratings[].player_id"),
    Range("performance_ratings[].rating", 0, 10),
)

CREATE_MATCH_RULES = (Required("team_id"), *_MATCH_RULES)

UPDATE_MATCH_RULES = _MATCH_RULES
