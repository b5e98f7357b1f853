"""Match DTOs (Data Transfer Objects).

Status codes become lower-case labels; the score is only present once a
match has both scores recorded.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.entities.match import Match


@dataclass
class MatchScore:
    home: int
    away: int


@dataclass
class MatchWeather:
    condition: str | None
    temperature: int | None


@dataclass
class PerformanceRatingResult:
    player_id: UUID
    rating: float


@dataclass
class MatchSummaryResult:
    """Match as shown in fixture and result lists."""

    id: UUID
    team_id: UUID
    opposition: str
    match_date: datetime
    location: str | None
    is_home: bool
    competition: str | None
    status: str
    score: MatchScore | None


@dataclass
class ClubMatchResult(MatchSummaryResult):
    """Match in a club-wide list, with its team and age group."""

    team_name: str
    age_group_id: UUID
    age_group_name: str | None


@dataclass
class ClubMatchesResult:
    matches: list[ClubMatchResult] = field(default_factory=list)
    total_count: int = 0


@dataclass
class MatchResult:
    """Full match detail.

    Attributes:
        id: Match identifier.
        team_id: Team playing.
        age_group_id: Age group of the team, when known.
        club_id: Club of the team, when known.
        season_id: Season label.
        squad_size: Players per side.
        opposition: Opponent name.
        match_date: Kick-off date.
        status: Status label.
        score: Home/away score, None until both are recorded.
        weather: Conditions on the day.
        performance_ratings: Player ratings, best first.
    """

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
    score: MatchScore | None
    status: str
    notes: str | None
    weather: MatchWeather
    is_locked: bool
    performance_ratings: list[PerformanceRatingResult] = field(default_factory=list)


def _score(match: Match) -> MatchScore | None:
    if not match.has_score:
        return None
    return MatchScore(home=match.home_score or 0, away=match.away_score or 0)


def to_match_summary(match: Match) -> MatchSummaryResult:
    return MatchSummaryResult(
        id=match.id,
        team_id=match.team_id,
        opposition=match.opposition,
        match_date=match.match_date,
        location=match.location,
        is_home=match.is_home,
        competition=match.competition,
        status=match.status.label,
        score=_score(match),
    )


def to_match_result(
    match: Match, age_group_id: UUID | None = None, club_id: UUID | None = None
) -> MatchResult:
    return MatchResult(
        id=match.id,
        team_id=match.team_id,
        age_group_id=age_group_id,
        club_id=club_id,
        season_id=match.season_id,
        squad_size=match.squad_size,
        opposition=match.opposition,
        match_date=match.match_date,
        meet_time=match.meet_time,
        kick_off_time=match.kick_off_time,
        location=match.location,
        is_home=match.is_home,
        competition=match.competition,
        primary_kit_id=match.primary_kit_id,
        secondary_kit_id=match.secondary_kit_id,
        goalkeeper_kit_id=match.goalkeeper_kit_id,
        score=_score(match),
        status=match.status.label,
        notes=match.notes,
        weather=MatchWeather(
            condition=match.weather_condition,
            temperature=match.weather_temperature,
        ),
        is_locked=match.is_locked,
        performance_ratings=[
            PerformanceRatingResult(player_id=r.player_id, rating=r.rating)
            for r in match.performance_ratings
        ],
    )


def to_club_match(
    match: Match, team_name: str, age_group_id: UUID, age_group_name: str | None
) -> ClubMatchResult:
    return ClubMatchResult(
        id=match.id,
        team_id=match.team_id,
        opposition=match.opposition,
        match_date=match.match_date,
        location=match.location,
        is_home=match.is_home,
        competition=match.competition,
        status=match.status.label,
        score=_score(match),
        team_name=team_name,
        age_group_id=age_group_id,
        age_group_name=age_group_name,
    )
