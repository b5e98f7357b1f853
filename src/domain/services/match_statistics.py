"""Match statistics computed per request from a team's matches.

Only completed matches count towards the record. A completed match without a
recorded score counts as played but gets no result. A match is won when our
goals exceed the opposition's, where "our" side is the home side for home
matches and the away side otherwise.

Usage:
    record = compute_record(matches)
    record.win_rate  # 66.7
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.match import Match
from src.domain.enums.match_status import MatchStatus

MIN_RATINGS_FOR_RANKING = 3
UNDERPERFORMING_THRESHOLD = 6.0
DEFAULT_LIST_SIZE = 5


@dataclass(frozen=True, kw_only=True)
class TeamRecord:
    """Win/draw/loss tally over completed matches."""

    matches_played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def win_rate(self) -> float:
        """Percentage of matches won, rounded to one decimal place."""
        if self.matches_played == 0:
            return 0.0
        return round(self.wins / self.matches_played * 100, 1)

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against


def compute_record(matches: Iterable[Match]) -> TeamRecord:
    played = wins = draws = losses = goals_for = goals_against = 0
    for match in matches:
        if match.status != MatchStatus.COMPLETED:
            continue
        played += 1
        if not match.has_score:
            continue
        ours, theirs = match.goals_for, match.goals_against
        goals_for += ours
        goals_against += theirs
        if ours > theirs:
            wins += 1
        elif ours == theirs:
            draws += 1
        else:
            losses += 1
    return TeamRecord(
        matches_played=played,
        wins=wins,
        draws=draws,
        losses=losses,
        goals_for=goals_for,
        goals_against=goals_against,
    )


def upcoming_matches(
    matches: Iterable[Match], now: datetime, limit: int = DEFAULT_LIST_SIZE
) -> list[Match]:
    """Scheduled matches dated from ``now`` on, soonest first."""
    scheduled = [
        m
        for m in matches
        if m.status == MatchStatus.SCHEDULED and _comparable(m.match_date, now) >= now
    ]
    scheduled.sort(key=lambda m: _comparable(m.match_date, now))
    return scheduled[:limit]


def previous_results(
    matches: Iterable[Match], limit: int = DEFAULT_LIST_SIZE
) -> list[Match]:
    """Latest completed matches, most recent first."""
    completed = [m for m in matches if m.status == MatchStatus.COMPLETED]
    completed.sort(key=lambda m: m.match_date, reverse=True)
    return completed[:limit]


@dataclass(frozen=True, kw_only=True)
class PerformerSummary:
    player_id: UUID
    average_rating: float
    matches_rated: int


def rank_performers(
    ratings: Iterable[tuple[UUID, float]],
    limit: int = DEFAULT_LIST_SIZE,
) -> tuple[list[PerformerSummary], list[PerformerSummary]]:
    """Split players into top performers and underperformers.

    Players with fewer than three ratings are not ranked. Top performers are
    ordered by average rating (best first); underperformers are those
    averaging below 6.0, worst first.

    Args:
        ratings: ``(player_id, rating)`` pairs across the team's matches.
        limit: Maximum size of each list.

    Returns:
        ``(top_performers, underperforming)``.
    """
    by_player: dict[UUID, list[float]] = defaultdict(list)
    for player_id, rating in ratings:
        by_player[player_id].append(rating)

    summaries = [
        PerformerSummary(
            player_id=player_id,
            average_rating=round(sum(values) / len(values), 2),
            matches_rated=len(values),
        )
        for player_id, values in by_player.items()
        if len(values) >= MIN_RATINGS_FOR_RANKING
    ]

    top = sorted(summaries, key=lambda s: s.average_rating, reverse=True)[:limit]
    under = sorted(
        (s for s in summaries if s.average_rating < UNDERPERFORMING_THRESHOLD),
        key=lambda s: s.average_rating,
    )[:limit]
    return top, under


def result_label(match: Match) -> str:
    """Outcome from our side with the score, e.g. ``"W 2-1"``.

    Matches without a recorded score read as ``"N/A"``.
    """
    if not match.has_score:
        return "N/A"
    ours, theirs = match.goals_for, match.goals_against
    if ours > theirs:
        outcome = "W"
    elif ours == theirs:
        outcome = "D"
    else:
        outcome = "L"
    return f"{outcome} {ours}-{theirs}"


def filter_by_status(
    matches: Iterable[Match], status: str | None, now: datetime
) -> list[Match]:
    """Narrow matches by a status filter.

    ``upcoming`` keeps matches dated from ``now`` on and ``past`` those
    before it. A status label (``completed``, ``scheduled``, ...) keeps the
    matches with that status. Anything else keeps every match.
    """
    key = (status or "").strip().lower()
    if key == "upcoming":
        return [m for m in matches if _comparable(m.match_date, now) >= now]
    if key == "past":
        return [m for m in matches if _comparable(m.match_date, now) < now]
    wanted = MatchStatus.from_label(key) if key else None
    if wanted is None:
        return list(matches)
    return [m for m in matches if m.status == wanted]


def _comparable(value: datetime, reference: datetime) -> datetime:
    # SQLite hands back naive datetimes; treat them as being in the reference's zone.
    if value.tzinfo is None and reference.tzinfo is not None:
        return value.replace(tzinfo=reference.tzinfo)
    return value
