"""Unit tests for match statistics.

Tests cover:
- compute_record: only completed matches count, home/away perspective
- Completed matches without a score are played but get no result
- win_rate rounding and goal_difference
- upcoming_matches / previous_results ordering
- rank_performers minimum ratings and underperforming threshold
- result_label from our side, filter_by_status keywords and labels
"""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from src.domain.entities.match import Match
from src.domain.enums.match_status import MatchStatus
from src.domain.services.match_statistics import (
    TeamRecord,
    compute_record,
    filter_by_status,
    previous_results,
    rank_performers,
    result_label,
    upcoming_matches,
)

KICK_OFF = datetime(2024, 9, 7, 10, 0)


def make_match(
    *,
    status: MatchStatus = MatchStatus.COMPLETED,
    is_home: bool = True,
    home_score: int | None = None,
    away_score: int | None = None,
    match_date: datetime = KICK_OFF,
) -> Match:
    return Match(
        id=uuid4(),
        team_id=uuid4(),
        season_id="2024/25",
        squad_size=7,
        opposition="Riverside Rovers",
        match_date=match_date,
        status=status,
        is_home=is_home,
        home_score=home_score,
        away_score=away_score,
    )


@pytest.mark.unit
class TestComputeRecord:
    def test_counts_results_from_our_side(self):
        # Arrange
        matches = [
            make_match(is_home=True, home_score=3, away_score=1),
            make_match(is_home=False, home_score=2, away_score=0),
            make_match(is_home=False, home_score=1, away_score=1),
        ]

        # Act
        record = compute_record(matches)

        # Assert
        assert record == TeamRecord(
            matches_played=3,
            wins=1,
            draws=1,
            losses=1,
            goals_for=4,
            goals_against=4,
        )
        assert record.goal_difference == 0

    def test_ignores_matches_that_are_not_completed(self):
        matches = [
            make_match(status=MatchStatus.SCHEDULED),
            make_match(status=MatchStatus.CANCELLED, home_score=0, away_score=3),
            make_match(home_score=2, away_score=0),
        ]

        record = compute_record(matches)

        assert record.matches_played == 1
        assert record.wins == 1

    def test_completed_match_without_score_has_no_result(self):
        # Arrange
        matches = [make_match(home_score=None, away_score=None)]

        # Act
        record = compute_record(matches)

        # Assert
        assert record.matches_played == 1
        assert (record.wins, record.draws, record.losses) == (0, 0, 0)
        assert record.goals_for == 0
        assert record.goals_against == 0

    def test_empty_history(self):
        record = compute_record([])

        assert record.matches_played == 0
        assert record.win_rate == 0.0
        assert record.goal_difference == 0


@pytest.mark.unit
class TestTeamRecordDerivedValues:
    def test_win_rate_rounds_to_one_decimal(self):
        assert TeamRecord(matches_played=3, wins=2).win_rate == 66.7
        assert TeamRecord(matches_played=3, wins=1).win_rate == 33.3
        assert TeamRecord(matches_played=4, wins=4).win_rate == 100.0

    def test_goal_difference_can_be_negative(self):
        record = TeamRecord(goals_for=2, goals_against=9)

        assert record.goal_difference == -7


@pytest.mark.unit
class TestMatchLists:
    def test_upcoming_matches_soonest_first_from_now(self):
        now = datetime(2024, 9, 1, 12, 0, tzinfo=UTC)
        later = make_match(
            status=MatchStatus.SCHEDULED, match_date=datetime(2024, 9, 20, 10, 0)
        )
        sooner = make_match(
            status=MatchStatus.SCHEDULED, match_date=datetime(2024, 9, 8, 10, 0)
        )
        past = make_match(
            status=MatchStatus.SCHEDULED, match_date=datetime(2024, 8, 1, 10, 0)
        )
        played = make_match(match_date=datetime(2024, 9, 10, 10, 0))

        upcoming = upcoming_matches([later, past, sooner, played], now)

        assert upcoming == [sooner, later]

    def test_previous_results_most_recent_first_and_limited(self):
        matches = [
            make_match(home_score=1, away_score=0, match_date=KICK_OFF + timedelta(days=7 * i))
            for i in range(7)
        ]

        previous = previous_results(matches)

        assert len(previous) == 5
        assert previous[0] is matches[6]
        assert previous[-1] is matches[2]


@pytest.mark.unit
class TestRankPerformers:
    def test_requires_three_ratings(self):
        # Arrange
        regular, newcomer = uuid4(), uuid4()
        ratings = [
            (regular, 7.0),
            (regular, 8.0),
            (regular, 9.0),
            (newcomer, 10.0),
            (newcomer, 10.0),
        ]

        # Act
        top, under = rank_performers(ratings)

        # Assert
        assert [s.player_id for s in top] == [regular]
        assert top[0].average_rating == 8.0
        assert top[0].matches_rated == 3
        assert under == []

    def test_underperformers_below_threshold_worst_first(self):
        # Arrange
        steady, struggling, borderline = uuid4(), uuid4(), uuid4()
        ratings = [
            *[(steady, 7.5)] * 3,
            *[(struggling, 4.0)] * 4,
            *[(borderline, 6.0)] * 3,
        ]

        # Act
        top, under = rank_performers(ratings)

        # Assert
        assert [s.player_id for s in top] == [steady, borderline, struggling]
        assert [s.player_id for s in under] == [struggling]
        assert under[0].average_rating == 4.0


@pytest.mark.unit
class TestResultLabel:
    @pytest.mark.parametrize(
        ("is_home", "home_score", "away_score", "expected"),
        [
            (True, 3, 1, "W 3-1"),
            (False, 3, 1, "L 1-3"),
            (False, 2, 2, "D 2-2"),
            (True, None, None, "N/A"),
        ],
        ids=["home_win", "away_loss", "draw", "unscored"],
    )
    def test_reads_from_our_side(self, is_home, home_score, away_score, expected):
        match = make_match(is_home=is_home, home_score=home_score, away_score=away_score)

        assert result_label(match) == expected


@pytest.mark.unit
class TestFilterByStatus:
    @pytest.fixture
    def matches(self) -> dict[str, Match]:
        return {
            "played": make_match(match_date=datetime(2024, 8, 31, 10, 0)),
            "cancelled": make_match(
                status=MatchStatus.CANCELLED, match_date=datetime(2024, 9, 14, 10, 0)
            ),
            "next": make_match(
                status=MatchStatus.SCHEDULED, match_date=datetime(2024, 9, 7, 10, 0)
            ),
        }

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("upcoming", ["cancelled", "next"]),
            ("past", ["played"]),
            (" Cancelled ", ["cancelled"]),
            (None, ["played", "cancelled", "next"]),
            ("someday", ["played", "cancelled", "next"]),
        ],
    )
    def test_keywords_and_labels(self, matches, status, expected):
        now = datetime(2024, 9, 1, 12, 0, tzinfo=UTC)

        filtered = filter_by_status(matches.values(), status, now)

        assert filtered == [matches[k] for k in expected]
