"""Unit tests for drill scope inheritance and template derivation.

Tests cover:
- partition_by_scope: own vs inherited grants at club, age-group, team scope
- Grants from another club or a sibling branch are dropped
- summarise_drills: duration sum, most frequent category, attribute union
"""

from uuid import uuid4

import pytest

from src.domain.entities.drill import Drill, ScopeLink
from src.domain.enums.drill_category import DrillCategory
from src.domain.enums.scope_type import ScopeType
from src.domain.services.drill_scope import RequestedScope, partition_by_scope
from src.domain.services.template_derivation import summarise_drills

CLUB_ID = uuid4()
U10_ID = uuid4()
U12_ID = uuid4()
U10_BLUES_ID = uuid4()
U10_REDS_ID = uuid4()


def make_drill(
    name: str,
    *links: ScopeLink,
    category: DrillCategory = DrillCategory.TECHNICAL,
    duration: int | None = None,
    attributes: list[str] | None = None,
) -> Drill:
    return Drill(
        id=uuid4(),
        club_id=CLUB_ID,
        name=name,
        category=category,
        duration_minutes=duration,
        attributes=attributes or [],
        scope_links=list(links),
    )


def _links(drill: Drill) -> list[ScopeLink]:
    return drill.scope_links


@pytest.fixture
def drills() -> dict[str, Drill]:
    return {
        "club": make_drill("Rondo", ScopeLink(club_id=CLUB_ID)),
        "u10": make_drill("Dribble gates", ScopeLink(club_id=CLUB_ID, age_group_id=U10_ID)),
        "u12": make_drill("Overlaps", ScopeLink(club_id=CLUB_ID, age_group_id=U12_ID)),
        "blues": make_drill(
            "Finishing",
            ScopeLink(club_id=CLUB_ID, age_group_id=U10_ID, team_id=U10_BLUES_ID),
        ),
        "reds": make_drill(
            "Pressing",
            ScopeLink(club_id=CLUB_ID, age_group_id=U10_ID, team_id=U10_REDS_ID),
        ),
        "other_club": make_drill("Shadow play", ScopeLink(club_id=uuid4())),
    }


@pytest.mark.unit
class TestRequestedScope:
    def test_most_specific_scope_wins(self):
        assert RequestedScope(club_id=CLUB_ID).scope_type == ScopeType.CLUB
        assert (
            RequestedScope(club_id=CLUB_ID, age_group_id=U10_ID).scope_type
            == ScopeType.AGE_GROUP
        )
        assert (
            RequestedScope(
                club_id=CLUB_ID, age_group_id=U10_ID, team_id=U10_BLUES_ID
            ).scope_type
            == ScopeType.TEAM
        )


@pytest.mark.unit
class TestPartitionByScope:
    def test_club_scope_has_no_inherited_drills(self, drills):
        results = partition_by_scope(
            drills.values(), RequestedScope(club_id=CLUB_ID), _links
        )

        assert [d.name for d in results.own] == ["Rondo"]
        assert results.inherited == []

    def test_age_group_scope_inherits_club_drills(self, drills):
        results = partition_by_scope(
            drills.values(),
            RequestedScope(club_id=CLUB_ID, age_group_id=U10_ID),
            _links,
        )

        assert [d.name for d in results.own] == ["Dribble gates"]
        assert [d.name for d in results.inherited] == ["Rondo"]

    def test_team_scope_inherits_club_and_own_age_group(self, drills):
        # Arrange
        requested = RequestedScope(
            club_id=CLUB_ID, age_group_id=U10_ID, team_id=U10_BLUES_ID
        )

        # Act
        results = partition_by_scope(drills.values(), requested, _links)

        # Assert
        assert [d.name for d in results.own] == ["Finishing"]
        assert [d.name for d in results.inherited] == ["Rondo", "Dribble gates"]
        assert results.total_count == 3

    def test_exact_grant_beats_broader_grant(self):
        shared = make_drill(
            "Passing square",
            ScopeLink(club_id=CLUB_ID),
            ScopeLink(club_id=CLUB_ID, age_group_id=U10_ID),
        )

        results = partition_by_scope(
            [shared], RequestedScope(club_id=CLUB_ID, age_group_id=U10_ID), _links
        )

        assert results.own == [shared]
        assert results.inherited == []


@pytest.mark.unit
class TestSummariseDrills:
    def test_sums_durations_and_unions_attributes_in_first_seen_order(self):
        # Arrange
        drills = [
            make_drill("Warm up", duration=10, attributes=["agility", "balance"]),
            make_drill("Rondo", duration=15, attributes=["shortPassing", "agility"]),
            make_drill("Cool down", duration=None, attributes=["balance", "stamina"]),
        ]

        # Act
        summary = summarise_drills(drills)

        # Assert
        assert summary.total_duration_minutes == 25
        assert summary.attributes == ["agility", "balance", "shortPassing", "stamina"]

    def test_most_frequent_category_with_first_seen_tie_break(self):
        tactical_majority = [
            make_drill("A", category=DrillCategory.PHYSICAL),
            make_drill("B", category=DrillCategory.TACTICAL),
            make_drill("C", category=DrillCategory.TACTICAL),
        ]
        tie = [
            make_drill("A", category=DrillCategory.MENTAL),
            make_drill("B", category=DrillCategory.PHYSICAL),
        ]

        assert summarise_drills(tactical_majority).category == DrillCategory.TACTICAL
        assert summarise_drills(tie).category == DrillCategory.MENTAL

    def test_empty_template(self):
        summary = summarise_drills([])

        assert summary.total_duration_minutes == 0
        assert summary.category is None
        assert summary.attributes == []
