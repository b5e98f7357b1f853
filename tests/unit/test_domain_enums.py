"""Unit tests for integer-coded domain enums.

Tests cover:
- KitType code mapping (unknown codes shown as home)
- Level and CoachRole fallbacks and label parsing
- overall_from_ratings rounding
"""

import pytest

from src.domain.entities.evaluation import overall_from_ratings
from src.domain.enums import CoachRole, KitType, Level, kit_type_label


@pytest.mark.unit
class TestKitType:
    @pytest.mark.parametrize(
        ("code", "label"),
        [
            (0, "home"),
            (1, "away"),
            (2, "third"),
            (3, "goalkeeper"),
            (4, "training"),
            (5, "home"),
            (-1, "home"),
            (None, "home"),
        ],
    )
    def test_code_to_label(self, code, label):
        assert kit_type_label(code) == label

    def test_from_label_is_case_insensitive(self):
        assert KitType.from_label(" Away ") == KitType.AWAY
        assert KitType.from_label("fourth") is None


@pytest.mark.unit
class TestLevel:
    def test_unknown_code_falls_back_to_youth(self):
        assert Level.from_code(9) == Level.YOUTH
        assert Level.from_code(None) == Level.YOUTH

    def test_labels(self):
        assert Level.labels() == ("youth", "amateur", "reserve", "senior")
        assert Level.from_label("Senior") == Level.SENIOR


@pytest.mark.unit
class TestCoachRole:
    def test_label_has_no_separator(self):
        assert CoachRole.HEAD_COACH.label == "headcoach"

    def test_from_label_accepts_variants(self):
        assert CoachRole.from_label("HeadCoach") == CoachRole.HEAD_COACH
        assert CoachRole.from_label("goalkeeper_coach") == CoachRole.GOALKEEPER_COACH
        assert CoachRole.from_label("manager") is None

    def test_unknown_code_is_assistant(self):
        assert CoachRole.from_code(42) == CoachRole.ASSISTANT_COACH


@pytest.mark.unit
class TestOverallFromRatings:
    def test_rounded_mean(self):
        assert overall_from_ratings([60, 70, 81]) == 70

    def test_empty_is_zero(self):
        assert overall_from_ratings([]) == 0
