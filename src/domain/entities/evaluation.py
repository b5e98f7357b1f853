"""Player ability evaluation.

An evaluation is a coach's rating of every ability attribute of a player at
one point in time. The player's current attribute ratings and overall rating
mirror the latest evaluation.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

PLAYER_ATTRIBUTE_NAMES: tuple[str, ...] = (
    # Technical
    "ballControl",
    "crossing",
    "weakFoot",
    "dribbling",
    "finishing",
    "freeKick",
    "heading",
    "longPassing",
    "longShot",
    "penalties",
    "shortPassing",
    "shotPower",
    "slidingTackle",
    "standingTackle",
    "volleys",
    # Physical
    "acceleration",
    "agility",
    "balance",
    "jumping",
    "pace",
    "reactions",
    "sprintSpeed",
    "stamina",
    "strength",
    # Mental
    "aggression",
    "attackingPosition",
    "awareness",
    "communication",
    "composure",
    "defensivePositioning",
    "interceptions",
    "marking",
    "positivity",
    "positioning",
    "vision",
)

MIN_ATTRIBUTE_RATING = 0
MAX_ATTRIBUTE_RATING = 99


@dataclass
class EvaluationAttribute:
    attribute_name: str
    rating: int
    notes: str | None = None


@dataclass
class AttributeEvaluation:
    """Coach evaluation of a player's abilities.

    Attributes:
        id: Unique evaluation identifier.
        player_id: Evaluated player.
        evaluated_by: Coach who created the evaluation; only they may change it.
        evaluated_at: When the evaluation was made.
        overall_rating: Rounded mean of the attribute ratings.
        coach_notes: Free text.
        period_start: Optional start of the assessed period.
        period_end: Optional end of the assessed period.
        attributes: Attribute ratings.
        coach_name: Display name of the evaluating coach (read side only).
    """

    id: UUID
    player_id: UUID
    evaluated_by: UUID
    evaluated_at: datetime
    overall_rating: int
    coach_notes: str | None = None
    period_start: date | None = None
    period_end: date | None = None
    attributes: list[EvaluationAttribute] = field(default_factory=list)
    coach_name: str | None = None

    def is_owned_by(self, coach_id: UUID) -> bool:
        return self.evaluated_by == coach_id


def overall_from_ratings(ratings: list[int]) -> int:
    """Rounded mean of attribute ratings, 0 for an empty list."""
    if not ratings:
        return 0
    return round(sum(ratings) / len(ratings))
