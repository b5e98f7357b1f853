"""Player ability evaluation commands (CQRS write operations).

Every evaluation command carries the caller's ``auth_id`` (the identity
provider's user id); the handler resolves it to the caller's coach record
to attribute or authorize the change.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from src.core.validation import MaxLength, OneOf, Required
from src.domain.entities.evaluation import PLAYER_ATTRIBUTE_NAMES


@dataclass(frozen=True, kw_only=True)
class EvaluationAttributeInput:
    attribute_name: str
    rating: int
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreatePlayerAbilityEvaluation:
    """Record a coach's evaluation of a player's abilities.

    Attributes:
        player_id: Player being evaluated.
        auth_id: Caller's identity provider user id, if authenticated.
        attributes: One rating (0-99) per evaluated attribute.
        evaluated_at: When the evaluation was made; defaults to now.
        coach_notes: Free text.
        period_start: Optional start of the assessed period.
        period_end: Optional end of the assessed period.
    """

    player_id: UUID
    auth_id: str | None = None
    attributes: list[EvaluationAttributeInput] = field(default_factory=list)
    evaluated_at: datetime | None = None
    coach_notes: str | None = None
    period_start: date | None = None
    period_end: date | None = None


@dataclass(frozen=True, kw_only=True)
class UpdatePlayerAbilityEvaluation:
    """Replace an evaluation; only the creating coach may do this."""

    player_id: UUID
    evaluation_id: UUID
    auth_id: str | None = None
    attributes: list[EvaluationAttributeInput] = field(default_factory=list)
    evaluated_at: datetime | None = None
    coach_notes: str | None = None
    period_start: date | None = None
    period_end: date | None = None


@dataclass(frozen=True, kw_only=True)
class DeletePlayerAbilityEvaluation:
    player_id: UUID
    evaluation_id: UUID
    auth_id: str | None = None


EVALUATION_RULES = (
    Required("attributes"),
    Required("attributes[].attribute_name"),
    OneOf(
        "attributes[].attribute_name",
        PLAYER_ATTRIBUTE_NAMES,
        case_insensitive=False,
    ),
    MaxLength("attributes[].notes", 1000),
    MaxLength("coach_notes", 4000),
)
