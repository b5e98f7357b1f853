"""Report card domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID


@dataclass
class DevelopmentAction:
    id: UUID
    goal: str
    actions: list[str] = field(default_factory=list)
    start_date: date | None = None
    target_date: date | None = None
    completed: bool = False
    completed_date: date | None = None


@dataclass
class SimilarProfessional:
    """Professional player the report compares the player to."""

    id: UUID
    name: str
    team: str | None = None
    position: str | None = None
    reason: str | None = None


@dataclass
class Report:
    """Player report card for a period.

    Attributes:
        id: Unique report identifier.
        player_id: Player the report is about.
        period_start: Start of the reporting period.
        period_end: End of the reporting period.
        overall_rating: Rating out of 10, optional.
        strengths: Ordered list of strengths.
        areas_for_improvement: Ordered list of areas to work on.
        coach_comments: Free text.
        development_actions: Actions agreed with the player.
        similar_professionals: Professional comparisons.
        created_by: Coach who wrote the report.
    """

    id: UUID
    player_id: UUID
    period_start: date | None = None
    period_end: date | None = None
    overall_rating: float | None = None
    strengths: list[str] = field(default_factory=list)
    areas_for_improvement: list[str] = field(default_factory=list)
    coach_comments: str | None = None
    development_actions: list[DevelopmentAction] = field(default_factory=list)
    similar_professionals: list[SimilarProfessional] = field(default_factory=list)
    created_by: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
