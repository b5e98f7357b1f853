"""Development plan domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from src.domain.enums.plan_status import PlanStatus


@dataclass
class DevelopmentGoal:
    """Single goal in a development plan; ``progress`` is a percentage."""

    id: UUID
    goal: str
    actions: list[str] = field(default_factory=list)
    start_date: date | None = None
    target_date: date | None = None
    progress: int = 0
    completed: bool = False
    completed_date: date | None = None


@dataclass
class DevelopmentPlan:
    """Player development plan for a period.

    Attributes:
        id: Unique plan identifier.
        player_id: Player the plan is for.
        title: Plan title.
        period_start: First day of the plan.
        period_end: Last day of the plan.
        status: Plan status.
        description: Free text.
        coach_notes: Free text.
        goals: Goals of the plan.
        created_by: Coach who created the plan, optional.
    """

    id: UUID
    player_id: UUID
    title: str
    period_start: date | None = None
    period_end: date | None = None
    status: PlanStatus = PlanStatus.ACTIVE
    description: str | None = None
    coach_notes: str | None = None
    goals: list[DevelopmentGoal] = field(default_factory=list)
    created_by: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
