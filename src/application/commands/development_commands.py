"""Development plan and report card commands (CQRS write operations).

Both aggregates belong to a player and own child rows (goals, development
actions, professional comparisons) that are replaced on update.
"""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.core.validation import MaxLength, OneOf, Range, Required
from src.domain.enums import PlanStatus


@dataclass(frozen=True, kw_only=True)
class GoalInput:
    goal: str
    actions: list[str] = field(default_factory=list)
    start_date: date | None = None
    target_date: date | None = None
    progress: int = 0
    completed: bool = False
    completed_date: date | None = None


@dataclass(frozen=True, kw_only=True)
class CreateDevelopmentPlan:
    """Create a development plan for a player.

    Attributes:
        player_id: Player the plan is for.
        title: Plan title.
        period_start: First day of the plan; not after ``period_end``.
        period_end: Last day of the plan.
        status: Status label (active, completed, archived).
        description: Free text.
        coach_notes: Free text.
        goals: Goals with actions and progress (0-100).
        auth_id: Caller's identity provider user id, used for ``created_by``.
    """

    player_id: UUID | None
    title: str
    period_start: date | None = None
    period_end: date | None = None
    status: str = "active"
    description: str | None = None
    coach_notes: str | None = None
    goals: list[GoalInput] = field(default_factory=list)
    auth_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateDevelopmentPlan:
    plan_id: UUID
    title: str
    period_start: date | None = None
    period_end: date | None = None
    status: str = "active"
    description: str | None = None
    coach_notes: str | None = None
    goals: list[GoalInput] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class DevelopmentActionInput:
    goal: str
    actions: list[str] = field(default_factory=list)
    start_date: date | None = None
    target_date: date | None = None
    completed: bool = False
    completed_date: date | None = None


@dataclass(frozen=True, kw_only=True)
class SimilarProfessionalInput:
    name: str
    team: str | None = None
    position: str | None = None
    reason: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreateReport:
    """Write a report card for a player.

    Attributes:
        player_id: Player the report is about.
        period_start: Start of the reporting period.
        period_end: End of the reporting period.
        overall_rating: Rating out of 10.
        strengths: Ordered strengths.
        areas_for_improvement: Ordered areas to work on.
        coach_comments: Free text.
        development_actions: Agreed actions.
        similar_professionals: Professional comparisons.
        auth_id: Caller's identity provider user id, used for ``created_by``.
    """

    player_id: UUID | None
    period_start: date | None = None
    period_end: date | None = None
    overall_rating: float | None = None
    strengths: list[str] = field(default_factory=list)
    areas_for_improvement: list[str] = field(default_factory=list)
    coach_comments: str | None = None
    development_actions: list[DevelopmentActionInput] = field(default_factory=list)
    similar_professionals: list[SimilarProfessionalInput] = field(
        default_factory=list
    )
    auth_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateReport:
    report_id: UUID
    period_start: date | None = None
    period_end: date | None = None
    overall_rating: float | None = None
    strengths: list[str] = field(default_factory=list)
    areas_for_improvement: list[str] = field(default_factory=list)
    coach_comments: str | None = None
    development_actions: list[DevelopmentActionInput] = field(default_factory=list)
    similar_professionals: list[SimilarProfessionalInput] = field(
        default_factory=list
    )


_PLAN_RULES = (
    Required("title"),
    MaxLength("title", 200),
    MaxLength("description", 2000),
    Required("status"),
    OneOf("status", PlanStatus.labels()),
    MaxLength("coach_notes", 4000),
    Required("goals[].goal"),
    MaxLength("goals[].goal", 500),
    Range("goals[].progress", 0, 100),
)

CREATE_PLAN_RULES = (Required("player_id"), *_PLAN_RULES)

UPDATE_PLAN_RULES = _PLAN_RULES

_REPORT_RULES = (
    Range("overall_rating", 0, 10),
    MaxLength("coach_comments", 4000),
    Required("development_actions[].goal"),
    MaxLength("development_actions[].goal", 500),
    Required("similar_professionals[].name"),
    MaxLength("similar_professionals[].name", 200),
    MaxLength("similar_professionals[].team", 200),
    MaxLength("similar_professionals[].position", 50),
)

CREATE_REPORT_RULES = (Required("player_id"), *_REPORT_RULES)

UPDATE_REPORT_RULES = _REPORT_RULES
