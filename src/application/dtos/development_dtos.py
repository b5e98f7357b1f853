"""Development plan and report card DTOs (Data Transfer Objects)."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from src.domain.entities.development_plan import DevelopmentPlan
from src.domain.entities.player import Player
from src.domain.entities.report import Report


@dataclass
class GoalResult:
    id: UUID
    goal: str
    actions: list[str]
    start_date: date | None
    target_date: date | None
    progress: int
    completed: bool
    completed_date: date | None


@dataclass
class DevelopmentPlanResult:
    """Development plan with goals ordered by start date."""

    id: UUID
    player_id: UUID
    title: str
    description: str | None
    period_start: date | None
    period_end: date | None
    status: str
    coach_notes: str | None
    goals: list[GoalResult] = field(default_factory=list)
    created_by: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class PlanPlayerResult:
    """Player a plan belongs to, as shown in plan lists."""

    id: UUID
    first_name: str
    last_name: str
    nickname: str | None
    photo_url: str | None
    preferred_positions: list[str]
    age_group_ids: list[UUID]
    team_ids: list[UUID]


@dataclass
class DevelopmentPlanListItemResult(DevelopmentPlanResult):
    player: PlanPlayerResult | None = None


@dataclass
class DevelopmentActionResult:
    id: UUID
    goal: str
    actions: list[str]
    start_date: date | None
    target_date: date | None
    completed: bool
    completed_date: date | None


@dataclass
class SimilarProfessionalResult:
    id: UUID
    name: str
    team: str | None
    position: str | None
    reason: str | None


@dataclass
class ReportResult:
    """Report card with development actions and professional comparisons.

    Attributes:
        id: Report identifier.
        player_id: Player the report is about.
        period_start: Start of the reporting period.
        period_end: End of the reporting period.
        overall_rating: Rating out of 10.
        strengths: Ordered strengths.
        areas_for_improvement: Ordered areas to work on.
        coach_comments: Free text.
        development_actions: Agreed actions.
        similar_professionals: Professional comparisons.
        created_by: Coach who wrote the report.
        created_at: When the report was written.
    """

    id: UUID
    player_id: UUID
    period_start: date | None
    period_end: date | None
    overall_rating: float | None
    strengths: list[str]
    areas_for_improvement: list[str]
    coach_comments: str | None
    development_actions: list[DevelopmentActionResult] = field(default_factory=list)
    similar_professionals: list[SimilarProfessionalResult] = field(
        default_factory=list
    )
    created_by: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


def to_plan_result(plan: DevelopmentPlan) -> DevelopmentPlanResult:
    return DevelopmentPlanResult(
        id=plan.id,
        player_id=plan.player_id,
        title=plan.title,
        description=plan.description,
        period_start=plan.period_start,
        period_end=plan.period_end,
        status=plan.status.label,
        coach_notes=plan.coach_notes,
        goals=[
            GoalResult(
                id=g.id,
                goal=g.goal,
                actions=list(g.actions),
                start_date=g.start_date,
                target_date=g.target_date,
                progress=g.progress,
                completed=g.completed,
                completed_date=g.completed_date,
            )
            for g in plan.goals
        ],
        created_by=plan.created_by,
        created_at=plan.created_at,
        updated_at=plan.updated_at,
    )


def to_report_result(report: Report) -> ReportResult:
    return ReportResult(
        id=report.id,
        player_id=report.player_id,
        period_start=report.period_start,
        period_end=report.period_end,
        overall_rating=report.overall_rating,
        strengths=list(report.strengths),
        areas_for_improvement=list(report.areas_for_improvement),
        coach_comments=report.coach_comments,
        development_actions=[
            DevelopmentActionResult(
                id=a.id,
                goal=a.goal,
                actions=list(a.actions),
                start_date=a.start_date,
                target_date=a.target_date,
                completed=a.completed,
                completed_date=a.completed_date,
            )
            for a in report.development_actions
        ],
        similar_professionals=[
            SimilarProfessionalResult(
                id=p.id, name=p.name, team=p.team, position=p.position, reason=p.reason
            )
            for p in report.similar_professionals
        ],
        created_by=report.created_by,
        created_at=report.created_at,
        updated_at=report.updated_at,
    )


def to_plan_list_item(
    plan: DevelopmentPlan, player: Player | None
) -> DevelopmentPlanListItemResult:
    base = to_plan_result(plan)
    return DevelopmentPlanListItemResult(
        **vars(base),
        player=(
            PlanPlayerResult(
                id=player.id,
                first_name=player.first_name,
                last_name=player.last_name,
                nickname=player.nickname,
                photo_url=player.photo,
                preferred_positions=list(player.preferred_positions),
                age_group_ids=list(player.age_group_ids),
                team_ids=list(player.team_ids),
            )
            if player is not None
            else None
        ),
    )
