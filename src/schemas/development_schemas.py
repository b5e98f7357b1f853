"""Development plan and progress report schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from src.application.commands.development_commands import (
    CreateDevelopmentPlan,
    CreateReport,
    DevelopmentActionInput,
    GoalInput,
    SimilarProfessionalInput,
    UpdateDevelopmentPlan,
    UpdateReport,
)
from src.schemas.common_schemas import CamelModel, CamelResponse


# =============================================================================
# Development plans
# =============================================================================


class GoalRequest(CamelModel):
    goal: str | None = None
    actions: list[str] = Field(default_factory=list)
    start_date: date | None = None
    target_date: date | None = None
    progress: int = 0
    completed: bool = False
    completed_date: date | None = None


class DevelopmentPlanRequest(CamelModel):
    title: str | None = None
    description: str | None = None
    period_start: date | None = None
    period_end: date | None = None
    status: str = Field("active", examples=["active", "completed", "archived"])
    coach_notes: str | None = None
    goals: list[GoalRequest] = Field(default_factory=list)

    def _fields(self) -> dict:
        data = self.model_dump(exclude={"goals", "player_id"})
        data["goals"] = [GoalInput(**goal.model_dump()) for goal in self.goals]
        return data


class CreateDevelopmentPlanRequest(DevelopmentPlanRequest):
    player_id: UUID | None = None

    def to_command(self, auth_id: str) -> CreateDevelopmentPlan:
        return CreateDevelopmentPlan(
            player_id=self.player_id, auth_id=auth_id, **self._fields()
        )


class UpdateDevelopmentPlanRequest(DevelopmentPlanRequest):
    def to_command(self, plan_id: UUID) -> UpdateDevelopmentPlan:
        return UpdateDevelopmentPlan(plan_id=plan_id, **self._fields())


class GoalResponse(CamelResponse):
    id: UUID
    goal: str
    actions: list[str]
    start_date: date | None
    target_date: date | None
    progress: int
    completed: bool
    completed_date: date | None


class DevelopmentPlanResponse(CamelResponse):
    id: UUID
    player_id: UUID
    title: str
    description: str | None
    period_start: date | None
    period_end: date | None
    status: str
    coach_notes: str | None
    goals: list[GoalResponse] = Field(default_factory=list)
    created_by: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PlanPlayerResponse(CamelResponse):
    id: UUID
    first_name: str
    last_name: str
    nickname: str | None
    photo_url: str | None
    preferred_positions: list[str]
    age_group_ids: list[UUID]
    team_ids: list[UUID]


class DevelopmentPlanListItemResponse(DevelopmentPlanResponse):
    """Plan in club, age group and team lists, with its player."""

    player: PlanPlayerResponse | None = None


# =============================================================================
# Progress reports
# =============================================================================


class DevelopmentActionRequest(CamelModel):
    goal: str | None = None
    actions: list[str] = Field(default_factory=list)
    start_date: date | None = None
    target_date: date | None = None
    completed: bool = False
    completed_date: date | None = None


class SimilarProfessionalRequest(CamelModel):
    name: str | None = None
    team: str | None = None
    position: str | None = None
    reason: str | None = None


class ReportRequest(CamelModel):
    period_start: date | None = None
    period_end: date | None = None
    overall_rating: float | None = None
    strengths: list[str] = Field(default_factory=list)
    areas_for_improvement: list[str] = Field(default_factory=list)
    coach_comments: str | None = None
    development_actions: list[DevelopmentActionRequest] = Field(default_factory=list)
    similar_professionals: list[SimilarProfessionalRequest] = Field(
        default_factory=list
    )

    def _fields(self) -> dict:
        data = self.model_dump(
            exclude={"development_actions", "similar_professionals", "player_id"}
        )
        data["development_actions"] = [
            DevelopmentActionInput(**action.model_dump())
            for action in self.development_actions
        ]
        data["similar_professionals"] = [
            SimilarProfessionalInput(**professional.model_dump())
            for professional in self.similar_professionals
        ]
        return data


class CreateReportRequest(ReportRequest):
    player_id: UUID | None = None

    def to_command(self, auth_id: str) -> CreateReport:
        return CreateReport(player_id=self.player_id, auth_id=auth_id, **self._fields())


class UpdateReportRequest(ReportRequest):
    def to_command(self, report_id: UUID) -> UpdateReport:
        return UpdateReport(report_id=report_id, **self._fields())


class DevelopmentActionResponse(CamelResponse):
    id: UUID
    goal: str
    actions: list[str]
    start_date: date | None
    target_date: date | None
    completed: bool
    completed_date: date | None


class SimilarProfessionalResponse(CamelResponse):
    id: UUID
    name: str
    team: str | None
    position: str | None
    reason: str | None


class ReportResponse(CamelResponse):
    id: UUID
    player_id: UUID
    period_start: date | None
    period_end: date | None
    overall_rating: float | None
    strengths: list[str]
    areas_for_improvement: list[str]
    coach_comments: str | None
    development_actions: list[DevelopmentActionResponse] = Field(default_factory=list)
    similar_professionals: list[SimilarProfessionalResponse] = Field(
        default_factory=list
    )
    created_by: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
