"""Development plan and report card command handlers.

Both aggregates belong to a player. Child rows (goals, development actions,
professional comparisons) are replaced on every write; ``created_by`` is
the caller's coach record when there is one.

Reference:
    - src/application/commands/development_commands.py
    - src/application/services/caller_identity.py
"""

from datetime import date

from uuid_extensions import uuid7

from src.application.commands.development_commands import (
    CreateDevelopmentPlan,
    CreateReport,
    DevelopmentActionInput,
    GoalInput,
    SimilarProfessionalInput,
    UpdateDevelopmentPlan,
    UpdateReport,
)
from src.application.dtos.development_dtos import (
    DevelopmentPlanResult,
    ReportResult,
    to_plan_result,
    to_report_result,
)
from src.application.services.caller_identity import resolve_caller_coach
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.development_plan import DevelopmentGoal, DevelopmentPlan
from src.domain.entities.report import DevelopmentAction, Report, SimilarProfessional
from src.domain.enums import PlanStatus
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.development_plan_repository import (
    DevelopmentPlanRepository,
)
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.report_repository import ReportRepository
from src.domain.protocols.user_repository import UserRepository


class DevelopmentError:
    """Development plan and report error messages."""

    INVALID_PERIOD = "Period start must be on or before period end"
    INVALID_STATUS = f"Invalid status. Must be one of: {', '.join(PlanStatus.labels())}."


def _check_period(start: date | None, end: date | None) -> ValidationError | None:
    if start is not None and end is not None and start > end:
        return ValidationError(
            code=ErrorCode.INVALID_DATE_RANGE,
            message=DevelopmentError.INVALID_PERIOD,
            field="periodStart",
        )
    return None


def _parse_status(label: str) -> PlanStatus | ValidationError:
    status = PlanStatus.from_label(label or "")
    if status is None:
        return ValidationError(
            code=ErrorCode.INVALID_ENUM_VALUE,
            message=DevelopmentError.INVALID_STATUS,
            field="status",
        )
    return status


def _goals(inputs: list[GoalInput]) -> list[DevelopmentGoal]:
    return [
        DevelopmentGoal(
            id=uuid7(),
            goal=g.goal,
            actions=list(g.actions),
            start_date=g.start_date,
            target_date=g.target_date,
            progress=g.progress,
            completed=g.completed,
            completed_date=g.completed_date,
        )
        for g in inputs
    ]


def _actions(inputs: list[DevelopmentActionInput]) -> list[DevelopmentAction]:
    return [
        DevelopmentAction(
            id=uuid7(),
            goal=a.goal,
            actions=list(a.actions),
            start_date=a.start_date,
            target_date=a.target_date,
            completed=a.completed,
            completed_date=a.completed_date,
        )
        for a in inputs
    ]


def _professionals(
    inputs: list[SimilarProfessionalInput],
) -> list[SimilarProfessional]:
    return [
        SimilarProfessional(
            id=uuid7(), name=p.name, team=p.team, position=p.position, reason=p.reason
        )
        for p in inputs
    ]


# =============================================================================
# Development plans
# =============================================================================


class CreateDevelopmentPlanHandler:
    """Handler for CreateDevelopmentPlan command.

    Dependencies (injected via constructor):
        - PlayerRepository: Player existence check
        - DevelopmentPlanRepository: For persistence
        - UserRepository, CoachRepository: ``created_by`` from the caller
    """

    def __init__(
        self,
        player_repo: PlayerRepository,
        plan_repo: DevelopmentPlanRepository,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
    ) -> None:
        self._player_repo = player_repo
        self._plan_repo = plan_repo
        self._user_repo = user_repo
        self._coach_repo = coach_repo

    async def handle(
        self, cmd: CreateDevelopmentPlan
    ) -> Result[DevelopmentPlanResult, DomainError]:
        """Handle CreateDevelopmentPlan command.

        Returns:
            Success(DevelopmentPlanResult): Plan with its goals.
            Failure(NotFoundError): Player does not exist.
            Failure(ValidationError): Period start after period end, or
                unknown status.
        """
        player = (
            await self._player_repo.find_by_id(cmd.player_id) if cmd.player_id else None
        )
        if player is None:
            return Failure(
                error=not_found("Player", cmd.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )

        period_error = _check_period(cmd.period_start, cmd.period_end)
        if period_error is not None:
            return Failure(error=period_error)
        status = _parse_status(cmd.status)
        if isinstance(status, ValidationError):
            return Failure(error=status)

        coach = await resolve_caller_coach(
            cmd.auth_id, self._user_repo, self._coach_repo
        )

        plan = DevelopmentPlan(
            id=uuid7(),
            player_id=player.id,
            title=cmd.title,
            period_start=cmd.period_start,
            period_end=cmd.period_end,
            status=status,
            description=cmd.description,
            coach_notes=cmd.coach_notes,
            goals=_goals(cmd.goals),
            created_by=coach.id if coach else None,
        )
        await self._plan_repo.save(plan)

        saved = await self._plan_repo.find_by_id(plan.id) or plan
        return Success(value=to_plan_result(saved))


class UpdateDevelopmentPlanHandler:
    """Handler for UpdateDevelopmentPlan command; goals are replaced."""

    def __init__(self, plan_repo: DevelopmentPlanRepository) -> None:
        self._plan_repo = plan_repo

    async def handle(
        self, cmd: UpdateDevelopmentPlan
    ) -> Result[DevelopmentPlanResult, DomainError]:
        plan = await self._plan_repo.find_by_id(cmd.plan_id)
        if plan is None:
            return Failure(
                error=not_found(
                    "DevelopmentPlan", cmd.plan_id, ErrorCode.DEVELOPMENT_PLAN_NOT_FOUND
                )
            )

        period_error = _check_period(cmd.period_start, cmd.period_end)
        if period_error is not None:
            return Failure(error=period_error)
        status = _parse_status(cmd.status)
        if isinstance(status, ValidationError):
            return Failure(error=status)

        plan.title = cmd.title
        plan.period_start = cmd.period_start
        plan.period_end = cmd.period_end
        plan.status = status
        plan.description = cmd.description
        plan.coach_notes = cmd.coach_notes
        plan.goals = _goals(cmd.goals)

        await self._plan_repo.save(plan)

        saved = await self._plan_repo.find_by_id(plan.id) or plan
        return Success(value=to_plan_result(saved))


# =============================================================================
# Report cards
# =============================================================================


class CreateReportHandler:
    """Handler for CreateReport command."""

    def __init__(
        self,
        player_repo: PlayerRepository,
        report_repo: ReportRepository,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
    ) -> None:
        self._player_repo = player_repo
        self._report_repo = report_repo
        self._user_repo = user_repo
        self._coach_repo = coach_repo

    async def handle(self, cmd: CreateReport) -> Result[ReportResult, DomainError]:
        player = (
            await self._player_repo.find_by_id(cmd.player_id) if cmd.player_id else None
        )
        if player is None:
            return Failure(
                error=not_found("Player", cmd.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )

        period_error = _check_period(cmd.period_start, cmd.period_end)
        if period_error is not None:
            return Failure(error=period_error)

        coach = await resolve_caller_coach(
            cmd.auth_id, self._user_repo, self._coach_repo
        )

        report = Report(
            id=uuid7(),
            player_id=player.id,
            period_start=cmd.period_start,
            period_end=cmd.period_end,
            overall_rating=cmd.overall_rating,
            strengths=list(cmd.strengths),
            areas_for_improvement=list(cmd.areas_for_improvement),
            coach_comments=cmd.coach_comments,
            development_actions=_actions(cmd.development_actions),
            similar_professionals=_professionals(cmd.similar_professionals),
            created_by=coach.id if coach else None,
        )
        await self._report_repo.save(report)

        return Success(value=to_report_result(report))


class UpdateReportHandler:
    """Handler for UpdateReport command; child rows are replaced."""

    def __init__(self, report_repo: ReportRepository) -> None:
        self._report_repo = report_repo

    async def handle(self, cmd: UpdateReport) -> Result[ReportResult, DomainError]:
        report = await self._report_repo.find_by_id(cmd.report_id)
        if report is None:
            return Failure(
                error=not_found("Report", cmd.report_id, ErrorCode.REPORT_NOT_FOUND)
            )

        period_error = _check_period(cmd.period_start, cmd.period_end)
        if period_error is not None:
            return Failure(error=period_error)

        report.period_start = cmd.period_start
        report.period_end = cmd.period_end
        report.overall_rating = cmd.overall_rating
        report.strengths = list(cmd.strengths)
        report.areas_for_improvement = list(cmd.areas_for_improvement)
        report.coach_comments = cmd.coach_comments
        report.development_actions = _actions(cmd.development_actions)
        report.similar_professionals = _professionals(cmd.similar_professionals)

        await self._report_repo.save(report)

        return Success(value=to_report_result(report))
