"""ReportRepository - SQLAlchemy implementation of ReportRepository protocol."""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.report import DevelopmentAction, Report, SimilarProfessional
from src.infrastructure.persistence.columns import dump_text_list, parse_text_list
from src.infrastructure.persistence.models.report import Report as ReportModel
from src.infrastructure.persistence.models.report import (
    ReportDevelopmentAction as ReportDevelopmentActionModel,
)
from src.infrastructure.persistence.models.report import (
    ReportSimilarProfessional as ReportSimilarProfessionalModel,
)
from src.infrastructure.persistence.transactions import atomic


class ReportRepository:
    """SQLAlchemy implementation of ReportRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, report_id: UUID) -> Report | None:
        reports = await self._load(
            select(ReportModel).where(ReportModel.id == report_id)
        )
        return reports[0] if reports else None

    async def list_by_player(self, player_id: UUID) -> list[Report]:
        stmt = (
            select(ReportModel)
            .where(ReportModel.player_id == player_id)
            .order_by(ReportModel.created_at.desc())
        )
        return await self._load(stmt)

    async def save(self, report: Report) -> None:
        """Create or update report, replacing actions and comparisons atomically.

        Args:
            report: Report entity to persist.
        """
        async with atomic(self.session):
            stmt = select(ReportModel).where(ReportModel.id == report.id)
            result = await self.session.execute(stmt)
            existing = result.scalar_one_or_none()

            if existing is None:
                model = ReportModel(id=report.id, player_id=report.player_id)
                self._update_model(model, report)
                self.session.add(model)
                await self.session.flush()
            else:
                self._update_model(existing, report)

            await self.session.execute(
                delete(ReportDevelopmentActionModel).where(
                    ReportDevelopmentActionModel.report_id == report.id
                )
            )
            await self.session.execute(
                delete(ReportSimilarProfessionalModel).where(
                    ReportSimilarProfessionalModel.report_id == report.id
                )
            )
            for action in report.development_actions:
                self.session.add(
                    ReportDevelopmentActionModel(
                        report_id=report.id,
                        goal=action.goal,
                        actions=dump_text_list(action.actions),
                        start_date=action.start_date,
                        target_date=action.target_date,
                        completed=action.completed,
                        completed_date=action.completed_date,
                    )
                )
            for professional in report.similar_professionals:
                self.session.add(
                    ReportSimilarProfessionalModel(
                        report_id=report.id,
                        name=professional.name,
                        team=professional.team,
                        position=professional.position,
                        reason=professional.reason,
                    )
                )

    async def _load(self, stmt: Select[tuple[ReportModel]]) -> list[Report]:
        result = await self.session.execute(stmt)
        models = result.scalars().all()
        if not models:
            return []

        ids = [model.id for model in models]
        actions: dict[UUID, list[DevelopmentAction]] = defaultdict(list)
        action_rows = await self.session.execute(
            select(ReportDevelopmentActionModel)
            .where(ReportDevelopmentActionModel.report_id.in_(ids))
            .order_by(ReportDevelopmentActionModel.created_at)
        )
        for row in action_rows.scalars().all():
            actions[row.report_id].append(
                DevelopmentAction(
                    id=row.id,
                    goal=row.goal,
                    actions=parse_text_list(row.actions),
                    start_date=row.start_date,
                    target_date=row.target_date,
                    completed=row.completed,
                    completed_date=row.completed_date,
                )
            )

        professionals: dict[UUID, list[SimilarProfessional]] = defaultdict(list)
        professional_rows = await self.session.execute(
            select(ReportSimilarProfessionalModel)
            .where(ReportSimilarProfessionalModel.report_id.in_(ids))
            .order_by(ReportSimilarProfessionalModel.created_at)
        )
        for row in professional_rows.scalars().all():
            professionals[row.report_id].append(
                SimilarProfessional(
                    id=row.id,
                    name=row.name,
                    team=row.team,
                    position=row.position,
                    reason=row.reason,
                )
            )

        reports = []
        for model in models:
            report = self._to_domain(model)
            report.development_actions = actions.get(model.id, [])
            report.similar_professionals = professionals.get(model.id, [])
            reports.append(report)
        return reports

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: ReportModel) -> Report:
        return Report(
            id=model.id,
            player_id=model.player_id,
            period_start=model.period_start,
            period_end=model.period_end,
            overall_rating=model.overall_rating,
            strengths=parse_text_list(model.strengths),
            areas_for_improvement=parse_text_list(model.areas_for_improvement),
            coach_comments=model.coach_comments,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: ReportModel, entity: Report) -> None:
        model.period_start = entity.period_start
        model.period_end = entity.period_end
        model.overall_rating = entity.overall_rating
        model.strengths = dump_text_list(entity.strengths)
        model.areas_for_improvement = dump_text_list(entity.areas_for_improvement)
        model.coach_comments = entity.coach_comments
        model.created_by = entity.created_by
