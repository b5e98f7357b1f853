"""DevelopmentPlanRepository - SQLAlchemy implementation of DevelopmentPlanRepository protocol."""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.development_plan import DevelopmentGoal, DevelopmentPlan
from src.domain.enums.plan_status import PlanStatus
from src.infrastructure.persistence.columns import dump_text_list, parse_text_list
from src.infrastructure.persistence.models.development_plan import (
    DevelopmentGoal as DevelopmentGoalModel,
)
from src.infrastructure.persistence.models.development_plan import (
    DevelopmentPlan as DevelopmentPlanModel,
)
from src.infrastructure.persistence.transactions import atomic


class DevelopmentPlanRepository:
    """SQLAlchemy implementation of DevelopmentPlanRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, plan_id: UUID) -> DevelopmentPlan | None:
        """Find plan by ID with goals ordered by start date.

        Args:
            plan_id: Plan's unique identifier.

        Returns:
            Domain DevelopmentPlan entity if found, None otherwise.
        """
        stmt = select(DevelopmentPlanModel).where(DevelopmentPlanModel.id == plan_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        goals = await self.session.execute(
            select(DevelopmentGoalModel)
            .where(DevelopmentGoalModel.plan_id == plan_id)
            .order_by(
                DevelopmentGoalModel.start_date.is_(None),
                DevelopmentGoalModel.start_date,
                DevelopmentGoalModel.created_at,
            )
        )
        plan = self._to_domain(model)
        plan.goals = [self._goal_to_domain(goal) for goal in goals.scalars().all()]
        return plan

    async def list_by_players(self, player_ids: list[UUID]) -> list[DevelopmentPlan]:
        if not player_ids:
            return []
        stmt = (
            select(DevelopmentPlanModel)
            .where(DevelopmentPlanModel.player_id.in_(player_ids))
            .order_by(
                DevelopmentPlanModel.created_at.desc(), DevelopmentPlanModel.id.desc()
            )
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()
        if not models:
            return []

        goals: dict[UUID, list[DevelopmentGoal]] = defaultdict(list)
        rows = await self.session.execute(
            select(DevelopmentGoalModel)
            .where(DevelopmentGoalModel.plan_id.in_([model.id for model in models]))
            .order_by(
                DevelopmentGoalModel.start_date.is_(None),
                DevelopmentGoalModel.start_date,
                DevelopmentGoalModel.created_at,
            )
        )
        for goal in rows.scalars().all():
            goals[goal.plan_id].append(self._goal_to_domain(goal))

        plans: list[DevelopmentPlan] = []
        for model in models:
            plan = self._to_domain(model)
            plan.goals = goals.get(model.id, [])
            plans.append(plan)
        return plans

    async def save(self, plan: DevelopmentPlan) -> None:
        """Create or update plan, replacing its goals atomically."""
        async with atomic(self.session):
            stmt = select(DevelopmentPlanModel).where(
                DevelopmentPlanModel.id == plan.id
            )
            result = await self.session.execute(stmt)
            existing = result.scalar_one_or_none()

            if existing is None:
                model = DevelopmentPlanModel(id=plan.id, player_id=plan.player_id)
                self._update_model(model, plan)
                self.session.add(model)
                await self.session.flush()
            else:
                self._update_model(existing, plan)

            await self.session.execute(
                delete(DevelopmentGoalModel).where(
                    DevelopmentGoalModel.plan_id == plan.id
                )
            )
            for goal in plan.goals:
                self.session.add(
                    DevelopmentGoalModel(
                        plan_id=plan.id,
                        goal=goal.goal,
                        actions=dump_text_list(goal.actions),
                        start_date=goal.start_date,
                        target_date=goal.target_date,
                        progress=goal.progress,
                        completed=goal.completed,
                        completed_date=goal.completed_date,
                    )
                )

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: DevelopmentPlanModel) -> DevelopmentPlan:
        return DevelopmentPlan(
            id=model.id,
            player_id=model.player_id,
            title=model.title,
            description=model.description,
            period_start=model.period_start,
            period_end=model.period_end,
            status=PlanStatus.from_code(model.status),
            coach_notes=model.coach_notes,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _goal_to_domain(self, model: DevelopmentGoalModel) -> DevelopmentGoal:
        return DevelopmentGoal(
            id=model.id,
            goal=model.goal,
            actions=parse_text_list(model.actions),
            start_date=model.start_date,
            target_date=model.target_date,
            progress=model.progress,
            completed=model.completed,
            completed_date=model.completed_date,
        )

    def _update_model(self, model: DevelopmentPlanModel, entity: DevelopmentPlan) -> None:
        model.title = entity.title
        model.description = entity.description
        model.period_start = entity.period_start
        model.period_end = entity.period_end
        model.status = int(entity.status)
        model.coach_notes = entity.coach_notes
        model.created_by = entity.created_by
