"""EvaluationRepository - SQLAlchemy implementation of EvaluationRepository protocol.

Each write (add, replace, delete) runs in a single transaction covering the
evaluation row and all of its attribute rows.
"""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.evaluation import AttributeEvaluation, EvaluationAttribute
from src.infrastructure.persistence.models.coach import Coach as CoachModel
from src.infrastructure.persistence.models.evaluation import (
    AttributeEvaluation as AttributeEvaluationModel,
)
from src.infrastructure.persistence.models.evaluation import (
    EvaluationAttribute as EvaluationAttributeModel,
)
from src.infrastructure.persistence.transactions import atomic


class EvaluationRepository:
    """SQLAlchemy implementation of EvaluationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, evaluation_id: UUID) -> AttributeEvaluation | None:
        evaluations = await self._load(
            self._select().where(AttributeEvaluationModel.id == evaluation_id)
        )
        return evaluations[0] if evaluations else None

    async def list_by_player(
        self, player_id: UUID, limit: int = 12
    ) -> list[AttributeEvaluation]:
        """List a player's evaluations, newest first.

        Args:
            player_id: Evaluated player.
            limit: Maximum number of evaluations.

        Returns:
            Evaluations with attributes ordered by name and coach names set.
        """
        stmt = (
            self._select()
            .where(AttributeEvaluationModel.player_id == player_id)
            .order_by(AttributeEvaluationModel.evaluated_at.desc())
            .limit(limit)
        )
        return await self._load(stmt)

    async def add(self, evaluation: AttributeEvaluation) -> None:
        async with atomic(self.session):
            model = AttributeEvaluationModel(
                id=evaluation.id,
                player_id=evaluation.player_id,
                evaluated_by=evaluation.evaluated_by,
            )
            self._update_model(model, evaluation)
            self.session.add(model)
            await self.session.flush()
            self._add_attributes(evaluation)

    async def replace(self, evaluation: AttributeEvaluation) -> None:
        """Update the evaluation row and replace all of its attributes.

        Args:
            evaluation: Evaluation with the new state.
        """
        async with atomic(self.session):
            stmt = select(AttributeEvaluationModel).where(
                AttributeEvaluationModel.id == evaluation.id
            )
            result = await self.session.execute(stmt)
            model = result.scalar_one()
            self._update_model(model, evaluation)

            await self.session.execute(
                delete(EvaluationAttributeModel).where(
                    EvaluationAttributeModel.evaluation_id == evaluation.id
                )
            )
            self._add_attributes(evaluation)

    async def delete(self, evaluation_id: UUID) -> None:
        """Delete the evaluation's attributes, then the evaluation itself."""
        async with atomic(self.session):
            await self.session.execute(
                delete(EvaluationAttributeModel).where(
                    EvaluationAttributeModel.evaluation_id == evaluation_id
                )
            )
            await self.session.execute(
                delete(AttributeEvaluationModel).where(
                    AttributeEvaluationModel.id == evaluation_id
                )
            )

    def _add_attributes(self, evaluation: AttributeEvaluation) -> None:
        for attribute in evaluation.attributes:
            self.session.add(
                EvaluationAttributeModel(
                    evaluation_id=evaluation.id,
                    attribute_name=attribute.attribute_name,
                    rating=attribute.rating,
                    notes=attribute.notes,
                )
            )

    def _select(self) -> Select[tuple[AttributeEvaluationModel, str | None, str | None]]:
        return select(
            AttributeEvaluationModel, CoachModel.first_name, CoachModel.last_name
        ).outerjoin(CoachModel, CoachModel.id == AttributeEvaluationModel.evaluated_by)

    async def _load(
        self, stmt: Select[tuple[AttributeEvaluationModel, str | None, str | None]]
    ) -> list[AttributeEvaluation]:
        result = await self.session.execute(stmt)
        rows = result.all()
        if not rows:
            return []

        attributes: dict[UUID, list[EvaluationAttribute]] = defaultdict(list)
        attribute_rows = await self.session.execute(
            select(EvaluationAttributeModel)
            .where(
                EvaluationAttributeModel.evaluation_id.in_([row[0].id for row in rows])
            )
            .order_by(EvaluationAttributeModel.attribute_name)
        )
        for attribute in attribute_rows.scalars().all():
            attributes[attribute.evaluation_id].append(
                EvaluationAttribute(
                    attribute_name=attribute.attribute_name,
                    rating=attribute.rating,
                    notes=attribute.notes,
                )
            )

        evaluations = []
        for model, first_name, last_name in rows:
            evaluation = self._to_domain(model)
            evaluation.attributes = attributes.get(model.id, [])
            if first_name is not None:
                evaluation.coach_name = f"{first_name} {last_name}"
            evaluations.append(evaluation)
        return evaluations

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: AttributeEvaluationModel) -> AttributeEvaluation:
        return AttributeEvaluation(
            id=model.id,
            player_id=model.player_id,
            evaluated_by=model.evaluated_by,
            evaluated_at=model.evaluated_at,
            overall_rating=model.overall_rating,
            coach_notes=model.coach_notes,
            period_start=model.period_start,
            period_end=model.period_end,
        )

    def _update_model(
        self, model: AttributeEvaluationModel, entity: AttributeEvaluation
    ) -> None:
        """Update mutable fields; player and evaluating coach never change."""
        model.evaluated_at = entity.evaluated_at
        model.overall_rating = entity.overall_rating
        model.coach_notes = entity.coach_notes
        model.period_start = entity.period_start
        model.period_end = entity.period_end
