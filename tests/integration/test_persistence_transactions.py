"""Integration tests for transaction boundaries and tolerant column parsing.

Tests cover:
- atomic: commit on success, rollback on exception
- EvaluationRepository.delete removes attribute rows with the evaluation,
  and leaves both in place when a statement fails
- Malformed list-valued columns read as empty lists
"""

from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from sqlalchemy import func, select, update
from uuid_extensions import uuid7

from src.domain.entities.evaluation import AttributeEvaluation, EvaluationAttribute
from src.infrastructure.persistence.models import AgeGroup as AgeGroupModel
from src.infrastructure.persistence.models import (
    AttributeEvaluation as AttributeEvaluationModel,
)
from src.infrastructure.persistence.models import Club as ClubModel
from src.infrastructure.persistence.models import Coach as CoachModel
from src.infrastructure.persistence.models import (
    EvaluationAttribute as EvaluationAttributeModel,
)
from src.infrastructure.persistence.repositories import (
    AgeGroupRepository,
    EvaluationRepository,
)
from src.infrastructure.persistence.transactions import atomic
from tests.conftest import seed_club_tree


@pytest.mark.integration
class TestAtomic:
    @pytest.mark.asyncio
    async def test_commits_on_success(self, database):
        club_id = uuid7()
        async with database.async_session() as session:
            async with atomic(session):
                session.add(ClubModel(id=club_id, name="Vale FC", short_name="VFC"))

        async with database.async_session() as session:
            assert await session.get(ClubModel, club_id) is not None

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, database):
        club_id = uuid7()
        async with database.async_session() as session:
            with pytest.raises(RuntimeError):
                async with atomic(session):
                    session.add(ClubModel(id=club_id, name="Vale FC", short_name="VFC"))
                    await session.flush()
                    raise RuntimeError("boom")

        async with database.async_session() as session:
            assert await session.get(ClubModel, club_id) is None


@pytest.mark.integration
class TestEvaluationRepository:
    @pytest.mark.asyncio
    async def test_add_then_delete_removes_attributes(self, session):
        # Arrange
        tree = await seed_club_tree(session, player_count=1)
        coach_id = uuid7()
        session.add(
            CoachModel(id=coach_id, club_id=tree.club_id, first_name="Sam", last_name="Reid")
        )
        await session.commit()
        repo = EvaluationRepository(session=session)
        evaluation = AttributeEvaluation(
            id=uuid7(),
            player_id=tree.player_ids[0],
            evaluated_by=coach_id,
            evaluated_at=datetime.now(UTC),
            overall_rating=75,
            attributes=[
                EvaluationAttribute(attribute_name="pace", rating=80),
                EvaluationAttribute(attribute_name="vision", rating=70),
            ],
        )
        await repo.add(evaluation)

        stored = await repo.find_by_id(evaluation.id)
        assert stored is not None
        assert stored.coach_name == "Sam Reid"
        assert [a.attribute_name for a in stored.attributes] == ["pace", "vision"]

        # Act
        await repo.delete(evaluation.id)

        # Assert
        assert await repo.find_by_id(evaluation.id) is None
        remaining = await session.execute(
            select(func.count(EvaluationAttributeModel.id)).where(
                EvaluationAttributeModel.evaluation_id == evaluation.id
            )
        )
        assert remaining.scalar_one() == 0
        assert await repo.list_by_player(tree.player_ids[0]) == []

    @pytest.mark.asyncio
    async def test_failed_delete_leaves_evaluation_and_attributes(
        self, session, database
    ):
        # Arrange
        tree = await seed_club_tree(session, player_count=1)
        coach_id = uuid7()
        session.add(
            CoachModel(id=coach_id, club_id=tree.club_id, first_name="Sam", last_name="Reid")
        )
        await session.commit()
        repo = EvaluationRepository(session=session)
        evaluation = AttributeEvaluation(
            id=uuid7(),
            player_id=tree.player_ids[0],
            evaluated_by=coach_id,
            evaluated_at=datetime.now(UTC),
            overall_rating=60,
            attributes=[EvaluationAttribute(attribute_name="pace", rating=60)],
        )
        await repo.add(evaluation)

        real_execute = session.execute
        calls = 0

        async def fail_second_statement(*args, **kwargs):
            nonlocal calls
            calls += 1
            if calls == 2:
                raise RuntimeError("database went away")
            return await real_execute(*args, **kwargs)

        # Act
        with patch.object(session, "execute", side_effect=fail_second_statement):
            with pytest.raises(RuntimeError):
                await repo.delete(evaluation.id)

        # Assert
        assert calls == 2
        async with database.async_session() as fresh:
            assert await fresh.get(AttributeEvaluationModel, evaluation.id) is not None
            remaining = await fresh.execute(
                select(func.count(EvaluationAttributeModel.id)).where(
                    EvaluationAttributeModel.evaluation_id == evaluation.id
                )
            )
            assert remaining.scalar_one() == 1


@pytest.mark.integration
class TestTolerantColumns:
    @pytest.mark.asyncio
    async def test_malformed_seasons_read_as_empty(self, session):
        tree = await seed_club_tree(session, player_count=0)
        await session.execute(
            update(AgeGroupModel)
            .where(AgeGroupModel.id == tree.age_group_id)
            .values(seasons="[bad")
        )
        await session.commit()

        age_group = await AgeGroupRepository(session=session).find_by_id(
            tree.age_group_id
        )

        assert age_group is not None
        assert age_group.seasons == []
        assert age_group.name == "Under 10s"
