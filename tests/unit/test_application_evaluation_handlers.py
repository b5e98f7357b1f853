"""Unit tests for player ability evaluation handlers.

Tests cover:
- Create: overall rating is the rounded mean, caller coach attribution,
  fallback coach, no coach available, out-of-range rating
- Delete: only the creating coach may delete; non-coaches are forbidden;
  current ratings are refreshed from the next latest evaluation
- Update: ownership check
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.evaluation_commands import (
    CreatePlayerAbilityEvaluation,
    DeletePlayerAbilityEvaluation,
    EvaluationAttributeInput,
    UpdatePlayerAbilityEvaluation,
)
from src.application.commands.handlers.evaluation_handlers import (
    CreatePlayerAbilityEvaluationHandler,
    DeletePlayerAbilityEvaluationHandler,
    UpdatePlayerAbilityEvaluationHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.entities.coach import Coach
from src.domain.entities.evaluation import (
    AttributeEvaluation,
    EvaluationAttribute,
    overall_from_ratings,
)
from src.domain.entities.player import Player
from src.domain.entities.user import User
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.evaluation_repository import EvaluationRepository
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.user_repository import UserRepository


# =============================================================================
# Test Fixtures
# =============================================================================


class Repos:
    """Mocked repositories shared by the evaluation handlers."""

    def __init__(self) -> None:
        self.player = AsyncMock(spec=PlayerRepository)
        self.evaluation = AsyncMock(spec=EvaluationRepository)
        self.user = AsyncMock(spec=UserRepository)
        self.coach = AsyncMock(spec=CoachRepository)


def create_coach(user_id=None) -> Coach:
    return Coach(
        id=uuid7(),
        club_id=uuid7(),
        first_name="Sam",
        last_name="Reid",
        user_id=user_id,
    )


def sign_in_as_coach(repos: Repos, auth_id: str) -> Coach:
    """Make ``auth_id`` resolve to a user with a coach record."""
    user = User(
        id=uuid7(), auth_id=auth_id, email="sam@example.com", first_name="Sam", last_name="Reid"
    )
    coach = create_coach(user_id=user.id)
    repos.user.find_by_auth_id.return_value = user
    repos.coach.find_by_user_id.return_value = coach
    return coach


def create_evaluation(player_id, coach_id, ratings=(70, 80)) -> AttributeEvaluation:
    attributes = [
        EvaluationAttribute(attribute_name=name, rating=rating)
        for name, rating in zip(("pace", "vision"), ratings, strict=False)
    ]
    return AttributeEvaluation(
        id=uuid7(),
        player_id=player_id,
        evaluated_by=coach_id,
        evaluated_at=datetime.now(UTC),
        overall_rating=overall_from_ratings([a.rating for a in attributes]),
        attributes=attributes,
    )


# =============================================================================
# Create
# =============================================================================


@pytest.mark.unit
class TestCreatePlayerAbilityEvaluationHandler:
    """Test CreatePlayerAbilityEvaluationHandler."""

    @pytest.mark.asyncio
    async def test_records_evaluation_for_caller_coach(self):
        """Test evaluation is attributed to the caller and ratings mirrored."""
        # Arrange
        repos = Repos()
        player = Player(id=uuid7(), club_id=uuid7(), first_name="Ada", last_name="Moss")
        repos.player.find_by_id.return_value = player
        coach = sign_in_as_coach(repos, "auth-123")
        handler = CreatePlayerAbilityEvaluationHandler(
            player_repo=repos.player,
            evaluation_repo=repos.evaluation,
            user_repo=repos.user,
            coach_repo=repos.coach,
            logger=MagicMock(),
        )
        stored = []
        repos.evaluation.add.side_effect = stored.append
        repos.evaluation.list_by_player.side_effect = lambda *_a, **_k: list(stored)

        # Act
        result = await handler.handle(
            CreatePlayerAbilityEvaluation(
                player_id=player.id,
                auth_id="auth-123",
                attributes=[
                    EvaluationAttributeInput(attribute_name="pace", rating=70),
                    EvaluationAttributeInput(attribute_name="vision", rating=76),
                ],
            )
        )

        # Assert
        assert isinstance(result, Success)
        evaluation = stored[0]
        assert evaluation.evaluated_by == coach.id
        assert evaluation.overall_rating == 73
        repos.player.update_ratings.assert_awaited_once_with(
            player.id, {"pace": 70, "vision": 76}, 73
        )

    @pytest.mark.asyncio
    async def test_falls_back_to_first_active_coach(self):
        """Test anonymous caller uses the first active coach."""
        repos = Repos()
        repos.player.find_by_id.return_value = Player(
            id=uuid7(), club_id=uuid7(), first_name="Ada", last_name="Moss"
        )
        fallback = create_coach()
        repos.coach.find_first_active.return_value = fallback
        repos.evaluation.list_by_player.return_value = []
        handler = CreatePlayerAbilityEvaluationHandler(
            player_repo=repos.player,
            evaluation_repo=repos.evaluation,
            user_repo=repos.user,
            coach_repo=repos.coach,
            logger=MagicMock(),
        )

        result = await handler.handle(
            CreatePlayerAbilityEvaluation(
                player_id=uuid7(),
                attributes=[EvaluationAttributeInput(attribute_name="pace", rating=50)],
            )
        )

        assert isinstance(result, Success)
        added = repos.evaluation.add.call_args[0][0]
        assert added.evaluated_by == fallback.id
        repos.user.find_by_auth_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_fails_when_no_coach_available(self):
        """Test missing coach is a validation failure."""
        repos = Repos()
        repos.player.find_by_id.return_value = Player(
            id=uuid7(), club_id=uuid7(), first_name="Ada", last_name="Moss"
        )
        repos.coach.find_first_active.return_value = None
        handler = CreatePlayerAbilityEvaluationHandler(
            player_repo=repos.player,
            evaluation_repo=repos.evaluation,
            user_repo=repos.user,
            coach_repo=repos.coach,
            logger=MagicMock(),
        )

        result = await handler.handle(
            CreatePlayerAbilityEvaluation(
                player_id=uuid7(),
                attributes=[EvaluationAttributeInput(attribute_name="pace", rating=50)],
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.NO_COACH_AVAILABLE
        repos.evaluation.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_fails_when_rating_out_of_range(self):
        """Test ratings above 99 are rejected before any write."""
        repos = Repos()
        repos.player.find_by_id.return_value = Player(
            id=uuid7(), club_id=uuid7(), first_name="Ada", last_name="Moss"
        )
        sign_in_as_coach(repos, "auth-123")
        handler = CreatePlayerAbilityEvaluationHandler(
            player_repo=repos.player,
            evaluation_repo=repos.evaluation,
            user_repo=repos.user,
            coach_repo=repos.coach,
            logger=MagicMock(),
        )

        result = await handler.handle(
            CreatePlayerAbilityEvaluation(
                player_id=uuid7(),
                auth_id="auth-123",
                attributes=[EvaluationAttributeInput(attribute_name="pace", rating=120)],
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_RATING
        repos.evaluation.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_fails_when_player_not_found(self):
        repos = Repos()
        repos.player.find_by_id.return_value = None
        handler = CreatePlayerAbilityEvaluationHandler(
            player_repo=repos.player,
            evaluation_repo=repos.evaluation,
            user_repo=repos.user,
            coach_repo=repos.coach,
            logger=MagicMock(),
        )

        result = await handler.handle(CreatePlayerAbilityEvaluation(player_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PLAYER_NOT_FOUND


# =============================================================================
# Delete
# =============================================================================


@pytest.mark.unit
class TestDeletePlayerAbilityEvaluationHandler:
    """Test DeletePlayerAbilityEvaluationHandler."""

    def _handler(self, repos: Repos) -> DeletePlayerAbilityEvaluationHandler:
        return DeletePlayerAbilityEvaluationHandler(
            player_repo=repos.player,
            evaluation_repo=repos.evaluation,
            user_repo=repos.user,
            coach_repo=repos.coach,
            logger=MagicMock(),
        )

    @pytest.mark.asyncio
    async def test_owner_deletes_and_ratings_refresh(self):
        """Test creating coach deletes; ratings mirror the next latest evaluation."""
        # Arrange
        repos = Repos()
        coach = sign_in_as_coach(repos, "auth-owner")
        player_id = uuid7()
        evaluation = create_evaluation(player_id, coach.id)
        older = create_evaluation(player_id, coach.id, ratings=(40, 60))
        repos.evaluation.find_by_id.return_value = evaluation
        repos.evaluation.list_by_player.return_value = [older]

        # Act
        result = await self._handler(repos).handle(
            DeletePlayerAbilityEvaluation(
                player_id=player_id, evaluation_id=evaluation.id, auth_id="auth-owner"
            )
        )

        # Assert
        assert isinstance(result, Success)
        repos.evaluation.delete.assert_awaited_once_with(evaluation.id)
        repos.player.update_ratings.assert_awaited_once_with(
            player_id, {"pace": 40, "vision": 60}, 50
        )

    @pytest.mark.asyncio
    async def test_last_evaluation_clears_ratings(self):
        """Test deleting the only evaluation clears the current ratings."""
        repos = Repos()
        coach = sign_in_as_coach(repos, "auth-owner")
        player_id = uuid7()
        evaluation = create_evaluation(player_id, coach.id)
        repos.evaluation.find_by_id.return_value = evaluation
        repos.evaluation.list_by_player.return_value = []

        result = await self._handler(repos).handle(
            DeletePlayerAbilityEvaluation(
                player_id=player_id, evaluation_id=evaluation.id, auth_id="auth-owner"
            )
        )

        assert isinstance(result, Success)
        repos.player.update_ratings.assert_awaited_once_with(player_id, {}, None)

    @pytest.mark.asyncio
    async def test_other_coach_is_forbidden(self):
        """Test a coach who did not create the evaluation cannot delete it."""
        repos = Repos()
        sign_in_as_coach(repos, "auth-other")
        player_id = uuid7()
        evaluation = create_evaluation(player_id, coach_id=uuid7())
        repos.evaluation.find_by_id.return_value = evaluation

        result = await self._handler(repos).handle(
            DeletePlayerAbilityEvaluation(
                player_id=player_id, evaluation_id=evaluation.id, auth_id="auth-other"
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.NOT_EVALUATION_OWNER
        repos.evaluation.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_coach_is_forbidden(self):
        """Test a caller without a coach record is forbidden."""
        repos = Repos()
        repos.user.find_by_auth_id.return_value = None
        player_id = uuid7()
        evaluation = create_evaluation(player_id, coach_id=uuid7())
        repos.evaluation.find_by_id.return_value = evaluation

        result = await self._handler(repos).handle(
            DeletePlayerAbilityEvaluation(
                player_id=player_id, evaluation_id=evaluation.id, auth_id="auth-x"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert "Only coaches" in result.error.message
        repos.evaluation.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_evaluation_of_other_player_not_found(self):
        """Test evaluation id under the wrong player is not found."""
        repos = Repos()
        evaluation = create_evaluation(uuid7(), coach_id=uuid7())
        repos.evaluation.find_by_id.return_value = evaluation

        result = await self._handler(repos).handle(
            DeletePlayerAbilityEvaluation(
                player_id=uuid7(), evaluation_id=evaluation.id, auth_id="auth-x"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EVALUATION_NOT_FOUND


# =============================================================================
# Update
# =============================================================================


@pytest.mark.unit
class TestUpdatePlayerAbilityEvaluationHandler:
    """Test UpdatePlayerAbilityEvaluationHandler."""

    @pytest.mark.asyncio
    async def test_owner_replaces_attributes(self):
        """Test the creating coach replaces ratings and overall is recomputed."""
        repos = Repos()
        coach = sign_in_as_coach(repos, "auth-owner")
        player_id = uuid7()
        evaluation = create_evaluation(player_id, coach.id)
        repos.evaluation.find_by_id.return_value = evaluation
        repos.evaluation.list_by_player.return_value = [evaluation]
        handler = UpdatePlayerAbilityEvaluationHandler(
            player_repo=repos.player,
            evaluation_repo=repos.evaluation,
            user_repo=repos.user,
            coach_repo=repos.coach,
        )

        result = await handler.handle(
            UpdatePlayerAbilityEvaluation(
                player_id=player_id,
                evaluation_id=evaluation.id,
                auth_id="auth-owner",
                attributes=[EvaluationAttributeInput(attribute_name="pace", rating=90)],
            )
        )

        assert isinstance(result, Success)
        replaced = repos.evaluation.replace.call_args[0][0]
        assert replaced.overall_rating == 90
        assert [a.attribute_name for a in replaced.attributes] == ["pace"]

    @pytest.mark.asyncio
    async def test_other_coach_is_forbidden(self):
        repos = Repos()
        sign_in_as_coach(repos, "auth-other")
        player_id = uuid7()
        evaluation = create_evaluation(player_id, coach_id=uuid7())
        repos.evaluation.find_by_id.return_value = evaluation
        handler = UpdatePlayerAbilityEvaluationHandler(
            player_repo=repos.player,
            evaluation_repo=repos.evaluation,
            user_repo=repos.user,
            coach_repo=repos.coach,
        )

        result = await handler.handle(
            UpdatePlayerAbilityEvaluation(
                player_id=player_id, evaluation_id=evaluation.id, auth_id="auth-other"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_EVALUATION_OWNER
        repos.evaluation.replace.assert_not_called()
