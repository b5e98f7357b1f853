"""Unit tests for the request Dispatcher.

Tests cover:
- Field rules are checked before a command handler is built
- Valid commands and queries reach their registered handler
- Unknown request types raise HandlerNotFoundError
- Handler failures are returned unchanged
"""

from dataclasses import dataclass
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from uuid_extensions import uuid7

from src.application.commands.team_commands import AddPlayerToTeam
from src.application.commands.handlers.team_membership_handlers import (
    AddPlayerToTeamHandler,
)
from src.application.dispatcher import Dispatcher, HandlerNotFoundError
from src.application.queries.club_queries import GetClubById
from src.application.queries.handlers.club_handlers import GetClubByIdHandler
from src.core.enums import ErrorCode
from src.core.errors import RequestValidationError, not_found
from src.core.result import Failure, Success


@dataclass(frozen=True)
class UnregisteredQuery:
    value: int


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.mark.unit
class TestDispatcher:
    """Test Dispatcher.dispatch."""

    @pytest.mark.asyncio
    async def test_invalid_command_never_builds_handler(self, logger):
        """Rule violations short-circuit before handler construction."""
        dispatcher = Dispatcher(AsyncMock(), logger=logger)

        with patch(
            "src.application.dispatcher.create_handler", new_callable=AsyncMock
        ) as create_handler:
            result = await dispatcher.dispatch(
                AddPlayerToTeam(team_id=uuid7(), player_id=None, squad_number=100)
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, RequestValidationError)
        assert result.error.field_errors == {
            "playerId": ["playerId is required"],
            "squadNumber": ["squadNumber must be between 1 and 99"],
        }
        create_handler.assert_not_called()
        logger.info.assert_called_once()
        assert logger.info.call_args[0][0] == "request_rejected"

    @pytest.mark.asyncio
    async def test_valid_command_runs_registered_handler(self, logger):
        session = AsyncMock()
        dispatcher = Dispatcher(session, logger=logger)
        command = AddPlayerToTeam(team_id=uuid7(), player_id=uuid7(), squad_number=7)
        handler = MagicMock()
        handler.handle = AsyncMock(return_value=Success(value="added"))

        with patch(
            "src.application.dispatcher.create_handler",
            new_callable=AsyncMock,
            return_value=handler,
        ) as create_handler:
            result = await dispatcher.dispatch(command)

        assert result == Success(value="added")
        create_handler.assert_awaited_once_with(AddPlayerToTeamHandler, session)
        handler.handle.assert_awaited_once_with(command)

    @pytest.mark.asyncio
    async def test_query_runs_registered_handler_and_returns_failure(self, logger):
        session = AsyncMock()
        dispatcher = Dispatcher(session, logger=logger)
        club_id = uuid7()
        failure = Failure(
            error=not_found("Club", club_id, ErrorCode.CLUB_NOT_FOUND)
        )
        handler = MagicMock()
        handler.handle = AsyncMock(return_value=failure)

        with patch(
            "src.application.dispatcher.create_handler",
            new_callable=AsyncMock,
            return_value=handler,
        ) as create_handler:
            result = await dispatcher.dispatch(GetClubById(club_id=club_id))

        assert result is failure
        create_handler.assert_awaited_once_with(GetClubByIdHandler, session)
        logger.info.assert_called_once()
        assert logger.info.call_args[0][0] == "handler_failed"
        assert logger.info.call_args[1]["error_code"] == "club_not_found"

    @pytest.mark.asyncio
    async def test_unregistered_request_raises(self, logger):
        dispatcher = Dispatcher(AsyncMock(), logger=logger)

        with pytest.raises(HandlerNotFoundError, match="UnregisteredQuery"):
            await dispatcher.dispatch(UnregisteredQuery(value=1))
