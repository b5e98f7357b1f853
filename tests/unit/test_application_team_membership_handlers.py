"""Unit tests for team membership command handlers.

Tests cover:
- AddPlayerToTeamHandler: success, missing team/player, archived team,
  duplicate membership, squad number already taken
- UpdateTeamPlayerSquadNumberHandler: no-op, conflict, update
- RemovePlayerFromTeamHandler: missing membership, removal

Uses mocked repositories for isolation.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.team_membership_handlers import (
    AddPlayerToTeamHandler,
    RemovePlayerFromTeamHandler,
    UpdateTeamPlayerSquadNumberHandler,
)
from src.application.commands.team_commands import (
    AddPlayerToTeam,
    RemovePlayerFromTeam,
    UpdateTeamPlayerSquadNumber,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.entities.player import Player
from src.domain.entities.team import Team, TeamMembership
from src.domain.enums import Level
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.team_membership_repository import (
    TeamMembershipRepository,
)
from src.domain.protocols.team_repository import TeamRepository


# =============================================================================
# Test Fixtures
# =============================================================================


def create_test_team(is_archived: bool = False) -> Team:
    """Create a test team."""
    return Team(
        id=uuid7(),
        club_id=uuid7(),
        age_group_id=uuid7(),
        name="Blues",
        level=Level.YOUTH,
        season="2024/25",
        is_archived=is_archived,
    )


def create_test_player() -> Player:
    """Create a test player."""
    return Player(id=uuid7(), club_id=uuid7(), first_name="Ada", last_name="Moss")


def create_add_handler() -> tuple[AddPlayerToTeamHandler, AsyncMock, AsyncMock, AsyncMock]:
    """Create AddPlayerToTeamHandler with mocked dependencies."""
    team_repo = AsyncMock(spec=TeamRepository)
    player_repo = AsyncMock(spec=PlayerRepository)
    membership_repo = AsyncMock(spec=TeamMembershipRepository)
    handler = AddPlayerToTeamHandler(
        team_repo=team_repo,
        player_repo=player_repo,
        membership_repo=membership_repo,
        logger=MagicMock(),
    )
    return handler, team_repo, player_repo, membership_repo


# =============================================================================
# AddPlayerToTeam
# =============================================================================


@pytest.mark.unit
class TestAddPlayerToTeamHandler:
    """Test AddPlayerToTeamHandler."""

    @pytest.mark.asyncio
    async def test_adds_player_with_free_squad_number(self):
        """Test player is added and the membership is returned."""
        # Arrange
        handler, team_repo, player_repo, membership_repo = create_add_handler()
        team = create_test_team()
        player = create_test_player()
        team_repo.find_by_id.return_value = team
        player_repo.find_by_id.return_value = player
        membership_repo.find.return_value = None
        membership_repo.find_by_squad_number.return_value = None

        # Act
        result = await handler.handle(
            AddPlayerToTeam(team_id=team.id, player_id=player.id, squad_number=7)
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.player_id == player.id
        assert result.value.team_id == team.id
        assert result.value.squad_number == 7
        membership_repo.add.assert_awaited_once_with(
            TeamMembership(team_id=team.id, player_id=player.id, squad_number=7)
        )

    @pytest.mark.asyncio
    async def test_adds_player_without_squad_number(self):
        """Test squad number is optional and uniqueness is not checked."""
        handler, team_repo, player_repo, membership_repo = create_add_handler()
        team = create_test_team()
        player = create_test_player()
        team_repo.find_by_id.return_value = team
        player_repo.find_by_id.return_value = player
        membership_repo.find.return_value = None

        result = await handler.handle(
            AddPlayerToTeam(team_id=team.id, player_id=player.id)
        )

        assert isinstance(result, Success)
        assert result.value.squad_number is None
        membership_repo.find_by_squad_number.assert_not_called()
        membership_repo.add.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_fails_when_squad_number_taken(self):
        """Test a squad number held by another player is a conflict."""
        handler, team_repo, player_repo, membership_repo = create_add_handler()
        team = create_test_team()
        player = create_test_player()
        team_repo.find_by_id.return_value = team
        player_repo.find_by_id.return_value = player
        membership_repo.find.return_value = None
        membership_repo.find_by_squad_number.return_value = TeamMembership(
            team_id=team.id, player_id=uuid7(), squad_number=7
        )

        result = await handler.handle(
            AddPlayerToTeam(team_id=team.id, player_id=player.id, squad_number=7)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.SQUAD_NUMBER_TAKEN
        assert result.error.conflicting_field == "squadNumber"
        assert "7" in result.error.message
        membership_repo.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_fails_when_player_already_on_team(self):
        """Test adding an existing member is a conflict."""
        handler, team_repo, player_repo, membership_repo = create_add_handler()
        team = create_test_team()
        player = create_test_player()
        team_repo.find_by_id.return_value = team
        player_repo.find_by_id.return_value = player
        membership_repo.find.return_value = TeamMembership(
            team_id=team.id, player_id=player.id, squad_number=3
        )

        result = await handler.handle(
            AddPlayerToTeam(team_id=team.id, player_id=player.id, squad_number=9)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PLAYER_ALREADY_ON_TEAM
        membership_repo.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_fails_when_team_not_found(self):
        """Test unknown team returns NotFoundError."""
        handler, team_repo, player_repo, membership_repo = create_add_handler()
        team_repo.find_by_id.return_value = None
        team_id = uuid7()

        result = await handler.handle(
            AddPlayerToTeam(team_id=team_id, player_id=uuid7(), squad_number=7)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.TEAM_NOT_FOUND
        assert result.error.resource_id == str(team_id)
        player_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_fails_when_player_not_found(self):
        """Test unknown player returns NotFoundError."""
        handler, team_repo, player_repo, membership_repo = create_add_handler()
        team_repo.find_by_id.return_value = create_test_team()
        player_repo.find_by_id.return_value = None

        result = await handler.handle(
            AddPlayerToTeam(team_id=uuid7(), player_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PLAYER_NOT_FOUND
        membership_repo.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_fails_when_team_archived(self):
        """Test archived teams reject new players."""
        handler, team_repo, player_repo, membership_repo = create_add_handler()
        team_repo.find_by_id.return_value = create_test_team(is_archived=True)

        result = await handler.handle(
            AddPlayerToTeam(team_id=uuid7(), player_id=uuid7(), squad_number=4)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.TEAM_ARCHIVED
        assert result.error.field_errors == {
            "teamId": ["Cannot add players to an archived team"]
        }


# =============================================================================
# UpdateTeamPlayerSquadNumber
# =============================================================================


@pytest.mark.unit
class TestUpdateTeamPlayerSquadNumberHandler:
    """Test UpdateTeamPlayerSquadNumberHandler."""

    @pytest.mark.asyncio
    async def test_same_number_is_noop(self):
        """Test re-assigning the held number succeeds without a write."""
        membership_repo = AsyncMock(spec=TeamMembershipRepository)
        team_id, player_id = uuid7(), uuid7()
        membership_repo.find.return_value = TeamMembership(
            team_id=team_id, player_id=player_id, squad_number=10
        )
        handler = UpdateTeamPlayerSquadNumberHandler(membership_repo=membership_repo)

        result = await handler.handle(
            UpdateTeamPlayerSquadNumber(
                team_id=team_id, player_id=player_id, squad_number=10
            )
        )

        assert isinstance(result, Success)
        assert result.value.squad_number == 10
        membership_repo.update_squad_number.assert_not_called()

    @pytest.mark.asyncio
    async def test_number_held_by_other_player_conflicts(self):
        """Test taking another player's number is a conflict."""
        membership_repo = AsyncMock(spec=TeamMembershipRepository)
        team_id, player_id = uuid7(), uuid7()
        membership_repo.find.return_value = TeamMembership(
            team_id=team_id, player_id=player_id, squad_number=10
        )
        membership_repo.find_by_squad_number.return_value = TeamMembership(
            team_id=team_id, player_id=uuid7(), squad_number=9
        )
        handler = UpdateTeamPlayerSquadNumberHandler(membership_repo=membership_repo)

        result = await handler.handle(
            UpdateTeamPlayerSquadNumber(
                team_id=team_id, player_id=player_id, squad_number=9
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SQUAD_NUMBER_TAKEN
        membership_repo.update_squad_number.assert_not_called()

    @pytest.mark.asyncio
    async def test_updates_free_number(self):
        """Test a free number is written."""
        membership_repo = AsyncMock(spec=TeamMembershipRepository)
        team_id, player_id = uuid7(), uuid7()
        membership_repo.find.return_value = TeamMembership(
            team_id=team_id, player_id=player_id, squad_number=None
        )
        membership_repo.find_by_squad_number.return_value = None
        handler = UpdateTeamPlayerSquadNumberHandler(membership_repo=membership_repo)

        result = await handler.handle(
            UpdateTeamPlayerSquadNumber(
                team_id=team_id, player_id=player_id, squad_number=23
            )
        )

        assert isinstance(result, Success)
        membership_repo.update_squad_number.assert_awaited_once_with(
            team_id, player_id, 23
        )

    @pytest.mark.asyncio
    async def test_fails_when_not_a_member(self):
        """Test missing membership returns NotFoundError."""
        membership_repo = AsyncMock(spec=TeamMembershipRepository)
        membership_repo.find.return_value = None
        handler = UpdateTeamPlayerSquadNumberHandler(membership_repo=membership_repo)

        result = await handler.handle(
            UpdateTeamPlayerSquadNumber(
                team_id=uuid7(), player_id=uuid7(), squad_number=5
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MEMBERSHIP_NOT_FOUND


# =============================================================================
# RemovePlayerFromTeam
# =============================================================================


@pytest.mark.unit
class TestRemovePlayerFromTeamHandler:
    """Test RemovePlayerFromTeamHandler."""

    @pytest.mark.asyncio
    async def test_removes_member(self):
        """Test membership is removed through the repository."""
        membership_repo = AsyncMock(spec=TeamMembershipRepository)
        team_id, player_id = uuid7(), uuid7()
        membership_repo.find.return_value = TeamMembership(
            team_id=team_id, player_id=player_id
        )
        handler = RemovePlayerFromTeamHandler(
            membership_repo=membership_repo, logger=MagicMock()
        )

        result = await handler.handle(
            RemovePlayerFromTeam(team_id=team_id, player_id=player_id)
        )

        assert isinstance(result, Success)
        membership_repo.remove.assert_awaited_once_with(team_id, player_id)

    @pytest.mark.asyncio
    async def test_fails_when_not_a_member(self):
        """Test removing a non-member returns NotFoundError."""
        membership_repo = AsyncMock(spec=TeamMembershipRepository)
        membership_repo.find.return_value = None
        handler = RemovePlayerFromTeamHandler(
            membership_repo=membership_repo, logger=MagicMock()
        )

        result = await handler.handle(
            RemovePlayerFromTeam(team_id=uuid7(), player_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        membership_repo.remove.assert_not_called()
