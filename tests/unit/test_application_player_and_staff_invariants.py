"""Unit tests for player contact and team staff invariants.

Tests cover:
- UpdatePlayerHandler: exactly one primary emergency contact when contacts
  are given; no contacts at all is accepted
- AssignCoachToTeamHandler: coach must belong to the team's club, archived
  coach rejected, success persists the assignment

Uses mocked repositories for isolation.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.player_handlers import (
    UpdatePlayerError,
    UpdatePlayerHandler,
)
from src.application.commands.handlers.team_coach_handlers import (
    AssignCoachToTeamHandler,
    TeamCoachError,
)
from src.application.commands.player_commands import (
    EmergencyContactInput,
    UpdatePlayer,
)
from src.application.commands.team_commands import AssignCoachToTeam
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.entities.club import Club
from src.domain.entities.coach import Coach
from src.domain.entities.player import Player
from src.domain.entities.team import Team
from src.domain.enums import CoachRole, Level
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.team_coach_repository import TeamCoachRepository
from src.domain.protocols.team_repository import TeamRepository


# =============================================================================
# Test Fixtures
# =============================================================================


def contact(name: str, is_primary: bool) -> EmergencyContactInput:
    return EmergencyContactInput(
        name=name, phone="07700 900123", relationship="Parent", is_primary=is_primary
    )


def update_player(player_id, contacts: list[EmergencyContactInput]) -> UpdatePlayer:
    return UpdatePlayer(
        player_id=player_id,
        first_name="Ada",
        last_name="Moss",
        date_of_birth=date(2015, 3, 14),
        preferred_positions=["CM"],
        emergency_contacts=contacts,
    )


@pytest.fixture
def player() -> Player:
    return Player(id=uuid7(), club_id=uuid7(), first_name="Ada", last_name="Moss")


@pytest.fixture
def player_handler(player):
    player_repo = AsyncMock(spec=PlayerRepository)
    player_repo.find_by_id.return_value = player
    club_repo = AsyncMock(spec=ClubRepository)
    club_repo.find_by_id.return_value = Club(
        id=player.club_id,
        name="Vale Juniors FC",
        short_name="VJFC",
        city="Leeds",
        country="England",
        venue="Vale Park",
    )
    handler = UpdatePlayerHandler(
        player_repo=player_repo,
        team_repo=AsyncMock(spec=TeamRepository),
        club_repo=club_repo,
    )
    return handler, player_repo


def create_team(club_id) -> Team:
    return Team(
        id=uuid7(),
        club_id=club_id,
        age_group_id=uuid7(),
        name="Blues",
        level=Level.YOUTH,
        season="2024/25",
    )


def create_coach(club_id, is_archived: bool = False) -> Coach:
    return Coach(
        id=uuid7(),
        club_id=club_id,
        first_name="Sam",
        last_name="Reid",
        is_archived=is_archived,
    )


def create_assign_handler(team: Team, coach: Coach):
    team_repo = AsyncMock(spec=TeamRepository)
    team_repo.find_by_id.return_value = team
    coach_repo = AsyncMock(spec=CoachRepository)
    coach_repo.find_by_id.return_value = coach
    team_coach_repo = AsyncMock(spec=TeamCoachRepository)
    team_coach_repo.find.return_value = None
    handler = AssignCoachToTeamHandler(
        team_repo=team_repo, coach_repo=coach_repo, team_coach_repo=team_coach_repo
    )
    return handler, team_coach_repo


# =============================================================================
# Emergency contacts
# =============================================================================


@pytest.mark.unit
class TestPrimaryEmergencyContact:
    @pytest.mark.parametrize(
        "contacts",
        [
            [contact("Mum", False), contact("Dad", False)],
            [contact("Mum", True), contact("Dad", True)],
        ],
        ids=["no_primary", "two_primaries"],
    )
    async def test_rejects_anything_but_one_primary(self, player_handler, player, contacts):
        # Arrange
        handler, player_repo = player_handler

        # Act
        result = await handler.handle(update_player(player.id, contacts))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.message == UpdatePlayerError.PRIMARY_CONTACT
        assert result.error.field == "emergencyContacts"
        player_repo.save.assert_not_awaited()

    async def test_accepts_exactly_one_primary(self, player_handler, player):
        # Arrange
        handler, player_repo = player_handler
        contacts = [contact("Mum", True), contact("Dad", False)]

        # Act
        result = await handler.handle(update_player(player.id, contacts))

        # Assert
        assert isinstance(result, Success)
        player_repo.save.assert_awaited_once()
        saved = player_repo.save.await_args.args[0]
        assert [c.is_primary for c in saved.emergency_contacts] == [True, False]

    async def test_no_contacts_is_allowed(self, player_handler, player):
        handler, player_repo = player_handler

        result = await handler.handle(update_player(player.id, []))

        assert isinstance(result, Success)
        player_repo.save.assert_awaited_once()


# =============================================================================
# Coach assignment
# =============================================================================


@pytest.mark.unit
class TestAssignCoachClubMembership:
    async def test_coach_from_another_club_is_rejected(self):
        # Arrange
        team = create_team(club_id=uuid7())
        coach = create_coach(club_id=uuid7())
        handler, team_coach_repo = create_assign_handler(team, coach)

        # Act
        result = await handler.handle(
            AssignCoachToTeam(team_id=team.id, coach_id=coach.id, role="headcoach")
        )

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CLUB_MISMATCH
        assert result.error.message == TeamCoachError.CLUB_MISMATCH
        team_coach_repo.add.assert_not_awaited()

    async def test_archived_coach_is_rejected(self):
        club_id = uuid7()
        team = create_team(club_id)
        coach = create_coach(club_id, is_archived=True)
        handler, team_coach_repo = create_assign_handler(team, coach)

        result = await handler.handle(
            AssignCoachToTeam(team_id=team.id, coach_id=coach.id, role="headcoach")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.COACH_ARCHIVED
        team_coach_repo.add.assert_not_awaited()

    async def test_coach_of_same_club_is_assigned(self):
        # Arrange
        club_id = uuid7()
        team = create_team(club_id)
        coach = create_coach(club_id)
        handler, team_coach_repo = create_assign_handler(team, coach)

        # Act
        result = await handler.handle(
            AssignCoachToTeam(team_id=team.id, coach_id=coach.id, role="HeadCoach")
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.role == "headcoach"
        assignment = team_coach_repo.add.await_args.args[0]
        assert assignment.role == CoachRole.HEAD_COACH
        assert assignment.coach_id == coach.id
