"""Team membership command handlers.

Handles adding and removing players from a team's squad and changing squad
numbers. Squad numbers are unique within a team.

Architecture:
- Application layer handlers (orchestrate business logic)
- Uniqueness checks run before any write
- Membership insert and age-group relinking happen in one repository
  transaction

Reference:
    - src/application/commands/team_commands.py
"""

from src.application.commands.team_commands import (
    AddPlayerToTeam,
    RemovePlayerFromTeam,
    UpdateTeamPlayerSquadNumber,
)
from src.application.dtos.team_dtos import TeamMembershipResult
from src.core.enums import ErrorCode
from src.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
    not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.team import TeamMembership
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.team_membership_repository import (
    TeamMembershipRepository,
)
from src.domain.protocols.team_repository import TeamRepository


class TeamMembershipError:
    """Team membership error messages."""

    TEAM_ARCHIVED = "Cannot add players to an archived team"
    ALREADY_ON_TEAM = "Player is already a member of this team"
    MEMBERSHIP_NOT_FOUND = "Player is not a member of this team"

    @staticmethod
    def squad_number_taken(squad_number: int) -> str:
        return f"Squad number {squad_number} is already assigned to another player"


def _membership_not_found(team_id: object, player_id: object) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.MEMBERSHIP_NOT_FOUND,
        message=TeamMembershipError.MEMBERSHIP_NOT_FOUND,
        resource_type="TeamMembership",
        resource_id=f"{team_id}/{player_id}",
    )


def _squad_number_taken(squad_number: int) -> ConflictError:
    return ConflictError(
        code=ErrorCode.SQUAD_NUMBER_TAKEN,
        message=TeamMembershipError.squad_number_taken(squad_number),
        resource_type="TeamMembership",
        conflicting_field="squadNumber",
    )


class AddPlayerToTeamHandler:
    """Handler for AddPlayerToTeam command.

    Dependencies (injected via constructor):
        - TeamRepository: Team existence and archive check
        - PlayerRepository: Player existence check
        - TeamMembershipRepository: Uniqueness checks and persistence
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        team_repo: TeamRepository,
        player_repo: PlayerRepository,
        membership_repo: TeamMembershipRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._team_repo = team_repo
        self._player_repo = player_repo
        self._membership_repo = membership_repo
        self._logger = logger

    async def handle(
        self, cmd: AddPlayerToTeam
    ) -> Result[TeamMembershipResult, DomainError]:
        """Handle AddPlayerToTeam command.

        Args:
            cmd: AddPlayerToTeam command with team, player and squad number.

        Returns:
            Success(TeamMembershipResult): Player added.
            Failure(NotFoundError): Team or player does not exist.
            Failure(ValidationError): Team is archived.
            Failure(ConflictError): Player already on team, or squad number taken.
        """
        # Step 1: Team must exist and be active
        team = await self._team_repo.find_by_id(cmd.team_id)
        if team is None:
            return Failure(error=not_found("Team", cmd.team_id, ErrorCode.TEAM_NOT_FOUND))
        if team.is_archived:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.TEAM_ARCHIVED,
                    message=TeamMembershipError.TEAM_ARCHIVED,
                    field="teamId",
                )
            )

        # Step 2: Player must exist
        player = (
            await self._player_repo.find_by_id(cmd.player_id) if cmd.player_id else None
        )
        if player is None:
            return Failure(
                error=not_found("Player", cmd.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )

        # Step 3: Uniqueness checks
        if await self._membership_repo.find(team.id, player.id) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PLAYER_ALREADY_ON_TEAM,
                    message=TeamMembershipError.ALREADY_ON_TEAM,
                    resource_type="TeamMembership",
                    conflicting_field="playerId",
                )
            )
        if cmd.squad_number is not None:
            holder = await self._membership_repo.find_by_squad_number(
                team.id, cmd.squad_number
            )
            if holder is not None:
                return Failure(error=_squad_number_taken(cmd.squad_number))

        # Step 4: Persist membership (also links the team's age group)
        membership = TeamMembership(
            team_id=team.id, player_id=player.id, squad_number=cmd.squad_number
        )
        await self._membership_repo.add(membership)

        self._logger.info(
            "player_added_to_team",
            team_id=str(team.id),
            player_id=str(player.id),
            squad_number=cmd.squad_number,
        )

        return Success(
            value=TeamMembershipResult(
                player_id=player.id,
                team_id=team.id,
                squad_number=cmd.squad_number,
            )
        )


class UpdateTeamPlayerSquadNumberHandler:
    """Handler for UpdateTeamPlayerSquadNumber command.

    Re-assigning the number a player already holds is a no-op success.
    """

    def __init__(self, membership_repo: TeamMembershipRepository) -> None:
        self._membership_repo = membership_repo

    async def handle(
        self, cmd: UpdateTeamPlayerSquadNumber
    ) -> Result[TeamMembershipResult, DomainError]:
        membership = await self._membership_repo.find(cmd.team_id, cmd.player_id)
        if membership is None:
            return Failure(error=_membership_not_found(cmd.team_id, cmd.player_id))

        result = TeamMembershipResult(
            player_id=cmd.player_id,
            team_id=cmd.team_id,
            squad_number=cmd.squad_number,
        )
        if membership.squad_number == cmd.squad_number:
            return Success(value=result)

        if cmd.squad_number is not None:
            holder = await self._membership_repo.find_by_squad_number(
                cmd.team_id, cmd.squad_number
            )
            if holder is not None and holder.player_id != cmd.player_id:
                return Failure(error=_squad_number_taken(cmd.squad_number))

        await self._membership_repo.update_squad_number(
            cmd.team_id, cmd.player_id, cmd.squad_number
        )
        return Success(value=result)


class RemovePlayerFromTeamHandler:
    """Handler for RemovePlayerFromTeam command.

    The repository deletes the membership and rebuilds the player's age
    groups from the remaining teams in one transaction.
    """

    def __init__(
        self,
        membership_repo: TeamMembershipRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._membership_repo = membership_repo
        self._logger = logger

    async def handle(self, cmd: RemovePlayerFromTeam) -> Result[None, DomainError]:
        membership = await self._membership_repo.find(cmd.team_id, cmd.player_id)
        if membership is None:
            return Failure(error=_membership_not_found(cmd.team_id, cmd.player_id))

        await self._membership_repo.remove(cmd.team_id, cmd.player_id)

        self._logger.info(
            "player_removed_from_team",
            team_id=str(cmd.team_id),
            player_id=str(cmd.player_id),
        )
        return Success(value=None)
