"""Player command handlers.

Architecture:
- Application layer handler (orchestrates business logic)
- Full-replace update: contacts and team memberships are replaced and the
  player's age groups rebuilt in one repository transaction

Reference:
    - src/application/commands/player_commands.py
"""

from uuid_extensions import uuid7

from src.application.commands.player_commands import UpdatePlayer
from src.application.dtos.player_dtos import PlayerResult, to_player_result
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.player import EmergencyContact
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.team_repository import TeamRepository


class UpdatePlayerError:
    """UpdatePlayer-specific error messages."""

    PLAYER_ARCHIVED = "Cannot update an archived player"
    PRIMARY_CONTACT = "Exactly one emergency contact must be marked as primary"


class UpdatePlayerHandler:
    """Handler for UpdatePlayer command.

    Dependencies (injected via constructor):
        - PlayerRepository: For persistence
        - TeamRepository: Existence of the requested teams
        - ClubRepository: Club name for the response
    """

    def __init__(
        self,
        player_repo: PlayerRepository,
        team_repo: TeamRepository,
        club_repo: ClubRepository,
    ) -> None:
        self._player_repo = player_repo
        self._team_repo = team_repo
        self._club_repo = club_repo

    async def handle(self, cmd: UpdatePlayer) -> Result[PlayerResult, DomainError]:
        """Handle UpdatePlayer command.

        Args:
            cmd: UpdatePlayer command.

        Returns:
            Success(PlayerResult): Player as persisted.
            Failure(NotFoundError): Player or one of the teams does not exist.
            Failure(ValidationError): Archived player, or not exactly one
                primary emergency contact.
        """
        player = await self._player_repo.find_by_id(cmd.player_id)
        if player is None:
            return Failure(
                error=not_found("Player", cmd.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )

        if player.is_archived and cmd.is_archived:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PLAYER_ARCHIVED,
                    message=UpdatePlayerError.PLAYER_ARCHIVED,
                    field="isArchived",
                )
            )

        if cmd.emergency_contacts:
            primaries = sum(1 for c in cmd.emergency_contacts if c.is_primary)
            if primaries != 1:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=UpdatePlayerError.PRIMARY_CONTACT,
                        field="emergencyContacts",
                    )
                )

        team_ids = list(dict.fromkeys(cmd.team_ids))
        if team_ids:
            found = {team.id for team in await self._team_repo.find_by_ids(team_ids)}
            missing = next((t for t in team_ids if t not in found), None)
            if missing is not None:
                return Failure(error=not_found("Team", missing, ErrorCode.TEAM_NOT_FOUND))

        player.first_name = cmd.first_name
        player.last_name = cmd.last_name
        player.nickname = cmd.nickname
        player.date_of_birth = cmd.date_of_birth
        player.photo = cmd.photo
        player.association_id = cmd.association_id
        player.preferred_positions = list(cmd.preferred_positions)
        player.allergies = cmd.allergies
        player.medical_conditions = cmd.medical_conditions
        player.is_archived = cmd.is_archived
        player.team_ids = team_ids
        player.emergency_contacts = [
            EmergencyContact(
                id=uuid7(),
                name=c.name,
                phone=c.phone,
                relationship=c.relationship,
                is_primary=c.is_primary,
            )
            for c in cmd.emergency_contacts
        ]

        await self._player_repo.save(player)

        # Re-read: contact ids and age groups are assigned on save
        saved = await self._player_repo.find_by_id(player.id) or player
        club = await self._club_repo.find_by_id(saved.club_id)

        return Success(
            value=to_player_result(saved, club_name=club.name if club else None)
        )
