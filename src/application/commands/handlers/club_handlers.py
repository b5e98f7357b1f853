"""Club command handlers.

Architecture:
- Application layer handlers (orchestrate business logic)
- Imports only from domain layer (entities, protocols) and core
- Returns Result[DTO, DomainError] (explicit error handling)

Reference:
    - src/application/commands/club_commands.py
"""

from src.application.commands.club_commands import UpdateClub
from src.application.dtos.club_dtos import ClubDetailResult, to_club_detail
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.protocols.club_repository import ClubRepository


class UpdateClubHandler:
    """Handler for UpdateClub command.

    Replaces every editable field of the club (full replace).

    Dependencies (injected via constructor):
        - ClubRepository: For persistence
    """

    def __init__(self, club_repo: ClubRepository) -> None:
        self._club_repo = club_repo

    async def handle(self, cmd: UpdateClub) -> Result[ClubDetailResult, DomainError]:
        """Handle UpdateClub command.

        Args:
            cmd: UpdateClub command.

        Returns:
            Success(ClubDetailResult): Updated club.
            Failure(NotFoundError): Club does not exist.
        """
        club = await self._club_repo.find_by_id(cmd.club_id)
        if club is None:
            return Failure(error=not_found("Club", cmd.club_id, ErrorCode.CLUB_NOT_FOUND))

        club.name = cmd.name
        club.short_name = cmd.short_name
        club.logo = cmd.logo
        club.primary_color = cmd.primary_color
        club.secondary_color = cmd.secondary_color
        club.accent_color = cmd.accent_color
        club.city = cmd.city
        club.country = cmd.country
        club.venue = cmd.venue
        club.address = cmd.address
        club.founded = cmd.founded
        club.history = cmd.history
        club.ethos = cmd.ethos
        club.principles = list(cmd.principles)

        await self._club_repo.save(club)

        return Success(value=to_club_detail(club))
