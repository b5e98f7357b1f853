"""Age group command handlers.

Architecture:
- Application layer handlers (orchestrate business logic)
- Returns Result[DTO, DomainError] (explicit error handling)

Reference:
    - src/application/commands/age_group_commands.py
"""

from uuid_extensions import uuid7

from src.application.commands.age_group_commands import CreateAgeGroup, UpdateAgeGroup
from src.application.dtos.age_group_dtos import AgeGroupResult, to_age_group_result
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.age_group import AgeGroup
from src.domain.enums import Level
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.club_repository import ClubRepository


class CreateAgeGroupHandler:
    """Handler for CreateAgeGroup command.

    Dependencies (injected via constructor):
        - ClubRepository: Parent existence check
        - AgeGroupRepository: For persistence
    """

    def __init__(
        self,
        club_repo: ClubRepository,
        age_group_repo: AgeGroupRepository,
    ) -> None:
        self._club_repo = club_repo
        self._age_group_repo = age_group_repo

    async def handle(
        self, cmd: CreateAgeGroup
    ) -> Result[AgeGroupResult, DomainError]:
        """Handle CreateAgeGroup command.

        The new group's season list starts with ``cmd.season``, which is
        also its default season.

        Returns:
            Success(AgeGroupResult): Created age group.
            Failure(NotFoundError): Club does not exist.
        """
        club = await self._club_repo.find_by_id(cmd.club_id) if cmd.club_id else None
        if club is None:
            return Failure(error=not_found("Club", cmd.club_id, ErrorCode.CLUB_NOT_FOUND))

        age_group = AgeGroup(
            id=uuid7(),
            club_id=club.id,
            name=cmd.name,
            code=cmd.code,
            level=Level.from_label(cmd.level) or Level.YOUTH,
            season=cmd.season,
            default_squad_size=cmd.default_squad_size,
            seasons=[cmd.season],
            default_season=cmd.season,
            description=cmd.description,
        )
        await self._age_group_repo.save(age_group)

        return Success(value=to_age_group_result(age_group, team_count=0))


class UpdateAgeGroupHandler:
    """Handler for UpdateAgeGroup command (full replace)."""

    def __init__(self, age_group_repo: AgeGroupRepository) -> None:
        self._age_group_repo = age_group_repo

    async def handle(
        self, cmd: UpdateAgeGroup
    ) -> Result[AgeGroupResult, DomainError]:
        age_group = await self._age_group_repo.find_by_id(cmd.age_group_id)
        if age_group is None:
            return Failure(
                error=not_found(
                    "AgeGroup", cmd.age_group_id, ErrorCode.AGE_GROUP_NOT_FOUND
                )
            )

        age_group.name = cmd.name
        age_group.code = cmd.code
        age_group.level = Level.from_label(cmd.level) or age_group.level
        age_group.season = cmd.season
        age_group.default_squad_size = cmd.default_squad_size
        age_group.description = cmd.description
        age_group.seasons = list(cmd.seasons) or [cmd.season]
        age_group.default_season = cmd.default_season or cmd.season
        age_group.is_archived = cmd.is_archived

        await self._age_group_repo.save(age_group)

        return Success(value=to_age_group_result(age_group))
