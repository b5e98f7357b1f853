"""Team kit command handlers.

Reference:
    - src/application/commands/kit_commands.py
"""

from uuid_extensions import uuid7

from src.application.commands.kit_commands import (
    CreateTeamKit,
    DeleteTeamKit,
    UpdateTeamKit,
)
from src.application.dtos.kit_dtos import KitResult, to_kit_result
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.kit import Kit
from src.domain.enums import KitType
from src.domain.protocols.kit_repository import KitRepository
from src.domain.protocols.team_repository import TeamRepository


class CreateTeamKitHandler:
    """Handler for CreateTeamKit command.

    Dependencies (injected via constructor):
        - TeamRepository: Team existence check (and club of the kit)
        - KitRepository: For persistence
    """

    def __init__(self, team_repo: TeamRepository, kit_repo: KitRepository) -> None:
        self._team_repo = team_repo
        self._kit_repo = kit_repo

    async def handle(self, cmd: CreateTeamKit) -> Result[KitResult, DomainError]:
        team = await self._team_repo.find_by_id(cmd.team_id)
        if team is None:
            return Failure(error=not_found("Team", cmd.team_id, ErrorCode.TEAM_NOT_FOUND))

        kit = Kit(
            id=uuid7(),
            club_id=team.club_id,
            team_id=team.id,
            name=cmd.name,
            kit_type=KitType.from_label(cmd.type) or KitType.HOME,
            shirt_color=cmd.shirt_color,
            shorts_color=cmd.shorts_color,
            socks_color=cmd.socks_color,
            season=cmd.season,
            is_active=cmd.is_active,
        )
        await self._kit_repo.save(kit)

        return Success(value=to_kit_result(kit))


class UpdateTeamKitHandler:
    """Handler for UpdateTeamKit command.

    A kit of another team is reported as not found.
    """

    def __init__(self, team_repo: TeamRepository, kit_repo: KitRepository) -> None:
        self._team_repo = team_repo
        self._kit_repo = kit_repo

    async def handle(self, cmd: UpdateTeamKit) -> Result[KitResult, DomainError]:
        team = await self._team_repo.find_by_id(cmd.team_id)
        if team is None:
            return Failure(error=not_found("Team", cmd.team_id, ErrorCode.TEAM_NOT_FOUND))

        kit = await self._kit_repo.find_by_id(cmd.kit_id)
        if kit is None or kit.team_id != team.id:
            return Failure(error=not_found("Kit", cmd.kit_id, ErrorCode.KIT_NOT_FOUND))

        kit.name = cmd.name
        kit.kit_type = KitType.from_label(cmd.type) or kit.kit_type
        kit.shirt_color = cmd.shirt_color
        kit.shorts_color = cmd.shorts_color
        kit.socks_color = cmd.socks_color
        kit.season = cmd.season
        kit.is_active = cmd.is_active

        await self._kit_repo.save(kit)

        return Success(value=to_kit_result(kit))


class DeleteTeamKitHandler:
    """Handler for DeleteTeamKit command (hard delete)."""

    def __init__(self, kit_repo: KitRepository) -> None:
        self._kit_repo = kit_repo

    async def handle(self, cmd: DeleteTeamKit) -> Result[None, DomainError]:
        kit = await self._kit_repo.find_by_id(cmd.kit_id)
        if kit is None or kit.team_id != cmd.team_id:
            return Failure(error=not_found("Kit", cmd.kit_id, ErrorCode.KIT_NOT_FOUND))

        await self._kit_repo.delete(kit.id)
        return Success(value=None)
