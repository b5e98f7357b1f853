"""Team command handlers.

Handles creation, update and archiving of the team aggregate. Squad and
staff changes live in team_membership_handlers and team_coach_handlers.

Architecture:
- Application layer handlers (orchestrate business logic)
- Returns Result[DTO, DomainError] (explicit error handling)

Reference:
    - src/application/commands/team_commands.py
"""

from uuid_extensions import uuid7

from src.application.commands.team_commands import ArchiveTeam, CreateTeam, UpdateTeam
from src.application.dtos.team_dtos import TeamResult, to_team_result
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.team import Team
from src.domain.enums import Level
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.team_repository import TeamRepository


class TeamError:
    """Team-specific error messages."""

    AGE_GROUP_NOT_IN_CLUB = "Age group does not belong to the specified club"
    TEAM_ARCHIVED = "Cannot update an archived team"


class CreateTeamHandler:
    """Handler for CreateTeam command.

    Dependencies (injected via constructor):
        - AgeGroupRepository: Parent existence and club ownership check
        - TeamRepository: For persistence
    """

    def __init__(
        self,
        age_group_repo: AgeGroupRepository,
        team_repo: TeamRepository,
    ) -> None:
        self._age_group_repo = age_group_repo
        self._team_repo = team_repo

    async def handle(self, cmd: CreateTeam) -> Result[TeamResult, DomainError]:
        """Handle CreateTeam command.

        Returns:
            Success(TeamResult): Created team.
            Failure(NotFoundError): Age group does not exist.
            Failure(ValidationError): Age group belongs to another club.
        """
        age_group = (
            await self._age_group_repo.find_by_id(cmd.age_group_id)
            if cmd.age_group_id
            else None
        )
        if age_group is None:
            return Failure(
                error=not_found(
                    "AgeGroup", cmd.age_group_id, ErrorCode.AGE_GROUP_NOT_FOUND
                )
            )
        if age_group.club_id != cmd.club_id:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.CLUB_MISMATCH,
                    message=TeamError.AGE_GROUP_NOT_IN_CLUB,
                    field="ageGroupId",
                )
            )

        team = Team(
            id=uuid7(),
            club_id=age_group.club_id,
            age_group_id=age_group.id,
            name=cmd.name,
            short_name=cmd.short_name,
            level=Level.from_label(cmd.level) or Level.YOUTH,
            season=cmd.season,
            primary_color=cmd.primary_color,
            secondary_color=cmd.secondary_color,
        )
        await self._team_repo.save(team)

        return Success(value=to_team_result(team))


class UpdateTeamHandler:
    """Handler for UpdateTeam command (full replace, active teams only)."""

    def __init__(self, team_repo: TeamRepository) -> None:
        self._team_repo = team_repo

    async def handle(self, cmd: UpdateTeam) -> Result[TeamResult, DomainError]:
        team = await self._team_repo.find_by_id(cmd.team_id)
        if team is None:
            return Failure(error=not_found("Team", cmd.team_id, ErrorCode.TEAM_NOT_FOUND))
        if team.is_archived:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.TEAM_ARCHIVED,
                    message=TeamError.TEAM_ARCHIVED,
                    field="isArchived",
                )
            )

        team.name = cmd.name
        team.short_name = cmd.short_name
        team.level = Level.from_label(cmd.level) or team.level
        team.season = cmd.season
        team.primary_color = cmd.primary_color
        team.secondary_color = cmd.secondary_color

        await self._team_repo.save(team)

        return Success(value=to_team_result(team))


class ArchiveTeamHandler:
    """Handler for ArchiveTeam command (sets or clears the archive flag)."""

    def __init__(self, team_repo: TeamRepository) -> None:
        self._team_repo = team_repo

    async def handle(self, cmd: ArchiveTeam) -> Result[TeamResult, DomainError]:
        team = await self._team_repo.find_by_id(cmd.team_id)
        if team is None:
            return Failure(error=not_found("Team", cmd.team_id, ErrorCode.TEAM_NOT_FOUND))

        team.is_archived = cmd.is_archived
        await self._team_repo.save(team)

        return Success(value=to_team_result(team))
