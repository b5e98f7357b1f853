"""Team coach command handlers.

Handles assigning coaches to teams, changing their role and removing them.
A coach may only be assigned to teams of their own club.

Reference:
    - src/application/commands/team_commands.py
"""

from src.application.commands.team_commands import (
    AssignCoachToTeam,
    RemoveCoachFromTeam,
    UpdateTeamCoachRole,
)
from src.application.dtos.team_dtos import TeamCoachAssignmentResult
from src.core.enums import ErrorCode
from src.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
    not_found,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.team import TeamCoachAssignment
from src.domain.enums import CoachRole
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.team_coach_repository import TeamCoachRepository
from src.domain.protocols.team_repository import TeamRepository


class TeamCoachError:
    """Team coach error messages."""

    INVALID_ROLE = f"Invalid role. Must be one of: {', '.join(CoachRole.labels())}."
    TEAM_ARCHIVED = "Cannot assign coaches to an archived team"
    COACH_ARCHIVED = "Cannot assign an archived coach"
    CLUB_MISMATCH = "Coach does not belong to the team's club"
    ALREADY_ASSIGNED = "Coach is already assigned to this team"
    ASSIGNMENT_NOT_FOUND = "Coach is not assigned to this team"


def _parse_role(label: str) -> CoachRole | ValidationError:
    role = CoachRole.from_label(label or "")
    if role is None:
        return ValidationError(
            code=ErrorCode.INVALID_ENUM_VALUE,
            message=TeamCoachError.INVALID_ROLE,
            field="role",
        )
    return role


def _assignment_not_found(team_id: object, coach_id: object) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.MEMBERSHIP_NOT_FOUND,
        message=TeamCoachError.ASSIGNMENT_NOT_FOUND,
        resource_type="TeamCoach",
        resource_id=f"{team_id}/{coach_id}",
    )


class AssignCoachToTeamHandler:
    """Handler for AssignCoachToTeam command.

    Dependencies (injected via constructor):
        - TeamRepository: Team existence and archive check
        - CoachRepository: Coach existence, archive and club check
        - TeamCoachRepository: Duplicate check and persistence
    """

    def __init__(
        self,
        team_repo: TeamRepository,
        coach_repo: CoachRepository,
        team_coach_repo: TeamCoachRepository,
    ) -> None:
        self._team_repo = team_repo
        self._coach_repo = coach_repo
        self._team_coach_repo = team_coach_repo

    async def handle(
        self, cmd: AssignCoachToTeam
    ) -> Result[TeamCoachAssignmentResult, DomainError]:
        """Handle AssignCoachToTeam command.

        Returns:
            Success(TeamCoachAssignmentResult): Coach assigned.
            Failure(ValidationError): Bad role, archived team/coach, other club.
            Failure(NotFoundError): Team or coach does not exist.
            Failure(ConflictError): Coach already assigned.
        """
        role = _parse_role(cmd.role)
        if isinstance(role, ValidationError):
            return Failure(error=role)

        team = await self._team_repo.find_by_id(cmd.team_id)
        if team is None:
            return Failure(error=not_found("Team", cmd.team_id, ErrorCode.TEAM_NOT_FOUND))
        if team.is_archived:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.TEAM_ARCHIVED,
                    message=TeamCoachError.TEAM_ARCHIVED,
                    field="teamId",
                )
            )

        coach = await self._coach_repo.find_by_id(cmd.coach_id) if cmd.coach_id else None
        if coach is None:
            return Failure(
                error=not_found("Coach", cmd.coach_id, ErrorCode.COACH_NOT_FOUND)
            )
        if coach.is_archived:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.COACH_ARCHIVED,
                    message=TeamCoachError.COACH_ARCHIVED,
                    field="coachId",
                )
            )
        if coach.club_id != team.club_id:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.CLUB_MISMATCH,
                    message=TeamCoachError.CLUB_MISMATCH,
                    field="coachId",
                )
            )

        if await self._team_coach_repo.find(team.id, coach.id) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.COACH_ALREADY_ASSIGNED,
                    message=TeamCoachError.ALREADY_ASSIGNED,
                    resource_type="TeamCoach",
                    conflicting_field="coachId",
                )
            )

        await self._team_coach_repo.add(
            TeamCoachAssignment(team_id=team.id, coach_id=coach.id, role=role)
        )

        return Success(
            value=TeamCoachAssignmentResult(
                team_id=team.id, coach_id=coach.id, role=role.label
            )
        )


class RemoveCoachFromTeamHandler:
    """Handler for RemoveCoachFromTeam command."""

    def __init__(self, team_coach_repo: TeamCoachRepository) -> None:
        self._team_coach_repo = team_coach_repo

    async def handle(self, cmd: RemoveCoachFromTeam) -> Result[None, DomainError]:
        if await self._team_coach_repo.find(cmd.team_id, cmd.coach_id) is None:
            return Failure(error=_assignment_not_found(cmd.team_id, cmd.coach_id))

        await self._team_coach_repo.remove(cmd.team_id, cmd.coach_id)
        return Success(value=None)


class UpdateTeamCoachRoleHandler:
    """Handler for UpdateTeamCoachRole command."""

    def __init__(self, team_coach_repo: TeamCoachRepository) -> None:
        self._team_coach_repo = team_coach_repo

    async def handle(
        self, cmd: UpdateTeamCoachRole
    ) -> Result[TeamCoachAssignmentResult, DomainError]:
        if await self._team_coach_repo.find(cmd.team_id, cmd.coach_id) is None:
            return Failure(error=_assignment_not_found(cmd.team_id, cmd.coach_id))

        role = _parse_role(cmd.role)
        if isinstance(role, ValidationError):
            return Failure(error=role)

        await self._team_coach_repo.update_role(cmd.team_id, cmd.coach_id, role)

        return Success(
            value=TeamCoachAssignmentResult(
                team_id=cmd.team_id, coach_id=cmd.coach_id, role=role.label
            )
        )
