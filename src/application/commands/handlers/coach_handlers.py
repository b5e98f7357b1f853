"""Coach command handlers.

Reference:
    - src/application/commands/coach_commands.py
"""

from src.application.commands.coach_commands import UpdateCoach
from src.application.dtos.coach_dtos import CoachResult, to_coach_result
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.coach import CoachTeam
from src.domain.enums import CoachRole
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.team_repository import TeamRepository


class UpdateCoachError:
    """UpdateCoach-specific error messages."""

    INVALID_ROLE = f"Invalid role. Must be one of: {', '.join(CoachRole.labels())}."
    CLUB_MISMATCH = "All teams must belong to the coach's club"


class UpdateCoachHandler:
    """Handler for UpdateCoach command.

    Team assignments are replaced by ``team_ids``: teams the coach already
    coaches keep their role, new ones get the coach's default role.

    Dependencies (injected via constructor):
        - CoachRepository: For persistence
        - TeamRepository: Existence and club of the requested teams
    """

    def __init__(self, coach_repo: CoachRepository, team_repo: TeamRepository) -> None:
        self._coach_repo = coach_repo
        self._team_repo = team_repo

    async def handle(self, cmd: UpdateCoach) -> Result[CoachResult, DomainError]:
        """Handle UpdateCoach command.

        Returns:
            Success(CoachResult): Coach as persisted, with teams.
            Failure(NotFoundError): Coach or one of the teams does not exist.
            Failure(ValidationError): Unknown role, or a team of another club.
        """
        coach = await self._coach_repo.find_by_id(cmd.coach_id)
        if coach is None:
            return Failure(
                error=not_found("Coach", cmd.coach_id, ErrorCode.COACH_NOT_FOUND)
            )

        role = CoachRole.from_label(cmd.role or "")
        if role is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_ENUM_VALUE,
                    message=UpdateCoachError.INVALID_ROLE,
                    field="role",
                )
            )

        team_ids = list(dict.fromkeys(cmd.team_ids))
        teams = {team.id: team for team in await self._team_repo.find_by_ids(team_ids)}
        for team_id in team_ids:
            team = teams.get(team_id)
            if team is None:
                return Failure(error=not_found("Team", team_id, ErrorCode.TEAM_NOT_FOUND))
            if team.club_id != coach.club_id:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.CLUB_MISMATCH,
                        message=UpdateCoachError.CLUB_MISMATCH,
                        field="teamIds",
                    )
                )

        current_roles = {t.team_id: t.role for t in coach.teams}

        coach.first_name = cmd.first_name
        coach.last_name = cmd.last_name
        coach.role = role
        coach.photo = cmd.photo
        coach.email = cmd.email
        coach.phone = cmd.phone
        coach.date_of_birth = cmd.date_of_birth
        coach.association_id = cmd.association_id
        coach.biography = cmd.biography
        coach.specializations = list(cmd.specializations)
        coach.is_archived = cmd.is_archived
        coach.teams = [
            CoachTeam(
                team_id=team_id,
                name=teams[team_id].name,
                role=current_roles.get(team_id, role),
            )
            for team_id in team_ids
        ]

        await self._coach_repo.save(coach)

        saved = await self._coach_repo.find_by_id(coach.id) or coach
        return Success(value=to_coach_result(saved))
