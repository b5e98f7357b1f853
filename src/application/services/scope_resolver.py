"""Scope resolution for newly created drills and templates.

Turns the scope named by a create request (club, optional age group,
optional team) into the scope link to store, at the most specific level
given. The named club, age group and team must exist and sit on one branch
of the club tree.

Architecture:
    - Application service (session-scoped; built by the handler factory)
    - Returns Result; handlers pass failures through unchanged

Usage:
    scope_result = await self._scope_resolver.resolve(cmd.scope)
    if isinstance(scope_result, Failure):
        return scope_result
"""

from src.application.commands.drill_commands import ScopeInput
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.drill import ScopeLink
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.team_repository import TeamRepository


class ScopeError:
    """Scope error messages."""

    SCOPE_REQUIRED = "A scope with a club is required"
    SCOPE_MISMATCH = "Scope age group and team must belong to the scope's club"


def _scope_error(message: str) -> ValidationError:
    return ValidationError(code=ErrorCode.INVALID_SCOPE, message=message, field="scope")


class ScopeResolver:
    """Resolve a requested scope to a stored scope link.

    Args:
        club_repo: Club existence.
        age_group_repo: Age group existence and club.
        team_repo: Team existence, club and age group.
    """

    def __init__(
        self,
        club_repo: ClubRepository,
        age_group_repo: AgeGroupRepository,
        team_repo: TeamRepository,
    ) -> None:
        self._club_repo = club_repo
        self._age_group_repo = age_group_repo
        self._team_repo = team_repo

    async def resolve(self, scope: ScopeInput | None) -> Result[ScopeLink, DomainError]:
        """Resolve ``scope`` to a team, age group or club link.

        A team link also records the team's age group.

        Returns:
            Success(ScopeLink): Link at the most specific level given.
            Failure(ValidationError): No club, or ids from different branches.
            Failure(NotFoundError): Unknown club, age group or team.
        """
        if scope is None or scope.club_id is None:
            return Failure(error=_scope_error(ScopeError.SCOPE_REQUIRED))

        club = await self._club_repo.find_by_id(scope.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", scope.club_id, ErrorCode.CLUB_NOT_FOUND)
            )

        if scope.team_id is not None:
            team = await self._team_repo.find_by_id(scope.team_id)
            if team is None:
                return Failure(
                    error=not_found("Team", scope.team_id, ErrorCode.TEAM_NOT_FOUND)
                )
            if team.club_id != club.id or scope.age_group_id not in (
                None,
                team.age_group_id,
            ):
                return Failure(error=_scope_error(ScopeError.SCOPE_MISMATCH))
            return Success(
                value=ScopeLink(
                    club_id=club.id, age_group_id=team.age_group_id, team_id=team.id
                )
            )

        if scope.age_group_id is not None:
            age_group = await self._age_group_repo.find_by_id(scope.age_group_id)
            if age_group is None:
                return Failure(
                    error=not_found(
                        "AgeGroup", scope.age_group_id, ErrorCode.AGE_GROUP_NOT_FOUND
                    )
                )
            if age_group.club_id != club.id:
                return Failure(error=_scope_error(ScopeError.SCOPE_MISMATCH))
            return Success(value=ScopeLink(club_id=club.id, age_group_id=age_group.id))

        return Success(value=ScopeLink(club_id=club.id))
