"""User query handlers.

"My" queries resolve the caller through the coach linked to their user
account; callers with no user record or no linked coach see empty lists.
"""

from src.application.dtos.club_dtos import MyClubResult, to_club_brief, to_my_club
from src.application.dtos.team_dtos import MyTeamResult, to_my_team
from src.application.dtos.user_dtos import UserResult, to_user_result
from src.application.queries.user_queries import (
    GetCurrentUser,
    GetMyClubs,
    GetMyTeamsAndClubs,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.team import Team
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.team_repository import TeamRepository
from src.domain.protocols.user_repository import UserRepository


class GetCurrentUserHandler:
    """The user record behind the authenticated principal."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetCurrentUser) -> Result[UserResult, DomainError]:
        user = await self._user_repo.find_by_auth_id(query.auth_id)
        if user is None:
            return Failure(
                error=not_found("User", query.auth_id, ErrorCode.USER_NOT_FOUND)
            )
        return Success(value=to_user_result(user))


async def _coached_teams(
    auth_id: str,
    user_repo: UserRepository,
    coach_repo: CoachRepository,
    team_repo: TeamRepository,
) -> list[Team]:
    user = await user_repo.find_by_auth_id(auth_id)
    if user is None:
        return []
    coach = await coach_repo.find_by_user_id(user.id)
    if coach is None or coach.is_archived or not coach.teams:
        return []
    teams = await team_repo.find_by_ids([t.team_id for t in coach.teams])
    return [t for t in teams if not t.is_archived]


class GetMyClubsHandler:
    """Clubs the caller coaches in, ordered by name, with active counts."""

    def __init__(
        self,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
        team_repo: TeamRepository,
        club_repo: ClubRepository,
    ) -> None:
        self._user_repo = user_repo
        self._coach_repo = coach_repo
        self._team_repo = team_repo
        self._club_repo = club_repo

    async def handle(self, query: GetMyClubs) -> Result[list[MyClubResult], DomainError]:
        teams = await _coached_teams(
            query.auth_id, self._user_repo, self._coach_repo, self._team_repo
        )
        results: list[MyClubResult] = []
        for club_id in dict.fromkeys(t.club_id for t in teams):
            club = await self._club_repo.find_by_id(club_id)
            if club is None:
                continue
            results.append(to_my_club(club, await self._club_repo.get_counts(club.id)))
        results.sort(key=lambda c: c.name)
        return Success(value=results)


class GetMyTeamsAndClubsHandler:
    """Handler for GetMyTeamsAndClubs query.

    Active teams the caller coaches, ordered by age group name descending
    then team name, each carrying a brief of its club.

    Dependencies (injected via constructor):
        - UserRepository: Caller's user record
        - CoachRepository: Coach linked to the user and its assignments
        - TeamRepository: Assigned teams
        - AgeGroupRepository: Age group name and squad size
        - ClubRepository: Club briefs
    """

    def __init__(
        self,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
        team_repo: TeamRepository,
        age_group_repo: AgeGroupRepository,
        club_repo: ClubRepository,
    ) -> None:
        self._user_repo = user_repo
        self._coach_repo = coach_repo
        self._team_repo = team_repo
        self._age_group_repo = age_group_repo
        self._club_repo = club_repo

    async def handle(
        self, query: GetMyTeamsAndClubs
    ) -> Result[list[MyTeamResult], DomainError]:
        teams = await _coached_teams(
            query.auth_id, self._user_repo, self._coach_repo, self._team_repo
        )
        results: list[MyTeamResult] = []
        for team in teams:
            age_group = await self._age_group_repo.find_by_id(team.age_group_id)
            club = await self._club_repo.find_by_id(team.club_id)
            results.append(
                to_my_team(team, age_group, to_club_brief(club) if club else None)
            )
        results.sort(key=lambda t: t.name)
        results.sort(key=lambda t: t.age_group_name or "", reverse=True)
        return Success(value=results)
