"""Age group query handlers.

Reference:
    - src/domain/services/match_statistics.py
"""

from dataclasses import replace
from datetime import date
from uuid import UUID

from src.application.dtos.age_group_dtos import (
    AgeGroupResult,
    AgeGroupStatisticsResult,
    to_age_group_result,
)
from src.application.dtos.coach_dtos import CoachResult, to_coach_result
from src.application.dtos.player_dtos import PlayerListItemResult, to_player_list_item
from src.application.queries.age_group_queries import (
    GetAgeGroupById,
    GetAgeGroupsByClubId,
    GetAgeGroupStatistics,
    GetCoachesByAgeGroupId,
    GetPlayersByAgeGroupId,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, not_found
from src.core.result import Failure, Result, Success
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.match_repository import MatchRepository
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.team_membership_repository import (
    TeamMembershipRepository,
)
from src.domain.protocols.team_repository import TeamRepository
from src.domain.services.match_statistics import compute_record


class GetAgeGroupByIdHandler:
    def __init__(self, age_group_repo: AgeGroupRepository) -> None:
        self._age_group_repo = age_group_repo

    async def handle(
        self, query: GetAgeGroupById
    ) -> Result[AgeGroupResult, DomainError]:
        age_group = await self._age_group_repo.find_by_id(query.age_group_id)
        if age_group is None:
            return Failure(
                error=not_found(
                    "AgeGroup", query.age_group_id, ErrorCode.AGE_GROUP_NOT_FOUND
                )
            )
        return Success(value=to_age_group_result(age_group))


class GetAgeGroupsByClubIdHandler:
    """Age groups of a club ordered by name, each with its active team count."""

    def __init__(
        self, club_repo: ClubRepository, age_group_repo: AgeGroupRepository
    ) -> None:
        self._club_repo = club_repo
        self._age_group_repo = age_group_repo

    async def handle(
        self, query: GetAgeGroupsByClubId
    ) -> Result[list[AgeGroupResult], DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )

        summaries = await self._age_group_repo.list_by_club(
            club.id, include_archived=query.include_archived
        )
        return Success(
            value=[
                to_age_group_result(s.age_group, team_count=s.team_count)
                for s in summaries
            ]
        )


class GetAgeGroupStatisticsHandler:
    """Handler for GetAgeGroupStatistics query.

    Dependencies (injected via constructor):
        - AgeGroupRepository: Age group existence
        - TeamRepository: Active teams of the group
        - TeamMembershipRepository: Distinct active players on those teams
        - MatchRepository: Matches of those teams
    """

    def __init__(
        self,
        age_group_repo: AgeGroupRepository,
        team_repo: TeamRepository,
        membership_repo: TeamMembershipRepository,
        match_repo: MatchRepository,
    ) -> None:
        self._age_group_repo = age_group_repo
        self._team_repo = team_repo
        self._membership_repo = membership_repo
        self._match_repo = match_repo

    async def handle(
        self, query: GetAgeGroupStatistics
    ) -> Result[AgeGroupStatisticsResult, DomainError]:
        age_group = await self._age_group_repo.find_by_id(query.age_group_id)
        if age_group is None:
            return Failure(
                error=not_found(
                    "AgeGroup", query.age_group_id, ErrorCode.AGE_GROUP_NOT_FOUND
                )
            )

        teams = await self._team_repo.list_by_age_group(age_group.id)
        team_ids = [t.id for t in teams]
        player_count = await self._membership_repo.count_players(team_ids)
        record = compute_record(await self._match_repo.list_by_teams(team_ids))

        return Success(
            value=AgeGroupStatisticsResult(
                player_count=player_count,
                team_count=len(teams),
                matches_played=record.matches_played,
                wins=record.wins,
                draws=record.draws,
                losses=record.losses,
                win_rate=record.win_rate,
                goal_difference=record.goal_difference,
            )
        )


class GetPlayersByAgeGroupIdHandler:
    """Players of an age group ordered by first then last name."""

    def __init__(
        self, age_group_repo: AgeGroupRepository, player_repo: PlayerRepository
    ) -> None:
        self._age_group_repo = age_group_repo
        self._player_repo = player_repo

    async def handle(
        self, query: GetPlayersByAgeGroupId
    ) -> Result[list[PlayerListItemResult], DomainError]:
        age_group = await self._age_group_repo.find_by_id(query.age_group_id)
        if age_group is None:
            return Failure(error=_age_group_not_found(query.age_group_id))

        players = await self._player_repo.list_by_age_group(
            age_group.id, include_archived=query.include_archived
        )
        today = date.today()
        return Success(value=[to_player_list_item(p, today) for p in players])


class GetCoachesByAgeGroupIdHandler:
    """Handler for GetCoachesByAgeGroupId query.

    Coaches of the age group's non-archived teams, each listed once with only
    the assignments inside this age group.
    """

    def __init__(
        self,
        age_group_repo: AgeGroupRepository,
        team_repo: TeamRepository,
        coach_repo: CoachRepository,
    ) -> None:
        self._age_group_repo = age_group_repo
        self._team_repo = team_repo
        self._coach_repo = coach_repo

    async def handle(
        self, query: GetCoachesByAgeGroupId
    ) -> Result[list[CoachResult], DomainError]:
        age_group = await self._age_group_repo.find_by_id(query.age_group_id)
        if age_group is None:
            return Failure(error=_age_group_not_found(query.age_group_id))

        team_ids = {t.id for t in await self._team_repo.list_by_age_group(age_group.id)}
        coaches = await self._coach_repo.list_by_teams(list(team_ids))
        return Success(
            value=[
                to_coach_result(
                    replace(coach, teams=[t for t in coach.teams if t.team_id in team_ids])
                )
                for coach in coaches
            ]
        )


def _age_group_not_found(age_group_id: UUID) -> NotFoundError:
    return not_found("AgeGroup", age_group_id, ErrorCode.AGE_GROUP_NOT_FOUND)
