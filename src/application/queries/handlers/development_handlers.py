"""Development plan and report card query handlers.

Plan lists (club, age group, team) carry a short summary of each plan's
player; plans of players outside the listing's scope never appear.
"""

from uuid import UUID

from src.application.dtos.development_dtos import (
    DevelopmentPlanListItemResult,
    DevelopmentPlanResult,
    ReportResult,
    to_plan_list_item,
    to_plan_result,
    to_report_result,
)
from src.application.queries.age_group_queries import GetAgeGroupDevelopmentPlans
from src.application.queries.development_queries import (
    GetDevelopmentPlanById,
    GetDevelopmentPlansByClubId,
    GetDevelopmentPlansByTeamId,
    GetReportById,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.player import Player
from src.domain.enums.plan_status import PlanStatus
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.development_plan_repository import (
    DevelopmentPlanRepository,
)
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.report_repository import ReportRepository
from src.domain.protocols.team_repository import TeamRepository


class GetDevelopmentPlanByIdHandler:
    """Plan with its goals ordered by start date."""

    def __init__(self, plan_repo: DevelopmentPlanRepository) -> None:
        self._plan_repo = plan_repo

    async def handle(
        self, query: GetDevelopmentPlanById
    ) -> Result[DevelopmentPlanResult, DomainError]:
        plan = await self._plan_repo.find_by_id(query.plan_id)
        if plan is None:
            return Failure(
                error=not_found(
                    "DevelopmentPlan", query.plan_id, ErrorCode.DEVELOPMENT_PLAN_NOT_FOUND
                )
            )
        return Success(value=to_plan_result(plan))


async def _plans_for(
    plan_repo: DevelopmentPlanRepository, players: list[Player]
) -> list[DevelopmentPlanListItemResult]:
    by_id: dict[UUID, Player] = {p.id: p for p in players}
    plans = await plan_repo.list_by_players(list(by_id))
    return [to_plan_list_item(plan, by_id.get(plan.player_id)) for plan in plans]


class GetDevelopmentPlansByClubIdHandler:
    """Plans of a club's players (archived included), newest first."""

    def __init__(
        self,
        club_repo: ClubRepository,
        player_repo: PlayerRepository,
        plan_repo: DevelopmentPlanRepository,
    ) -> None:
        self._club_repo = club_repo
        self._player_repo = player_repo
        self._plan_repo = plan_repo

    async def handle(
        self, query: GetDevelopmentPlansByClubId
    ) -> Result[list[DevelopmentPlanListItemResult], DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )
        players = await self._player_repo.list_by_club(club.id, include_archived=True)
        return Success(value=await _plans_for(self._plan_repo, players))


class GetAgeGroupDevelopmentPlansHandler:
    """Plans of an age group's players, newest first."""

    def __init__(
        self,
        age_group_repo: AgeGroupRepository,
        player_repo: PlayerRepository,
        plan_repo: DevelopmentPlanRepository,
    ) -> None:
        self._age_group_repo = age_group_repo
        self._player_repo = player_repo
        self._plan_repo = plan_repo

    async def handle(
        self, query: GetAgeGroupDevelopmentPlans
    ) -> Result[list[DevelopmentPlanListItemResult], DomainError]:
        age_group = await self._age_group_repo.find_by_id(query.age_group_id)
        if age_group is None:
            return Failure(
                error=not_found(
                    "AgeGroup", query.age_group_id, ErrorCode.AGE_GROUP_NOT_FOUND
                )
            )
        players = await self._player_repo.list_by_age_group(
            age_group.id, include_archived=True
        )
        return Success(value=await _plans_for(self._plan_repo, players))


class GetDevelopmentPlansByTeamIdHandler:
    """Plans of a team's players: active plans first, then newest first."""

    def __init__(
        self,
        team_repo: TeamRepository,
        player_repo: PlayerRepository,
        plan_repo: DevelopmentPlanRepository,
    ) -> None:
        self._team_repo = team_repo
        self._player_repo = player_repo
        self._plan_repo = plan_repo

    async def handle(
        self, query: GetDevelopmentPlansByTeamId
    ) -> Result[list[DevelopmentPlanListItemResult], DomainError]:
        team = await self._team_repo.find_by_id(query.team_id)
        if team is None:
            return Failure(
                error=not_found("Team", query.team_id, ErrorCode.TEAM_NOT_FOUND)
            )
        players = await self._player_repo.list_by_team(team.id, include_archived=True)
        plans = await _plans_for(self._plan_repo, players)
        # Stable sort keeps newest-first order within each group.
        plans.sort(key=lambda p: p.status != PlanStatus.ACTIVE.label)
        return Success(value=plans)


class GetReportByIdHandler:
    def __init__(self, report_repo: ReportRepository) -> None:
        self._report_repo = report_repo

    async def handle(self, query: GetReportById) -> Result[ReportResult, DomainError]:
        report = await self._report_repo.find_by_id(query.report_id)
        if report is None:
            return Failure(
                error=not_found("Report", query.report_id, ErrorCode.REPORT_NOT_FOUND)
            )
        return Success(value=to_report_result(report))
