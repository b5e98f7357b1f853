"""Team query handlers.

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Returns Result[DTO, DomainError]
- The overview combines the team record, fixtures and performer rankings,
  all computed per request

Reference:
    - src/domain/services/match_statistics.py
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.dtos.kit_dtos import KitResult, to_kit_result
from src.application.dtos.match_dtos import MatchSummaryResult, to_match_summary
from src.application.dtos.team_dtos import (
    PerformerResult,
    SquadPlayerResult,
    TeamCoachResult,
    TeamDetailResult,
    TeamOverviewResult,
    TeamPlayerResult,
    TeamResult,
    to_squad_player,
    to_team_coach,
    to_team_player,
    to_team_result,
    to_team_stats,
)
from src.application.queries.team_queries import (
    GetCoachesByTeamId,
    GetKitsByTeamId,
    GetMatchesByTeamId,
    GetPlayersByTeamId,
    GetTeamById,
    GetTeamOverview,
    GetTeamsByAgeGroupId,
    GetTeamSquad,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.team import TeamMember
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.kit_repository import KitRepository
from src.domain.protocols.match_repository import MatchRepository
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.team_coach_repository import TeamCoachRepository
from src.domain.protocols.team_membership_repository import (
    TeamMembershipRepository,
)
from src.domain.protocols.team_repository import TeamRepository
from src.domain.services.match_statistics import (
    PerformerSummary,
    compute_record,
    previous_results,
    rank_performers,
    upcoming_matches,
)


def _team_not_found(team_id: UUID) -> NotFoundError:
    return not_found("Team", team_id, ErrorCode.TEAM_NOT_FOUND)


class GetTeamOverviewHandler:
    """Handler for GetTeamOverview query.

    Dependencies (injected via constructor):
        - TeamRepository: Team existence
        - MatchRepository: Matches and performance ratings
        - TeamMembershipRepository: Squad (player count, performer names)
        - PlayerRepository: Names of rated players no longer on the squad
    """

    def __init__(
        self,
        team_repo: TeamRepository,
        match_repo: MatchRepository,
        membership_repo: TeamMembershipRepository,
        player_repo: PlayerRepository,
    ) -> None:
        self._team_repo = team_repo
        self._match_repo = match_repo
        self._membership_repo = membership_repo
        self._player_repo = player_repo

    async def handle(
        self, query: GetTeamOverview
    ) -> Result[TeamOverviewResult, DomainError]:
        """Handle GetTeamOverview query.

        Returns:
            Success(TeamOverviewResult): Team, record, fixtures, performers.
            Failure(NotFoundError): Team does not exist.
        """
        team = await self._team_repo.find_by_id(query.team_id)
        if team is None:
            return Failure(error=_team_not_found(query.team_id))

        # Step 1: Record and fixtures
        matches = await self._match_repo.list_by_team(team.id)
        record = compute_record(matches)
        player_count = await self._membership_repo.count_players([team.id])

        # Step 2: Performer rankings (players with at least three ratings)
        top, under = rank_performers(await self._match_repo.list_ratings(team.id))
        members = {m.player_id: m for m in await self._membership_repo.list_members(team.id)}

        return Success(
            value=TeamOverviewResult(
                team=to_team_result(team),
                statistics=to_team_stats(record, player_count),
                upcoming_matches=[
                    to_match_summary(m)
                    for m in upcoming_matches(matches, datetime.now(UTC))
                ],
                previous_results=[to_match_summary(m) for m in previous_results(matches)],
                top_performers=await self._performers(top, members),
                underperforming=await self._performers(under, members),
            )
        )

    async def _performers(
        self, summaries: list[PerformerSummary], members: dict[UUID, TeamMember]
    ) -> list[PerformerResult]:
        performers: list[PerformerResult] = []
        for summary in summaries:
            member = members.get(summary.player_id)
            if member is not None:
                first, last, photo = member.first_name, member.last_name, member.photo_url
            else:
                player = await self._player_repo.find_by_id(summary.player_id)
                if player is None:
                    continue
                first, last, photo = player.first_name, player.last_name, player.photo
            performers.append(
                PerformerResult(
                    player_id=summary.player_id,
                    first_name=first,
                    last_name=last,
                    photo_url=photo,
                    average_rating=summary.average_rating,
                    matches_rated=summary.matches_rated,
                )
            )
        return performers


class GetTeamsByAgeGroupIdHandler:
    """Active teams of an age group ordered by name, each with stats."""

    def __init__(
        self,
        age_group_repo: AgeGroupRepository,
        team_repo: TeamRepository,
        membership_repo: TeamMembershipRepository,
        team_coach_repo: TeamCoachRepository,
        match_repo: MatchRepository,
    ) -> None:
        self._age_group_repo = age_group_repo
        self._team_repo = team_repo
        self._membership_repo = membership_repo
        self._team_coach_repo = team_coach_repo
        self._match_repo = match_repo

    async def handle(
        self, query: GetTeamsByAgeGroupId
    ) -> Result[list[TeamResult], DomainError]:
        age_group = await self._age_group_repo.find_by_id(query.age_group_id)
        if age_group is None:
            return Failure(
                error=not_found(
                    "AgeGroup", query.age_group_id, ErrorCode.AGE_GROUP_NOT_FOUND
                )
            )

        results: list[TeamResult] = []
        for team in await self._team_repo.list_by_age_group(age_group.id):
            record = compute_record(await self._match_repo.list_by_team(team.id))
            stats = to_team_stats(
                record,
                player_count=await self._membership_repo.count_players([team.id]),
                coach_count=await self._team_coach_repo.count_coaches([team.id]),
            )
            results.append(to_team_result(team, stats=stats))
        return Success(value=results)


class GetPlayersByTeamIdHandler:
    """Active squad ordered by squad number, then last and first name."""

    def __init__(
        self, team_repo: TeamRepository, membership_repo: TeamMembershipRepository
    ) -> None:
        self._team_repo = team_repo
        self._membership_repo = membership_repo

    async def handle(
        self, query: GetPlayersByTeamId
    ) -> Result[list[TeamPlayerResult], DomainError]:
        team = await self._team_repo.find_by_id(query.team_id)
        if team is None:
            return Failure(error=_team_not_found(query.team_id))
        members = await self._membership_repo.list_members(team.id)
        return Success(value=[to_team_player(m) for m in members])


class GetCoachesByTeamIdHandler:
    def __init__(
        self, team_repo: TeamRepository, team_coach_repo: TeamCoachRepository
    ) -> None:
        self._team_repo = team_repo
        self._team_coach_repo = team_coach_repo

    async def handle(
        self, query: GetCoachesByTeamId
    ) -> Result[list[TeamCoachResult], DomainError]:
        team = await self._team_repo.find_by_id(query.team_id)
        if team is None:
            return Failure(error=_team_not_found(query.team_id))
        staff = await self._team_coach_repo.list_staff(team.id)
        return Success(value=[to_team_coach(s) for s in staff])


class GetMatchesByTeamIdHandler:
    def __init__(self, team_repo: TeamRepository, match_repo: MatchRepository) -> None:
        self._team_repo = team_repo
        self._match_repo = match_repo

    async def handle(
        self, query: GetMatchesByTeamId
    ) -> Result[list[MatchSummaryResult], DomainError]:
        team = await self._team_repo.find_by_id(query.team_id)
        if team is None:
            return Failure(error=_team_not_found(query.team_id))
        matches = await self._match_repo.list_by_team(team.id)
        return Success(value=[to_match_summary(m) for m in matches])


class GetKitsByTeamIdHandler:
    def __init__(self, team_repo: TeamRepository, kit_repo: KitRepository) -> None:
        self._team_repo = team_repo
        self._kit_repo = kit_repo

    async def handle(
        self, query: GetKitsByTeamId
    ) -> Result[list[KitResult], DomainError]:
        team = await self._team_repo.find_by_id(query.team_id)
        if team is None:
            return Failure(error=_team_not_found(query.team_id))
        kits = await self._kit_repo.list_by_team(team.id)
        return Success(value=[to_kit_result(kit) for kit in kits])


class GetTeamByIdHandler:
    """Team detail with its record of completed matches and coach IDs."""

    def __init__(
        self,
        team_repo: TeamRepository,
        team_coach_repo: TeamCoachRepository,
        membership_repo: TeamMembershipRepository,
        match_repo: MatchRepository,
    ) -> None:
        self._team_repo = team_repo
        self._team_coach_repo = team_coach_repo
        self._membership_repo = membership_repo
        self._match_repo = match_repo

    async def handle(self, query: GetTeamById) -> Result[TeamDetailResult, DomainError]:
        team = await self._team_repo.find_by_id(query.team_id)
        if team is None:
            return Failure(error=_team_not_found(query.team_id))

        record = compute_record(await self._match_repo.list_by_team(team.id))
        player_count = await self._membership_repo.count_players([team.id])
        staff = await self._team_coach_repo.list_staff(team.id)
        base = to_team_result(team, to_team_stats(record, player_count))
        return Success(
            value=TeamDetailResult(**vars(base), coach_ids=[s.coach_id for s in staff])
        )


class GetTeamSquadHandler:
    """Squad sheet: active players with date of birth and first-choice position."""

    def __init__(
        self, team_repo: TeamRepository, membership_repo: TeamMembershipRepository
    ) -> None:
        self._team_repo = team_repo
        self._membership_repo = membership_repo

    async def handle(
        self, query: GetTeamSquad
    ) -> Result[list[SquadPlayerResult], DomainError]:
        team = await self._team_repo.find_by_id(query.team_id)
        if team is None:
            return Failure(error=_team_not_found(query.team_id))
        members = await self._membership_repo.list_members(team.id)
        return Success(value=[to_squad_player(m) for m in members])
