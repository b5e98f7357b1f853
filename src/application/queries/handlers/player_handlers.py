"""Player query handlers.

Reference:
    - src/domain/entities/evaluation.py
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.dtos.development_dtos import ReportResult, to_report_result
from src.application.dtos.player_dtos import (
    PlayerAbilitiesResult,
    PlayerAttributesResult,
    PlayerResult,
    RecentPerformanceResult,
    UpcomingMatchResult,
    to_evaluation_result,
    to_player_result,
)
from src.application.queries.player_queries import (
    GetPlayerAbilities,
    GetPlayerAttributes,
    GetPlayerById,
    GetPlayerRecentPerformances,
    GetPlayerReports,
    GetPlayerUpcomingMatches,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.evaluation import PLAYER_ATTRIBUTE_NAMES
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.evaluation_repository import EvaluationRepository
from src.domain.protocols.match_repository import MatchRepository
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.report_repository import ReportRepository
from src.domain.protocols.team_repository import TeamRepository
from src.domain.services.match_statistics import result_label, upcoming_matches


class GetPlayerByIdHandler:
    def __init__(self, player_repo: PlayerRepository, club_repo: ClubRepository) -> None:
        self._player_repo = player_repo
        self._club_repo = club_repo

    async def handle(self, query: GetPlayerById) -> Result[PlayerResult, DomainError]:
        player = await self._player_repo.find_by_id(query.player_id)
        if player is None:
            return Failure(
                error=not_found("Player", query.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )
        club = await self._club_repo.find_by_id(player.club_id)
        return Success(
            value=to_player_result(player, club_name=club.name if club else None)
        )


class GetPlayerAbilitiesHandler:
    """Handler for GetPlayerAbilities query.

    Every known attribute is reported; attributes never rated read as 0.

    Dependencies (injected via constructor):
        - PlayerRepository: Player and current attribute ratings
        - EvaluationRepository: Recent evaluations
    """

    def __init__(
        self, player_repo: PlayerRepository, evaluation_repo: EvaluationRepository
    ) -> None:
        self._player_repo = player_repo
        self._evaluation_repo = evaluation_repo

    async def handle(
        self, query: GetPlayerAbilities
    ) -> Result[PlayerAbilitiesResult, DomainError]:
        player = await self._player_repo.find_by_id(query.player_id)
        if player is None:
            return Failure(
                error=not_found("Player", query.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )

        current = await self._player_repo.get_attribute_ratings(player.id)
        evaluations = await self._evaluation_repo.list_by_player(
            player.id, limit=query.evaluation_limit
        )

        return Success(
            value=PlayerAbilitiesResult(
                id=player.id,
                first_name=player.first_name,
                last_name=player.last_name,
                photo_url=player.photo,
                preferred_positions=list(player.preferred_positions),
                overall_rating=player.overall_rating,
                attributes={name: current.get(name, 0) for name in PLAYER_ATTRIBUTE_NAMES},
                evaluations=[to_evaluation_result(e) for e in evaluations],
            )
        )


class GetPlayerReportsHandler:
    """Report cards of a player, newest first."""

    def __init__(
        self, player_repo: PlayerRepository, report_repo: ReportRepository
    ) -> None:
        self._player_repo = player_repo
        self._report_repo = report_repo

    async def handle(
        self, query: GetPlayerReports
    ) -> Result[list[ReportResult], DomainError]:
        player = await self._player_repo.find_by_id(query.player_id)
        if player is None:
            return Failure(
                error=not_found("Player", query.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )
        reports = await self._report_repo.list_by_player(player.id)
        return Success(value=[to_report_result(r) for r in reports])


class GetPlayerRecentPerformancesHandler:
    """Completed matches the player was rated in, most recent first."""

    def __init__(
        self, player_repo: PlayerRepository, match_repo: MatchRepository
    ) -> None:
        self._player_repo = player_repo
        self._match_repo = match_repo

    async def handle(
        self, query: GetPlayerRecentPerformances
    ) -> Result[list[RecentPerformanceResult], DomainError]:
        player = await self._player_repo.find_by_id(query.player_id)
        if player is None:
            return Failure(
                error=not_found("Player", query.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )
        rated = await self._match_repo.list_rated_for_player(
            player.id, limit=max(1, query.limit)
        )
        return Success(
            value=[
                RecentPerformanceResult(
                    match_id=match.id,
                    team_id=match.team_id,
                    match_date=match.match_date,
                    opposition=match.opposition,
                    is_home=match.is_home,
                    competition=match.competition,
                    result=result_label(match),
                    rating=rating,
                )
                for match, rating in rated
            ]
        )


class GetPlayerUpcomingMatchesHandler:
    """Handler for GetPlayerUpcomingMatches query.

    Scheduled matches of every team the player is on, soonest first.

    Dependencies (injected via constructor):
        - PlayerRepository: Player and team memberships
        - TeamRepository: Team names and age groups
        - AgeGroupRepository: Age group names
        - MatchRepository: Matches of the player's teams
    """

    def __init__(
        self,
        player_repo: PlayerRepository,
        team_repo: TeamRepository,
        age_group_repo: AgeGroupRepository,
        match_repo: MatchRepository,
    ) -> None:
        self._player_repo = player_repo
        self._team_repo = team_repo
        self._age_group_repo = age_group_repo
        self._match_repo = match_repo

    async def handle(
        self, query: GetPlayerUpcomingMatches
    ) -> Result[list[UpcomingMatchResult], DomainError]:
        player = await self._player_repo.find_by_id(query.player_id)
        if player is None:
            return Failure(
                error=not_found("Player", query.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )
        if not player.team_ids:
            return Success(value=[])

        teams = {t.id: t for t in await self._team_repo.find_by_ids(player.team_ids)}
        age_group_names: dict[UUID, str | None] = {}
        for team in teams.values():
            if team.age_group_id not in age_group_names:
                age_group = await self._age_group_repo.find_by_id(team.age_group_id)
                age_group_names[team.age_group_id] = age_group.name if age_group else None

        matches = await self._match_repo.list_by_teams(list(player.team_ids))
        upcoming = upcoming_matches(matches, datetime.now(UTC), limit=max(1, query.limit))

        results = []
        for match in upcoming:
            team = teams.get(match.team_id)
            results.append(
                UpcomingMatchResult(
                    match_id=match.id,
                    team_id=match.team_id,
                    team_name=team.name if team else None,
                    age_group_id=team.age_group_id if team else None,
                    age_group_name=age_group_names.get(team.age_group_id) if team else None,
                    match_date=match.match_date,
                    kick_off_time=match.kick_off_time,
                    opposition=match.opposition,
                    is_home=match.is_home,
                    location=match.location,
                    competition=match.competition,
                )
            )
        return Success(value=results)


class GetPlayerAttributesHandler:
    def __init__(self, player_repo: PlayerRepository) -> None:
        self._player_repo = player_repo

    async def handle(
        self, query: GetPlayerAttributes
    ) -> Result[PlayerAttributesResult, DomainError]:
        player = await self._player_repo.find_by_id(query.player_id)
        if player is None:
            return Failure(
                error=not_found("Player", query.player_id, ErrorCode.PLAYER_NOT_FOUND)
            )
        ratings = await self._player_repo.get_attribute_ratings(player.id)
        if not ratings:
            return Failure(
                error=not_found(
                    "PlayerAttributes", player.id, ErrorCode.PLAYER_ATTRIBUTES_NOT_FOUND
                )
            )
        return Success(value=PlayerAttributesResult(player_id=player.id, attributes=ratings))
