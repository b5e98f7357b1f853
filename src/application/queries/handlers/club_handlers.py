"""Club query handlers.

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Returns Result[DTO, DomainError]
- Statistics are computed per request from the club's matches; nothing is
  cached or denormalised

Reference:
    - src/domain/services/match_statistics.py
"""

import math
from datetime import UTC, date, datetime

from src.application.dtos.club_dtos import (
    ClubDetailResult,
    ClubStatisticsResult,
    ClubSummaryResult,
    to_club_detail,
    to_club_summary,
)
from src.application.dtos.kit_dtos import KitResult, to_kit_result
from src.application.dtos.match_dtos import (
    ClubMatchesResult,
    to_club_match,
    to_match_summary,
)
from src.application.dtos.player_dtos import PlayerPageResult, to_player_list_item
from src.application.dtos.team_dtos import (
    ClubTeamResult,
    to_club_team,
    to_team_coach,
)
from src.application.queries.club_queries import (
    GetAllClubs,
    GetClubById,
    GetClubPlayers,
    GetClubStatistics,
    GetClubTeams,
    GetKitsByClubId,
    GetMatchesByClubId,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, not_found
from src.core.result import Failure, Result, Success
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.kit_repository import KitRepository
from src.domain.protocols.match_repository import MatchRepository
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.team_coach_repository import TeamCoachRepository
from src.domain.protocols.team_membership_repository import (
    TeamMembershipRepository,
)
from src.domain.protocols.team_repository import TeamRepository
from src.domain.services.match_statistics import (
    compute_record,
    filter_by_status,
    previous_results,
    upcoming_matches,
)


class GetAllClubsHandler:
    def __init__(self, club_repo: ClubRepository) -> None:
        self._club_repo = club_repo

    async def handle(
        self, query: GetAllClubs
    ) -> Result[list[ClubSummaryResult], DomainError]:
        clubs = await self._club_repo.list_all()
        return Success(value=[to_club_summary(club) for club in clubs])


class GetClubByIdHandler:
    def __init__(self, club_repo: ClubRepository) -> None:
        self._club_repo = club_repo

    async def handle(self, query: GetClubById) -> Result[ClubDetailResult, DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )
        return Success(value=to_club_detail(club))


class GetClubStatisticsHandler:
    """Handler for GetClubStatistics query.

    Counts cover non-archived entities only; the match record covers every
    completed match of the club's teams, archived teams included.

    Dependencies (injected via constructor):
        - ClubRepository: Club existence and counts
        - TeamRepository: The club's teams
        - MatchRepository: Matches of those teams
    """

    def __init__(
        self,
        club_repo: ClubRepository,
        team_repo: TeamRepository,
        match_repo: MatchRepository,
    ) -> None:
        self._club_repo = club_repo
        self._team_repo = team_repo
        self._match_repo = match_repo

    async def handle(
        self, query: GetClubStatistics
    ) -> Result[ClubStatisticsResult, DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )

        counts = await self._club_repo.get_counts(club.id)
        teams = await self._team_repo.list_by_club(club.id, include_archived=True)
        matches = await self._match_repo.list_by_teams([t.id for t in teams])
        record = compute_record(matches)

        return Success(
            value=ClubStatisticsResult(
                age_group_count=counts.age_group_count,
                team_count=counts.team_count,
                player_count=counts.player_count,
                coach_count=counts.coach_count,
                matches_played=record.matches_played,
                wins=record.wins,
                draws=record.draws,
                losses=record.losses,
                win_rate=record.win_rate,
                goal_difference=record.goal_difference,
                upcoming_matches=[
                    to_match_summary(m)
                    for m in upcoming_matches(matches, datetime.now(UTC))
                ],
                previous_results=[to_match_summary(m) for m in previous_results(matches)],
            )
        )


class GetKitsByClubIdHandler:
    """Club-level kits (no team), ordered by type then name."""

    def __init__(self, club_repo: ClubRepository, kit_repo: KitRepository) -> None:
        self._club_repo = club_repo
        self._kit_repo = kit_repo

    async def handle(
        self, query: GetKitsByClubId
    ) -> Result[list[KitResult], DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )
        kits = await self._kit_repo.list_by_club(club.id)
        return Success(value=[to_kit_result(kit) for kit in kits])


MAX_PAGE_SIZE = 100


class GetClubPlayersHandler:
    """Handler for GetClubPlayers query.

    Filters combine with AND: age group and team membership, a preferred
    position and a case-insensitive search over first name, last name and
    nickname. Results keep the repository's last-name order and are paged
    after filtering; ``page_size`` is clamped to 1..100.

    Dependencies (injected via constructor):
        - ClubRepository: Club existence
        - PlayerRepository: The club's players
        - AgeGroupRepository: Age group names
        - TeamRepository: Team names
    """

    def __init__(
        self,
        club_repo: ClubRepository,
        player_repo: PlayerRepository,
        age_group_repo: AgeGroupRepository,
        team_repo: TeamRepository,
    ) -> None:
        self._club_repo = club_repo
        self._player_repo = player_repo
        self._age_group_repo = age_group_repo
        self._team_repo = team_repo

    async def handle(
        self, query: GetClubPlayers
    ) -> Result[PlayerPageResult, DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )

        players = await self._player_repo.list_by_club(
            club.id, include_archived=query.include_archived
        )
        if query.age_group_id is not None:
            players = [p for p in players if query.age_group_id in p.age_group_ids]
        if query.team_id is not None:
            players = [p for p in players if query.team_id in p.team_ids]
        if query.position:
            position = query.position.strip().lower()
            players = [
                p
                for p in players
                if position in (pos.lower() for pos in p.preferred_positions)
            ]
        if query.search and query.search.strip():
            term = query.search.strip().lower()
            players = [
                p
                for p in players
                if term in p.first_name.lower()
                or term in p.last_name.lower()
                or term in (p.nickname or "").lower()
            ]

        page = max(1, query.page)
        page_size = min(max(1, query.page_size), MAX_PAGE_SIZE)
        total = len(players)
        window = players[(page - 1) * page_size : page * page_size]

        age_groups = await self._age_group_repo.list_by_club(club.id, include_archived=True)
        age_group_names = {s.age_group.id: s.age_group.name for s in age_groups}
        teams = await self._team_repo.list_by_club(club.id, include_archived=True)
        team_names = {t.id: t.name for t in teams}

        today = date.today()
        items = [
            to_player_list_item(
                p,
                today,
                age_group_names=[
                    age_group_names[i] for i in p.age_group_ids if i in age_group_names
                ],
                team_names=[team_names[i] for i in p.team_ids if i in team_names],
            )
            for p in window
        ]
        return Success(
            value=PlayerPageResult(
                items=items,
                page=page,
                page_size=page_size,
                total_count=total,
                total_pages=math.ceil(total / page_size),
            )
        )


class GetClubTeamsHandler:
    """Club teams with staff and player counts.

    Ordered by age group name descending (older groups first), then team
    name.
    """

    def __init__(
        self,
        club_repo: ClubRepository,
        age_group_repo: AgeGroupRepository,
        team_repo: TeamRepository,
        team_coach_repo: TeamCoachRepository,
        membership_repo: TeamMembershipRepository,
    ) -> None:
        self._club_repo = club_repo
        self._age_group_repo = age_group_repo
        self._team_repo = team_repo
        self._team_coach_repo = team_coach_repo
        self._membership_repo = membership_repo

    async def handle(
        self, query: GetClubTeams
    ) -> Result[list[ClubTeamResult], DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )

        teams = await self._team_repo.list_by_club(
            club.id, include_archived=query.include_archived
        )
        if query.age_group_id is not None:
            teams = [t for t in teams if t.age_group_id == query.age_group_id]
        if query.season:
            teams = [t for t in teams if t.season == query.season]

        summaries = await self._age_group_repo.list_by_club(club.id, include_archived=True)
        age_groups = {s.age_group.id: s.age_group for s in summaries}

        results: list[ClubTeamResult] = []
        for team in teams:
            staff = await self._team_coach_repo.list_staff(team.id)
            player_count = await self._membership_repo.count_players([team.id])
            results.append(
                to_club_team(
                    team,
                    age_groups.get(team.age_group_id),
                    [to_team_coach(s) for s in staff],
                    player_count,
                )
            )

        results.sort(key=lambda t: t.name)
        results.sort(key=lambda t: t.age_group_name or "", reverse=True)
        return Success(value=results)


class GetMatchesByClubIdHandler:
    """Matches of a club's active teams, most recent first.

    ``status`` accepts "upcoming" and "past" (relative to now) or a match
    status label; anything else returns every match.
    """

    def __init__(
        self,
        club_repo: ClubRepository,
        age_group_repo: AgeGroupRepository,
        team_repo: TeamRepository,
        match_repo: MatchRepository,
    ) -> None:
        self._club_repo = club_repo
        self._age_group_repo = age_group_repo
        self._team_repo = team_repo
        self._match_repo = match_repo

    async def handle(
        self, query: GetMatchesByClubId
    ) -> Result[ClubMatchesResult, DomainError]:
        club = await self._club_repo.find_by_id(query.club_id)
        if club is None:
            return Failure(
                error=not_found("Club", query.club_id, ErrorCode.CLUB_NOT_FOUND)
            )

        teams = await self._team_repo.list_by_club(club.id)
        if query.age_group_id is not None:
            teams = [t for t in teams if t.age_group_id == query.age_group_id]
        if query.team_id is not None:
            teams = [t for t in teams if t.id == query.team_id]
        by_id = {t.id: t for t in teams}

        summaries = await self._age_group_repo.list_by_club(club.id, include_archived=True)
        age_group_names = {s.age_group.id: s.age_group.name for s in summaries}

        matches = await self._match_repo.list_by_teams(list(by_id)) if by_id else []
        matches = filter_by_status(matches, query.status, datetime.now(UTC))
        matches.sort(key=lambda m: m.match_date, reverse=True)

        items = [
            to_club_match(
                m,
                by_id[m.team_id].name,
                by_id[m.team_id].age_group_id,
                age_group_names.get(by_id[m.team_id].age_group_id),
            )
            for m in matches
        ]
        return Success(value=ClubMatchesResult(matches=items, total_count=len(items)))
