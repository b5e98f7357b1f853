"""Data hooks for front-end code.

A hook wraps one API operation and exposes its state to the rendering layer:

- QueryHook (reads): ``data``, ``is_loading``, ``error``, ``refetch()``
- MutationHook (writes): ``execute()``, ``is_submitting``, ``error``, ``data``

A query hook is keyed by its parameters; the first one identifies the entity
(e.g. team id). When that identifying parameter is None the call is skipped
and the hook settles on an explicit "no data" state. Changing the parameters
through ``set_params`` re-issues the call.

Failures are stored as ApiError on ``error``; hooks never retry.

Usage:
    players = use_team_players(client, team_id)
    await players.refetch()
    if players.error:
        show(players.error.message)

    add = use_add_player_to_team(client)
    membership = await add.execute(team_id, AddPlayerToTeamRequest(...))
"""

from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar
from uuid import UUID

import structlog

from src.client.api_client import ApiClient
from src.client.errors import ApiError
from src.schemas.age_group_schemas import (
    AgeGroupResponse,
    AgeGroupStatisticsResponse,
)
from src.schemas.club_schemas import (
    ClubDetailResponse,
    ClubStatisticsResponse,
    ClubSummaryResponse,
    MyClubResponse,
)
from src.schemas.coach_schemas import CoachResponse
from src.schemas.development_schemas import (
    DevelopmentPlanListItemResponse,
    DevelopmentPlanResponse,
    ReportResponse,
)
from src.schemas.drill_schemas import (
    DrillResponse,
    DrillsByScopeResponse,
    DrillTemplateResponse,
    DrillTemplatesByScopeResponse,
)
from src.schemas.kit_schemas import KitResponse
from src.schemas.match_schemas import (
    ClubMatchesResponse,
    MatchResponse,
    MatchSummaryResponse,
)
from src.schemas.player_schemas import (
    EvaluationResponse,
    PlayerAbilitiesResponse,
    PlayerAttributesResponse,
    PlayerListItemResponse,
    PlayerPageResponse,
    PlayerResponse,
    RecentPerformanceResponse,
    UpcomingMatchResponse,
)
from src.schemas.team_schemas import (
    ClubTeamResponse,
    MyTeamResponse,
    SquadPlayerResponse,
    TeamCoachAssignmentResponse,
    TeamCoachResponse,
    TeamDetailResponse,
    TeamMembershipResponse,
    TeamOverviewResponse,
    TeamPlayerResponse,
    TeamResponse,
)
from src.schemas.user_schemas import UserResponse

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class QueryHook(Generic[T]):
    """State holder around a read operation.

    Attributes:
        data: Last successful result, or None.
        is_loading: True while a call is pending (or due).
        error: ApiError from the last call, or None.
    """

    def __init__(self, fetcher: Callable[..., Awaitable[T]], *params: Any) -> None:
        self._fetcher = fetcher
        self._params = params
        self.data: T | None = None
        self.error: ApiError | None = None
        self.is_loading = not self._skipped

    @property
    def params(self) -> tuple[Any, ...]:
        return self._params

    @property
    def _skipped(self) -> bool:
        return bool(self._params) and self._params[0] is None

    async def refetch(self) -> None:
        """Issue the call (or settle on "no data" when the key is absent)."""
        if self._skipped:
            self.data = None
            self.error = None
            self.is_loading = False
            return

        self.is_loading = True
        self.error = None
        try:
            self.data = await self._fetcher(*self._params)
        except ApiError as e:
            logger.debug("query_hook_failed", status_code=e.status_code, error=e.message)
            self.error = e
        finally:
            self.is_loading = False

    async def set_params(self, *params: Any) -> None:
        """Change the parameters; re-issues the call only when they differ."""
        if params == self._params:
            return
        self._params = params
        self.data = None
        await self.refetch()


class MutationHook(Generic[T]):
    """State holder around a write operation.

    Attributes:
        data: Result of the last successful ``execute``, or None.
        is_submitting: True while ``execute`` is in flight.
        error: ApiError from the last ``execute``, or None.
    """

    def __init__(self, action: Callable[..., Awaitable[T]]) -> None:
        self._action = action
        self.data: T | None = None
        self.error: ApiError | None = None
        self.is_submitting = False

    async def execute(self, *args: Any, **kwargs: Any) -> T | None:
        """Run the write.

        Returns:
            The response model on success, None on failure (see ``error``).
        """
        self.is_submitting = True
        self.error = None
        try:
            self.data = await self._action(*args, **kwargs)
            return self.data
        except ApiError as e:
            logger.debug("mutation_hook_failed", status_code=e.status_code, error=e.message)
            self.error = e
            return None
        finally:
            self.is_submitting = False

    def reset(self) -> None:
        """Clear data and error (e.g. when a form is reopened)."""
        self.data = None
        self.error = None


# =============================================================================
# Club hooks
# =============================================================================


def use_clubs(client: ApiClient) -> QueryHook[list[ClubSummaryResponse]]:
    return QueryHook(client.get_clubs)


def use_club(client: ApiClient, club_id: UUID | None) -> QueryHook[ClubDetailResponse]:
    return QueryHook(client.get_club, club_id)


def use_club_statistics(
    client: ApiClient, club_id: UUID | None
) -> QueryHook[ClubStatisticsResponse]:
    return QueryHook(client.get_club_statistics, club_id)


def use_club_age_groups(
    client: ApiClient, club_id: UUID | None, include_archived: bool = False
) -> QueryHook[list[AgeGroupResponse]]:
    async def fetch(club_id: UUID, include_archived: bool) -> list[AgeGroupResponse]:
        return await client.get_club_age_groups(club_id, include_archived=include_archived)

    return QueryHook(fetch, club_id, include_archived)


def use_club_coaches(
    client: ApiClient, club_id: UUID | None, include_archived: bool = False
) -> QueryHook[list[CoachResponse]]:
    async def fetch(club_id: UUID, include_archived: bool) -> list[CoachResponse]:
        return await client.get_club_coaches(club_id, include_archived=include_archived)

    return QueryHook(fetch, club_id, include_archived)


def use_club_kits(client: ApiClient, club_id: UUID | None) -> QueryHook[list[KitResponse]]:
    return QueryHook(client.get_club_kits, club_id)


def use_club_drills(
    client: ApiClient,
    club_id: UUID | None,
    age_group_id: UUID | None = None,
    team_id: UUID | None = None,
    category: str | None = None,
    search: str | None = None,
) -> QueryHook[DrillsByScopeResponse]:
    async def fetch(
        club_id: UUID,
        age_group_id: UUID | None,
        team_id: UUID | None,
        category: str | None,
        search: str | None,
    ) -> DrillsByScopeResponse:
        return await client.get_club_drills(
            club_id,
            age_group_id=age_group_id,
            team_id=team_id,
            category=category,
            search=search,
        )

    return QueryHook(fetch, club_id, age_group_id, team_id, category, search)


def use_club_drill_templates(
    client: ApiClient,
    club_id: UUID | None,
    age_group_id: UUID | None = None,
    team_id: UUID | None = None,
) -> QueryHook[DrillTemplatesByScopeResponse]:
    async def fetch(
        club_id: UUID, age_group_id: UUID | None, team_id: UUID | None
    ) -> DrillTemplatesByScopeResponse:
        return await client.get_club_drill_templates(
            club_id, age_group_id=age_group_id, team_id=team_id
        )

    return QueryHook(fetch, club_id, age_group_id, team_id)


def use_club_players(
    client: ApiClient,
    club_id: UUID | None,
    page: int = 1,
    page_size: int = 30,
    age_group_id: UUID | None = None,
    team_id: UUID | None = None,
    position: str | None = None,
    search: str | None = None,
    include_archived: bool = False,
) -> QueryHook[PlayerPageResponse]:
    async def fetch(
        club_id: UUID,
        page: int,
        page_size: int,
        age_group_id: UUID | None,
        team_id: UUID | None,
        position: str | None,
        search: str | None,
        include_archived: bool,
    ) -> PlayerPageResponse:
        return await client.get_club_players(
            club_id,
            page=page,
            page_size=page_size,
            age_group_id=age_group_id,
            team_id=team_id,
            position=position,
            search=search,
            include_archived=include_archived,
        )

    return QueryHook(
        fetch,
        club_id,
        page,
        page_size,
        age_group_id,
        team_id,
        position,
        search,
        include_archived,
    )


def use_club_teams(
    client: ApiClient,
    club_id: UUID | None,
    age_group_id: UUID | None = None,
    include_archived: bool = False,
    season: str | None = None,
) -> QueryHook[list[ClubTeamResponse]]:
    async def fetch(
        club_id: UUID,
        age_group_id: UUID | None,
        include_archived: bool,
        season: str | None,
    ) -> list[ClubTeamResponse]:
        return await client.get_club_teams(
            club_id,
            age_group_id=age_group_id,
            include_archived=include_archived,
            season=season,
        )

    return QueryHook(fetch, club_id, age_group_id, include_archived, season)


def use_club_matches(
    client: ApiClient,
    club_id: UUID | None,
    age_group_id: UUID | None = None,
    team_id: UUID | None = None,
    status: str | None = None,
) -> QueryHook[ClubMatchesResponse]:
    async def fetch(
        club_id: UUID,
        age_group_id: UUID | None,
        team_id: UUID | None,
        status: str | None,
    ) -> ClubMatchesResponse:
        return await client.get_club_matches(
            club_id, age_group_id=age_group_id, team_id=team_id, status=status
        )

    return QueryHook(fetch, club_id, age_group_id, team_id, status)


def use_club_development_plans(
    client: ApiClient, club_id: UUID | None
) -> QueryHook[list[DevelopmentPlanListItemResponse]]:
    return QueryHook(client.get_club_development_plans, club_id)


def use_update_club(client: ApiClient) -> MutationHook[ClubDetailResponse]:
    return MutationHook(client.update_club)


# =============================================================================
# Age group hooks
# =============================================================================


def use_age_group(
    client: ApiClient, age_group_id: UUID | None
) -> QueryHook[AgeGroupResponse]:
    return QueryHook(client.get_age_group, age_group_id)


def use_age_group_statistics(
    client: ApiClient, age_group_id: UUID | None
) -> QueryHook[AgeGroupStatisticsResponse]:
    return QueryHook(client.get_age_group_statistics, age_group_id)


def use_age_group_teams(
    client: ApiClient, age_group_id: UUID | None
) -> QueryHook[list[TeamResponse]]:
    return QueryHook(client.get_age_group_teams, age_group_id)


def use_age_group_players(
    client: ApiClient, age_group_id: UUID | None, include_archived: bool = False
) -> QueryHook[list[PlayerListItemResponse]]:
    async def fetch(
        age_group_id: UUID, include_archived: bool
    ) -> list[PlayerListItemResponse]:
        return await client.get_age_group_players(
            age_group_id, include_archived=include_archived
        )

    return QueryHook(fetch, age_group_id, include_archived)


def use_age_group_coaches(
    client: ApiClient, age_group_id: UUID | None
) -> QueryHook[list[CoachResponse]]:
    return QueryHook(client.get_age_group_coaches, age_group_id)


def use_age_group_development_plans(
    client: ApiClient, age_group_id: UUID | None
) -> QueryHook[list[DevelopmentPlanListItemResponse]]:
    return QueryHook(client.get_age_group_development_plans, age_group_id)


def use_update_age_group(client: ApiClient) -> MutationHook[AgeGroupResponse]:
    return MutationHook(client.update_age_group)


# =============================================================================
# Team hooks
# =============================================================================


def use_team_overview(
    client: ApiClient, team_id: UUID | None
) -> QueryHook[TeamOverviewResponse]:
    return QueryHook(client.get_team_overview, team_id)


def use_team_players(
    client: ApiClient, team_id: UUID | None
) -> QueryHook[list[TeamPlayerResponse]]:
    return QueryHook(client.get_team_players, team_id)


def use_team_coaches(
    client: ApiClient, team_id: UUID | None
) -> QueryHook[list[TeamCoachResponse]]:
    return QueryHook(client.get_team_coaches, team_id)


def use_team_matches(
    client: ApiClient, team_id: UUID | None
) -> QueryHook[list[MatchSummaryResponse]]:
    return QueryHook(client.get_team_matches, team_id)


def use_team_kits(client: ApiClient, team_id: UUID | None) -> QueryHook[list[KitResponse]]:
    return QueryHook(client.get_team_kits, team_id)


def use_team(client: ApiClient, team_id: UUID | None) -> QueryHook[TeamDetailResponse]:
    return QueryHook(client.get_team, team_id)


def use_team_squad(
    client: ApiClient, team_id: UUID | None
) -> QueryHook[list[SquadPlayerResponse]]:
    return QueryHook(client.get_team_squad, team_id)


def use_team_development_plans(
    client: ApiClient, team_id: UUID | None
) -> QueryHook[list[DevelopmentPlanListItemResponse]]:
    return QueryHook(client.get_team_development_plans, team_id)


def use_add_player_to_team(client: ApiClient) -> MutationHook[TeamMembershipResponse]:
    return MutationHook(client.add_player_to_team)


def use_remove_player_from_team(client: ApiClient) -> MutationHook[None]:
    return MutationHook(client.remove_player_from_team)


def use_update_squad_number(client: ApiClient) -> MutationHook[TeamMembershipResponse]:
    return MutationHook(client.update_squad_number)


def use_assign_coach(client: ApiClient) -> MutationHook[TeamCoachAssignmentResponse]:
    return MutationHook(client.assign_coach)


# =============================================================================
# Player hooks
# =============================================================================


def use_player(client: ApiClient, player_id: UUID | None) -> QueryHook[PlayerResponse]:
    return QueryHook(client.get_player, player_id)


def use_player_abilities(
    client: ApiClient, player_id: UUID | None
) -> QueryHook[PlayerAbilitiesResponse]:
    return QueryHook(client.get_player_abilities, player_id)


def use_player_reports(
    client: ApiClient, player_id: UUID | None
) -> QueryHook[list[ReportResponse]]:
    return QueryHook(client.get_player_reports, player_id)


def use_player_recent_performances(
    client: ApiClient, player_id: UUID | None, limit: int = 10
) -> QueryHook[list[RecentPerformanceResponse]]:
    async def fetch(player_id: UUID, limit: int) -> list[RecentPerformanceResponse]:
        return await client.get_player_recent_performances(player_id, limit=limit)

    return QueryHook(fetch, player_id, limit)


def use_player_upcoming_matches(
    client: ApiClient, player_id: UUID | None, limit: int = 5
) -> QueryHook[list[UpcomingMatchResponse]]:
    async def fetch(player_id: UUID, limit: int) -> list[UpcomingMatchResponse]:
        return await client.get_player_upcoming_matches(player_id, limit=limit)

    return QueryHook(fetch, player_id, limit)


def use_player_attributes(
    client: ApiClient, player_id: UUID | None
) -> QueryHook[PlayerAttributesResponse]:
    return QueryHook(client.get_player_attributes, player_id)


def use_update_player(client: ApiClient) -> MutationHook[PlayerResponse]:
    return MutationHook(client.update_player)


def use_create_evaluation(client: ApiClient) -> MutationHook[EvaluationResponse]:
    return MutationHook(client.create_evaluation)


# =============================================================================
# Coach, match, drill, development and user hooks
# =============================================================================


def use_coach(client: ApiClient, coach_id: UUID | None) -> QueryHook[CoachResponse]:
    return QueryHook(client.get_coach, coach_id)


def use_match(client: ApiClient, match_id: UUID | None) -> QueryHook[MatchResponse]:
    return QueryHook(client.get_match, match_id)


def use_create_match(client: ApiClient) -> MutationHook[MatchResponse]:
    return MutationHook(client.create_match)


def use_update_match(client: ApiClient) -> MutationHook[MatchResponse]:
    return MutationHook(client.update_match)


def use_drill(client: ApiClient, drill_id: UUID | None) -> QueryHook[DrillResponse]:
    return QueryHook(client.get_drill, drill_id)


def use_drill_template(
    client: ApiClient, template_id: UUID | None
) -> QueryHook[DrillTemplateResponse]:
    return QueryHook(client.get_drill_template, template_id)


def use_development_plan(
    client: ApiClient, plan_id: UUID | None
) -> QueryHook[DevelopmentPlanResponse]:
    return QueryHook(client.get_development_plan, plan_id)


def use_report(client: ApiClient, report_id: UUID | None) -> QueryHook[ReportResponse]:
    return QueryHook(client.get_report, report_id)


def use_current_user(client: ApiClient) -> QueryHook[UserResponse]:
    return QueryHook(client.get_current_user)


def use_my_clubs(client: ApiClient) -> QueryHook[list[MyClubResponse]]:
    return QueryHook(client.get_my_clubs)


def use_my_teams(client: ApiClient) -> QueryHook[list[MyTeamResponse]]:
    return QueryHook(client.get_my_teams)
