"""Clubs resource handlers.

Handler functions for club endpoints and the club-scoped listings (age
groups, coaches, kits, drills, drill templates).
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_clubs                  - List all clubs
    get_club                    - Get club profile
    update_club                 - Replace club profile
    get_club_statistics         - Club dashboard statistics
    list_club_age_groups        - Age groups of a club
    list_club_coaches           - Coaches of a club
    list_club_kits              - Kits of all teams in a club
    list_club_drills            - Drills visible at a scope within a club
    list_club_drill_templates   - Templates visible at a scope within a club
    list_club_players           - Paged, filtered players of a club
    list_club_teams             - Teams of a club with staff
    list_club_matches           - Matches of a club's teams
    list_club_development_plans - Development plans of a club's players
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from src.application.dispatcher import Dispatcher
from src.application.queries.age_group_queries import GetAgeGroupsByClubId
from src.application.queries.club_queries import (
    GetAllClubs,
    GetClubById,
    GetClubPlayers,
    GetClubStatistics,
    GetClubTeams,
    GetKitsByClubId,
    GetMatchesByClubId,
)
from src.application.queries.coach_queries import GetCoachesByClubId
from src.application.queries.development_queries import GetDevelopmentPlansByClubId
from src.application.queries.drill_queries import (
    GetDrillsByScope,
    GetDrillTemplatesByScope,
)
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.age_group_schemas import AgeGroupResponse
from src.schemas.club_schemas import (
    ClubDetailResponse,
    ClubStatisticsResponse,
    ClubSummaryResponse,
    UpdateClubRequest,
)
from src.schemas.coach_schemas import CoachResponse
from src.schemas.development_schemas import DevelopmentPlanListItemResponse
from src.schemas.drill_schemas import (
    DrillsByScopeResponse,
    DrillTemplatesByScopeResponse,
)
from src.schemas.kit_schemas import KitResponse
from src.schemas.match_schemas import ClubMatchesResponse
from src.schemas.player_schemas import PlayerPageResponse
from src.schemas.team_schemas import ClubTeamResponse

ClubId = Annotated[UUID, Path(description="Club UUID")]


async def list_clubs(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[ClubSummaryResponse] | JSONResponse:
    """List all clubs, ordered by name.

    GET /api/v1/clubs → 200 OK
    """
    result = await dispatcher.dispatch(GetAllClubs())

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [ClubSummaryResponse.from_dto(club) for club in result.value]


async def get_club(
    request: Request,
    club_id: ClubId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> ClubDetailResponse | JSONResponse:
    """Get a club's full profile.

    GET /api/v1/clubs/{club_id} → 200 OK

    Returns:
        ClubDetailResponse, or a 404 problem if the club does not exist.
    """
    result = await dispatcher.dispatch(GetClubById(club_id=club_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return ClubDetailResponse.from_dto(result.value)


async def update_club(
    request: Request,
    club_id: ClubId,
    data: UpdateClubRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> ClubDetailResponse | JSONResponse:
    """Replace a club's profile.

    PUT /api/v1/clubs/{club_id} → 200 OK

    Args:
        request: FastAPI request object.
        club_id: Club UUID.
        data: Full club profile.
        dispatcher: Request dispatcher (injected).

    Returns:
        ClubDetailResponse with the stored profile.
        JSONResponse with RFC 9457 error (400 validation, 404 unknown club).
    """
    result = await dispatcher.dispatch(data.to_command(club_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return ClubDetailResponse.from_dto(result.value)


async def get_club_statistics(
    request: Request,
    club_id: ClubId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> ClubStatisticsResponse | JSONResponse:
    """Club dashboard: entity counts, match record, fixtures and results.

    GET /api/v1/clubs/{club_id}/statistics → 200 OK
    """
    result = await dispatcher.dispatch(GetClubStatistics(club_id=club_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return ClubStatisticsResponse.from_dto(result.value)


async def list_club_age_groups(
    request: Request,
    club_id: ClubId,
    include_archived: Annotated[
        bool,
        Query(alias="includeArchived", description="Include archived age groups"),
    ] = False,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[AgeGroupResponse] | JSONResponse:
    """List a club's age groups with team counts.

    GET /api/v1/clubs/{club_id}/age-groups → 200 OK
    """
    result = await dispatcher.dispatch(
        GetAgeGroupsByClubId(club_id=club_id, include_archived=include_archived)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [AgeGroupResponse.from_dto(age_group) for age_group in result.value]


async def list_club_coaches(
    request: Request,
    club_id: ClubId,
    include_archived: Annotated[
        bool,
        Query(alias="includeArchived", description="Include archived coaches"),
    ] = False,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[CoachResponse] | JSONResponse:
    """List a club's coaches with their team assignments.

    GET /api/v1/clubs/{club_id}/coaches → 200 OK
    """
    result = await dispatcher.dispatch(
        GetCoachesByClubId(club_id=club_id, include_archived=include_archived)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [CoachResponse.from_dto(coach) for coach in result.value]


async def list_club_kits(
    request: Request,
    club_id: ClubId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[KitResponse] | JSONResponse:
    """List kits across all of a club's teams.

    GET /api/v1/clubs/{club_id}/kits → 200 OK
    """
    result = await dispatcher.dispatch(GetKitsByClubId(club_id=club_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [KitResponse.from_dto(kit) for kit in result.value]


async def list_club_drills(
    request: Request,
    club_id: ClubId,
    age_group_id: Annotated[
        UUID | None, Query(alias="ageGroupId", description="Narrow to an age group")
    ] = None,
    team_id: Annotated[
        UUID | None, Query(alias="teamId", description="Narrow to a team")
    ] = None,
    category: Annotated[
        str | None, Query(description="Category label, or 'all'")
    ] = None,
    search: Annotated[
        str | None, Query(description="Text matched against name, description, attributes")
    ] = None,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DrillsByScopeResponse | JSONResponse:
    """List drills at a scope plus those inherited from wider scopes.

    GET /api/v1/clubs/{club_id}/drills → 200 OK
    """
    query = GetDrillsByScope(
        club_id=club_id,
        age_group_id=age_group_id,
        team_id=team_id,
        category=category,
        search=search,
    )
    result = await dispatcher.dispatch(query)

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DrillsByScopeResponse.from_dto(result.value)


async def list_club_drill_templates(
    request: Request,
    club_id: ClubId,
    age_group_id: Annotated[
        UUID | None, Query(alias="ageGroupId", description="Narrow to an age group")
    ] = None,
    team_id: Annotated[
        UUID | None, Query(alias="teamId", description="Narrow to a team")
    ] = None,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DrillTemplatesByScopeResponse | JSONResponse:
    """List drill templates at a scope plus inherited ones.

    GET /api/v1/clubs/{club_id}/drill-templates → 200 OK
    """
    query = GetDrillTemplatesByScope(
        club_id=club_id, age_group_id=age_group_id, team_id=team_id
    )
    result = await dispatcher.dispatch(query)

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DrillTemplatesByScopeResponse.from_dto(result.value)


async def list_club_players(
    request: Request,
    club_id: ClubId,
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    page_size: Annotated[
        int, Query(alias="pageSize", ge=1, le=100, description="Players per page")
    ] = 30,
    age_group_id: Annotated[
        UUID | None, Query(alias="ageGroupId", description="Narrow to an age group")
    ] = None,
    team_id: Annotated[
        UUID | None, Query(alias="teamId", description="Narrow to a team")
    ] = None,
    position: Annotated[
        str | None, Query(description="Preferred position, e.g. 'CM'")
    ] = None,
    search: Annotated[
        str | None, Query(description="Text matched against first name, last name, nickname")
    ] = None,
    include_archived: Annotated[
        bool,
        Query(alias="includeArchived", description="Include archived players"),
    ] = False,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PlayerPageResponse | JSONResponse:
    """Page through a club's players.

    GET /api/v1/clubs/{club_id}/players → 200 OK
    """
    query = GetClubPlayers(
        club_id=club_id,
        page=page,
        page_size=page_size,
        age_group_id=age_group_id,
        team_id=team_id,
        position=position,
        search=search,
        include_archived=include_archived,
    )
    result = await dispatcher.dispatch(query)

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return PlayerPageResponse.from_dto(result.value)


async def list_club_teams(
    request: Request,
    club_id: ClubId,
    age_group_id: Annotated[
        UUID | None, Query(alias="ageGroupId", description="Narrow to an age group")
    ] = None,
    include_archived: Annotated[
        bool,
        Query(alias="includeArchived", description="Include archived teams"),
    ] = False,
    season: Annotated[str | None, Query(description="Season label, e.g. '2024/25'")] = None,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[ClubTeamResponse] | JSONResponse:
    """List a club's teams with coaches and player counts.

    GET /api/v1/clubs/{club_id}/teams → 200 OK
    """
    query = GetClubTeams(
        club_id=club_id,
        age_group_id=age_group_id,
        include_archived=include_archived,
        season=season,
    )
    result = await dispatcher.dispatch(query)

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [ClubTeamResponse.from_dto(team) for team in result.value]


async def list_club_matches(
    request: Request,
    club_id: ClubId,
    age_group_id: Annotated[
        UUID | None, Query(alias="ageGroupId", description="Narrow to an age group")
    ] = None,
    team_id: Annotated[
        UUID | None, Query(alias="teamId", description="Narrow to a team")
    ] = None,
    status: Annotated[
        str | None,
        Query(description="'upcoming', 'past' or a match status label"),
    ] = None,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> ClubMatchesResponse | JSONResponse:
    """List matches of a club's active teams, most recent first.

    GET /api/v1/clubs/{club_id}/matches → 200 OK
    """
    query = GetMatchesByClubId(
        club_id=club_id, age_group_id=age_group_id, team_id=team_id, status=status
    )
    result = await dispatcher.dispatch(query)

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return ClubMatchesResponse.from_dto(result.value)


async def list_club_development_plans(
    request: Request,
    club_id: ClubId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[DevelopmentPlanListItemResponse] | JSONResponse:
    """GET /api/v1/clubs/{club_id}/development-plans → 200 OK"""
    result = await dispatcher.dispatch(GetDevelopmentPlansByClubId(club_id=club_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [DevelopmentPlanListItemResponse.from_dto(plan) for plan in result.value]
