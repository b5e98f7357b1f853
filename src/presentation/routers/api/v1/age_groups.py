"""Age groups resource handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_age_group            - Create an age group in a club
    get_age_group               - Get age group details
    update_age_group            - Replace an age group
    get_age_group_statistics    - Age group dashboard statistics
    list_age_group_teams        - Teams in an age group
    list_age_group_players      - Players in an age group
    list_age_group_coaches      - Coaches of the age group's teams
    list_age_group_development_plans - Development plans of its players
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from src.application.dispatcher import Dispatcher
from src.application.queries.age_group_queries import (
    GetAgeGroupById,
    GetAgeGroupDevelopmentPlans,
    GetAgeGroupStatistics,
    GetCoachesByAgeGroupId,
    GetPlayersByAgeGroupId,
)
from src.application.queries.team_queries import GetTeamsByAgeGroupId
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.age_group_schemas import (
    AgeGroupResponse,
    AgeGroupStatisticsResponse,
    CreateAgeGroupRequest,
    UpdateAgeGroupRequest,
)
from src.schemas.coach_schemas import CoachResponse
from src.schemas.development_schemas import DevelopmentPlanListItemResponse
from src.schemas.player_schemas import PlayerListItemResponse
from src.schemas.team_schemas import TeamResponse

AgeGroupId = Annotated[UUID, Path(description="Age group UUID")]


async def create_age_group(
    request: Request,
    data: CreateAgeGroupRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> AgeGroupResponse | JSONResponse:
    """Create an age group.

    POST /api/v1/age-groups → 201 Created

    Returns:
        AgeGroupResponse, or a problem (400 validation, 404 unknown club).
    """
    result = await dispatcher.dispatch(data.to_command())

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return AgeGroupResponse.from_dto(result.value)


async def get_age_group(
    request: Request,
    age_group_id: AgeGroupId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> AgeGroupResponse | JSONResponse:
    """Get an age group.

    GET /api/v1/age-groups/{age_group_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetAgeGroupById(age_group_id=age_group_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return AgeGroupResponse.from_dto(result.value)


async def update_age_group(
    request: Request,
    age_group_id: AgeGroupId,
    data: UpdateAgeGroupRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> AgeGroupResponse | JSONResponse:
    """Replace an age group.

    PUT /api/v1/age-groups/{age_group_id} → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(age_group_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return AgeGroupResponse.from_dto(result.value)


async def get_age_group_statistics(
    request: Request,
    age_group_id: AgeGroupId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> AgeGroupStatisticsResponse | JSONResponse:
    """Age group counts and match record.

    GET /api/v1/age-groups/{age_group_id}/statistics → 200 OK
    """
    result = await dispatcher.dispatch(
        GetAgeGroupStatistics(age_group_id=age_group_id)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return AgeGroupStatisticsResponse.from_dto(result.value)


async def list_age_group_teams(
    request: Request,
    age_group_id: AgeGroupId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[TeamResponse] | JSONResponse:
    """List the teams in an age group with their statistics.

    GET /api/v1/age-groups/{age_group_id}/teams → 200 OK
    """
    result = await dispatcher.dispatch(GetTeamsByAgeGroupId(age_group_id=age_group_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [TeamResponse.from_dto(team) for team in result.value]


async def list_age_group_players(
    request: Request,
    age_group_id: AgeGroupId,
    include_archived: Annotated[
        bool,
        Query(alias="includeArchived", description="Include archived players"),
    ] = False,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[PlayerListItemResponse] | JSONResponse:
    """List the players in an age group, first name then last name.

    GET /api/v1/age-groups/{age_group_id}/players → 200 OK
    """
    result = await dispatcher.dispatch(
        GetPlayersByAgeGroupId(
            age_group_id=age_group_id, include_archived=include_archived
        )
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [PlayerListItemResponse.from_dto(player) for player in result.value]


async def list_age_group_coaches(
    request: Request,
    age_group_id: AgeGroupId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[CoachResponse] | JSONResponse:
    """List coaches assigned to the age group's active teams.

    GET /api/v1/age-groups/{age_group_id}/coaches → 200 OK
    """
    result = await dispatcher.dispatch(GetCoachesByAgeGroupId(age_group_id=age_group_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [CoachResponse.from_dto(coach) for coach in result.value]


async def list_age_group_development_plans(
    request: Request,
    age_group_id: AgeGroupId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[DevelopmentPlanListItemResponse] | JSONResponse:
    """GET /api/v1/age-groups/{age_group_id}/development-plans → 200 OK"""
    result = await dispatcher.dispatch(
        GetAgeGroupDevelopmentPlans(age_group_id=age_group_id)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [DevelopmentPlanListItemResponse.from_dto(plan) for plan in result.value]
