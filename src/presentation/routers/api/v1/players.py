"""Players resource handlers.

Player profile, ability ratings and evaluations, and progress reports.
Evaluation writes require an authenticated coach.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    get_player                  - Get player profile
    update_player               - Replace player profile
    get_player_abilities        - Ratings and recent evaluations
    create_player_evaluation    - Record an ability evaluation
    update_player_evaluation    - Replace an evaluation
    delete_player_evaluation    - Delete an evaluation
    list_player_reports         - Progress reports for a player
    list_player_recent_performances - Rated completed matches
    list_player_upcoming_matches - Fixtures of the player's teams
    get_player_attributes       - Recorded attribute ratings
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.evaluation_commands import (
    DeletePlayerAbilityEvaluation,
)
from src.application.dispatcher import Dispatcher
from src.application.queries.player_queries import (
    GetPlayerAbilities,
    GetPlayerAttributes,
    GetPlayerById,
    GetPlayerRecentPerformances,
    GetPlayerReports,
    GetPlayerUpcomingMatches,
)
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
)
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.development_schemas import ReportResponse
from src.schemas.player_schemas import (
    EvaluationRequest,
    EvaluationResponse,
    PlayerAbilitiesResponse,
    PlayerAttributesResponse,
    PlayerResponse,
    RecentPerformanceResponse,
    UpcomingMatchResponse,
    UpdatePlayerRequest,
)

PlayerId = Annotated[UUID, Path(description="Player UUID")]
EvaluationId = Annotated[UUID, Path(description="Evaluation UUID")]


async def get_player(
    request: Request,
    player_id: PlayerId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PlayerResponse | JSONResponse:
    """Get a player's profile.

    GET /api/v1/players/{player_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetPlayerById(player_id=player_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return PlayerResponse.from_dto(result.value)


async def update_player(
    request: Request,
    player_id: PlayerId,
    data: UpdatePlayerRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PlayerResponse | JSONResponse:
    """Replace a player's profile, contacts and team memberships.

    PUT /api/v1/players/{player_id} → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(player_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return PlayerResponse.from_dto(result.value)


async def get_player_abilities(
    request: Request,
    player_id: PlayerId,
    evaluation_limit: Annotated[
        int,
        Query(alias="evaluationLimit", ge=1, le=100, description="Evaluations returned"),
    ] = 12,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PlayerAbilitiesResponse | JSONResponse:
    """Current attribute ratings and the latest evaluations.

    GET /api/v1/players/{player_id}/abilities → 200 OK
    """
    result = await dispatcher.dispatch(
        GetPlayerAbilities(player_id=player_id, evaluation_limit=evaluation_limit)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return PlayerAbilitiesResponse.from_dto(result.value)


async def create_player_evaluation(
    request: Request,
    principal: CurrentPrincipal,
    player_id: PlayerId,
    data: EvaluationRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> EvaluationResponse | JSONResponse:
    """Record an ability evaluation by the calling coach.

    POST /api/v1/players/{player_id}/ability-evaluations → 201 Created

    Args:
        request: FastAPI request object.
        principal: Authenticated caller (from the principal header).
        player_id: Player UUID.
        data: Evaluation with per-attribute ratings.
        dispatcher: Request dispatcher (injected).

    Returns:
        EvaluationResponse with the computed overall rating.
        JSONResponse with RFC 9457 error (400 validation, 403 caller is not
        a coach, 404 unknown player).
    """
    result = await dispatcher.dispatch(
        data.to_create_command(player_id, principal.user_id)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return EvaluationResponse.from_dto(result.value)


async def update_player_evaluation(
    request: Request,
    principal: CurrentPrincipal,
    player_id: PlayerId,
    evaluation_id: EvaluationId,
    data: EvaluationRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> EvaluationResponse | JSONResponse:
    """Replace an evaluation and its attribute ratings.

    PUT /api/v1/players/{player_id}/ability-evaluations/{evaluation_id} → 200 OK
    """
    result = await dispatcher.dispatch(
        data.to_update_command(player_id, evaluation_id, principal.user_id)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return EvaluationResponse.from_dto(result.value)


async def delete_player_evaluation(
    request: Request,
    principal: CurrentPrincipal,
    player_id: PlayerId,
    evaluation_id: EvaluationId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    """Delete an evaluation with its attribute ratings.

    DELETE /api/v1/players/{player_id}/ability-evaluations/{evaluation_id} → 204
    """
    command = DeletePlayerAbilityEvaluation(
        player_id=player_id,
        evaluation_id=evaluation_id,
        auth_id=principal.user_id,
    )
    result = await dispatcher.dispatch(command)

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_player_reports(
    request: Request,
    player_id: PlayerId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[ReportResponse] | JSONResponse:
    """List a player's progress reports, newest first.

    GET /api/v1/players/{player_id}/reports → 200 OK
    """
    result = await dispatcher.dispatch(GetPlayerReports(player_id=player_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [ReportResponse.from_dto(report) for report in result.value]


async def list_player_recent_performances(
    request: Request,
    player_id: PlayerId,
    limit: Annotated[int, Query(ge=1, le=50, description="Matches returned")] = 10,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[RecentPerformanceResponse] | JSONResponse:
    """Completed matches the player was rated in, most recent first.

    GET /api/v1/players/{player_id}/recent-performances → 200 OK
    """
    result = await dispatcher.dispatch(
        GetPlayerRecentPerformances(player_id=player_id, limit=limit)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [RecentPerformanceResponse.from_dto(p) for p in result.value]


async def list_player_upcoming_matches(
    request: Request,
    player_id: PlayerId,
    limit: Annotated[int, Query(ge=1, le=50, description="Matches returned")] = 5,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[UpcomingMatchResponse] | JSONResponse:
    """Scheduled matches of every team the player is on, soonest first.

    GET /api/v1/players/{player_id}/upcoming-matches → 200 OK
    """
    result = await dispatcher.dispatch(
        GetPlayerUpcomingMatches(player_id=player_id, limit=limit)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [UpcomingMatchResponse.from_dto(m) for m in result.value]


async def get_player_attributes(
    request: Request,
    player_id: PlayerId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> PlayerAttributesResponse | JSONResponse:
    """Recorded attribute ratings keyed by camelCase attribute name.

    GET /api/v1/players/{player_id}/attributes → 200 OK
    """
    result = await dispatcher.dispatch(GetPlayerAttributes(player_id=player_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return PlayerAttributesResponse.from_dto(result.value)
