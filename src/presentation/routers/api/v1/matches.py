"""Matches resource handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_match    - Schedule or record a match
    get_match       - Get match details
    update_match    - Replace a match
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.dispatcher import Dispatcher
from src.application.queries.match_queries import GetMatchById
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.match_schemas import (
    CreateMatchRequest,
    MatchResponse,
    UpdateMatchRequest,
)

MatchId = Annotated[UUID, Path(description="Match UUID")]


async def create_match(
    request: Request,
    data: CreateMatchRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> MatchResponse | JSONResponse:
    """Create a match for a team.

    POST /api/v1/matches → 201 Created
    """
    result = await dispatcher.dispatch(data.to_command())

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return MatchResponse.from_dto(result.value)


async def get_match(
    request: Request,
    match_id: MatchId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> MatchResponse | JSONResponse:
    """Get a match with score, weather and ratings.

    GET /api/v1/matches/{match_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetMatchById(match_id=match_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return MatchResponse.from_dto(result.value)


async def update_match(
    request: Request,
    match_id: MatchId,
    data: UpdateMatchRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> MatchResponse | JSONResponse:
    """Replace a match, including its performance ratings.

    PUT /api/v1/matches/{match_id} → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(match_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return MatchResponse.from_dto(result.value)
