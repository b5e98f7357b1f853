"""Coaches resource handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    get_coach       - Get coach profile with team assignments
    update_coach    - Replace coach profile and team assignments
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.dispatcher import Dispatcher
from src.application.queries.coach_queries import GetCoachById
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.coach_schemas import CoachResponse, UpdateCoachRequest

CoachId = Annotated[UUID, Path(description="Coach UUID")]


async def get_coach(
    request: Request,
    coach_id: CoachId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> CoachResponse | JSONResponse:
    """Get a coach.

    GET /api/v1/coaches/{coach_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetCoachById(coach_id=coach_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return CoachResponse.from_dto(result.value)


async def update_coach(
    request: Request,
    coach_id: CoachId,
    data: UpdateCoachRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> CoachResponse | JSONResponse:
    """Replace a coach's profile.

    PUT /api/v1/coaches/{coach_id} → 200 OK

    ``teamIds`` replaces the coach's team assignments; kept teams keep
    their role, new teams get the coach's default role.
    """
    result = await dispatcher.dispatch(data.to_command(coach_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return CoachResponse.from_dto(result.value)
