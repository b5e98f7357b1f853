"""Drills and drill templates resource handlers.

Creating a drill or template requires an authenticated caller; the
caller's coach record (if any) is stored as the author.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_drill            - Create a drill at a scope
    get_drill               - Get a drill
    update_drill            - Replace a drill
    create_drill_template   - Create a template from drills
    get_drill_template      - Get a template
    update_drill_template   - Replace a template
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.dispatcher import Dispatcher
from src.application.queries.drill_queries import GetDrillById, GetDrillTemplateById
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
)
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.drill_schemas import (
    CreateDrillRequest,
    CreateDrillTemplateRequest,
    DrillResponse,
    DrillTemplateResponse,
    UpdateDrillRequest,
    UpdateDrillTemplateRequest,
)

DrillId = Annotated[UUID, Path(description="Drill UUID")]
TemplateId = Annotated[UUID, Path(description="Drill template UUID")]


async def create_drill(
    request: Request,
    principal: CurrentPrincipal,
    data: CreateDrillRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DrillResponse | JSONResponse:
    """Create a drill.

    POST /api/v1/drills → 201 Created

    Returns:
        DrillResponse, or a problem (400 validation or inconsistent scope,
        404 unknown club, age group or team).
    """
    result = await dispatcher.dispatch(data.to_command(principal.user_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DrillResponse.from_dto(result.value)


async def get_drill(
    request: Request,
    drill_id: DrillId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DrillResponse | JSONResponse:
    """Get a drill.

    GET /api/v1/drills/{drill_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetDrillById(drill_id=drill_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DrillResponse.from_dto(result.value)


async def update_drill(
    request: Request,
    drill_id: DrillId,
    data: UpdateDrillRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DrillResponse | JSONResponse:
    """Replace a drill; its scope is unchanged.

    PUT /api/v1/drills/{drill_id} → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(drill_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DrillResponse.from_dto(result.value)


async def create_drill_template(
    request: Request,
    principal: CurrentPrincipal,
    data: CreateDrillTemplateRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DrillTemplateResponse | JSONResponse:
    """Create a drill template.

    POST /api/v1/drill-templates → 201 Created
    """
    result = await dispatcher.dispatch(data.to_command(principal.user_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DrillTemplateResponse.from_dto(result.value)


async def get_drill_template(
    request: Request,
    template_id: TemplateId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DrillTemplateResponse | JSONResponse:
    """Get a drill template.

    GET /api/v1/drill-templates/{template_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetDrillTemplateById(template_id=template_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DrillTemplateResponse.from_dto(result.value)


async def update_drill_template(
    request: Request,
    template_id: TemplateId,
    data: UpdateDrillTemplateRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DrillTemplateResponse | JSONResponse:
    """Replace a drill template; derived fields are recomputed.

    PUT /api/v1/drill-templates/{template_id} → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(template_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DrillTemplateResponse.from_dto(result.value)
