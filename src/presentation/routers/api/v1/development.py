"""Development plans and progress reports resource handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_development_plan     - Create a plan for a player
    get_development_plan        - Get a plan with its goals
    update_development_plan     - Replace a plan
    create_report               - Create a progress report
    get_report                  - Get a report
    update_report               - Replace a report
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.dispatcher import Dispatcher
from src.application.queries.development_queries import (
    GetDevelopmentPlanById,
    GetReportById,
)
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
)
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.development_schemas import (
    CreateDevelopmentPlanRequest,
    CreateReportRequest,
    DevelopmentPlanResponse,
    ReportResponse,
    UpdateDevelopmentPlanRequest,
    UpdateReportRequest,
)

PlanId = Annotated[UUID, Path(description="Development plan UUID")]
ReportId = Annotated[UUID, Path(description="Report UUID")]


async def create_development_plan(
    request: Request,
    principal: CurrentPrincipal,
    data: CreateDevelopmentPlanRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DevelopmentPlanResponse | JSONResponse:
    """Create a development plan.

    POST /api/v1/development-plans → 201 Created
    """
    result = await dispatcher.dispatch(data.to_command(principal.user_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DevelopmentPlanResponse.from_dto(result.value)


async def get_development_plan(
    request: Request,
    plan_id: PlanId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DevelopmentPlanResponse | JSONResponse:
    """Get a development plan.

    GET /api/v1/development-plans/{plan_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetDevelopmentPlanById(plan_id=plan_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DevelopmentPlanResponse.from_dto(result.value)


async def update_development_plan(
    request: Request,
    plan_id: PlanId,
    data: UpdateDevelopmentPlanRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> DevelopmentPlanResponse | JSONResponse:
    """Replace a development plan and its goals.

    PUT /api/v1/development-plans/{plan_id} → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(plan_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return DevelopmentPlanResponse.from_dto(result.value)


async def create_report(
    request: Request,
    principal: CurrentPrincipal,
    data: CreateReportRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> ReportResponse | JSONResponse:
    """Create a progress report.

    POST /api/v1/reports → 201 Created
    """
    result = await dispatcher.dispatch(data.to_command(principal.user_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return ReportResponse.from_dto(result.value)


async def get_report(
    request: Request,
    report_id: ReportId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> ReportResponse | JSONResponse:
    """Get a progress report.

    GET /api/v1/reports/{report_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetReportById(report_id=report_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return ReportResponse.from_dto(result.value)


async def update_report(
    request: Request,
    report_id: ReportId,
    data: UpdateReportRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> ReportResponse | JSONResponse:
    """Replace a progress report.

    PUT /api/v1/reports/{report_id} → 200 OK

    Requires an authenticated caller (enforced by the route's auth policy).
    """
    result = await dispatcher.dispatch(data.to_command(report_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return ReportResponse.from_dto(result.value)
