"""Users resource handlers.

The current user is identified by the principal header; there is no user id
in the path.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    get_current_user    - Get the caller's profile
    update_my_profile   - Update the caller's profile
    list_my_clubs       - Clubs the caller coaches in
    list_my_teams       - Teams the caller coaches, with their clubs
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.dispatcher import Dispatcher
from src.application.queries.user_queries import (
    GetCurrentUser,
    GetMyClubs,
    GetMyTeamsAndClubs,
)
from src.core.container import get_dispatcher
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
)
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.club_schemas import MyClubResponse
from src.schemas.team_schemas import MyTeamResponse
from src.schemas.user_schemas import UpdateProfileRequest, UserResponse


async def get_current_user(
    request: Request,
    principal: CurrentPrincipal,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> UserResponse | JSONResponse:
    """Get the authenticated caller's user profile.

    GET /api/v1/users/me → 200 OK

    Args:
        request: FastAPI request object.
        principal: Authenticated caller (from the principal header).
        dispatcher: Request dispatcher (injected).

    Returns:
        UserResponse on success.
        JSONResponse with 404 if no user is linked to the principal.
    """
    result = await dispatcher.dispatch(GetCurrentUser(auth_id=principal.user_id))

    match result:
        case Success(value=user):
            return UserResponse.from_dto(user)
        case Failure(error=error):
            return problem_response(error, request)


async def update_my_profile(
    request: Request,
    principal: CurrentPrincipal,
    data: UpdateProfileRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> UserResponse | JSONResponse:
    """Update the caller's name, e-mail, photo and preferences.

    PUT /api/v1/users/me → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(principal.user_id))

    match result:
        case Success(value=user):
            return UserResponse.from_dto(user)
        case Failure(error=error):
            return problem_response(error, request)


async def list_my_clubs(
    request: Request,
    principal: CurrentPrincipal,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[MyClubResponse] | JSONResponse:
    """Clubs the caller coaches in, ordered by name.

    GET /api/v1/users/me/clubs → 200 OK (empty when no coach is linked)
    """
    result = await dispatcher.dispatch(GetMyClubs(auth_id=principal.user_id))

    match result:
        case Success(value=clubs):
            return [MyClubResponse.from_dto(club) for club in clubs]
        case Failure(error=error):
            return problem_response(error, request)


async def list_my_teams(
    request: Request,
    principal: CurrentPrincipal,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[MyTeamResponse] | JSONResponse:
    """Active teams the caller coaches, each with its club.

    GET /api/v1/users/me/teams → 200 OK (empty when no coach is linked)
    """
    result = await dispatcher.dispatch(GetMyTeamsAndClubs(auth_id=principal.user_id))

    match result:
        case Success(value=teams):
            return [MyTeamResponse.from_dto(team) for team in teams]
        case Failure(error=error):
            return problem_response(error, request)
