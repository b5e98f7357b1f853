"""Teams resource handlers.

Covers the team itself, its squad (players with squad numbers), its
coaching staff, its matches and its kits.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_team                 - Create a team in an age group
    update_team                 - Replace team details
    archive_team                - Archive or restore a team
    get_team                    - Team detail with record
    get_team_overview           - Team dashboard
    list_team_players           - Squad list
    get_team_squad              - Squad sheet with dates of birth
    add_team_player             - Add a player to the squad
    remove_team_player          - Remove a player from the squad
    update_team_player_squad_number - Change a player's shirt number
    list_team_coaches           - Coaching staff
    assign_team_coach           - Assign a coach with a role
    remove_team_coach           - Remove a coach
    update_team_coach_role      - Change a coach's role
    list_team_matches           - Team fixtures and results
    list_team_kits              - Team kits
    create_team_kit             - Add a kit
    update_team_kit             - Replace a kit
    delete_team_kit             - Delete a kit
    list_team_development_plans - Development plans of the squad
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.kit_commands import DeleteTeamKit
from src.application.commands.team_commands import (
    RemoveCoachFromTeam,
    RemovePlayerFromTeam,
)
from src.application.dispatcher import Dispatcher
from src.application.queries.development_queries import GetDevelopmentPlansByTeamId
from src.application.queries.team_queries import (
    GetCoachesByTeamId,
    GetKitsByTeamId,
    GetMatchesByTeamId,
    GetPlayersByTeamId,
    GetTeamById,
    GetTeamOverview,
    GetTeamSquad,
)
from src.core.container import get_dispatcher
from src.core.result import Failure
from src.presentation.routers.api.v1.errors import problem_response
from src.schemas.development_schemas import DevelopmentPlanListItemResponse
from src.schemas.kit_schemas import KitRequest, KitResponse
from src.schemas.match_schemas import MatchSummaryResponse
from src.schemas.team_schemas import (
    AddPlayerToTeamRequest,
    ArchiveTeamRequest,
    AssignCoachRequest,
    CreateTeamRequest,
    SquadPlayerResponse,
    TeamCoachAssignmentResponse,
    TeamCoachResponse,
    TeamDetailResponse,
    TeamMembershipResponse,
    TeamOverviewResponse,
    TeamPlayerResponse,
    TeamResponse,
    UpdateCoachRoleRequest,
    UpdateSquadNumberRequest,
    UpdateTeamRequest,
)

TeamId = Annotated[UUID, Path(description="Team UUID")]
PlayerId = Annotated[UUID, Path(description="Player UUID")]
CoachId = Annotated[UUID, Path(description="Coach UUID")]
KitId = Annotated[UUID, Path(description="Kit UUID")]


# =============================================================================
# Team
# =============================================================================


async def create_team(
    request: Request,
    data: CreateTeamRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamResponse | JSONResponse:
    """Create a team.

    POST /api/v1/teams → 201 Created

    Returns:
        TeamResponse, or a problem (400 validation or age group outside the
        club, 404 unknown club or age group).
    """
    result = await dispatcher.dispatch(data.to_command())

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamResponse.from_dto(result.value)


async def update_team(
    request: Request,
    team_id: TeamId,
    data: UpdateTeamRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamResponse | JSONResponse:
    """Replace a team's details.

    PUT /api/v1/teams/{team_id} → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamResponse.from_dto(result.value)


async def archive_team(
    request: Request,
    team_id: TeamId,
    data: ArchiveTeamRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamResponse | JSONResponse:
    """Archive (or restore with ``isArchived: false``) a team.

    PUT /api/v1/teams/{team_id}/archive → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamResponse.from_dto(result.value)


async def get_team_overview(
    request: Request,
    team_id: TeamId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamOverviewResponse | JSONResponse:
    """Team dashboard: statistics, fixtures, results and performers.

    GET /api/v1/teams/{team_id}/overview → 200 OK
    """
    result = await dispatcher.dispatch(GetTeamOverview(team_id=team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamOverviewResponse.from_dto(result.value)


async def get_team(
    request: Request,
    team_id: TeamId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamDetailResponse | JSONResponse:
    """Team with its match record and the IDs of its coaches.

    GET /api/v1/teams/{team_id} → 200 OK
    """
    result = await dispatcher.dispatch(GetTeamById(team_id=team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamDetailResponse.from_dto(result.value)


# =============================================================================
# Squad
# =============================================================================


async def list_team_players(
    request: Request,
    team_id: TeamId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[TeamPlayerResponse] | JSONResponse:
    """List the squad with squad numbers.

    GET /api/v1/teams/{team_id}/players → 200 OK
    """
    result = await dispatcher.dispatch(GetPlayersByTeamId(team_id=team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [TeamPlayerResponse.from_dto(player) for player in result.value]


async def get_team_squad(
    request: Request,
    team_id: TeamId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[SquadPlayerResponse] | JSONResponse:
    """GET /api/v1/teams/{team_id}/squad → 200 OK"""
    result = await dispatcher.dispatch(GetTeamSquad(team_id=team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [SquadPlayerResponse.from_dto(player) for player in result.value]


async def add_team_player(
    request: Request,
    team_id: TeamId,
    data: AddPlayerToTeamRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamMembershipResponse | JSONResponse:
    """Add a player to the squad.

    POST /api/v1/teams/{team_id}/players → 201 Created

    Args:
        request: FastAPI request object.
        team_id: Team UUID.
        data: Player and optional squad number.
        dispatcher: Request dispatcher (injected).

    Returns:
        TeamMembershipResponse with the stored squad number.
        JSONResponse with RFC 9457 error (404 unknown team or player,
        409 player already in squad or squad number taken).
    """
    result = await dispatcher.dispatch(data.to_command(team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamMembershipResponse.from_dto(result.value)


async def remove_team_player(
    request: Request,
    team_id: TeamId,
    player_id: PlayerId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    """Remove a player from the squad.

    DELETE /api/v1/teams/{team_id}/players/{player_id} → 204 No Content
    """
    result = await dispatcher.dispatch(
        RemovePlayerFromTeam(team_id=team_id, player_id=player_id)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def update_team_player_squad_number(
    request: Request,
    team_id: TeamId,
    player_id: PlayerId,
    data: UpdateSquadNumberRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamMembershipResponse | JSONResponse:
    """Change a player's squad number.

    PUT /api/v1/teams/{team_id}/players/{player_id}/squad-number → 200 OK

    Reassigning a player's own number succeeds; a number held by another
    squad member is a 409.
    """
    result = await dispatcher.dispatch(data.to_command(team_id, player_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamMembershipResponse.from_dto(result.value)


# =============================================================================
# Coaching staff
# =============================================================================


async def list_team_coaches(
    request: Request,
    team_id: TeamId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[TeamCoachResponse] | JSONResponse:
    """List the team's coaches with their roles.

    GET /api/v1/teams/{team_id}/coaches → 200 OK
    """
    result = await dispatcher.dispatch(GetCoachesByTeamId(team_id=team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [TeamCoachResponse.from_dto(coach) for coach in result.value]


async def assign_team_coach(
    request: Request,
    team_id: TeamId,
    data: AssignCoachRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamCoachAssignmentResponse | JSONResponse:
    """Assign a coach to the team.

    POST /api/v1/teams/{team_id}/coaches → 201 Created
    """
    result = await dispatcher.dispatch(data.to_command(team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamCoachAssignmentResponse.from_dto(result.value)


async def remove_team_coach(
    request: Request,
    team_id: TeamId,
    coach_id: CoachId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    """Remove a coach from the team.

    DELETE /api/v1/teams/{team_id}/coaches/{coach_id} → 204 No Content
    """
    result = await dispatcher.dispatch(
        RemoveCoachFromTeam(team_id=team_id, coach_id=coach_id)
    )

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def update_team_coach_role(
    request: Request,
    team_id: TeamId,
    coach_id: CoachId,
    data: UpdateCoachRoleRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> TeamCoachAssignmentResponse | JSONResponse:
    """Change a coach's role within the team.

    PUT /api/v1/teams/{team_id}/coaches/{coach_id}/role → 200 OK
    """
    result = await dispatcher.dispatch(data.to_command(team_id, coach_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return TeamCoachAssignmentResponse.from_dto(result.value)


# =============================================================================
# Matches and kits
# =============================================================================


async def list_team_matches(
    request: Request,
    team_id: TeamId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[MatchSummaryResponse] | JSONResponse:
    """List the team's matches, newest first.

    GET /api/v1/teams/{team_id}/matches → 200 OK
    """
    result = await dispatcher.dispatch(GetMatchesByTeamId(team_id=team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [MatchSummaryResponse.from_dto(match) for match in result.value]


async def list_team_kits(
    request: Request,
    team_id: TeamId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[KitResponse] | JSONResponse:
    """List the team's kits.

    GET /api/v1/teams/{team_id}/kits → 200 OK
    """
    result = await dispatcher.dispatch(GetKitsByTeamId(team_id=team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [KitResponse.from_dto(kit) for kit in result.value]


async def create_team_kit(
    request: Request,
    team_id: TeamId,
    data: KitRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> KitResponse | JSONResponse:
    """Add a kit to the team.

    POST /api/v1/teams/{team_id}/kits → 201 Created
    """
    result = await dispatcher.dispatch(data.to_create_command(team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return KitResponse.from_dto(result.value)


async def update_team_kit(
    request: Request,
    team_id: TeamId,
    kit_id: KitId,
    data: KitRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> KitResponse | JSONResponse:
    """Replace a team kit.

    PUT /api/v1/teams/{team_id}/kits/{kit_id} → 200 OK
    """
    result = await dispatcher.dispatch(data.to_update_command(team_id, kit_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return KitResponse.from_dto(result.value)


async def delete_team_kit(
    request: Request,
    team_id: TeamId,
    kit_id: KitId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    """Delete a team kit.

    DELETE /api/v1/teams/{team_id}/kits/{kit_id} → 204 No Content
    """
    result = await dispatcher.dispatch(DeleteTeamKit(team_id=team_id, kit_id=kit_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Development
# =============================================================================


async def list_team_development_plans(
    request: Request,
    team_id: TeamId,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[DevelopmentPlanListItemResponse] | JSONResponse:
    """List the squad's development plans, active plans first.

    GET /api/v1/teams/{team_id}/development-plans → 200 OK
    """
    result = await dispatcher.dispatch(GetDevelopmentPlansByTeamId(team_id=team_id))

    if isinstance(result, Failure):
        return problem_response(result.error, request)

    return [DevelopmentPlanListItemResponse.from_dto(plan) for plan in result.value]
