"""API Route Registry - Single Source of Truth for all routes.

This module contains ROUTE_REGISTRY, the authoritative list of all API endpoints.
The registry is used to generate FastAPI routes, auth dependencies and OpenAPI
metadata at application startup.

Registry structure:
    - 72 endpoints across 9 resource categories
    - Each entry is a RouteMetadata instance with complete specification
    - Each entry names the command or query its handler dispatches; every
      operation in the CQRS registry is exposed by exactly one route
    - Auth policies explicitly declared (PUBLIC, AUTHENTICATED)

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.application.commands.age_group_commands import CreateAgeGroup, UpdateAgeGroup
from src.application.commands.club_commands import UpdateClub
from src.application.commands.coach_commands import UpdateCoach
from src.application.commands.development_commands import (
    CreateDevelopmentPlan,
    CreateReport,
    UpdateDevelopmentPlan,
    UpdateReport,
)
from src.application.commands.drill_commands import (
    CreateDrill,
    CreateDrillTemplate,
    UpdateDrill,
    UpdateDrillTemplate,
)
from src.application.commands.evaluation_commands import (
    CreatePlayerAbilityEvaluation,
    DeletePlayerAbilityEvaluation,
    UpdatePlayerAbilityEvaluation,
)
from src.application.commands.kit_commands import (
    CreateTeamKit,
    DeleteTeamKit,
    UpdateTeamKit,
)
from src.application.commands.match_commands import CreateMatch, UpdateMatch
from src.application.commands.player_commands import UpdatePlayer
from src.application.commands.team_commands import (
    AddPlayerToTeam,
    ArchiveTeam,
    AssignCoachToTeam,
    CreateTeam,
    RemoveCoachFromTeam,
    RemovePlayerFromTeam,
    UpdateTeam,
    UpdateTeamCoachRole,
    UpdateTeamPlayerSquadNumber,
)
from src.application.commands.user_commands import UpdateMyProfile
from src.application.queries.age_group_queries import (
    GetAgeGroupById,
    GetAgeGroupDevelopmentPlans,
    GetAgeGroupsByClubId,
    GetAgeGroupStatistics,
    GetCoachesByAgeGroupId,
    GetPlayersByAgeGroupId,
)
from src.application.queries.club_queries import (
    GetAllClubs,
    GetClubById,
    GetClubPlayers,
    GetClubStatistics,
    GetClubTeams,
    GetKitsByClubId,
    GetMatchesByClubId,
)
from src.application.queries.coach_queries import GetCoachById, GetCoachesByClubId
from src.application.queries.development_queries import (
    GetDevelopmentPlanById,
    GetDevelopmentPlansByClubId,
    GetDevelopmentPlansByTeamId,
    GetReportById,
)
from src.application.queries.drill_queries import (
    GetDrillById,
    GetDrillsByScope,
    GetDrillTemplateById,
    GetDrillTemplatesByScope,
)
from src.application.queries.match_queries import GetMatchById
from src.application.queries.player_queries import (
    GetPlayerAbilities,
    GetPlayerAttributes,
    GetPlayerById,
    GetPlayerRecentPerformances,
    GetPlayerReports,
    GetPlayerUpcomingMatches,
)
from src.application.queries.team_queries import (
    GetCoachesByTeamId,
    GetKitsByTeamId,
    GetMatchesByTeamId,
    GetPlayersByTeamId,
    GetTeamById,
    GetTeamOverview,
    GetTeamsByAgeGroupId,
    GetTeamSquad,
)
from src.application.queries.user_queries import (
    GetCurrentUser,
    GetMyClubs,
    GetMyTeamsAndClubs,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

# Import handlers from router modules
from src.presentation.routers.api.v1.age_groups import (
    create_age_group,
    get_age_group,
    get_age_group_statistics,
    list_age_group_coaches,
    list_age_group_development_plans,
    list_age_group_players,
    list_age_group_teams,
    update_age_group,
)
from src.presentation.routers.api.v1.clubs import (
    get_club,
    get_club_statistics,
    list_club_age_groups,
    list_club_coaches,
    list_club_development_plans,
    list_club_drill_templates,
    list_club_drills,
    list_club_kits,
    list_club_matches,
    list_club_players,
    list_club_teams,
    list_clubs,
    update_club,
)
from src.presentation.routers.api.v1.coaches import get_coach, update_coach
from src.presentation.routers.api.v1.development import (
    create_development_plan,
    create_report,
    get_development_plan,
    get_report,
    update_development_plan,
    update_report,
)
from src.presentation.routers.api.v1.drills import (
    create_drill,
    create_drill_template,
    get_drill,
    get_drill_template,
    update_drill,
    update_drill_template,
)
from src.presentation.routers.api.v1.matches import (
    create_match,
    get_match,
    update_match,
)
from src.presentation.routers.api.v1.players import (
    create_player_evaluation,
    delete_player_evaluation,
    get_player,
    get_player_abilities,
    get_player_attributes,
    list_player_recent_performances,
    list_player_reports,
    list_player_upcoming_matches,
    update_player,
    update_player_evaluation,
)
from src.presentation.routers.api.v1.teams import (
    add_team_player,
    archive_team,
    assign_team_coach,
    create_team,
    create_team_kit,
    delete_team_kit,
    get_team,
    get_team_overview,
    get_team_squad,
    list_team_coaches,
    list_team_development_plans,
    list_team_kits,
    list_team_matches,
    list_team_players,
    remove_team_coach,
    remove_team_player,
    update_team,
    update_team_coach_role,
    update_team_kit,
    update_team_player_squad_number,
)
from src.presentation.routers.api.v1.users import (
    get_current_user,
    list_my_clubs,
    list_my_teams,
    update_my_profile,
)
from src.schemas.age_group_schemas import AgeGroupResponse, AgeGroupStatisticsResponse
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

PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)

VALIDATION_ERROR = ErrorSpec(status=400, description="Validation error")
UNAUTHENTICATED = ErrorSpec(status=401, description="Missing or invalid client principal")
UNPROCESSABLE = ErrorSpec(status=422, description="Request body could not be parsed")

# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Clubs Resource (13 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs",
        handler=list_clubs,
        operation=GetAllClubs,
        resource="clubs",
        tags=["Clubs"],
        summary="List clubs",
        operation_id="list_clubs",
        response_model=list[ClubSummaryResponse],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}",
        handler=get_club,
        operation=GetClubById,
        resource="clubs",
        tags=["Clubs"],
        summary="Get club",
        operation_id="get_club",
        response_model=ClubDetailResponse,
        errors=[ErrorSpec(status=404, description="Club not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/clubs/{club_id}",
        handler=update_club,
        operation=UpdateClub,
        resource="clubs",
        tags=["Clubs"],
        summary="Update club",
        description="Replace the club profile: name, colours, location, history and principles.",
        operation_id="update_club",
        response_model=ClubDetailResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Club not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/statistics",
        handler=get_club_statistics,
        operation=GetClubStatistics,
        resource="clubs",
        tags=["Clubs"],
        summary="Get club statistics",
        description="Counts of active age groups, teams, players and coaches, "
        "the completed-match record, upcoming fixtures and recent results.",
        operation_id="get_club_statistics",
        response_model=ClubStatisticsResponse,
        errors=[ErrorSpec(status=404, description="Club not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/age-groups",
        handler=list_club_age_groups,
        operation=GetAgeGroupsByClubId,
        resource="clubs",
        tags=["Clubs", "Age Groups"],
        summary="List club age groups",
        operation_id="list_club_age_groups",
        response_model=list[AgeGroupResponse],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/coaches",
        handler=list_club_coaches,
        operation=GetCoachesByClubId,
        resource="clubs",
        tags=["Clubs", "Coaches"],
        summary="List club coaches",
        operation_id="list_club_coaches",
        response_model=list[CoachResponse],
        errors=[ErrorSpec(status=404, description="Club not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/kits",
        handler=list_club_kits,
        operation=GetKitsByClubId,
        resource="clubs",
        tags=["Clubs", "Kits"],
        summary="List club kits",
        operation_id="list_club_kits",
        response_model=list[KitResponse],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/drills",
        handler=list_club_drills,
        operation=GetDrillsByScope,
        resource="clubs",
        tags=["Clubs", "Drills"],
        summary="List drills by scope",
        description="Drills at the requested scope, plus drills inherited from the "
        "club (and age group, when a team is given).",
        operation_id="list_club_drills",
        response_model=DrillsByScopeResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/drill-templates",
        handler=list_club_drill_templates,
        operation=GetDrillTemplatesByScope,
        resource="clubs",
        tags=["Clubs", "Drills"],
        summary="List drill templates by scope",
        operation_id="list_club_drill_templates",
        response_model=DrillTemplatesByScopeResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/players",
        handler=list_club_players,
        operation=GetClubPlayers,
        resource="clubs",
        tags=["Clubs", "Players"],
        summary="List club players",
        description="Paged players of a club, filtered by age group, team, position "
        "and a search over names.",
        operation_id="list_club_players",
        response_model=PlayerPageResponse,
        errors=[ErrorSpec(status=404, description="Club not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/teams",
        handler=list_club_teams,
        operation=GetClubTeams,
        resource="clubs",
        tags=["Clubs", "Teams"],
        summary="List club teams",
        operation_id="list_club_teams",
        response_model=list[ClubTeamResponse],
        errors=[ErrorSpec(status=404, description="Club not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/matches",
        handler=list_club_matches,
        operation=GetMatchesByClubId,
        resource="clubs",
        tags=["Clubs", "Matches"],
        summary="List club matches",
        operation_id="list_club_matches",
        response_model=ClubMatchesResponse,
        errors=[ErrorSpec(status=404, description="Club not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/clubs/{club_id}/development-plans",
        handler=list_club_development_plans,
        operation=GetDevelopmentPlansByClubId,
        resource="clubs",
        tags=["Clubs", "Development"],
        summary="List club development plans",
        operation_id="list_club_development_plans",
        response_model=list[DevelopmentPlanListItemResponse],
        errors=[ErrorSpec(status=404, description="Club not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Age Groups Resource (8 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/age-groups",
        handler=create_age_group,
        operation=CreateAgeGroup,
        resource="age-groups",
        tags=["Age Groups"],
        summary="Create age group",
        operation_id="create_age_group",
        response_model=AgeGroupResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Club not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/age-groups/{age_group_id}",
        handler=get_age_group,
        operation=GetAgeGroupById,
        resource="age-groups",
        tags=["Age Groups"],
        summary="Get age group",
        operation_id="get_age_group",
        response_model=AgeGroupResponse,
        errors=[ErrorSpec(status=404, description="Age group not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/age-groups/{age_group_id}",
        handler=update_age_group,
        operation=UpdateAgeGroup,
        resource="age-groups",
        tags=["Age Groups"],
        summary="Update age group",
        operation_id="update_age_group",
        response_model=AgeGroupResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Age group not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/age-groups/{age_group_id}/statistics",
        handler=get_age_group_statistics,
        operation=GetAgeGroupStatistics,
        resource="age-groups",
        tags=["Age Groups"],
        summary="Get age group statistics",
        operation_id="get_age_group_statistics",
        response_model=AgeGroupStatisticsResponse,
        errors=[ErrorSpec(status=404, description="Age group not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/age-groups/{age_group_id}/teams",
        handler=list_age_group_teams,
        operation=GetTeamsByAgeGroupId,
        resource="age-groups",
        tags=["Age Groups", "Teams"],
        summary="List age group teams",
        operation_id="list_age_group_teams",
        response_model=list[TeamResponse],
        errors=[ErrorSpec(status=404, description="Age group not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/age-groups/{age_group_id}/players",
        handler=list_age_group_players,
        operation=GetPlayersByAgeGroupId,
        resource="age-groups",
        tags=["Age Groups", "Players"],
        summary="List age group players",
        operation_id="list_age_group_players",
        response_model=list[PlayerListItemResponse],
        errors=[ErrorSpec(status=404, description="Age group not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/age-groups/{age_group_id}/coaches",
        handler=list_age_group_coaches,
        operation=GetCoachesByAgeGroupId,
        resource="age-groups",
        tags=["Age Groups", "Coaches"],
        summary="List age group coaches",
        operation_id="list_age_group_coaches",
        response_model=list[CoachResponse],
        errors=[ErrorSpec(status=404, description="Age group not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/age-groups/{age_group_id}/development-plans",
        handler=list_age_group_development_plans,
        operation=GetAgeGroupDevelopmentPlans,
        resource="age-groups",
        tags=["Age Groups", "Development"],
        summary="List age group development plans",
        operation_id="list_age_group_development_plans",
        response_model=list[DevelopmentPlanListItemResponse],
        errors=[ErrorSpec(status=404, description="Age group not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Teams Resource (20 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/teams",
        handler=create_team,
        operation=CreateTeam,
        resource="teams",
        tags=["Teams"],
        summary="Create team",
        operation_id="create_team",
        response_model=TeamResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Club or age group not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/teams/{team_id}",
        handler=update_team,
        operation=UpdateTeam,
        resource="teams",
        tags=["Teams"],
        summary="Update team",
        operation_id="update_team",
        response_model=TeamResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Team not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/teams/{team_id}/archive",
        handler=archive_team,
        operation=ArchiveTeam,
        resource="teams",
        tags=["Teams"],
        summary="Archive team",
        operation_id="archive_team",
        response_model=TeamResponse,
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/teams/{team_id}/overview",
        handler=get_team_overview,
        operation=GetTeamOverview,
        resource="teams",
        tags=["Teams"],
        summary="Get team overview",
        operation_id="get_team_overview",
        response_model=TeamOverviewResponse,
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/teams/{team_id}/players",
        handler=list_team_players,
        operation=GetPlayersByTeamId,
        resource="teams",
        tags=["Teams", "Players"],
        summary="List team players",
        operation_id="list_team_players",
        response_model=list[TeamPlayerResponse],
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/teams/{team_id}/players",
        handler=add_team_player,
        operation=AddPlayerToTeam,
        resource="teams",
        tags=["Teams", "Players"],
        summary="Add player to team",
        description="Add a player to the squad with an optional squad number (1-99).",
        operation_id="add_team_player",
        response_model=TeamMembershipResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Team or player not found"),
            ErrorSpec(status=409, description="Already in squad or squad number taken"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/teams/{team_id}/players/{player_id}",
        handler=remove_team_player,
        operation=RemovePlayerFromTeam,
        resource="teams",
        tags=["Teams", "Players"],
        summary="Remove player from team",
        operation_id="remove_team_player",
        response_model=None,
        status_code=204,
        errors=[ErrorSpec(status=404, description="Team or membership not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/teams/{team_id}/players/{player_id}/squad-number",
        handler=update_team_player_squad_number,
        operation=UpdateTeamPlayerSquadNumber,
        resource="teams",
        tags=["Teams", "Players"],
        summary="Update squad number",
        operation_id="update_team_player_squad_number",
        response_model=TeamMembershipResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Team or membership not found"),
            ErrorSpec(status=409, description="Squad number taken"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/teams/{team_id}/coaches",
        handler=list_team_coaches,
        operation=GetCoachesByTeamId,
        resource="teams",
        tags=["Teams", "Coaches"],
        summary="List team coaches",
        operation_id="list_team_coaches",
        response_model=list[TeamCoachResponse],
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/teams/{team_id}/coaches",
        handler=assign_team_coach,
        operation=AssignCoachToTeam,
        resource="teams",
        tags=["Teams", "Coaches"],
        summary="Assign coach to team",
        operation_id="assign_team_coach",
        response_model=TeamCoachAssignmentResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Team or coach not found"),
            ErrorSpec(status=409, description="Coach already assigned"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/teams/{team_id}/coaches/{coach_id}",
        handler=remove_team_coach,
        operation=RemoveCoachFromTeam,
        resource="teams",
        tags=["Teams", "Coaches"],
        summary="Remove coach from team",
        operation_id="remove_team_coach",
        response_model=None,
        status_code=204,
        errors=[ErrorSpec(status=404, description="Team or assignment not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/teams/{team_id}/coaches/{coach_id}/role",
        handler=update_team_coach_role,
        operation=UpdateTeamCoachRole,
        resource="teams",
        tags=["Teams", "Coaches"],
        summary="Update coach role",
        operation_id="update_team_coach_role",
        response_model=TeamCoachAssignmentResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Team or assignment not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/teams/{team_id}/matches",
        handler=list_team_matches,
        operation=GetMatchesByTeamId,
        resource="teams",
        tags=["Teams", "Matches"],
        summary="List team matches",
        operation_id="list_team_matches",
        response_model=list[MatchSummaryResponse],
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/teams/{team_id}/kits",
        handler=list_team_kits,
        operation=GetKitsByTeamId,
        resource="teams",
        tags=["Teams", "Kits"],
        summary="List team kits",
        operation_id="list_team_kits",
        response_model=list[KitResponse],
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/teams/{team_id}/kits",
        handler=create_team_kit,
        operation=CreateTeamKit,
        resource="teams",
        tags=["Teams", "Kits"],
        summary="Create team kit",
        operation_id="create_team_kit",
        response_model=KitResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Team not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/teams/{team_id}/kits/{kit_id}",
        handler=update_team_kit,
        operation=UpdateTeamKit,
        resource="teams",
        tags=["Teams", "Kits"],
        summary="Update team kit",
        operation_id="update_team_kit",
        response_model=KitResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Team or kit not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/teams/{team_id}/kits/{kit_id}",
        handler=delete_team_kit,
        operation=DeleteTeamKit,
        resource="teams",
        tags=["Teams", "Kits"],
        summary="Delete team kit",
        operation_id="delete_team_kit",
        response_model=None,
        status_code=204,
        errors=[ErrorSpec(status=404, description="Team or kit not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/teams/{team_id}",
        handler=get_team,
        operation=GetTeamById,
        resource="teams",
        tags=["Teams"],
        summary="Get team",
        operation_id="get_team",
        response_model=TeamDetailResponse,
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/teams/{team_id}/squad",
        handler=get_team_squad,
        operation=GetTeamSquad,
        resource="teams",
        tags=["Teams", "Players"],
        summary="Get team squad",
        operation_id="get_team_squad",
        response_model=list[SquadPlayerResponse],
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/teams/{team_id}/development-plans",
        handler=list_team_development_plans,
        operation=GetDevelopmentPlansByTeamId,
        resource="teams",
        tags=["Teams", "Development"],
        summary="List team development plans",
        description="Development plans of the squad, active plans first.",
        operation_id="list_team_development_plans",
        response_model=list[DevelopmentPlanListItemResponse],
        errors=[ErrorSpec(status=404, description="Team not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Players Resource (10 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/players/{player_id}",
        handler=get_player,
        operation=GetPlayerById,
        resource="players",
        tags=["Players"],
        summary="Get player",
        operation_id="get_player",
        response_model=PlayerResponse,
        errors=[ErrorSpec(status=404, description="Player not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/players/{player_id}",
        handler=update_player,
        operation=UpdatePlayer,
        resource="players",
        tags=["Players"],
        summary="Update player",
        operation_id="update_player",
        response_model=PlayerResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Player or team not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/players/{player_id}/abilities",
        handler=get_player_abilities,
        operation=GetPlayerAbilities,
        resource="players",
        tags=["Players"],
        summary="Get player abilities",
        operation_id="get_player_abilities",
        response_model=PlayerAbilitiesResponse,
        errors=[ErrorSpec(status=404, description="Player not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/players/{player_id}/ability-evaluations",
        handler=create_player_evaluation,
        operation=CreatePlayerAbilityEvaluation,
        resource="players",
        tags=["Players", "Evaluations"],
        summary="Create ability evaluation",
        description="Record per-attribute ratings; the player's current ratings "
        "follow the latest evaluation.",
        operation_id="create_player_evaluation",
        response_model=EvaluationResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            UNAUTHENTICATED,
            ErrorSpec(status=403, description="Caller is not a coach"),
            ErrorSpec(status=404, description="Player not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Evaluations are attributed to the calling coach",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/players/{player_id}/ability-evaluations/{evaluation_id}",
        handler=update_player_evaluation,
        operation=UpdatePlayerAbilityEvaluation,
        resource="players",
        tags=["Players", "Evaluations"],
        summary="Update ability evaluation",
        operation_id="update_player_evaluation",
        response_model=EvaluationResponse,
        errors=[
            VALIDATION_ERROR,
            UNAUTHENTICATED,
            ErrorSpec(status=403, description="Caller is not a coach"),
            ErrorSpec(status=404, description="Player or evaluation not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Only coaches may change evaluations",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/players/{player_id}/ability-evaluations/{evaluation_id}",
        handler=delete_player_evaluation,
        operation=DeletePlayerAbilityEvaluation,
        resource="players",
        tags=["Players", "Evaluations"],
        summary="Delete ability evaluation",
        operation_id="delete_player_evaluation",
        response_model=None,
        status_code=204,
        errors=[
            UNAUTHENTICATED,
            ErrorSpec(status=403, description="Caller is not a coach"),
            ErrorSpec(status=404, description="Player or evaluation not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Only coaches may delete evaluations",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/players/{player_id}/reports",
        handler=list_player_reports,
        operation=GetPlayerReports,
        resource="players",
        tags=["Players", "Reports"],
        summary="List player reports",
        operation_id="list_player_reports",
        response_model=list[ReportResponse],
        errors=[ErrorSpec(status=404, description="Player not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/players/{player_id}/recent-performances",
        handler=list_player_recent_performances,
        operation=GetPlayerRecentPerformances,
        resource="players",
        tags=["Players"],
        summary="List recent performances",
        operation_id="list_player_recent_performances",
        response_model=list[RecentPerformanceResponse],
        errors=[ErrorSpec(status=404, description="Player not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/players/{player_id}/upcoming-matches",
        handler=list_player_upcoming_matches,
        operation=GetPlayerUpcomingMatches,
        resource="players",
        tags=["Players", "Matches"],
        summary="List upcoming matches",
        operation_id="list_player_upcoming_matches",
        response_model=list[UpcomingMatchResponse],
        errors=[ErrorSpec(status=404, description="Player not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/players/{player_id}/attributes",
        handler=get_player_attributes,
        operation=GetPlayerAttributes,
        resource="players",
        tags=["Players"],
        summary="Get player attributes",
        operation_id="get_player_attributes",
        response_model=PlayerAttributesResponse,
        errors=[
            ErrorSpec(status=404, description="Player not found or never evaluated"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Coaches Resource (2 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/coaches/{coach_id}",
        handler=get_coach,
        operation=GetCoachById,
        resource="coaches",
        tags=["Coaches"],
        summary="Get coach",
        operation_id="get_coach",
        response_model=CoachResponse,
        errors=[ErrorSpec(status=404, description="Coach not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/coaches/{coach_id}",
        handler=update_coach,
        operation=UpdateCoach,
        resource="coaches",
        tags=["Coaches"],
        summary="Update coach",
        operation_id="update_coach",
        response_model=CoachResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Coach or team not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Matches Resource (3 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/matches",
        handler=create_match,
        operation=CreateMatch,
        resource="matches",
        tags=["Matches"],
        summary="Create match",
        operation_id="create_match",
        response_model=MatchResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Team not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/matches/{match_id}",
        handler=get_match,
        operation=GetMatchById,
        resource="matches",
        tags=["Matches"],
        summary="Get match",
        operation_id="get_match",
        response_model=MatchResponse,
        errors=[ErrorSpec(status=404, description="Match not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/matches/{match_id}",
        handler=update_match,
        operation=UpdateMatch,
        resource="matches",
        tags=["Matches"],
        summary="Update match",
        operation_id="update_match",
        response_model=MatchResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Match not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Drills Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/drills",
        handler=create_drill,
        operation=CreateDrill,
        resource="drills",
        tags=["Drills"],
        summary="Create drill",
        operation_id="create_drill",
        response_model=DrillResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            UNAUTHENTICATED,
            ErrorSpec(status=404, description="Scope club, age group or team not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Drills record the authoring coach",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/drills/{drill_id}",
        handler=get_drill,
        operation=GetDrillById,
        resource="drills",
        tags=["Drills"],
        summary="Get drill",
        operation_id="get_drill",
        response_model=DrillResponse,
        errors=[ErrorSpec(status=404, description="Drill not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/drills/{drill_id}",
        handler=update_drill,
        operation=UpdateDrill,
        resource="drills",
        tags=["Drills"],
        summary="Update drill",
        operation_id="update_drill",
        response_model=DrillResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Drill not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/drill-templates",
        handler=create_drill_template,
        operation=CreateDrillTemplate,
        resource="drill-templates",
        tags=["Drills"],
        summary="Create drill template",
        description="Category, attributes and total duration are derived from the drills.",
        operation_id="create_drill_template",
        response_model=DrillTemplateResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            UNAUTHENTICATED,
            ErrorSpec(status=404, description="Drill or scope not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Templates record the authoring coach",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/drill-templates/{template_id}",
        handler=get_drill_template,
        operation=GetDrillTemplateById,
        resource="drill-templates",
        tags=["Drills"],
        summary="Get drill template",
        operation_id="get_drill_template",
        response_model=DrillTemplateResponse,
        errors=[ErrorSpec(status=404, description="Drill template not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/drill-templates/{template_id}",
        handler=update_drill_template,
        operation=UpdateDrillTemplate,
        resource="drill-templates",
        tags=["Drills"],
        summary="Update drill template",
        operation_id="update_drill_template",
        response_model=DrillTemplateResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Template or drill not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Development Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/development-plans",
        handler=create_development_plan,
        operation=CreateDevelopmentPlan,
        resource="development-plans",
        tags=["Development"],
        summary="Create development plan",
        operation_id="create_development_plan",
        response_model=DevelopmentPlanResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            UNAUTHENTICATED,
            ErrorSpec(status=404, description="Player not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Plans record the authoring coach",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/development-plans/{plan_id}",
        handler=get_development_plan,
        operation=GetDevelopmentPlanById,
        resource="development-plans",
        tags=["Development"],
        summary="Get development plan",
        operation_id="get_development_plan",
        response_model=DevelopmentPlanResponse,
        errors=[ErrorSpec(status=404, description="Development plan not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/development-plans/{plan_id}",
        handler=update_development_plan,
        operation=UpdateDevelopmentPlan,
        resource="development-plans",
        tags=["Development"],
        summary="Update development plan",
        operation_id="update_development_plan",
        response_model=DevelopmentPlanResponse,
        errors=[
            VALIDATION_ERROR,
            ErrorSpec(status=404, description="Development plan not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/reports",
        handler=create_report,
        operation=CreateReport,
        resource="reports",
        tags=["Reports"],
        summary="Create progress report",
        operation_id="create_report",
        response_model=ReportResponse,
        status_code=201,
        errors=[
            VALIDATION_ERROR,
            UNAUTHENTICATED,
            ErrorSpec(status=404, description="Player not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Reports record the authoring coach",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/reports/{report_id}",
        handler=get_report,
        operation=GetReportById,
        resource="reports",
        tags=["Reports"],
        summary="Get progress report",
        operation_id="get_report",
        response_model=ReportResponse,
        errors=[ErrorSpec(status=404, description="Report not found")],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/reports/{report_id}",
        handler=update_report,
        operation=UpdateReport,
        resource="reports",
        tags=["Reports"],
        summary="Update progress report",
        operation_id="update_report",
        response_model=ReportResponse,
        errors=[
            VALIDATION_ERROR,
            UNAUTHENTICATED,
            ErrorSpec(status=404, description="Report not found"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Reports are edited by signed-in coaches only",
        ),
    ),
    # =========================================================================
    # Users Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/me",
        handler=get_current_user,
        operation=GetCurrentUser,
        resource="users",
        tags=["Users"],
        summary="Get current user",
        operation_id="get_current_user",
        response_model=UserResponse,
        errors=[
            UNAUTHENTICATED,
            ErrorSpec(status=404, description="No user linked to the principal"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="The user is identified by the principal",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/users/me",
        handler=update_my_profile,
        operation=UpdateMyProfile,
        resource="users",
        tags=["Users"],
        summary="Update my profile",
        operation_id="update_my_profile",
        response_model=UserResponse,
        errors=[
            VALIDATION_ERROR,
            UNAUTHENTICATED,
            ErrorSpec(status=404, description="No user linked to the principal"),
            UNPROCESSABLE,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="The user is identified by the principal",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/me/clubs",
        handler=list_my_clubs,
        operation=GetMyClubs,
        resource="users",
        tags=["Users", "Clubs"],
        summary="List my clubs",
        operation_id="list_my_clubs",
        response_model=list[MyClubResponse],
        errors=[UNAUTHENTICATED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Clubs are resolved from the caller's coach record",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/users/me/teams",
        handler=list_my_teams,
        operation=GetMyTeamsAndClubs,
        resource="users",
        tags=["Users", "Teams"],
        summary="List my teams",
        operation_id="list_my_teams",
        response_model=list[MyTeamResponse],
        errors=[UNAUTHENTICATED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(
            level=AuthLevel.AUTHENTICATED,
            rationale="Teams are resolved from the caller's coach record",
        ),
    ),
]
