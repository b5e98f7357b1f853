"""CQRS Registry - Single Source of Truth for Commands and Queries.

This registry catalogs ALL commands and queries in the system with their metadata.
Used for:
- Dispatcher lookup (command/query class -> handler class + field rules)
- Validation tests (verify no drift between commands/handlers)
- Gap detection (missing handlers, result DTOs, etc.)

Architecture:
- Application layer (commands/queries are use cases)
- Imported lazily by the dispatcher and computed views
- Verified by tests to catch drift

Adding new commands/queries:
1. Define command/query dataclass in appropriate *_commands.py/*_queries.py file
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing

Reference:
    - src/application/dispatcher.py
    - tests/unit/test_cqrs_registry.py
"""

from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all commands (and their field rules)
# ═══════════════════════════════════════════════════════════════════════════
from src.application.commands.age_group_commands import (
    CREATE_AGE_GROUP_RULES,
    UPDATE_AGE_GROUP_RULES,
    CreateAgeGroup,
    UpdateAgeGroup,
)
from src.application.commands.club_commands import UPDATE_CLUB_RULES, UpdateClub
from src.application.commands.coach_commands import UPDATE_COACH_RULES, UpdateCoach
from src.application.commands.development_commands import (
    CREATE_PLAN_RULES,
    CREATE_REPORT_RULES,
    UPDATE_PLAN_RULES,
    UPDATE_REPORT_RULES,
    CreateDevelopmentPlan,
    CreateReport,
    UpdateDevelopmentPlan,
    UpdateReport,
)
from src.application.commands.drill_commands import (
    CREATE_DRILL_RULES,
    CREATE_TEMPLATE_RULES,
    UPDATE_DRILL_RULES,
    UPDATE_TEMPLATE_RULES,
    CreateDrill,
    CreateDrillTemplate,
    UpdateDrill,
    UpdateDrillTemplate,
)
from src.application.commands.evaluation_commands import (
    EVALUATION_RULES,
    CreatePlayerAbilityEvaluation,
    DeletePlayerAbilityEvaluation,
    UpdatePlayerAbilityEvaluation,
)
from src.application.commands.kit_commands import (
    KIT_RULES,
    CreateTeamKit,
    DeleteTeamKit,
    UpdateTeamKit,
)
from src.application.commands.match_commands import (
    CREATE_MATCH_RULES,
    UPDATE_MATCH_RULES,
    CreateMatch,
    UpdateMatch,
)
from src.application.commands.player_commands import (
    UPDATE_PLAYER_RULES,
    UpdatePlayer,
)
from src.application.commands.team_commands import (
    ADD_PLAYER_TO_TEAM_RULES,
    ASSIGN_COACH_RULES,
    CREATE_TEAM_RULES,
    UPDATE_COACH_ROLE_RULES,
    UPDATE_SQUAD_NUMBER_RULES,
    UPDATE_TEAM_RULES,
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
from src.application.commands.user_commands import (
    UPDATE_PROFILE_RULES,
    UpdateMyProfile,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all command handlers
# ═══════════════════════════════════════════════════════════════════════════
from src.application.commands.handlers.age_group_handlers import (
    CreateAgeGroupHandler,
    UpdateAgeGroupHandler,
)
from src.application.commands.handlers.club_handlers import UpdateClubHandler
from src.application.commands.handlers.coach_handlers import UpdateCoachHandler
from src.application.commands.handlers.development_handlers import (
    CreateDevelopmentPlanHandler,
    CreateReportHandler,
    UpdateDevelopmentPlanHandler,
    UpdateReportHandler,
)
from src.application.commands.handlers.drill_handlers import (
    CreateDrillHandler,
    CreateDrillTemplateHandler,
    UpdateDrillHandler,
    UpdateDrillTemplateHandler,
)
from src.application.commands.handlers.evaluation_handlers import (
    CreatePlayerAbilityEvaluationHandler,
    DeletePlayerAbilityEvaluationHandler,
    UpdatePlayerAbilityEvaluationHandler,
)
from src.application.commands.handlers.kit_handlers import (
    CreateTeamKitHandler,
    DeleteTeamKitHandler,
    UpdateTeamKitHandler,
)
from src.application.commands.handlers.match_handlers import (
    CreateMatchHandler,
    UpdateMatchHandler,
)
from src.application.commands.handlers.player_handlers import UpdatePlayerHandler
from src.application.commands.handlers.team_coach_handlers import (
    AssignCoachToTeamHandler,
    RemoveCoachFromTeamHandler,
    UpdateTeamCoachRoleHandler,
)
from src.application.commands.handlers.team_handlers import (
    ArchiveTeamHandler,
    CreateTeamHandler,
    UpdateTeamHandler,
)
from src.application.commands.handlers.team_membership_handlers import (
    AddPlayerToTeamHandler,
    RemovePlayerFromTeamHandler,
    UpdateTeamPlayerSquadNumberHandler,
)
from src.application.commands.handlers.user_handlers import UpdateMyProfileHandler

# ═══════════════════════════════════════════════════════════════════════════
# Import all queries
# ═══════════════════════════════════════════════════════════════════════════
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

# ═══════════════════════════════════════════════════════════════════════════
# Import all query handlers
# ═══════════════════════════════════════════════════════════════════════════
from src.application.queries.handlers.age_group_handlers import (
    GetAgeGroupByIdHandler,
    GetAgeGroupsByClubIdHandler,
    GetAgeGroupStatisticsHandler,
    GetCoachesByAgeGroupIdHandler,
    GetPlayersByAgeGroupIdHandler,
)
from src.application.queries.handlers.club_handlers import (
    GetAllClubsHandler,
    GetClubByIdHandler,
    GetClubPlayersHandler,
    GetClubStatisticsHandler,
    GetClubTeamsHandler,
    GetKitsByClubIdHandler,
    GetMatchesByClubIdHandler,
)
from src.application.queries.handlers.coach_handlers import (
    GetCoachByIdHandler,
    GetCoachesByClubIdHandler,
)
from src.application.queries.handlers.development_handlers import (
    GetAgeGroupDevelopmentPlansHandler,
    GetDevelopmentPlanByIdHandler,
    GetDevelopmentPlansByClubIdHandler,
    GetDevelopmentPlansByTeamIdHandler,
    GetReportByIdHandler,
)
from src.application.queries.handlers.drill_handlers import (
    GetDrillByIdHandler,
    GetDrillsByScopeHandler,
    GetDrillTemplateByIdHandler,
    GetDrillTemplatesByScopeHandler,
)
from src.application.queries.handlers.match_handlers import GetMatchByIdHandler
from src.application.queries.handlers.player_handlers import (
    GetPlayerAbilitiesHandler,
    GetPlayerAttributesHandler,
    GetPlayerByIdHandler,
    GetPlayerRecentPerformancesHandler,
    GetPlayerReportsHandler,
    GetPlayerUpcomingMatchesHandler,
)
from src.application.queries.handlers.team_handlers import (
    GetCoachesByTeamIdHandler,
    GetKitsByTeamIdHandler,
    GetMatchesByTeamIdHandler,
    GetPlayersByTeamIdHandler,
    GetTeamByIdHandler,
    GetTeamOverviewHandler,
    GetTeamsByAgeGroupIdHandler,
    GetTeamSquadHandler,
)
from src.application.queries.handlers.user_handlers import (
    GetCurrentUserHandler,
    GetMyClubsHandler,
    GetMyTeamsAndClubsHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import DTOs (for commands with result_dto_class)
# ═══════════════════════════════════════════════════════════════════════════
from src.application.dtos.age_group_dtos import AgeGroupResult
from src.application.dtos.club_dtos import ClubDetailResult
from src.application.dtos.coach_dtos import CoachResult
from src.application.dtos.development_dtos import DevelopmentPlanResult, ReportResult
from src.application.dtos.drill_dtos import DrillResult, DrillTemplateResult
from src.application.dtos.kit_dtos import KitResult
from src.application.dtos.match_dtos import MatchResult
from src.application.dtos.player_dtos import EvaluationResult, PlayerResult
from src.application.dtos.team_dtos import (
    TeamCoachAssignmentResult,
    TeamMembershipResult,
    TeamResult,
)
from src.application.dtos.user_dtos import UserResult


# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY - Single Source of Truth (31 commands)
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    # ═══════════════════════════════════════════════════════════════════════
    # Club Commands (1 command)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=UpdateClub,
        handler_class=UpdateClubHandler,
        category=CQRSCategory.CLUB,
        has_result_dto=True,
        result_dto_class=ClubDetailResult,
        validation_rules=UPDATE_CLUB_RULES,
        description="Update club profile, colours, location and principles",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Age Group Commands (2 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateAgeGroup,
        handler_class=CreateAgeGroupHandler,
        category=CQRSCategory.AGE_GROUP,
        has_result_dto=True,
        result_dto_class=AgeGroupResult,
        validation_rules=CREATE_AGE_GROUP_RULES,
        description="Create an age group within a club",
    ),
    CommandMetadata(
        command_class=UpdateAgeGroup,
        handler_class=UpdateAgeGroupHandler,
        category=CQRSCategory.AGE_GROUP,
        has_result_dto=True,
        result_dto_class=AgeGroupResult,
        validation_rules=UPDATE_AGE_GROUP_RULES,
        description="Update an age group (archiving included)",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Team Commands (12 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateTeam,
        handler_class=CreateTeamHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=TeamResult,
        validation_rules=CREATE_TEAM_RULES,
        description="Create a team under an age group",
    ),
    CommandMetadata(
        command_class=UpdateTeam,
        handler_class=UpdateTeamHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=TeamResult,
        validation_rules=UPDATE_TEAM_RULES,
        description="Update team name, level, season and colours",
    ),
    CommandMetadata(
        command_class=ArchiveTeam,
        handler_class=ArchiveTeamHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=TeamResult,
        description="Archive or unarchive a team",
    ),
    CommandMetadata(
        command_class=AddPlayerToTeam,
        handler_class=AddPlayerToTeamHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=TeamMembershipResult,
        validation_rules=ADD_PLAYER_TO_TEAM_RULES,
        description="Add a player to a team's squad with a unique squad number",
    ),
    CommandMetadata(
        command_class=UpdateTeamPlayerSquadNumber,
        handler_class=UpdateTeamPlayerSquadNumberHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=TeamMembershipResult,
        validation_rules=UPDATE_SQUAD_NUMBER_RULES,
        description="Change a squad member's number",
    ),
    CommandMetadata(
        command_class=RemovePlayerFromTeam,
        handler_class=RemovePlayerFromTeamHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=False,  # Returns None
        description="Remove a player from a team's squad",
    ),
    CommandMetadata(
        command_class=AssignCoachToTeam,
        handler_class=AssignCoachToTeamHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=TeamCoachAssignmentResult,
        validation_rules=ASSIGN_COACH_RULES,
        description="Assign a coach to a team with a role",
    ),
    CommandMetadata(
        command_class=RemoveCoachFromTeam,
        handler_class=RemoveCoachFromTeamHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=False,  # Returns None
        description="Remove a coach from a team's staff",
    ),
    CommandMetadata(
        command_class=UpdateTeamCoachRole,
        handler_class=UpdateTeamCoachRoleHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=TeamCoachAssignmentResult,
        validation_rules=UPDATE_COACH_ROLE_RULES,
        description="Change a coach's role within a team",
    ),
    CommandMetadata(
        command_class=CreateTeamKit,
        handler_class=CreateTeamKitHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=KitResult,
        validation_rules=KIT_RULES,
        description="Create a kit for a team",
    ),
    CommandMetadata(
        command_class=UpdateTeamKit,
        handler_class=UpdateTeamKitHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=True,
        result_dto_class=KitResult,
        validation_rules=KIT_RULES,
        description="Update a team kit",
    ),
    CommandMetadata(
        command_class=DeleteTeamKit,
        handler_class=DeleteTeamKitHandler,
        category=CQRSCategory.TEAM,
        has_result_dto=False,  # Returns None
        description="Delete a team kit",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Player Commands (4 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=UpdatePlayer,
        handler_class=UpdatePlayerHandler,
        category=CQRSCategory.PLAYER,
        has_result_dto=True,
        result_dto_class=PlayerResult,
        validation_rules=UPDATE_PLAYER_RULES,
        requires_transaction=True,
        description="Update player profile, emergency contacts and team links",
    ),
    CommandMetadata(
        command_class=CreatePlayerAbilityEvaluation,
        handler_class=CreatePlayerAbilityEvaluationHandler,
        category=CQRSCategory.PLAYER,
        has_result_dto=True,
        result_dto_class=EvaluationResult,
        validation_rules=EVALUATION_RULES,
        requires_transaction=True,
        description="Record an ability evaluation and refresh current ratings",
    ),
    CommandMetadata(
        command_class=UpdatePlayerAbilityEvaluation,
        handler_class=UpdatePlayerAbilityEvaluationHandler,
        category=CQRSCategory.PLAYER,
        has_result_dto=True,
        result_dto_class=EvaluationResult,
        validation_rules=EVALUATION_RULES,
        requires_transaction=True,
        description="Replace an evaluation owned by the calling coach",
    ),
    CommandMetadata(
        command_class=DeletePlayerAbilityEvaluation,
        handler_class=DeletePlayerAbilityEvaluationHandler,
        category=CQRSCategory.PLAYER,
        has_result_dto=False,  # Returns None
        requires_transaction=True,
        description="Delete an evaluation owned by the calling coach",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Coach Commands (1 command)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=UpdateCoach,
        handler_class=UpdateCoachHandler,
        category=CQRSCategory.COACH,
        has_result_dto=True,
        result_dto_class=CoachResult,
        validation_rules=UPDATE_COACH_RULES,
        requires_transaction=True,
        description="Update coach profile and team assignments",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Match Commands (2 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateMatch,
        handler_class=CreateMatchHandler,
        category=CQRSCategory.MATCH,
        has_result_dto=True,
        result_dto_class=MatchResult,
        validation_rules=CREATE_MATCH_RULES,
        requires_transaction=True,
        description="Create a fixture (optionally with result and ratings)",
    ),
    CommandMetadata(
        command_class=UpdateMatch,
        handler_class=UpdateMatchHandler,
        category=CQRSCategory.MATCH,
        has_result_dto=True,
        result_dto_class=MatchResult,
        validation_rules=UPDATE_MATCH_RULES,
        requires_transaction=True,
        description="Replace a match's details, score and ratings",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Drill Commands (4 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateDrill,
        handler_class=CreateDrillHandler,
        category=CQRSCategory.DRILL,
        has_result_dto=True,
        result_dto_class=DrillResult,
        validation_rules=CREATE_DRILL_RULES,
        requires_transaction=True,
        description="Create a drill linked to a club, age group or team",
    ),
    CommandMetadata(
        command_class=UpdateDrill,
        handler_class=UpdateDrillHandler,
        category=CQRSCategory.DRILL,
        has_result_dto=True,
        result_dto_class=DrillResult,
        validation_rules=UPDATE_DRILL_RULES,
        requires_transaction=True,
        description="Update a drill's content",
    ),
    CommandMetadata(
        command_class=CreateDrillTemplate,
        handler_class=CreateDrillTemplateHandler,
        category=CQRSCategory.DRILL,
        has_result_dto=True,
        result_dto_class=DrillTemplateResult,
        validation_rules=CREATE_TEMPLATE_RULES,
        requires_transaction=True,
        description="Create a session template from an ordered list of drills",
    ),
    CommandMetadata(
        command_class=UpdateDrillTemplate,
        handler_class=UpdateDrillTemplateHandler,
        category=CQRSCategory.DRILL,
        has_result_dto=True,
        result_dto_class=DrillTemplateResult,
        validation_rules=UPDATE_TEMPLATE_RULES,
        requires_transaction=True,
        description="Update a session template and re-derive its summary",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Development Commands (4 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateDevelopmentPlan,
        handler_class=CreateDevelopmentPlanHandler,
        category=CQRSCategory.DEVELOPMENT,
        has_result_dto=True,
        result_dto_class=DevelopmentPlanResult,
        validation_rules=CREATE_PLAN_RULES,
        requires_transaction=True,
        description="Create a development plan with goals for a player",
    ),
    CommandMetadata(
        command_class=UpdateDevelopmentPlan,
        handler_class=UpdateDevelopmentPlanHandler,
        category=CQRSCategory.DEVELOPMENT,
        has_result_dto=True,
        result_dto_class=DevelopmentPlanResult,
        validation_rules=UPDATE_PLAN_RULES,
        requires_transaction=True,
        description="Replace a development plan's details and goals",
    ),
    CommandMetadata(
        command_class=CreateReport,
        handler_class=CreateReportHandler,
        category=CQRSCategory.DEVELOPMENT,
        has_result_dto=True,
        result_dto_class=ReportResult,
        validation_rules=CREATE_REPORT_RULES,
        requires_transaction=True,
        description="Create a report card for a player",
    ),
    CommandMetadata(
        command_class=UpdateReport,
        handler_class=UpdateReportHandler,
        category=CQRSCategory.DEVELOPMENT,
        has_result_dto=True,
        result_dto_class=ReportResult,
        validation_rules=UPDATE_REPORT_RULES,
        requires_transaction=True,
        description="Replace a report card's content",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # User Commands (1 command)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=UpdateMyProfile,
        handler_class=UpdateMyProfileHandler,
        category=CQRSCategory.USER,
        has_result_dto=True,
        result_dto_class=UserResult,
        validation_rules=UPDATE_PROFILE_RULES,
        description="Update the authenticated user's profile",
    ),
]


# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY - Single Source of Truth (41 queries)
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    # ═══════════════════════════════════════════════════════════════════════
    # Club Queries (7 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetAllClubs,
        handler_class=GetAllClubsHandler,
        category=CQRSCategory.CLUB,
        description="List every club",
    ),
    QueryMetadata(
        query_class=GetClubById,
        handler_class=GetClubByIdHandler,
        category=CQRSCategory.CLUB,
        description="Get a club with its profile details",
    ),
    QueryMetadata(
        query_class=GetClubStatistics,
        handler_class=GetClubStatisticsHandler,
        category=CQRSCategory.CLUB,
        computes_aggregates=True,
        description="Club counts, match record, upcoming fixtures and results",
    ),
    QueryMetadata(
        query_class=GetKitsByClubId,
        handler_class=GetKitsByClubIdHandler,
        category=CQRSCategory.CLUB,
        description="List club-level kits",
    ),
    QueryMetadata(
        query_class=GetClubPlayers,
        handler_class=GetClubPlayersHandler,
        category=CQRSCategory.CLUB,
        description="Page through a club's players with filters and search",
    ),
    QueryMetadata(
        query_class=GetClubTeams,
        handler_class=GetClubTeamsHandler,
        category=CQRSCategory.CLUB,
        computes_aggregates=True,  # Player count per team
        description="List a club's teams with coaches and player counts",
    ),
    QueryMetadata(
        query_class=GetMatchesByClubId,
        handler_class=GetMatchesByClubIdHandler,
        category=CQRSCategory.CLUB,
        description="List matches of a club's active teams",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Age Group Queries (5 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetAgeGroupById,
        handler_class=GetAgeGroupByIdHandler,
        category=CQRSCategory.AGE_GROUP,
        description="Get a single age group",
    ),
    QueryMetadata(
        query_class=GetAgeGroupsByClubId,
        handler_class=GetAgeGroupsByClubIdHandler,
        category=CQRSCategory.AGE_GROUP,
        computes_aggregates=True,  # Team counts per age group
        description="List a club's age groups",
    ),
    QueryMetadata(
        query_class=GetAgeGroupStatistics,
        handler_class=GetAgeGroupStatisticsHandler,
        category=CQRSCategory.AGE_GROUP,
        computes_aggregates=True,
        description="Age group counts, match record and recent results",
    ),
    QueryMetadata(
        query_class=GetPlayersByAgeGroupId,
        handler_class=GetPlayersByAgeGroupIdHandler,
        category=CQRSCategory.AGE_GROUP,
        description="List an age group's players",
    ),
    QueryMetadata(
        query_class=GetCoachesByAgeGroupId,
        handler_class=GetCoachesByAgeGroupIdHandler,
        category=CQRSCategory.AGE_GROUP,
        description="List coaches of an age group's teams",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Team Queries (8 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetTeamOverview,
        handler_class=GetTeamOverviewHandler,
        category=CQRSCategory.TEAM,
        computes_aggregates=True,
        description="Team record, fixtures, results and top performers",
    ),
    QueryMetadata(
        query_class=GetTeamsByAgeGroupId,
        handler_class=GetTeamsByAgeGroupIdHandler,
        category=CQRSCategory.TEAM,
        computes_aggregates=True,  # Per-team squad/staff/match stats
        description="List an age group's teams with their stats",
    ),
    QueryMetadata(
        query_class=GetPlayersByTeamId,
        handler_class=GetPlayersByTeamIdHandler,
        category=CQRSCategory.TEAM,
        description="List a team's squad",
    ),
    QueryMetadata(
        query_class=GetCoachesByTeamId,
        handler_class=GetCoachesByTeamIdHandler,
        category=CQRSCategory.TEAM,
        description="List a team's coaching staff",
    ),
    QueryMetadata(
        query_class=GetMatchesByTeamId,
        handler_class=GetMatchesByTeamIdHandler,
        category=CQRSCategory.TEAM,
        description="List a team's matches",
    ),
    QueryMetadata(
        query_class=GetKitsByTeamId,
        handler_class=GetKitsByTeamIdHandler,
        category=CQRSCategory.TEAM,
        description="List a team's kits",
    ),
    QueryMetadata(
        query_class=GetTeamById,
        handler_class=GetTeamByIdHandler,
        category=CQRSCategory.TEAM,
        computes_aggregates=True,
        description="Get a team with its record and coach IDs",
    ),
    QueryMetadata(
        query_class=GetTeamSquad,
        handler_class=GetTeamSquadHandler,
        category=CQRSCategory.TEAM,
        description="Get a team's squad sheet",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Player Queries (6 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetPlayerById,
        handler_class=GetPlayerByIdHandler,
        category=CQRSCategory.PLAYER,
        description="Get a player's full profile",
    ),
    QueryMetadata(
        query_class=GetPlayerAbilities,
        handler_class=GetPlayerAbilitiesHandler,
        category=CQRSCategory.PLAYER,
        description="Get a player's ratings and evaluation history",
    ),
    QueryMetadata(
        query_class=GetPlayerReports,
        handler_class=GetPlayerReportsHandler,
        category=CQRSCategory.PLAYER,
        description="List a player's report cards",
    ),
    QueryMetadata(
        query_class=GetPlayerRecentPerformances,
        handler_class=GetPlayerRecentPerformancesHandler,
        category=CQRSCategory.PLAYER,
        description="List completed matches a player was rated in",
    ),
    QueryMetadata(
        query_class=GetPlayerUpcomingMatches,
        handler_class=GetPlayerUpcomingMatchesHandler,
        category=CQRSCategory.PLAYER,
        description="List scheduled matches of a player's teams",
    ),
    QueryMetadata(
        query_class=GetPlayerAttributes,
        handler_class=GetPlayerAttributesHandler,
        category=CQRSCategory.PLAYER,
        description="Get a player's recorded attribute ratings",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Coach Queries (2 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetCoachById,
        handler_class=GetCoachByIdHandler,
        category=CQRSCategory.COACH,
        description="Get a coach with assigned teams",
    ),
    QueryMetadata(
        query_class=GetCoachesByClubId,
        handler_class=GetCoachesByClubIdHandler,
        category=CQRSCategory.COACH,
        description="List a club's coaches",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Match Queries (1 query)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetMatchById,
        handler_class=GetMatchByIdHandler,
        category=CQRSCategory.MATCH,
        description="Get a match with score and ratings",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Drill Queries (4 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetDrillById,
        handler_class=GetDrillByIdHandler,
        category=CQRSCategory.DRILL,
        description="Get a single drill",
    ),
    QueryMetadata(
        query_class=GetDrillsByScope,
        handler_class=GetDrillsByScopeHandler,
        category=CQRSCategory.DRILL,
        description="List drills visible at a club, age group or team",
    ),
    QueryMetadata(
        query_class=GetDrillTemplateById,
        handler_class=GetDrillTemplateByIdHandler,
        category=CQRSCategory.DRILL,
        description="Get a single session template",
    ),
    QueryMetadata(
        query_class=GetDrillTemplatesByScope,
        handler_class=GetDrillTemplatesByScopeHandler,
        category=CQRSCategory.DRILL,
        description="List session templates visible at a scope",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Development Queries (5 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetDevelopmentPlanById,
        handler_class=GetDevelopmentPlanByIdHandler,
        category=CQRSCategory.DEVELOPMENT,
        description="Get a development plan with goals",
    ),
    QueryMetadata(
        query_class=GetReportById,
        handler_class=GetReportByIdHandler,
        category=CQRSCategory.DEVELOPMENT,
        description="Get a report card",
    ),
    QueryMetadata(
        query_class=GetDevelopmentPlansByClubId,
        handler_class=GetDevelopmentPlansByClubIdHandler,
        category=CQRSCategory.DEVELOPMENT,
        description="List development plans of a club's players",
    ),
    QueryMetadata(
        query_class=GetAgeGroupDevelopmentPlans,
        handler_class=GetAgeGroupDevelopmentPlansHandler,
        category=CQRSCategory.DEVELOPMENT,
        description="List development plans of an age group's players",
    ),
    QueryMetadata(
        query_class=GetDevelopmentPlansByTeamId,
        handler_class=GetDevelopmentPlansByTeamIdHandler,
        category=CQRSCategory.DEVELOPMENT,
        description="List development plans of a team's players",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # User Queries (3 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetCurrentUser,
        handler_class=GetCurrentUserHandler,
        category=CQRSCategory.USER,
        description="Get the authenticated user's profile",
    ),
    QueryMetadata(
        query_class=GetMyClubs,
        handler_class=GetMyClubsHandler,
        category=CQRSCategory.USER,
        computes_aggregates=True,
        description="List clubs the caller coaches in",
    ),
    QueryMetadata(
        query_class=GetMyTeamsAndClubs,
        handler_class=GetMyTeamsAndClubsHandler,
        category=CQRSCategory.USER,
        description="List teams the caller coaches, with their clubs",
    ),
]
