"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetClubById, GetPlayersByTeamId).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

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

__all__ = [
    # Clubs
    "GetAllClubs",
    "GetClubById",
    "GetClubStatistics",
    "GetClubPlayers",
    "GetClubTeams",
    "GetMatchesByClubId",
    "GetKitsByClubId",
    "GetCoachesByClubId",
    # Age groups
    "GetAgeGroupById",
    "GetAgeGroupsByClubId",
    "GetAgeGroupStatistics",
    "GetTeamsByAgeGroupId",
    "GetPlayersByAgeGroupId",
    "GetCoachesByAgeGroupId",
    # Teams
    "GetTeamById",
    "GetTeamOverview",
    "GetTeamSquad",
    "GetPlayersByTeamId",
    "GetCoachesByTeamId",
    "GetMatchesByTeamId",
    "GetKitsByTeamId",
    # People
    "GetPlayerById",
    "GetPlayerAbilities",
    "GetPlayerAttributes",
    "GetPlayerRecentPerformances",
    "GetPlayerUpcomingMatches",
    "GetPlayerReports",
    "GetCoachById",
    "GetCurrentUser",
    "GetMyClubs",
    "GetMyTeamsAndClubs",
    # Matches and training
    "GetMatchById",
    "GetDrillById",
    "GetDrillsByScope",
    "GetDrillTemplateById",
    "GetDrillTemplatesByScope",
    # Development
    "GetDevelopmentPlanById",
    "GetDevelopmentPlansByClubId",
    "GetAgeGroupDevelopmentPlans",
    "GetDevelopmentPlansByTeamId",
    "GetReportById",
]
