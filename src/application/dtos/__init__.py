"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.
Enum codes are already converted to lower-case labels here.

Categories:
    - club_dtos, age_group_dtos, team_dtos, kit_dtos
    - player_dtos (players and ability evaluations), coach_dtos
    - match_dtos, drill_dtos, development_dtos, user_dtos

Note:
    DTOs are NOT the same as:
    - Domain entities (persisted shape)
    - API schemas (Pydantic models with camelCase aliases in src/schemas)
"""

from src.application.dtos.age_group_dtos import (
    AgeGroupResult,
    AgeGroupStatisticsResult,
)
from src.application.dtos.club_dtos import (
    ClubDetailResult,
    ClubStatisticsResult,
    ClubSummaryResult,
)
from src.application.dtos.coach_dtos import CoachResult, CoachTeamResult
from src.application.dtos.development_dtos import DevelopmentPlanResult, ReportResult
from src.application.dtos.drill_dtos import (
    DrillResult,
    DrillsByScopeResult,
    DrillTemplateResult,
    DrillTemplatesByScopeResult,
)
from src.application.dtos.kit_dtos import KitResult
from src.application.dtos.match_dtos import MatchResult, MatchSummaryResult
from src.application.dtos.player_dtos import (
    EvaluationResult,
    PlayerAbilitiesResult,
    PlayerResult,
)
from src.application.dtos.team_dtos import (
    TeamCoachAssignmentResult,
    TeamCoachResult,
    TeamMembershipResult,
    TeamOverviewResult,
    TeamPlayerResult,
    TeamResult,
)
from src.application.dtos.user_dtos import UserResult

__all__ = [
    "AgeGroupResult",
    "AgeGroupStatisticsResult",
    "ClubDetailResult",
    "ClubStatisticsResult",
    "ClubSummaryResult",
    "CoachResult",
    "CoachTeamResult",
    "DevelopmentPlanResult",
    "DrillResult",
    "DrillTemplateResult",
    "DrillTemplatesByScopeResult",
    "DrillsByScopeResult",
    "EvaluationResult",
    "KitResult",
    "MatchResult",
    "MatchSummaryResult",
    "PlayerAbilitiesResult",
    "PlayerResult",
    "ReportResult",
    "TeamCoachAssignmentResult",
    "TeamCoachResult",
    "TeamMembershipResult",
    "TeamOverviewResult",
    "TeamPlayerResult",
    "TeamResult",
    "UserResult",
]
