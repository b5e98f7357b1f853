"""Domain entities.

Pure dataclasses with no infrastructure dependencies. Repositories map
database rows to and from these types.
"""

from src.domain.entities.age_group import AgeGroup, AgeGroupSummary
from src.domain.entities.club import Club, ClubCounts
from src.domain.entities.coach import Coach, CoachTeam
from src.domain.entities.development_plan import DevelopmentGoal, DevelopmentPlan
from src.domain.entities.drill import Drill, DrillLink, DrillTemplate, ScopeLink
from src.domain.entities.evaluation import (
    PLAYER_ATTRIBUTE_NAMES,
    AttributeEvaluation,
    EvaluationAttribute,
)
from src.domain.entities.kit import DEFAULT_KIT_COLOR, Kit
from src.domain.entities.match import Match, PerformanceRating
from src.domain.entities.player import EmergencyContact, Player
from src.domain.entities.report import DevelopmentAction, Report, SimilarProfessional
from src.domain.entities.team import (
    Team,
    TeamCoachAssignment,
    TeamMember,
    TeamMembership,
    TeamStaffMember,
)
from src.domain.entities.user import User

__all__ = [
    "AgeGroup",
    "AgeGroupSummary",
    "AttributeEvaluation",
    "Club",
    "ClubCounts",
    "Coach",
    "CoachTeam",
    "DEFAULT_KIT_COLOR",
    "DevelopmentAction",
    "DevelopmentGoal",
    "DevelopmentPlan",
    "Drill",
    "DrillLink",
    "DrillTemplate",
    "EmergencyContact",
    "EvaluationAttribute",
    "Kit",
    "Match",
    "PLAYER_ATTRIBUTE_NAMES",
    "PerformanceRating",
    "Player",
    "Report",
    "ScopeLink",
    "SimilarProfessional",
    "Team",
    "TeamCoachAssignment",
    "TeamMember",
    "TeamMembership",
    "TeamStaffMember",
    "User",
]
