"""Database models for persistence layer.

This package contains SQLAlchemy models that map to database tables. These
are infrastructure concerns and are not imported by the domain layer.

Models Organization:
    - club.py: clubs
    - age_group.py: age_groups
    - team.py: teams, team_coaches
    - player.py: players and their contacts, attributes, teams, age groups
    - coach.py: coaches
    - match.py: matches, match_performance_ratings
    - kit.py: kits
    - drill.py: drills, templates and their links
    - evaluation.py: attribute_evaluations, evaluation_attributes
    - development_plan.py: development_plans, development_goals
    - report.py: reports and their child rows
    - user.py: users

Note:
    Importing this package registers every table on ``BaseModel.metadata``
    (used by ``Database.create_all`` and Alembic).
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.models.age_group import AgeGroup
from src.infrastructure.persistence.models.club import Club
from src.infrastructure.persistence.models.coach import Coach
from src.infrastructure.persistence.models.development_plan import (
    DevelopmentGoal,
    DevelopmentPlan,
)
from src.infrastructure.persistence.models.drill import (
    Drill,
    DrillLink,
    DrillScopeLink,
    DrillTemplate,
    DrillTemplateScopeLink,
)
from src.infrastructure.persistence.models.evaluation import (
    AttributeEvaluation,
    EvaluationAttribute,
)
from src.infrastructure.persistence.models.kit import Kit
from src.infrastructure.persistence.models.match import (
    Match,
    MatchPerformanceRating,
)
from src.infrastructure.persistence.models.player import (
    Player,
    PlayerAgeGroup,
    PlayerAttribute,
    PlayerEmergencyContact,
    PlayerTeam,
)
from src.infrastructure.persistence.models.report import (
    Report,
    ReportDevelopmentAction,
    ReportSimilarProfessional,
)
from src.infrastructure.persistence.models.team import Team, TeamCoach
from src.infrastructure.persistence.models.user import User

__all__ = [
    "AgeGroup",
    "AttributeEvaluation",
    "BaseModel",
    "Club",
    "Coach",
    "DevelopmentGoal",
    "DevelopmentPlan",
    "Drill",
    "DrillLink",
    "DrillScopeLink",
    "DrillTemplate",
    "DrillTemplateScopeLink",
    "EvaluationAttribute",
    "Kit",
    "Match",
    "MatchPerformanceRating",
    "Player",
    "PlayerAgeGroup",
    "PlayerAttribute",
    "PlayerEmergencyContact",
    "PlayerTeam",
    "Report",
    "ReportDevelopmentAction",
    "ReportSimilarProfessional",
    "Team",
    "TeamCoach",
    "User",
]
