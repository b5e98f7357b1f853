"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.age_group_repository import (
    AgeGroupRepository,
)
from src.infrastructure.persistence.repositories.club_repository import (
    ClubRepository,
)
from src.infrastructure.persistence.repositories.coach_repository import (
    CoachRepository,
)
from src.infrastructure.persistence.repositories.development_plan_repository import (
    DevelopmentPlanRepository,
)
from src.infrastructure.persistence.repositories.drill_repository import (
    DrillRepository,
    DrillTemplateRepository,
)
from src.infrastructure.persistence.repositories.evaluation_repository import (
    EvaluationRepository,
)
from src.infrastructure.persistence.repositories.kit_repository import KitRepository
from src.infrastructure.persistence.repositories.match_repository import (
    MatchRepository,
)
from src.infrastructure.persistence.repositories.player_repository import (
    PlayerRepository,
)
from src.infrastructure.persistence.repositories.report_repository import (
    ReportRepository,
)
from src.infrastructure.persistence.repositories.team_coach_repository import (
    TeamCoachRepository,
)
from src.infrastructure.persistence.repositories.team_membership_repository import (
    TeamMembershipRepository,
)
from src.infrastructure.persistence.repositories.team_repository import (
    TeamRepository,
)
from src.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = [
    "AgeGroupRepository",
    "ClubRepository",
    "CoachRepository",
    "DevelopmentPlanRepository",
    "DrillRepository",
    "DrillTemplateRepository",
    "EvaluationRepository",
    "KitRepository",
    "MatchRepository",
    "PlayerRepository",
    "ReportRepository",
    "TeamCoachRepository",
    "TeamMembershipRepository",
    "TeamRepository",
    "UserRepository",
]
