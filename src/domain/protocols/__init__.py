"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PlayerRepository, TeamMembershipRepository
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol

# Repository protocols
from src.domain.protocols.age_group_repository import AgeGroupRepository
from src.domain.protocols.club_repository import ClubRepository
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.development_plan_repository import (
    DevelopmentPlanRepository,
)
from src.domain.protocols.drill_repository import (
    DrillRepository,
    DrillTemplateRepository,
)
from src.domain.protocols.evaluation_repository import EvaluationRepository
from src.domain.protocols.kit_repository import KitRepository
from src.domain.protocols.match_repository import MatchRepository
from src.domain.protocols.player_repository import PlayerRepository
from src.domain.protocols.report_repository import ReportRepository
from src.domain.protocols.team_coach_repository import TeamCoachRepository
from src.domain.protocols.team_membership_repository import (
    TeamMembershipRepository,
)
from src.domain.protocols.team_repository import TeamRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    # Repository protocols
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
