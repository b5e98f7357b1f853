"""Domain enums for business logic.

Integer-coded enums mirror how values are stored; each exposes
``from_code`` (total, with a safe default), ``from_label`` (None when the
label is unknown) and ``label`` (the lower-case wire form).

Available Enums:
    - Level: youth / amateur / reserve / senior
    - KitType: home / away / third / goalkeeper / training
    - CoachRole: headcoach / assistantcoach / ...
    - MatchStatus: scheduled / inprogress / completed / postponed / cancelled
    - DrillCategory: technical / tactical / physical / mental / mixed
    - PlanStatus: active / completed / archived
    - ScopeType: club / agegroup / team
    - SQUAD_SIZES: allowed squad sizes
"""

from src.domain.enums.coach_role import CoachRole
from src.domain.enums.drill_category import DrillCategory
from src.domain.enums.kit_type import KitType, kit_type_label
from src.domain.enums.level import Level
from src.domain.enums.match_status import MatchStatus
from src.domain.enums.plan_status import PlanStatus
from src.domain.enums.scope_type import ScopeType

SQUAD_SIZES: tuple[int, ...] = (4, 5, 7, 9, 11)

__all__ = [
    "CoachRole",
    "DrillCategory",
    "KitType",
    "Level",
    "MatchStatus",
    "PlanStatus",
    "SQUAD_SIZES",
    "ScopeType",
    "kit_type_label",
]
