"""AgeGroup domain entity.

An age group (U9, U12, Seniors, ...) sits between a club and its teams and
carries the seasons its teams play in.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums.level import Level


@dataclass
class AgeGroup:
    """Age group within a club.

    Attributes:
        id: Unique age group identifier.
        club_id: Owning club.
        name: Display name ("Under 12s").
        code: Short code ("U12").
        level: Playing level.
        season: Current season label ("2024/25").
        seasons: Every season this group has been active in.
        default_season: Season preselected in the UI.
        default_squad_size: Players per side (4, 5, 7, 9 or 11).
        description: Optional notes.
        is_archived: Soft-delete flag.
    """

    id: UUID
    club_id: UUID
    name: str
    code: str
    level: Level
    season: str
    default_squad_size: int
    seasons: list[str] = field(default_factory=list)
    default_season: str | None = None
    description: str | None = None
    is_archived: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class AgeGroupSummary:
    """Age group list row with its number of active teams."""

    age_group: AgeGroup
    team_count: int
