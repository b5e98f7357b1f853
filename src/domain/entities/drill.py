"""Drill domain entities and scope links.

Drills and drill templates are visible at a scope: a whole club, one age
group, or one team. Each visibility grant is a ``ScopeLink``; narrower
scopes inherit everything granted to broader ones.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums.drill_category import DrillCategory
from src.domain.enums.scope_type import ScopeType


@dataclass(frozen=True, kw_only=True)
class ScopeLink:
    """Visibility grant of a drill or template."""

    club_id: UUID
    age_group_id: UUID | None = None
    team_id: UUID | None = None

    @property
    def scope_type(self) -> ScopeType:
        if self.team_id is not None:
            return ScopeType.TEAM
        if self.age_group_id is not None:
            return ScopeType.AGE_GROUP
        return ScopeType.CLUB


@dataclass
class DrillLink:
    """External resource (video, diagram, article) attached to a drill."""

    id: UUID
    url: str
    link_type: str
    title: str | None = None


@dataclass
class Drill:
    """Training drill.

    Attributes:
        id: Unique drill identifier.
        club_id: Owning club.
        name: Drill name.
        category: Drill category.
        duration_minutes: Planned length, optional.
        description: Free text.
        attributes: Player attributes the drill develops.
        equipment: Equipment needed.
        instructions: Ordered coaching steps.
        variations: Ordered progressions.
        links: External resources.
        scope_links: Visibility grants.
        is_public: Shared outside the creating coach's teams.
        created_by: Coach who created the drill, optional.
    """

    id: UUID
    club_id: UUID
    name: str
    category: DrillCategory
    duration_minutes: int | None = None
    description: str | None = None
    attributes: list[str] = field(default_factory=list)
    equipment: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    variations: list[str] = field(default_factory=list)
    links: list[DrillLink] = field(default_factory=list)
    scope_links: list[ScopeLink] = field(default_factory=list)
    is_public: bool = True
    created_by: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def scope(self) -> ScopeLink:
        """Primary (first) visibility grant, club-wide when none is recorded."""
        if self.scope_links:
            return self.scope_links[0]
        return ScopeLink(club_id=self.club_id)


@dataclass
class DrillTemplate:
    """Ordered session plan built from drills.

    Duration, category and attributes are derived from the drills whenever
    the drill list changes.
    """

    id: UUID
    club_id: UUID
    name: str
    drill_ids: list[UUID] = field(default_factory=list)
    description: str | None = None
    total_duration_minutes: int = 0
    category: DrillCategory | None = None
    attributes: list[str] = field(default_factory=list)
    scope_links: list[ScopeLink] = field(default_factory=list)
    is_public: bool = True
    created_by: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def scope(self) -> ScopeLink:
        if self.scope_links:
            return self.scope_links[0]
        return ScopeLink(club_id=self.club_id)
