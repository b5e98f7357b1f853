"""Drill and drill template DTOs (Data Transfer Objects).

A resource's scope is reported as the type of its primary grant plus the
ids of every age group and team it is linked to.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.entities.drill import Drill, DrillTemplate, ScopeLink


@dataclass
class ScopeResult:
    type: str
    club_id: UUID
    age_group_ids: list[UUID] = field(default_factory=list)
    team_ids: list[UUID] = field(default_factory=list)


@dataclass
class DrillLinkResult:
    id: UUID
    url: str
    title: str | None
    link_type: str


@dataclass
class DrillResult:
    """Drill detail.

    Attributes:
        id: Drill identifier.
        club_id: Owning club.
        name: Drill name.
        description: Free text.
        duration_minutes: Planned length.
        category: Category label.
        attributes: Player attributes developed.
        equipment: Equipment list.
        instructions: Coaching steps.
        variations: Progressions.
        links: External resources.
        scope: Scope type and linked ids.
        is_public: Shared outside the creating coach's teams.
        created_by: Creating coach.
    """

    id: UUID
    club_id: UUID
    name: str
    description: str | None
    duration_minutes: int | None
    category: str
    attributes: list[str]
    equipment: list[str]
    instructions: list[str]
    variations: list[str]
    links: list[DrillLinkResult]
    scope: ScopeResult
    is_public: bool
    created_by: UUID | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class DrillsByScopeResult:
    drills: list[DrillResult] = field(default_factory=list)
    inherited_drills: list[DrillResult] = field(default_factory=list)
    total_count: int = 0


@dataclass
class DrillTemplateResult:
    """Drill template detail with derived duration, category and attributes."""

    id: UUID
    club_id: UUID
    name: str
    description: str | None
    drill_ids: list[UUID]
    total_duration_minutes: int
    category: str | None
    attributes: list[str]
    scope: ScopeResult
    is_public: bool
    created_by: UUID | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class DrillTemplatesByScopeResult:
    templates: list[DrillTemplateResult] = field(default_factory=list)
    inherited_templates: list[DrillTemplateResult] = field(default_factory=list)
    total_count: int = 0


def to_scope_result(
    club_id: UUID, primary: ScopeLink, links: Sequence[ScopeLink]
) -> ScopeResult:
    age_group_ids: list[UUID] = []
    team_ids: list[UUID] = []
    for link in links:
        if link.age_group_id is not None and link.age_group_id not in age_group_ids:
            age_group_ids.append(link.age_group_id)
        if link.team_id is not None and link.team_id not in team_ids:
            team_ids.append(link.team_id)
    return ScopeResult(
        type=primary.scope_type.value,
        club_id=club_id,
        age_group_ids=age_group_ids,
        team_ids=team_ids,
    )


def to_drill_result(drill: Drill) -> DrillResult:
    return DrillResult(
        id=drill.id,
        club_id=drill.club_id,
        name=drill.name,
        description=drill.description,
        duration_minutes=drill.duration_minutes,
        category=drill.category.label,
        attributes=list(drill.attributes),
        equipment=list(drill.equipment),
        instructions=list(drill.instructions),
        variations=list(drill.variations),
        links=[
            DrillLinkResult(
                id=link.id, url=link.url, title=link.title, link_type=link.link_type
            )
            for link in drill.links
        ],
        scope=to_scope_result(drill.club_id, drill.scope, drill.scope_links),
        is_public=drill.is_public,
        created_by=drill.created_by,
        created_at=drill.created_at,
        updated_at=drill.updated_at,
    )


def to_template_result(template: DrillTemplate) -> DrillTemplateResult:
    return DrillTemplateResult(
        id=template.id,
        club_id=template.club_id,
        name=template.name,
        description=template.description,
        drill_ids=list(template.drill_ids),
        total_duration_minutes=template.total_duration_minutes,
        category=template.category.label if template.category is not None else None,
        attributes=list(template.attributes),
        scope=to_scope_result(template.club_id, template.scope, template.scope_links),
        is_public=template.is_public,
        created_by=template.created_by,
        created_at=template.created_at,
        updated_at=template.updated_at,
    )
