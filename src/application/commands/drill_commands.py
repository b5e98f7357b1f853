"""Drill and drill template commands (CQRS write operations).

A new drill or template is linked at the most specific scope its request
names: the team if given, else the age group, else the whole club.

Reference:
    - src/domain/services/drill_scope.py
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.core.validation import MaxLength, OneOf, Range, Required
from src.domain.enums import DrillCategory


@dataclass(frozen=True, kw_only=True)
class ScopeInput:
    """Visibility scope named by a create request."""

    club_id: UUID | None
    age_group_id: UUID | None = None
    team_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class DrillLinkInput:
    url: str
    link_type: str
    title: str | None = None


@dataclass(frozen=True, kw_only=True)
class CreateDrill:
    """Create a drill visible at the requested scope.

    Attributes:
        name: Drill name.
        category: Category label (technical, tactical, physical, mental, mixed).
        scope: Scope to link the drill at.
        duration_minutes: Planned length (1-300).
        description: Free text.
        attributes: Player attributes developed.
        equipment: Equipment list.
        instructions: Ordered coaching steps.
        variations: Ordered progressions.
        links: External resources.
        is_public: Shared outside the creating coach's teams.
        auth_id: Caller's identity provider user id, used for ``created_by``.
    """

    name: str
    category: str
    scope: ScopeInput | None
    duration_minutes: int | None = None
    description: str | None = None
    attributes: list[str] = field(default_factory=list)
    equipment: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    variations: list[str] = field(default_factory=list)
    links: list[DrillLinkInput] = field(default_factory=list)
    is_public: bool = True
    auth_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateDrill:
    """Replace a drill's content and links; its scope is unchanged."""

    drill_id: UUID
    name: str
    category: str
    duration_minutes: int | None = None
    description: str | None = None
    attributes: list[str] = field(default_factory=list)
    equipment: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    variations: list[str] = field(default_factory=list)
    links: list[DrillLinkInput] = field(default_factory=list)
    is_public: bool = True


@dataclass(frozen=True, kw_only=True)
class CreateDrillTemplate:
    """Create a session template from existing drills.

    Duration, category and attributes are derived from the drills.
    """

    name: str
    drill_ids: list[UUID]
    scope: ScopeInput | None
    description: str | None = None
    is_public: bool = True
    auth_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateDrillTemplate:
    template_id: UUID
    name: str
    drill_ids: list[UUID]
    description: str | None = None
    is_public: bool = True


_DRILL_RULES = (
    Required("name"),
    MaxLength("name", 200),
    MaxLength("description", 4000),
    Range("duration_minutes", 1, 300),
    Required("category"),
    OneOf("category", DrillCategory.labels()),
    Required("links[].url"),
    MaxLength("links[].url", 2000),
    Required("links[].link_type"),
    MaxLength("links[].link_type", 50),
    MaxLength("links[].title", 200),
)

_SCOPE_RULES = (Required("scope"), Required("scope.club_id"))

CREATE_DRILL_RULES = (*_DRILL_RULES, *_SCOPE_RULES)

UPDATE_DRILL_RULES = _DRILL_RULES

_TEMPLATE_RULES = (
    Required("name"),
    MaxLength("name", 200),
    MaxLength("description", 4000),
    Required("drill_ids"),
)

CREATE_TEMPLATE_RULES = (*_TEMPLATE_RULES, *_SCOPE_RULES)

UPDATE_TEMPLATE_RULES = _TEMPLATE_RULES
