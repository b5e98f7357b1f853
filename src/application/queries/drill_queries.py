"""Drill and drill template queries (CQRS read operations).

Scoped listings name a club and optionally an age group and a team; the
most specific one given is the requested scope.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetDrillById:
    drill_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetDrillsByScope:
    """Drills visible at a scope, split into own and inherited.

    Attributes:
        club_id: Club whose drills to list.
        age_group_id: Narrow to an age group.
        team_id: Narrow to a team (its age group is looked up).
        category: Category label; "all" or an unknown label does not filter.
        search: Case-insensitive text matched against name, description and
            attributes.
    """

    club_id: UUID
    age_group_id: UUID | None = None
    team_id: UUID | None = None
    category: str | None = None
    search: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetDrillTemplateById:
    template_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetDrillTemplatesByScope:
    club_id: UUID
    age_group_id: UUID | None = None
    team_id: UUID | None = None
