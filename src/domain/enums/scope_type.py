"""Visibility scope of drills and drill templates.

A resource linked at club scope is visible (inherited) at every age group
and team of that club; one linked at age-group scope is inherited by the
group's teams.
"""

from enum import Enum


class ScopeType(str, Enum):
    CLUB = "club"
    AGE_GROUP = "agegroup"
    TEAM = "team"

    @property
    def breadth(self) -> int:
        """0 for the broadest scope (club), 2 for the narrowest (team)."""
        match self:
            case ScopeType.CLUB:
                return 0
            case ScopeType.AGE_GROUP:
                return 1
            case ScopeType.TEAM:
                return 2
