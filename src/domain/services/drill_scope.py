"""Scope resolution for drills and drill templates.

A request names a club and optionally an age group and a team. The
requested scope is the most specific one given. Resources granted exactly
at that scope are "own" results; resources granted at a broader scope on
the same branch are "inherited".
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID

from src.domain.entities.drill import ScopeLink
from src.domain.enums.scope_type import ScopeType

T = TypeVar("T")


@dataclass(frozen=True, kw_only=True)
class RequestedScope:
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


@dataclass(kw_only=True)
class ScopedResults(Generic[T]):
    own: list[T] = field(default_factory=list)
    inherited: list[T] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.own) + len(self.inherited)


def _match(link: ScopeLink, requested: RequestedScope) -> str | None:
    """Return "own", "inherited" or None for one grant."""
    if link.club_id != requested.club_id:
        return None

    link_type = link.scope_type
    if link_type == requested.scope_type:
        match link_type:
            case ScopeType.TEAM:
                same = link.team_id == requested.team_id
            case ScopeType.AGE_GROUP:
                same = link.age_group_id == requested.age_group_id
            case _:
                same = True
        return "own" if same else None

    if link_type.breadth > requested.scope_type.breadth:
        return None
    if link_type == ScopeType.CLUB:
        return "inherited"
    # Age-group grant seen from a team of that age group.
    return "inherited" if link.age_group_id == requested.age_group_id else None


def partition_by_scope(
    items: Iterable[T],
    requested: RequestedScope,
    links_of: Callable[[T], Sequence[ScopeLink]],
) -> ScopedResults[T]:
    """Partition resources into own and inherited for ``requested``.

    A resource with several grants is "own" when any grant is exact, else
    "inherited" when any grant is broader. Resources outside the branch are
    dropped. Input order is preserved.
    """
    results: ScopedResults[T] = ScopedResults()
    for item in items:
        verdicts = {_match(link, requested) for link in links_of(item)}
        if "own" in verdicts:
            results.own.append(item)
        elif "inherited" in verdicts:
            results.inherited.append(item)
    return results
