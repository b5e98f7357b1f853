"""Derived fields of a drill template."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from src.domain.entities.drill import Drill
from src.domain.enums.drill_category import DrillCategory


@dataclass(frozen=True, kw_only=True)
class TemplateSummary:
    total_duration_minutes: int
    category: DrillCategory | None
    attributes: list[str] = field(default_factory=list)


def summarise_drills(drills: Sequence[Drill]) -> TemplateSummary:
    """Sum durations, pick the most frequent category, union attributes.

    Category ties go to the category seen first. Attributes keep their
    first-seen order.
    """
    total = sum(d.duration_minutes or 0 for d in drills)

    category: DrillCategory | None = None
    if drills:
        counts = Counter(d.category for d in drills)
        category = max(counts, key=lambda c: counts[c])

    attributes: list[str] = []
    for drill in drills:
        for attribute in drill.attributes:
            if attribute not in attributes:
                attributes.append(attribute)

    return TemplateSummary(
        total_duration_minutes=total, category=category, attributes=attributes
    )
