"""Domain services: pure calculations shared by several handlers."""

from src.domain.services.drill_scope import ScopedResults, partition_by_scope
from src.domain.services.match_statistics import (
    PerformerSummary,
    TeamRecord,
    compute_record,
    previous_results,
    rank_performers,
    upcoming_matches,
)
from src.domain.services.template_derivation import TemplateSummary, summarise_drills

__all__ = [
    "PerformerSummary",
    "ScopedResults",
    "TeamRecord",
    "TemplateSummary",
    "compute_record",
    "partition_by_scope",
    "previous_results",
    "rank_performers",
    "summarise_drills",
    "upcoming_matches",
]
