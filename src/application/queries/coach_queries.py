"""Coach queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetCoachById:
    coach_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetCoachesByClubId:
    club_id: UUID
    include_archived: bool = False
