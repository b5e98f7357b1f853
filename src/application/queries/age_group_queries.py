"""Age group queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetAgeGroupById:
    age_group_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetAgeGroupsByClubId:
    """List a club's age groups with their active team counts.

    Attributes:
        club_id: Owning club.
        include_archived: Include archived age groups when True.
    """

    club_id: UUID
    include_archived: bool = False


@dataclass(frozen=True, kw_only=True)
class GetAgeGroupStatistics:
    age_group_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetPlayersByAgeGroupId:
    """Players of an age group, ordered by first then last name."""

    age_group_id: UUID
    include_archived: bool = False


@dataclass(frozen=True, kw_only=True)
class GetCoachesByAgeGroupId:
    """Coaches assigned to the age group's active teams."""

    age_group_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetAgeGroupDevelopmentPlans:
    age_group_id: UUID
