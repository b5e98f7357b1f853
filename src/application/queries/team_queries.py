"""Team queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetTeamOverview:
    """Team details, record, fixtures and performer rankings."""

    team_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetTeamsByAgeGroupId:
    age_group_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetPlayersByTeamId:
    team_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetCoachesByTeamId:
    team_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetMatchesByTeamId:
    team_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetKitsByTeamId:
    team_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetTeamById:
    """Team detail with coach IDs and match statistics."""

    team_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetTeamSquad:
    team_id: UUID
