"""Development plan and report card queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetDevelopmentPlanById:
    plan_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetReportById:
    report_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetDevelopmentPlansByClubId:
    club_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetDevelopmentPlansByTeamId:
    """Plans of a team's players, active plans first."""

    team_id: UUID
