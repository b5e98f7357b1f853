"""TeamCoachRepository protocol for coach assignments (``team_coaches``)."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.team import TeamCoachAssignment, TeamStaffMember
from src.domain.enums.coach_role import CoachRole


class TeamCoachRepository(Protocol):
    """Team coach repository protocol (port)."""

    async def find(
        self, team_id: UUID, coach_id: UUID
    ) -> TeamCoachAssignment | None: ...

    async def list_staff(self, team_id: UUID) -> list[TeamStaffMember]:
        """List a team's coaches ordered by role, then last name."""
        ...

    async def count_coaches(self, team_ids: list[UUID]) -> int:
        """Count distinct non-archived coaches assigned to any of the teams."""
        ...

    async def add(self, assignment: TeamCoachAssignment) -> None: ...

    async def update_role(self, team_id: UUID, coach_id: UUID, role: CoachRole) -> None: ...

    async def remove(self, team_id: UUID, coach_id: UUID) -> None: ...
