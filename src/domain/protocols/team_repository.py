"""TeamRepository protocol for team persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.team import Team


class TeamRepository(Protocol):
    """Team repository protocol (port).

    Methods:
        find_by_id: Retrieve team by ID
        find_by_ids: Retrieve several teams (missing IDs are skipped)
        list_by_club: Teams of a club
        list_by_age_group: Teams of an age group ordered by name
        save: Create or update team
    """

    async def find_by_id(self, team_id: UUID) -> Team | None: ...

    async def find_by_ids(self, team_ids: list[UUID]) -> list[Team]: ...

    async def list_by_club(
        self, club_id: UUID, include_archived: bool = False
    ) -> list[Team]: ...

    async def list_by_age_group(
        self, age_group_id: UUID, include_archived: bool = False
    ) -> list[Team]:
        """List teams of an age group ordered by name.

        Args:
            age_group_id: Parent age group.
            include_archived: Include archived teams.

        Returns:
            Teams ordered by name.
        """
        ...

    async def save(self, team: Team) -> None: ...
