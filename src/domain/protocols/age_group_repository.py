"""AgeGroupRepository protocol for age group persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.age_group import AgeGroup, AgeGroupSummary


class AgeGroupRepository(Protocol):
    """Age group repository protocol (port).

    Methods:
        find_by_id: Retrieve age group by ID
        list_by_club: Age groups of a club with their active team counts
        save: Create or update age group
    """

    async def find_by_id(self, age_group_id: UUID) -> AgeGroup | None: ...

    async def list_by_club(
        self, club_id: UUID, include_archived: bool = False
    ) -> list[AgeGroupSummary]:
        """List a club's age groups ordered by name.

        Args:
            club_id: Owning club.
            include_archived: Include archived age groups.

        Returns:
            Summaries carrying the number of non-archived teams.
        """
        ...

    async def save(self, age_group: AgeGroup) -> None: ...
