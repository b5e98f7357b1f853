"""ClubRepository protocol for club persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.club import Club, ClubCounts


class ClubRepository(Protocol):
    """Club repository protocol (port).

    Methods:
        find_by_id: Retrieve club by ID
        list_all: Retrieve every club ordered by name
        save: Update club (full replace of its fields)
        get_counts: Active age group, team, player and coach counts
    """

    async def find_by_id(self, club_id: UUID) -> Club | None:
        """Find club by ID.

        Args:
            club_id: Club's unique identifier.

        Returns:
            Club if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[Club]: ...

    async def save(self, club: Club) -> None:
        """Create or update club.

        Args:
            club: Club entity to persist.
        """
        ...

    async def get_counts(self, club_id: UUID) -> ClubCounts:
        """Count the club's non-archived age groups, teams, players and coaches."""
        ...
