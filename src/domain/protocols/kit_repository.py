"""KitRepository protocol for kit persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.kit import Kit


class KitRepository(Protocol):
    """Kit repository protocol (port).

    Listings are ordered by kit type, then name.
    """

    async def find_by_id(self, kit_id: UUID) -> Kit | None: ...

    async def list_by_club(self, club_id: UUID) -> list[Kit]:
        """List club-level kits (kits with no team)."""
        ...

    async def list_by_team(self, team_id: UUID) -> list[Kit]: ...

    async def save(self, kit: Kit) -> None: ...

    async def delete(self, kit_id: UUID) -> None: ...
