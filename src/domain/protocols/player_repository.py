"""PlayerRepository protocol for player persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.player import Player


class PlayerRepository(Protocol):
    """Player repository protocol (port).

    Methods:
        find_by_id: Retrieve player with contacts, teams and age groups
        list_by_club: Players of a club ordered by last then first name
        list_by_age_group: Players of an age group ordered by first then last name
        list_by_team: Players of a team ordered by last then first name
        save: Create or update player (replaces contacts and team memberships)
        get_attribute_ratings: Current ability ratings of a player
        update_ratings: Replace ability ratings and overall rating
    """

    async def find_by_id(self, player_id: UUID) -> Player | None: ...

    async def list_by_club(
        self, club_id: UUID, include_archived: bool = False
    ) -> list[Player]:
        """List a club's players with team and age group IDs (no contacts).

        Args:
            club_id: Owning club.
            include_archived: Include archived players.

        Returns:
            Players ordered by last name, then first name.
        """
        ...

    async def list_by_age_group(
        self, age_group_id: UUID, include_archived: bool = False
    ) -> list[Player]: ...

    async def list_by_team(
        self, team_id: UUID, include_archived: bool = False
    ) -> list[Player]: ...

    async def save(self, player: Player) -> None:
        """Create or update a player.

        Emergency contacts are replaced by ``player.emergency_contacts``.
        Team memberships are replaced by ``player.team_ids`` (squad numbers
        of kept teams survive) and age groups are rebuilt from those teams.
        All writes happen in one transaction.

        Args:
            player: Player entity to persist.
        """
        ...

    async def get_attribute_ratings(self, player_id: UUID) -> dict[str, int]:
        """Return ``{attribute_name: rating}`` for recorded attributes only."""
        ...

    async def update_ratings(
        self, player_id: UUID, ratings: dict[str, int], overall_rating: int | None
    ) -> None: ...
