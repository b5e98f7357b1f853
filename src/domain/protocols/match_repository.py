"""MatchRepository protocol for match persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.match import Match


class MatchRepository(Protocol):
    """Match repository protocol (port).

    Methods:
        find_by_id: Retrieve match with performance ratings
        list_by_team: Matches of a team, most recent first
        list_by_teams: Matches of several teams (no ratings loaded)
        list_ratings: Every ``(player_id, rating)`` of a team's matches
        list_rated_for_player: Completed matches a player was rated in
        save: Create or update match (replaces ratings)
    """

    async def find_by_id(self, match_id: UUID) -> Match | None: ...

    async def list_by_team(self, team_id: UUID) -> list[Match]: ...

    async def list_by_teams(self, team_ids: list[UUID]) -> list[Match]: ...

    async def list_ratings(self, team_id: UUID) -> list[tuple[UUID, float]]: ...

    async def list_rated_for_player(
        self, player_id: UUID, limit: int
    ) -> list[tuple[Match, float]]:
        """Completed matches with the player's rating, most recent first.

        Args:
            player_id: Rated player.
            limit: Maximum number of matches.

        Returns:
            ``(match, rating)`` pairs; ratings of other players are not loaded.
        """
        ...

    async def save(self, match: Match) -> None:
        """Create or update a match.

        Performance ratings are replaced by ``match.performance_ratings`` in
        the same transaction.
        """
        ...
