"""TeamMembershipRepository protocol for team squads.

A membership is a row of ``player_teams``. Every change to a player's
memberships also brings their age groups (``player_age_groups``) in line
with the teams they remain on, in the same transaction.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.team import TeamMember, TeamMembership


class TeamMembershipRepository(Protocol):
    """Team membership repository protocol (port).

    Methods:
        find: Membership of a player on a team
        find_by_squad_number: Membership holding a squad number on a team
        list_members: Non-archived players of a team, in squad order
        count_players: Distinct non-archived players across teams
        add: Add a player to a team
        update_squad_number: Change a member's squad number
        remove: Remove a player from a team
    """

    async def find(self, team_id: UUID, player_id: UUID) -> TeamMembership | None: ...

    async def find_by_squad_number(
        self, team_id: UUID, squad_number: int
    ) -> TeamMembership | None: ...

    async def list_members(self, team_id: UUID) -> list[TeamMember]:
        """List a team's non-archived players.

        Ordered by squad number (players without a number last), then last
        name, then first name.
        """
        ...

    async def count_players(self, team_ids: list[UUID]) -> int: ...

    async def add(self, membership: TeamMembership) -> None:
        """Insert the membership and link the player to the team's age group.

        Both rows are written in one transaction.
        """
        ...

    async def update_squad_number(
        self, team_id: UUID, player_id: UUID, squad_number: int | None
    ) -> None: ...

    async def remove(self, team_id: UUID, player_id: UUID) -> None:
        """Delete the membership and rebuild the player's age groups.

        The age groups are recomputed from the teams the player remains on.
        Both steps run in one transaction.
        """
        ...
