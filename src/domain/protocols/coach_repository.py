"""CoachRepository protocol for coach persistence."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.coach import Coach


class CoachRepository(Protocol):
    """Coach repository protocol (port).

    Methods:
        find_by_id: Retrieve coach with team assignments
        find_by_user_id: Coach record of a user account
        find_first_active: Earliest created non-archived coach
        list_by_club: Coaches of a club ordered by last then first name
        list_by_teams: Active coaches assigned to any of several teams
        save: Create or update coach (replaces team assignments)
    """

    async def find_by_id(self, coach_id: UUID) -> Coach | None: ...

    async def find_by_user_id(self, user_id: UUID) -> Coach | None: ...

    async def find_first_active(self) -> Coach | None:
        """Return the earliest created non-archived coach, if any.

        Used to attribute evaluations made by callers with no coach record.
        """
        ...

    async def list_by_club(
        self, club_id: UUID, include_archived: bool = False
    ) -> list[Coach]: ...

    async def list_by_teams(self, team_ids: list[UUID]) -> list[Coach]:
        """Non-archived coaches assigned to any of ``team_ids``.

        Each coach appears once, with all of their assignments, ordered by
        first then last name.
        """
        ...

    async def save(self, coach: Coach) -> None:
        """Create or update a coach.

        ``coach.teams`` is authoritative: assignments to other teams are
        deleted, new ones inserted and roles of kept ones updated, in the
        same transaction as the coach row.
        """
        ...
