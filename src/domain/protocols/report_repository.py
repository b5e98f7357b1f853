"""ReportRepository protocol for player report cards."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.report import Report


class ReportRepository(Protocol):
    async def find_by_id(self, report_id: UUID) -> Report | None: ...

    async def list_by_player(self, player_id: UUID) -> list[Report]:
        """List a player's report cards, newest first."""
        ...

    async def save(self, report: Report) -> None:
        """Create or update a report, replacing its child rows."""
        ...
