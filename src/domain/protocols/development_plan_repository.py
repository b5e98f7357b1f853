"""DevelopmentPlanRepository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.development_plan import DevelopmentPlan


class DevelopmentPlanRepository(Protocol):
    async def find_by_id(self, plan_id: UUID) -> DevelopmentPlan | None:
        """Find plan by ID, goals ordered by start date."""
        ...

    async def list_by_players(self, player_ids: list[UUID]) -> list[DevelopmentPlan]:
        """Plans of the given players with their goals, newest created first."""
        ...

    async def save(self, plan: DevelopmentPlan) -> None:
        """Create or update a plan, replacing its goals."""
        ...
