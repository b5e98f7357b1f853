"""DrillRepository and DrillTemplateRepository protocols."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.drill import Drill, DrillTemplate


class DrillRepository(Protocol):
    """Drill repository protocol (port).

    Drills are loaded with their links and scope links.
    """

    async def find_by_id(self, drill_id: UUID) -> Drill | None: ...

    async def find_by_ids(self, drill_ids: list[UUID]) -> list[Drill]:
        """Retrieve drills by ID in no particular order; unknown IDs are skipped."""
        ...

    async def list_by_club(self, club_id: UUID) -> list[Drill]:
        """List every drill visible anywhere in the club, ordered by name."""
        ...

    async def save(self, drill: Drill) -> None:
        """Create or update a drill, replacing its links and scope links."""
        ...


class DrillTemplateRepository(Protocol):
    """Drill template repository protocol (port)."""

    async def find_by_id(self, template_id: UUID) -> DrillTemplate | None: ...

    async def list_by_club(self, club_id: UUID) -> list[DrillTemplate]: ...

    async def save(self, template: DrillTemplate) -> None: ...
