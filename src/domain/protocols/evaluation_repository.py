"""EvaluationRepository protocol for player ability evaluations.

Every write touches the evaluation row and its attribute rows; each write
is a single transaction, rolled back as a whole on failure.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.evaluation import AttributeEvaluation


class EvaluationRepository(Protocol):
    """Evaluation repository protocol (port).

    Methods:
        find_by_id: Retrieve evaluation with its attributes
        list_by_player: Latest evaluations of a player
        add: Insert evaluation and attributes
        replace: Update evaluation and replace its attributes
        delete: Delete attributes, then the evaluation
    """

    async def find_by_id(self, evaluation_id: UUID) -> AttributeEvaluation | None: ...

    async def list_by_player(
        self, player_id: UUID, limit: int = 12
    ) -> list[AttributeEvaluation]:
        """List a player's evaluations, newest first.

        Attributes are ordered by name; ``coach_name`` is filled in.
        """
        ...

    async def add(self, evaluation: AttributeEvaluation) -> None: ...

    async def replace(self, evaluation: AttributeEvaluation) -> None: ...

    async def delete(self, evaluation_id: UUID) -> None: ...
