"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Methods:
        find_by_id: Retrieve user by ID
        find_by_auth_id: Retrieve user by identity provider ID
        save: Create or update user
    """

    async def find_by_id(self, user_id: UUID) -> User | None: ...

    async def find_by_auth_id(self, auth_id: str) -> User | None:
        """Find user by the principal's ``userId``.

        Args:
            auth_id: Identity provider user ID.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> None: ...
