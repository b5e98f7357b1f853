"""User domain entity.

Users are identified by the ``auth_id`` asserted by the identity provider;
a user row is the profile behind that identity.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """Authenticated user profile.

    Attributes:
        id: Unique user identifier.
        auth_id: Identity provider's user id (principal ``userId``).
        email: Contact email.
        first_name: Given name.
        last_name: Family name.
        photo: Avatar URL, optional.
        preferences: Opaque JSON preferences blob, optional.
    """

    id: UUID
    auth_id: str
    email: str
    first_name: str
    last_name: str
    photo: str | None = None
    preferences: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
