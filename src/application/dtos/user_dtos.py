"""User DTOs (Data Transfer Objects)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.user import User


@dataclass
class UserResult:
    """Authenticated user's profile.

    Attributes:
        id: User identifier.
        auth_id: Identity provider user id.
        first_name: Given name.
        last_name: Family name.
        email: Contact email.
        photo: Avatar URL.
        preferences: Opaque JSON preferences.
        created_at: When the user was first seen.
        updated_at: Last profile change.
    """

    id: UUID
    auth_id: str
    first_name: str
    last_name: str
    email: str
    photo: str | None
    preferences: str | None
    created_at: datetime | None
    updated_at: datetime | None


def to_user_result(user: User) -> UserResult:
    return UserResult(
        id=user.id,
        auth_id=user.auth_id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        photo=user.photo,
        preferences=user.preferences,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
