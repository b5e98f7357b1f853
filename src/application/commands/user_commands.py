"""User commands (CQRS write operations)."""

from dataclasses import dataclass

from src.core.validation import Email, MaxLength, Required


@dataclass(frozen=True, kw_only=True)
class UpdateMyProfile:
    """Update the authenticated user's own profile.

    Attributes:
        auth_id: Caller's identity provider user id.
        first_name: Given name.
        last_name: Family name.
        email: Contact email.
        photo: Avatar URL.
        preferences: Opaque JSON preferences; unchanged when None.
    """

    auth_id: str
    first_name: str
    last_name: str
    email: str
    photo: str | None = None
    preferences: str | None = None


UPDATE_PROFILE_RULES = (
    Required("first_name"),
    MaxLength("first_name", 100),
    Required("last_name"),
    MaxLength("last_name", 100),
    Required("email"),
    MaxLength("email", 255),
    Email("email"),
)
