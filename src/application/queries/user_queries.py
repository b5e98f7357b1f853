"""User queries (CQRS read operations)."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetCurrentUser:
    """The user record behind the authenticated principal.

    Attributes:
        auth_id: Principal ``userId`` asserted by the identity provider.
    """

    auth_id: str


@dataclass(frozen=True, kw_only=True)
class GetMyClubs:
    """Clubs whose teams the caller coaches, ordered by name."""

    auth_id: str


@dataclass(frozen=True, kw_only=True)
class GetMyTeamsAndClubs:
    """Active teams the caller coaches, each with its club."""

    auth_id: str
