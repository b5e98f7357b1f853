"""Club commands (CQRS write operations).

Commands represent user intent to change club data. They are immutable
dataclasses with imperative names; field constraints are declared next to
each command as a tuple of rules the dispatcher checks before the handler
runs.

Reference:
    - src/core/validation.py
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.core.validation import HexColor, MaxLength, Required


@dataclass(frozen=True, kw_only=True)
class UpdateClub:
    """Replace a club's details.

    Attributes:
        club_id: Club to update.
        name: Full club name.
        short_name: Abbreviated name (badges, fixtures).
        logo: Logo URL or data URI.
        primary_color: Hex colour, e.g. "#1A2B3C".
        secondary_color: Hex colour.
        accent_color: Hex colour.
        city: Home city.
        country: Home country.
        venue: Home ground.
        address: Street address of the venue.
        founded: Year the club was founded.
        history: Free text.
        ethos: Free text.
        principles: Ordered list of club principles.
    """

    club_id: UUID
    name: str
    short_name: str
    city: str
    country: str
    venue: str
    logo: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    accent_color: str | None = None
    address: str | None = None
    founded: int | None = None
    history: str | None = None
    ethos: str | None = None
    principles: list[str] = field(default_factory=list)


UPDATE_CLUB_RULES = (
    Required("name"),
    MaxLength("name", 200),
    Required("short_name"),
    MaxLength("short_name", 50),
    HexColor("primary_color"),
    HexColor("secondary_color"),
    HexColor("accent_color"),
    Required("city"),
    MaxLength("city", 100),
    Required("country"),
    MaxLength("country", 100),
    Required("venue"),
    MaxLength("venue", 200),
    MaxLength("address", 500),
    MaxLength("history", 5000),
    MaxLength("ethos", 5000),
)
