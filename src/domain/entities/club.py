"""Club domain entity.

The club is the root of the ownership tree: age groups, teams, players,
coaches, kits and drills all belong to exactly one club.

Usage:
    from src.domain.entities import Club

    club = Club(id=club_id, name="Vale Harriers FC", short_name="VHFC", ...)
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class Club:
    """Sports club.

    Attributes:
        id: Unique club identifier.
        name: Full club name.
        short_name: Abbreviation shown in tight layouts.
        logo: Logo URL (optional).
        primary_color: Hex colour (``#RRGGBB``).
        secondary_color: Hex colour.
        accent_color: Hex colour.
        city: Home city.
        country: Home country.
        venue: Home ground.
        address: Postal address of the venue (optional).
        founded: Year founded (optional).
        history: Free-text history.
        ethos: Free-text ethos statement.
        principles: Ordered list of club principles.
    """

    id: UUID
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
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class ClubCounts:
    """Active (non-archived) member counts for a club."""

    age_group_count: int
    team_count: int
    player_count: int
    coach_count: int
