"""Kit commands (CQRS write operations).

Kits are hard-deleted; there is no archive flag.
"""

from dataclasses import dataclass
from uuid import UUID

from src.core.validation import HexColor, MaxLength, OneOf, Required
from src.domain.enums import KitType


@dataclass(frozen=True, kw_only=True)
class CreateTeamKit:
    """Create a kit for a team.

    Attributes:
        team_id: Team the kit belongs to.
        name: Kit name, e.g. "Home 2024".
        type: Kit type label (home, away, third, goalkeeper, training).
        shirt_color: Hex colour.
        shorts_color: Hex colour.
        socks_color: Hex colour.
        season: Season label, optional.
        is_active: Whether the kit is currently in use.
    """

    team_id: UUID
    name: str
    type: str
    shirt_color: str
    shorts_color: str
    socks_color: str
    season: str | None = None
    is_active: bool = True


@dataclass(frozen=True, kw_only=True)
class UpdateTeamKit:
    team_id: UUID
    kit_id: UUID
    name: str
    type: str
    shirt_color: str
    shorts_color: str
    socks_color: str
    season: str | None = None
    is_active: bool = True


@dataclass(frozen=True, kw_only=True)
class DeleteTeamKit:
    team_id: UUID
    kit_id: UUID


KIT_RULES = (
    Required("name"),
    MaxLength("name", 100),
    Required("type"),
    OneOf("type", KitType.labels()),
    Required("shirt_color"),
    HexColor("shirt_color"),
    Required("shorts_color"),
    HexColor("shorts_color"),
    Required("socks_color"),
    HexColor("socks_color"),
    MaxLength("season", 20),
)
