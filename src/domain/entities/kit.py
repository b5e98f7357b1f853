"""Kit domain entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums.kit_type import KitType

DEFAULT_KIT_COLOR = "#000000"


@dataclass
class Kit:
    """Club or team kit.

    A kit with no ``team_id`` is a club-level kit available to every team.

    Attributes:
        id: Unique kit identifier.
        club_id: Owning club.
        team_id: Team the kit belongs to, None for club kits.
        name: Display name ("Home 24/25").
        kit_type: Kit type.
        shirt_color: Hex colour, None when not recorded.
        shorts_color: Hex colour.
        socks_color: Hex colour.
        season: Optional season label.
        is_active: Inactive kits are kept for history.
    """

    id: UUID
    club_id: UUID
    name: str
    kit_type: KitType
    team_id: UUID | None = None
    shirt_color: str | None = None
    shorts_color: str | None = None
    socks_color: str | None = None
    season: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
