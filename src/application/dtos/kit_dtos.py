"""Kit DTOs (Data Transfer Objects).

Missing colours are reported as black so the client can always render a
swatch.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.entities.kit import DEFAULT_KIT_COLOR, Kit
from src.domain.enums import kit_type_label


@dataclass
class KitResult:
    """Kit as shown in kit lists.

    Attributes:
        id: Kit identifier.
        club_id: Owning club.
        team_id: Team, None for club-level kits.
        name: Kit name.
        type: Kit type label.
        shirt_color: Hex colour.
        shorts_color: Hex colour.
        socks_color: Hex colour.
        season: Season label.
        is_active: Whether the kit is in use.
    """

    id: UUID
    club_id: UUID
    team_id: UUID | None
    name: str
    type: str
    shirt_color: str
    shorts_color: str
    socks_color: str
    season: str | None
    is_active: bool


def to_kit_result(kit: Kit) -> KitResult:
    return KitResult(
        id=kit.id,
        club_id=kit.club_id,
        team_id=kit.team_id,
        name=kit.name,
        type=kit_type_label(int(kit.kit_type)),
        shirt_color=kit.shirt_color or DEFAULT_KIT_COLOR,
        shorts_color=kit.shorts_color or DEFAULT_KIT_COLOR,
        socks_color=kit.socks_color or DEFAULT_KIT_COLOR,
        season=kit.season,
        is_active=kit.is_active,
    )
