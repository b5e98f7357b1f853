"""Age group commands (CQRS write operations)."""

from dataclasses import dataclass, field
from uuid import UUID

from src.core.validation import MaxLength, OneOf, Required
from src.domain.enums import SQUAD_SIZES, Level


@dataclass(frozen=True, kw_only=True)
class CreateAgeGroup:
    """Create an age group in a club.

    The new group's season list starts as ``[season]`` and its default
    season is ``season``.

    Attributes:
        club_id: Owning club.
        name: Display name, e.g. "Under 12s".
        code: Short code, e.g. "U12".
        level: Level label (youth, amateur, reserve, senior).
        season: Current season, e.g. "2024/25".
        default_squad_size: Default match squad size.
        description: Free text.
    """

    club_id: UUID | None
    name: str
    code: str
    level: str
    season: str
    default_squad_size: int = 11
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateAgeGroup:
    """Replace an age group's details (full replace)."""

    age_group_id: UUID
    name: str
    code: str
    level: str
    season: str
    default_squad_size: int = 11
    description: str | None = None
    seasons: list[str] = field(default_factory=list)
    default_season: str | None = None
    is_archived: bool = False


_AGE_GROUP_RULES = (
    Required("name"),
    MaxLength("name", 100),
    Required("code"),
    MaxLength("code", 50),
    Required("level"),
    OneOf("level", Level.labels()),
    Required("season"),
    MaxLength("season", 20),
    OneOf("default_squad_size", SQUAD_SIZES),
    MaxLength("description", 500),
)

CREATE_AGE_GROUP_RULES = (Required("club_id"), *_AGE_GROUP_RULES)

UPDATE_AGE_GROUP_RULES = (
    *_AGE_GROUP_RULES,
    MaxLength("seasons[]", 20),
    MaxLength("default_season", 20),
)
