"""Age group DTOs (Data Transfer Objects)."""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.entities.age_group import AgeGroup


@dataclass
class AgeGroupResult:
    """Age group detail.

    Attributes:
        id: Age group identifier.
        club_id: Owning club.
        name: Display name.
        code: Short code.
        level: Level label.
        season: Current season.
        seasons: Every season the group has run.
        default_season: Season selected by default.
        default_squad_size: Default match squad size.
        description: Free text.
        is_archived: Soft-delete flag.
        team_count: Active teams; only set in listings.
    """

    id: UUID
    club_id: UUID
    name: str
    code: str
    level: str
    season: str
    default_squad_size: int
    seasons: list[str] = field(default_factory=list)
    default_season: str | None = None
    description: str | None = None
    is_archived: bool = False
    team_count: int | None = None


@dataclass
class AgeGroupStatisticsResult:
    player_count: int
    team_count: int
    matches_played: int
    wins: int
    draws: int
    losses: int
    win_rate: float
    goal_difference: int


def to_age_group_result(
    age_group: AgeGroup, team_count: int | None = None
) -> AgeGroupResult:
    return AgeGroupResult(
        id=age_group.id,
        club_id=age_group.club_id,
        name=age_group.name,
        code=age_group.code,
        level=age_group.level.label,
        season=age_group.season,
        default_squad_size=age_group.default_squad_size,
        seasons=list(age_group.seasons),
        default_season=age_group.default_season,
        description=age_group.description,
        is_archived=age_group.is_archived,
        team_count=team_count,
    )
