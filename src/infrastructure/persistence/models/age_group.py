"""AgeGroup database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import ArchivableMixin, BaseMutableModel


class AgeGroup(ArchivableMixin, BaseMutableModel):
    """Age group model.

    Fields:
        club_id: FK to clubs
        name / code: Display name and short code
        level: Level code (0 youth .. 3 senior)
        season: Current season label
        seasons: Seasons the group has played (JSON array text, legacy rows
            may hold comma-separated text)
        default_season: Preselected season
        default_squad_size: Players per side
        description: Free text
        is_archived: from ArchivableMixin
    """

    __tablename__ = "age_groups"

    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to clubs table",
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    level: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="Level code"
    )
    season: Mapped[str] = mapped_column(String(20), nullable=False)
    seasons: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="Seasons (JSON array)"
    )
    default_season: Mapped[str | None] = mapped_column(String(20), nullable=True)
    default_squad_size: Mapped[int] = mapped_column(
        Integer, nullable=False, default=11
    )
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
