"""Match database models.

Tables:
    - matches: Fixtures and results
    - match_performance_ratings: Post-match player ratings
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel


class Match(BaseMutableModel):
    """Match model.

    Scores are from the venue's point of view (home/away), not ours.
    """

    __tablename__ = "matches"

    team_id: Mapped[UUID] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to teams table",
    )
    season_id: Mapped[str] = mapped_column(String(20), nullable=False)
    squad_size: Mapped[int] = mapped_column(Integer, nullable=False, default=11)
    opposition: Mapped[str] = mapped_column(String(200), nullable=False)
    match_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    meet_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    kick_off_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    location: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_home: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    competition: Mapped[str | None] = mapped_column(String(200), nullable=True)
    primary_kit_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("kits.id", ondelete="SET NULL"), nullable=True
    )
    secondary_kit_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("kits.id", ondelete="SET NULL"), nullable=True
    )
    goalkeeper_kit_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("kits.id", ondelete="SET NULL"), nullable=True
    )
    home_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    away_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, index=True, comment="Match status code"
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    weather_condition: Mapped[str | None] = mapped_column(String(50), nullable=True)
    weather_temperature: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_locked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class MatchPerformanceRating(BaseModel):
    __tablename__ = "match_performance_ratings"

    match_id: Mapped[UUID] = mapped_column(
        ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, index=True
    )
    player_id: Mapped[UUID] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rating: Mapped[float] = mapped_column(Float, nullable=False)
