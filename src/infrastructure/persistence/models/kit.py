"""Kit database model."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Kit(BaseMutableModel):
    """Kit model.

    ``team_id`` is NULL for club-level kits.
    """

    __tablename__ = "kits"

    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    team_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="Kit type code"
    )
    shirt_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    shorts_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    socks_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    season: Mapped[str | None] = mapped_column(String(20), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
