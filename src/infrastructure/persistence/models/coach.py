"""Coach database model."""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import ArchivableMixin, BaseMutableModel


class Coach(ArchivableMixin, BaseMutableModel):
    """Coach model.

    Fields:
        club_id: FK to clubs
        user_id: Optional FK to users (identifies the caller as this coach)
        role: Default role code
        specializations: Tags (JSON array text)
    """

    __tablename__ = "coaches"

    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to clubs table",
    )
    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="FK to users table",
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    photo: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    association_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    role: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)
    specializations: Mapped[str | None] = mapped_column(Text, nullable=True)
