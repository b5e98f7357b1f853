"""Club database model.

Reference:
    - src/domain/entities/club.py
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Club(BaseMutableModel):
    """Club model.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        name / short_name: Club names
        logo: Logo URL
        primary_color / secondary_color / accent_color: Hex colours
        city / country / venue / address: Location
        founded: Year founded
        history / ethos: Free text
        principles: List of principles (JSON array text)
    """

    __tablename__ = "clubs"

    name: Mapped[str] = mapped_column(
        String(200), nullable=False, index=True, comment="Full club name"
    )
    short_name: Mapped[str] = mapped_column(
        String(50), nullable=False, comment="Club abbreviation"
    )
    logo: Mapped[str | None] = mapped_column(Text, nullable=True, comment="Logo URL")
    primary_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    secondary_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    accent_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    venue: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    founded: Mapped[int | None] = mapped_column(
        Integer, nullable=True, comment="Year founded"
    )
    history: Mapped[str | None] = mapped_column(Text, nullable=True)
    ethos: Mapped[str | None] = mapped_column(Text, nullable=True)
    principles: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="Club principles (JSON array)"
    )
