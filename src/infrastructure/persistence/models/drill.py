"""Drill and drill template database models.

Tables:
    - drills / drill_links / drill_scope_links
    - drill_templates / drill_template_scope_links

A scope link row grants visibility at club level (no age group, no team),
age group level (age group only) or team level (team, with its age group).
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel


class Drill(BaseMutableModel):
    __tablename__ = "drills"

    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    category: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="Drill category code"
    )
    attributes: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="Developed attributes (JSON array)"
    )
    equipment: Mapped[str | None] = mapped_column(Text, nullable=True)
    instructions: Mapped[str | None] = mapped_column(Text, nullable=True)
    variations: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_by: Mapped[UUID | None] = mapped_column(
        ForeignKey("coaches.id", ondelete="SET NULL"), nullable=True
    )


class DrillLink(BaseModel):
    """External resource attached to a drill."""

    __tablename__ = "drill_links"

    drill_id: Mapped[UUID] = mapped_column(
        ForeignKey("drills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    url: Mapped[str] = mapped_column(String(2000), nullable=False)
    title: Mapped[str | None] = mapped_column(String(200), nullable=True)
    link_type: Mapped[str] = mapped_column(String(50), nullable=False)


class DrillScopeLink(BaseModel):
    __tablename__ = "drill_scope_links"

    drill_id: Mapped[UUID] = mapped_column(
        ForeignKey("drills.id", ondelete="CASCADE"), nullable=False, index=True
    )
    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    age_group_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("age_groups.id", ondelete="CASCADE"), nullable=True
    )
    team_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), nullable=True
    )


class DrillTemplate(BaseMutableModel):
    """Drill template model.

    ``drill_ids`` keeps the ordered drill list as a JSON array; duration,
    category and attributes are derived from those drills on write.
    """

    __tablename__ = "drill_templates"

    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    drill_ids: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    total_duration_minutes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
    category: Mapped[int | None] = mapped_column(Integer, nullable=True)
    attributes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_by: Mapped[UUID | None] = mapped_column(
        ForeignKey("coaches.id", ondelete="SET NULL"), nullable=True
    )


class DrillTemplateScopeLink(BaseModel):
    __tablename__ = "drill_template_scope_links"

    template_id: Mapped[UUID] = mapped_column(
        ForeignKey("drill_templates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    age_group_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("age_groups.id", ondelete="CASCADE"), nullable=True
    )
    team_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), nullable=True
    )
