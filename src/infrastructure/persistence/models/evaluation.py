"""Attribute evaluation database models.

Tables:
    - attribute_evaluations: One coach evaluation of a player
    - evaluation_attributes: Attribute ratings of an evaluation
"""

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel


class AttributeEvaluation(BaseMutableModel):
    __tablename__ = "attribute_evaluations"

    player_id: Mapped[UUID] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    evaluated_by: Mapped[UUID] = mapped_column(
        ForeignKey("coaches.id", ondelete="CASCADE"),
        nullable=False,
        comment="Coach who created the evaluation",
    )
    evaluated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    overall_rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    coach_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    period_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    period_end: Mapped[date | None] = mapped_column(Date, nullable=True)


class EvaluationAttribute(BaseModel):
    __tablename__ = "evaluation_attributes"

    evaluation_id: Mapped[UUID] = mapped_column(
        ForeignKey("attribute_evaluations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attribute_name: Mapped[str] = mapped_column(String(50), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
