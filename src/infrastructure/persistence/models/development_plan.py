"""Development plan database models."""

from datetime import date
from uuid import UUID

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, BaseMutableModel


class DevelopmentPlan(BaseMutableModel):
    __tablename__ = "development_plans"

    player_id: Mapped[UUID] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    period_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    period_end: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="Plan status code"
    )
    coach_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by: Mapped[UUID | None] = mapped_column(
        ForeignKey("coaches.id", ondelete="SET NULL"), nullable=True
    )


class DevelopmentGoal(BaseModel):
    __tablename__ = "development_goals"

    plan_id: Mapped[UUID] = mapped_column(
        ForeignKey("development_plans.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    goal: Mapped[str] = mapped_column(String(500), nullable=False)
    actions: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="Actions (JSON array)"
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    target_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_date: Mapped[date | None] = mapped_column(Date, nullable=True)
