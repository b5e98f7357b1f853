"""Team database models.

Tables:
    - teams: Teams of an age group
    - team_coaches: Coach assignments with role
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import (
    ArchivableMixin,
    BaseModel,
    BaseMutableModel,
)


class Team(ArchivableMixin, BaseMutableModel):
    """Team model."""

    __tablename__ = "teams"

    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to clubs table",
    )
    age_group_id: Mapped[UUID] = mapped_column(
        ForeignKey("age_groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to age_groups table",
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    short_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    season: Mapped[str] = mapped_column(String(20), nullable=False)
    primary_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    secondary_color: Mapped[str | None] = mapped_column(String(7), nullable=True)


class TeamCoach(BaseModel):
    """Coach assignment to a team.

    Indexes:
        - uq_team_coaches_team_coach: one assignment per (team, coach)
    """

    __tablename__ = "team_coaches"

    team_id: Mapped[UUID] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True
    )
    coach_id: Mapped[UUID] = mapped_column(
        ForeignKey("coaches.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1, comment="Coach role code"
    )

    __table_args__ = (
        UniqueConstraint("team_id", "coach_id", name="uq_team_coaches_team_coach"),
    )
