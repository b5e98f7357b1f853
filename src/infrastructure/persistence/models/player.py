"""Player database models.

Tables:
    - players: Player profile
    - player_emergency_contacts: Contacts (at most one primary)
    - player_attributes: Current 0-99 ability ratings
    - player_teams: Team memberships with squad number
    - player_age_groups: Age groups derived from memberships
"""

from datetime import date
from uuid import UUID

from sqlalchemy import (
    Boolean,
    Date,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import (
    ArchivableMixin,
    BaseModel,
    BaseMutableModel,
)


class Player(ArchivableMixin, BaseMutableModel):
    """Player model.

    Fields:
        club_id: FK to clubs
        first_name / last_name / nickname: Names
        photo: Photo URL or data URI
        date_of_birth: Date of birth
        association_id: Governing body registration number
        preferred_positions: Position codes (JSON array text)
        allergies / medical_conditions: Free text
        overall_rating: Rounded mean of the latest evaluation
        is_archived: from ArchivableMixin
    """

    __tablename__ = "players"

    club_id: Mapped[UUID] = mapped_column(
        ForeignKey("clubs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to clubs table",
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    nickname: Mapped[str | None] = mapped_column(String(100), nullable=True)
    photo: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    association_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    preferred_positions: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="Position codes (JSON array)"
    )
    allergies: Mapped[str | None] = mapped_column(Text, nullable=True)
    medical_conditions: Mapped[str | None] = mapped_column(Text, nullable=True)
    overall_rating: Mapped[int | None] = mapped_column(Integer, nullable=True)


class PlayerEmergencyContact(BaseModel):
    __tablename__ = "player_emergency_contacts"

    player_id: Mapped[UUID] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    relationship: Mapped[str] = mapped_column(String(100), nullable=False)
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class PlayerAttribute(BaseModel):
    """Current rating of one ability attribute of a player."""

    __tablename__ = "player_attributes"

    player_id: Mapped[UUID] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    attribute_name: Mapped[str] = mapped_column(String(50), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint(
            "player_id", "attribute_name", name="uq_player_attributes_player_name"
        ),
    )


class PlayerTeam(BaseModel):
    """Team membership.

    Indexes:
        - uq_player_teams_team_player: a player is on a team at most once
    """

    __tablename__ = "player_teams"

    player_id: Mapped[UUID] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    team_id: Mapped[UUID] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"), nullable=False, index=True
    )
    squad_number: Mapped[int | None] = mapped_column(
        Integer, nullable=True, comment="Shirt number, unique per team"
    )

    __table_args__ = (
        UniqueConstraint("team_id", "player_id", name="uq_player_teams_team_player"),
    )


class PlayerAgeGroup(BaseModel):
    __tablename__ = "player_age_groups"

    player_id: Mapped[UUID] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False, index=True
    )
    age_group_id: Mapped[UUID] = mapped_column(
        ForeignKey("age_groups.id", ondelete="CASCADE"), nullable=False, index=True
    )

    __table_args__ = (
        UniqueConstraint(
            "player_id", "age_group_id", name="uq_player_age_groups_player_group"
        ),
    )
