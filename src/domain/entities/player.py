"""Player domain entity.

Players belong to a club and join teams through memberships. The age groups
a player belongs to are derived from their teams and never edited directly.

Usage:
    from src.domain.entities import EmergencyContact, Player

    player.replace_emergency_contacts([
        EmergencyContact(id=uuid7(), name="Sam Doe", phone="0700", relationship="Parent", is_primary=True),
    ])
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID


@dataclass
class EmergencyContact:
    """Emergency contact of a player."""

    id: UUID
    name: str
    phone: str
    relationship: str
    is_primary: bool = False


@dataclass
class Player:
    """Registered player.

    Attributes:
        id: Unique player identifier.
        club_id: Owning club.
        first_name: Given name.
        last_name: Family name.
        date_of_birth: Date of birth.
        nickname: Optional nickname.
        photo: Photo URL or data URI.
        association_id: Governing body registration number.
        preferred_positions: Position codes, most preferred first.
        allergies: Free-text allergy notes.
        medical_conditions: Free-text medical notes.
        overall_rating: Mean of the latest evaluation, None before any.
        emergency_contacts: Contacts, at most one primary.
        team_ids: Teams the player is a member of.
        age_group_ids: Age groups derived from ``team_ids``.
        is_archived: Soft-delete flag.
    """

    id: UUID
    club_id: UUID
    first_name: str
    last_name: str
    date_of_birth: date | None = None
    nickname: str | None = None
    photo: str | None = None
    association_id: str | None = None
    preferred_positions: list[str] = field(default_factory=list)
    allergies: str | None = None
    medical_conditions: str | None = None
    overall_rating: int | None = None
    emergency_contacts: list[EmergencyContact] = field(default_factory=list)
    team_ids: list[UUID] = field(default_factory=list)
    age_group_ids: list[UUID] = field(default_factory=list)
    is_archived: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def primary_contact(self) -> EmergencyContact | None:
        return next((c for c in self.emergency_contacts if c.is_primary), None)

    def age_on(self, today: date) -> int | None:
        """Age in whole years on ``today``, None without a date of birth."""
        if self.date_of_birth is None:
            return None
        born = self.date_of_birth
        before_birthday = (today.month, today.day) < (born.month, born.day)
        return today.year - born.year - int(before_birthday)
