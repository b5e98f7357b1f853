"""Player commands (CQRS write operations).

Player updates use full-replace semantics: the emergency contacts and team
memberships in the command replace the stored ones, and the player's age
groups are rebuilt from the new teams.

Reference:
    - src/core/validation.py
"""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.core.validation import MaxLength, Required


@dataclass(frozen=True, kw_only=True)
class EmergencyContactInput:
    name: str
    phone: str
    relationship: str
    is_primary: bool = False


@dataclass(frozen=True, kw_only=True)
class UpdatePlayer:
    """Replace a player's details.

    Attributes:
        player_id: Player to update.
        first_name: Given name.
        last_name: Family name.
        date_of_birth: Date of birth.
        nickname: Optional nickname.
        photo: Photo URL.
        association_id: Governing body registration number.
        preferred_positions: Position codes, most preferred first.
        allergies: Free text.
        medical_conditions: Free text.
        emergency_contacts: Replacement contacts; exactly one is primary
            when any are given.
        team_ids: Replacement team memberships.
        is_archived: Soft-delete flag.
    """

    player_id: UUID
    first_name: str
    last_name: str
    date_of_birth: date | None
    preferred_positions: list[str] = field(default_factory=list)
    nickname: str | None = None
    photo: str | None = None
    association_id: str | None = None
    allergies: str | None = None
    medical_conditions: str | None = None
    emergency_contacts: list[EmergencyContactInput] = field(default_factory=list)
    team_ids: list[UUID] = field(default_factory=list)
    is_archived: bool = False


UPDATE_PLAYER_RULES = (
    Required("first_name"),
    MaxLength("first_name", 100),
    Required("last_name"),
    MaxLength("last_name", 100),
    MaxLength("nickname", 100),
    MaxLength("association_id", 50),
    MaxLength("photo", 500),
    MaxLength("allergies", 1000),
    MaxLength("medical_conditions", 1000),
    Required("date_of_birth"),
    Required("preferred_positions"),
    Required("emergency_contacts[].name"),
    MaxLength("emergency_contacts[].name", 200),
    Required("emergency_contacts[].phone"),
    MaxLength("emergency_contacts[].phone", 20),
    Required("emergency_contacts[].relationship"),
    MaxLength("emergency_contacts[].relationship", 100),
)
