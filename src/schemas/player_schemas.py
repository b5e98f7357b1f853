"""Player, ability and evaluation schemas.

Reference:
    - src/application/dtos/player_dtos.py
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from src.application.commands.evaluation_commands import (
    CreatePlayerAbilityEvaluation,
    EvaluationAttributeInput,
    UpdatePlayerAbilityEvaluation,
)
from src.application.commands.player_commands import EmergencyContactInput, UpdatePlayer
from src.schemas.common_schemas import CamelModel, CamelResponse


# =============================================================================
# Request Schemas
# =============================================================================


class EmergencyContactRequest(CamelModel):
    name: str | None = None
    phone: str | None = None
    relationship: str | None = None
    is_primary: bool = False


class UpdatePlayerRequest(CamelModel):
    """Full replacement of a player's profile.

    ``teamIds`` replaces the player's team memberships; age groups follow
    the teams.
    """

    first_name: str | None = None
    last_name: str | None = None
    nickname: str | None = None
    photo: str | None = None
    date_of_birth: date | None = None
    association_id: str | None = None
    preferred_positions: list[str] = Field(default_factory=list)
    allergies: str | None = None
    medical_conditions: str | None = None
    emergency_contacts: list[EmergencyContactRequest] = Field(default_factory=list)
    team_ids: list[UUID] = Field(default_factory=list)
    is_archived: bool = False

    def to_command(self, player_id: UUID) -> UpdatePlayer:
        data = self.model_dump(exclude={"emergency_contacts"})
        return UpdatePlayer(
            player_id=player_id,
            emergency_contacts=[
                EmergencyContactInput(**contact.model_dump())
                for contact in self.emergency_contacts
            ],
            **data,
        )


class EvaluationAttributeRequest(CamelModel):
    attribute_name: str | None = None
    rating: int | None = None
    notes: str | None = None


class EvaluationRequest(CamelModel):
    """Ability evaluation body; ratings are 0-99 per attribute."""

    evaluated_at: datetime | None = None
    coach_notes: str | None = None
    period_start: date | None = None
    period_end: date | None = None
    attributes: list[EvaluationAttributeRequest] = Field(default_factory=list)

    def _fields(self) -> dict:
        data = self.model_dump(exclude={"attributes"})
        data["attributes"] = [
            EvaluationAttributeInput(**attribute.model_dump())
            for attribute in self.attributes
        ]
        return data

    def to_create_command(
        self, player_id: UUID, auth_id: str
    ) -> CreatePlayerAbilityEvaluation:
        return CreatePlayerAbilityEvaluation(
            player_id=player_id, auth_id=auth_id, **self._fields()
        )

    def to_update_command(
        self, player_id: UUID, evaluation_id: UUID, auth_id: str
    ) -> UpdatePlayerAbilityEvaluation:
        return UpdatePlayerAbilityEvaluation(
            player_id=player_id,
            evaluation_id=evaluation_id,
            auth_id=auth_id,
            **self._fields(),
        )


# =============================================================================
# Response Schemas
# =============================================================================


class EmergencyContactResponse(CamelResponse):
    id: UUID
    name: str
    phone: str
    relationship: str
    is_primary: bool


class PlayerResponse(CamelResponse):
    """Player profile with memberships and medical information."""

    id: UUID
    club_id: UUID
    club_name: str | None
    first_name: str
    last_name: str
    nickname: str | None
    photo_url: str | None
    date_of_birth: date | None
    association_id: str | None
    preferred_positions: list[str]
    allergies: str | None
    medical_conditions: str | None
    emergency_contacts: list[EmergencyContactResponse]
    overall_rating: int | None
    age_group_ids: list[UUID]
    team_ids: list[UUID]
    is_archived: bool


class EvaluationAttributeResponse(CamelResponse):
    attribute_name: str
    rating: int
    notes: str | None


class EvaluationResponse(CamelResponse):
    id: UUID
    player_id: UUID
    evaluated_by: UUID
    coach_name: str | None
    evaluated_at: datetime
    overall_rating: int
    coach_notes: str | None
    period_start: date | None
    period_end: date | None
    attributes: list[EvaluationAttributeResponse] = Field(default_factory=list)


class PlayerAbilitiesResponse(CamelResponse):
    """Current ratings plus the most recent evaluations, newest first."""

    id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    preferred_positions: list[str]
    overall_rating: int | None
    attributes: dict[str, int] = Field(default_factory=dict)
    evaluations: list[EvaluationResponse] = Field(default_factory=list)


class PlayerListItemResponse(CamelResponse):
    """Player row in club and age group lists."""

    id: UUID
    club_id: UUID
    first_name: str
    last_name: str
    nickname: str | None
    photo_url: str | None
    date_of_birth: date | None
    age: int | None
    association_id: str | None
    preferred_positions: list[str]
    overall_rating: int | None
    age_group_ids: list[UUID]
    team_ids: list[UUID]
    is_archived: bool
    age_group_names: list[str] = Field(default_factory=list)
    team_names: list[str] = Field(default_factory=list)


class PlayerPageResponse(CamelResponse):
    items: list[PlayerListItemResponse]
    page: int
    page_size: int
    total_count: int
    total_pages: int


class RecentPerformanceResponse(CamelResponse):
    match_id: UUID
    team_id: UUID
    match_date: datetime
    opposition: str
    is_home: bool
    competition: str | None
    result: str = Field(examples=["W 2-1"])
    rating: float


class UpcomingMatchResponse(CamelResponse):
    match_id: UUID
    team_id: UUID
    team_name: str | None
    age_group_id: UUID | None
    age_group_name: str | None
    match_date: datetime
    kick_off_time: datetime | None
    opposition: str
    is_home: bool
    location: str | None
    competition: str | None


class PlayerAttributesResponse(CamelResponse):
    player_id: UUID
    attributes: dict[str, int] = Field(default_factory=dict)
