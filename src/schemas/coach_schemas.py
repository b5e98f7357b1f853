"""Coach request and response schemas."""

from datetime import date
from uuid import UUID

from pydantic import Field

from src.application.commands.coach_commands import UpdateCoach
from src.schemas.common_schemas import CamelModel, CamelResponse


class UpdateCoachRequest(CamelModel):
    """Full replacement of a coach's profile and team assignments."""

    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None
    photo: str | None = None
    email: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None
    association_id: str | None = None
    biography: str | None = None
    specializations: list[str] = Field(default_factory=list)
    team_ids: list[UUID] = Field(default_factory=list)
    is_archived: bool = False

    def to_command(self, coach_id: UUID) -> UpdateCoach:
        return UpdateCoach(coach_id=coach_id, **self.model_dump())


class CoachTeamResponse(CamelResponse):
    id: UUID
    name: str
    role: str


class CoachResponse(CamelResponse):
    id: UUID
    club_id: UUID
    first_name: str
    last_name: str
    photo_url: str | None
    email: str | None
    phone: str | None
    date_of_birth: date | None
    association_id: str | None
    role: str
    biography: str | None
    specializations: list[str] = Field(default_factory=list)
    teams: list[CoachTeamResponse] = Field(default_factory=list)
    is_archived: bool = False
