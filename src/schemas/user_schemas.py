"""Current-user profile schemas."""

from datetime import datetime
from uuid import UUID

from src.application.commands.user_commands import UpdateMyProfile
from src.schemas.common_schemas import CamelModel, CamelResponse


class UpdateProfileRequest(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    photo: str | None = None
    preferences: str | None = None

    def to_command(self, auth_id: str) -> UpdateMyProfile:
        return UpdateMyProfile(auth_id=auth_id, **self.model_dump())


class UserResponse(CamelResponse):
    id: UUID
    auth_id: str
    first_name: str
    last_name: str
    email: str
    photo: str | None
    preferences: str | None
    created_at: datetime | None
    updated_at: datetime | None
