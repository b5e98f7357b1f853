"""Kit request and response schemas."""

from uuid import UUID

from pydantic import Field

from src.application.commands.kit_commands import CreateTeamKit, UpdateTeamKit
from src.schemas.common_schemas import CamelModel, CamelResponse


class KitRequest(CamelModel):
    """Kit body for create and full-replace update."""

    name: str | None = None
    type: str | None = Field(None, examples=["home"])
    shirt_color: str | None = None
    shorts_color: str | None = None
    socks_color: str | None = None
    season: str | None = None
    is_active: bool = True

    def to_create_command(self, team_id: UUID) -> CreateTeamKit:
        return CreateTeamKit(team_id=team_id, **self.model_dump())

    def to_update_command(self, team_id: UUID, kit_id: UUID) -> UpdateTeamKit:
        return UpdateTeamKit(team_id=team_id, kit_id=kit_id, **self.model_dump())


class KitResponse(CamelResponse):
    id: UUID
    club_id: UUID
    team_id: UUID | None
    name: str
    type: str
    shirt_color: str
    shorts_color: str
    socks_color: str
    season: str | None
    is_active: bool
