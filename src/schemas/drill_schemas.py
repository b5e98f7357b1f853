"""Drill and drill template schemas.

Scope on create decides where the drill or template is visible: club-wide,
an age group, or a single team.

Reference:
    - src/application/dtos/drill_dtos.py
    - src/domain/services/drill_scope.py
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.application.commands.drill_commands import (
    CreateDrill,
    CreateDrillTemplate,
    DrillLinkInput,
    ScopeInput,
    UpdateDrill,
    UpdateDrillTemplate,
)
from src.schemas.common_schemas import CamelModel, CamelResponse


# =============================================================================
# Request Schemas
# =============================================================================


class ScopeRequest(CamelModel):
    club_id: UUID | None = None
    age_group_id: UUID | None = None
    team_id: UUID | None = None

    def to_input(self) -> ScopeInput:
        return ScopeInput(**self.model_dump())


class DrillLinkRequest(CamelModel):
    url: str | None = None
    title: str | None = None
    link_type: str | None = Field(None, examples=["youtube"])

    def to_input(self) -> DrillLinkInput:
        return DrillLinkInput(**self.model_dump())


class DrillRequest(CamelModel):
    name: str | None = None
    description: str | None = None
    duration_minutes: int | None = None
    category: str | None = Field(None, examples=["technical"])
    attributes: list[str] = Field(default_factory=list)
    equipment: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    variations: list[str] = Field(default_factory=list)
    links: list[DrillLinkRequest] = Field(default_factory=list)
    is_public: bool = True

    def _fields(self) -> dict:
        data = self.model_dump(exclude={"links", "scope"})
        data["links"] = [link.to_input() for link in self.links]
        return data


class CreateDrillRequest(DrillRequest):
    scope: ScopeRequest | None = None

    def to_command(self, auth_id: str) -> CreateDrill:
        return CreateDrill(
            scope=self.scope.to_input() if self.scope else None,
            auth_id=auth_id,
            **self._fields(),
        )


class UpdateDrillRequest(DrillRequest):
    def to_command(self, drill_id: UUID) -> UpdateDrill:
        return UpdateDrill(drill_id=drill_id, **self._fields())


class CreateDrillTemplateRequest(CamelModel):
    """Ordered drill list; category, attributes and duration are derived."""

    name: str | None = None
    description: str | None = None
    drill_ids: list[UUID] = Field(default_factory=list)
    is_public: bool = True
    scope: ScopeRequest | None = None

    def to_command(self, auth_id: str) -> CreateDrillTemplate:
        return CreateDrillTemplate(
            name=self.name,
            description=self.description,
            drill_ids=list(self.drill_ids),
            is_public=self.is_public,
            scope=self.scope.to_input() if self.scope else None,
            auth_id=auth_id,
        )


class UpdateDrillTemplateRequest(CamelModel):
    name: str | None = None
    description: str | None = None
    drill_ids: list[UUID] = Field(default_factory=list)
    is_public: bool = True

    def to_command(self, template_id: UUID) -> UpdateDrillTemplate:
        return UpdateDrillTemplate(template_id=template_id, **self.model_dump())


# =============================================================================
# Response Schemas
# =============================================================================


class ScopeResponse(CamelResponse):
    type: str
    club_id: UUID
    age_group_ids: list[UUID] = Field(default_factory=list)
    team_ids: list[UUID] = Field(default_factory=list)


class DrillLinkResponse(CamelResponse):
    id: UUID
    url: str
    title: str | None
    link_type: str


class DrillResponse(CamelResponse):
    id: UUID
    club_id: UUID
    name: str
    description: str | None
    duration_minutes: int | None
    category: str
    attributes: list[str]
    equipment: list[str]
    instructions: list[str]
    variations: list[str]
    links: list[DrillLinkResponse]
    scope: ScopeResponse
    is_public: bool
    created_by: UUID | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DrillsByScopeResponse(CamelResponse):
    """Drills at the requested scope plus those inherited from wider scopes."""

    drills: list[DrillResponse] = Field(default_factory=list)
    inherited_drills: list[DrillResponse] = Field(default_factory=list)
    total_count: int = 0


class DrillTemplateResponse(CamelResponse):
    id: UUID
    club_id: UUID
    name: str
    description: str | None
    drill_ids: list[UUID]
    total_duration_minutes: int
    category: str | None
    attributes: list[str]
    scope: ScopeResponse
    is_public: bool
    created_by: UUID | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DrillTemplatesByScopeResponse(CamelResponse):
    templates: list[DrillTemplateResponse] = Field(default_factory=list)
    inherited_templates: list[DrillTemplateResponse] = Field(default_factory=list)
    total_count: int = 0
