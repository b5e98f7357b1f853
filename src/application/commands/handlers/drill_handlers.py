"""Drill and drill template command handlers.

New drills and templates are linked at the most specific scope named by
the request. Template duration, category and attributes are derived from
the template's drills on every write.

Reference:
    - src/application/commands/drill_commands.py
    - src/domain/services/template_derivation.py
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.drill_commands import (
    CreateDrill,
    CreateDrillTemplate,
    DrillLinkInput,
    UpdateDrill,
    UpdateDrillTemplate,
)
from src.application.dtos.drill_dtos import (
    DrillResult,
    DrillTemplateResult,
    to_drill_result,
    to_template_result,
)
from src.application.services.caller_identity import resolve_caller_coach
from src.application.services.scope_resolver import ScopeResolver
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError, not_found
from src.core.result import Failure, Result, Success
from src.domain.entities.drill import Drill, DrillLink, DrillTemplate
from src.domain.enums import DrillCategory
from src.domain.protocols.coach_repository import CoachRepository
from src.domain.protocols.drill_repository import (
    DrillRepository,
    DrillTemplateRepository,
)
from src.domain.protocols.user_repository import UserRepository
from src.domain.services.template_derivation import summarise_drills


class DrillError:
    """Drill error messages."""

    INVALID_CATEGORY = (
        f"Invalid category. Must be one of: {', '.join(DrillCategory.labels())}."
    )
    DRILLS_REQUIRED = "A template needs at least one drill"


def _parse_category(label: str) -> DrillCategory | ValidationError:
    category = DrillCategory.from_label(label or "")
    if category is None:
        return ValidationError(
            code=ErrorCode.INVALID_ENUM_VALUE,
            message=DrillError.INVALID_CATEGORY,
            field="category",
        )
    return category


def _links(inputs: list[DrillLinkInput]) -> list[DrillLink]:
    return [
        DrillLink(id=uuid7(), url=link.url, link_type=link.link_type, title=link.title)
        for link in inputs
    ]


class CreateDrillHandler:
    """Handler for CreateDrill command.

    ``created_by`` is the caller's coach record, left empty when the caller
    is not a coach.
    """

    def __init__(
        self,
        drill_repo: DrillRepository,
        scope_resolver: ScopeResolver,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
    ) -> None:
        self._drill_repo = drill_repo
        self._scope_resolver = scope_resolver
        self._user_repo = user_repo
        self._coach_repo = coach_repo

    async def handle(self, cmd: CreateDrill) -> Result[DrillResult, DomainError]:
        category = _parse_category(cmd.category)
        if isinstance(category, ValidationError):
            return Failure(error=category)

        scope_result = await self._scope_resolver.resolve(cmd.scope)
        if isinstance(scope_result, Failure):
            return scope_result
        scope = scope_result.value

        coach = await resolve_caller_coach(
            cmd.auth_id, self._user_repo, self._coach_repo
        )

        drill = Drill(
            id=uuid7(),
            club_id=scope.club_id,
            name=cmd.name,
            category=category,
            duration_minutes=cmd.duration_minutes,
            description=cmd.description,
            attributes=list(cmd.attributes),
            equipment=list(cmd.equipment),
            instructions=list(cmd.instructions),
            variations=list(cmd.variations),
            links=_links(cmd.links),
            scope_links=[scope],
            is_public=cmd.is_public,
            created_by=coach.id if coach else None,
        )
        await self._drill_repo.save(drill)

        return Success(value=to_drill_result(drill))


class UpdateDrillHandler:
    """Handler for UpdateDrill command (full replace; scope unchanged)."""

    def __init__(self, drill_repo: DrillRepository) -> None:
        self._drill_repo = drill_repo

    async def handle(self, cmd: UpdateDrill) -> Result[DrillResult, DomainError]:
        drill = await self._drill_repo.find_by_id(cmd.drill_id)
        if drill is None:
            return Failure(
                error=not_found("Drill", cmd.drill_id, ErrorCode.DRILL_NOT_FOUND)
            )

        category = _parse_category(cmd.category)
        if isinstance(category, ValidationError):
            return Failure(error=category)

        drill.name = cmd.name
        drill.category = category
        drill.duration_minutes = cmd.duration_minutes
        drill.description = cmd.description
        drill.attributes = list(cmd.attributes)
        drill.equipment = list(cmd.equipment)
        drill.instructions = list(cmd.instructions)
        drill.variations = list(cmd.variations)
        drill.links = _links(cmd.links)
        drill.is_public = cmd.is_public

        await self._drill_repo.save(drill)

        return Success(value=to_drill_result(drill))


async def _load_drills(
    drill_repo: DrillRepository, drill_ids: list[UUID]
) -> Result[list[Drill], DomainError]:
    """Load drills in ``drill_ids`` order; NotFound for the first unknown id."""
    if not drill_ids:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=DrillError.DRILLS_REQUIRED,
                field="drillIds",
            )
        )
    found = {
        drill.id: drill
        for drill in await drill_repo.find_by_ids(list(dict.fromkeys(drill_ids)))
    }
    for drill_id in drill_ids:
        if drill_id not in found:
            return Failure(
                error=not_found("Drill", drill_id, ErrorCode.DRILL_NOT_FOUND)
            )
    return Success(value=[found[drill_id] for drill_id in drill_ids])


class CreateDrillTemplateHandler:
    """Handler for CreateDrillTemplate command.

    Dependencies (injected via constructor):
        - DrillTemplateRepository: For persistence
        - DrillRepository: Drills the template is derived from
        - ScopeResolver: Scope link of the new template
        - UserRepository, CoachRepository: ``created_by`` from the caller
    """

    def __init__(
        self,
        template_repo: DrillTemplateRepository,
        drill_repo: DrillRepository,
        scope_resolver: ScopeResolver,
        user_repo: UserRepository,
        coach_repo: CoachRepository,
    ) -> None:
        self._template_repo = template_repo
        self._drill_repo = drill_repo
        self._scope_resolver = scope_resolver
        self._user_repo = user_repo
        self._coach_repo = coach_repo

    async def handle(
        self, cmd: CreateDrillTemplate
    ) -> Result[DrillTemplateResult, DomainError]:
        """Handle CreateDrillTemplate command.

        Returns:
            Success(DrillTemplateResult): Template with derived fields.
            Failure(ValidationError): Bad scope or no drills.
            Failure(NotFoundError): Unknown club, age group, team or drill.
        """
        scope_result = await self._scope_resolver.resolve(cmd.scope)
        if isinstance(scope_result, Failure):
            return scope_result
        scope = scope_result.value

        drills_result = await _load_drills(self._drill_repo, cmd.drill_ids)
        if isinstance(drills_result, Failure):
            return drills_result
        summary = summarise_drills(drills_result.value)

        coach = await resolve_caller_coach(
            cmd.auth_id, self._user_repo, self._coach_repo
        )

        template = DrillTemplate(
            id=uuid7(),
            club_id=scope.club_id,
            name=cmd.name,
            drill_ids=list(cmd.drill_ids),
            description=cmd.description,
            total_duration_minutes=summary.total_duration_minutes,
            category=summary.category,
            attributes=summary.attributes,
            scope_links=[scope],
            is_public=cmd.is_public,
            created_by=coach.id if coach else None,
        )
        await self._template_repo.save(template)

        return Success(value=to_template_result(template))


class UpdateDrillTemplateHandler:
    """Handler for UpdateDrillTemplate command; derived fields are recomputed."""

    def __init__(
        self, template_repo: DrillTemplateRepository, drill_repo: DrillRepository
    ) -> None:
        self._template_repo = template_repo
        self._drill_repo = drill_repo

    async def handle(
        self, cmd: UpdateDrillTemplate
    ) -> Result[DrillTemplateResult, DomainError]:
        template = await self._template_repo.find_by_id(cmd.template_id)
        if template is None:
            return Failure(
                error=not_found(
                    "DrillTemplate", cmd.template_id, ErrorCode.DRILL_TEMPLATE_NOT_FOUND
                )
            )

        drills_result = await _load_drills(self._drill_repo, cmd.drill_ids)
        if isinstance(drills_result, Failure):
            return drills_result
        summary = summarise_drills(drills_result.value)

        template.name = cmd.name
        template.description = cmd.description
        template.drill_ids = list(cmd.drill_ids)
        template.total_duration_minutes = summary.total_duration_minutes
        template.category = summary.category
        template.attributes = summary.attributes
        template.is_public = cmd.is_public

        await self._template_repo.save(template)

        return Success(value=to_template_result(template))
