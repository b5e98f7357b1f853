"""DrillRepository and DrillTemplateRepository - SQLAlchemy implementations.

Drills and templates are loaded together with their scope links (and, for
drills, their external links) using one extra query per child table rather
than one per row.
"""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.drill import Drill, DrillLink, DrillTemplate, ScopeLink
from src.domain.enums.drill_category import DrillCategory
from src.infrastructure.persistence.columns import (
    dump_text_list,
    dump_uuid_list,
    parse_text_list,
    parse_uuid_list,
)
from src.infrastructure.persistence.models.drill import Drill as DrillModel
from src.infrastructure.persistence.models.drill import DrillLink as DrillLinkModel
from src.infrastructure.persistence.models.drill import (
    DrillScopeLink as DrillScopeLinkModel,
)
from src.infrastructure.persistence.models.drill import (
    DrillTemplate as DrillTemplateModel,
)
from src.infrastructure.persistence.models.drill import (
    DrillTemplateScopeLink as DrillTemplateScopeLinkModel,
)
from src.infrastructure.persistence.transactions import atomic


class DrillRepository:
    """SQLAlchemy implementation of DrillRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, drill_id: UUID) -> Drill | None:
        drills = await self._load(select(DrillModel).where(DrillModel.id == drill_id))
        return drills[0] if drills else None

    async def find_by_ids(self, drill_ids: list[UUID]) -> list[Drill]:
        if not drill_ids:
            return []
        return await self._load(select(DrillModel).where(DrillModel.id.in_(drill_ids)))

    async def list_by_club(self, club_id: UUID) -> list[Drill]:
        """List the club's drills ordered by name.

        Args:
            club_id: Owning club.

        Returns:
            Drills with links and scope links loaded.
        """
        stmt = (
            select(DrillModel)
            .where(DrillModel.club_id == club_id)
            .order_by(DrillModel.name)
        )
        return await self._load(stmt)

    async def save(self, drill: Drill) -> None:
        """Create or update drill, replacing links and scope links atomically.

        Args:
            drill: Drill entity to persist.
        """
        async with atomic(self.session):
            stmt = select(DrillModel).where(DrillModel.id == drill.id)
            result = await self.session.execute(stmt)
            existing = result.scalar_one_or_none()

            if existing is None:
                model = DrillModel(id=drill.id, club_id=drill.club_id)
                self._update_model(model, drill)
                self.session.add(model)
                await self.session.flush()
            else:
                self._update_model(existing, drill)

            await self.session.execute(
                delete(DrillLinkModel).where(DrillLinkModel.drill_id == drill.id)
            )
            await self.session.execute(
                delete(DrillScopeLinkModel).where(
                    DrillScopeLinkModel.drill_id == drill.id
                )
            )
            for link in drill.links:
                self.session.add(
                    DrillLinkModel(
                        drill_id=drill.id,
                        url=link.url,
                        title=link.title,
                        link_type=link.link_type,
                    )
                )
            for scope in drill.scope_links:
                self.session.add(
                    DrillScopeLinkModel(
                        drill_id=drill.id,
                        club_id=scope.club_id,
                        age_group_id=scope.age_group_id,
                        team_id=scope.team_id,
                    )
                )

    async def _load(self, stmt: Select[tuple[DrillModel]]) -> list[Drill]:
        result = await self.session.execute(stmt)
        models = result.scalars().all()
        if not models:
            return []

        ids = [model.id for model in models]
        links: dict[UUID, list[DrillLink]] = defaultdict(list)
        link_rows = await self.session.execute(
            select(DrillLinkModel)
            .where(DrillLinkModel.drill_id.in_(ids))
            .order_by(DrillLinkModel.created_at)
        )
        for row in link_rows.scalars().all():
            links[row.drill_id].append(
                DrillLink(id=row.id, url=row.url, title=row.title, link_type=row.link_type)
            )

        scopes: dict[UUID, list[ScopeLink]] = defaultdict(list)
        scope_rows = await self.session.execute(
            select(DrillScopeLinkModel)
            .where(DrillScopeLinkModel.drill_id.in_(ids))
            .order_by(DrillScopeLinkModel.created_at)
        )
        for row in scope_rows.scalars().all():
            scopes[row.drill_id].append(
                ScopeLink(
                    club_id=row.club_id,
                    age_group_id=row.age_group_id,
                    team_id=row.team_id,
                )
            )

        drills = []
        for model in models:
            drill = self._to_domain(model)
            drill.links = links.get(model.id, [])
            drill.scope_links = scopes.get(model.id, [])
            drills.append(drill)
        return drills

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: DrillModel) -> Drill:
        return Drill(
            id=model.id,
            club_id=model.club_id,
            name=model.name,
            description=model.description,
            duration_minutes=model.duration_minutes,
            category=DrillCategory.from_code(model.category),
            attributes=parse_text_list(model.attributes),
            equipment=parse_text_list(model.equipment),
            instructions=parse_text_list(model.instructions),
            variations=parse_text_list(model.variations),
            is_public=model.is_public,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: DrillModel, entity: Drill) -> None:
        model.name = entity.name
        model.description = entity.description
        model.duration_minutes = entity.duration_minutes
        model.category = int(entity.category)
        model.attributes = dump_text_list(entity.attributes)
        model.equipment = dump_text_list(entity.equipment)
        model.instructions = dump_text_list(entity.instructions)
        model.variations = dump_text_list(entity.variations)
        model.is_public = entity.is_public
        model.created_by = entity.created_by


class DrillTemplateRepository:
    """SQLAlchemy implementation of DrillTemplateRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, template_id: UUID) -> DrillTemplate | None:
        templates = await self._load(
            select(DrillTemplateModel).where(DrillTemplateModel.id == template_id)
        )
        return templates[0] if templates else None

    async def list_by_club(self, club_id: UUID) -> list[DrillTemplate]:
        stmt = (
            select(DrillTemplateModel)
            .where(DrillTemplateModel.club_id == club_id)
            .order_by(DrillTemplateModel.name)
        )
        return await self._load(stmt)

    async def save(self, template: DrillTemplate) -> None:
        """Create or update template, replacing its scope links atomically."""
        async with atomic(self.session):
            stmt = select(DrillTemplateModel).where(
                DrillTemplateModel.id == template.id
            )
            result = await self.session.execute(stmt)
            existing = result.scalar_one_or_none()

            if existing is None:
                model = DrillTemplateModel(id=template.id, club_id=template.club_id)
                self._update_model(model, template)
                self.session.add(model)
                await self.session.flush()
            else:
                self._update_model(existing, template)

            await self.session.execute(
                delete(DrillTemplateScopeLinkModel).where(
                    DrillTemplateScopeLinkModel.template_id == template.id
                )
            )
            for scope in template.scope_links:
                self.session.add(
                    DrillTemplateScopeLinkModel(
                        template_id=template.id,
                        club_id=scope.club_id,
                        age_group_id=scope.age_group_id,
                        team_id=scope.team_id,
                    )
                )

    async def _load(
        self, stmt: Select[tuple[DrillTemplateModel]]
    ) -> list[DrillTemplate]:
        result = await self.session.execute(stmt)
        models = result.scalars().all()
        if not models:
            return []

        scopes: dict[UUID, list[ScopeLink]] = defaultdict(list)
        scope_rows = await self.session.execute(
            select(DrillTemplateScopeLinkModel)
            .where(
                DrillTemplateScopeLinkModel.template_id.in_(
                    [model.id for model in models]
                )
            )
            .order_by(DrillTemplateScopeLinkModel.created_at)
        )
        for row in scope_rows.scalars().all():
            scopes[row.template_id].append(
                ScopeLink(
                    club_id=row.club_id,
                    age_group_id=row.age_group_id,
                    team_id=row.team_id,
                )
            )

        templates = []
        for model in models:
            template = self._to_domain(model)
            template.scope_links = scopes.get(model.id, [])
            templates.append(template)
        return templates

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: DrillTemplateModel) -> DrillTemplate:
        return DrillTemplate(
            id=model.id,
            club_id=model.club_id,
            name=model.name,
            description=model.description,
            drill_ids=parse_uuid_list(model.drill_ids),
            total_duration_minutes=model.total_duration_minutes,
            category=(
                DrillCategory.from_code(model.category)
                if model.category is not None
                else None
            ),
            attributes=parse_text_list(model.attributes),
            is_public=model.is_public,
            created_by=model.created_by,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: DrillTemplateModel, entity: DrillTemplate) -> None:
        model.name = entity.name
        model.description = entity.description
        model.drill_ids = dump_uuid_list(entity.drill_ids)
        model.total_duration_minutes = entity.total_duration_minutes
        model.category = int(entity.category) if entity.category is not None else None
        model.attributes = dump_text_list(entity.attributes)
        model.is_public = entity.is_public
        model.created_by = entity.created_by
