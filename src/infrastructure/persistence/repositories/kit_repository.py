"""KitRepository - SQLAlchemy implementation of KitRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.kit import Kit
from src.domain.enums.kit_type import KitType
from src.infrastructure.persistence.models.kit import Kit as KitModel


class KitRepository:
    """SQLAlchemy implementation of KitRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, kit_id: UUID) -> Kit | None:
        stmt = select(KitModel).where(KitModel.id == kit_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def list_by_club(self, club_id: UUID) -> list[Kit]:
        """List club-level kits (no team) ordered by type, then name."""
        stmt = (
            select(KitModel)
            .where(KitModel.club_id == club_id, KitModel.team_id.is_(None))
            .order_by(KitModel.type, KitModel.name)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_team(self, team_id: UUID) -> list[Kit]:
        stmt = (
            select(KitModel)
            .where(KitModel.team_id == team_id)
            .order_by(KitModel.type, KitModel.name)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, kit: Kit) -> None:
        stmt = select(KitModel).where(KitModel.id == kit.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            model = KitModel(id=kit.id, club_id=kit.club_id, team_id=kit.team_id)
            self._update_model(model, kit)
            self.session.add(model)
        else:
            self._update_model(existing, kit)

        await self.session.commit()

    async def delete(self, kit_id: UUID) -> None:
        """Remove kit from database (hard delete).

        Args:
            kit_id: Kit's unique identifier.
        """
        await self.session.execute(delete(KitModel).where(KitModel.id == kit_id))
        await self.session.commit()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: KitModel) -> Kit:
        return Kit(
            id=model.id,
            club_id=model.club_id,
            team_id=model.team_id,
            name=model.name,
            kit_type=KitType.from_code(model.type),
            shirt_color=model.shirt_color,
            shorts_color=model.shorts_color,
            socks_color=model.socks_color,
            season=model.season,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: KitModel, entity: Kit) -> None:
        model.name = entity.name
        model.type = int(entity.kit_type)
        model.shirt_color = entity.shirt_color
        model.shorts_color = entity.shorts_color
        model.socks_color = entity.socks_color
        model.season = entity.season
        model.is_active = entity.is_active
