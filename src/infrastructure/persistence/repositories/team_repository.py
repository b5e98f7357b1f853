"""TeamRepository - SQLAlchemy implementation of TeamRepository protocol."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.team import Team
from src.domain.enums.level import Level
from src.infrastructure.persistence.models.team import Team as TeamModel


class TeamRepository:
    """SQLAlchemy implementation of TeamRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, team_id: UUID) -> Team | None:
        """Find team by ID.

        Args:
            team_id: Team's unique identifier.

        Returns:
            Domain Team entity if found, None otherwise.
        """
        stmt = select(TeamModel).where(TeamModel.id == team_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_ids(self, team_ids: list[UUID]) -> list[Team]:
        if not team_ids:
            return []
        stmt = select(TeamModel).where(TeamModel.id.in_(team_ids))
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_club(
        self, club_id: UUID, include_archived: bool = False
    ) -> list[Team]:
        stmt = (
            select(TeamModel)
            .where(TeamModel.club_id == club_id)
            .order_by(TeamModel.name)
        )
        if not include_archived:
            stmt = stmt.where(TeamModel.is_archived == False)  # noqa: E712
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_age_group(
        self, age_group_id: UUID, include_archived: bool = False
    ) -> list[Team]:
        stmt = (
            select(TeamModel)
            .where(TeamModel.age_group_id == age_group_id)
            .order_by(TeamModel.name)
        )
        if not include_archived:
            stmt = stmt.where(TeamModel.is_archived == False)  # noqa: E712
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, team: Team) -> None:
        """Create or update team in database.

        Args:
            team: Team entity to persist.
        """
        stmt = select(TeamModel).where(TeamModel.id == team.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            model = TeamModel(
                id=team.id, club_id=team.club_id, age_group_id=team.age_group_id
            )
            self._update_model(model, team)
            self.session.add(model)
        else:
            self._update_model(existing, team)

        await self.session.commit()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: TeamModel) -> Team:
        return Team(
            id=model.id,
            club_id=model.club_id,
            age_group_id=model.age_group_id,
            name=model.name,
            short_name=model.short_name,
            level=Level.from_code(model.level),
            season=model.season,
            primary_color=model.primary_color,
            secondary_color=model.secondary_color,
            is_archived=model.is_archived,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: TeamModel, entity: Team) -> None:
        """Update mutable fields; club and age group are immutable."""
        model.name = entity.name
        model.short_name = entity.short_name
        model.level = int(entity.level)
        model.season = entity.season
        model.primary_color = entity.primary_color
        model.secondary_color = entity.secondary_color
        model.is_archived = entity.is_archived
