"""AgeGroupRepository - SQLAlchemy implementation of AgeGroupRepository protocol."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.age_group import AgeGroup, AgeGroupSummary
from src.domain.enums.level import Level
from src.infrastructure.persistence.columns import dump_text_list, parse_text_list
from src.infrastructure.persistence.models.age_group import AgeGroup as AgeGroupModel
from src.infrastructure.persistence.models.team import Team as TeamModel


class AgeGroupRepository:
    """SQLAlchemy implementation of AgeGroupRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, age_group_id: UUID) -> AgeGroup | None:
        stmt = select(AgeGroupModel).where(AgeGroupModel.id == age_group_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def list_by_club(
        self, club_id: UUID, include_archived: bool = False
    ) -> list[AgeGroupSummary]:
        """List a club's age groups ordered by name with active team counts.

        Args:
            club_id: Owning club.
            include_archived: Include archived age groups.

        Returns:
            List of summaries (empty if none found).
        """
        team_count = (
            select(func.count(TeamModel.id))
            .where(
                TeamModel.age_group_id == AgeGroupModel.id,
                TeamModel.is_archived == False,  # noqa: E712
            )
            .correlate(AgeGroupModel)
            .scalar_subquery()
        )
        stmt = (
            select(AgeGroupModel, team_count)
            .where(AgeGroupModel.club_id == club_id)
            .order_by(AgeGroupModel.name)
        )
        if not include_archived:
            stmt = stmt.where(AgeGroupModel.is_archived == False)  # noqa: E712

        result = await self.session.execute(stmt)
        return [
            AgeGroupSummary(age_group=self._to_domain(model), team_count=count or 0)
            for model, count in result.all()
        ]

    async def save(self, age_group: AgeGroup) -> None:
        """Create or update age group in database.

        Args:
            age_group: AgeGroup entity to persist.
        """
        stmt = select(AgeGroupModel).where(AgeGroupModel.id == age_group.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            model = AgeGroupModel(id=age_group.id, club_id=age_group.club_id)
            self._update_model(model, age_group)
            self.session.add(model)
        else:
            self._update_model(existing, age_group)

        await self.session.commit()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: AgeGroupModel) -> AgeGroup:
        return AgeGroup(
            id=model.id,
            club_id=model.club_id,
            name=model.name,
            code=model.code,
            level=Level.from_code(model.level),
            season=model.season,
            seasons=parse_text_list(model.seasons),
            default_season=model.default_season,
            default_squad_size=model.default_squad_size,
            description=model.description,
            is_archived=model.is_archived,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: AgeGroupModel, entity: AgeGroup) -> None:
        """Update mutable fields; ``club_id`` is immutable."""
        model.name = entity.name
        model.code = entity.code
        model.level = int(entity.level)
        model.season = entity.season
        model.seasons = dump_text_list(entity.seasons)
        model.default_season = entity.default_season
        model.default_squad_size = entity.default_squad_size
        model.description = entity.description
        model.is_archived = entity.is_archived
