"""ClubRepository - SQLAlchemy implementation of ClubRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Club entities and database ClubModel.
"""

from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.club import Club, ClubCounts
from src.infrastructure.persistence.columns import dump_text_list, parse_text_list
from src.infrastructure.persistence.models.age_group import AgeGroup as AgeGroupModel
from src.infrastructure.persistence.models.club import Club as ClubModel
from src.infrastructure.persistence.models.coach import Coach as CoachModel
from src.infrastructure.persistence.models.player import Player as PlayerModel
from src.infrastructure.persistence.models.team import Team as TeamModel


class ClubRepository:
    """SQLAlchemy implementation of ClubRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with get_session() as session:
        ...     repo = ClubRepository(session)
        ...     club = await repo.find_by_id(club_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, club_id: UUID) -> Club | None:
        """Find club by ID.

        Args:
            club_id: Club's unique identifier.

        Returns:
            Domain Club entity if found, None otherwise.
        """
        stmt = select(ClubModel).where(ClubModel.id == club_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def list_all(self) -> list[Club]:
        stmt = select(ClubModel).order_by(ClubModel.name)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, club: Club) -> None:
        """Create or update club in database.

        Args:
            club: Club entity to persist.
        """
        stmt = select(ClubModel).where(ClubModel.id == club.id)
        result = await self.session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            model = ClubModel(id=club.id)
            self._update_model(model, club)
            self.session.add(model)
        else:
            self._update_model(existing, club)

        await self.session.commit()

    async def get_counts(self, club_id: UUID) -> ClubCounts:
        """Count the club's non-archived age groups, teams, players and coaches."""
        return ClubCounts(
            age_group_count=await self._count(
                select(func.count(AgeGroupModel.id)).where(
                    AgeGroupModel.club_id == club_id,
                    AgeGroupModel.is_archived == False,  # noqa: E712
                )
            ),
            team_count=await self._count(
                select(func.count(TeamModel.id)).where(
                    TeamModel.club_id == club_id,
                    TeamModel.is_archived == False,  # noqa: E712
                )
            ),
            player_count=await self._count(
                select(func.count(PlayerModel.id)).where(
                    PlayerModel.club_id == club_id,
                    PlayerModel.is_archived == False,  # noqa: E712
                )
            ),
            coach_count=await self._count(
                select(func.count(CoachModel.id)).where(
                    CoachModel.club_id == club_id,
                    CoachModel.is_archived == False,  # noqa: E712
                )
            ),
        )

    async def _count(self, stmt: Select[tuple[int]]) -> int:
        result = await self.session.execute(stmt)
        return result.scalar_one()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: ClubModel) -> Club:
        """Convert database model to domain entity.

        Principles are parsed defensively (malformed JSON gives an empty list).
        """
        return Club(
            id=model.id,
            name=model.name,
            short_name=model.short_name,
            logo=model.logo,
            primary_color=model.primary_color,
            secondary_color=model.secondary_color,
            accent_color=model.accent_color,
            city=model.city,
            country=model.country,
            venue=model.venue,
            address=model.address,
            founded=model.founded,
            history=model.history,
            ethos=model.ethos,
            principles=parse_text_list(model.principles),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: ClubModel, entity: Club) -> None:
        model.name = entity.name
        model.short_name = entity.short_name
        model.logo = entity.logo
        model.primary_color = entity.primary_color
        model.secondary_color = entity.secondary_color
        model.accent_color = entity.accent_color
        model.city = entity.city
        model.country = entity.country
        model.venue = entity.venue
        model.address = entity.address
        model.founded = entity.founded
        model.history = entity.history
        model.ethos = entity.ethos
        model.principles = dump_text_list(entity.principles)
