"""MatchRepository - SQLAlchemy implementation of MatchRepository protocol."""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.match import Match, PerformanceRating
from src.domain.enums.match_status import MatchStatus
from src.infrastructure.persistence.models.match import Match as MatchModel
from src.infrastructure.persistence.models.match import (
    MatchPerformanceRating as MatchPerformanceRatingModel,
)
from src.infrastructure.persistence.transactions import atomic


class MatchRepository:
    """SQLAlchemy implementation of MatchRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, match_id: UUID) -> Match | None:
        """Find match by ID with its performance ratings.

        Args:
            match_id: Match's unique identifier.

        Returns:
            Domain Match entity if found, None otherwise.
        """
        stmt = select(MatchModel).where(MatchModel.id == match_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        ratings = await self.session.execute(
            select(MatchPerformanceRatingModel)
            .where(MatchPerformanceRatingModel.match_id == match_id)
            .order_by(MatchPerformanceRatingModel.rating.desc())
        )
        match = self._to_domain(model)
        match.performance_ratings = [
            PerformanceRating(player_id=row.player_id, rating=row.rating)
            for row in ratings.scalars().all()
        ]
        return match

    async def list_by_team(self, team_id: UUID) -> list[Match]:
        stmt = (
            select(MatchModel)
            .where(MatchModel.team_id == team_id)
            .order_by(MatchModel.match_date.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_by_teams(self, team_ids: list[UUID]) -> list[Match]:
        if not team_ids:
            return []
        stmt = (
            select(MatchModel)
            .where(MatchModel.team_id.in_(team_ids))
            .order_by(MatchModel.match_date.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_ratings(self, team_id: UUID) -> list[tuple[UUID, float]]:
        stmt = (
            select(
                MatchPerformanceRatingModel.player_id,
                MatchPerformanceRatingModel.rating,
            )
            .join(MatchModel, MatchModel.id == MatchPerformanceRatingModel.match_id)
            .where(MatchModel.team_id == team_id)
        )
        result = await self.session.execute(stmt)
        return [(player_id, rating) for player_id, rating in result.all()]

    async def list_rated_for_player(
        self, player_id: UUID, limit: int
    ) -> list[tuple[Match, float]]:
        stmt = (
            select(MatchModel, MatchPerformanceRatingModel.rating)
            .join(
                MatchPerformanceRatingModel,
                MatchPerformanceRatingModel.match_id == MatchModel.id,
            )
            .where(
                MatchPerformanceRatingModel.player_id == player_id,
                MatchModel.status == int(MatchStatus.COMPLETED),
            )
            .order_by(MatchModel.match_date.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(self._to_domain(model), rating) for model, rating in result.all()]

    async def save(self, match: Match) -> None:
        """Create or update match, replacing its ratings atomically.

        Args:
            match: Match entity to persist.
        """
        async with atomic(self.session):
            stmt = select(MatchModel).where(MatchModel.id == match.id)
            result = await self.session.execute(stmt)
            existing = result.scalar_one_or_none()

            if existing is None:
                model = MatchModel(id=match.id, team_id=match.team_id)
                self._update_model(model, match)
                self.session.add(model)
                await self.session.flush()
            else:
                self._update_model(existing, match)

            await self.session.execute(
                delete(MatchPerformanceRatingModel).where(
                    MatchPerformanceRatingModel.match_id == match.id
                )
            )
            for rating in match.performance_ratings:
                self.session.add(
                    MatchPerformanceRatingModel(
                        match_id=match.id,
                        player_id=rating.player_id,
                        rating=rating.rating,
                    )
                )

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: MatchModel) -> Match:
        return Match(
            id=model.id,
            team_id=model.team_id,
            season_id=model.season_id,
            squad_size=model.squad_size,
            opposition=model.opposition,
            match_date=model.match_date,
            meet_time=model.meet_time,
            kick_off_time=model.kick_off_time,
            location=model.location,
            is_home=model.is_home,
            competition=model.competition,
            primary_kit_id=model.primary_kit_id,
            secondary_kit_id=model.secondary_kit_id,
            goalkeeper_kit_id=model.goalkeeper_kit_id,
            home_score=model.home_score,
            away_score=model.away_score,
            status=MatchStatus.from_code(model.status),
            notes=model.notes,
            weather_condition=model.weather_condition,
            weather_temperature=model.weather_temperature,
            is_locked=model.is_locked,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: MatchModel, entity: Match) -> None:
        """Update mutable fields; ``team_id`` is immutable."""
        model.season_id = entity.season_id
        model.squad_size = entity.squad_size
        model.opposition = entity.opposition
        model.match_date = entity.match_date
        model.meet_time = entity.meet_time
        model.kick_off_time = entity.kick_off_time
        model.location = entity.location
        model.is_home = entity.is_home
        model.competition = entity.competition
        model.primary_kit_id = entity.primary_kit_id
        model.secondary_kit_id = entity.secondary_kit_id
        model.goalkeeper_kit_id = entity.goalkeeper_kit_id
        model.home_score = entity.home_score
        model.away_score = entity.away_score
        model.status = int(entity.status)
        model.notes = entity.notes
        model.weather_condition = entity.weather_condition
        model.weather_temperature = entity.weather_temperature
        model.is_locked = entity.is_locked
