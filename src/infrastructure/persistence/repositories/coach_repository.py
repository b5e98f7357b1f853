"""CoachRepository - SQLAlchemy implementation of CoachRepository protocol."""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.coach import Coach, CoachTeam
from src.domain.enums.coach_role import CoachRole
from src.infrastructure.persistence.columns import dump_text_list, parse_text_list
from src.infrastructure.persistence.models.coach import Coach as CoachModel
from src.infrastructure.persistence.models.team import Team as TeamModel
from src.infrastructure.persistence.models.team import TeamCoach as TeamCoachModel
from src.infrastructure.persistence.transactions import atomic


class CoachRepository:
    """SQLAlchemy implementation of CoachRepository protocol.

    Coaches are returned with their team assignments (``Coach.teams``).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, coach_id: UUID) -> Coach | None:
        stmt = select(CoachModel).where(CoachModel.id == coach_id)
        return await self._one(stmt)

    async def find_by_user_id(self, user_id: UUID) -> Coach | None:
        """Find the coach record linked to a user account.

        Args:
            user_id: User's unique identifier.

        Returns:
            Coach if the user is a coach, None otherwise.
        """
        stmt = select(CoachModel).where(CoachModel.user_id == user_id).limit(1)
        return await self._one(stmt)

    async def find_first_active(self) -> Coach | None:
        stmt = (
            select(CoachModel)
            .where(CoachModel.is_archived == False)  # noqa: E712
            .order_by(CoachModel.created_at, CoachModel.id)
            .limit(1)
        )
        return await self._one(stmt)

    async def list_by_club(
        self, club_id: UUID, include_archived: bool = False
    ) -> list[Coach]:
        stmt = (
            select(CoachModel)
            .where(CoachModel.club_id == club_id)
            .order_by(CoachModel.last_name, CoachModel.first_name)
        )
        if not include_archived:
            stmt = stmt.where(CoachModel.is_archived == False)  # noqa: E712
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        teams = await self._load_teams([model.id for model in models])
        return [self._to_domain(model, teams.get(model.id, [])) for model in models]

    async def list_by_teams(self, team_ids: list[UUID]) -> list[Coach]:
        if not team_ids:
            return []
        assigned = select(TeamCoachModel.coach_id).where(
            TeamCoachModel.team_id.in_(team_ids)
        )
        stmt = (
            select(CoachModel)
            .where(
                CoachModel.id.in_(assigned),
                CoachModel.is_archived == False,  # noqa: E712
            )
            .order_by(CoachModel.first_name, CoachModel.last_name)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        teams = await self._load_teams([model.id for model in models])
        return [self._to_domain(model, teams.get(model.id, [])) for model in models]

    async def save(self, coach: Coach) -> None:
        """Create or update coach and sync its team assignments atomically.

        Args:
            coach: Coach entity to persist; ``coach.teams`` is authoritative.
        """
        async with atomic(self.session):
            stmt = select(CoachModel).where(CoachModel.id == coach.id)
            result = await self.session.execute(stmt)
            existing = result.scalar_one_or_none()

            if existing is None:
                model = CoachModel(id=coach.id, club_id=coach.club_id)
                self._update_model(model, coach)
                self.session.add(model)
                await self.session.flush()
            else:
                self._update_model(existing, coach)

            assignments = await self.session.execute(
                select(TeamCoachModel).where(TeamCoachModel.coach_id == coach.id)
            )
            current = {row.team_id: row for row in assignments.scalars().all()}
            wanted = {team.team_id: team for team in coach.teams}

            for team_id, row in current.items():
                if team_id not in wanted:
                    await self.session.delete(row)
                else:
                    row.role = int(wanted[team_id].role)
            for team_id, team in wanted.items():
                if team_id not in current:
                    self.session.add(
                        TeamCoachModel(
                            team_id=team_id, coach_id=coach.id, role=int(team.role)
                        )
                    )

    async def _one(self, stmt: Select[tuple[CoachModel]]) -> Coach | None:
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        teams = await self._load_teams([model.id])
        return self._to_domain(model, teams.get(model.id, []))

    async def _load_teams(self, coach_ids: list[UUID]) -> dict[UUID, list[CoachTeam]]:
        if not coach_ids:
            return {}
        stmt = (
            select(TeamCoachModel.coach_id, TeamModel.id, TeamModel.name, TeamCoachModel.role)
            .join(TeamModel, TeamModel.id == TeamCoachModel.team_id)
            .where(TeamCoachModel.coach_id.in_(coach_ids))
            .order_by(TeamModel.name)
        )
        result = await self.session.execute(stmt)

        teams: dict[UUID, list[CoachTeam]] = defaultdict(list)
        for coach_id, team_id, name, role in result.all():
            teams[coach_id].append(
                CoachTeam(team_id=team_id, name=name, role=CoachRole.from_code(role))
            )
        return teams

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: CoachModel, teams: list[CoachTeam]) -> Coach:
        return Coach(
            id=model.id,
            club_id=model.club_id,
            user_id=model.user_id,
            first_name=model.first_name,
            last_name=model.last_name,
            photo=model.photo,
            email=model.email,
            phone=model.phone,
            date_of_birth=model.date_of_birth,
            association_id=model.association_id,
            role=CoachRole.from_code(model.role),
            biography=model.biography,
            specializations=parse_text_list(model.specializations),
            teams=teams,
            is_archived=model.is_archived,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: CoachModel, entity: Coach) -> None:
        model.user_id = entity.user_id
        model.first_name = entity.first_name
        model.last_name = entity.last_name
        model.photo = entity.photo
        model.email = entity.email
        model.phone = entity.phone
        model.date_of_birth = entity.date_of_birth
        model.association_id = entity.association_id
        model.role = int(entity.role)
        model.biography = entity.biography
        model.specializations = dump_text_list(entity.specializations)
        model.is_archived = entity.is_archived
