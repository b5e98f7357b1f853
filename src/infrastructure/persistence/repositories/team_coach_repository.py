"""TeamCoachRepository - coach assignments (``team_coaches``)."""

from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.team import TeamCoachAssignment, TeamStaffMember
from src.domain.enums.coach_role import CoachRole
from src.infrastructure.persistence.models.coach import Coach as CoachModel
from src.infrastructure.persistence.models.team import TeamCoach as TeamCoachModel


class TeamCoachRepository:
    """SQLAlchemy implementation of TeamCoachRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, team_id: UUID, coach_id: UUID) -> TeamCoachAssignment | None:
        stmt = select(TeamCoachModel).where(
            TeamCoachModel.team_id == team_id,
            TeamCoachModel.coach_id == coach_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return TeamCoachAssignment(
            team_id=model.team_id,
            coach_id=model.coach_id,
            role=CoachRole.from_code(model.role),
        )

    async def list_staff(self, team_id: UUID) -> list[TeamStaffMember]:
        """List a team's coaches ordered by role, then last name.

        Args:
            team_id: Team's unique identifier.

        Returns:
            Staff members, archived coaches included (flagged).
        """
        stmt = (
            select(CoachModel, TeamCoachModel.role)
            .join(TeamCoachModel, TeamCoachModel.coach_id == CoachModel.id)
            .where(TeamCoachModel.team_id == team_id)
            .order_by(TeamCoachModel.role, CoachModel.last_name)
        )
        result = await self.session.execute(stmt)
        return [
            TeamStaffMember(
                coach_id=coach.id,
                first_name=coach.first_name,
                last_name=coach.last_name,
                photo_url=coach.photo,
                role=CoachRole.from_code(role),
                is_archived=coach.is_archived,
            )
            for coach, role in result.all()
        ]

    async def count_coaches(self, team_ids: list[UUID]) -> int:
        if not team_ids:
            return 0
        stmt = (
            select(func.count(func.distinct(TeamCoachModel.coach_id)))
            .join(CoachModel, CoachModel.id == TeamCoachModel.coach_id)
            .where(
                TeamCoachModel.team_id.in_(team_ids),
                CoachModel.is_archived == False,  # noqa: E712
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def add(self, assignment: TeamCoachAssignment) -> None:
        self.session.add(
            TeamCoachModel(
                team_id=assignment.team_id,
                coach_id=assignment.coach_id,
                role=int(assignment.role),
            )
        )
        await self.session.commit()

    async def update_role(self, team_id: UUID, coach_id: UUID, role: CoachRole) -> None:
        stmt = (
            update(TeamCoachModel)
            .where(
                TeamCoachModel.team_id == team_id,
                TeamCoachModel.coach_id == coach_id,
            )
            .values(role=int(role))
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def remove(self, team_id: UUID, coach_id: UUID) -> None:
        stmt = delete(TeamCoachModel).where(
            TeamCoachModel.team_id == team_id,
            TeamCoachModel.coach_id == coach_id,
        )
        await self.session.execute(stmt)
        await self.session.commit()
