"""TeamMembershipRepository - squad memberships (``player_teams``).

Adapter for hexagonal architecture. Every write that changes which teams
a player is on also rebuilds ``player_age_groups`` in the same transaction.
"""

from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.team import TeamMember, TeamMembership
from src.infrastructure.persistence.columns import parse_text_list
from src.infrastructure.persistence.models.player import Player as PlayerModel
from src.infrastructure.persistence.models.player import (
    PlayerAgeGroup as PlayerAgeGroupModel,
)
from src.infrastructure.persistence.models.player import PlayerTeam as PlayerTeamModel
from src.infrastructure.persistence.models.team import Team as TeamModel
from src.infrastructure.persistence.repositories.player_repository import (
    rebuild_age_groups,
)
from src.infrastructure.persistence.transactions import atomic


class TeamMembershipRepository:
    """SQLAlchemy implementation of TeamMembershipRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(self, team_id: UUID, player_id: UUID) -> TeamMembership | None:
        stmt = select(PlayerTeamModel).where(
            PlayerTeamModel.team_id == team_id,
            PlayerTeamModel.player_id == player_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_squad_number(
        self, team_id: UUID, squad_number: int
    ) -> TeamMembership | None:
        stmt = select(PlayerTeamModel).where(
            PlayerTeamModel.team_id == team_id,
            PlayerTeamModel.squad_number == squad_number,
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model is not None else None

    async def list_members(self, team_id: UUID) -> list[TeamMember]:
        """List a team's non-archived players in squad order.

        Players without a squad number sort after numbered players.
        """
        stmt = (
            select(PlayerModel, PlayerTeamModel.squad_number)
            .join(PlayerTeamModel, PlayerTeamModel.player_id == PlayerModel.id)
            .where(
                PlayerTeamModel.team_id == team_id,
                PlayerModel.is_archived == False,  # noqa: E712
            )
            .order_by(
                PlayerTeamModel.squad_number.is_(None),
                PlayerTeamModel.squad_number,
                PlayerModel.last_name,
                PlayerModel.first_name,
            )
        )
        result = await self.session.execute(stmt)
        return [
            TeamMember(
                player_id=player.id,
                first_name=player.first_name,
                last_name=player.last_name,
                photo_url=player.photo,
                preferred_positions=parse_text_list(player.preferred_positions),
                overall_rating=player.overall_rating,
                squad_number=squad_number,
                date_of_birth=player.date_of_birth,
            )
            for player, squad_number in result.all()
        ]

    async def count_players(self, team_ids: list[UUID]) -> int:
        if not team_ids:
            return 0
        stmt = (
            select(func.count(func.distinct(PlayerTeamModel.player_id)))
            .join(PlayerModel, PlayerModel.id == PlayerTeamModel.player_id)
            .where(
                PlayerTeamModel.team_id.in_(team_ids),
                PlayerModel.is_archived == False,  # noqa: E712
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def add(self, membership: TeamMembership) -> None:
        """Insert the membership and link the player to the team's age group.

        Args:
            membership: Membership to create.
        """
        async with atomic(self.session):
            self.session.add(
                PlayerTeamModel(
                    player_id=membership.player_id,
                    team_id=membership.team_id,
                    squad_number=membership.squad_number,
                )
            )

            team_stmt = select(TeamModel.age_group_id).where(
                TeamModel.id == membership.team_id
            )
            age_group_id = (await self.session.execute(team_stmt)).scalar_one()

            link_stmt = select(PlayerAgeGroupModel.id).where(
                PlayerAgeGroupModel.player_id == membership.player_id,
                PlayerAgeGroupModel.age_group_id == age_group_id,
            )
            if (await self.session.execute(link_stmt)).first() is None:
                self.session.add(
                    PlayerAgeGroupModel(
                        player_id=membership.player_id, age_group_id=age_group_id
                    )
                )

    async def update_squad_number(
        self, team_id: UUID, player_id: UUID, squad_number: int | None
    ) -> None:
        stmt = (
            update(PlayerTeamModel)
            .where(
                PlayerTeamModel.team_id == team_id,
                PlayerTeamModel.player_id == player_id,
            )
            .values(squad_number=squad_number)
        )
        await self.session.execute(stmt)
        await self.session.commit()

    async def remove(self, team_id: UUID, player_id: UUID) -> None:
        """Delete the membership and rebuild the player's age groups atomically."""
        async with atomic(self.session):
            await self.session.execute(
                delete(PlayerTeamModel).where(
                    PlayerTeamModel.team_id == team_id,
                    PlayerTeamModel.player_id == player_id,
                )
            )
            await rebuild_age_groups(self.session, player_id)

    def _to_domain(self, model: PlayerTeamModel) -> TeamMembership:
        return TeamMembership(
            team_id=model.team_id,
            player_id=model.player_id,
            squad_number=model.squad_number,
        )
