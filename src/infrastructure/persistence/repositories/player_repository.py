"""PlayerRepository - SQLAlchemy implementation of PlayerRepository protocol.

A player's age groups (``player_age_groups``) are never edited directly:
they are rebuilt from the teams the player is on whenever memberships
change, see ``rebuild_age_groups``.
"""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.player import EmergencyContact, Player
from src.infrastructure.persistence.columns import dump_text_list, parse_text_list
from src.infrastructure.persistence.models.player import Player as PlayerModel
from src.infrastructure.persistence.models.player import (
    PlayerAgeGroup as PlayerAgeGroupModel,
)
from src.infrastructure.persistence.models.player import (
    PlayerAttribute as PlayerAttributeModel,
)
from src.infrastructure.persistence.models.player import (
    PlayerEmergencyContact as PlayerEmergencyContactModel,
)
from src.infrastructure.persistence.models.player import PlayerTeam as PlayerTeamModel
from src.infrastructure.persistence.models.team import Team as TeamModel
from src.infrastructure.persistence.transactions import atomic


async def rebuild_age_groups(session: AsyncSession, player_id: UUID) -> None:
    """Replace a player's age groups with those of the teams they are on.

    Does not commit; callers run it inside their own ``atomic`` block.
    """
    await session.execute(
        delete(PlayerAgeGroupModel).where(PlayerAgeGroupModel.player_id == player_id)
    )
    stmt = (
        select(TeamModel.age_group_id)
        .join(PlayerTeamModel, PlayerTeamModel.team_id == TeamModel.id)
        .where(PlayerTeamModel.player_id == player_id)
        .distinct()
    )
    result = await session.execute(stmt)
    for age_group_id in result.scalars().all():
        session.add(PlayerAgeGroupModel(player_id=player_id, age_group_id=age_group_id))


class PlayerRepository:
    """SQLAlchemy implementation of PlayerRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, player_id: UUID) -> Player | None:
        """Find player by ID with contacts, team IDs and age group IDs.

        Args:
            player_id: Player's unique identifier.

        Returns:
            Domain Player entity if found, None otherwise.
        """
        stmt = select(PlayerModel).where(PlayerModel.id == player_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        contacts = await self.session.execute(
            select(PlayerEmergencyContactModel)
            .where(PlayerEmergencyContactModel.player_id == player_id)
            .order_by(
                PlayerEmergencyContactModel.is_primary.desc(),
                PlayerEmergencyContactModel.name,
            )
        )
        team_ids = await self.session.execute(
            select(PlayerTeamModel.team_id).where(
                PlayerTeamModel.player_id == player_id
            )
        )
        age_group_ids = await self.session.execute(
            select(PlayerAgeGroupModel.age_group_id).where(
                PlayerAgeGroupModel.player_id == player_id
            )
        )

        player = self._to_domain(model)
        player.emergency_contacts = [
            EmergencyContact(
                id=contact.id,
                name=contact.name,
                phone=contact.phone,
                relationship=contact.relationship,
                is_primary=contact.is_primary,
            )
            for contact in contacts.scalars().all()
        ]
        player.team_ids = list(team_ids.scalars().all())
        player.age_group_ids = list(age_group_ids.scalars().all())
        return player

    async def list_by_club(
        self, club_id: UUID, include_archived: bool = False
    ) -> list[Player]:
        stmt = (
            select(PlayerModel)
            .where(PlayerModel.club_id == club_id)
            .order_by(PlayerModel.last_name, PlayerModel.first_name)
        )
        return await self._list(stmt, include_archived)

    async def list_by_age_group(
        self, age_group_id: UUID, include_archived: bool = False
    ) -> list[Player]:
        stmt = (
            select(PlayerModel)
            .join(PlayerAgeGroupModel, PlayerAgeGroupModel.player_id == PlayerModel.id)
            .where(PlayerAgeGroupModel.age_group_id == age_group_id)
            .order_by(PlayerModel.first_name, PlayerModel.last_name)
        )
        return await self._list(stmt, include_archived)

    async def list_by_team(
        self, team_id: UUID, include_archived: bool = False
    ) -> list[Player]:
        stmt = (
            select(PlayerModel)
            .join(PlayerTeamModel, PlayerTeamModel.player_id == PlayerModel.id)
            .where(PlayerTeamModel.team_id == team_id)
            .order_by(PlayerModel.last_name, PlayerModel.first_name)
        )
        return await self._list(stmt, include_archived)

    async def save(self, player: Player) -> None:
        """Create or update player, contacts and team memberships atomically.

        Squad numbers of teams the player stays on are preserved; new
        memberships start without a number.

        Args:
            player: Player entity to persist.
        """
        async with atomic(self.session):
            stmt = select(PlayerModel).where(PlayerModel.id == player.id)
            result = await self.session.execute(stmt)
            existing = result.scalar_one_or_none()

            if existing is None:
                model = PlayerModel(id=player.id, club_id=player.club_id)
                self._update_model(model, player)
                self.session.add(model)
                await self.session.flush()
            else:
                self._update_model(existing, player)

            await self.session.execute(
                delete(PlayerEmergencyContactModel).where(
                    PlayerEmergencyContactModel.player_id == player.id
                )
            )
            for contact in player.emergency_contacts:
                self.session.add(
                    PlayerEmergencyContactModel(
                        player_id=player.id,
                        name=contact.name,
                        phone=contact.phone,
                        relationship=contact.relationship,
                        is_primary=contact.is_primary,
                    )
                )

            await self._replace_teams(player.id, player.team_ids)
            await rebuild_age_groups(self.session, player.id)

    async def get_attribute_ratings(self, player_id: UUID) -> dict[str, int]:
        stmt = select(
            PlayerAttributeModel.attribute_name, PlayerAttributeModel.rating
        ).where(PlayerAttributeModel.player_id == player_id)
        result = await self.session.execute(stmt)
        return {name: rating for name, rating in result.all()}

    async def update_ratings(
        self, player_id: UUID, ratings: dict[str, int], overall_rating: int | None
    ) -> None:
        """Replace the player's current ability ratings and overall rating.

        Args:
            player_id: Player's unique identifier.
            ratings: ``{attribute_name: rating}``.
            overall_rating: New overall rating (None clears it).
        """
        async with atomic(self.session):
            await self.session.execute(
                delete(PlayerAttributeModel).where(
                    PlayerAttributeModel.player_id == player_id
                )
            )
            for name, rating in ratings.items():
                self.session.add(
                    PlayerAttributeModel(
                        player_id=player_id, attribute_name=name, rating=rating
                    )
                )

            stmt = select(PlayerModel).where(PlayerModel.id == player_id)
            result = await self.session.execute(stmt)
            model = result.scalar_one()
            model.overall_rating = overall_rating

    async def _list(
        self, stmt: Select[tuple[PlayerModel]], include_archived: bool
    ) -> list[Player]:
        """Run a player listing and attach team and age group IDs in bulk."""
        if not include_archived:
            stmt = stmt.where(PlayerModel.is_archived == False)  # noqa: E712
        result = await self.session.execute(stmt)
        models = result.scalars().all()
        if not models:
            return []

        player_ids = [model.id for model in models]
        team_ids: dict[UUID, list[UUID]] = defaultdict(list)
        rows = await self.session.execute(
            select(PlayerTeamModel.player_id, PlayerTeamModel.team_id).where(
                PlayerTeamModel.player_id.in_(player_ids)
            )
        )
        for player_id, team_id in rows.all():
            team_ids[player_id].append(team_id)

        age_group_ids: dict[UUID, list[UUID]] = defaultdict(list)
        rows = await self.session.execute(
            select(PlayerAgeGroupModel.player_id, PlayerAgeGroupModel.age_group_id).where(
                PlayerAgeGroupModel.player_id.in_(player_ids)
            )
        )
        for player_id, age_group_id in rows.all():
            age_group_ids[player_id].append(age_group_id)

        players: list[Player] = []
        for model in models:
            player = self._to_domain(model)
            player.team_ids = team_ids.get(model.id, [])
            player.age_group_ids = age_group_ids.get(model.id, [])
            players.append(player)
        return players

    async def _replace_teams(self, player_id: UUID, team_ids: list[UUID]) -> None:
        stmt = select(PlayerTeamModel).where(PlayerTeamModel.player_id == player_id)
        result = await self.session.execute(stmt)
        current = {row.team_id: row for row in result.scalars().all()}

        wanted = list(dict.fromkeys(team_ids))
        for team_id, row in current.items():
            if team_id not in wanted:
                await self.session.delete(row)
        for team_id in wanted:
            if team_id not in current:
                self.session.add(PlayerTeamModel(player_id=player_id, team_id=team_id))

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: PlayerModel) -> Player:
        return Player(
            id=model.id,
            club_id=model.club_id,
            first_name=model.first_name,
            last_name=model.last_name,
            nickname=model.nickname,
            photo=model.photo,
            date_of_birth=model.date_of_birth,
            association_id=model.association_id,
            preferred_positions=parse_text_list(model.preferred_positions),
            allergies=model.allergies,
            medical_conditions=model.medical_conditions,
            overall_rating=model.overall_rating,
            is_archived=model.is_archived,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: PlayerModel, entity: Player) -> None:
        """Update mutable fields; ``club_id`` and ``overall_rating`` are not
        written here (the rating follows evaluations)."""
        model.first_name = entity.first_name
        model.last_name = entity.last_name
        model.nickname = entity.nickname
        model.photo = entity.photo
        model.date_of_birth = entity.date_of_birth
        model.association_id = entity.association_id
        model.preferred_positions = dump_text_list(entity.preferred_positions)
        model.allergies = entity.allergies
        model.medical_conditions = entity.medical_conditions
        model.is_archived = entity.is_archived
