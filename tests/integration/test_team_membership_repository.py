"""Integration tests for TeamMembershipRepository.

Runs against a real SQLite database (aiosqlite) created per test.

Tests cover:
- add: membership row plus age group link
- list_members: squad number order, unnumbered players last, archived hidden
- update_squad_number
- remove: membership deleted and player age groups rebuilt
"""

import pytest
from sqlalchemy import select, update
from uuid_extensions import uuid7

from src.domain.entities.team import TeamMembership
from src.infrastructure.persistence.models import PlayerAgeGroup, Team
from src.infrastructure.persistence.models import Player as PlayerModel
from src.infrastructure.persistence.repositories import (
    PlayerRepository,
    TeamMembershipRepository,
)
from tests.conftest import seed_club_tree


async def age_group_ids(session, player_id) -> set:
    result = await session.execute(
        select(PlayerAgeGroup.age_group_id).where(PlayerAgeGroup.player_id == player_id)
    )
    return set(result.scalars().all())


@pytest.mark.integration
class TestTeamMembershipRepository:
    """Test membership persistence against SQLite."""

    @pytest.mark.asyncio
    async def test_add_links_age_group(self, session):
        # Arrange
        tree = await seed_club_tree(session, player_count=1)
        repo = TeamMembershipRepository(session=session)
        player_id = tree.player_ids[0]

        # Act
        await repo.add(
            TeamMembership(team_id=tree.team_id, player_id=player_id, squad_number=7)
        )

        # Assert
        membership = await repo.find(tree.team_id, player_id)
        assert membership == TeamMembership(
            team_id=tree.team_id, player_id=player_id, squad_number=7
        )
        holder = await repo.find_by_squad_number(tree.team_id, 7)
        assert holder is not None and holder.player_id == player_id
        assert await age_group_ids(session, player_id) == {tree.age_group_id}

    @pytest.mark.asyncio
    async def test_list_members_orders_by_squad_number(self, session):
        tree = await seed_club_tree(session, player_count=3)
        repo = TeamMembershipRepository(session=session)
        unnumbered, ten, four = tree.player_ids
        await repo.add(TeamMembership(team_id=tree.team_id, player_id=unnumbered))
        await repo.add(
            TeamMembership(team_id=tree.team_id, player_id=ten, squad_number=10)
        )
        await repo.add(
            TeamMembership(team_id=tree.team_id, player_id=four, squad_number=4)
        )

        members = await repo.list_members(tree.team_id)

        assert [m.player_id for m in members] == [four, ten, unnumbered]
        assert [m.squad_number for m in members] == [4, 10, None]
        assert members[0].preferred_positions == ["CM"]

    @pytest.mark.asyncio
    async def test_list_members_hides_archived_players(self, session):
        tree = await seed_club_tree(session, player_count=2)
        repo = TeamMembershipRepository(session=session)
        for number, player_id in enumerate(tree.player_ids, start=1):
            await repo.add(
                TeamMembership(
                    team_id=tree.team_id, player_id=player_id, squad_number=number
                )
            )
        await session.execute(
            update(PlayerModel)
            .where(PlayerModel.id == tree.player_ids[0])
            .values(is_archived=True)
        )
        await session.commit()

        members = await repo.list_members(tree.team_id)

        assert [m.player_id for m in members] == [tree.player_ids[1]]
        assert await repo.count_players([tree.team_id]) == 1

    @pytest.mark.asyncio
    async def test_update_squad_number(self, session):
        tree = await seed_club_tree(session, player_count=1)
        repo = TeamMembershipRepository(session=session)
        player_id = tree.player_ids[0]
        await repo.add(
            TeamMembership(team_id=tree.team_id, player_id=player_id, squad_number=7)
        )

        await repo.update_squad_number(tree.team_id, player_id, 11)

        assert await repo.find_by_squad_number(tree.team_id, 7) is None
        membership = await repo.find(tree.team_id, player_id)
        assert membership.squad_number == 11

    @pytest.mark.asyncio
    async def test_remove_rebuilds_age_groups(self, session):
        """Removing the last team in an age group drops that age group link."""
        tree = await seed_club_tree(session, player_count=1)
        repo = TeamMembershipRepository(session=session)
        player_id = tree.player_ids[0]

        # Second team in the same age group
        other_team_id = uuid7()
        session.add(
            Team(
                id=other_team_id,
                club_id=tree.club_id,
                age_group_id=tree.age_group_id,
                name="Reds",
                level=0,
                season="2024/25",
            )
        )
        await session.commit()
        await repo.add(TeamMembership(team_id=tree.team_id, player_id=player_id))
        await repo.add(TeamMembership(team_id=other_team_id, player_id=player_id))

        await repo.remove(tree.team_id, player_id)
        assert await repo.find(tree.team_id, player_id) is None
        assert await age_group_ids(session, player_id) == {tree.age_group_id}

        await repo.remove(other_team_id, player_id)
        assert await age_group_ids(session, player_id) == set()

        player = await PlayerRepository(session=session).find_by_id(player_id)
        assert player.team_ids == []
        assert player.age_group_ids == []
