"""Pytest configuration shared by all test packages.

Provides:
1. Test environment variables (set before the app and settings are imported)
2. A file-backed SQLite database per test with all tables created
3. Helpers that seed a minimal club tree (club → age group → team → players)
"""

import os
import tempfile
from dataclasses import dataclass, field
from uuid import UUID

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{tempfile.gettempdir()}/ourgame_test_health.db",
)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.infrastructure.persistence.database import Database  # noqa: E402
from src.infrastructure.persistence.models import (  # noqa: E402
    AgeGroup,
    Club,
    Player,
    Team,
)


@dataclass
class ClubTree:
    """Identifiers of a seeded club tree."""

    club_id: UUID
    age_group_id: UUID
    team_id: UUID
    player_ids: list[UUID] = field(default_factory=list)


@pytest_asyncio.fixture
async def database(tmp_path) -> Database:
    """Fresh SQLite database (file in tmp_path) with every table created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path}/ourgame.db")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def session(database: Database) -> AsyncSession:
    """Session on the test database; repositories commit through it."""
    async with database.async_session() as session:
        yield session


async def seed_club_tree(session: AsyncSession, player_count: int = 2) -> ClubTree:
    """Insert a club, one age group, one team and ``player_count`` players.

    Args:
        session: Session to write with (committed before returning).
        player_count: Number of club players to create (not on the team).

    Returns:
        ClubTree with the generated identifiers.
    """
    tree = ClubTree(club_id=uuid7(), age_group_id=uuid7(), team_id=uuid7())

    session.add(
        Club(
            id=tree.club_id,
            name="Vale Juniors FC",
            short_name="VJFC",
            city="Leeds",
            country="England",
            venue="Vale Park",
        )
    )
    session.add(
        AgeGroup(
            id=tree.age_group_id,
            club_id=tree.club_id,
            name="Under 10s",
            code="u10",
            level=0,
            season="2024/25",
            seasons='["2024/25"]',
            default_squad_size=7,
        )
    )
    session.add(
        Team(
            id=tree.team_id,
            club_id=tree.club_id,
            age_group_id=tree.age_group_id,
            name="Blues",
            level=0,
            season="2024/25",
        )
    )
    for index in range(player_count):
        player_id = uuid7()
        tree.player_ids.append(player_id)
        session.add(
            Player(
                id=player_id,
                club_id=tree.club_id,
                first_name=f"Player{index}",
                last_name=f"Surname{index}",
                preferred_positions='["CM"]',
            )
        )

    await session.commit()
    return tree
