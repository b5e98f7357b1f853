"""Smoke test: squad management end to end.

Drives the real app over ASGI against a throwaway SQLite database, with the
real dispatcher, handlers and repositories:

1. Add a player with squad number 7
2. Squad list shows the number
3. A second player asking for 7 is rejected with 409
4. Removing the first player frees the number
"""

import httpx
import pytest
import pytest_asyncio

from src.core.container import get_db_session
from src.main import app
from tests.conftest import seed_club_tree


pytestmark = pytest.mark.smoke


@pytest_asyncio.fixture
async def api(database):
    async def session_override():
        async with database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = session_override
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def test_squad_number_lifecycle(api, session):
    tree = await seed_club_tree(session, player_count=2)
    first, second = tree.player_ids
    players_url = f"/api/v1/teams/{tree.team_id}/players"

    added = await api.post(
        players_url, json={"playerId": str(first), "squadNumber": 7}
    )
    assert added.status_code == 201
    assert added.json() == {
        "playerId": str(first),
        "teamId": str(tree.team_id),
        "squadNumber": 7,
    }

    squad = await api.get(players_url)
    assert squad.status_code == 200
    assert [(p["id"], p["squadNumber"]) for p in squad.json()] == [(str(first), 7)]

    clash = await api.post(
        players_url, json={"playerId": str(second), "squadNumber": 7}
    )
    assert clash.status_code == 409
    assert clash.json()["title"] == "Resource Conflict"

    removed = await api.delete(f"{players_url}/{first}")
    assert removed.status_code == 204

    retry = await api.post(
        players_url, json={"playerId": str(second), "squadNumber": 7}
    )
    assert retry.status_code == 201


async def test_unknown_team_is_404(api, session):
    tree = await seed_club_tree(session, player_count=1)

    response = await api.post(
        f"/api/v1/teams/{tree.player_ids[0]}/players",
        json={"playerId": str(tree.player_ids[0])},
    )

    assert response.status_code == 404
    assert response.json()["type"] == "http://localhost:8000/errors/not_found"


@pytest.mark.parametrize("squad_number", [0, 100])
async def test_out_of_range_number_never_reaches_database(api, session, squad_number):
    tree = await seed_club_tree(session, player_count=1)

    response = await api.post(
        f"/api/v1/teams/{tree.team_id}/players",
        json={"playerId": str(tree.player_ids[0]), "squadNumber": squad_number},
    )

    assert response.status_code == 400
    assert "squadNumber" in response.json()["errors"]
