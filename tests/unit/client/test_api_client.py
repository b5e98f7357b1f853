"""Unit tests for the v1 API client.

Tests cover:
- Paths, query parameters, principal header and camelCase bodies
- Response parsing into schema models, including paged and nested shapes
- Problem details → ApiError (message, status, validation errors)
- Connection failures → ApiError without status

Uses pytest-httpx for HTTP mocking.
"""

import json

import httpx
import pytest
import pytest_asyncio
from pytest_httpx import HTTPXMock
from uuid_extensions import uuid7

from src.client import ApiClient, ApiError, encode_principal
from src.client.api_client import PRINCIPAL_HEADER
from src.schemas.team_schemas import AddPlayerToTeamRequest

BASE_URL = "http://api.test"


@pytest_asyncio.fixture
async def client():
    """ApiClient against the mocked base URL."""
    async with ApiClient(base_url=BASE_URL, principal=encode_principal("u-1")) as api:
        yield api


def team_player_json(player_id, squad_number=7) -> dict:
    return {
        "id": str(player_id),
        "firstName": "Ada",
        "lastName": "Moss",
        "photoUrl": None,
        "preferredPositions": ["CM"],
        "overallRating": 71,
        "squadNumber": squad_number,
    }


def player_list_item_json(player_id, club_id) -> dict:
    return {
        "id": str(player_id),
        "clubId": str(club_id),
        "firstName": "Ada",
        "lastName": "Moss",
        "nickname": None,
        "photoUrl": None,
        "dateOfBirth": "2015-03-14",
        "age": 9,
        "associationId": None,
        "preferredPositions": ["CM"],
        "overallRating": 71,
        "ageGroupIds": [],
        "teamIds": [],
        "isArchived": False,
        "ageGroupNames": ["Under 10s"],
        "teamNames": ["Blues"],
    }


def my_team_json(team_id, club_id) -> dict:
    return {
        "id": str(team_id),
        "clubId": str(club_id),
        "ageGroupId": str(uuid7()),
        "name": "Blues",
        "shortName": None,
        "level": "youth",
        "season": "2024/25",
        "colors": {"primary": None, "secondary": None},
        "isArchived": False,
        "ageGroupName": "Under 10s",
        "squadSize": 7,
        "club": {
            "id": str(club_id),
            "name": "Vale Juniors FC",
            "shortName": "VJFC",
            "logo": None,
            "colors": {"primary": "#0000FF", "secondary": "#FFFFFF", "accent": None},
            "founded": 1998,
        },
    }


@pytest.mark.unit
class TestApiClientRequests:
    """Test request building and response parsing."""

    @pytest.mark.asyncio
    async def test_get_team_players_parses_list(self, client, httpx_mock: HTTPXMock):
        team_id, player_id = uuid7(), uuid7()
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/api/v1/teams/{team_id}/players",
            json=[team_player_json(player_id)],
        )

        players = await client.get_team_players(team_id)

        assert len(players) == 1
        assert players[0].id == player_id
        assert players[0].squad_number == 7
        assert players[0].preferred_positions == ["CM"]

    @pytest.mark.asyncio
    async def test_sends_principal_header(self, client, httpx_mock: HTTPXMock):
        team_id = uuid7()
        httpx_mock.add_response(json=[])

        await client.get_team_players(team_id)

        request = httpx_mock.get_request()
        assert request.headers[PRINCIPAL_HEADER] == encode_principal("u-1")

    @pytest.mark.asyncio
    async def test_post_body_uses_camel_case(self, client, httpx_mock: HTTPXMock):
        team_id, player_id = uuid7(), uuid7()
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/api/v1/teams/{team_id}/players",
            status_code=201,
            json={"playerId": str(player_id), "teamId": str(team_id), "squadNumber": 7},
        )

        membership = await client.add_player_to_team(
            team_id, AddPlayerToTeamRequest(player_id=player_id, squad_number=7)
        )

        body = json.loads(httpx_mock.get_request().content)
        assert body == {"playerId": str(player_id), "squadNumber": 7}
        assert membership.team_id == team_id
        assert membership.squad_number == 7

    @pytest.mark.asyncio
    async def test_bool_and_none_query_params(self, client, httpx_mock: HTTPXMock):
        club_id = uuid7()
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/clubs/{club_id}/age-groups?includeArchived=true",
            json=[],
        )

        result = await client.get_club_age_groups(club_id, include_archived=True)

        assert result == []

    @pytest.mark.asyncio
    async def test_delete_returns_none(self, client, httpx_mock: HTTPXMock):
        team_id, player_id = uuid7(), uuid7()
        httpx_mock.add_response(
            method="DELETE",
            url=f"{BASE_URL}/api/v1/teams/{team_id}/players/{player_id}",
            status_code=204,
        )

        assert await client.remove_player_from_team(team_id, player_id) is None

    @pytest.mark.asyncio
    async def test_get_club_players_sends_filters_and_parses_page(
        self, client, httpx_mock: HTTPXMock
    ):
        # Arrange
        club_id, player_id = uuid7(), uuid7()
        httpx_mock.add_response(
            url=(
                f"{BASE_URL}/api/v1/clubs/{club_id}/players"
                "?page=2&pageSize=10&position=CM&search=ada&includeArchived=false"
            ),
            json={
                "items": [player_list_item_json(player_id, club_id)],
                "page": 2,
                "pageSize": 10,
                "totalCount": 11,
                "totalPages": 2,
            },
        )

        # Act
        page = await client.get_club_players(
            club_id, page=2, page_size=10, position="CM", search="ada"
        )

        # Assert
        assert page.total_pages == 2
        assert page.items[0].id == player_id
        assert page.items[0].age == 9
        assert page.items[0].team_names == ["Blues"]

    @pytest.mark.asyncio
    async def test_get_my_teams_parses_club_brief(self, client, httpx_mock: HTTPXMock):
        club_id, team_id = uuid7(), uuid7()
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/v1/users/me/teams",
            json=[my_team_json(team_id, club_id)],
        )

        teams = await client.get_my_teams()

        assert teams[0].id == team_id
        assert teams[0].age_group_name == "Under 10s"
        assert teams[0].club.id == club_id
        assert teams[0].club.colors.primary == "#0000FF"


@pytest.mark.unit
class TestApiClientErrors:
    """Test error translation to ApiError."""

    @pytest.mark.asyncio
    async def test_problem_details_become_api_error(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            status_code=400,
            json={
                "type": "http://api.test/errors/validation_failed",
                "title": "Validation Failed",
                "status": 400,
                "detail": "One or more validation errors occurred",
                "instance": "/api/v1/teams/x/players",
                "errors": {"squadNumber": ["squadNumber must be between 1 and 99"]},
            },
        )

        with pytest.raises(ApiError) as exc_info:
            await client.add_player_to_team(
                uuid7(), AddPlayerToTeamRequest(player_id=uuid7(), squad_number=0)
            )

        error = exc_info.value
        assert error.status_code == 400
        assert error.message == "One or more validation errors occurred"
        assert error.validation_errors == {
            "squadNumber": ["squadNumber must be between 1 and 99"]
        }

    @pytest.mark.asyncio
    async def test_non_json_error_uses_generic_message(
        self, client, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(status_code=502, text="Bad gateway")

        with pytest.raises(ApiError) as exc_info:
            await client.get_clubs()

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Request failed with status 502"
        assert exc_info.value.validation_errors is None

    @pytest.mark.asyncio
    async def test_title_used_when_detail_missing(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(status_code=404, json={"title": "Resource Not Found"})

        with pytest.raises(ApiError) as exc_info:
            await client.get_club(uuid7())

        assert exc_info.value.message == "Resource Not Found"

    @pytest.mark.asyncio
    async def test_connection_error(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        with pytest.raises(ApiError) as exc_info:
            await client.get_clubs()

        assert exc_info.value.status_code is None
        assert "Failed to reach the API" in exc_info.value.message
