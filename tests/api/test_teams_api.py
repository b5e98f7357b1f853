"""API tests for team squad endpoints.

Tests the complete HTTP request/response cycle for:
- POST /api/v1/teams/{team_id}/players (add player to squad)
- GET /api/v1/teams/{team_id}/players (squad list)
- DELETE /api/v1/teams/{team_id}/players/{player_id} (remove from squad)

Architecture:
- Uses real app with the dispatcher overridden
- Verifies RFC 9457 problem shapes for each failure kind
"""

from uuid import uuid4

from src.application.commands.team_commands import (
    AddPlayerToTeam,
    RemovePlayerFromTeam,
)
from src.application.dtos.team_dtos import TeamMembershipResult, TeamPlayerResult
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, not_found
from src.core.result import Failure, Success


def _players_url(team_id) -> str:
    return f"/api/v1/teams/{team_id}/players"


class TestAddTeamPlayer:
    """Tests for POST /api/v1/teams/{team_id}/players."""

    def test_returns_201_with_camel_case_body(self, client, stub_dispatch):
        team_id, player_id = uuid4(), uuid4()
        stub = stub_dispatch(
            Success(
                value=TeamMembershipResult(
                    player_id=player_id, team_id=team_id, squad_number=7
                )
            )
        )

        response = client.post(
            _players_url(team_id),
            json={"playerId": str(player_id), "squadNumber": 7},
        )

        assert response.status_code == 201
        assert response.json() == {
            "playerId": str(player_id),
            "teamId": str(team_id),
            "squadNumber": 7,
        }
        assert stub.requests == [
            AddPlayerToTeam(team_id=team_id, player_id=player_id, squad_number=7)
        ]

    def test_out_of_range_squad_number_returns_400_problem(
        self, client, validating_dispatcher
    ):
        team_id = uuid4()

        response = client.post(
            _players_url(team_id),
            json={"playerId": str(uuid4()), "squadNumber": 100},
        )

        assert response.status_code == 400
        problem = response.json()
        assert problem["type"] == "http://localhost:8000/errors/validation_failed"
        assert problem["title"] == "Validation Failed"
        assert problem["status"] == 400
        assert problem["detail"] == "One or more validation errors occurred"
        assert problem["instance"] == _players_url(team_id)
        assert problem["errors"] == {
            "squadNumber": ["squadNumber must be between 1 and 99"]
        }
        assert problem["traceId"]

    def test_missing_player_id_returns_400_problem(self, client, validating_dispatcher):
        response = client.post(_players_url(uuid4()), json={"squadNumber": 4})

        assert response.status_code == 400
        assert response.json()["errors"] == {"playerId": ["playerId is required"]}

    def test_unknown_team_returns_404_problem(self, client, stub_dispatch):
        team_id = uuid4()
        stub_dispatch(
            Failure(error=not_found("Team", team_id, ErrorCode.TEAM_NOT_FOUND))
        )

        response = client.post(
            _players_url(team_id), json={"playerId": str(uuid4())}
        )

        assert response.status_code == 404
        problem = response.json()
        assert problem["title"] == "Resource Not Found"
        assert problem["detail"] == f"Team with ID '{team_id}' was not found"
        assert "errors" not in problem

    def test_taken_squad_number_returns_409_problem(self, client, stub_dispatch):
        stub_dispatch(
            Failure(
                error=ConflictError(
                    code=ErrorCode.SQUAD_NUMBER_TAKEN,
                    message="Squad number 7 is already taken in this team",
                    resource_type="PlayerTeam",
                    conflicting_field="squadNumber",
                )
            )
        )

        response = client.post(
            _players_url(uuid4()),
            json={"playerId": str(uuid4()), "squadNumber": 7},
        )

        assert response.status_code == 409
        problem = response.json()
        assert problem["type"] == "http://localhost:8000/errors/conflict"
        assert problem["title"] == "Resource Conflict"
        assert problem["detail"] == "Squad number 7 is already taken in this team"

    def test_malformed_json_returns_422_problem(self, client, stub_dispatch):
        stub = stub_dispatch(Success(value=None))

        response = client.post(
            _players_url(uuid4()),
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        problem = response.json()
        assert problem["title"] == "Validation Failed"
        assert problem["detail"] == "The request body could not be parsed."
        assert problem["errors"]
        assert stub.requests == []

    def test_non_uuid_team_id_returns_422_problem(self, client, stub_dispatch):
        stub_dispatch(Success(value=None))

        response = client.post(
            "/api/v1/teams/not-a-uuid/players", json={"playerId": str(uuid4())}
        )

        assert response.status_code == 422
        assert "path.team_id" in response.json()["errors"]

    def test_trace_id_is_echoed_in_problem(self, client, validating_dispatcher):
        response = client.post(
            _players_url(uuid4()),
            json={"squadNumber": 0},
            headers={"X-Trace-Id": "trace-abc"},
        )

        assert response.status_code == 400
        assert response.json()["traceId"] == "trace-abc"
        assert response.headers["X-Trace-Id"] == "trace-abc"


class TestListTeamPlayers:
    """Tests for GET /api/v1/teams/{team_id}/players."""

    def test_returns_squad_list(self, client, stub_dispatch):
        player_id = uuid4()
        stub_dispatch(
            Success(
                value=[
                    TeamPlayerResult(
                        id=player_id,
                        first_name="Ava",
                        last_name="Stone",
                        photo_url=None,
                        preferred_positions=["CM", "ST"],
                        overall_rating=68,
                        squad_number=10,
                    )
                ]
            )
        )

        response = client.get(_players_url(uuid4()))

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": str(player_id),
                "firstName": "Ava",
                "lastName": "Stone",
                "photoUrl": None,
                "preferredPositions": ["CM", "ST"],
                "overallRating": 68,
                "squadNumber": 10,
            }
        ]

    def test_empty_squad_returns_empty_list(self, client, stub_dispatch):
        stub_dispatch(Success(value=[]))

        response = client.get(_players_url(uuid4()))

        assert response.status_code == 200
        assert response.json() == []


class TestRemoveTeamPlayer:
    """Tests for DELETE /api/v1/teams/{team_id}/players/{player_id}."""

    def test_returns_204(self, client, stub_dispatch):
        team_id, player_id = uuid4(), uuid4()
        stub = stub_dispatch(Success(value=None))

        response = client.delete(f"{_players_url(team_id)}/{player_id}")

        assert response.status_code == 204
        assert response.content == b""
        assert stub.requests == [
            RemovePlayerFromTeam(team_id=team_id, player_id=player_id)
        ]

    def test_non_member_returns_404(self, client, stub_dispatch):
        player_id = uuid4()
        stub_dispatch(
            Failure(
                error=not_found("Player", player_id, ErrorCode.PLAYER_NOT_FOUND)
            )
        )

        response = client.delete(f"{_players_url(uuid4())}/{player_id}")

        assert response.status_code == 404
        assert response.json()["status"] == 404
