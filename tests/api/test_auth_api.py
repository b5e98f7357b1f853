"""API tests for principal-protected endpoints.

The identity provider injects a base64 JSON principal header; routes with an
AUTHENTICATED policy reject requests without a usable one before any handler
runs.
"""

from uuid import uuid4

from src.application.commands.evaluation_commands import DeletePlayerAbilityEvaluation
from src.application.dtos.user_dtos import UserResult
from src.application.queries.user_queries import GetCurrentUser
from src.client import encode_principal
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, not_found
from src.core.result import Failure, Success


PRINCIPAL_HEADER = "X-MS-CLIENT-PRINCIPAL"


def _evaluation_url(player_id, evaluation_id) -> str:
    return f"/api/v1/players/{player_id}/ability-evaluations/{evaluation_id}"


class TestPrincipalRequired:
    def test_missing_principal_returns_401_problem(self, client, stub_dispatch):
        stub = stub_dispatch(Success(value=None))

        response = client.delete(_evaluation_url(uuid4(), uuid4()))

        assert response.status_code == 401
        problem = response.json()
        assert problem["type"] == "http://localhost:8000/errors/unauthorized"
        assert problem["title"] == "Authentication Required"
        assert problem["detail"] == "Authentication required"
        assert stub.requests == []

    def test_undecodable_principal_returns_401_problem(self, client, stub_dispatch):
        stub_dispatch(Success(value=None))

        response = client.get("/api/v1/users/me", headers={PRINCIPAL_HEADER: "%%%"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid client principal"

    def test_public_route_ignores_missing_principal(self, client, stub_dispatch):
        stub_dispatch(Success(value=[]))

        response = client.get(f"/api/v1/teams/{uuid4()}/players")

        assert response.status_code == 200


class TestDeleteEvaluation:
    """Tests for DELETE /api/v1/players/{player_id}/ability-evaluations/{id}."""

    def test_owner_delete_returns_204(self, client, stub_dispatch):
        player_id, evaluation_id = uuid4(), uuid4()
        stub = stub_dispatch(Success(value=None))

        response = client.delete(
            _evaluation_url(player_id, evaluation_id),
            headers={PRINCIPAL_HEADER: encode_principal("coach-auth-1")},
        )

        assert response.status_code == 204
        assert stub.requests == [
            DeletePlayerAbilityEvaluation(
                player_id=player_id,
                evaluation_id=evaluation_id,
                auth_id="coach-auth-1",
            )
        ]

    def test_other_coach_gets_403_problem(self, client, stub_dispatch):
        stub_dispatch(
            Failure(
                error=AuthorizationError(
                    code=ErrorCode.NOT_EVALUATION_OWNER,
                    message="Only the coach who created this evaluation can delete it",
                )
            )
        )

        response = client.delete(
            _evaluation_url(uuid4(), uuid4()),
            headers={PRINCIPAL_HEADER: encode_principal("coach-auth-2")},
        )

        assert response.status_code == 403
        problem = response.json()
        assert problem["title"] == "Access Denied"
        assert problem["type"] == "http://localhost:8000/errors/forbidden"


class TestCurrentUser:
    """Tests for GET /api/v1/users/me."""

    def test_returns_profile_for_principal(self, client, stub_dispatch):
        user_id = uuid4()
        stub = stub_dispatch(
            Success(
                value=UserResult(
                    id=user_id,
                    auth_id="user-auth-1",
                    first_name="Jo",
                    last_name="Parker",
                    email="jo@example.com",
                    photo=None,
                    preferences=None,
                    created_at=None,
                    updated_at=None,
                )
            )
        )

        response = client.get(
            "/api/v1/users/me",
            headers={PRINCIPAL_HEADER: encode_principal("user-auth-1")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(user_id)
        assert body["authId"] == "user-auth-1"
        assert body["firstName"] == "Jo"
        assert stub.requests == [GetCurrentUser(auth_id="user-auth-1")]

    def test_unknown_user_returns_404(self, client, stub_dispatch):
        stub_dispatch(
            Failure(
                error=not_found("User", "user-auth-9", ErrorCode.USER_NOT_FOUND)
            )
        )

        response = client.get(
            "/api/v1/users/me",
            headers={PRINCIPAL_HEADER: encode_principal("user-auth-9")},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "User with ID 'user-auth-9' was not found"
