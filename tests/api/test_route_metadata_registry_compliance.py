"""Registry compliance tests - prevent drift and ensure completeness.

These tests ensure the Route Metadata Registry remains the single source of truth
by validating that:
1. All FastAPI routes are registered in the registry (no orphans)
2. All registry entries generate actual routes (no dead entries)
3. Every command and query is reachable through exactly one route
4. Auth policies are enforced correctly

If these tests fail, it means the registry has drifted from actual implementation.
"""

from collections import Counter

from fastapi.routing import APIRoute

from src.application.cqrs import get_all_commands, get_all_queries
from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_principal,
)
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.routes.metadata import AuthLevel
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


def _api_routes() -> dict[str, APIRoute]:
    routes: dict[str, APIRoute] = {}
    for route in v1_router.routes:
        if not isinstance(route, APIRoute):
            continue
        for method in route.methods:
            if method in {"HEAD", "OPTIONS"}:
                continue
            routes[f"{method} {route.path}"] = route
    return routes


def _registry_key(entry) -> str:
    return f"{entry.method.value} /api/v1{entry.path}"


# =============================================================================
# Test Class 1: Route Completeness
# =============================================================================


class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_all_routes_are_registered(self):
        """Every FastAPI route must have a registry entry, and vice versa."""
        actual_routes = set(_api_routes())
        expected_routes = {_registry_key(entry) for entry in ROUTE_REGISTRY}

        missing_in_registry = actual_routes - expected_routes
        missing_in_fastapi = expected_routes - actual_routes

        assert not missing_in_registry, (
            f"Routes exist in FastAPI but not in ROUTE_REGISTRY: {missing_in_registry}"
        )
        assert not missing_in_fastapi, (
            f"Routes exist in ROUTE_REGISTRY but not in FastAPI: {missing_in_fastapi}"
        )

    def test_no_duplicate_method_and_path(self):
        keys = [_registry_key(entry) for entry in ROUTE_REGISTRY]
        duplicates = [key for key, count in Counter(keys).items() if count > 1]

        assert not duplicates, f"Duplicate routes in registry: {duplicates}"

    def test_operation_ids_are_unique(self):
        """Duplicate operation_id breaks OpenAPI client generation."""
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]
        duplicates = [oid for oid, count in Counter(operation_ids).items() if count > 1]

        assert None not in operation_ids
        assert not duplicates, f"Duplicate operation_ids: {duplicates}"

    def test_operation_id_matches_handler_name(self):
        for entry in ROUTE_REGISTRY:
            assert entry.operation_id == entry.handler.__name__, (
                f"{_registry_key(entry)}: operation_id {entry.operation_id!r} "
                f"!= handler {entry.handler.__name__!r}"
            )


# =============================================================================
# Test Class 2: CQRS Coverage
# =============================================================================


class TestCQRSCoverage:
    """Every command and query is exposed over HTTP exactly once."""

    def test_every_request_type_is_routed_once(self):
        routed = Counter(entry.operation for entry in ROUTE_REGISTRY)
        request_types = [*get_all_commands(), *get_all_queries()]

        unrouted = [t.__name__ for t in request_types if routed[t] == 0]
        repeated = [t.__name__ for t in request_types if routed[t] > 1]

        assert not unrouted, f"Requests without a route: {unrouted}"
        assert not repeated, f"Requests routed more than once: {repeated}"

    def test_no_route_dispatches_unregistered_request(self):
        request_types = {*get_all_commands(), *get_all_queries()}

        orphans = [
            _registry_key(entry)
            for entry in ROUTE_REGISTRY
            if entry.operation not in request_types
        ]

        assert not orphans, f"Routes dispatch unregistered requests: {orphans}"

    def test_queries_use_get(self):
        queries = set(get_all_queries())

        for entry in ROUTE_REGISTRY:
            if entry.operation in queries:
                assert entry.method.value == "GET", _registry_key(entry)


# =============================================================================
# Test Class 3: Auth Policy Enforcement
# =============================================================================


class TestAuthPolicyEnforcement:
    """Auth policies in the registry become FastAPI dependencies."""

    def test_authenticated_routes_require_principal(self):
        routes = _api_routes()

        for entry in ROUTE_REGISTRY:
            route = routes[_registry_key(entry)]
            dependency_calls = [dep.dependency for dep in route.dependencies]
            requires_principal = get_current_principal in dependency_calls

            if entry.auth_policy.level == AuthLevel.AUTHENTICATED:
                assert requires_principal, (
                    f"{_registry_key(entry)} is AUTHENTICATED but has no principal dependency"
                )
            else:
                assert not requires_principal, (
                    f"{_registry_key(entry)} is PUBLIC but requires a principal"
                )

    def test_authenticated_routes_have_rationale(self):
        for entry in ROUTE_REGISTRY:
            if entry.auth_policy.level == AuthLevel.AUTHENTICATED:
                assert entry.auth_policy.rationale, _registry_key(entry)

    def test_user_profile_routes_are_authenticated(self):
        levels = {
            _registry_key(entry): entry.auth_policy.level for entry in ROUTE_REGISTRY
        }

        assert levels["GET /api/v1/users/me"] == AuthLevel.AUTHENTICATED
        assert levels["PUT /api/v1/users/me"] == AuthLevel.AUTHENTICATED
        assert levels["GET /api/v1/users/me/clubs"] == AuthLevel.AUTHENTICATED
        assert levels["GET /api/v1/users/me/teams"] == AuthLevel.AUTHENTICATED
        assert (
            levels["DELETE /api/v1/players/{player_id}/ability-evaluations/{evaluation_id}"]
            == AuthLevel.AUTHENTICATED
        )


# =============================================================================
# Test Class 4: Metadata Consistency
# =============================================================================


class TestMetadataConsistency:
    def test_handlers_are_callable(self):
        for entry in ROUTE_REGISTRY:
            assert callable(entry.handler), _registry_key(entry)

    def test_every_route_has_tags_and_summary(self):
        for entry in ROUTE_REGISTRY:
            assert entry.tags, f"{_registry_key(entry)} has no tags"
            assert entry.summary, f"{_registry_key(entry)} has no summary"

    def test_paths_are_relative_to_version_prefix(self):
        for entry in ROUTE_REGISTRY:
            assert entry.path.startswith("/")
            assert not entry.path.startswith("/api/"), _registry_key(entry)
