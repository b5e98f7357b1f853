"""CQRS Registry Compliance Tests.

Self-enforcing tests that fail if the registry is incomplete or inconsistent.

Test categories:
1. Completeness - every command/query registered exactly once
2. Handler compliance - handlers are classes with handle()
3. Naming conventions - commands imperative, queries start with Get
4. Consistency - result DTO flags, rule paths, statistics
"""

import dataclasses
import inspect

from src.application.cqrs import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
    CQRSCategory,
    get_all_commands,
    get_all_handler_classes,
    get_all_queries,
    get_command_metadata,
    get_commands_by_category,
    get_queries_by_category,
    get_query_metadata,
    get_statistics,
    validate_registry_consistency,
)
from src.application.cqrs.metadata import get_handler_dependencies
from src.application.commands.team_commands import AddPlayerToTeam
from src.application.queries.team_queries import GetPlayersByTeamId
from src.core.container.handler_factory import (
    REPOSITORY_TYPES,
    SESSION_SERVICE_TYPES,
    SINGLETON_TYPES,
    analyze_handler_dependencies,
)

IMPERATIVE_PREFIXES = (
    "Create",
    "Update",
    "Delete",
    "Add",
    "Remove",
    "Archive",
    "Assign",
)


class TestRegistryCompleteness:
    """Verify all commands and queries are registered."""

    def test_registry_sizes(self) -> None:
        """31 commands and 41 queries make up the API surface."""
        assert len(COMMAND_REGISTRY) == 31
        assert len(QUERY_REGISTRY) == 41

    def test_no_duplicate_commands(self) -> None:
        command_classes = [meta.command_class for meta in COMMAND_REGISTRY]
        duplicates = [cmd for cmd in command_classes if command_classes.count(cmd) > 1]
        assert not duplicates, f"Duplicate commands: {duplicates}"

    def test_no_duplicate_queries(self) -> None:
        query_classes = [meta.query_class for meta in QUERY_REGISTRY]
        duplicates = [qry for qry in query_classes if query_classes.count(qry) > 1]
        assert not duplicates, f"Duplicate queries: {duplicates}"

    def test_helpers_match_registry(self) -> None:
        assert get_all_commands() == [m.command_class for m in COMMAND_REGISTRY]
        assert get_all_queries() == [m.query_class for m in QUERY_REGISTRY]

    def test_validate_registry_consistency_passes(self) -> None:
        """Registry self-check reports no problems."""
        errors = validate_registry_consistency()
        assert errors == [], "Registry consistency errors:\n" + "\n".join(errors)


class TestHandlerCompliance:
    """Verify handlers can be built and invoked by the dispatcher."""

    def test_all_handlers_have_async_handle_method(self) -> None:
        for handler_class in get_all_handler_classes():
            handle = getattr(handler_class, "handle", None)
            assert handle is not None, f"{handler_class.__name__} missing handle()"
            assert inspect.iscoroutinefunction(handle), (
                f"{handler_class.__name__}.handle must be async"
            )

    def test_handlers_are_classes(self) -> None:
        for handler_class in get_all_handler_classes():
            assert inspect.isclass(handler_class)

    def test_requests_are_frozen_dataclasses(self) -> None:
        for request_class in get_all_commands() + get_all_queries():
            assert dataclasses.is_dataclass(request_class), request_class.__name__
            params = request_class.__dataclass_params__
            assert params.frozen, f"{request_class.__name__} must be frozen"

    def test_handler_names_match_requests(self) -> None:
        for meta in COMMAND_REGISTRY:
            assert meta.handler_class.__name__ == f"{meta.command_class.__name__}Handler"
        for meta in QUERY_REGISTRY:
            assert meta.handler_class.__name__ == f"{meta.query_class.__name__}Handler"

    def test_handler_dependencies_are_resolvable(self) -> None:
        """Every constructor dependency maps to a container provider."""
        known = (
            set(REPOSITORY_TYPES) | SESSION_SERVICE_TYPES | set(SINGLETON_TYPES)
        )
        for handler_class in get_all_handler_classes():
            assert get_handler_dependencies(handler_class), handler_class.__name__
            for name, info in analyze_handler_dependencies(handler_class).items():
                assert info["type_name"] in known, (
                    f"{handler_class.__name__}.{name}: {info['type_name']} "
                    "has no provider"
                )


class TestNamingConventions:
    def test_command_names_are_imperative(self) -> None:
        for command_class in get_all_commands():
            assert command_class.__name__.startswith(IMPERATIVE_PREFIXES), (
                f"{command_class.__name__} is not an imperative name"
            )

    def test_query_names_are_interrogative(self) -> None:
        for query_class in get_all_queries():
            assert query_class.__name__.startswith("Get"), query_class.__name__


class TestRegistryConsistency:
    def test_result_dto_flag_matches_class(self) -> None:
        for meta in COMMAND_REGISTRY:
            assert meta.has_result_dto == (meta.result_dto_class is not None), (
                meta.command_class.__name__
            )

    def test_lookup_helpers(self) -> None:
        command_meta = get_command_metadata(AddPlayerToTeam)
        assert command_meta is not None
        assert command_meta.category == CQRSCategory.TEAM

        query_meta = get_query_metadata(GetPlayersByTeamId)
        assert query_meta is not None
        assert query_meta.category == CQRSCategory.TEAM

        assert get_command_metadata(GetPlayersByTeamId) is None
        assert get_query_metadata(AddPlayerToTeam) is None

    def test_categories_sum_to_totals(self) -> None:
        command_total = sum(len(get_commands_by_category(c)) for c in CQRSCategory)
        query_total = sum(len(get_queries_by_category(c)) for c in CQRSCategory)
        assert command_total == len(COMMAND_REGISTRY)
        assert query_total == len(QUERY_REGISTRY)

    def test_statistics(self) -> None:
        stats = get_statistics()
        assert stats["total_commands"] == 31
        assert stats["total_queries"] == 41
        assert stats["total_operations"] == 72
        assert sum(stats["commands_by_category"].values()) == 31
        assert sum(stats["queries_by_category"].values()) == 41
