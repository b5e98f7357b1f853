"""CQRS Registry Computed Views and Helper Functions.

Utility functions for introspecting the CQRS registry.
Used by the dispatcher, tests, and the route registry checks.

Reference:
    - src/application/cqrs/registry.py
"""

import dataclasses
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.cqrs.metadata import (
        CommandMetadata,
        CQRSCategory,
        QueryMetadata,
    )


def get_all_commands() -> list[type]:
    """Get all registered command classes.

    Example:
        >>> UpdateClub in get_all_commands()
        True
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    """Get all registered query classes."""
    from src.application.cqrs.registry import QUERY_REGISTRY

    return [meta.query_class for meta in QUERY_REGISTRY]


def get_commands_by_category(category: "CQRSCategory") -> list["CommandMetadata"]:
    """Get command metadata filtered by category.

    Args:
        category: CQRSCategory to filter by.

    Returns:
        List of CommandMetadata entries for that category.

    Example:
        >>> from src.application.cqrs.metadata import CQRSCategory
        >>> len(get_commands_by_category(CQRSCategory.TEAM))
        12
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.category == category]


def get_queries_by_category(category: "CQRSCategory") -> list["QueryMetadata"]:
    """Get query metadata filtered by category."""
    from src.application.cqrs.registry import QUERY_REGISTRY

    return [meta for meta in QUERY_REGISTRY if meta.category == category]


def get_command_metadata(command_class: type) -> "CommandMetadata | None":
    """Get metadata for a specific command class.

    Args:
        command_class: The command class to look up.

    Returns:
        CommandMetadata if found, None otherwise.

    Example:
        >>> from src.application.commands.team_commands import AddPlayerToTeam
        >>> get_command_metadata(AddPlayerToTeam).handler_class.__name__
        'AddPlayerToTeamHandler'
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    for meta in COMMAND_REGISTRY:
        if meta.command_class == command_class:
            return meta
    return None


def get_query_metadata(query_class: type) -> "QueryMetadata | None":
    """Get metadata for a specific query class.

    Args:
        query_class: The query class to look up.

    Returns:
        QueryMetadata if found, None otherwise.
    """
    from src.application.cqrs.registry import QUERY_REGISTRY

    for meta in QUERY_REGISTRY:
        if meta.query_class == query_class:
            return meta
    return None


def get_commands_with_result_dto() -> list["CommandMetadata"]:
    """Get all commands that return result DTOs."""
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.has_result_dto]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics for documentation and monitoring.

    Returns:
        Dict with counts by category, type, etc.

    Example:
        >>> stats = get_statistics()
        >>> stats['total_commands']
        31
        >>> stats['total_queries']
        41
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    return {
        "total_commands": len(COMMAND_REGISTRY),
        "total_queries": len(QUERY_REGISTRY),
        "total_operations": len(COMMAND_REGISTRY) + len(QUERY_REGISTRY),
        "commands_by_category": dict(
            Counter(meta.category.value for meta in COMMAND_REGISTRY)
        ),
        "queries_by_category": dict(
            Counter(meta.category.value for meta in QUERY_REGISTRY)
        ),
        "commands_with_result_dto": sum(
            1 for meta in COMMAND_REGISTRY if meta.has_result_dto
        ),
        "commands_with_validation_rules": sum(
            1 for meta in COMMAND_REGISTRY if meta.validation_rules
        ),
        "commands_requiring_transaction": sum(
            1 for meta in COMMAND_REGISTRY if meta.requires_transaction
        ),
        "aggregate_queries": sum(
            1 for meta in QUERY_REGISTRY if meta.computes_aggregates
        ),
    }


def get_handler_class_for_command(command_class: type) -> type | None:
    """Get the handler class for a command, or None if unregistered."""
    meta = get_command_metadata(command_class)
    return meta.handler_class if meta else None


def get_handler_class_for_query(query_class: type) -> type | None:
    """Get the handler class for a query, or None if unregistered."""
    meta = get_query_metadata(query_class)
    return meta.handler_class if meta else None


def get_all_handler_classes() -> list[type]:
    """Get all registered handler classes (commands + queries)."""
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    handlers: set[type] = set()
    for cmd_meta in COMMAND_REGISTRY:
        handlers.add(cmd_meta.handler_class)
    for qry_meta in QUERY_REGISTRY:
        handlers.add(qry_meta.handler_class)
    return list(handlers)


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Returns:
        List of error messages. Empty if registry is consistent.

    Example:
        >>> validate_registry_consistency()
        []
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    errors: list[str] = []

    # Check for duplicate command classes
    command_classes = [meta.command_class for meta in COMMAND_REGISTRY]
    if len(command_classes) != len(set(command_classes)):
        errors.append("Duplicate command classes in COMMAND_REGISTRY")

    # Check for duplicate query classes
    query_classes = [meta.query_class for meta in QUERY_REGISTRY]
    if len(query_classes) != len(set(query_classes)):
        errors.append("Duplicate query classes in QUERY_REGISTRY")

    # Check that handlers have handle() method
    for cmd_meta in COMMAND_REGISTRY:
        if not hasattr(cmd_meta.handler_class, "handle"):
            errors.append(
                f"Command handler {cmd_meta.handler_class.__name__} missing handle() method"
            )

    for qry_meta in QUERY_REGISTRY:
        if not hasattr(qry_meta.handler_class, "handle"):
            errors.append(
                f"Query handler {qry_meta.handler_class.__name__} missing handle() method"
            )

    # Check that every rule addresses a field the command declares
    for cmd_meta in COMMAND_REGISTRY:
        field_names = {f.name for f in dataclasses.fields(cmd_meta.command_class)}
        for rule in cmd_meta.validation_rules:
            root = rule.path.split(".", 1)[0].removesuffix("[]")
            if root not in field_names:
                errors.append(
                    f"Rule path '{rule.path}' unknown on {cmd_meta.command_class.__name__}"
                )

    return errors
