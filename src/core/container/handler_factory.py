"""Handler Factory Generator - Auto-wire handler dependencies from registry.

This module provides automatic dependency injection for CQRS handlers
based on their __init__ type hints. It introspects handler constructors
and resolves dependencies from the container.

Architecture:
- Uses Python's inspect module to analyze handler signatures
- Maps protocol types to container factory functions
- Creates request-scoped handler instances with injected dependencies

Usage:
    from src.core.container.handler_factory import create_handler

    handler = await create_handler(AddPlayerToTeamHandler, session)
    result = await handler.handle(command)

Reference:
    - src/application/cqrs/registry.py
    - src/application/dispatcher.py
"""

import inspect
from typing import Any, TypeVar, get_type_hints

from sqlalchemy.ext.asyncio import AsyncSession

# Type variable for handler classes
T = TypeVar("T")


# =============================================================================
# Dependency Type Mappings
# =============================================================================

# Repository types that need session injection
REPOSITORY_TYPES: dict[str, str] = {
    "ClubRepository": "src.infrastructure.persistence.repositories.ClubRepository",
    "AgeGroupRepository": "src.infrastructure.persistence.repositories.AgeGroupRepository",
    "TeamRepository": "src.infrastructure.persistence.repositories.TeamRepository",
    "TeamMembershipRepository": "src.infrastructure.persistence.repositories.TeamMembershipRepository",
    "TeamCoachRepository": "src.infrastructure.persistence.repositories.TeamCoachRepository",
    "KitRepository": "src.infrastructure.persistence.repositories.KitRepository",
    "PlayerRepository": "src.infrastructure.persistence.repositories.PlayerRepository",
    "EvaluationRepository": "src.infrastructure.persistence.repositories.EvaluationRepository",
    "CoachRepository": "src.infrastructure.persistence.repositories.CoachRepository",
    "MatchRepository": "src.infrastructure.persistence.repositories.MatchRepository",
    "DrillRepository": "src.infrastructure.persistence.repositories.DrillRepository",
    "DrillTemplateRepository": "src.infrastructure.persistence.repositories.DrillTemplateRepository",
    "DevelopmentPlanRepository": "src.infrastructure.persistence.repositories.DevelopmentPlanRepository",
    "ReportRepository": "src.infrastructure.persistence.repositories.ReportRepository",
    "UserRepository": "src.infrastructure.persistence.repositories.UserRepository",
}

# Service types that need session-scoped repositories
SESSION_SERVICE_TYPES: set[str] = {
    "ScopeResolver",
}

# Service/protocol types that are app-scoped singletons
SINGLETON_TYPES: dict[str, str] = {
    "LoggerProtocol": "get_logger",
}


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles both class types and string forward references.

    Args:
        annotation: Type annotation (class or string).

    Returns:
        Type name as string.
    """
    if annotation is None:
        return "None"

    # Handle Optional types (Union with None)
    origin = getattr(annotation, "__origin__", None)
    if origin is not None:
        args = getattr(annotation, "__args__", ())
        for arg in args:
            if arg is not type(None):
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__

    if isinstance(annotation, str):
        return annotation.split(".")[-1]

    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, dict[str, Any]]:
    """Analyze handler __init__ to discover dependencies.

    Args:
        handler_class: Handler class to analyze.

    Returns:
        Dict mapping parameter names to dependency info dicts.
        Each info dict contains keys: type_name (str), annotation, is_optional (bool).
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None:
        return {}
    try:
        # Resolves forward references
        hints = get_type_hints(init_method)
    except (NameError, TypeError):
        sig = inspect.signature(init_method)
        hints = {
            name: param.annotation
            for name, param in sig.parameters.items()
            if name != "self" and param.annotation != inspect.Parameter.empty
        }

    hints.pop("return", None)

    dependencies: dict[str, dict[str, Any]] = {}

    for param_name, annotation in hints.items():
        if param_name == "self":
            continue

        is_optional = False
        origin = getattr(annotation, "__origin__", None)
        if origin is not None:
            args = getattr(annotation, "__args__", ())
            is_optional = type(None) in args

        dependencies[param_name] = {
            "type_name": get_type_name(annotation),
            "annotation": annotation,
            "is_optional": is_optional,
        }

    return dependencies


def _get_repository_instance(
    type_name: str,
    session: AsyncSession,
) -> Any:
    """Create repository instance with session.

    Args:
        type_name: Repository type name.
        session: Database session for repository.

    Returns:
        Repository instance.

    Raises:
        ValueError: If repository type not found.
    """
    # Import repositories dynamically to avoid circular imports
    from src.infrastructure.persistence.repositories import (
        AgeGroupRepository,
        ClubRepository,
        CoachRepository,
        DevelopmentPlanRepository,
        DrillRepository,
        DrillTemplateRepository,
        EvaluationRepository,
        KitRepository,
        MatchRepository,
        PlayerRepository,
        ReportRepository,
        TeamCoachRepository,
        TeamMembershipRepository,
        TeamRepository,
        UserRepository,
    )

    repo_classes: dict[str, type] = {
        "ClubRepository": ClubRepository,
        "AgeGroupRepository": AgeGroupRepository,
        "TeamRepository": TeamRepository,
        "TeamMembershipRepository": TeamMembershipRepository,
        "TeamCoachRepository": TeamCoachRepository,
        "KitRepository": KitRepository,
        "PlayerRepository": PlayerRepository,
        "EvaluationRepository": EvaluationRepository,
        "CoachRepository": CoachRepository,
        "MatchRepository": MatchRepository,
        "DrillRepository": DrillRepository,
        "DrillTemplateRepository": DrillTemplateRepository,
        "DevelopmentPlanRepository": DevelopmentPlanRepository,
        "ReportRepository": ReportRepository,
        "UserRepository": UserRepository,
    }

    if type_name not in repo_classes:
        raise ValueError(f"Unknown repository type: {type_name}")

    return repo_classes[type_name](session=session)


def _get_singleton_instance(type_name: str) -> Any:
    """Get singleton service instance from container.

    Raises:
        ValueError: If singleton type not found.
    """
    from src.core.container.infrastructure import get_logger

    singleton_factories: dict[str, Any] = {
        "LoggerProtocol": get_logger,
    }

    if type_name not in singleton_factories:
        raise ValueError(f"Unknown singleton type: {type_name}")

    return singleton_factories[type_name]()


def _is_repository_type(type_name: str) -> bool:
    """Check if type is a repository that needs session."""
    return type_name in REPOSITORY_TYPES or type_name.endswith("Repository")


def _is_singleton_type(type_name: str) -> bool:
    """Check if type is a singleton service."""
    return type_name in SINGLETON_TYPES or type_name.endswith("Protocol")


def _is_session_service_type(type_name: str) -> bool:
    """Check if type is a session-scoped service."""
    return type_name in SESSION_SERVICE_TYPES


def _get_session_service_instance(
    type_name: str,
    session: AsyncSession,
) -> Any:
    """Create session-scoped service instance with repositories.

    Args:
        type_name: Service type name.
        session: Database session for repositories.

    Returns:
        Service instance.

    Raises:
        ValueError: If service type not found.
    """
    if type_name == "ScopeResolver":
        from src.application.services.scope_resolver import ScopeResolver
        from src.infrastructure.persistence.repositories import (
            AgeGroupRepository,
            ClubRepository,
            TeamRepository,
        )

        return ScopeResolver(
            club_repo=ClubRepository(session=session),
            age_group_repo=AgeGroupRepository(session=session),
            team_repo=TeamRepository(session=session),
        )

    raise ValueError(f"Unknown session service type: {type_name}")


async def create_handler(
    handler_class: type[T],
    session: AsyncSession,
    **overrides: Any,
) -> T:
    """Create handler instance with auto-wired dependencies.

    Introspects handler __init__ and resolves dependencies:
    - Repositories: Created with session
    - Session services: Built from session-scoped repositories
    - Singletons: Retrieved from container
    - Overrides: Provided explicitly

    Args:
        handler_class: Handler class to instantiate.
        session: Database session for repositories.
        **overrides: Explicit dependency overrides.

    Returns:
        Handler instance with injected dependencies.

    Raises:
        ValueError: If dependency cannot be resolved.

    Example:
        >>> handler = await create_handler(UpdateClubHandler, session)
        >>> result = await handler.handle(command)
    """
    dependencies = analyze_handler_dependencies(handler_class)
    resolved: dict[str, Any] = {}

    for param_name, dep_info in dependencies.items():
        type_name = dep_info["type_name"]
        is_optional = dep_info["is_optional"]

        if param_name in overrides:
            resolved[param_name] = overrides[param_name]
            continue

        try:
            if _is_repository_type(type_name):
                resolved[param_name] = _get_repository_instance(type_name, session)
            elif _is_session_service_type(type_name):
                resolved[param_name] = _get_session_service_instance(type_name, session)
            elif _is_singleton_type(type_name):
                resolved[param_name] = _get_singleton_instance(type_name)
            elif is_optional:
                resolved[param_name] = None
            else:
                raise ValueError(
                    f"Cannot resolve dependency '{param_name}' "
                    f"of type '{type_name}' for {handler_class.__name__}"
                )
        except ValueError:
            if is_optional:
                resolved[param_name] = None
            else:
                raise

    return handler_class(**resolved)


def get_supported_dependencies() -> dict[str, list[str]]:
    """Get list of supported dependency types.

    Returns:
        Dict with 'repositories', 'session_services' and 'singletons' lists.
    """
    return {
        "repositories": list(REPOSITORY_TYPES.keys()),
        "session_services": sorted(SESSION_SERVICE_TYPES),
        "singletons": list(SINGLETON_TYPES.keys()),
    }
