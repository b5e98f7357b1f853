"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry metadata.
These types define the structure of command and query registry entries.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Self-documenting - clear field names and docstrings

Reference:
    - src/application/cqrs/registry.py
"""

from dataclasses import dataclass
from enum import Enum

from src.core.validation import FieldRule


class CQRSCategory(str, Enum):
    """Categories for CQRS commands and queries.

    Categories match the aggregates of the club tree and help organize
    commands/queries by their functional area.
    """

    CLUB = "club"  # Club profile, statistics, club kits
    AGE_GROUP = "age_group"  # Age groups and their statistics
    TEAM = "team"  # Teams, squads, staff, team kits
    PLAYER = "player"  # Player profiles, abilities, evaluations
    COACH = "coach"  # Coach profiles and assignments
    MATCH = "match"  # Fixtures, results, performance ratings
    DRILL = "drill"  # Drills and session templates
    DEVELOPMENT = "development"  # Development plans and report cards
    USER = "user"  # The authenticated user's profile


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Commands represent user intent to change system state. Each command
    has a corresponding handler that executes the business logic.

    Attributes:
        command_class: The command dataclass (e.g., AddPlayerToTeam).
        handler_class: The handler class (e.g., AddPlayerToTeamHandler).
        category: Functional category for organization.
        has_result_dto: Whether handler returns a result DTO (vs None).
        result_dto_class: The DTO class if has_result_dto is True.
        validation_rules: Field rules checked by the dispatcher before the
            handler runs.
        requires_transaction: Whether this command writes more than one row.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=AddPlayerToTeam,
        ...     handler_class=AddPlayerToTeamHandler,
        ...     category=CQRSCategory.TEAM,
        ...     has_result_dto=True,
        ...     result_dto_class=TeamMembershipResult,
        ...     validation_rules=ADD_PLAYER_TO_TEAM_RULES,
        ...     description="Add a player to a team's squad",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    has_result_dto: bool = False
    result_dto_class: type | None = None
    validation_rules: tuple[FieldRule, ...] = ()
    requires_transaction: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.has_result_dto and self.result_dto_class is None:
            raise ValueError(
                f"Command {self.command_class.__name__} has has_result_dto=True "
                f"but no result_dto_class specified"
            )
        if not self.has_result_dto and self.result_dto_class is not None:
            raise ValueError(
                f"Command {self.command_class.__name__} has result_dto_class "
                f"but has_result_dto=False"
            )


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Queries represent requests for data. They never change state.

    Attributes:
        query_class: The query dataclass (e.g., GetTeamOverview).
        handler_class: The handler class (e.g., GetTeamOverviewHandler).
        category: Functional category for organization.
        computes_aggregates: Whether the handler tallies counts or match
            records per request.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    computes_aggregates: bool = False
    description: str = ""


def get_handler_dependencies(handler_class: type) -> list[str]:
    """Extract dependency names from handler __init__ signature.

    Used by container auto-wiring to determine what dependencies
    to inject when creating handler instances.

    Args:
        handler_class: The handler class to inspect.

    Returns:
        List of dependency parameter names from __init__.

    Example:
        >>> class UpdateClubHandler:
        ...     def __init__(self, club_repo):
        ...         pass
        >>> get_handler_dependencies(UpdateClubHandler)
        ['club_repo']
    """
    import inspect

    try:
        # Use getattr to avoid mypy's unsound __init__ access warning
        init_method = getattr(handler_class, "__init__", None)
        if init_method is None:
            return []
        sig = inspect.signature(init_method)
        # Skip 'self' parameter
        params = list(sig.parameters.keys())[1:]
        return params
    except (ValueError, TypeError):
        return []
