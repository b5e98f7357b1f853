"""CQRS Registry - Single Source of Truth for Commands and Queries.

This module catalogs ALL commands and queries in the system with their metadata.
Used for:
- Dispatcher lookup (handler class and field rules per command)
- Validation tests (verify no drift between commands/handlers)
- Gap detection (missing handlers, result DTOs, etc.)

Adding new commands/queries:
1. Define command/query dataclass in appropriate *_commands.py/*_queries.py file
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY
4. Run tests - they'll tell you what's missing:
   - Handler classes needed
   - Result DTO references needed
   - Repository wiring needed (auto-wired by type hint)
"""

# Metadata types
from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# Registry constants
from src.application.cqrs.registry import (
    COMMAND_REGISTRY,
    QUERY_REGISTRY,
)

# Computed views and helper functions
from src.application.cqrs.computed_views import (
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

__all__ = [
    # Metadata types
    "CommandMetadata",
    "CQRSCategory",
    "QueryMetadata",
    # Registry constants
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    # Helper functions
    "get_all_commands",
    "get_all_handler_classes",
    "get_all_queries",
    "get_command_metadata",
    "get_commands_by_category",
    "get_queries_by_category",
    "get_query_metadata",
    "get_statistics",
    "validate_registry_consistency",
]
