"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).
Request schemas build commands (``to_command``); response schemas are built
from application DTOs (``from_dto``).

Usage:
    from src.schemas.team_schemas import AddPlayerToTeamRequest, TeamMembershipResponse
"""

from src.schemas.common_schemas import CamelModel, CamelResponse

__all__ = [
    "CamelModel",
    "CamelResponse",
]
