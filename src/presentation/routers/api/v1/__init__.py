"""API v1 routers.

RESTful resource-based endpoints following strict REST compliance.
All endpoints use resource nouns, not action verbs.

NOTE: All routes are generated from the Route Metadata Registry at startup.
The registry (ROUTE_REGISTRY) is the single source of truth for all endpoints.
See src/presentation/routers/api/v1/routes/registry.py for the complete route catalog.

Resources:
    /api/v1/clubs              - Clubs, statistics and club-scoped listings
    /api/v1/age-groups         - Age groups and their teams
    /api/v1/teams              - Teams, squads, coaching staff and kits
    /api/v1/players            - Players, ability evaluations and reports
    /api/v1/coaches            - Coach profiles
    /api/v1/matches            - Fixtures and results
    /api/v1/drills             - Training drills
    /api/v1/drill-templates    - Session templates built from drills
    /api/v1/development-plans  - Player development plans
    /api/v1/reports            - Player progress reports
    /api/v1/users              - The signed-in user's profile
"""

from fastapi import APIRouter

from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix="/api/v1")
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

# Export v1_router
__all__ = [
    "v1_router",
]
