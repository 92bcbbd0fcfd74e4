"""API v1 routers.

All routes are generated from the Route Metadata Registry at startup.
See src/presentation/routers/api/v1/routes/registry.py for the catalog.

Resources:
    /api/v1/employees       - Employee records, their goals and skills
    /api/v1/goals           - Performance goals
    /api/v1/reviews         - Performance reviews (with lock/unlock)
    /api/v1/departments     - Departments and their members
    /api/v1/skills          - Skill catalog and skill holders
    /api/v1/review-cycles   - Review cycle catalog
    /api/v1/me/permissions  - Caller's permission summary
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
