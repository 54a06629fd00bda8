"""API v1 routers.

All routes are generated from the Route Metadata Registry at startup
(see routes/registry.py).

Resources:
    /api/v1/events                                  - Event catalog, materials, reminders
    /api/v1/events/{event_id}/attendees             - Registrations
    /api/v1/notifications/relays                    - Outbox relay passes
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
