"""System router for non-versioned application endpoints.

Lightweight and side-effect free, for load balancers and smoke checks.
"""

from fastapi import APIRouter

from src.core.config import settings
from src.schemas.system_schemas import HealthResponse, ServiceInfoResponse

system_router = APIRouter(tags=["System"])


@system_router.get("/", response_model=ServiceInfoResponse)
async def root() -> ServiceInfoResponse:
    """Service banner with name and version."""
    return ServiceInfoResponse(
        message=f"{settings.app_name} API",
        status="operational",
        version=settings.app_version,
    )


@system_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint for monitoring and load balancers."""
    return HealthResponse(status="healthy")
