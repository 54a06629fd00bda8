"""External-facing routers that sit outside the versioned API."""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
