"""Route generator for the API Route Registry.

Converts declarative RouteMetadata entries into FastAPI routes at startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_responses: Build OpenAPI responses dict from error specs
"""

from typing import Any

from fastapi import APIRouter

from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import ErrorSpec, RouteMetadata


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes

    Raises:
        ValueError: If two entries declare the same method and path.
    """
    seen: set[str] = set()
    for metadata in registry:
        if metadata.key in seen:
            raise ValueError(f"Duplicate route in registry: {metadata.key}")
        seen.add(metadata.key)

        extra: dict[str, Any] = {}
        if metadata.response_class is not None:
            extra["response_class"] = metadata.response_class

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors) if metadata.errors else None,
            deprecated=metadata.deprecated,
            **extra,
        )


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Event not found")])
        {404: {"description": "Event not found", "model": ProblemDetails}}
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
