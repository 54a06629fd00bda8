"""Route metadata types for the API Route Registry.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, docs)
    HTTPMethod: HTTP method enum
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events",
        handler=create_event,
        resource="events",
        tags=["Events"],
        summary="Create event",
        operation_id="create_event",
        response_model=EventResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    )
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET) - cacheable
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE) - safe to retry
        NON_IDEMPOTENT: Side effects, not repeatable (POST) - do not retry

    Reference:
        - RFC 7231 Section 4.2 (HTTP Semantics)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Examples:
        >>> ErrorSpec(status=400, description="Validation error or event full")
        >>> ErrorSpec(status=404, description="Event not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route (Single Source of Truth).

    Identity fields:
        method: HTTP method
        path: URL path relative to the version prefix ("/events/{event_id}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category ("events", "attendees", "notifications")
        tags: OpenAPI tags

    OpenAPI documentation:
        summary, description, operation_id

    Request/Response:
        response_model: Pydantic model for the success body (None for 204/raw)
        response_class: Optional FastAPI response class (raw downloads)
        status_code: Success status
        errors: Possible error responses

    Behavior:
        idempotency: HTTP idempotency level
        deprecated: Whether the endpoint is deprecated
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Any]
    resource: str
    tags: Sequence[str]
    summary: str
    operation_id: str
    description: str | None = None
    response_model: Any = None
    response_class: type[Any] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] = field(default_factory=list)
    idempotency: IdempotencyLevel = IdempotencyLevel.SAFE
    deprecated: bool = False

    def __post_init__(self) -> None:
        if not self.path.startswith("/"):
            raise ValueError(f"Route path must start with '/': {self.path}")
        if self.method is HTTPMethod.GET and self.idempotency is not IdempotencyLevel.SAFE:
            raise ValueError(f"GET route must be SAFE: {self.operation_id}")

    @property
    def key(self) -> str:
        """Unique "{METHOD} {path}" identifier for this route."""
        return f"{self.method.value} {self.path}"
