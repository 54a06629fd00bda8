"""Notification relay handler.

Operational endpoint that sends outbox entries left pending by a transport
outage. Routes are registered via ROUTE_REGISTRY in routes/registry.py.
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.relay_notifications_handler import (
    RelayPendingNotificationsHandler,
)
from src.application.commands.notification_commands import RelayPendingNotifications
from src.core.container import get_relay_notifications_handler
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.notification_schemas import RelayRequest, RelayResponse


async def create_relay(
    request: Request,
    data: RelayRequest | None = None,
    handler: RelayPendingNotificationsHandler = Depends(
        get_relay_notifications_handler
    ),
) -> RelayResponse | JSONResponse:
    """Run one outbox relay pass.

    POST /api/v1/notifications/relays → 200 OK
    """
    limit = data.limit if data is not None else None
    result = await handler.handle(RelayPendingNotifications(limit=limit))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return RelayResponse(dispatched=result.value)
