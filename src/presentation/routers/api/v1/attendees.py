"""Attendees resource handlers.

Handler functions for registrations nested under an event.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_attendees    - List attendees of an event
    get_attendee      - Get one attendee of an event
    register_attendee - Register an attendee (capacity enforced)
    cancel_attendee   - Cancel a registration
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.cancel_registration_handler import (
    CancelRegistrationHandler,
)
from src.application.commands.handlers.register_attendee_handler import (
    RegisterAttendeeHandler,
)
from src.application.commands.registration_commands import (
    CancelRegistration,
    RegisterAttendee,
)
from src.application.queries.attendee_queries import GetAttendee, ListAttendees
from src.application.queries.handlers.get_attendee_handler import GetAttendeeHandler
from src.application.queries.handlers.list_attendees_handler import (
    ListAttendeesHandler,
)
from src.core.config import settings
from src.core.container import (
    get_cancel_registration_handler,
    get_get_attendee_handler,
    get_list_attendees_handler,
    get_register_attendee_handler,
)
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.attendee_schemas import AttendeeCreateRequest, AttendeeResponse

EventId = Annotated[UUID, Path(description="Event UUID")]
AttendeeId = Annotated[UUID, Path(description="Attendee UUID")]


async def list_attendees(
    request: Request,
    event_id: EventId,
    handler: ListAttendeesHandler = Depends(get_list_attendees_handler),
) -> list[AttendeeResponse] | JSONResponse:
    """List attendees of an event (empty for an unknown event).

    GET /api/v1/events/{event_id}/attendees → 200 OK
    """
    result = await handler.handle(ListAttendees(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return [AttendeeResponse.from_entity(a) for a in result.value]


async def get_attendee(
    request: Request,
    event_id: EventId,
    attendee_id: AttendeeId,
    handler: GetAttendeeHandler = Depends(get_get_attendee_handler),
) -> AttendeeResponse | JSONResponse:
    """Get an attendee of an event.

    GET /api/v1/events/{event_id}/attendees/{attendee_id} → 200 OK
    """
    result = await handler.handle(
        GetAttendee(event_id=event_id, attendee_id=attendee_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return AttendeeResponse.from_entity(result.value)


async def register_attendee(
    request: Request,
    response: Response,
    event_id: EventId,
    data: AttendeeCreateRequest,
    handler: RegisterAttendeeHandler = Depends(get_register_attendee_handler),
) -> AttendeeResponse | JSONResponse:
    """Register an attendee for an event.

    POST /api/v1/events/{event_id}/attendees → 201 Created

    Returns:
        AttendeeResponse for the stored registration.
        JSONResponse with RFC 7807 error on failure:
            400 for invalid fields or a full event, 404 for an unknown event.
    """
    command = RegisterAttendee(
        event_id=event_id,
        name=data.name,
        email=data.email,
        company=data.company,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    attendee = result.value
    response.headers["Location"] = (
        f"{settings.api_v1_prefix}/events/{event_id}/attendees/{attendee.id}"
    )
    return AttendeeResponse.from_entity(attendee)


async def cancel_attendee(
    request: Request,
    event_id: EventId,
    attendee_id: AttendeeId,
    handler: CancelRegistrationHandler = Depends(get_cancel_registration_handler),
) -> Response:
    """Cancel a registration.

    DELETE /api/v1/events/{event_id}/attendees/{attendee_id} → 204 No Content
    """
    result = await handler.handle(
        CancelRegistration(event_id=event_id, attendee_id=attendee_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
