"""API Route Registry - Single Source of Truth for all v1 routes.

Registry structure:
    - 11 endpoints across 3 resource categories (events, attendees,
      notifications)
    - Each entry is a RouteMetadata instance with complete specification
    - Handlers reference functions from the router modules

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from fastapi.responses import Response

from src.presentation.routers.api.v1.attendees import (
    cancel_attendee,
    get_attendee,
    list_attendees,
    register_attendee,
)
from src.presentation.routers.api.v1.events import (
    create_event,
    download_materials,
    get_event,
    list_events,
    send_reminder,
    upload_materials,
)
from src.presentation.routers.api.v1.notifications import create_relay
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.attendee_schemas import AttendeeResponse
from src.schemas.event_schemas import (
    EventResponse,
    MaterialsUploadResponse,
    ReminderResponse,
)
from src.schemas.notification_schemas import RelayResponse

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Events Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events",
        handler=list_events,
        resource="events",
        tags=["Events"],
        summary="List events",
        description="List all events in creation order, each with its attendees.",
        operation_id="list_events",
        response_model=list[EventResponse],
        status_code=200,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}",
        handler=get_event,
        resource="events",
        tags=["Events"],
        summary="Get event",
        description="Get one event with its attendees.",
        operation_id="get_event",
        response_model=EventResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="Event not found")],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events",
        handler=create_event,
        resource="events",
        tags=["Events"],
        summary="Create event",
        description="Create an event with a fixed attendee capacity.",
        operation_id="create_event",
        response_model=EventResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error or malformed body"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/materials",
        handler=upload_materials,
        resource="events",
        tags=["Events"],
        summary="Upload materials",
        description="Store a materials file for the event; re-upload overwrites.",
        operation_id="upload_materials",
        response_model=MaterialsUploadResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Invalid file name"),
            ErrorSpec(status=404, description="Event not found"),
            ErrorSpec(status=500, description="Object store unavailable"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/materials/{file_name}",
        handler=download_materials,
        resource="events",
        tags=["Events"],
        summary="Download materials",
        description="Download a materials file as an attachment.",
        operation_id="download_materials",
        response_model=None,
        response_class=Response,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Event or materials not found"),
            ErrorSpec(status=500, description="Object store unavailable"),
        ],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/notify",
        handler=send_reminder,
        resource="events",
        tags=["Events"],
        summary="Send reminder",
        description="Send one reminder message covering every current attendee.",
        operation_id="send_event_reminder",
        response_model=ReminderResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=404, description="Event not found"),
            ErrorSpec(status=500, description="Message transport unavailable"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    # =========================================================================
    # Attendees Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/attendees",
        handler=list_attendees,
        resource="attendees",
        tags=["Attendees"],
        summary="List attendees",
        description="List attendees of an event (empty for an unknown event).",
        operation_id="list_attendees",
        response_model=list[AttendeeResponse],
        status_code=200,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/events/{event_id}/attendees/{attendee_id}",
        handler=get_attendee,
        resource="attendees",
        tags=["Attendees"],
        summary="Get attendee",
        operation_id="get_attendee",
        response_model=AttendeeResponse,
        status_code=200,
        errors=[ErrorSpec(status=404, description="Attendee not found")],
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/events/{event_id}/attendees",
        handler=register_attendee,
        resource="attendees",
        tags=["Attendees"],
        summary="Register attendee",
        description="Register an attendee; rejected once the event is full.",
        operation_id="register_attendee",
        response_model=AttendeeResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Validation error or event full"),
            ErrorSpec(status=404, description="Event not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/events/{event_id}/attendees/{attendee_id}",
        handler=cancel_attendee,
        resource="attendees",
        tags=["Attendees"],
        summary="Cancel registration",
        operation_id="cancel_registration",
        response_model=None,
        status_code=204,
        errors=[ErrorSpec(status=404, description="Attendee not found")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    # =========================================================================
    # Notifications Resource (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/notifications/relays",
        handler=create_relay,
        resource="notifications",
        tags=["Notifications"],
        summary="Relay pending notifications",
        description="Send outbox entries left pending by a transport outage.",
        operation_id="relay_notifications",
        response_model=RelayResponse,
        status_code=200,
        errors=[ErrorSpec(status=400, description="Invalid batch limit")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
]
