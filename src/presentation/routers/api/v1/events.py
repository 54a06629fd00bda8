"""Events resource handlers.

Handler functions for the event catalog, materials and reminders.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_events        - List all events with attendees
    get_event          - Get one event with attendees
    create_event       - Create an event
    upload_materials   - Upload the materials file for an event
    download_materials - Download a materials file
    send_reminder      - Broadcast a reminder to the current roster
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, File, Path, Request, Response, UploadFile
from fastapi.responses import JSONResponse

from src.application.commands.event_commands import CreateEvent, UploadEventMaterials
from src.application.commands.handlers.create_event_handler import CreateEventHandler
from src.application.commands.handlers.send_event_reminder_handler import (
    SendEventReminderHandler,
)
from src.application.commands.handlers.upload_materials_handler import (
    UploadEventMaterialsHandler,
)
from src.application.commands.registration_commands import SendEventReminder
from src.application.queries.event_queries import (
    DownloadEventMaterials,
    GetEvent,
    ListEvents,
)
from src.application.queries.handlers.download_materials_handler import (
    DownloadEventMaterialsHandler,
)
from src.application.queries.handlers.get_event_handler import GetEventHandler
from src.application.queries.handlers.list_events_handler import ListEventsHandler
from src.core.config import settings
from src.core.container import (
    get_create_event_handler,
    get_download_materials_handler,
    get_get_event_handler,
    get_list_events_handler,
    get_send_event_reminder_handler,
    get_upload_materials_handler,
)
from src.core.result import Failure
from src.domain.value_objects.content_type import content_type_for
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.event_schemas import (
    EventCreateRequest,
    EventResponse,
    MaterialsUploadResponse,
    ReminderResponse,
)

EventId = Annotated[UUID, Path(description="Event UUID")]


def _content_disposition(file_name: str) -> str:
    escaped = file_name.replace("\\", "\\\\").replace('"', '\\"')
    return f'attachment; filename="{escaped}"'


async def list_events(
    request: Request,
    handler: ListEventsHandler = Depends(get_list_events_handler),
) -> list[EventResponse] | JSONResponse:
    """List all events, oldest first, each with its attendees.

    GET /api/v1/events → 200 OK
    """
    result = await handler.handle(ListEvents())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return [EventResponse.from_entity(event) for event in result.value]


async def get_event(
    request: Request,
    event_id: EventId,
    handler: GetEventHandler = Depends(get_get_event_handler),
) -> EventResponse | JSONResponse:
    """Get a specific event.

    GET /api/v1/events/{event_id} → 200 OK

    Returns:
        EventResponse with attendees.
        JSONResponse with RFC 7807 error (404) on failure.
    """
    result = await handler.handle(GetEvent(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return EventResponse.from_entity(result.value)


async def create_event(
    request: Request,
    response: Response,
    data: EventCreateRequest,
    handler: CreateEventHandler = Depends(get_create_event_handler),
) -> EventResponse | JSONResponse:
    """Create an event.

    POST /api/v1/events → 201 Created (Location: /api/v1/events/{id})

    Returns:
        EventResponse for the stored event.
        JSONResponse with RFC 7807 error (400) on validation failure.
    """
    command = CreateEvent(
        title=data.title,
        description=data.description,
        date=data.date,
        location=data.location,
        max_attendees=data.max_attendees,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    event = result.value
    response.headers["Location"] = f"{settings.api_v1_prefix}/events/{event.id}"
    return EventResponse.from_entity(event)


async def upload_materials(
    request: Request,
    event_id: EventId,
    file: Annotated[UploadFile, File(description="Materials file")],
    handler: UploadEventMaterialsHandler = Depends(get_upload_materials_handler),
) -> MaterialsUploadResponse | JSONResponse:
    """Upload (or replace) the materials file of an event.

    POST /api/v1/events/{event_id}/materials → 200 OK

    Returns:
        MaterialsUploadResponse with the stored locator.
        JSONResponse with RFC 7807 error (400/404/500) on failure.
    """
    file_name = file.filename or ""
    data = await file.read()
    command = UploadEventMaterials(
        event_id=event_id,
        file_name=file_name,
        content_type=file.content_type or content_type_for(file_name),
        data=data,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MaterialsUploadResponse(blob_url=result.value)


async def download_materials(
    request: Request,
    event_id: EventId,
    file_name: Annotated[str, Path(description="Materials file name")],
    handler: DownloadEventMaterialsHandler = Depends(get_download_materials_handler),
) -> Response:
    """Download a materials file as an attachment.

    GET /api/v1/events/{event_id}/materials/{file_name} → 200 OK (raw bytes)
    """
    result = await handler.handle(
        DownloadEventMaterials(event_id=event_id, file_name=file_name)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    materials = result.value
    return Response(
        content=materials.data,
        media_type=materials.content_type,
        headers={"Content-Disposition": _content_disposition(materials.file_name)},
    )


async def send_reminder(
    request: Request,
    event_id: EventId,
    handler: SendEventReminderHandler = Depends(get_send_event_reminder_handler),
) -> ReminderResponse | JSONResponse:
    """Send one reminder message covering every current attendee.

    POST /api/v1/events/{event_id}/notify → 200 OK
    """
    result = await handler.handle(SendEventReminder(event_id=event_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ReminderResponse.for_recipients(result.value)
