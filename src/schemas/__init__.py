"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import EventCreateRequest, AttendeeResponse
"""

from src.schemas.attendee_schemas import AttendeeCreateRequest, AttendeeResponse
from src.schemas.event_schemas import (
    EventCreateRequest,
    EventResponse,
    MaterialsUploadResponse,
    ReminderResponse,
)
from src.schemas.notification_schemas import RelayRequest, RelayResponse
from src.schemas.system_schemas import HealthResponse, ServiceInfoResponse

__all__ = [
    # Events
    "EventCreateRequest",
    "EventResponse",
    "MaterialsUploadResponse",
    "ReminderResponse",
    # Attendees
    "AttendeeCreateRequest",
    "AttendeeResponse",
    # Notifications
    "RelayRequest",
    "RelayResponse",
    # System
    "HealthResponse",
    "ServiceInfoResponse",
]
