"""Event request and response schemas.

Request bodies only check shape; content rules (lengths, blank strings,
capacity) are enforced by the command handlers so their violations surface
as 400 Problem Details.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.event import Event
from src.schemas.attendee_schemas import AttendeeResponse


class EventCreateRequest(BaseModel):
    """Create event request."""

    title: str = Field(..., description="Event title", examples=["Cloud Security Day"])
    description: str = Field(..., description="Event description")
    date: datetime = Field(
        ...,
        description="Scheduled date and time (naive values are taken as UTC)",
        examples=["2026-11-18T09:00:00Z"],
    )
    location: str = Field(..., description="Venue", examples=["Munich"])
    max_attendees: int = Field(..., description="Capacity limit", examples=[25])


class EventResponse(BaseModel):
    """Single event with its registered attendees."""

    id: UUID = Field(..., description="Event unique identifier")
    title: str
    description: str
    date: datetime
    location: str
    max_attendees: int
    materials_ref: str | None = Field(None, description="Locator of uploaded materials")
    attendees: list[AttendeeResponse] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            date=event.date,
            location=event.location,
            max_attendees=event.max_attendees,
            materials_ref=event.materials_ref,
            attendees=[AttendeeResponse.from_entity(a) for a in event.attendees],
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class MaterialsUploadResponse(BaseModel):
    """Response for a successful materials upload."""

    blob_url: str = Field(
        ...,
        serialization_alias="blobUrl",
        description="Locator of the stored materials",
    )


class ReminderResponse(BaseModel):
    """Response for a reminder request."""

    message: str = Field(
        ..., description="Outcome summary", examples=["Event reminder sent to 3 attendees"]
    )

    @classmethod
    def for_recipients(cls, count: int) -> "ReminderResponse":
        return cls(message=f"Event reminder sent to {count} attendees")
