"""Attendee request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.attendee import Attendee


class AttendeeCreateRequest(BaseModel):
    """Register attendee request.

    Attributes:
        name: Attendee name.
        email: Contact address (normalized to lowercase on registration).
        company: Employer or organization.
    """

    name: str = Field(..., description="Attendee name", examples=["Ada Lovelace"])
    email: str = Field(..., description="Email address", examples=["ada@example.com"])
    company: str = Field(..., description="Company", examples=["Analytical Engines"])


class AttendeeResponse(BaseModel):
    """Single attendee response."""

    id: UUID = Field(..., description="Attendee unique identifier")
    event_id: UUID = Field(..., description="Owning event")
    name: str
    email: str
    company: str
    created_at: datetime | None = Field(None, description="Registration timestamp")

    @classmethod
    def from_entity(cls, attendee: Attendee) -> "AttendeeResponse":
        return cls(
            id=attendee.id,
            event_id=attendee.event_id,
            name=attendee.name,
            email=attendee.email,
            company=attendee.company,
            created_at=attendee.created_at,
        )
