"""Event database model.

Architecture:
    - Events own attendees (attendees.event_id FK with ON DELETE CASCADE)
    - Capacity stored on the row; the row is locked during registration
    - materials_ref holds the object-store locator, never the bytes
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.entities.event import (
    EVENT_DESCRIPTION_MAX_LENGTH,
    EVENT_LOCATION_MAX_LENGTH,
    EVENT_TITLE_MAX_LENGTH,
    MATERIALS_REF_MAX_LENGTH,
)
from src.infrastructure.persistence.base import BaseMutableModel


class Event(BaseMutableModel):
    """Event model for catalog storage.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        title: Event title
        description: Event description
        date: Scheduled date/time
        location: Venue
        max_attendees: Capacity (>= 1)
        materials_ref: Object-store locator (nullable until first upload)

    Indexes:
        - ix_events_created_at: Catalog listing order
    """

    __tablename__ = "events"
    __table_args__ = (
        CheckConstraint("max_attendees >= 1", name="ck_events_max_attendees_positive"),
        Index("ix_events_created_at", "created_at"),
    )

    title: Mapped[str] = mapped_column(
        String(EVENT_TITLE_MAX_LENGTH),
        nullable=False,
        comment="Event title",
    )

    description: Mapped[str] = mapped_column(
        String(EVENT_DESCRIPTION_MAX_LENGTH),
        nullable=False,
        comment="Event description",
    )

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Scheduled date and time",
    )

    location: Mapped[str] = mapped_column(
        String(EVENT_LOCATION_MAX_LENGTH),
        nullable=False,
        comment="Venue",
    )

    max_attendees: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Capacity limit",
    )

    materials_ref: Mapped[str | None] = mapped_column(
        String(MATERIALS_REF_MAX_LENGTH),
        nullable=True,
        comment="Object-store locator of uploaded materials",
    )
