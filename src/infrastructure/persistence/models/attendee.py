"""Attendee database model.

Architecture:
    - Attendees belong to exactly one event (FK, ON DELETE CASCADE)
    - Rows are inserted only through the capacity-checked INSERT ... SELECT
    - Immutable once written (no updated_at)
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.entities.attendee import ATTENDEE_FIELD_MAX_LENGTH
from src.infrastructure.persistence.base import BaseModel


class Attendee(BaseModel):
    """Attendee model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Registration timestamp (from BaseModel)
        event_id: FK to events table
        name: Attendee name
        email: Attendee email (lowercase)
        company: Attendee company

    Indexes:
        - ix_attendees_event_id_created_at: Roster lookup and count per event
    """

    __tablename__ = "attendees"
    __table_args__ = (
        Index("ix_attendees_event_id_created_at", "event_id", "created_at"),
    )

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
        comment="FK to events table",
    )

    name: Mapped[str] = mapped_column(
        String(ATTENDEE_FIELD_MAX_LENGTH),
        nullable=False,
        comment="Attendee name",
    )

    email: Mapped[str] = mapped_column(
        String(ATTENDEE_FIELD_MAX_LENGTH),
        nullable=False,
        comment="Attendee email (lowercase)",
    )

    company: Mapped[str] = mapped_column(
        String(ATTENDEE_FIELD_MAX_LENGTH),
        nullable=False,
        comment="Attendee company",
    )
