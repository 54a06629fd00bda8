"""EventRepository - SQLAlchemy implementation of EventRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Event entities and database Event/Attendee models.
"""

from collections import defaultdict
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.attendee import Attendee
from src.domain.entities.event import Event
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.attendee import Attendee as AttendeeModel
from src.infrastructure.persistence.models.event import Event as EventModel
from src.infrastructure.persistence.repositories.attendee_repository import (
    attendee_to_domain,
)


class EventRepository:
    """SQLAlchemy implementation of EventRepository protocol.

    This class does NOT inherit from EventRepository protocol (Protocol uses
    structural typing).

    Attendees are loaded with a second query per call (one for a single
    event, one for a whole listing), never lazily.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = EventRepository(session)
        ...     event = await repo.find_by_id(event_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, event_id: UUID) -> Event | None:
        """Find event by ID with attendees populated."""
        result = await self.session.execute(
            select(EventModel).where(EventModel.id == event_id)
        )
        event_model = result.scalar_one_or_none()
        if event_model is None:
            return None

        attendees = await self._load_attendees([event_model.id])
        return self._to_domain(event_model, attendees.get(event_model.id, []))

    async def list_all(self) -> list[Event]:
        """List all events with attendees, in creation order."""
        result = await self.session.execute(
            select(EventModel).order_by(EventModel.created_at, EventModel.id)
        )
        event_models = list(result.scalars().all())
        if not event_models:
            return []

        attendees = await self._load_attendees([m.id for m in event_models])
        return [self._to_domain(m, attendees.get(m.id, [])) for m in event_models]

    async def save(self, event: Event) -> None:
        """Create new event in database.

        Args:
            event: Domain Event entity to persist (attendees are ignored).
        """
        self.session.add(self._to_model(event))
        await self.session.commit()

    async def attach_materials_ref(self, event_id: UUID, materials_ref: str) -> bool:
        """Set materials_ref on an event.

        Returns:
            True if the event existed and was updated.
        """
        result = await self.session.execute(
            update(EventModel)
            .where(EventModel.id == event_id)
            .values(materials_ref=materials_ref, updated_at=datetime.now(UTC))
        )
        await self.session.commit()
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def delete(self, event_id: UUID) -> bool:
        """Delete an event and its attendees in one unit of work.

        Attendees are deleted explicitly so the result does not depend on the
        database enforcing ON DELETE CASCADE (SQLite needs a pragma for it).

        Returns:
            True if the event existed.
        """
        await self.session.execute(
            delete(AttendeeModel).where(AttendeeModel.event_id == event_id)
        )
        result = await self.session.execute(
            delete(EventModel).where(EventModel.id == event_id)
        )
        await self.session.commit()
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def count(self) -> int:
        """Count events in the catalog."""
        result = await self.session.execute(select(func.count(EventModel.id)))
        return int(result.scalar_one())

    async def _load_attendees(
        self, event_ids: list[UUID]
    ) -> dict[UUID, list[Attendee]]:
        result = await self.session.execute(
            select(AttendeeModel)
            .where(AttendeeModel.event_id.in_(event_ids))
            .order_by(AttendeeModel.created_at, AttendeeModel.id)
        )
        grouped: dict[UUID, list[Attendee]] = defaultdict(list)
        for attendee_model in result.scalars():
            grouped[attendee_model.event_id].append(attendee_to_domain(attendee_model))
        return grouped

    def _to_domain(self, event_model: EventModel, attendees: list[Attendee]) -> Event:
        """Convert database model to domain entity."""
        return Event(
            id=event_model.id,
            title=event_model.title,
            description=event_model.description,
            date=ensure_utc(event_model.date),
            location=event_model.location,
            max_attendees=event_model.max_attendees,
            materials_ref=event_model.materials_ref,
            attendees=attendees,
            created_at=ensure_utc(event_model.created_at),
            updated_at=ensure_utc(event_model.updated_at),
        )

    def _to_model(self, event: Event) -> EventModel:
        """Convert domain entity to database model."""
        model = EventModel(
            id=event.id,
            title=event.title,
            description=event.description,
            date=event.date,
            location=event.location,
            max_attendees=event.max_attendees,
            materials_ref=event.materials_ref,
        )
        if event.created_at is not None:
            model.created_at = event.created_at
        if event.updated_at is not None:
            model.updated_at = event.updated_at
        return model
