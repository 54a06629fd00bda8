"""AttendeeRepository - SQLAlchemy implementation of AttendeeRepository protocol.

Adapter for hexagonal architecture.

Capacity enforcement:
    reserve_seat() never counts attendees in Python and inserts afterwards.
    Inside one transaction it

    1. locks the event row (SELECT ... FOR UPDATE), which serializes
       registrations for the same event on PostgreSQL, then
    2. runs a single INSERT ... SELECT that only produces a row while
       ``(SELECT count(*) FROM attendees WHERE event_id = :id) < max_attendees``.

    Zero inserted rows means the event is full. The outbox entry announcing
    the registration is added to the same transaction and committed with it.

    SQLite ignores FOR UPDATE, but its single-writer lock is taken by the
    INSERT ... SELECT itself, so the count and the insert still happen
    atomically there.
"""

from uuid import UUID

from sqlalchemy import DateTime, String, Uuid, delete, func, insert, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.attendee import Attendee
from src.domain.entities.outbox_entry import OutboxEntry
from src.domain.enums.seat_reservation import SeatReservation
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.attendee import Attendee as AttendeeModel
from src.infrastructure.persistence.models.event import Event as EventModel
from src.infrastructure.persistence.repositories.outbox_repository import (
    outbox_entry_to_model,
)


def attendee_to_domain(attendee_model: AttendeeModel) -> Attendee:
    """Convert database model to domain entity."""
    return Attendee(
        id=attendee_model.id,
        event_id=attendee_model.event_id,
        name=attendee_model.name,
        email=attendee_model.email,
        company=attendee_model.company,
        created_at=ensure_utc(attendee_model.created_at),
    )


class AttendeeRepository:
    """SQLAlchemy implementation of AttendeeRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AttendeeRepository(session)
        ...     outcome = await repo.reserve_seat(attendee, outbox_entry)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def reserve_seat(
        self,
        attendee: Attendee,
        notification: OutboxEntry,
    ) -> SeatReservation:
        """Insert the attendee if the event has capacity (atomic).

        Args:
            attendee: Attendee with id, event_id and created_at assigned.
            notification: Pending outbox entry committed with the attendee.

        Returns:
            SeatReservation outcome. Nothing is written unless RESERVED.
        """
        locked = await self.session.execute(
            select(EventModel.max_attendees)
            .where(EventModel.id == attendee.event_id)
            .with_for_update()
        )
        if locked.scalar_one_or_none() is None:
            await self.session.rollback()
            return SeatReservation.EVENT_MISSING

        seats_taken = (
            select(func.count(AttendeeModel.id))
            .where(AttendeeModel.event_id == attendee.event_id)
            .scalar_subquery()
        )
        candidate = (
            select(
                literal(attendee.id, Uuid()),
                literal(attendee.event_id, Uuid()),
                literal(attendee.name, String()),
                literal(attendee.email, String()),
                literal(attendee.company, String()),
                literal(attendee.created_at, DateTime(timezone=True)),
            )
            .select_from(EventModel)
            .where(
                EventModel.id == attendee.event_id,
                seats_taken < EventModel.max_attendees,
            )
        )
        attendees_table = AttendeeModel.__table__
        stmt = insert(attendees_table).from_select(
            [
                attendees_table.c.id,
                attendees_table.c.event_id,
                attendees_table.c.name,
                attendees_table.c.email,
                attendees_table.c.company,
                attendees_table.c.created_at,
            ],
            candidate,
        )
        result = await self.session.execute(stmt)

        if result.rowcount == 0:  # type: ignore[attr-defined]
            await self.session.rollback()
            return SeatReservation.EVENT_FULL

        self.session.add(outbox_entry_to_model(notification))
        await self.session.commit()
        return SeatReservation.RESERVED

    async def find_for_event(
        self, event_id: UUID, attendee_id: UUID
    ) -> Attendee | None:
        """Find attendee by id, scoped to an event."""
        result = await self.session.execute(
            select(AttendeeModel).where(
                AttendeeModel.id == attendee_id,
                AttendeeModel.event_id == event_id,
            )
        )
        attendee_model = result.scalar_one_or_none()
        if attendee_model is None:
            return None
        return attendee_to_domain(attendee_model)

    async def list_by_event(self, event_id: UUID) -> list[Attendee]:
        """List attendees of an event in registration order."""
        result = await self.session.execute(
            select(AttendeeModel)
            .where(AttendeeModel.event_id == event_id)
            .order_by(AttendeeModel.created_at, AttendeeModel.id)
        )
        return [attendee_to_domain(m) for m in result.scalars()]

    async def delete_for_event(self, event_id: UUID, attendee_id: UUID) -> bool:
        """Delete an attendee scoped by both ids.

        Returns:
            True if a row was deleted.
        """
        result = await self.session.execute(
            delete(AttendeeModel).where(
                AttendeeModel.id == attendee_id,
                AttendeeModel.event_id == event_id,
            )
        )
        await self.session.commit()
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def count_by_event(self, event_id: UUID) -> int:
        """Count attendees registered for an event."""
        result = await self.session.execute(
            select(func.count(AttendeeModel.id)).where(
                AttendeeModel.event_id == event_id
            )
        )
        return int(result.scalar_one())
