"""Repository dependency factories (request-scoped).

Each repository is bound to the request's session so that everything a
handler writes commits or rolls back together.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session
from src.infrastructure.persistence.repositories import (
    AttendeeRepository,
    EventRepository,
    OutboxRepository,
)


async def get_event_repository(
    session: AsyncSession = Depends(get_db_session),
) -> EventRepository:
    return EventRepository(session=session)


async def get_attendee_repository(
    session: AsyncSession = Depends(get_db_session),
) -> AttendeeRepository:
    return AttendeeRepository(session=session)


async def get_outbox_repository(
    session: AsyncSession = Depends(get_db_session),
) -> OutboxRepository:
    return OutboxRepository(session=session)
