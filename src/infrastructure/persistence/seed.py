"""Demo catalog seed for development databases.

Inserts two sample events when the catalog is empty. Runs at startup when
SEED_DEMO_DATA=true; never touches a catalog that already has events.
"""

from datetime import UTC, datetime, timedelta

from uuid_extensions import uuid7

from src.domain.entities.event import Event
from src.domain.protocols import EventRepository

DEMO_EVENTS: tuple[tuple[str, str, str, int, int], ...] = (
    # (title, description, location, days from now, max attendees)
    (
        "Passwordless Authentication Workshop",
        "Learn passwordless authentication patterns for cloud services",
        "Virtual",
        30,
        50,
    ),
    (
        "Securing Cloud Applications",
        "Best practices for securing cloud-hosted applications",
        "Munich",
        60,
        25,
    ),
)


async def seed_demo_events(event_repo: EventRepository) -> int:
    """Insert the demo events into an empty catalog.

    Args:
        event_repo: Event repository bound to an open session.

    Returns:
        Number of events inserted (0 if the catalog already had events).
    """
    if await event_repo.count() > 0:
        return 0

    now = datetime.now(UTC)
    for offset, demo in enumerate(DEMO_EVENTS):
        title, description, location, days, capacity = demo
        created_at = now + timedelta(microseconds=offset)
        await event_repo.save(
            Event(
                id=uuid7(),
                title=title,
                description=description,
                date=now + timedelta(days=days),
                location=location,
                max_attendees=capacity,
                created_at=created_at,
                updated_at=created_at,
            )
        )
    return len(DEMO_EVENTS)
