"""EventRepository protocol for event persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.event import Event


class EventRepository(Protocol):
    """Event repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        find_by_id: Retrieve an event with its attendees
        list_all: Retrieve every event with attendees, in creation order
        save: Create a new event
        attach_materials_ref: Record the materials locator
        delete: Remove an event and its attendees
        count: Number of events in the catalog
    """

    async def find_by_id(self, event_id: UUID) -> Event | None:
        """Find event by ID, attendees populated.

        Args:
            event_id: Event's unique identifier.

        Returns:
            Event if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[Event]:
        """List all events with attendees, oldest first."""
        ...

    async def save(self, event: Event) -> None:
        """Create new event.

        Args:
            event: Domain Event entity to persist.
        """
        ...

    async def attach_materials_ref(self, event_id: UUID, materials_ref: str) -> bool:
        """Set the materials reference of an event.

        Args:
            event_id: Event's unique identifier.
            materials_ref: Opaque object-store locator.

        Returns:
            True if the event existed and was updated, False otherwise.
        """
        ...

    async def delete(self, event_id: UUID) -> bool:
        """Delete an event and all of its attendees in one unit of work.

        Returns:
            True if the event existed, False otherwise.
        """
        ...

    async def count(self) -> int:
        """Count events in the catalog."""
        ...
