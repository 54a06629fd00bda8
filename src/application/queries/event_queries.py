"""Event catalog queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. They NEVER
change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetEvent:
    """Get a single event (attendees included)."""

    event_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListEvents:
    """List every event in creation order (attendees included)."""


@dataclass(frozen=True, kw_only=True)
class DownloadEventMaterials:
    """Fetch an uploaded materials file.

    Attributes:
        event_id: Owning event.
        file_name: Name the file was uploaded under.
    """

    event_id: UUID
    file_name: str
