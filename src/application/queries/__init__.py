"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetEvent, ListAttendees).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.attendee_queries import GetAttendee, ListAttendees
from src.application.queries.event_queries import (
    DownloadEventMaterials,
    GetEvent,
    ListEvents,
)

__all__ = [
    "DownloadEventMaterials",
    "GetAttendee",
    "GetEvent",
    "ListAttendees",
    "ListEvents",
]
