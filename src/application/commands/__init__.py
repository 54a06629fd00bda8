"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateEvent, RegisterAttendee).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.event_commands import CreateEvent, UploadEventMaterials
from src.application.commands.notification_commands import RelayPendingNotifications
from src.application.commands.registration_commands import (
    CancelRegistration,
    RegisterAttendee,
    SendEventReminder,
)

__all__ = [
    # Event catalog commands
    "CreateEvent",
    "UploadEventMaterials",
    # Registration commands
    "CancelRegistration",
    "RegisterAttendee",
    "SendEventReminder",
    # Notification commands
    "RelayPendingNotifications",
]
