"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_register_attendee_handler

The container is organized into modules:
- infrastructure: Core services (database, logging, storage, transport)
- repositories: Repository factories
- event_handlers: Event catalog and materials handler factories
- registration_handlers: Attendee, reminder and relay handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_message_transport,
    get_notification_dispatcher,
    get_object_storage,
)

# Repositories
from src.core.container.repositories import (
    get_attendee_repository,
    get_event_repository,
    get_outbox_repository,
)

# Event catalog and materials handlers
from src.core.container.event_handlers import (
    get_create_event_handler,
    get_download_materials_handler,
    get_get_event_handler,
    get_list_events_handler,
    get_upload_materials_handler,
)

# Registration and notification handlers
from src.core.container.registration_handlers import (
    get_cancel_registration_handler,
    get_get_attendee_handler,
    get_list_attendees_handler,
    get_register_attendee_handler,
    get_relay_notifications_handler,
    get_send_event_reminder_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_message_transport",
    "get_notification_dispatcher",
    "get_object_storage",
    # Repositories
    "get_attendee_repository",
    "get_event_repository",
    "get_outbox_repository",
    # Event handlers
    "get_create_event_handler",
    "get_download_materials_handler",
    "get_get_event_handler",
    "get_list_events_handler",
    "get_upload_materials_handler",
    # Registration handlers
    "get_cancel_registration_handler",
    "get_get_attendee_handler",
    "get_list_attendees_handler",
    "get_register_attendee_handler",
    "get_relay_notifications_handler",
    "get_send_event_reminder_handler",
]
