"""Event catalog and materials handler factories (request-scoped)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_object_storage,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )
    from src.application.commands.handlers.upload_materials_handler import (
        UploadEventMaterialsHandler,
    )
    from src.application.queries.handlers.download_materials_handler import (
        DownloadEventMaterialsHandler,
    )
    from src.application.queries.handlers.get_event_handler import GetEventHandler
    from src.application.queries.handlers.list_events_handler import (
        ListEventsHandler,
    )


async def get_create_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateEventHandler":
    """Get CreateEvent command handler (request-scoped)."""
    from src.application.commands.handlers.create_event_handler import (
        CreateEventHandler,
    )
    from src.infrastructure.persistence.repositories import EventRepository

    return CreateEventHandler(
        event_repo=EventRepository(session=session),
        logger=get_logger(),
    )


async def get_get_event_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetEventHandler":
    """Get GetEvent query handler (request-scoped)."""
    from src.application.queries.handlers.get_event_handler import GetEventHandler
    from src.infrastructure.persistence.repositories import EventRepository

    return GetEventHandler(event_repo=EventRepository(session=session))


async def get_list_events_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListEventsHandler":
    """Get ListEvents query handler (request-scoped)."""
    from src.application.queries.handlers.list_events_handler import (
        ListEventsHandler,
    )
    from src.infrastructure.persistence.repositories import EventRepository

    return ListEventsHandler(event_repo=EventRepository(session=session))


async def get_upload_materials_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UploadEventMaterialsHandler":
    """Get UploadEventMaterials command handler (request-scoped).

    Creates handler with:
    - EventRepository (request-scoped)
    - Object store (app-scoped)
    """
    from src.application.commands.handlers.upload_materials_handler import (
        UploadEventMaterialsHandler,
    )
    from src.infrastructure.persistence.repositories import EventRepository

    return UploadEventMaterialsHandler(
        event_repo=EventRepository(session=session),
        storage=get_object_storage(),
        logger=get_logger(),
    )


async def get_download_materials_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DownloadEventMaterialsHandler":
    """Get DownloadEventMaterials query handler (request-scoped)."""
    from src.application.queries.handlers.download_materials_handler import (
        DownloadEventMaterialsHandler,
    )
    from src.infrastructure.persistence.repositories import EventRepository

    return DownloadEventMaterialsHandler(
        event_repo=EventRepository(session=session),
        storage=get_object_storage(),
        logger=get_logger(),
    )
