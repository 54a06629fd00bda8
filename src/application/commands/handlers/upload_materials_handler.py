"""UploadEventMaterials command handler (Materials Binder).

Flow:
1. Validate the file name (no path separators, not '.' or '..')
2. Load the Event (NotFoundError if missing)
3. Store the bytes under ``{event_id}/{file_name}`` (re-upload overwrites)
4. Record the returned locator on the Event
5. Return the locator

The object store only ever sees bytes; the Event only ever sees the locator.
"""

from src.application.commands.event_commands import UploadEventMaterials
from src.application.errors import (
    ApplicationError,
    event_not_found,
    to_application_error,
)
from src.core.result import Failure, Result, Success
from src.domain.protocols import EventRepository, LoggerProtocol, ObjectStorageProtocol
from src.domain.validators import validate_fields, validate_file_name


class UploadEventMaterialsHandler:
    """Handler for UploadEventMaterials command."""

    def __init__(
        self,
        event_repo: EventRepository,
        storage: ObjectStorageProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            event_repo: Event repository (existence check, locator update).
            storage: Object store for the file bytes.
            logger: Structured logger.
        """
        self._event_repo = event_repo
        self._storage = storage
        self._logger = logger

    async def handle(self, cmd: UploadEventMaterials) -> Result[str, ApplicationError]:
        """Handle materials upload.

        Returns:
            Success(locator) once bytes are stored and the Event updated.
            Failure(ApplicationError) for invalid name, missing event or
            storage failure.
        """
        log = self._logger.bind(
            operation="upload_materials", event_id=str(cmd.event_id)
        )

        validation = validate_fields([("file_name", validate_file_name, cmd.file_name)])
        if isinstance(validation, Failure):
            log.info("materials_file_name_rejected")
            return Failure(error=to_application_error(validation.error))
        file_name: str = validation.value["file_name"]

        event = await self._event_repo.find_by_id(cmd.event_id)
        if event is None:
            log.info("materials_event_not_found")
            return Failure(error=to_application_error(event_not_found(cmd.event_id)))

        key = event.materials_key(file_name)
        stored = await self._storage.put(key, cmd.data, cmd.content_type)
        if isinstance(stored, Failure):
            log.error(
                "materials_upload_failed", key=key, error_message=stored.error.message
            )
            return Failure(error=to_application_error(stored.error))

        locator = stored.value
        if not await self._event_repo.attach_materials_ref(event.id, locator):
            log.warning("materials_event_vanished", key=key)
            return Failure(error=to_application_error(event_not_found(event.id)))

        log.info("materials_uploaded", key=key, size_bytes=len(cmd.data))
        return Success(value=locator)
