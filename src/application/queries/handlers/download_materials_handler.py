"""DownloadEventMaterials query handler (Materials Binder read path).

Flow:
1. Validate the file name
2. Load the Event; it must exist and have a materials reference
3. Fetch ``{event_id}/{file_name}`` from the object store
4. Derive the content type from the extension

Any object-store failure, including a missing key, is reported as
StorageUnavailableError. There is no internal retry.
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import (
    ApplicationError,
    event_not_found,
    to_application_error,
)
from src.application.queries.event_queries import DownloadEventMaterials
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import EventRepository, LoggerProtocol, ObjectStorageProtocol
from src.domain.validators import validate_fields, validate_file_name
from src.domain.value_objects.content_type import content_type_for


@dataclass(frozen=True, kw_only=True)
class MaterialsFile:
    """Downloaded materials file DTO.

    Attributes:
        file_name: Name the file was requested under.
        content_type: MIME type derived from the extension.
        data: File contents.
    """

    file_name: str
    content_type: str
    data: bytes


def _materials_not_found(event_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.MATERIALS_NOT_FOUND,
        message=f"No materials uploaded for event {event_id}",
        resource_type="Materials",
        resource_id=str(event_id),
    )


class DownloadEventMaterialsHandler:
    """Handler for DownloadEventMaterials query."""

    def __init__(
        self,
        event_repo: EventRepository,
        storage: ObjectStorageProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._event_repo = event_repo
        self._storage = storage
        self._logger = logger

    async def handle(
        self, query: DownloadEventMaterials
    ) -> Result[MaterialsFile, ApplicationError]:
        """Handle materials download.

        Returns:
            Success(MaterialsFile) with bytes and derived content type.
            Failure(ApplicationError) for invalid name, missing event or
            materials, or storage failure.
        """
        log = self._logger.bind(
            operation="download_materials", event_id=str(query.event_id)
        )

        validation = validate_fields(
            [("file_name", validate_file_name, query.file_name)]
        )
        if isinstance(validation, Failure):
            return Failure(error=to_application_error(validation.error, query=True))
        file_name: str = validation.value["file_name"]

        event = await self._event_repo.find_by_id(query.event_id)
        if event is None:
            log.info("materials_event_not_found")
            return Failure(
                error=to_application_error(event_not_found(query.event_id), query=True)
            )
        if not event.has_materials():
            log.info("materials_not_uploaded")
            return Failure(
                error=to_application_error(_materials_not_found(event.id), query=True)
            )

        key = event.materials_key(file_name)
        fetched = await self._storage.get(key)
        if isinstance(fetched, Failure):
            log.error(
                "materials_download_failed",
                key=key,
                error_message=fetched.error.message,
            )
            return Failure(error=to_application_error(fetched.error, query=True))

        return Success(
            value=MaterialsFile(
                file_name=file_name,
                content_type=content_type_for(file_name),
                data=fetched.value,
            )
        )
