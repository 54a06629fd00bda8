"""Unit tests for materials handlers.

Tests cover:
- UploadEventMaterialsHandler: stores under {event_id}/{file_name}, records
  locator, overwrite, unsafe file name, missing event, storage outage
- DownloadEventMaterialsHandler: bytes + derived content type, missing event,
  no materials yet, unknown key / storage outage

Architecture:
- Mocked event repository (AsyncMock)
- Real InMemoryStorageAdapter (its ``available`` flag simulates an outage)
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands.event_commands import UploadEventMaterials
from src.application.commands.handlers.upload_materials_handler import (
    UploadEventMaterialsHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries.event_queries import DownloadEventMaterials
from src.application.queries.handlers.download_materials_handler import (
    DownloadEventMaterialsHandler,
    MaterialsFile,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.storage import InMemoryStorageAdapter
from tests.conftest import make_event


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def event():
    return make_event()


@pytest.fixture
def mock_event_repo(event):
    repo = AsyncMock()
    repo.find_by_id.return_value = event
    repo.attach_materials_ref.return_value = True
    return repo


@pytest.fixture
def storage():
    return InMemoryStorageAdapter(bucket="events")


@pytest.fixture
def upload_handler(mock_event_repo, storage, mock_logger):
    return UploadEventMaterialsHandler(
        event_repo=mock_event_repo, storage=storage, logger=mock_logger
    )


@pytest.fixture
def download_handler(mock_event_repo, storage, mock_logger):
    return DownloadEventMaterialsHandler(
        event_repo=mock_event_repo, storage=storage, logger=mock_logger
    )


def upload_command(event_id, file_name="agenda.pdf", data=b"%PDF-1.7"):
    return UploadEventMaterials(
        event_id=event_id,
        file_name=file_name,
        content_type="application/pdf",
        data=data,
    )


# =============================================================================
# Upload
# =============================================================================


@pytest.mark.unit
class TestUploadEventMaterialsHandler:
    """Tests for UploadEventMaterialsHandler."""

    async def test_stores_bytes_and_records_locator(
        self, upload_handler, mock_event_repo, storage, event
    ):
        result = await upload_handler.handle(upload_command(event.id))

        assert isinstance(result, Success)
        assert result.value == f"memory://events/{event.id}/agenda.pdf"
        mock_event_repo.attach_materials_ref.assert_awaited_once_with(
            event.id, result.value
        )
        assert await storage.get(f"{event.id}/agenda.pdf") == Success(value=b"%PDF-1.7")
        assert storage.content_type_of(f"{event.id}/agenda.pdf") == "application/pdf"

    async def test_reupload_overwrites(self, upload_handler, storage, event):
        await upload_handler.handle(upload_command(event.id, data=b"v1"))
        await upload_handler.handle(upload_command(event.id, data=b"v2"))

        assert await storage.get(f"{event.id}/agenda.pdf") == Success(value=b"v2")

    async def test_unsafe_file_name_rejected(
        self, upload_handler, mock_event_repo, event
    ):
        result = await upload_handler.handle(
            upload_command(event.id, file_name="../escape.pdf")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.domain_error.code == ErrorCode.INVALID_FILE_NAME
        mock_event_repo.find_by_id.assert_not_awaited()

    async def test_missing_event_is_not_found(
        self, upload_handler, mock_event_repo, storage
    ):
        mock_event_repo.find_by_id.return_value = None
        event_id = uuid7()

        result = await upload_handler.handle(upload_command(event_id))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert isinstance(await storage.get(f"{event_id}/agenda.pdf"), Failure)

    async def test_storage_outage_is_external_error(
        self, upload_handler, mock_event_repo, storage, event
    ):
        storage.available = False

        result = await upload_handler.handle(upload_command(event.id))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.EXTERNAL_SERVICE_ERROR
        assert result.error.domain_error.code == ErrorCode.STORAGE_UNAVAILABLE
        mock_event_repo.attach_materials_ref.assert_not_awaited()

    async def test_event_deleted_during_upload(
        self, upload_handler, mock_event_repo, event
    ):
        mock_event_repo.attach_materials_ref.return_value = False

        result = await upload_handler.handle(upload_command(event.id))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND


# =============================================================================
# Download
# =============================================================================


@pytest.mark.unit
class TestDownloadEventMaterialsHandler:
    """Tests for DownloadEventMaterialsHandler."""

    async def test_returns_bytes_with_content_type(
        self, download_handler, storage, event
    ):
        await storage.put(f"{event.id}/deck.pptx", b"slides", "application/zip")
        event.materials_ref = f"memory://events/{event.id}/deck.pptx"

        result = await download_handler.handle(
            DownloadEventMaterials(event_id=event.id, file_name="deck.pptx")
        )

        assert result == Success(
            value=MaterialsFile(
                file_name="deck.pptx",
                content_type=(
                    "application/vnd.openxmlformats-officedocument"
                    ".presentationml.presentation"
                ),
                data=b"slides",
            )
        )

    async def test_missing_event_is_not_found(self, download_handler, mock_event_repo):
        mock_event_repo.find_by_id.return_value = None

        result = await download_handler.handle(
            DownloadEventMaterials(event_id=uuid7(), file_name="agenda.pdf")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.domain_error.code == ErrorCode.EVENT_NOT_FOUND

    async def test_no_materials_uploaded_is_not_found(self, download_handler, event):
        result = await download_handler.handle(
            DownloadEventMaterials(event_id=event.id, file_name="agenda.pdf")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.domain_error.code == ErrorCode.MATERIALS_NOT_FOUND

    async def test_unknown_key_is_storage_failure(self, download_handler, event):
        event.materials_ref = f"memory://events/{event.id}/agenda.pdf"

        result = await download_handler.handle(
            DownloadEventMaterials(event_id=event.id, file_name="other.pdf")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.EXTERNAL_SERVICE_ERROR

    async def test_unsafe_file_name_rejected(self, download_handler, event):
        result = await download_handler.handle(
            DownloadEventMaterials(event_id=event.id, file_name="..")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.QUERY_VALIDATION_FAILED
