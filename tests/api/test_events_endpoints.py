"""API tests for event endpoints.

Tests the complete HTTP request/response cycle for the event catalog:
- GET /api/v1/events (list events)
- GET /api/v1/events/{id} (get event)
- POST /api/v1/events (create event)
- POST /api/v1/events/{id}/materials (upload materials)
- GET /api/v1/events/{id}/materials/{file_name} (download materials)
- POST /api/v1/events/{id}/notify (send reminder)

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- Mocks handlers to test HTTP layer behavior
- Tests RFC 7807 error responses
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.handlers.download_materials_handler import MaterialsFile
from src.core.container import (
    get_create_event_handler,
    get_download_materials_handler,
    get_get_event_handler,
    get_list_events_handler,
    get_send_event_reminder_handler,
    get_upload_materials_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.errors import DispatchError, StorageUnavailableError
from src.main import app
from tests.conftest import make_attendee, make_event


# =============================================================================
# Test Doubles
# =============================================================================


class MockHandler:
    """Handler double returning a fixed result and recording the request."""

    def __init__(self, value: Any = None, error: ApplicationError | None = None):
        self._value = value
        self._error = error
        self.received: list[Any] = []

    async def handle(self, request: Any) -> Success[Any] | Failure[ApplicationError]:
        self.received.append(request)
        if self._error is not None:
            return Failure(error=self._error)
        return Success(value=self._value)


def not_found(event_id) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message=f"Event {event_id} not found",
        domain_error=NotFoundError(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event {event_id} not found",
            resource_type="Event",
            resource_id=str(event_id),
        ),
    )


def validation_failed(field: str, message: str) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        message=f"{field}: {message}",
        domain_error=ValidationError(
            code=ErrorCode.VALIDATION_FAILED,
            message=f"{field}: {message}",
            field=field,
        ),
    )


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def override(dependency, handler: MockHandler) -> MockHandler:
    app.dependency_overrides[dependency] = lambda: handler
    return handler


EVENT_BODY = {
    "title": "Cloud Security Day",
    "description": "Talks and workshops",
    "date": "2026-11-18T09:00:00Z",
    "location": "Munich",
    "max_attendees": 25,
}


# =============================================================================
# List / Get
# =============================================================================


@pytest.mark.api
class TestListEvents:
    def test_returns_events_with_attendees(self, client):
        event = make_event(title="Cloud Security Day")
        event.attendees.append(make_attendee(event.id))
        override(get_list_events_handler, MockHandler(value=[event]))

        response = client.get("/api/v1/events")

        assert response.status_code == 200
        (body,) = response.json()
        assert body["id"] == str(event.id)
        assert body["title"] == "Cloud Security Day"
        assert body["materials_ref"] is None
        assert body["attendees"][0]["email"] == "ada@example.com"

    def test_empty_catalog(self, client):
        override(get_list_events_handler, MockHandler(value=[]))

        response = client.get("/api/v1/events")

        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.api
class TestGetEvent:
    def test_returns_event(self, client):
        event = make_event(max_attendees=3)
        handler = override(get_get_event_handler, MockHandler(value=event))

        response = client.get(f"/api/v1/events/{event.id}")

        assert response.status_code == 200
        assert response.json()["max_attendees"] == 3
        assert handler.received[0].event_id == event.id

    def test_unknown_event_is_404_problem(self, client):
        event_id = uuid7()
        override(get_get_event_handler, MockHandler(error=not_found(event_id)))

        response = client.get(f"/api/v1/events/{event_id}")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        body = response.json()
        assert body["title"] == "Resource Not Found"
        assert body["status"] == 404
        assert body["type"].endswith("/errors/not_found")
        assert body["detail"] == f"Event {event_id} not found"
        assert body["instance"] == f"/api/v1/events/{event_id}"
        assert body["trace_id"] == response.headers["X-Trace-Id"]
        assert "errors" not in body

    def test_malformed_id_is_422(self, client):
        response = client.get("/api/v1/events/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["title"] == "Validation Failed"


# =============================================================================
# Create
# =============================================================================


@pytest.mark.api
class TestCreateEvent:
    def test_created_with_location_header(self, client):
        event = make_event(title="Cloud Security Day")
        handler = override(get_create_event_handler, MockHandler(value=event))

        response = client.post("/api/v1/events", json=EVENT_BODY)

        assert response.status_code == 201
        assert response.headers["Location"] == f"/api/v1/events/{event.id}"
        assert response.json()["id"] == str(event.id)
        command = handler.received[0]
        assert command.title == "Cloud Security Day"
        assert command.max_attendees == 25
        assert command.date.tzinfo is not None

    def test_validation_failure_is_400_with_field(self, client):
        override(
            get_create_event_handler,
            MockHandler(
                error=validation_failed("max_attendees", "Value must be at least 1")
            ),
        )

        response = client.post("/api/v1/events", json={**EVENT_BODY, "max_attendees": 0})

        assert response.status_code == 400
        body = response.json()
        assert body["title"] == "Validation Failed"
        assert body["errors"][0]["field"] == "max_attendees"
        assert body["errors"][0]["code"] == "validation_failed"

    def test_missing_title_is_400(self, client):
        handler = override(get_create_event_handler, MockHandler(value=make_event()))
        body = {k: v for k, v in EVENT_BODY.items() if k != "title"}

        response = client.post("/api/v1/events", json=body)

        assert response.status_code == 400
        problem = response.json()
        assert problem["title"] == "Validation Failed"
        assert problem["type"].endswith("/errors/validation_failed")
        assert problem["errors"][0]["field"] == "title"
        assert problem["errors"][0]["code"] == "validation_failed"
        assert handler.received == []

    def test_non_numeric_capacity_is_400(self, client):
        override(get_create_event_handler, MockHandler(value=make_event()))

        response = client.post(
            "/api/v1/events", json={**EVENT_BODY, "max_attendees": "x"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "max_attendees"

    def test_non_json_body_is_400(self, client):
        override(get_create_event_handler, MockHandler(value=make_event()))

        response = client.post(
            "/api/v1/events",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400


# =============================================================================
# Materials
# =============================================================================


@pytest.mark.api
class TestUploadMaterials:
    def test_upload_returns_locator(self, client):
        event_id = uuid7()
        handler = override(
            get_upload_materials_handler,
            MockHandler(value=f"memory://events/{event_id}/agenda.pdf"),
        )

        response = client.post(
            f"/api/v1/events/{event_id}/materials",
            files={"file": ("agenda.pdf", b"%PDF-1.7", "application/pdf")},
        )

        assert response.status_code == 200
        assert response.json() == {
            "blobUrl": f"memory://events/{event_id}/agenda.pdf"
        }
        command = handler.received[0]
        assert command.file_name == "agenda.pdf"
        assert command.data == b"%PDF-1.7"
        assert command.content_type == "application/pdf"

    def test_missing_file_part_is_400(self, client):
        override(get_upload_materials_handler, MockHandler(value="x"))

        response = client.post(f"/api/v1/events/{uuid7()}/materials")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "file"

    def test_storage_outage_is_500(self, client):
        override(
            get_upload_materials_handler,
            MockHandler(
                error=ApplicationError(
                    code=ApplicationErrorCode.EXTERNAL_SERVICE_ERROR,
                    message="Object store unavailable",
                    domain_error=StorageUnavailableError(
                        code=ErrorCode.STORAGE_UNAVAILABLE,
                        message="Object store unavailable",
                        key="e/agenda.pdf",
                    ),
                )
            ),
        )

        response = client.post(
            f"/api/v1/events/{uuid7()}/materials",
            files={"file": ("agenda.pdf", b"x", "application/pdf")},
        )

        assert response.status_code == 500
        assert response.json()["title"] == "External Service Error"


@pytest.mark.api
class TestDownloadMaterials:
    def test_download_is_attachment(self, client):
        event_id = uuid7()
        handler = override(
            get_download_materials_handler,
            MockHandler(
                value=MaterialsFile(
                    file_name="deck.pptx",
                    content_type=(
                        "application/vnd.openxmlformats-officedocument"
                        ".presentationml.presentation"
                    ),
                    data=b"slides",
                )
            ),
        )

        response = client.get(f"/api/v1/events/{event_id}/materials/deck.pptx")

        assert response.status_code == 200
        assert response.content == b"slides"
        assert response.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.presentationml"
        )
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="deck.pptx"'
        )
        assert handler.received[0].file_name == "deck.pptx"

    def test_no_materials_is_404(self, client):
        event_id = uuid7()
        override(get_download_materials_handler, MockHandler(error=not_found(event_id)))

        response = client.get(f"/api/v1/events/{event_id}/materials/a.pdf")

        assert response.status_code == 404


# =============================================================================
# Reminder
# =============================================================================


@pytest.mark.api
class TestSendReminder:
    def test_reports_recipient_count(self, client):
        override(get_send_event_reminder_handler, MockHandler(value=3))

        response = client.post(f"/api/v1/events/{uuid7()}/notify")

        assert response.status_code == 200
        assert response.json() == {"message": "Event reminder sent to 3 attendees"}

    def test_empty_roster_still_succeeds(self, client):
        override(get_send_event_reminder_handler, MockHandler(value=0))

        response = client.post(f"/api/v1/events/{uuid7()}/notify")

        assert response.json() == {"message": "Event reminder sent to 0 attendees"}

    def test_transport_failure_is_500(self, client):
        event_id = uuid7()
        override(
            get_send_event_reminder_handler,
            MockHandler(
                error=ApplicationError(
                    code=ApplicationErrorCode.EXTERNAL_SERVICE_ERROR,
                    message="Transport unavailable",
                    domain_error=DispatchError(
                        code=ErrorCode.DISPATCH_FAILED,
                        message="Transport unavailable",
                        routing_key=f"Reminder-{event_id}",
                    ),
                )
            ),
        )

        response = client.post(f"/api/v1/events/{event_id}/notify")

        assert response.status_code == 500
        assert response.json()["detail"] == "Transport unavailable"
