"""Pytest configuration shared by all test layers.

This configuration ensures:
1. Settings load in TESTING mode against throwaway backends (set before any
   ``src`` import, because settings are read once at import time)
2. Async tests are marked automatically
3. Integration tests get a fresh SQLite database per test
4. Entity builders keep individual tests short
"""

import asyncio
import os
import tempfile
from datetime import UTC, datetime, timedelta
from pathlib import Path
from unittest.mock import MagicMock
from uuid import UUID

_TEST_DB_DIR = tempfile.mkdtemp(prefix="eventdesk-tests-")

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "DATABASE_URL", f"sqlite+aiosqlite:///{Path(_TEST_DB_DIR) / 'app.db'}"
)
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("TRANSPORT_BACKEND", "memory")
os.environ.setdefault("SECRETS_BACKEND", "env")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities.attendee import Attendee  # noqa: E402
from src.domain.entities.event import Event  # noqa: E402


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI application")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Entity builders
# =============================================================================


def make_event(
    event_id: UUID | None = None,
    title: str = "Tech Conference 2026",
    description: str = "Annual technology conference",
    date: datetime | None = None,
    location: str = "Convention Center",
    max_attendees: int = 10,
    materials_ref: str | None = None,
    attendees: list[Attendee] | None = None,
    created_at: datetime | None = None,
) -> Event:
    """Build an Event with sensible defaults."""
    now = created_at or datetime.now(UTC)
    return Event(
        id=event_id or uuid7(),
        title=title,
        description=description,
        date=date or now + timedelta(days=30),
        location=location,
        max_attendees=max_attendees,
        materials_ref=materials_ref,
        attendees=attendees if attendees is not None else [],
        created_at=now,
        updated_at=now,
    )


def make_attendee(
    event_id: UUID,
    attendee_id: UUID | None = None,
    name: str = "Ada Lovelace",
    email: str = "ada@example.com",
    company: str = "Analytical Engines",
    created_at: datetime | None = None,
) -> Attendee:
    """Build an Attendee for the given event."""
    return Attendee(
        id=attendee_id or uuid7(),
        event_id=event_id,
        name=name,
        email=email,
        company=company,
        created_at=created_at or datetime.now(UTC),
    )


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Logger double; ``bind`` returns the same mock so calls stay visible."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh SQLite database with all tables created.

    Each test gets its own file, so nothing leaks between tests and
    concurrent sessions really use separate connections.
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.close()
