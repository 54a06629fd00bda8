"""Integration tests for database infrastructure.

Tests database connectivity and session management with real SQLite:
    - Database connection
    - Session lifecycle management
    - Transaction commit/rollback behavior
    - Demo catalog seeding
"""

import pytest
from sqlalchemy import text

from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import EventRepository
from src.infrastructure.persistence.seed import DEMO_EVENTS, seed_demo_events
from tests.conftest import make_event


@pytest.mark.integration
class TestDatabaseIntegration:
    """Integration tests for database infrastructure."""

    async def test_database_connection_works(self, test_database):
        assert await test_database.check_connection() is True

    async def test_unreachable_database_reports_false(self, tmp_path):
        db = Database(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'x.db'}"
        )
        try:
            assert await db.check_connection() is False
        finally:
            await db.close()

    async def test_session_commits_on_success(self, test_database):
        async with test_database.get_session() as session:
            await session.execute(text("CREATE TABLE sample (value TEXT)"))
            await session.execute(text("INSERT INTO sample VALUES ('kept')"))

        async with test_database.get_session() as session:
            result = await session.execute(text("SELECT value FROM sample"))
            assert result.scalar() == "kept"

    async def test_session_rolls_back_on_error(self, test_database):
        event = make_event()

        with pytest.raises(RuntimeError):
            async with test_database.get_session() as session:
                session.add(EventRepository(session)._to_model(event))
                await session.flush()
                raise RuntimeError("request failed")

        async with test_database.get_session() as session:
            assert await EventRepository(session).find_by_id(event.id) is None


@pytest.mark.integration
class TestSeedDemoEvents:
    """Integration tests for the demo catalog seed."""

    async def test_seeds_empty_catalog(self, test_database):
        async with test_database.get_session() as session:
            inserted = await seed_demo_events(EventRepository(session))
        async with test_database.get_session() as session:
            events = await EventRepository(session).list_all()

        assert inserted == len(DEMO_EVENTS)
        assert [e.title for e in events] == [d[0] for d in DEMO_EVENTS]
        assert all(e.attendees == [] for e in events)

    async def test_leaves_existing_catalog_alone(self, test_database):
        async with test_database.get_session() as session:
            await EventRepository(session).save(make_event(title="Existing"))

        async with test_database.get_session() as session:
            inserted = await seed_demo_events(EventRepository(session))
            count = await EventRepository(session).count()

        assert inserted == 0
        assert count == 1
