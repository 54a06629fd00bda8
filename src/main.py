"""
Main FastAPI application entry point.

Wires settings, request tracing, RFC 7807 exception handlers, the system
router and the registry-generated v1 router into one application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_logger, get_message_transport
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup:
        - development/testing: create tables directly (production uses Alembic)
        - SEED_DEMO_DATA=true: insert demo events into an empty catalog
    Shutdown:
        - close the message transport and dispose the database engine
    """
    logger = get_logger()
    database = get_database()

    if settings.is_development or settings.is_testing:
        await database.create_all()

    if settings.seed_demo_data:
        from src.infrastructure.persistence.repositories import EventRepository
        from src.infrastructure.persistence.seed import seed_demo_events

        async with database.get_session() as session:
            inserted = await seed_demo_events(EventRepository(session=session))
        logger.info("demo_events_seeded", inserted=inserted)

    logger.info(
        "application_started",
        environment=settings.environment.value,
        storage_backend=settings.storage_backend,
        transport_backend=settings.transport_backend,
    )

    yield

    transport = get_message_transport()
    close = getattr(transport, "close", None)
    if close is not None:
        await close()
    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Event registration service: events, capacity-limited "
    "registrations, materials and notifications",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
