"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLAlchemy async engine)
- Logging (structlog console adapter)
- Object storage (in-memory/S3)
- Message transport (in-memory/Redis Streams)
- Notification dispatcher

Adapter selection lives here (composition root). Secrets are the exception:
they load with settings, through src.infrastructure.secrets.factory.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.application.services.notification_dispatcher import (
        NotificationDispatcher,
    )
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.message_transport_protocol import (
        MessageTransportProtocol,
    )
    from src.domain.protocols.object_storage_protocol import ObjectStorageProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development, level=settings.log_level
    )


@lru_cache()
def get_object_storage() -> "ObjectStorageProtocol":
    """Get the materials object store singleton (app-scoped).

    STORAGE_BACKEND=s3 builds an S3StorageAdapter against AWS or the
    configured endpoint; anything else keeps bytes in process memory.
    """
    if settings.storage_backend == "s3":
        from src.infrastructure.storage.s3_adapter import S3StorageAdapter

        return S3StorageAdapter(
            bucket=settings.storage_bucket,
            logger=get_logger(),
            region=settings.aws_region,
            endpoint_url=settings.storage_endpoint_url,
            access_key_id=settings.aws_access_key_id,
            secret_access_key=settings.aws_secret_access_key,
        )

    from src.infrastructure.storage.in_memory_adapter import InMemoryStorageAdapter

    return InMemoryStorageAdapter(bucket=settings.storage_bucket)


@lru_cache()
def get_message_transport() -> "MessageTransportProtocol":
    """Get the notification transport singleton (app-scoped).

    TRANSPORT_BACKEND=redis appends to a Redis stream; anything else records
    messages in process memory.
    """
    if settings.transport_backend == "redis":
        from redis.asyncio import ConnectionPool, Redis

        from src.infrastructure.messaging.redis_stream_transport import (
            RedisStreamTransport,
        )

        pool = ConnectionPool.from_url(
            settings.redis_url,
            max_connections=20,
            decode_responses=False,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
        )
        return RedisStreamTransport(
            redis_client=Redis(connection_pool=pool),
            stream=settings.notifications_stream,
            max_len=settings.notifications_stream_max_len,
        )

    from src.infrastructure.messaging.in_memory_transport import InMemoryTransport

    return InMemoryTransport()


@lru_cache()
def get_notification_dispatcher() -> "NotificationDispatcher":
    """Get the notification dispatcher singleton (app-scoped)."""
    from src.application.services.notification_dispatcher import (
        NotificationDispatcher,
    )

    return NotificationDispatcher(
        transport=get_message_transport(),
        logger=get_logger(),
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    One session per request: commits on success, rolls back on any
    exception (including a cancelled request), always closes.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
