"""Message transport adapters implementing MessageTransportProtocol."""

from src.infrastructure.messaging.in_memory_transport import (
    InMemoryTransport,
    SentMessage,
)
from src.infrastructure.messaging.redis_stream_transport import RedisStreamTransport

__all__ = [
    "InMemoryTransport",
    "RedisStreamTransport",
    "SentMessage",
]
