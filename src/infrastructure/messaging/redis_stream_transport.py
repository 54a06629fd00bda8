"""Redis Streams transport for notification messages.

Every message is appended to one stream with XADD. The routing key travels
as a field so consumers can filter. The stream is capped with an
approximate MAXLEN.

The entry id Redis assigns is returned as the broker acknowledgement.
"""

from redis.asyncio import Redis
from redis.exceptions import RedisError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import DispatchError


class RedisStreamTransport:
    """MessageTransportProtocol implementation on Redis Streams.

    Note: Does NOT inherit from MessageTransportProtocol (structural typing).

    Attributes:
        _redis: Async Redis client instance.
        _stream: Stream key receiving all notifications.
        _max_len: Approximate MAXLEN cap.
    """

    def __init__(
        self,
        redis_client: "Redis[bytes]",  # type: ignore[type-arg]
        stream: str = "notifications",
        max_len: int = 100_000,
    ) -> None:
        self._redis = redis_client
        self._stream = stream
        self._max_len = max_len

    @property
    def stream(self) -> str:
        return self._stream

    async def send(
        self, routing_key: str, content_type: str, payload: str
    ) -> Result[str, DispatchError]:
        """Append one message to the stream.

        Returns:
            Success(entry_id) once Redis accepted the entry.
            Failure(DispatchError) on any Redis error.
        """
        try:
            entry_id = await self._redis.xadd(
                self._stream,
                {
                    "routing_key": routing_key,
                    "content_type": content_type,
                    "payload": payload,
                },
                maxlen=self._max_len,
                approximate=True,
            )
        except RedisError as e:
            return Failure(
                error=DispatchError(
                    code=ErrorCode.DISPATCH_FAILED,
                    message=f"Redis rejected notification: {type(e).__name__}",
                    routing_key=routing_key,
                    details={"stream": self._stream},
                )
            )

        if isinstance(entry_id, bytes):
            entry_id = entry_id.decode()
        return Success(value=str(entry_id))

    async def close(self) -> None:
        await self._redis.aclose()
