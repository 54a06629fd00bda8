"""In-process message transport for development and tests."""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import DispatchError


@dataclass(frozen=True, slots=True)
class SentMessage:
    """A message accepted by the in-memory transport."""

    routing_key: str
    content_type: str
    payload: str


class InMemoryTransport:
    """Records every accepted message in ``messages``.

    Set ``available = False`` to simulate a broker outage.
    """

    def __init__(self) -> None:
        self.messages: list[SentMessage] = []
        self.available = True

    async def send(
        self, routing_key: str, content_type: str, payload: str
    ) -> Result[str, DispatchError]:
        if not self.available:
            return Failure(
                error=DispatchError(
                    code=ErrorCode.DISPATCH_FAILED,
                    message="Transport unavailable",
                    routing_key=routing_key,
                )
            )
        self.messages.append(SentMessage(routing_key, content_type, payload))
        return Success(value=str(len(self.messages)))

    def routed_to(self, routing_key: str) -> list[SentMessage]:
        return [m for m in self.messages if m.routing_key == routing_key]
