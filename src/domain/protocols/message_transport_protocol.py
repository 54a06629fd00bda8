"""Message transport protocol (port) for outbound notifications.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (RedisStreamTransport, InMemoryTransport)
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import DispatchError


class MessageTransportProtocol(Protocol):
    """Protocol for message brokers.

    ``send`` resolves once the broker has accepted the message. Delivery to
    consumers is outside its contract.

    Implementations:
        - RedisStreamTransport: Redis Streams (XADD)
        - InMemoryTransport: Development and tests
    """

    async def send(
        self, routing_key: str, content_type: str, payload: str
    ) -> Result[str, DispatchError]:
        """Submit one message to the broker.

        Args:
            routing_key: Message subject.
            content_type: Payload MIME type.
            payload: Serialized body.

        Returns:
            Success(ack) with the broker-assigned message id.
            Failure(DispatchError) if the broker did not accept it.
        """
        ...
