"""Outbox relay.

Moves pending notification outbox entries onto the message transport.
Entries are written in the same transaction as the state change they
announce; the relay runs afterwards, either inline right after the commit or
as a batch pass triggered through the API.

Semantics:
    - Entries are sent oldest first
    - Acknowledged entries become DISPATCHED
    - Failed sends stay PENDING with attempts incremented and last_error set
    - A relay never raises because of a transport failure
"""

from datetime import UTC, datetime
from uuid import UUID

from src.application.services.notification_dispatcher import NotificationDispatcher
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.outbox_entry import OutboxEntry
from src.domain.enums.outbox_status import OutboxStatus
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.outbox_repository import OutboxRepository


class OutboxRelay:
    """Relay pending outbox entries through the dispatcher.

    Request-scoped: bound to the outbox repository of the current session.

    Attributes:
        _outbox_repo: Outbox repository.
        _dispatcher: Notification dispatcher (app-scoped).
        _logger: Structured logger.
        _batch_size: Default maximum entries per relay pass.
    """

    def __init__(
        self,
        outbox_repo: OutboxRepository,
        dispatcher: NotificationDispatcher,
        logger: LoggerProtocol,
        batch_size: int = 100,
    ) -> None:
        self._outbox_repo = outbox_repo
        self._dispatcher = dispatcher
        self._logger = logger
        self._batch_size = batch_size

    async def relay_pending(self, limit: int | None = None) -> int:
        """Send up to ``limit`` pending entries, oldest first.

        Args:
            limit: Maximum entries to send (defaults to the batch size).

        Returns:
            Number of entries dispatched in this pass.
        """
        entries = await self._outbox_repo.list_pending(limit or self._batch_size)
        dispatched = 0
        for entry in entries:
            if await self._deliver(entry):
                dispatched += 1

        self._logger.info(
            "outbox_relay_pass_completed",
            pending=len(entries),
            dispatched=dispatched,
        )
        return dispatched

    async def relay_entry(
        self, entry_id: UUID
    ) -> Result[OutboxStatus, NotFoundError]:
        """Send a single entry if it is still pending.

        Args:
            entry_id: Outbox entry to send.

        Returns:
            Success(status) with the entry's status after the attempt.
            Failure(NotFoundError) if the entry does not exist.
        """
        entry = await self._outbox_repo.find_by_id(entry_id)
        if entry is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.OUTBOX_ENTRY_NOT_FOUND,
                    message=f"Outbox entry {entry_id} not found",
                    resource_type="OutboxEntry",
                    resource_id=str(entry_id),
                )
            )
        if not entry.is_pending():
            return Success(value=entry.status)

        delivered = await self._deliver(entry)
        return Success(
            value=OutboxStatus.DISPATCHED if delivered else OutboxStatus.PENDING
        )

    async def _deliver(self, entry: OutboxEntry) -> bool:
        result = await self._dispatcher.send(entry.to_message())
        match result:
            case Success():
                await self._outbox_repo.mark_dispatched(entry.id, datetime.now(UTC))
                return True
            case Failure(error=error):
                await self._outbox_repo.mark_failed(entry.id, error.message)
                self._logger.warning(
                    "outbox_entry_left_pending",
                    outbox_entry_id=str(entry.id),
                    routing_key=entry.routing_key,
                    attempts=entry.attempts + 1,
                )
                return False
        return False
