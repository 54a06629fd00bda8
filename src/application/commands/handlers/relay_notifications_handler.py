"""RelayPendingNotifications command handler."""

from src.application.commands.notification_commands import RelayPendingNotifications
from src.application.errors import ApplicationError
from src.application.services.outbox_relay import OutboxRelay
from src.core.result import Result, Success


class RelayPendingNotificationsHandler:
    """Run one outbox relay pass and report how many entries were sent."""

    def __init__(self, relay: OutboxRelay) -> None:
        self._relay = relay

    async def handle(
        self, cmd: RelayPendingNotifications
    ) -> Result[int, ApplicationError]:
        """Handle relay pass.

        Returns:
            Success(dispatched_count). Individual send failures leave entries
            pending and are not errors.
        """
        dispatched = await self._relay.relay_pending(cmd.limit)
        return Success(value=dispatched)
