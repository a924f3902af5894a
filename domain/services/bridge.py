from __future__ import annotations

from domain.errors import MessageDeliveryError
from domain.models import Message
from domain.ports import LoggerPort, MessageChannelPort
from domain.services.splitting_handler import resolve_destination


class BridgeHandler:
    """Forwards messages unchanged from one channel to another."""

    def __init__(
        self,
        output_channel: MessageChannelPort | None = None,
        *,
        logger: LoggerPort,
        send_timeout: float | None = None,
    ) -> None:
        self._output_channel = output_channel
        self._logger = logger
        self._send_timeout = send_timeout

    def handle(self, message: Message) -> None:
        destination = resolve_destination(self._output_channel, message)
        if not destination.send(message, self._send_timeout):
            self._logger.warning(
                "bridge send rejected",
                message_id=message.id,
                channel=destination.name,
            )
            raise MessageDeliveryError(
                f"Bridge could not send to '{destination.name}'",
                failed_message=message,
            )
