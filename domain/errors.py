from __future__ import annotations

from domain.models import Message


class MessagingError(RuntimeError):
    """Base error for channel and endpoint failures."""

    def __init__(self, description: str, failed_message: Message | None = None) -> None:
        super().__init__(description)
        self.failed_message = failed_message


class MessageDeliveryError(MessagingError):
    """A message could not be delivered to any subscriber or queue."""


class MessageHandlingError(MessagingError):
    """A handler raised while processing a message."""


class DestinationResolutionError(MessagingError):
    """Neither an output channel nor a reply channel header is available."""


__all__ = [
    "MessagingError",
    "MessageDeliveryError",
    "MessageHandlingError",
    "DestinationResolutionError",
]
