from __future__ import annotations

import threading

from domain.errors import MessageDeliveryError, MessageHandlingError, MessagingError
from domain.models import Message
from domain.ports import LoggerPort, MessageHandlerPort


class DirectChannel:
    """
    Point-to-point channel that invokes a subscriber on the sender's thread.

    Subscribers are picked round-robin. When a handler raises, the next one
    is tried; the error of the last attempted handler is raised if none
    succeeds.
    """

    def __init__(self, name: str, *, logger: LoggerPort) -> None:
        self.name = name
        self._logger = logger
        self._handlers: list[MessageHandlerPort] = []
        self._next_index = 0
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._handlers)

    def subscribe(self, handler: MessageHandlerPort) -> bool:
        with self._lock:
            if handler in self._handlers:
                return False
            self._handlers.append(handler)
        self._logger.info("handler subscribed", channel=self.name, subscribers=len(self._handlers))
        return True

    def unsubscribe(self, handler: MessageHandlerPort) -> bool:
        with self._lock:
            if handler not in self._handlers:
                return False
            self._handlers.remove(handler)
        return True

    def send(self, message: Message, timeout: float | None = None) -> bool:
        handlers = self._handlers_in_dispatch_order()
        if not handlers:
            raise MessageDeliveryError(
                f"Dispatcher has no subscribers for channel '{self.name}'",
                failed_message=message,
            )

        errors: list[MessagingError] = []
        for handler in handlers:
            try:
                handler.handle(message)
                return True
            except MessagingError as exc:
                error = exc
            except Exception as exc:
                error = MessageHandlingError(
                    f"Handler failed on channel '{self.name}': {exc}",
                    failed_message=message,
                )
                error.__cause__ = exc
            self._logger.warning(
                "handler failed",
                channel=self.name,
                message_id=message.id,
                error=str(error),
            )
            errors.append(error)

        raise errors[-1]

    def _handlers_in_dispatch_order(self) -> list[MessageHandlerPort]:
        with self._lock:
            if not self._handlers:
                return []
            start = self._next_index % len(self._handlers)
            self._next_index = start + 1
            return self._handlers[start:] + self._handlers[:start]
