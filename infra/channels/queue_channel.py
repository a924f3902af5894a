from __future__ import annotations

import threading
from collections import deque
from typing import Callable

from domain.models import Message
from domain.ports import LoggerPort


class QueueChannel:
    """
    Buffered FIFO channel that consumers poll with ``receive``.

    ``timeout=None`` waits indefinitely, ``timeout=0`` never waits.
    """

    def __init__(
        self,
        name: str,
        *,
        capacity: int | None = None,
        logger: LoggerPort,
    ) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be a positive integer or None")
        self.name = name
        self._capacity = capacity
        self._logger = logger
        self._queue: deque[Message] = deque()
        self._condition = threading.Condition()

    @property
    def queue_size(self) -> int:
        with self._condition:
            return len(self._queue)

    @property
    def remaining_capacity(self) -> int | None:
        if self._capacity is None:
            return None
        with self._condition:
            return self._capacity - len(self._queue)

    def send(self, message: Message, timeout: float | None = None) -> bool:
        with self._condition:
            if not self._wait_for(self._has_room, timeout):
                self._logger.warning(
                    "queue full, message rejected",
                    channel=self.name,
                    message_id=message.id,
                    capacity=self._capacity,
                )
                return False
            self._queue.append(message)
            self._condition.notify_all()
        return True

    def receive(self, timeout: float | None = None) -> Message | None:
        with self._condition:
            if not self._wait_for(lambda: bool(self._queue), timeout):
                return None
            message = self._queue.popleft()
            self._condition.notify_all()
            return message

    def clear(self) -> list[Message]:
        with self._condition:
            drained = list(self._queue)
            self._queue.clear()
            self._condition.notify_all()
        return drained

    def purge(self, selector: Callable[[Message], bool] | None) -> list[Message]:
        """Remove messages the selector rejects; ``None`` removes everything."""
        if selector is None:
            return self.clear()
        with self._condition:
            purged: list[Message] = []
            kept: deque[Message] = deque()
            for message in self._queue:
                if selector(message):
                    kept.append(message)
                else:
                    purged.append(message)
            self._queue = kept
            self._condition.notify_all()
        return purged

    def _has_room(self) -> bool:
        return self._capacity is None or len(self._queue) < self._capacity

    def _wait_for(self, predicate: Callable[[], bool], timeout: float | None) -> bool:
        # Caller holds self._condition.
        if timeout is not None and timeout <= 0:
            return predicate()
        return self._condition.wait_for(predicate, timeout=timeout)
