from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from domain.ports import ClockPort, IdGeneratorPort


class MessageHeaders:
    """Well-known header names stamped on every message."""

    ID = "id"
    TIMESTAMP = "timestamp"
    CORRELATION_ID = "correlation_id"
    SEQUENCE_NUMBER = "sequence_number"
    SEQUENCE_SIZE = "sequence_size"
    REPLY_CHANNEL = "reply_channel"


@dataclass(frozen=True)
class Message:
    """
    Immutable envelope carrying a payload plus headers between channels.

    ``id`` and ``timestamp`` are mirrored into ``headers`` by
    ``MessageBuilder`` so that serialized messages are self-describing.
    """

    payload: Any
    id: str
    timestamp: datetime
    headers: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze internal mapping to uphold dataclass immutability expectations.
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def header(self, name: str, default: Any = None) -> Any:
        return self.headers.get(name, default)

    @property
    def correlation_id(self) -> str | None:
        return self.headers.get(MessageHeaders.CORRELATION_ID)

    @property
    def sequence_number(self) -> int | None:
        return self.headers.get(MessageHeaders.SEQUENCE_NUMBER)

    @property
    def sequence_size(self) -> int | None:
        return self.headers.get(MessageHeaders.SEQUENCE_SIZE)

    def to_dict(self) -> dict[str, Any]:
        headers = {
            key: (value.isoformat() if isinstance(value, datetime) else value)
            for key, value in self.headers.items()
            if key != MessageHeaders.REPLY_CHANNEL
        }
        return {"payload": self.payload, "headers": headers}


class MessageBuilder:
    """Fluent construction of ``Message`` instances."""

    def __init__(self, payload: Any, headers: Mapping[str, Any] | None = None) -> None:
        self._payload = payload
        self._headers: dict[str, Any] = dict(headers or {})

    @classmethod
    def with_payload(cls, payload: Any) -> MessageBuilder:
        return cls(payload)

    @classmethod
    def from_message(cls, message: Message) -> MessageBuilder:
        return cls(message.payload, message.headers)

    def set_header(self, name: str, value: Any) -> MessageBuilder:
        if value is None:
            self._headers.pop(name, None)
        else:
            self._headers[name] = value
        return self

    def copy_headers(self, headers: Mapping[str, Any]) -> MessageBuilder:
        for name, value in headers.items():
            self.set_header(name, value)
        return self

    def copy_headers_if_absent(self, headers: Mapping[str, Any]) -> MessageBuilder:
        for name, value in headers.items():
            if name not in self._headers:
                self.set_header(name, value)
        return self

    def build(
        self,
        id_generator: IdGeneratorPort | None = None,
        clock: ClockPort | None = None,
    ) -> Message:
        message_id = (
            id_generator.new_message_id() if id_generator is not None else uuid.uuid4().hex
        )
        timestamp = clock.now() if clock is not None else datetime.now(timezone.utc)
        headers = dict(self._headers)
        headers[MessageHeaders.ID] = message_id
        headers[MessageHeaders.TIMESTAMP] = timestamp
        return Message(
            payload=self._payload,
            id=message_id,
            timestamp=timestamp,
            headers=headers,
        )


@dataclass(frozen=True)
class RunContext:
    """
    Per-run context for a flow invocation and its debug artifacts.

    The log directory is an abstract path; infra decides how it maps
    to the real filesystem.
    """

    run_id: str
    is_debug: bool = False
    log_directory: str | None = None


@dataclass(frozen=True)
class FlowConfig:
    """Channel names and options for the splitter flow, loaded from flow.json."""

    input_channel: str = "inputChannel"
    output_channel: str = "outputChannel"
    sink_channel: str = "testChannel"
    sink_capacity: int | None = None
    debug_mode: bool = False
    log_level: str = "info"


__all__ = [
    "FlowConfig",
    "Message",
    "MessageBuilder",
    "MessageHeaders",
    "RunContext",
]
