from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from domain.models import FlowConfig, Message, RunContext


@runtime_checkable
class MessageChannelPort(Protocol):
    """Anything a message can be sent to."""

    name: str

    def send(self, message: Message, timeout: float | None = None) -> bool:
        ...


@runtime_checkable
class MessageHandlerPort(Protocol):
    """Consumer of messages dispatched by a subscribable channel."""

    def handle(self, message: Message) -> None:
        ...


@runtime_checkable
class SubscribableChannelPort(MessageChannelPort, Protocol):
    """Channel that pushes messages to its subscribed handlers."""

    def subscribe(self, handler: MessageHandlerPort) -> bool:
        ...

    def unsubscribe(self, handler: MessageHandlerPort) -> bool:
        ...


@runtime_checkable
class PollableChannelPort(MessageChannelPort, Protocol):
    """Channel that buffers messages until a consumer polls for them."""

    def receive(self, timeout: float | None = None) -> Message | None:
        ...

    def clear(self) -> list[Message]:
        ...

    def purge(self, selector: Callable[[Message], bool] | None) -> list[Message]:
        ...


@runtime_checkable
class SplitterPort(Protocol):
    """Turns a single payload into an ordered sequence of tokens."""

    def split(self, payload: str) -> list[str]:
        ...


@runtime_checkable
class ConfigProviderPort(Protocol):
    """Read flow configuration from an external source."""

    def get_config(self) -> FlowConfig:
        ...

    def validate(self) -> list[str]:
        ...


@runtime_checkable
class RunArtifactStorePort(Protocol):
    """Persistence for debug-mode run outputs."""

    def ensure_run_directory(self, run_context: RunContext) -> str:
        ...

    def save_messages(self, run_context: RunContext, messages: Iterable[Message]) -> str:
        ...

    def save_run_metadata(self, run_context: RunContext, metadata: dict[str, object]) -> str:
        ...


@runtime_checkable
class ClockPort(Protocol):
    """Time source for deterministic and easily testable code."""

    def now(self) -> datetime:
        ...


@runtime_checkable
class IdGeneratorPort(Protocol):
    """Generation of identifiers for runs and messages."""

    def new_run_id(self) -> str:
        ...

    def new_message_id(self) -> str:
        ...


@runtime_checkable
class LoggerPort(Protocol):
    """Structured, testable logging abstraction."""

    def info(self, message: str, **fields: Any) -> None:
        ...

    def warning(self, message: str, **fields: Any) -> None:
        ...

    def error(self, message: str, **fields: Any) -> None:
        ...


__all__ = [
    "MessageChannelPort",
    "MessageHandlerPort",
    "SubscribableChannelPort",
    "PollableChannelPort",
    "SplitterPort",
    "ConfigProviderPort",
    "RunArtifactStorePort",
    "ClockPort",
    "IdGeneratorPort",
    "LoggerPort",
]
