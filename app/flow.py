from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable

from domain.errors import MessagingError
from domain.models import FlowConfig, Message, MessageBuilder, RunContext
from domain.ports import ClockPort, IdGeneratorPort, LoggerPort, RunArtifactStorePort
from domain.services import BridgeHandler, CommaDelimitedSplitter, SplittingHandler
from infra.channels import DirectChannel, QueueChannel


@dataclass(frozen=True)
class SplitterFlow:
    """
    Wired splitter sub-flow.

    ``input`` and ``output`` are direct channels, so on their own nothing
    outside a larger flow would observe the split messages. The bridge
    forwards them into the ``sink`` queue where callers can poll them.
    """

    config: FlowConfig
    input: DirectChannel
    output: DirectChannel
    sink: QueueChannel
    splitter: SplittingHandler
    bridge: BridgeHandler
    id_generator: IdGeneratorPort
    clock: ClockPort

    def send(self, payload_or_message: Any) -> bool:
        if isinstance(payload_or_message, Message):
            message = payload_or_message
        else:
            message = MessageBuilder.with_payload(payload_or_message).build(
                id_generator=self.id_generator,
                clock=self.clock,
            )
        return self.input.send(message)

    def receive(self, timeout: float | None = 0) -> Message | None:
        return self.sink.receive(timeout)

    def drain(self) -> list[Message]:
        return self.sink.clear()

    def channel(self, name: str) -> DirectChannel | QueueChannel:
        channels = {ch.name: ch for ch in (self.input, self.output, self.sink)}
        if name not in channels:
            raise KeyError(name)
        return channels[name]


def build_splitter_flow(
    config: FlowConfig,
    *,
    logger: LoggerPort,
    clock: ClockPort,
    id_generator: IdGeneratorPort,
) -> SplitterFlow:
    input_channel = DirectChannel(config.input_channel, logger=logger)
    output_channel = DirectChannel(config.output_channel, logger=logger)
    sink = QueueChannel(config.sink_channel, capacity=config.sink_capacity, logger=logger)

    splitter = SplittingHandler(
        CommaDelimitedSplitter(),
        output_channel,
        id_generator=id_generator,
        clock=clock,
        logger=logger,
    )
    # Sink sends never block; a full queue surfaces as MessageDeliveryError.
    bridge = BridgeHandler(sink, logger=logger, send_timeout=0)

    input_channel.subscribe(splitter)
    output_channel.subscribe(bridge)

    return SplitterFlow(
        config=config,
        input=input_channel,
        output=output_channel,
        sink=sink,
        splitter=splitter,
        bridge=bridge,
        id_generator=id_generator,
        clock=clock,
    )


@dataclass(frozen=True)
class FlowRunResult:
    """Outcome of pushing a batch of payloads through a flow."""

    payloads_sent: int
    messages: list[Message]
    error: str | None = None
    artifacts_path: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_payloads(
    flow: SplitterFlow,
    payloads: Iterable[Any],
    *,
    run_context: RunContext,
    logger: LoggerPort,
    artifact_store: RunArtifactStorePort | None = None,
) -> FlowRunResult:
    """Send payloads one at a time, draining the sink after each send.

    Stops at the first messaging failure. In debug runs the received
    messages and a metadata summary are handed to the artifact store,
    including for failed runs.
    """
    sent = 0
    messages: list[Message] = []
    error: str | None = None
    for payload in payloads:
        try:
            flow.send(payload)
        except MessagingError as exc:
            logger.error("flow send failed", error=str(exc), run_id=run_context.run_id)
            error = str(exc)
            messages.extend(flow.drain())
            break
        sent += 1
        messages.extend(flow.drain())

    artifacts_path: str | None = None
    if run_context.is_debug and artifact_store is not None:
        artifact_store.save_messages(run_context, messages)
        artifacts_path = artifact_store.save_run_metadata(
            run_context,
            {
                "run_id": run_context.run_id,
                "config": asdict(flow.config),
                "payloads_sent": sent,
                "messages_received": len(messages),
                "outcome": "failed" if error else "completed",
                "error": error,
            },
        )
        logger.info("run artifacts saved", path=artifacts_path, run_id=run_context.run_id)

    return FlowRunResult(
        payloads_sent=sent,
        messages=messages,
        error=error,
        artifacts_path=artifacts_path,
    )
