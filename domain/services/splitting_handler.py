from __future__ import annotations

from domain.errors import DestinationResolutionError, MessageDeliveryError, MessageHandlingError
from domain.models import Message, MessageBuilder, MessageHeaders
from domain.ports import ClockPort, IdGeneratorPort, LoggerPort, MessageChannelPort, SplitterPort


def resolve_destination(
    output_channel: MessageChannelPort | None,
    message: Message,
) -> MessageChannelPort:
    """Prefer the configured output channel, fall back to the reply header."""
    if output_channel is not None:
        return output_channel
    reply = message.header(MessageHeaders.REPLY_CHANNEL)
    if reply is not None and callable(getattr(reply, "send", None)):
        return reply
    raise DestinationResolutionError(
        "No output channel configured and no reply_channel header present",
        failed_message=message,
    )


class SplittingHandler:
    """
    Message endpoint that emits one message per token of the payload.

    Child messages inherit the parent's headers and carry sequence details
    (correlation id, 1-based sequence number, sequence size) so that a
    downstream aggregator could reassemble them. A payload that yields no
    tokens produces no output at all.
    """

    def __init__(
        self,
        splitter: SplitterPort,
        output_channel: MessageChannelPort | None = None,
        *,
        id_generator: IdGeneratorPort,
        clock: ClockPort,
        logger: LoggerPort,
    ) -> None:
        self._splitter = splitter
        self._output_channel = output_channel
        self._id_generator = id_generator
        self._clock = clock
        self._logger = logger

    def handle(self, message: Message) -> None:
        if not isinstance(message.payload, str):
            raise MessageHandlingError(
                f"Splitter expects a str payload, got {type(message.payload).__name__}",
                failed_message=message,
            )

        tokens = self._splitter.split(message.payload)
        self._logger.info("message split", message_id=message.id, token_count=len(tokens))
        if not tokens:
            return

        destination = resolve_destination(self._output_channel, message)
        size = len(tokens)
        for number, token in enumerate(tokens, start=1):
            child = (
                MessageBuilder.with_payload(token)
                .copy_headers(message.headers)
                .set_header(MessageHeaders.CORRELATION_ID, message.id)
                .set_header(MessageHeaders.SEQUENCE_NUMBER, number)
                .set_header(MessageHeaders.SEQUENCE_SIZE, size)
                .build(id_generator=self._id_generator, clock=self._clock)
            )
            if not destination.send(child):
                raise MessageDeliveryError(
                    f"Failed to send split message {number}/{size} to '{destination.name}'",
                    failed_message=child,
                )
