"""
Domain layer package.

This package contains the message model, the splitting logic and the ports
that are independent of any specific channel implementation or framework.
"""

from .errors import (  # noqa: F401
    DestinationResolutionError,
    MessageDeliveryError,
    MessageHandlingError,
    MessagingError,
)
from .models import (  # noqa: F401
    FlowConfig,
    Message,
    MessageBuilder,
    MessageHeaders,
    RunContext,
)
from .ports import (  # noqa: F401
    ClockPort,
    ConfigProviderPort,
    IdGeneratorPort,
    LoggerPort,
    MessageChannelPort,
    MessageHandlerPort,
    PollableChannelPort,
    RunArtifactStorePort,
    SplitterPort,
    SubscribableChannelPort,
)

__all__ = [
    # Models
    "FlowConfig",
    "Message",
    "MessageBuilder",
    "MessageHeaders",
    "RunContext",
    # Errors
    "MessagingError",
    "MessageDeliveryError",
    "MessageHandlingError",
    "DestinationResolutionError",
    # Ports
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
