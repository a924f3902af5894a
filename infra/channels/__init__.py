from .direct_channel import DirectChannel
from .queue_channel import QueueChannel

__all__ = ["DirectChannel", "QueueChannel"]
