"""Infrastructure adapters – concrete implementations of domain ports."""

from .channels import DirectChannel, QueueChannel
from .config import FileSystemConfigProvider
from .logs import FileSystemRunArtifactStore
from .runtime import StructuredLogger, SystemClock, UuidIdGenerator

__all__ = [
    "DirectChannel",
    "QueueChannel",
    "FileSystemConfigProvider",
    "FileSystemRunArtifactStore",
    "SystemClock",
    "UuidIdGenerator",
    "StructuredLogger",
]
