"""
Reusable fakes and in-memory implementations for tests.
"""

from .fake_config_provider import InMemoryConfigProvider
from .fake_runtime import (
    FixedClock,
    InMemoryLogger,
    InMemoryRunArtifactStore,
    SequentialIdGenerator,
)
from .recording_handler import RecordingChannel, RecordingHandler

__all__ = [
    "InMemoryConfigProvider",
    "FixedClock",
    "SequentialIdGenerator",
    "InMemoryLogger",
    "InMemoryRunArtifactStore",
    "RecordingChannel",
    "RecordingHandler",
]
