"""Shared fixtures and context for BDD step definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest

from app import SplitterFlow, build_splitter_flow
from domain.models import FlowConfig, Message
from test.mocks import FixedClock, InMemoryLogger, SequentialIdGenerator


@dataclass
class FlowContext:
    """Holds mutable state shared across BDD steps."""

    config: FlowConfig = field(default_factory=FlowConfig)
    logger: InMemoryLogger = field(default_factory=InMemoryLogger)
    flow: SplitterFlow | None = None
    sent: list[Message] = field(default_factory=list)
    received: list[Message] = field(default_factory=list)


@pytest.fixture()
def ctx() -> FlowContext:
    return FlowContext()


def build_flow(ctx: FlowContext) -> SplitterFlow:
    ctx.flow = build_splitter_flow(
        ctx.config,
        logger=ctx.logger,
        clock=FixedClock(datetime(2025, 6, 1, tzinfo=timezone.utc)),
        id_generator=SequentialIdGenerator(),
    )
    return ctx.flow
