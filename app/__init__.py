"""Application wiring package."""

from .flow import FlowRunResult, SplitterFlow, build_splitter_flow, run_payloads

__all__ = ["FlowRunResult", "SplitterFlow", "build_splitter_flow", "run_payloads"]
