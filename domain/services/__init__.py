"""
Domain services.

These services implement the message endpoints while depending only on
domain models and ports so that infrastructure and wiring layers can remain thin.
"""

from .bridge import BridgeHandler
from .splitter import CommaDelimitedSplitter, split
from .splitting_handler import SplittingHandler, resolve_destination

__all__ = [
    "BridgeHandler",
    "CommaDelimitedSplitter",
    "SplittingHandler",
    "resolve_destination",
    "split",
]
