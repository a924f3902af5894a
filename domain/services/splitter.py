from __future__ import annotations

DELIMITER = ","


def split(payload: str) -> list[str]:
    """Split on commas, trim each segment and drop the ones left empty."""
    return [token.strip() for token in payload.split(DELIMITER) if token.strip()]


class CommaDelimitedSplitter:
    """Stateless splitter; one instance may be shared between threads."""

    def split(self, payload: str) -> list[str]:
        return split(payload)
