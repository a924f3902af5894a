from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

_LEVELS = {"info": 20, "warning": 30, "error": 40}


class StructuredLogger:
    """Emits one JSON object per line; ``bind`` adds fields to every event."""

    def __init__(
        self,
        name: str = "splitter",
        *,
        level: str = "info",
        stream: TextIO | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._name = name
        self._level = level
        self._stream = stream
        self._context = dict(context or {})

    def bind(self, **fields: Any) -> StructuredLogger:
        return StructuredLogger(
            self._name,
            level=self._level,
            stream=self._stream,
            context={**self._context, **fields},
        )

    def info(self, message: str, **fields: Any) -> None:
        self._emit("info", message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._emit("warning", message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit("error", message, fields)

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        if _LEVELS[level] < _LEVELS[self._level]:
            return
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "logger": self._name,
            "message": message,
            "fields": {**self._context, **fields},
        }
        stream = self._stream if self._stream is not None else sys.stdout
        print(json.dumps(payload, sort_keys=True, default=str), file=stream)
