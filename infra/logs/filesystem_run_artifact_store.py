from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from domain.models import Message, RunContext


class FileSystemRunArtifactStore:
    """Stores received messages and run metadata under logs/run_<id>/."""

    MESSAGES_FILENAME = "messages.jsonl"
    METADATA_FILENAME = "run_meta.json"

    def __init__(self, base_dir: str = "logs") -> None:
        self._base_dir = Path(base_dir)

    def ensure_run_directory(self, run_context: RunContext) -> str:
        run_dir = self._run_dir(run_context)
        run_dir.mkdir(parents=True, exist_ok=True)
        return str(run_dir)

    def save_messages(self, run_context: RunContext, messages: Iterable[Message]) -> str:
        run_dir = Path(self.ensure_run_directory(run_context))
        path = run_dir / self.MESSAGES_FILENAME
        with path.open("w", encoding="utf-8") as fh:
            for message in messages:
                fh.write(json.dumps(message.to_dict(), sort_keys=True, default=str))
                fh.write("\n")
        return str(path)

    def save_run_metadata(
        self,
        run_context: RunContext,
        metadata: dict[str, object],
    ) -> str:
        run_dir = Path(self.ensure_run_directory(run_context))
        path = run_dir / self.METADATA_FILENAME
        path.write_text(json.dumps(metadata, indent=2, default=str))
        return str(path)

    def _run_dir(self, run_context: RunContext) -> Path:
        if run_context.log_directory:
            return Path(run_context.log_directory)
        return self._base_dir / f"run_{run_context.run_id}"
