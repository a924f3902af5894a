from __future__ import annotations

import json
from pathlib import Path

from domain.models import MessageBuilder, RunContext
from infra.logs import FileSystemRunArtifactStore


def test_creates_run_directory(tmp_path: Path) -> None:
    store = FileSystemRunArtifactStore(base_dir=str(tmp_path / "logs"))
    run_dir = store.ensure_run_directory(RunContext(run_id="run-123", is_debug=True))
    assert run_dir.endswith("run_run-123")
    assert Path(run_dir).is_dir()


def test_explicit_log_directory_wins(tmp_path: Path) -> None:
    store = FileSystemRunArtifactStore(base_dir=str(tmp_path / "logs"))
    run = RunContext(run_id="run-1", log_directory=str(tmp_path / "custom"))
    assert store.ensure_run_directory(run) == str(tmp_path / "custom")


def test_saves_messages_as_json_lines(tmp_path: Path) -> None:
    store = FileSystemRunArtifactStore(base_dir=str(tmp_path / "logs"))
    run = RunContext(run_id="run-msgs", is_debug=True)
    messages = [MessageBuilder.with_payload(p).build() for p in ("a", "z")]

    path = store.save_messages(run, messages)

    assert path.endswith("messages.jsonl")
    lines = [json.loads(line) for line in Path(path).read_text().splitlines()]
    assert [line["payload"] for line in lines] == ["a", "z"]
    assert lines[0]["headers"]["id"] == messages[0].id


def test_saves_run_metadata_json(tmp_path: Path) -> None:
    store = FileSystemRunArtifactStore(base_dir=str(tmp_path / "logs"))
    run = RunContext(run_id="run-meta-1", is_debug=True)
    path = store.save_run_metadata(run, {"run_id": "run-meta-1", "messages_received": 2})
    assert path.endswith("run_meta.json")
    loaded = json.loads(Path(path).read_text())
    assert loaded["run_id"] == "run-meta-1"
    assert loaded["messages_received"] == 2


def test_saving_messages_again_replaces_previous_file(tmp_path: Path) -> None:
    store = FileSystemRunArtifactStore(base_dir=str(tmp_path / "logs"))
    run = RunContext(run_id="run-again", log_directory=str(tmp_path / "custom"))

    store.save_messages(run, [MessageBuilder.with_payload("old").build()])
    path = store.save_messages(run, [MessageBuilder.with_payload("new").build()])

    lines = [json.loads(line) for line in Path(path).read_text().splitlines()]
    assert [line["payload"] for line in lines] == ["new"]
