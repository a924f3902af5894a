from __future__ import annotations

import json
from pathlib import Path

from domain.models import FlowConfig

CONFIG_FILENAME = "flow.json"

_REQUIRED_KEYS = {"input_channel", "output_channel", "sink_channel"}
_CHANNEL_KEYS = ("input_channel", "output_channel", "sink_channel")
_LOG_LEVELS = {"info", "warning", "error"}


class FileSystemConfigProvider:
    """Reads flow.json from a config directory.

    Every public method re-reads from disk so that edits
    to the JSON file take effect without restarting the app.
    """

    def __init__(self, config_dir: str) -> None:
        self._config_dir = Path(config_dir)

    @property
    def config_path(self) -> Path:
        return self._config_dir / CONFIG_FILENAME

    def validate(self) -> list[str]:
        errors: list[str] = []
        data = self._validate_json_file(self.config_path, _REQUIRED_KEYS, errors)
        if data is not None:
            errors.extend(self._validate_formats(data))
        return errors

    @staticmethod
    def _validate_formats(data: dict) -> list[str]:
        errors: list[str] = []
        names: list[str] = []
        for key in _CHANNEL_KEYS:
            value = data.get(key)
            if not isinstance(value, str) or not value.strip():
                errors.append(f"{key} must be a non-empty string.")
            else:
                names.append(value.strip())
        if len(set(names)) != len(names):
            errors.append("input_channel, output_channel and sink_channel must all differ.")

        capacity = data.get("sink_capacity")
        if capacity is not None and (
            isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1
        ):
            errors.append("sink_capacity must be a positive integer or null.")

        debug_mode = data.get("debug_mode")
        if debug_mode is not None and not isinstance(debug_mode, bool):
            errors.append("debug_mode must be a boolean (true/false), not a string.")

        log_level = data.get("log_level")
        if log_level is not None and (
            not isinstance(log_level, str) or log_level not in _LOG_LEVELS
        ):
            errors.append(f"log_level must be one of: {', '.join(sorted(_LOG_LEVELS))}.")

        return errors

    def get_config(self) -> FlowConfig:
        data = self._read_json()
        return FlowConfig(
            input_channel=data["input_channel"].strip(),
            output_channel=data["output_channel"].strip(),
            sink_channel=data["sink_channel"].strip(),
            sink_capacity=data.get("sink_capacity"),
            debug_mode=bool(data.get("debug_mode", False)),
            log_level=data.get("log_level", "info"),
        )

    # -- internal helpers ---------------------------------------------------

    def _read_json(self) -> dict:
        return json.loads(self.config_path.read_text(encoding="utf-8"))

    @staticmethod
    def _validate_json_file(
        path: Path,
        required_keys: set[str],
        errors: list[str],
    ) -> dict | None:
        """Validate a JSON file exists and has required keys.

        Returns the parsed dict on success, or None if the file
        is missing or unparseable.
        """
        if not path.is_file():
            errors.append(f"Missing file: {path}")
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            errors.append(f"Cannot read {path}: {exc}")
            return None
        if not isinstance(data, dict):
            errors.append(f"{path.name} must contain a JSON object")
            return None
        missing = required_keys - set(data.keys())
        if missing:
            errors.append(f"{path.name} missing keys: {', '.join(sorted(missing))}")
            return None
        return data
