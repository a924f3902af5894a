"""Step definitions for config validation BDD scenarios."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from pytest_bdd import given, when, then, scenarios, parsers

from infra.channels import QueueChannel
from infra.config import FileSystemConfigProvider

from .conftest import FlowContext, build_flow

scenarios("../features/config_validation.feature")


def _valid_config() -> dict:
    return {
        "input_channel": "requests",
        "output_channel": "tokens",
        "sink_channel": "results",
        "sink_capacity": 50,
    }


def _place_config(base: Path, data: dict | None = None) -> None:
    (base / "flow.json").write_text(json.dumps(data if data is not None else _valid_config()))


@pytest.fixture()
def config_ctx(tmp_path: Path) -> dict:
    return {"tmp_path": tmp_path, "errors": []}


@given("a config folder with a complete flow.json", target_fixture="config_ctx")
def given_complete(tmp_path: Path) -> dict:
    _place_config(tmp_path)
    return {"tmp_path": tmp_path, "errors": []}


@given("a config folder without flow.json", target_fixture="config_ctx")
def given_no_config(tmp_path: Path) -> dict:
    return {"tmp_path": tmp_path, "errors": []}


@given("a config folder with invalid JSON in flow.json", target_fixture="config_ctx")
def given_invalid_json(tmp_path: Path) -> dict:
    (tmp_path / "flow.json").write_text("{bad")
    return {"tmp_path": tmp_path, "errors": []}


@given(
    parsers.parse('a config folder with flow.json missing "{key}"'),
    target_fixture="config_ctx",
)
def given_missing_key(tmp_path: Path, key: str) -> dict:
    cfg = _valid_config()
    del cfg[key]
    _place_config(tmp_path, cfg)
    return {"tmp_path": tmp_path, "errors": []}


@when("the config is validated")
def when_validate(config_ctx: dict) -> None:
    provider = FileSystemConfigProvider(str(config_ctx["tmp_path"]))
    config_ctx["errors"] = provider.validate()


@when("a flow is built from the config")
def when_build(config_ctx: dict, ctx: FlowContext) -> None:
    provider = FileSystemConfigProvider(str(config_ctx["tmp_path"]))
    ctx.config = provider.get_config()
    build_flow(ctx)


@then("there are no validation errors")
def then_no_errors(config_ctx: dict) -> None:
    assert config_ctx["errors"] == []


@then(parsers.parse('a validation error mentions "{text}"'))
def then_error_mentions(config_ctx: dict, text: str) -> None:
    assert any(text in err for err in config_ctx["errors"]), config_ctx["errors"]


@then(parsers.parse('the flow exposes a queue channel named "{name}"'))
def then_queue_named(ctx: FlowContext, name: str) -> None:
    assert ctx.flow is not None
    channel = ctx.flow.channel(name)
    assert isinstance(channel, QueueChannel)
    assert channel.remaining_capacity == 50
