from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from typing import Sequence

from app import build_splitter_flow, run_payloads
from domain.models import FlowConfig, RunContext
from domain.services import split
from infra.config import FileSystemConfigProvider
from infra.logs import FileSystemRunArtifactStore
from infra.runtime import StructuredLogger, SystemClock, UuidIdGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="splitter-cli")
    sub = parser.add_subparsers(dest="command", required=True)

    split_p = sub.add_parser("split", help="Split a comma-delimited string into tokens")
    split_p.add_argument("text", help="Text to split, or '-' to read stdin")
    split_p.add_argument("--json", action="store_true", help="Print tokens as a JSON array")

    flow_p = sub.add_parser("flow", help="Send payloads through the splitter flow")
    flow_p.add_argument("payloads", nargs="+", help="Payloads to send, '-' reads stdin lines")
    flow_p.add_argument("--config-dir", default=None, help="Folder containing flow.json")
    flow_p.add_argument("--debug", action="store_true")
    flow_p.add_argument("--artifacts-dir", default="logs")

    config_p = sub.add_parser("config")
    config_p.add_argument("action", choices=["validate", "show"])
    config_p.add_argument("--config-dir", default="./config")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "split":
        text = sys.stdin.read() if args.text == "-" else args.text
        tokens = split(text)
        if args.json:
            print(json.dumps(tokens))
        else:
            for token in tokens:
                print(token)
        return 0

    if args.command == "config":
        return _handle_config(args)

    if args.command == "flow":
        return _handle_flow(args)

    raise SystemExit(f"Unsupported command: {args.command}")


def _handle_config(args: argparse.Namespace) -> int:
    provider = FileSystemConfigProvider(args.config_dir)
    errors = provider.validate()
    if errors:
        print("Config validation failed:")
        for err in errors:
            print(f"  - {err}")
        return 1
    if args.action == "validate":
        print(f"Config OK: {provider.config_path}")
        return 0
    print(json.dumps(dataclasses.asdict(provider.get_config()), indent=2, sort_keys=True))
    return 0


def _handle_flow(args: argparse.Namespace) -> int:
    if args.config_dir is None:
        config = FlowConfig()
    else:
        provider = FileSystemConfigProvider(args.config_dir)
        errors = provider.validate()
        if errors:
            print("Config validation failed:")
            for err in errors:
                print(f"  - {err}")
            return 1
        config = provider.get_config()

    ids = UuidIdGenerator()
    run_context = RunContext(run_id=ids.new_run_id(), is_debug=args.debug or config.debug_mode)
    logger = StructuredLogger(level=config.log_level, stream=sys.stderr).bind(
        run_id=run_context.run_id,
    )
    flow = build_splitter_flow(config, logger=logger, clock=SystemClock(), id_generator=ids)

    result = run_payloads(
        flow,
        _expand_payloads(args.payloads),
        run_context=run_context,
        logger=logger,
        artifact_store=FileSystemRunArtifactStore(base_dir=args.artifacts_dir),
    )
    for message in result.messages:
        print(json.dumps(message.to_dict(), sort_keys=True, default=str))
    return 0 if result.ok else 1


def _expand_payloads(payloads: Sequence[str]) -> list[str]:
    expanded: list[str] = []
    for payload in payloads:
        if payload == "-":
            expanded.extend(line.rstrip("\n") for line in sys.stdin)
        else:
            expanded.append(payload)
    return expanded


if __name__ == "__main__":
    raise SystemExit(main())
