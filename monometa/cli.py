"""mono-meta command line entry point."""

from __future__ import annotations

import argparse
import json
import time

from monometa import __version__
from monometa.cli_parsers.core import add_core_commands
from monometa.cli_parsers.types import CommandHandlers
from monometa.commands.diff import cmd_diff
from monometa.commands.services import cmd_services
from monometa.exit_codes import EXIT_INTERNAL_ERROR, EXIT_SUCCESS
from monometa.types import CommandResult


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit a structured JSON envelope",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mono-meta",
        description="Inventory and diff the services of a monorepo between git references",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)
    handlers = CommandHandlers(cmd_services=cmd_services, cmd_diff=cmd_diff)
    add_core_commands(subparsers, add_json_flag, handlers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    start = time.perf_counter()
    command = args.command

    try:
        result = args.func(args)
    except Exception as exc:  # noqa: BLE001 - surface in JSON mode
        if getattr(args, "json", False):
            problems = [
                {
                    "severity": "error",
                    "message": str(exc),
                    "code": "MONO-UNHANDLED",
                }
            ]
            payload = CommandResult(
                exit_code=EXIT_INTERNAL_ERROR,
                summary=str(exc),
                problems=problems,
            ).to_payload(
                command,
                "error",
                int((time.perf_counter() - start) * 1000),
            )
            print(json.dumps(payload, indent=2))
            return EXIT_INTERNAL_ERROR
        raise

    if isinstance(result, CommandResult):
        exit_code = result.exit_code
        command_result = result
    else:
        exit_code = int(result)
        command_result = CommandResult(exit_code=exit_code)

    if not command_result.summary:
        command_result.summary = "OK" if exit_code == EXIT_SUCCESS else "Command failed"

    if getattr(args, "json", False):
        status = "success" if exit_code == EXIT_SUCCESS else "failure"
        payload = command_result.to_payload(
            command,
            status,
            int((time.perf_counter() - start) * 1000),
        )
        print(json.dumps(payload, indent=2))
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
