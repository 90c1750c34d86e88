"""Parser setup for the services and diff commands."""

from __future__ import annotations

import argparse
from typing import Callable

from monometa.cli_parsers.types import CommandHandlers


def add_repo_flags(parser: argparse.ArgumentParser) -> None:
    """Flags shared by every command; unset flags stay ``None``."""
    parser.add_argument(
        "-f",
        "--file",
        help="Load a YAML/JSON configuration file; its keys override the matching flags",
    )
    parser.add_argument(
        "-l",
        "--local",
        help="Local git repository, or where the remote repository is cloned to",
    )
    parser.add_argument(
        "-u",
        "--url",
        help="Remote URL of the git repository (unnecessary if it is already local)",
    )
    parser.add_argument(
        "-e",
        "--build-cmd",
        help="Build command for each service; '$1' is replaced by the binary name (default: 'go build -o $1')",
    )
    parser.add_argument(
        "-s",
        "--services",
        help="Path pattern of the service directories, e.g. 'services/*'",
    )
    parser.add_argument("--binary", help="Name of the built artifact (default: app)")
    parser.add_argument("--exclude", help="Comma separated service names to skip")
    parser.add_argument(
        "--build-timeout",
        type=float,
        help="Abort a single build after this many seconds",
    )
    parser.add_argument("--output", help="Write the result to a file instead of stdout")
    parser.add_argument("--compact", action="store_true", help="Print single-line JSON")
    parser.add_argument("--debug", action="store_true", help="Verbose logging with tracebacks")


def add_core_commands(
    subparsers,
    add_json_flag: Callable[[argparse.ArgumentParser], None],
    handlers: CommandHandlers,
) -> None:
    services = subparsers.add_parser(
        "services",
        help="Summarise all services in the monorepo at one reference",
    )
    add_json_flag(services)
    add_repo_flags(services)
    services.add_argument(
        "-b",
        "--branch",
        default="master",
        help="Reference to inventory (default: master)",
    )
    services.set_defaults(func=handlers.cmd_services)

    diff = subparsers.add_parser(
        "diff",
        help="List every service and whether it is new, removed, modified or unmodified",
    )
    add_json_flag(diff)
    add_repo_flags(diff)
    diff.add_argument(
        "-b",
        "--base",
        default="master",
        help="Reference used as the base of the comparison (default: master)",
    )
    diff.add_argument(
        "-c",
        "--compare",
        required=True,
        help="Reference compared against the base",
    )
    diff.add_argument(
        "--github-output",
        action="store_true",
        help="Write changed service names to GITHUB_OUTPUT",
    )
    diff.add_argument("--summary", help="Append a Markdown summary to this file")
    diff.add_argument(
        "--github-summary",
        action="store_true",
        help="Append summary to GITHUB_STEP_SUMMARY",
    )
    diff.set_defaults(func=handlers.cmd_diff)
