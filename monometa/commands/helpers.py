"""Helpers shared by the services and diff command handlers."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any

from monometa.config.loader import load_config
from monometa.config.models import MonoConfig, RepoConfig
from monometa.errors import ConfigInvalidError, MonoMetaError
from monometa.exit_codes import EXIT_FAILURE
from monometa.log import build_logger
from monometa.types import CommandResult


def flags_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Collect config keys given on the command line (``None`` if absent)."""
    exclude = getattr(args, "exclude", None)
    return {
        "services": getattr(args, "services", None),
        "cmd": getattr(args, "build_cmd", None),
        "binary": getattr(args, "binary", None),
        "exclude": [item.strip() for item in exclude.split(",") if item.strip()] if exclude else None,
        "build_timeout": getattr(args, "build_timeout", None),
        "local": getattr(args, "local", None),
        "url": getattr(args, "url", None),
    }


def load_settings(args: argparse.Namespace) -> tuple[MonoConfig, RepoConfig]:
    config_file = Path(args.file) if getattr(args, "file", None) else None
    return load_config(flags_from_args(args), config_file)


def logger_for(args: argparse.Namespace) -> logging.Logger:
    return build_logger(debug=bool(getattr(args, "debug", False)))


def error_result(exc: MonoMetaError) -> CommandResult:
    problems: list[dict[str, Any]] = []
    details = exc.errors if isinstance(exc, ConfigInvalidError) and exc.errors else [str(exc)]
    for message in details:
        problems.append({"severity": "error", "message": message, "code": exc.code})
    for note in getattr(exc, "__notes__", []):
        problems.append({"severity": "info", "message": note, "code": exc.code})
    return CommandResult(exit_code=EXIT_FAILURE, summary=str(exc), problems=problems)


def report_error(exc: MonoMetaError, args: argparse.Namespace, logger: logging.Logger) -> CommandResult:
    """Log a fatal error and turn it into a failing CommandResult."""
    if getattr(args, "json", False):
        return error_result(exc)
    logger.error("%s", exc, exc_info=exc if getattr(args, "debug", False) else None)
    for note in getattr(exc, "__notes__", []):
        logger.error("%s", note)
    return error_result(exc)


def write_output(text: str, output: str | None) -> list[str]:
    """Write to ``output`` if given, otherwise stdout. Returns written files."""
    if not output:
        print(text)
        return []
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    return [str(path)]


def append_github_output(values: dict[str, str], logger: logging.Logger) -> None:
    github_output = os.environ.get("GITHUB_OUTPUT")
    if not github_output:
        logger.warning("--github-output specified but GITHUB_OUTPUT not set")
        return
    with open(github_output, "a", encoding="utf-8") as handle:
        for key, value in values.items():
            handle.write(f"{key}={value}\n")


def append_summary(text: str, summary_path: str | None, github_summary: bool, logger: logging.Logger) -> None:
    targets: list[str] = []
    if summary_path:
        targets.append(summary_path)
    if github_summary:
        step_summary = os.environ.get("GITHUB_STEP_SUMMARY")
        if step_summary:
            targets.append(step_summary)
        else:
            logger.warning("--github-summary specified but GITHUB_STEP_SUMMARY not set")
    for target in targets:
        with open(target, "a", encoding="utf-8") as handle:
            handle.write(text)
