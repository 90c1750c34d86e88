"""Diff command handler - classify services between two references."""

from __future__ import annotations

import argparse
import json

from monometa.commands.helpers import (
    append_github_output,
    append_summary,
    load_settings,
    logger_for,
    report_error,
    write_output,
)
from monometa.errors import MonoMetaError
from monometa.exit_codes import EXIT_SUCCESS
from monometa.reporting import changed_names, diffs_payload, render_diff_summary, to_json
from monometa.repo import open_repository
from monometa.services.diff import DiffEngine
from monometa.services.inventory import InventoryAssembler
from monometa.types import CommandResult


def cmd_diff(args: argparse.Namespace) -> int | CommandResult:
    """Compare the services at ``--compare`` with those at ``--base``."""
    logger = logger_for(args)
    json_mode = getattr(args, "json", False)
    try:
        mono_config, repo_config = load_settings(args)
        with open_repository(repo_config, logger=logger) as repository:
            assembler = InventoryAssembler(repository, mono_config, logger=logger)
            diffs = DiffEngine(assembler, logger=logger).diff(args.base, args.compare)
    except MonoMetaError as exc:
        return report_error(exc, args, logger)

    changed = changed_names(diffs)
    payload = diffs_payload(diffs)
    summary = f"{len(changed)} of {len(diffs)} service(s) changed"

    if args.github_output:
        append_github_output(
            {"changed": json.dumps(changed), "count": str(len(changed))},
            logger,
        )
    if args.summary or args.github_summary:
        append_summary(
            render_diff_summary(diffs, args.base, args.compare),
            args.summary,
            args.github_summary,
            logger,
        )

    if json_mode:
        return CommandResult(
            exit_code=EXIT_SUCCESS,
            summary=summary,
            data={
                "base": args.base,
                "compare": args.compare,
                "changed": changed,
                "diff": payload,
            },
        )

    files = write_output(to_json(payload, pretty=not args.compact), args.output)
    return CommandResult(exit_code=EXIT_SUCCESS, summary=summary, files_generated=files)
