"""Services command handler - inventory one reference."""

from __future__ import annotations

import argparse

from monometa.commands.helpers import load_settings, logger_for, report_error, write_output
from monometa.errors import MonoMetaError
from monometa.exit_codes import EXIT_SUCCESS
from monometa.reporting import services_payload, to_json
from monometa.repo import open_repository
from monometa.services.inventory import InventoryAssembler
from monometa.types import CommandResult


def cmd_services(args: argparse.Namespace) -> int | CommandResult:
    """Build every service at ``--branch`` and print name, path and checksum."""
    logger = logger_for(args)
    json_mode = getattr(args, "json", False)
    try:
        mono_config, repo_config = load_settings(args)
        with open_repository(repo_config, logger=logger) as repository:
            assembler = InventoryAssembler(repository, mono_config, logger=logger)
            services = assembler.inventory(args.branch)
    except MonoMetaError as exc:
        return report_error(exc, args, logger)

    payload = services_payload(services)
    summary = f"Found {len(services)} service(s) at {args.branch}"
    if json_mode:
        return CommandResult(
            exit_code=EXIT_SUCCESS,
            summary=summary,
            data={"reference": args.branch, "services": payload},
        )

    files = write_output(to_json(payload, pretty=not args.compact), args.output)
    return CommandResult(exit_code=EXIT_SUCCESS, summary=summary, files_generated=files)
