"""Command handlers for the mono-meta CLI."""

from monometa.commands.diff import cmd_diff
from monometa.commands.services import cmd_services

__all__ = ["cmd_diff", "cmd_services"]
