"""Shared types for CLI parser builders."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable

from monometa.types import CommandResult

CommandHandler = Callable[[argparse.Namespace], int | CommandResult]


@dataclass(frozen=True)
class CommandHandlers:
    cmd_services: CommandHandler
    cmd_diff: CommandHandler
