"""Shared utility functions for mono-meta."""

from __future__ import annotations

from monometa.utils.exec_utils import resolve_executable, run_combined
from monometa.utils.git import (
    GitCommandError,
    checkout_detached,
    clone,
    is_work_tree,
    list_references,
    path_in_head,
    run_git,
)
from monometa.utils.paths import validate_repo_path

__all__ = [
    "resolve_executable",
    "run_combined",
    "GitCommandError",
    "checkout_detached",
    "clone",
    "is_work_tree",
    "list_references",
    "path_in_head",
    "run_git",
    "validate_repo_path",
]
