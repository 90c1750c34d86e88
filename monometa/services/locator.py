"""Find service directories in a work tree."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Iterable

from monometa.config.models import normalize_pattern


def pattern_path(root: Path, pattern: str) -> str:
    """Absolute form of a service pattern under ``root``."""
    return os.path.join(str(root), normalize_pattern(pattern))


def locate(root: Path, pattern: str, exclude: Iterable[str] = ()) -> list[Path]:
    """Expand ``pattern`` relative to ``root`` into service directories.

    Only ``*``, ``?`` and ``[...]`` wildcards are honoured; ``**`` matches a
    single segment like ``*``. Wildcards also match dot-directories. Files are
    ignored. The order is whatever the filesystem returns.

    Args:
        root: Work tree root.
        pattern: Glob relative to ``root`` (e.g. ``services/*``).
        exclude: Service names to skip.

    Returns:
        Matching directories as absolute paths.
    """
    absolute = pattern_path(root, pattern)
    # The root is literal text; only the pattern part may glob.
    searchable = os.path.join(glob.escape(str(root)), normalize_pattern(pattern))
    skip = set(exclude)
    dirs: list[Path] = []
    for match in glob.glob(searchable, recursive=False, include_hidden=True):
        path = Path(match)
        if not path.is_dir():
            continue
        if skip and name_of(absolute, match) in skip:
            continue
        dirs.append(path)
    return dirs


def name_of(absolute_pattern: str, matched: str | Path) -> str:
    """Name a service after the first segment where its path leaves the pattern.

    ``/repo/services/*`` and ``/repo/services/api`` give ``api``. Returns ``""``
    when no segment differs, which happens for patterns without a wildcard.
    """
    pattern_parts = str(absolute_pattern).split("/")
    matched_parts = str(matched).split("/")
    for index, part in enumerate(matched_parts):
        if index >= len(pattern_parts) or part != pattern_parts[index]:
            return part
    return ""
