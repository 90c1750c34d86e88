"""Executable resolution and subprocess helpers."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path


def resolve_executable(name: str) -> str:
    """Resolve an executable name to its full path.

    Args:
        name: The executable name to resolve.

    Returns:
        The full path if found, otherwise the original name.
    """
    return shutil.which(name) or name


def run_combined(
    cmd: list[str],
    workdir: Path,
    timeout: float | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command in ``workdir`` with stderr folded into stdout.

    Raises:
        FileNotFoundError: If the executable does not exist.
        subprocess.TimeoutExpired: If ``timeout`` elapses first.
    """
    resolved = [resolve_executable(cmd[0]), *cmd[1:]]
    return subprocess.run(  # noqa: S603
        resolved,
        cwd=workdir,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        timeout=timeout,
        check=False,
    )
