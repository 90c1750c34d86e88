"""Git plumbing used by the repository providers.

All calls shell out to the ``git`` binary and raise ``GitCommandError`` with the
captured stderr when git exits non-zero.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from monometa.utils.exec_utils import resolve_executable


class GitCommandError(RuntimeError):
    """Raised when a git invocation fails."""

    def __init__(self, args: list[str], stderr: str) -> None:
        super().__init__(f"git {' '.join(args)} failed: {stderr.strip()}")
        self.args_list = args
        self.stderr = stderr


def run_git(args: list[str], cwd: Path | None = None) -> str:
    git_bin = resolve_executable("git")
    cmd = [git_bin]
    if cwd is not None:
        cmd += ["-C", str(cwd)]
    try:
        proc = subprocess.run(  # noqa: S603
            cmd + args,
            text=True,
            capture_output=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise GitCommandError(args, str(exc)) from exc
    if proc.returncode != 0:
        raise GitCommandError(args, proc.stderr or proc.stdout)
    return proc.stdout


def is_work_tree(path: Path) -> bool:
    """Return True if ``path`` is inside a git work tree."""
    try:
        output = run_git(["rev-parse", "--is-inside-work-tree"], cwd=path)
    except GitCommandError:
        return False
    return output.strip() == "true"


def list_references(repo_path: Path) -> list[str]:
    """List every full reference name known to the repository.

    Args:
        repo_path: Path to the work tree.

    Returns:
        Reference names (e.g. ``refs/heads/master``) in git's refname order.
    """
    output = run_git(["for-each-ref", "--format=%(refname)"], cwd=repo_path)
    return [line.strip() for line in output.splitlines() if line.strip()]


def checkout_detached(repo_path: Path, refname: str) -> None:
    """Point the work tree at the commit ``refname`` resolves to."""
    run_git(["checkout", "--quiet", "--detach", f"{refname}^{{commit}}"], cwd=repo_path)


def clone(url: str, destination: Path) -> None:
    run_git(["clone", "--quiet", url, str(destination)])


def path_in_head(repo_path: Path, relative: str) -> bool:
    """Return True if ``relative`` exists in the commit HEAD points at."""
    output = run_git(["ls-tree", "--name-only", "HEAD", "--", relative], cwd=repo_path)
    return bool(output.strip())
