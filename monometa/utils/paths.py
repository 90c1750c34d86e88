"""Path validation helpers."""

from __future__ import annotations

from pathlib import Path


def validate_repo_path(repo_path: Path) -> Path:
    """Validate and canonicalize a repository path.

    Args:
        repo_path: The path to validate.

    Returns:
        The canonicalized path.

    Raises:
        ValueError: If the path is invalid or not a directory.
    """
    # Resolve to absolute path (handles symlinks)
    resolved = Path(repo_path).expanduser().resolve()

    if not resolved.is_dir():
        raise ValueError(f"Repository path is not a valid directory: {repo_path}")

    return resolved
