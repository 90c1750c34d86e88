"""Provider for a work tree that already exists on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from monometa.errors import RepositoryAccessError
from monometa.repo.base import checkout_reference, tracks_path
from monometa.utils.git import is_work_tree
from monometa.utils.paths import validate_repo_path


class LocalRepository:
    """An existing git work tree. ``close`` leaves it in place."""

    def __init__(self, path: str | Path, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        try:
            root = validate_repo_path(Path(path))
        except ValueError as exc:
            raise RepositoryAccessError(f"could not open local git repo ({path}): {exc}") from exc
        if not is_work_tree(root):
            raise RepositoryAccessError(f"could not open local git repo ({path}): not a git work tree")
        self._root = root

    @property
    def root_path(self) -> Path:
        return self._root

    def checkout(self, reference: str) -> str:
        return checkout_reference(self._root, reference, self._logger)

    def tracks(self, path: Path) -> bool:
        return tracks_path(self._root, path)

    def close(self) -> None:
        return None

    def __enter__(self) -> LocalRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
