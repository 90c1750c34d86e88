"""Provider that clones a remote repository into a scratch directory."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path

from monometa.errors import RepositoryAccessError
from monometa.repo.base import checkout_reference, tracks_path
from monometa.utils.git import GitCommandError, clone


class RemoteRepository:
    """A fresh clone of ``url``, deleted again by ``close``.

    Args:
        url: Anything ``git clone`` accepts.
        clone_path: Destination directory. A temporary directory is used when
            omitted. It must not exist or be empty.
        logger: Logger for progress messages.
    """

    def __init__(
        self,
        url: str,
        clone_path: str | Path | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._closed = False
        if clone_path:
            root = Path(clone_path).expanduser().resolve()
        else:
            root = Path(tempfile.mkdtemp(prefix="mono-meta-")).resolve() / "repo"

        self._logger.info("cloning %s into %s", url, root)
        try:
            clone(url, root)
        except GitCommandError as exc:
            if not clone_path:
                shutil.rmtree(root.parent, ignore_errors=True)
            raise RepositoryAccessError(f"failed to clone repo into '{root}': {exc}") from exc
        self._root = root
        self._scratch = root.parent if not clone_path else root

    @property
    def root_path(self) -> Path:
        return self._root

    def checkout(self, reference: str) -> str:
        return checkout_reference(self._root, reference, self._logger)

    def tracks(self, path: Path) -> bool:
        return tracks_path(self._root, path)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._logger.debug("removing clone at %s", self._scratch)
        shutil.rmtree(self._scratch, ignore_errors=True)

    def __enter__(self) -> RemoteRepository:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
