"""Repository capability shared by the local and remote providers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from monometa.errors import ReferenceNotFoundError, RepositoryAccessError
from monometa.utils.git import GitCommandError, checkout_detached, list_references, path_in_head


@runtime_checkable
class Repository(Protocol):
    """A git work tree the inventory can check out and build in."""

    @property
    def root_path(self) -> Path: ...

    def checkout(self, reference: str) -> str: ...

    def close(self) -> None: ...

    def tracks(self, path: Path) -> bool: ...


def resolve_reference(references: list[str], reference: str) -> str:
    """Pick the reference whose full name ends with ``reference``.

    Several references can share a suffix (``master`` matches both
    ``refs/heads/master`` and ``refs/remotes/origin/master``); the last one in
    enumeration order wins.

    Raises:
        ReferenceNotFoundError: If nothing matches.
    """
    resolved = None
    if reference:
        for name in references:
            if name.endswith(reference):
                resolved = name
    if resolved is None:
        raise ReferenceNotFoundError(reference)
    return resolved


def checkout_reference(root: Path, reference: str, logger: logging.Logger) -> str:
    """Resolve ``reference`` by suffix and detach the work tree at it.

    Resolution happens before the work tree is touched, so a missing
    reference leaves it unchanged.
    """
    try:
        references = list_references(root)
    except GitCommandError as exc:
        raise RepositoryAccessError(f"could not list references in {root}: {exc}") from exc

    resolved = resolve_reference(references, reference)
    logger.debug("resolved %s to %s", reference, resolved)

    try:
        checkout_detached(root, resolved)
    except GitCommandError as exc:
        raise RepositoryAccessError(f"could not check out {resolved} in {root}: {exc}") from exc
    return resolved


def tracks_path(root: Path, path: Path) -> bool:
    """Return True if ``path`` (under ``root``) is part of the checked-out commit.

    Directories that only survive a checkout because of untracked build
    artifacts are not.
    """
    try:
        relative = Path(path).resolve().relative_to(root).as_posix()
    except ValueError:
        return False
    try:
        return path_in_head(root, relative)
    except GitCommandError as exc:
        raise RepositoryAccessError(f"could not inspect {relative} in {root}: {exc}") from exc
