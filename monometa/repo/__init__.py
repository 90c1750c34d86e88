"""Repository providers behind one capability interface."""

from __future__ import annotations

import logging

from monometa.config.models import RepoConfig
from monometa.repo.base import Repository, checkout_reference, resolve_reference, tracks_path
from monometa.repo.local import LocalRepository
from monometa.repo.remote import RemoteRepository


def open_repository(config: RepoConfig, logger: logging.Logger | None = None) -> LocalRepository | RemoteRepository:
    """Clone ``config.url`` (into ``config.local`` if set) or open ``config.local``."""
    if config.is_remote:
        return RemoteRepository(config.url, clone_path=config.local or None, logger=logger)
    return LocalRepository(config.local, logger=logger)


__all__ = [
    "LocalRepository",
    "RemoteRepository",
    "Repository",
    "checkout_reference",
    "open_repository",
    "resolve_reference",
    "tracks_path",
]
