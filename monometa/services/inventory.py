"""Inventory every service of a monorepo at one reference."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from monometa.config.models import MonoConfig
from monometa.repo.base import Repository
from monometa.services.builder import Builder
from monometa.services.fingerprint import fingerprint
from monometa.services.locator import locate, name_of, pattern_path
from monometa.services.types import Service


class InventoryAssembler:
    """Checks out a reference, then builds and fingerprints each service.

    Builds run one at a time against the repository's single work tree, so an
    assembler must not be shared between threads.
    """

    def __init__(
        self,
        repository: Repository,
        config: MonoConfig,
        builder: Builder | None = None,
        fingerprinter: Callable[[Path], str] = fingerprint,
        logger: logging.Logger | None = None,
    ) -> None:
        self.repository = repository
        self.config = config
        self._logger = logger or logging.getLogger(__name__)
        self.builder = builder or Builder(config, logger=self._logger)
        self.fingerprinter = fingerprinter

    def service_dirs(self) -> list[Path]:
        """Service directories of the current checkout, in filesystem order."""
        dirs: list[Path] = []
        for service_dir in locate(self.repository.root_path, self.config.services, exclude=self.config.exclude):
            # Deleted services can linger as directories holding only an
            # untracked artifact from an earlier build.
            if not self.repository.tracks(service_dir):
                self._logger.debug("skipping %s: not tracked at this reference", service_dir)
                continue
            dirs.append(service_dir)
        return dirs

    def inventory(self, reference: str) -> list[Service]:
        """Return the services at ``reference`` sorted by name.

        Any checkout, build or checksum error propagates; nothing partial is
        returned.
        """
        resolved = self.repository.checkout(reference)
        absolute_pattern = pattern_path(self.repository.root_path, self.config.services)
        dirs = self.service_dirs()
        self._logger.info("found %d service(s) at %s", len(dirs), resolved)

        services: list[Service] = []
        for service_dir in dirs:
            artifact = self.builder.build(service_dir)
            checksum = self.fingerprinter(artifact)
            name = name_of(absolute_pattern, service_dir)
            self._logger.debug("%s @ %s -> %s", name, resolved, checksum)
            services.append(
                Service(
                    name=name,
                    path=str(artifact),
                    checksum=checksum,
                    reference=resolved,
                )
            )

        return sorted(services, key=lambda service: service.name)
