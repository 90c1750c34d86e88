"""Reconcile two inventories into a per-service diff."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from monometa.errors import MonoMetaError
from monometa.services.inventory import InventoryAssembler
from monometa.services.types import Comment, Service, ServiceDiff


def classify(base: Service | None, compare: Service | None) -> tuple[bool, Comment]:
    """Return ``(changed, comment)`` for one service name."""
    if base is None and compare is None:
        raise ValueError("a service diff needs at least one side")
    if base is None:
        return True, Comment.NEW
    if compare is None:
        return True, Comment.REMOVED
    if base.checksum != compare.checksum:
        return True, Comment.MODIFIED
    return False, Comment.UNMODIFIED


def reconcile(base: Iterable[Service], compare: Iterable[Service]) -> list[ServiceDiff]:
    """Match services by name and classify each one.

    Every name seen on either side appears exactly once, sorted by name.
    """
    pairs: dict[str, list[Service | None]] = {}
    for service in compare:
        pairs[service.name] = [None, service]
    for service in base:
        pairs.setdefault(service.name, [None, None])[0] = service

    diffs: list[ServiceDiff] = []
    for name, (base_service, compare_service) in pairs.items():
        changed, comment = classify(base_service, compare_service)
        diffs.append(
            ServiceDiff(
                name=name,
                changed=changed,
                comment=comment,
                base=base_service,
                compare=compare_service,
            )
        )
    return sorted(diffs, key=lambda diff: diff.name)


class DiffEngine:
    """Inventories two references and reconciles the results."""

    def __init__(self, assembler: InventoryAssembler, logger: logging.Logger | None = None) -> None:
        self.assembler = assembler
        self._logger = logger or logging.getLogger(__name__)

    def _inventory(self, role: str, reference: str) -> list[Service]:
        try:
            return self.assembler.inventory(reference)
        except MonoMetaError as exc:
            exc.add_note(f"while collecting {role} services from {reference}")
            raise

    def diff(self, base: str, compare: str) -> list[ServiceDiff]:
        """Diff the services at ``base`` against those at ``compare``.

        The compare reference is inventoried first, so the work tree is left
        at ``base`` afterwards.
        """
        compared = self._inventory("compare", compare)
        based = self._inventory("base", base)
        diffs = reconcile(based, compared)
        changed = sum(1 for diff in diffs if diff.changed)
        self._logger.info("%d of %d service(s) changed between %s and %s", changed, len(diffs), base, compare)
        return diffs
