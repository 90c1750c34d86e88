"""Result types for the inventory and diff services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Comment(str, Enum):
    """Classification of a service across two references."""

    NEW = "new"
    REMOVED = "removed"
    MODIFIED = "modified"
    UNMODIFIED = "unmodified"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Service:
    """A built artifact of one service at one reference."""

    name: str
    path: str
    checksum: str
    reference: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "checksum": self.checksum,
            "reference": self.reference,
        }


@dataclass(frozen=True)
class ServiceDiff:
    """A service compared between a base and a compare reference."""

    name: str
    changed: bool
    comment: Comment
    base: Service | None = None
    compare: Service | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "changed": self.changed,
            "comment": self.comment.value,
        }
        if self.base is not None:
            payload["base"] = self.base.to_payload()
        if self.compare is not None:
            payload["compare"] = self.compare.to_payload()
        return payload
