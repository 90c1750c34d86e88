"""Services layer for mono-meta - pure Python APIs returning dataclasses.

This module provides stable APIs for the CLI and programmatic access.
"""

from monometa.services.builder import Builder, build_args
from monometa.services.diff import DiffEngine, classify, reconcile
from monometa.services.fingerprint import fingerprint
from monometa.services.inventory import InventoryAssembler
from monometa.services.locator import locate, name_of
from monometa.services.types import Comment, Service, ServiceDiff

__all__ = [
    # Types
    "Comment",
    "Service",
    "ServiceDiff",
    # Building blocks
    "Builder",
    "build_args",
    "fingerprint",
    "locate",
    "name_of",
    # Inventory and diff
    "InventoryAssembler",
    "DiffEngine",
    "classify",
    "reconcile",
]
