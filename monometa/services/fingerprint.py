"""Content checksums for build artifacts."""

from __future__ import annotations

import hashlib
from pathlib import Path

from monometa.errors import ArtifactUnreadableError

CHUNK_SIZE = 1024 * 1024


def fingerprint(path: Path) -> str:
    """Hex MD5 of the file's bytes; equal bytes always give equal checksums.

    Raises:
        ArtifactUnreadableError: If the file is missing or unreadable.
    """
    digest = hashlib.md5(usedforsecurity=False)
    try:
        with open(path, "rb") as handle:
            for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError as exc:
        raise ArtifactUnreadableError(Path(path), exc.strerror or str(exc)) from exc
    return digest.hexdigest()
