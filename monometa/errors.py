"""Error taxonomy for mono-meta.

Every failure the core can surface derives from ``MonoMetaError`` and carries a
stable ``code`` used in the CLI's JSON problem list.
"""

from __future__ import annotations

from pathlib import Path


class MonoMetaError(Exception):
    """Base class for all expected mono-meta failures."""

    code = "MONO-ERROR"


class ConfigInvalidError(MonoMetaError):
    """Raised when required configuration is missing or malformed."""

    code = "MONO-CONFIG-001"

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class RepositoryAccessError(MonoMetaError):
    """Raised when a repository cannot be cloned or opened."""

    code = "MONO-REPO-001"


class ReferenceNotFoundError(MonoMetaError):
    """Raised when no reference name ends with the requested string."""

    code = "MONO-REF-001"

    def __init__(self, reference: str) -> None:
        super().__init__(f"could not find ref/branch: {reference}")
        self.reference = reference


class BuildFailedError(MonoMetaError):
    """Raised when the build command fails for a service directory."""

    code = "MONO-BUILD-001"

    def __init__(self, directory: Path, output: str, reason: str = "build command failed") -> None:
        super().__init__(f"{reason} in {directory}:\n{output}" if output else f"{reason} in {directory}")
        self.directory = directory
        self.output = output


class ArtifactUnreadableError(MonoMetaError):
    """Raised when a build artifact is missing or cannot be read."""

    code = "MONO-ARTIFACT-001"

    def __init__(self, path: Path, reason: str = "") -> None:
        message = f"could not read build artifact {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path
