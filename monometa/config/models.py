"""Validated configuration objects."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from monometa.errors import ConfigInvalidError

OUTPUT_PLACEHOLDER = "$1"
DEFAULT_BINARY = "app"
DEFAULT_BUILD_CMD = f"go build -o {OUTPUT_PLACEHOLDER}"


def normalize_pattern(pattern: str) -> str:
    """Collapse ``.``, empty segments and surrounding slashes of a service pattern.

    Raises:
        ConfigInvalidError: If the pattern leaves the work tree through ``..``.
    """
    relative = os.path.normpath(pattern.strip("/"))
    if relative == ".." or relative.startswith("../"):
        raise ConfigInvalidError(f"services: services path {pattern!r} must stay inside the repository")
    return relative


@dataclass(frozen=True)
class MonoConfig:
    """How services are found and built."""

    services: str
    build_cmd: str = DEFAULT_BUILD_CMD
    binary_name: str = DEFAULT_BINARY
    exclude: tuple[str, ...] = ()
    build_timeout: float | None = None

    def build_command(self) -> str:
        return self.build_cmd.replace(OUTPUT_PLACEHOLDER, self.binary_name, 1)

    def validate(self) -> list[str]:
        """Return semantic problems; an empty list means valid."""
        errors: list[str] = []
        if not self.services.strip():
            errors.append("services: services path is required")
        else:
            try:
                normalize_pattern(self.services)
            except ConfigInvalidError as exc:
                errors.append(str(exc))
        if OUTPUT_PLACEHOLDER not in self.build_cmd:
            errors.append(
                f"cmd: build command ({self.build_cmd!r}) must output to arg "
                f"{OUTPUT_PLACEHOLDER}, e.g. '-o {OUTPUT_PLACEHOLDER}'"
            )
        if not self.binary_name:
            errors.append("binary: binary name is required")
        return errors

    def to_payload(self) -> dict[str, Any]:
        return {
            "services": self.services,
            "cmd": self.build_cmd,
            "binary": self.binary_name,
            "exclude": list(self.exclude),
            "build_timeout": self.build_timeout,
        }


@dataclass(frozen=True)
class RepoConfig:
    """Where the repository comes from."""

    local: str = ""
    url: str = ""

    @property
    def is_remote(self) -> bool:
        return bool(self.url)

    def validate(self) -> list[str]:
        if not self.local and not self.url:
            return ["local: --url or --local must be set"]
        return []
