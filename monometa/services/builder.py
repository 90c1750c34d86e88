"""Run the configured build command for a service directory."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from monometa.config.models import MonoConfig
from monometa.errors import BuildFailedError, ConfigInvalidError
from monometa.utils.exec_utils import run_combined


def build_args(config: MonoConfig) -> list[str]:
    """Split the build command after substituting the binary name.

    Raises:
        ConfigInvalidError: If the command is empty or cannot be tokenized.
    """
    try:
        args = shlex.split(config.build_command())
    except ValueError as exc:
        raise ConfigInvalidError(f"invalid build command {config.build_cmd!r}: {exc}") from exc
    if not args:
        raise ConfigInvalidError(f"invalid build command {config.build_cmd!r}")
    return args


class Builder:
    """Builds one service directory at a time and reports the artifact path."""

    def __init__(self, config: MonoConfig, logger: logging.Logger | None = None) -> None:
        self.config = config
        self.args = build_args(config)
        self._logger = logger or logging.getLogger(__name__)

    def artifact_path(self, service_dir: Path) -> Path:
        return Path(service_dir) / self.config.binary_name

    def build(self, service_dir: Path) -> Path:
        """Build ``service_dir`` and return the path of the produced artifact.

        Raises:
            BuildFailedError: On a non-zero exit, a missing executable, or timeout.
        """
        service_dir = Path(service_dir)
        self._logger.debug("building %s: %s", service_dir, shlex.join(self.args))
        try:
            proc = run_combined(self.args, service_dir, timeout=self.config.build_timeout)
        except FileNotFoundError as exc:
            raise BuildFailedError(service_dir, str(exc), reason="build command not found") from exc
        except subprocess.TimeoutExpired as exc:
            output = exc.output.decode(errors="replace") if isinstance(exc.output, bytes) else exc.output or ""
            raise BuildFailedError(
                service_dir,
                output,
                reason=f"build timed out after {self.config.build_timeout}s",
            ) from exc

        if proc.returncode != 0:
            raise BuildFailedError(
                service_dir,
                proc.stdout or "",
                reason=f"build command exited with {proc.returncode}",
            )
        return self.artifact_path(service_dir)
