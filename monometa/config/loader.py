"""
mono-meta - Configuration Loader

Merges configuration from multiple sources with proper precedence:
  1. Config file passed with --file (highest priority)
  2. Command-line flags
  3. Built-in defaults (lowest priority)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from monometa.config.models import DEFAULT_BINARY, DEFAULT_BUILD_CMD, MonoConfig, RepoConfig
from monometa.config.schema import validate_config
from monometa.errors import ConfigInvalidError

DEFAULTS: dict[str, Any] = {
    "services": "",
    "cmd": DEFAULT_BUILD_CMD,
    "binary": DEFAULT_BINARY,
    "exclude": [],
    "build_timeout": None,
    "local": "",
    "url": "",
}


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries. Override values take precedence.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml_file(path: Path) -> dict:
    """Load a YAML (or JSON) config file.

    Raises:
        ConfigInvalidError: If the file is missing, unparsable, or not a mapping.
    """
    if not path.exists():
        raise ConfigInvalidError(f"config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigInvalidError(f"could not parse config file {path}: {exc}") from exc

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigInvalidError(f"config file {path} must contain a mapping")
    return content


def _drop_unset(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def merge_sources(flags: dict[str, Any], config_file: Path | None = None) -> dict[str, Any]:
    """Merge defaults, flags and an optional config file into one document."""
    merged = deep_merge(DEFAULTS, _drop_unset(flags))
    if config_file is not None:
        merged = deep_merge(merged, load_yaml_file(config_file))
    return merged


def load_config(
    flags: dict[str, Any],
    config_file: Path | None = None,
    require_repo: bool = True,
) -> tuple[MonoConfig, RepoConfig]:
    """
    Load, merge and validate configuration.

    Args:
        flags: Values from the command line; ``None`` means "not given".
        config_file: Optional YAML/JSON file overriding flags with the same key.
        require_repo: Require ``local`` or ``url`` to be set.

    Returns:
        The service configuration and the repository configuration.

    Raises:
        ConfigInvalidError: With every schema and semantic problem found.
    """
    merged = merge_sources(flags, config_file)

    errors = validate_config(merged)
    if errors:
        raise ConfigInvalidError("config validation failed", errors=errors)

    timeout = merged.get("build_timeout")
    mono = MonoConfig(
        services=merged["services"],
        build_cmd=merged["cmd"],
        binary_name=merged["binary"],
        exclude=tuple(merged.get("exclude") or ()),
        build_timeout=float(timeout) if timeout is not None else None,
    )
    repo = RepoConfig(local=merged.get("local") or "", url=merged.get("url") or "")

    errors = mono.validate()
    if require_repo:
        errors += repo.validate()
    if errors:
        raise ConfigInvalidError("; ".join(errors), errors=sorted(errors))

    return mono, repo
