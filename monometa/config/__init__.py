"""Config management module for mono-meta."""

from __future__ import annotations

from monometa.config.loader import deep_merge, load_config, load_yaml_file, merge_sources
from monometa.config.models import (
    DEFAULT_BINARY,
    DEFAULT_BUILD_CMD,
    OUTPUT_PLACEHOLDER,
    MonoConfig,
    RepoConfig,
    normalize_pattern,
)
from monometa.config.schema import get_schema, validate_config

__all__ = [
    "DEFAULT_BINARY",
    "DEFAULT_BUILD_CMD",
    "OUTPUT_PLACEHOLDER",
    "MonoConfig",
    "RepoConfig",
    "deep_merge",
    "get_schema",
    "load_config",
    "load_yaml_file",
    "merge_sources",
    "normalize_pattern",
    "validate_config",
]
