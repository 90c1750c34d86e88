"""Tests for monometa.config."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from monometa.config import (
    DEFAULT_BINARY,
    DEFAULT_BUILD_CMD,
    MonoConfig,
    RepoConfig,
    deep_merge,
    load_config,
    load_yaml_file,
    validate_config,
)
from monometa.errors import ConfigInvalidError


def _flags(**overrides):
    flags = {
        "services": None,
        "cmd": None,
        "binary": None,
        "exclude": None,
        "build_timeout": None,
        "local": None,
        "url": None,
    }
    flags.update(overrides)
    return flags


class TestMonoConfig:
    """Tests for MonoConfig."""

    def test_build_command_substitutes_binary_once(self) -> None:
        config = MonoConfig(services="cmd/*", build_cmd="go build -o $1 && echo $1", binary_name="svc")
        assert config.build_command() == "go build -o svc && echo $1"

    def test_defaults(self) -> None:
        config = MonoConfig(services="cmd/*")
        assert config.build_cmd == DEFAULT_BUILD_CMD
        assert config.binary_name == DEFAULT_BINARY
        assert config.validate() == []

    def test_requires_services(self) -> None:
        errors = MonoConfig(services="  ").validate()
        assert errors == ["services: services path is required"]

    def test_rejects_pattern_outside_repository(self) -> None:
        errors = MonoConfig(services="../elsewhere/*").validate()
        assert len(errors) == 1
        assert "must stay inside the repository" in errors[0]

    def test_requires_output_placeholder(self) -> None:
        errors = MonoConfig(services="cmd/*", build_cmd="go build").validate()
        assert len(errors) == 1
        assert errors[0].startswith("cmd:")
        assert "$1" in errors[0]


class TestRepoConfig:
    """Tests for RepoConfig."""

    def test_needs_local_or_url(self) -> None:
        assert RepoConfig().validate()
        assert RepoConfig(local="/repo").validate() == []
        assert RepoConfig(url="https://example.com/mono.git").validate() == []

    def test_is_remote(self) -> None:
        assert RepoConfig(url="u").is_remote is True
        assert RepoConfig(local="/repo").is_remote is False


def test_deep_merge_override_wins() -> None:
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    override = {"a": 2, "nested": {"y": 3}}
    assert deep_merge(base, override) == {"a": 2, "nested": {"x": 1, "y": 3}}
    assert base["nested"] == {"x": 1, "y": 2}


class TestLoadYamlFile:
    """Tests for load_yaml_file."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigInvalidError, match="not found"):
            load_yaml_file(tmp_path / "missing.yml")

    def test_empty_file_is_empty_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_file(path) == {}

    def test_rejects_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigInvalidError, match="mapping"):
            load_yaml_file(path)

    def test_rejects_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_text("services: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigInvalidError, match="could not parse"):
            load_yaml_file(path)


class TestLoadConfig:
    """Tests for load_config."""

    def test_flags_only(self) -> None:
        mono, repo = load_config(_flags(services="services/*", local="/repo", exclude=["legacy"]))
        assert mono.services == "services/*"
        assert mono.build_cmd == DEFAULT_BUILD_CMD
        assert mono.exclude == ("legacy",)
        assert repo == RepoConfig(local="/repo")

    def test_file_overrides_flags(self, tmp_path: Path) -> None:
        path = tmp_path / "mono-meta.yml"
        path.write_text(
            "services: cmd/*\ncmd: make build OUT=$1\nbinary: server\nbuild_timeout: 30\n",
            encoding="utf-8",
        )
        mono, repo = load_config(_flags(services="services/*", local="/repo"), path)
        assert mono.services == "cmd/*"
        assert mono.build_cmd == "make build OUT=$1"
        assert mono.binary_name == "server"
        assert mono.build_timeout == 30.0
        assert repo.local == "/repo"

    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mono-meta.json"
        path.write_text(
            json.dumps({"services": "services/*", "url": "https://example.com/mono.git"}),
            encoding="utf-8",
        )
        mono, repo = load_config(_flags(), path)
        assert mono.services == "services/*"
        assert repo.is_remote

    def test_unknown_key_fails_schema(self, tmp_path: Path) -> None:
        path = tmp_path / "mono-meta.yml"
        path.write_text("services: s/*\nlocal: /r\nservice_path: typo\n", encoding="utf-8")
        with pytest.raises(ConfigInvalidError) as excinfo:
            load_config(_flags(), path)
        assert any("service_path" in error for error in excinfo.value.errors)

    def test_negative_timeout_fails_schema(self) -> None:
        with pytest.raises(ConfigInvalidError) as excinfo:
            load_config(_flags(services="s/*", local="/r", build_timeout=-1))
        assert excinfo.value.errors[0].startswith("build_timeout:")

    def test_missing_services_is_fatal(self) -> None:
        with pytest.raises(ConfigInvalidError) as excinfo:
            load_config(_flags(local="/repo"))
        assert "services: services path is required" in excinfo.value.errors

    def test_build_cmd_without_placeholder_is_fatal(self) -> None:
        with pytest.raises(ConfigInvalidError, match="must output to arg"):
            load_config(_flags(services="s/*", local="/repo", cmd="go build"))

    def test_missing_repo_is_fatal_unless_not_required(self) -> None:
        with pytest.raises(ConfigInvalidError, match="--url or --local"):
            load_config(_flags(services="s/*"))
        mono, repo = load_config(_flags(services="s/*"), require_repo=False)
        assert mono.services == "s/*"
        assert repo == RepoConfig()


def test_validate_config_errors_sorted() -> None:
    errors = validate_config({"services": 1, "binary": "a/b"})
    assert errors == sorted(errors)
    assert len(errors) == 2
