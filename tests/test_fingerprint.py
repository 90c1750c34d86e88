"""Tests for monometa.services.fingerprint."""

from __future__ import annotations

from pathlib import Path

import pytest

from monometa.errors import ArtifactUnreadableError
from monometa.services.fingerprint import fingerprint


def test_known_md5(tmp_path: Path) -> None:
    artifact = tmp_path / "app"
    artifact.write_bytes(b"hello")
    assert fingerprint(artifact) == "5d41402abc4b2a76b9719d911017c592"


def test_repeated_calls_agree(tmp_path: Path) -> None:
    artifact = tmp_path / "app"
    artifact.write_bytes(b"\x00\x01binary" * 1000)
    assert fingerprint(artifact) == fingerprint(artifact)


def test_same_bytes_at_different_paths(tmp_path: Path) -> None:
    first = tmp_path / "a" / "app"
    second = tmp_path / "b" / "server"
    first.parent.mkdir()
    second.parent.mkdir()
    first.write_bytes(b"same bytes")
    second.write_bytes(b"same bytes")
    assert fingerprint(first) == fingerprint(second)


def test_different_bytes_differ(tmp_path: Path) -> None:
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.write_bytes(b"v1")
    second.write_bytes(b"v2")
    assert fingerprint(first) != fingerprint(second)


def test_missing_artifact(tmp_path: Path) -> None:
    with pytest.raises(ArtifactUnreadableError) as excinfo:
        fingerprint(tmp_path / "app")
    assert excinfo.value.path == tmp_path / "app"


def test_directory_is_unreadable(tmp_path: Path) -> None:
    with pytest.raises(ArtifactUnreadableError):
        fingerprint(tmp_path)
