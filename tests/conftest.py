"""Shared fixtures: throwaway git monorepos and a portable build command."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

BUILD_SCRIPT = '''\
import shutil
import sys
from pathlib import Path

if Path("FAIL").exists():
    print("compile error: " + Path("FAIL").read_text().strip())
    sys.exit(1)
out = sys.argv[sys.argv.index("-o") + 1]
shutil.copyfile("src.txt", out)
'''

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def git(repo: Path, *args: str) -> str:
    cmd = [
        "git",
        "-c",
        "user.name=Test",
        "-c",
        "user.email=test@example.com",
        "-c",
        "commit.gpgsign=false",
        "-c",
        "tag.gpgsign=false",
        "-c",
        "init.defaultBranch=master",
        "-C",
        str(repo),
        *args,
    ]
    return subprocess.run(cmd, check=True, capture_output=True, text=True).stdout


def write_service(repo: Path, name: str, content: str) -> None:
    service_dir = repo / "services" / name
    service_dir.mkdir(parents=True, exist_ok=True)
    (service_dir / "src.txt").write_text(content, encoding="utf-8")


@pytest.fixture
def build_cmd(tmp_path: Path) -> str:
    """A build command that copies ``src.txt`` to the requested output."""
    script = tmp_path / "fake_build.py"
    script.write_text(BUILD_SCRIPT, encoding="utf-8")
    return f"{shlex.quote(sys.executable)} {shlex.quote(str(script))} -o $1"


@pytest.fixture
def monorepo(tmp_path: Path) -> Path:
    """A repo whose ``feature`` branch modifies api, drops worker and adds billing.

    master:  services/api ("api v1"), services/worker ("worker v1"), tag v1.0
    feature: services/api ("api v2"), services/billing ("billing v1")
    The work tree is left on master.
    """
    repo = tmp_path / "mono"
    repo.mkdir()
    git(repo, "init", "--quiet")
    (repo / "README.md").write_text("monorepo\n", encoding="utf-8")
    write_service(repo, "api", "api v1\n")
    write_service(repo, "worker", "worker v1\n")
    git(repo, "add", "-A")
    git(repo, "commit", "--quiet", "-m", "initial")
    git(repo, "tag", "v1.0")

    git(repo, "checkout", "--quiet", "-b", "feature")
    write_service(repo, "api", "api v2\n")
    shutil.rmtree(repo / "services" / "worker")
    write_service(repo, "billing", "billing v1\n")
    git(repo, "add", "-A")
    git(repo, "commit", "--quiet", "-m", "feature work")
    git(repo, "checkout", "--quiet", "master")
    return repo
