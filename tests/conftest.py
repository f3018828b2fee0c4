"""Pytest configuration and shared fixtures."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

from repo_locator.config.settings import LocatorSettings
from repo_locator.enums import VCSType
from repo_locator.models import ProjectContext
from repo_locator.notifications import RecordingNotifier


@dataclass
class FakeHandler:
    """In-memory VCS handler for resolver tests."""

    vcs_type: VCSType = VCSType.GIT
    root: Path | None = Path("/repo")
    local_branch: str | None = "main"
    remote_branches: tuple[str, ...] = ("main",)
    url: str = "git@github.com:owner/repo.git"
    detects: bool = True
    error: Exception | None = None

    def bind(self, file: Path) -> "FakeHandler":
        return self

    def detect(self, file: Path) -> bool:
        return self.detects

    def root_path(self, file: Path) -> Path | None:
        return self.root

    def branch_name(self, file: Path) -> str | None:
        return self.local_branch

    def remote_branch_exists(self, file: Path, branch_name: str) -> bool:
        return branch_name in self.remote_branches

    def remote_url(self, file: Path) -> str:
        if self.error is not None:
            raise self.error
        return self.url


@pytest.fixture
def handler_cls() -> type[FakeHandler]:
    """The fake handler class, for tests that build or subclass their own."""
    return FakeHandler


@pytest.fixture
def fake_handler() -> FakeHandler:
    """Git-like handler rooted at /repo."""
    return FakeHandler()


@pytest.fixture
def project(tmp_path: Path) -> ProjectContext:
    """Project with default settings."""
    return ProjectContext(base_path=tmp_path, settings=LocatorSettings())


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Real Git repository on branch 'main' with one commit and an 'origin' remote.

    Skipped when the git executable is not available.
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")

    (repo / "src").mkdir()
    (repo / "src" / "a.go").write_text("package main\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "Initial commit")

    _git(repo, "remote", "add", "origin", "https://internal.example.com/owner/repo.git")
    # Remote-tracking ref for main, as after a fetch
    _git(repo, "update-ref", "refs/remotes/origin/main", "HEAD")

    return repo.resolve()


@pytest.fixture
def run_git():
    """Helper to run git commands in a directory."""
    return _git
