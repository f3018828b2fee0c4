"""Data models for repository lookups.

Example:
    >>> from repo_locator.models import RepoInfo
    >>> info = RepoInfo(
    ...     vcs_type="git",
    ...     remote_url="git@github.com:sourcegraph/sourcegraph.git",
    ...     branch_name="main",
    ...     relative_path="client/jetbrains/README.md",
    ... )
    >>> info.repo_name
    'github.com/sourcegraph/sourcegraph'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from repo_locator.config.settings import LocatorSettings
from repo_locator.enums import VCSType
from repo_locator.exceptions import PerforceAuthenticationError, RepoLocatorError
from repo_locator.git.exceptions import InvalidGitUrlError
from repo_locator.git.parser import GitUrlParser

PERFORCE_URL_PREFIX = "perforce://"


class RepoInfo(BaseModel):
    """Where a file lives in version control.

    Fields that could not be determined are empty strings.

    Attributes:
        vcs_type: VCS managing the file
        remote_url: Canonical remote URL after configured replacements
        branch_name: Branch to link to (local branch if it exists on the
            remote, the configured default otherwise)
        relative_path: File path relative to the repository root, '/' separated
    """

    model_config = ConfigDict(frozen=True)

    vcs_type: VCSType = VCSType.UNKNOWN
    remote_url: str = ""
    branch_name: str = ""
    relative_path: str = ""

    @property
    def is_empty(self) -> bool:
        """True when nothing beyond the VCS type was resolved."""
        return not (self.remote_url or self.branch_name or self.relative_path)

    @property
    def repo_name(self) -> str:
        """Code-host style repository name derived from the remote URL.

        Returns:
            'host/owner/repo' for Git URLs, 'host/depot' for Perforce URLs,
            or '' when the URL is empty or cannot be parsed.
        """
        if not self.remote_url:
            return ""

        if self.remote_url.startswith(PERFORCE_URL_PREFIX):
            return self.remote_url.removeprefix(PERFORCE_URL_PREFIX).strip("/")

        try:
            return GitUrlParser(self.remote_url).repo_name
        except InvalidGitUrlError:
            return ""


@dataclass(frozen=True)
class Resolution:
    """Outcome of a repository lookup.

    The info is always structurally valid; when ``error`` is set it holds the
    fields computed before the failure.
    """

    info: RepoInfo
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """User-facing description of the failure, or None on success."""
        if self.error is None:
            return None

        detail = self.error.message if isinstance(self.error, RepoLocatorError) else str(self.error)
        if isinstance(self.error, PerforceAuthenticationError):
            return f"Perforce authentication error: {detail}"
        return f"Error determining repository info: {detail}"


@dataclass
class ProjectContext:
    """The workspace a lookup runs in.

    Attributes:
        base_path: Project directory (where the project settings file lives)
        settings: Settings that apply to lookups in this project
    """

    base_path: Path
    settings: LocatorSettings = field(default_factory=LocatorSettings)

    @classmethod
    def load(cls, base_path: str | Path) -> ProjectContext:
        """Build a context for a project directory, reading its settings file.

        Raises:
            ConfigurationError: If the project settings file is invalid.
        """
        path = Path(base_path).resolve()
        return cls(base_path=path, settings=LocatorSettings.for_project(path))
