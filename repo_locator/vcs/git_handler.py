"""Git handler backed by GitPython."""

from __future__ import annotations

from pathlib import Path

from repo_locator.enums import VCSType
from repo_locator.git.discovery import GitDiscovery
from repo_locator.utils.paths import normalize_path


class GitHandler:
    """Answers repository questions for files inside Git work trees.

    An unbound handler creates a GitDiscovery per call. A handler returned by
    ``bind`` keeps one discovery for its file, so a whole lookup opens the
    repository once.
    """

    vcs_type = VCSType.GIT

    def __init__(self, remote_name: str | None = None) -> None:
        """Initialize handler.

        Args:
            remote_name: Remote whose URL is reported. None selects
                'origin', then 'upstream', then the first remote.
        """
        self.remote_name = remote_name
        self._bound: GitDiscovery | None = None

    def bind(self, file: Path) -> GitHandler:
        bound = GitHandler(self.remote_name)
        bound._bound = GitDiscovery(file)
        return bound

    def _discovery(self, file: Path) -> GitDiscovery:
        if self._bound is not None and self._bound.path == normalize_path(file):
            return self._bound
        return GitDiscovery(file)

    def detect(self, file: Path) -> bool:
        return self._discovery(file).is_repository()

    def root_path(self, file: Path) -> Path | None:
        discovery = self._discovery(file)
        if not discovery.is_repository():
            return None
        return discovery.working_tree_dir

    def branch_name(self, file: Path) -> str | None:
        return self._discovery(file).current_branch()

    def remote_branch_exists(self, file: Path, branch_name: str) -> bool:
        return self._discovery(file).remote_branch_exists(branch_name)

    def remote_url(self, file: Path) -> str:
        """URL of the selected remote as configured, e.g. git@github.com:owner/repo.git.

        Raises:
            NotGitRepositoryError: If the file is not inside a Git repository.
            NoRemotesError: If the repository has no remotes.
        """
        return self._discovery(file).get_remote(self.remote_name).url
