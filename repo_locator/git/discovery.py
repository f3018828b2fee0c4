"""Git repository discovery.

This module answers the questions the resolver asks about a Git-managed file:
where the work tree starts, which branch is checked out, whether that branch
exists on a remote, and which remote URL is canonical.

Example:
    >>> from repo_locator.git.discovery import GitDiscovery
    >>> discovery = GitDiscovery("/path/to/repo/src/main.py")
    >>> discovery.working_tree_dir
    PosixPath('/path/to/repo')
    >>> discovery.get_remote().url
    'git@github.com:owner/repo.git'

Thread Safety:
    GitDiscovery instances cache the git.Repo object internally. While
    the class itself is not thread-safe, each instance can be used
    safely within a single thread.

Dependencies:
    Requires GitPython (gitpython) package for repository access.
"""

from pathlib import Path

import structlog

try:
    import git
    from git.exc import InvalidGitRepositoryError, NoSuchPathError
except ImportError as e:
    raise ImportError("GitPython is required for Git discovery. Install it with: pip install gitpython") from e

from repo_locator.git.exceptions import NoRemotesError, NotGitRepositoryError
from repo_locator.git.models import GitRemote
from repo_locator.utils.paths import normalize_path

log = structlog.get_logger(__name__)


class GitDiscovery:
    """Discovers Git repository information for a path.

    The path may be a directory or a file anywhere inside the work tree;
    parent directories are searched. The git.Repo object is created lazily
    on first access, so instances can be built for paths that turn out not
    to be inside a repository.

    Attributes:
        path: Absolute path that discovery starts from. Parent directories
            are resolved; a symlink in the last component is kept.
        PREFERRED_REMOTES: Remote names tried in order when picking the
            canonical remote ("origin", "upstream").
    """

    # Preferred remote names in order of preference
    PREFERRED_REMOTES = ["origin", "upstream"]

    def __init__(self, path: str | Path = ".") -> None:
        """Initialize Git discovery for a path.

        Args:
            path: File or directory inside the repository. Default is the
                current directory.

        Note:
            The repository is not validated during initialization. Validation
            occurs on first access to repository data.
        """
        self.path = normalize_path(path)
        self._repo: git.Repo | None = None

    @property
    def _search_dir(self) -> Path:
        return self.path if self.path.is_dir() else self.path.parent

    def _get_repo(self) -> git.Repo:
        """Get the Git repository object, initializing if needed.

        Raises:
            NotGitRepositoryError: If the path is not within a Git repository.
        """
        if self._repo is None:
            try:
                self._repo = git.Repo(self._search_dir, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise NotGitRepositoryError(str(self.path)) from e

        return self._repo

    def is_repository(self) -> bool:
        """Check whether the path sits inside a Git work tree.

        Bare repositories have no work tree and are reported as not found.
        """
        try:
            repo = self._get_repo()
        except NotGitRepositoryError:
            return False
        return repo.working_tree_dir is not None

    @property
    def working_tree_dir(self) -> Path | None:
        """Top-level directory of the work tree, or None for bare repositories.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
        """
        working_tree_dir = self._get_repo().working_tree_dir
        return Path(working_tree_dir) if working_tree_dir is not None else None

    def current_branch(self) -> str | None:
        """Name of the checked-out branch.

        Returns:
            Branch name, or None when HEAD is detached.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
        """
        repo = self._get_repo()
        try:
            return repo.active_branch.name
        except TypeError:
            # GitPython raises TypeError for a detached HEAD
            log.debug("git_detached_head", path=str(self.path))
            return None

    def list_remotes(self) -> list[GitRemote]:
        """List all configured Git remotes.

        Returns:
            List of GitRemote objects containing name and URL.

        Raises:
            NotGitRepositoryError: If not within a Git repository.
        """
        repo = self._get_repo()
        return [GitRemote(name=remote.name, url=remote.url) for remote in repo.remotes]

    def get_remote(self, remote_name: str | None = None) -> GitRemote:
        """Get a Git remote by name or using automatic selection.

        Selection logic (when remote_name is None):
            1. If only one remote exists, use it
            2. Otherwise prefer 'origin' then 'upstream'
            3. Otherwise fall back to the first remote

        Args:
            remote_name: Specific remote name to retrieve (optional).

        Raises:
            NotGitRepositoryError: If not within a Git repository.
            NoRemotesError: If no remotes are configured.
            ValueError: If the specified remote_name doesn't exist.
        """
        remotes = self.list_remotes()

        if not remotes:
            raise NoRemotesError()

        if remote_name:
            for remote in remotes:
                if remote.name == remote_name:
                    return remote
            raise ValueError(f"Remote '{remote_name}' not found. Available: {', '.join(r.name for r in remotes)}")

        if len(remotes) == 1:
            return remotes[0]

        for preferred in self.PREFERRED_REMOTES:
            for remote in remotes:
                if remote.name == preferred:
                    return remote

        return remotes[0]

    def remote_branch_exists(self, branch_name: str) -> bool:
        """Check whether any remote has a branch with the given name.

        Only remote-tracking refs known locally are consulted; nothing is
        fetched.

        Args:
            branch_name: E.g. "main"

        Raises:
            NotGitRepositoryError: If not within a Git repository.
        """
        repo = self._get_repo()
        for remote in repo.remotes:
            for ref in remote.refs:
                if ref.remote_head == branch_name:
                    return True
        return False
