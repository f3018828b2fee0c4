"""Repository information lookup for files.

Given a project and a file, the resolver works out which VCS manages the
file, the file's path relative to the repository root, the branch to link
to, and the canonical remote URL.

Lookup steps:
    1. Ask each registered handler, in order, whether it manages the file.
    2. Ask that handler for the repository root. No root means the file is
       not under version control and the lookup stops with empty fields.
    3. Strip the root from the file path (and, for Perforce, the leading
       depot segment).
    4. Use the local branch if it exists on the remote, the configured
       default branch otherwise.
    5. Read the remote URL and apply the configured replacements.

Failures in steps 3-5 never propagate. ``resolve`` returns them inside a
Resolution together with the fields computed so far; ``get_repo_info``
additionally shows one notification and writes one log entry.

Example:
    >>> from repo_locator.models import ProjectContext
    >>> from repo_locator.resolver import RepositoryInfoResolver
    >>> project = ProjectContext.load("/path/to/repo")
    >>> resolver = RepositoryInfoResolver.for_settings(project.settings)
    >>> resolver.get_repo_info(project, "/path/to/repo/src/a.go")
    RepoInfo(vcs_type=<VCSType.GIT: 'git'>, remote_url='git@github.com:owner/repo.git', ...)
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from repo_locator.config.settings import LocatorSettings, parse_replacements
from repo_locator.enums import VCSType
from repo_locator.exceptions import RepositoryNotFoundError, UnsupportedVcsError
from repo_locator.models import ProjectContext, RepoInfo, Resolution
from repo_locator.notifications import ConsoleNotifier, Notifier
from repo_locator.perforce.client import P4Client
from repo_locator.utils.logging_config import configure_default_logging, get_logger
from repo_locator.utils.paths import normalize_path
from repo_locator.vcs.base import VcsHandler
from repo_locator.vcs.git_handler import GitHandler
from repo_locator.vcs.perforce_handler import PerforceHandler

log = get_logger(__name__)


def apply_url_replacements(remote_url: str, replacements: str) -> str:
    """Apply comma-separated find/replace pairs to a remote URL.

    Pairs are applied in order as plain substring replacements. A list with
    an odd number of entries is ignored entirely.

    Example:
        >>> apply_url_replacements("https://internal.example.com/repo.git", "internal.example.com,github.com")
        'https://github.com/repo.git'
        >>> apply_url_replacements("https://internal.example.com/repo.git", "a,b,c")
        'https://internal.example.com/repo.git'
    """
    pairs = parse_replacements(replacements)
    if pairs is None:
        return remote_url

    for find, replace in pairs:
        remote_url = remote_url.replace(find, replace)
    return remote_url


def compute_relative_path(file: Path, root: Path, vcs_type: VCSType) -> str:
    """Path of a file relative to the repository root, '/' separated.

    For Perforce the first segment (the depot directory under the client
    root) is dropped as well.

    Raises:
        ValueError: If the file is not inside the root.
    """
    relative = file.relative_to(root).as_posix()
    if relative == ".":
        return ""

    if vcs_type == VCSType.PERFORCE and "/" in relative:
        relative = relative.split("/", 1)[1]
    return relative


class RepositoryInfoResolver:
    """Resolves repository information using registered VCS handlers.

    Attributes:
        handlers: Handlers consulted in order; the first that detects a file
            manages it.
    """

    def __init__(self, handlers: Sequence[VcsHandler] | None = None) -> None:
        if handlers is None:
            handlers = [GitHandler(), PerforceHandler()]
        self.handlers = list(handlers)
        configure_default_logging()

    @classmethod
    def for_settings(cls, settings: LocatorSettings) -> RepositoryInfoResolver:
        """Create a resolver with the Git and Perforce handlers configured from settings."""
        p4 = P4Client(executable=settings.p4_executable, timeout=settings.p4_timeout)
        return cls([GitHandler(), PerforceHandler(p4)])

    def handler_for(self, file: str | Path) -> VcsHandler | None:
        """First handler that manages the file, bound to it, or None.

        A handler that fails while detecting is treated as unavailable.
        """
        path = normalize_path(file)
        for handler in self.handlers:
            try:
                bound = handler.bind(path)
                if bound.detect(path):
                    return bound
            except Exception as e:
                log.debug("vcs_detect_failed", vcs=str(handler.vcs_type), file=str(path), error=str(e))
        return None

    def detect_vcs_type(self, file: str | Path) -> VCSType:
        handler = self.handler_for(file)
        return handler.vcs_type if handler else VCSType.UNKNOWN

    def remote_url(self, file: str | Path) -> str:
        """Raw remote URL of the repository managing the file (no replacements).

        Raises:
            RepositoryNotFoundError: If no handler manages the file.
            UnsupportedVcsError: If the managing handler cannot report remotes.
        """
        path = normalize_path(file)
        handler = self.handler_for(path)
        if handler is None:
            raise RepositoryNotFoundError(str(path))
        return self._handler_remote_url(handler, path)

    @staticmethod
    def _handler_remote_url(handler: VcsHandler, file: Path) -> str:
        try:
            return handler.remote_url(file)
        except NotImplementedError as e:
            raise UnsupportedVcsError(handler.vcs_type.display_name) from e

    def resolve(self, project: ProjectContext, file: str | Path) -> Resolution:
        """Resolve repository information for a file.

        Never raises for VCS failures; the returned Resolution carries the
        error and the fields computed before it.
        """
        path = normalize_path(file)
        settings = project.settings

        handler = self.handler_for(path)
        vcs_type = handler.vcs_type if handler else VCSType.UNKNOWN
        relative_path = ""
        branch_name = ""
        remote_url = ""

        try:
            root = handler.root_path(path) if handler else None
            if root is None:
                return Resolution(RepoInfo(vcs_type=vcs_type))

            relative_path = compute_relative_path(path, Path(root).resolve(), vcs_type)

            # If the current branch doesn't exist on the remote, use the default branch.
            local_branch = handler.branch_name(path)
            if local_branch and handler.remote_branch_exists(path, local_branch):
                branch_name = local_branch
            else:
                branch_name = settings.default_branch_name

            remote_url = self._handler_remote_url(handler, path)
            remote_url = apply_url_replacements(remote_url, settings.remote_url_replacements)
        except Exception as e:
            # Keep the remote URL empty unless it was fully resolved
            return Resolution(
                RepoInfo(vcs_type=vcs_type, branch_name=branch_name, relative_path=relative_path),
                error=e,
            )

        return Resolution(
            RepoInfo(
                vcs_type=vcs_type,
                remote_url=remote_url,
                branch_name=branch_name,
                relative_path=relative_path,
            )
        )

    def get_repo_info(
        self,
        project: ProjectContext,
        file: str | Path,
        notifier: Notifier | None = None,
    ) -> RepoInfo:
        """Resolve repository information, reporting failures to the user.

        On failure the notifier is shown one message and one warning is
        logged; the partially filled RepoInfo is returned either way.
        """
        resolution = self.resolve(project, file)
        if resolution.error is not None:
            message = resolution.message or ""
            (notifier or ConsoleNotifier()).show(project, message)
            log.warning("repo_info_failed", file=str(file), message=message, exc_info=resolution.error)
        return resolution.info


def get_repo_info(project: ProjectContext, file: str | Path, notifier: Notifier | None = None) -> RepoInfo:
    """Resolve repository information with the default handlers for the project's settings."""
    return RepositoryInfoResolver.for_settings(project.settings).get_repo_info(project, file, notifier)
