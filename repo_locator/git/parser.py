"""Git URL parsing utilities.

This module parses Git remote URLs into their host and repository path so that
a remote such as ``git@github.com:owner/repo.git`` can be turned into a
code-host style repository name (``github.com/owner/repo``).

Supported URL formats:
    SSH (scp-like):
        - git@github.com:owner/repo.git
        - user@gitlab.com:group/subgroup/project.git

    SSH (URL form):
        - ssh://git@github.com/owner/repo.git
        - ssh://git@git.example.com:2222/owner/repo

    HTTPS:
        - https://github.com/owner/repo.git
        - https://user@gitlab.com:8443/owner/repo.git
        - http://gitea.local/repo.git

Example:
    >>> from repo_locator.git.parser import GitUrlParser
    >>> parser = GitUrlParser("git@github.com:owner/repo.git")
    >>> parser.repo_name
    'github.com/owner/repo'

Thread Safety:
    GitUrlParser instances are immutable after initialization and are
    safe for concurrent access from multiple threads.
"""

import re

from repo_locator.git.exceptions import InvalidGitUrlError


class GitUrlParser:
    """Parser for Git URLs in SSH and HTTPS formats.

    All properties return valid values after successful initialization.
    If parsing fails, the constructor raises InvalidGitUrlError.

    Attributes:
        url: Original URL that was parsed.
        host: Hostname of the Git server.
        path: Repository path on the host, without leading slash or .git suffix.

    Example:
        >>> parser = GitUrlParser("https://gitea.example.com:3000/myorg/myrepo.git")
        >>> parser.host, parser.path
        ('gitea.example.com', 'myorg/myrepo')
    """

    # Matches: git@gitea.com:owner/repo.git or user@host:path
    # Requires user@ to avoid matching URLs with colons (like https://...)
    SSH_PATTERN = re.compile(r"^(?P<user>[\w.-]+)@(?P<host>[a-zA-Z0-9._-]+):(?P<path>.+?)(?:\.git)?/?$")

    # Matches: ssh://git@host/owner/repo.git or ssh://host:2222/owner/repo
    SSH_URL_PATTERN = re.compile(
        r"^ssh://(?:(?P<user>[\w.-]+)@)?(?P<host>[a-zA-Z0-9._-]+)(?::(?P<port>\d+))?/(?P<path>.+?)(?:\.git)?/?$"
    )

    # Matches: https://gitea.com/owner/repo.git or https://user@gitea.com:3000/owner/repo
    HTTPS_PATTERN = re.compile(
        r"^https?://(?:[^@/]+@)?(?P<host>[a-zA-Z0-9._-]+)(?::(?P<port>\d+))?/(?P<path>.+?)(?:\.git)?/?$"
    )

    def __init__(self, url: str) -> None:
        """Initialize parser with a Git URL.

        Args:
            url: Git URL to parse. Leading/trailing whitespace is trimmed.

        Raises:
            InvalidGitUrlError: If the URL format is not recognized or the
                path is empty.
        """
        self.url = url.strip()
        self._host: str | None = None
        self._path: str | None = None

        self._parse()

    def _parse(self) -> None:
        for pattern in (self.SSH_PATTERN, self.SSH_URL_PATTERN, self.HTTPS_PATTERN):
            match = pattern.match(self.url)
            if match:
                self._host = match.group("host")
                self._set_path(match.group("path"))
                return

        raise InvalidGitUrlError(
            self.url,
            reason="Must be SSH (git@host:path) or HTTPS (https://host/path)",
        )

    def _set_path(self, raw_path: str) -> None:
        path = raw_path.strip("/").removesuffix(".git")
        if not path or any(not part for part in path.split("/")):
            raise InvalidGitUrlError(self.url, reason=f"Invalid repository path (got: {raw_path!r})")
        self._path = path

    @property
    def host(self) -> str:
        """Get the hostname of the Git server."""
        if self._host is None:
            raise ValueError("URL not parsed")
        return self._host

    @property
    def path(self) -> str:
        """Get the repository path (``owner/repo``, ``group/sub/repo`` or ``repo``)."""
        if self._path is None:
            raise ValueError("URL not parsed")
        return self._path

    @property
    def repo_name(self) -> str:
        """Get the code-host style repository name.

        Example:
            >>> GitUrlParser("git@github.com:sourcegraph/sourcegraph.git").repo_name
            'github.com/sourcegraph/sourcegraph'
        """
        return f"{self.host}/{self.path}"
