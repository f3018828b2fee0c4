"""Git repository discovery and URL parsing.

The main entry point is the GitDiscovery class, which locates the work tree
for a path and reads its branches and remotes. GitUrlParser turns remote URLs
into code-host repository names.

Example:
    >>> from repo_locator.git import GitDiscovery
    >>> discovery = GitDiscovery("src/main.py")
    >>> discovery.current_branch()
    'main'

Error Handling:
    All exceptions inherit from GitDiscoveryError and include a hint.

    >>> from repo_locator.git import GitDiscovery, NoRemotesError
    >>> try:
    ...     GitDiscovery().get_remote()
    ... except NoRemotesError as e:
    ...     print(e)
    No Git remotes configured in this repository

    Hint: Add a remote with: git remote add origin <url>
"""

from repo_locator.git.discovery import GitDiscovery
from repo_locator.git.exceptions import (
    GitDiscoveryError,
    InvalidGitUrlError,
    NoRemotesError,
    NotGitRepositoryError,
)
from repo_locator.git.models import GitRemote
from repo_locator.git.parser import GitUrlParser

__all__ = [
    # Main API
    "GitDiscovery",
    # Parser
    "GitUrlParser",
    # Models
    "GitRemote",
    # Exceptions
    "GitDiscoveryError",
    "NotGitRepositoryError",
    "NoRemotesError",
    "InvalidGitUrlError",
]
