"""Custom exception hierarchy for repo-locator.

This module defines a structured exception hierarchy that lets callers tell
configuration problems apart from VCS failures, and lets the resolver build
user-facing messages for the failures it captures.

Exception Hierarchy:
    RepoLocatorError (base)
    ├── ConfigurationError
    └── VcsError
        ├── UnsupportedVcsError
        ├── RepositoryNotFoundError
        ├── GitDiscoveryError (see repo_locator.git.exceptions)
        └── PerforceError
            ├── PerforceCommandError
            └── PerforceAuthenticationError

Example Usage:
    >>> from repo_locator.exceptions import ConfigurationError
    >>> try:
    ...     load_config(path)
    ... except FileNotFoundError as e:
    ...     raise ConfigurationError(f"Config file not found: {path}") from e
"""


class RepoLocatorError(Exception):
    """Base exception for all repo-locator errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(RepoLocatorError):
    """Configuration-related errors.

    Raised when configuration files are invalid, missing, or contain
    incompatible settings.

    Examples:
        - Configuration file not found
        - Invalid YAML syntax
        - Invalid configuration values
    """

    pass


class VcsError(RepoLocatorError):
    """Version-control errors.

    Base class for failures while querying Git or Perforce about a file.
    """

    pass


class UnsupportedVcsError(VcsError):
    """No registered handler can answer for the file's VCS.

    Attributes:
        vcs_name: Name of the VCS that has no handler
    """

    def __init__(self, vcs_name: str) -> None:
        self.vcs_name = vcs_name
        super().__init__(f"Unsupported VCS: {vcs_name}")


class RepositoryNotFoundError(VcsError):
    """No repository could be found for a file.

    Attributes:
        path: The file path that is not inside any known repository
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not find repository for file {path}")


class PerforceError(VcsError):
    """Base class for errors reported by the Perforce client."""

    pass


class PerforceCommandError(PerforceError):
    """A ``p4`` invocation failed.

    Attributes:
        command: The arguments passed to p4
        stderr: Error output from p4 (if any)
    """

    def __init__(self, message: str, command: list[str] | None = None, stderr: str | None = None) -> None:
        self.command = command or []
        self.stderr = stderr

        full_message = message
        if stderr:
            full_message = f"{message}: {stderr.strip()}"

        super().__init__(full_message)


class PerforceAuthenticationError(PerforceError):
    """The Perforce server rejected the current login (missing, invalid or expired ticket)."""

    pass
