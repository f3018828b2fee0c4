"""Git discovery exceptions.

All exceptions carry an optional hint that is appended to the string
representation so CLI output tells the user how to fix the problem.
"""

from repo_locator.exceptions import VcsError


class GitDiscoveryError(VcsError):
    """Base class for Git discovery errors.

    Attributes:
        message: Human-readable error description
        hint: Optional suggestion for resolving the problem
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class NotGitRepositoryError(GitDiscoveryError):
    """The path is not inside a Git work tree."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Not a Git repository: {path}",
            hint="Run this from inside a Git work tree, or initialize one with: git init",
        )


class NoRemotesError(GitDiscoveryError):
    """The repository has no remotes configured."""

    def __init__(self) -> None:
        super().__init__(
            "No Git remotes configured in this repository",
            hint="Add a remote with: git remote add origin <url>",
        )


class InvalidGitUrlError(GitDiscoveryError):
    """A remote URL is not in a recognized SSH or HTTPS form."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        self.reason = reason

        message = f"Invalid Git URL format: '{url}'"
        if reason:
            message = f"{message}: {reason}"

        super().__init__(
            message,
            hint=(
                "Expected formats:\n"
                "  SSH:   git@host:owner/repo.git\n"
                "  HTTPS: https://host/owner/repo.git"
            ),
        )
