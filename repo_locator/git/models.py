"""Git repository data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitRemote:
    """Represents a Git remote configuration.

    Attributes:
        name: Remote name (e.g., 'origin', 'upstream')
        url: Raw URL from git config
    """

    name: str
    url: str
