"""Enumerations for repo-locator."""

from enum import Enum


class VCSType(str, Enum):
    """Version-control systems a file can be managed by.

    Determined per file and never cached.
    """

    GIT = "git"
    PERFORCE = "perforce"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human readable name used in messages."""
        if self == VCSType.GIT:
            return "Git"
        elif self == VCSType.PERFORCE:
            return "Perforce"
        else:
            return "unknown"
