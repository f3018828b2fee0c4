"""VCS handlers the resolver can be configured with."""

from repo_locator.vcs.base import VcsHandler
from repo_locator.vcs.git_handler import GitHandler
from repo_locator.vcs.perforce_handler import PerforceHandler

__all__ = ["VcsHandler", "GitHandler", "PerforceHandler"]
