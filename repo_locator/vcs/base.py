"""VCS handler protocol."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from repo_locator.enums import VCSType


@runtime_checkable
class VcsHandler(Protocol):
    """What the resolver needs to know about one version-control system.

    Handlers are registered with the resolver in priority order. ``detect``
    must not raise when the backing tool is unavailable; it returns False.
    """

    vcs_type: VCSType

    def bind(self, file: Path) -> VcsHandler:
        """Handler for the questions of one lookup on this file.

        The resolver binds once per lookup and asks everything else of the
        bound handler, so work shared between questions (opening the
        repository, querying the server) happens once. Handlers with nothing
        to share may return themselves.
        """
        ...

    def detect(self, file: Path) -> bool:
        """Check whether this VCS manages the file."""
        ...

    def root_path(self, file: Path) -> Path | None:
        """Top-level directory under version control, or None."""
        ...

    def branch_name(self, file: Path) -> str | None:
        """Current local branch, or None if there is no such concept or HEAD is detached."""
        ...

    def remote_branch_exists(self, file: Path, branch_name: str) -> bool:
        """Check whether a branch with this name exists on the remote."""
        ...

    def remote_url(self, file: Path) -> str:
        """Canonical remote URL of the repository containing the file."""
        ...
