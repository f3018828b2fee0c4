"""Perforce handler backed by the p4 command line client.

Perforce has no local branch concept here, so branch lookups always fall back
to the configured default branch. The remote URL has the form
``perforce://<server host>/<depot>``.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from repo_locator.enums import VCSType
from repo_locator.exceptions import PerforceCommandError, RepositoryNotFoundError
from repo_locator.perforce.client import P4Client, PerforceConnection
from repo_locator.utils.paths import normalize_path

log = structlog.get_logger(__name__)


class PerforceHandler:
    """Answers repository questions for files inside Perforce workspaces.

    A handler returned by ``bind`` runs ``p4 info`` at most once for its file.
    """

    vcs_type = VCSType.PERFORCE

    def __init__(self, client: P4Client | None = None) -> None:
        self.client = client or P4Client()
        self._bound_file: Path | None = None
        self._bound_connection: PerforceConnection | None = None
        self._connection_loaded = False

    def bind(self, file: Path) -> PerforceHandler:
        bound = PerforceHandler(self.client)
        bound._bound_file = normalize_path(file)
        return bound

    def _connection(self, file: Path) -> PerforceConnection | None:
        if self._bound_file is None or normalize_path(file) != self._bound_file:
            return self.client.connection_for_file(file)
        if not self._connection_loaded:
            self._bound_connection = self.client.connection_for_file(file)
            self._connection_loaded = True
        return self._bound_connection

    def detect(self, file: Path) -> bool:
        return self._connection(file) is not None

    def root_path(self, file: Path) -> Path | None:
        connection = self._connection(file)
        return connection.client_root if connection else None

    def branch_name(self, file: Path) -> str | None:
        return None

    def remote_branch_exists(self, file: Path, branch_name: str) -> bool:
        return False

    def remote_url(self, file: Path) -> str:
        """Build the remote URL from the server address and the file's depot.

        Raises:
            RepositoryNotFoundError: If the file is not in a Perforce workspace.
            PerforceAuthenticationError: If the server rejected the login.
            PerforceCommandError: If p4 failed or returned no usable data.
        """
        connection = self._connection(file)
        if connection is None:
            raise RepositoryNotFoundError(str(file))

        if not connection.server_address:
            raise PerforceCommandError("Perforce server address is not set")

        mapping = self.client.where(file)
        depot = depot_name(mapping["depotFile"])
        if not depot:
            raise PerforceCommandError(f"Cannot determine depot for {file}")

        log.debug("p4_remote_resolved", server=connection.server_address, depot=depot)
        return f"perforce://{connection.server_host}/{depot}"


def depot_name(depot_path: str) -> str:
    """First segment of a depot path.

    Example:
        >>> depot_name("//depot/main/src/a.go")
        'depot'
    """
    return depot_path.lstrip("/").partition("/")[0]
