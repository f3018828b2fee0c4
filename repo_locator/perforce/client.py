"""Thin wrapper around the ``p4`` command line client.

Commands are run with ``-ztag`` so output comes back as tagged records::

    ... clientName alice-ws
    ... clientRoot /home/alice/ws
    ... serverAddress ssl:perforce.example.com:1666

Each record becomes a dict. Environment variables (P4PORT, P4USER, P4CLIENT,
P4CONFIG, ...) are inherited from the calling process and ``p4`` resolves
P4CONFIG files relative to the working directory, so commands run from the
file's directory see the same connection an interactive shell would.
"""

import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

import structlog

from repo_locator.exceptions import PerforceAuthenticationError, PerforceCommandError, PerforceError
from repo_locator.utils.paths import normalize_path

log = structlog.get_logger(__name__)

# Messages p4 prints when the ticket is missing, invalid or expired
AUTH_ERROR_PATTERN = re.compile(
    r"P4PASSWD\) invalid or unset|Password invalid|session has expired|please login again|Access for user .* has not been enabled",
    re.IGNORECASE,
)

# Client root value p4 reports when no workspace is set
UNKNOWN_CLIENT_ROOT = "*unknown*"

SERVER_PROTOCOLS = {"tcp", "tcp4", "tcp6", "tcp46", "tcp64", "ssl", "ssl4", "ssl6", "ssl46", "ssl64", "rsh"}


@dataclass(frozen=True)
class PerforceConnection:
    """Connection details for a Perforce workspace.

    Attributes:
        server_address: P4PORT style address (e.g. 'ssl:perforce.example.com:1666')
        client_name: Workspace (client) name
        client_root: Local directory the workspace is mapped to
        user: Perforce user name
    """

    server_address: str
    client_name: str
    client_root: Path
    user: str = ""

    @property
    def server_host(self) -> str:
        """Host part of the server address without protocol prefix or port."""
        return server_host(self.server_address)


def server_host(address: str) -> str:
    """Strip the protocol prefix and port from a P4PORT address.

    Example:
        >>> server_host("ssl:perforce.example.com:1666")
        'perforce.example.com'
        >>> server_host("1666")
        'localhost'
    """
    parts = address.strip().split(":")
    if len(parts) > 1 and parts[0].lower() in SERVER_PROTOCOLS:
        parts = parts[1:]
    if parts and parts[-1].isdigit():
        parts = parts[:-1]
    return ":".join(parts) or "localhost"


def parse_tagged_output(output: str) -> list[dict[str, str]]:
    """Parse ``p4 -ztag`` output into a list of records."""
    records: list[dict[str, str]] = []
    current: dict[str, str] = {}

    for line in output.splitlines():
        if not line.strip():
            if current:
                records.append(current)
                current = {}
            continue
        if not line.startswith("... "):
            continue
        key, _, value = line[4:].partition(" ")
        current[key] = value

    if current:
        records.append(current)

    return records


class P4Client:
    """Runs p4 commands and returns their tagged records.

    Attributes:
        executable: Name or path of the p4 binary
        timeout: Seconds to wait for each command
    """

    def __init__(self, executable: str = "p4", timeout: float = 10.0) -> None:
        self.executable = executable
        self.timeout = timeout

    def run(self, *args: str, cwd: Path | None = None) -> list[dict[str, str]]:
        """Run a p4 command.

        Args:
            *args: p4 command and its arguments, e.g. "where", "/ws/a.go"
            cwd: Working directory (selects the P4CONFIG file in effect)

        Returns:
            Tagged records printed by p4.

        Raises:
            PerforceAuthenticationError: If the server rejected the login.
            PerforceCommandError: If p4 is missing, timed out or failed.
        """
        command = [self.executable, "-ztag", *args]
        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise PerforceCommandError(f"Perforce client '{self.executable}' not found", command=command) from e
        except subprocess.TimeoutExpired as e:
            raise PerforceCommandError(
                f"Perforce command timed out after {self.timeout}s", command=command
            ) from e

        stderr = result.stderr.strip()
        if stderr and AUTH_ERROR_PATTERN.search(stderr):
            raise PerforceAuthenticationError(stderr)

        records = parse_tagged_output(result.stdout)
        if result.returncode != 0 or (stderr and not records):
            raise PerforceCommandError(f"p4 {args[0] if args else ''} failed", command=command, stderr=stderr)

        return records

    def info(self, cwd: Path | None = None) -> dict[str, str]:
        """Return the ``p4 info`` record for the given working directory."""
        records = self.run("info", cwd=cwd)
        return records[0] if records else {}

    def where(self, path: Path) -> dict[str, str]:
        """Return the depot/client/local mapping of a local path.

        Raises:
            PerforceCommandError: If the path is not in the client view.
        """
        records = self.run("where", str(path), cwd=path.parent)
        for record in records:
            if "depotFile" in record and "unmap" not in record:
                return record
        raise PerforceCommandError(f"{path} is not in the client view")

    def connection_for_file(self, path: Path) -> PerforceConnection | None:
        """Find the workspace a local file belongs to.

        Returns:
            The connection, or None when no server is reachable, no workspace
            is set, or the file lies outside the workspace root.
        """
        directory = path if path.is_dir() else path.parent
        if not directory.exists():
            return None

        try:
            info = self.info(cwd=directory)
        except PerforceError as e:
            log.debug("p4_info_unavailable", path=str(path), error=e.message)
            return None

        client_root = info.get("clientRoot", "")
        if not client_root or client_root == UNKNOWN_CLIENT_ROOT:
            return None

        root = Path(client_root).resolve()
        if not normalize_path(path).is_relative_to(root):
            return None

        return PerforceConnection(
            server_address=info.get("serverAddress", ""),
            client_name=info.get("clientName", ""),
            client_root=root,
            user=info.get("userName", ""),
        )
