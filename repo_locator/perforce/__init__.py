"""Perforce access through the ``p4`` command line client."""

from repo_locator.perforce.client import P4Client, PerforceConnection, parse_tagged_output, server_host

__all__ = [
    "P4Client",
    "PerforceConnection",
    "parse_tagged_output",
    "server_host",
]
