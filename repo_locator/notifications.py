"""Notification sinks for user-facing lookup failures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import click

if TYPE_CHECKING:
    from repo_locator.models import ProjectContext


class Notifier(Protocol):
    """Shows a message to the user working in a project."""

    def show(self, project: ProjectContext, message: str) -> None: ...


class ConsoleNotifier:
    """Writes notifications to stderr."""

    def show(self, project: ProjectContext, message: str) -> None:
        click.echo(f"Error: {message}", err=True)


class RecordingNotifier:
    """Keeps notifications in memory, in the order they were shown."""

    def __init__(self) -> None:
        self.messages: list[tuple[ProjectContext, str]] = []

    def show(self, project: ProjectContext, message: str) -> None:
        self.messages.append((project, message))
