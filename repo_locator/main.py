"""CLI entry point for repo-locator."""

import json
import sys
from pathlib import Path

import click
import structlog

from repo_locator.config.settings import PROJECT_CONFIG_FILENAME, LocatorSettings
from repo_locator.exceptions import ConfigurationError
from repo_locator.models import ProjectContext, RepoInfo
from repo_locator.notifications import ConsoleNotifier
from repo_locator.resolver import RepositoryInfoResolver
from repo_locator.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--config",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Path to configuration file (default: <project>/{PROJECT_CONFIG_FILENAME})",
)
@click.option("--log-level", default="WARNING", help="Logging level")
@click.pass_context
def cli(ctx: click.Context, config: Path | None, log_level: str) -> None:
    """repo-locator: find where a file lives in version control."""
    configure_logging(log_level)
    ctx.obj = {"config": config}


def _load_settings(config: Path | None, project_dir: Path) -> LocatorSettings:
    if config is not None:
        return LocatorSettings.from_yaml(config)
    return LocatorSettings.for_project(project_dir)


def _format_info(info: RepoInfo, as_json: bool) -> str:
    if as_json:
        data = info.model_dump(mode="json")
        data["repo_name"] = info.repo_name
        return json.dumps(data, indent=2)

    return "\n".join(
        [
            f"vcs: {info.vcs_type}",
            f"remote_url: {info.remote_url}",
            f"repo_name: {info.repo_name}",
            f"branch: {info.branch_name}",
            f"path: {info.relative_path}",
        ]
    )


@cli.command()
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--project",
    "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: current directory)",
)
@click.option("--default-branch", default=None, help="Override the default branch name")
@click.option("--replacements", default=None, help="Override remote URL replacements ('find,replace,...')")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of key: value lines")
@click.pass_context
def resolve(
    ctx: click.Context,
    file: Path,
    project_dir: Path | None,
    default_branch: str | None,
    replacements: str | None,
    as_json: bool,
) -> None:
    """Show VCS type, remote URL, branch and relative path for FILE."""
    project_path = (project_dir or Path.cwd()).resolve()

    try:
        settings = _load_settings(ctx.obj["config"], project_path)
        overrides: dict[str, str] = {}
        if default_branch is not None:
            overrides["default_branch_name"] = default_branch
        if replacements is not None:
            overrides["remote_url_replacements"] = replacements
        if overrides:
            settings = settings.model_copy(update=overrides)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        log.debug("config_error", exc_info=True)
        sys.exit(1)

    project = ProjectContext(base_path=project_path, settings=settings)
    resolver = RepositoryInfoResolver.for_settings(settings)
    resolution = resolver.resolve(project, file)

    if resolution.error is not None:
        ConsoleNotifier().show(project, resolution.message or "")
        log.warning("repo_info_failed", file=str(file), message=resolution.message, exc_info=resolution.error)

    click.echo(_format_info(resolution.info, as_json))

    if not resolution.ok:
        sys.exit(1)


@cli.command("check-config")
@click.option(
    "--project",
    "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: current directory)",
)
@click.pass_context
def check_config(ctx: click.Context, project_dir: Path | None) -> None:
    """Validate configuration and print the effective settings."""
    project_path = (project_dir or Path.cwd()).resolve()

    try:
        settings = _load_settings(ctx.obj["config"], project_path)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    for key, value in settings.model_dump().items():
        click.echo(f"{key}: {value}")

    if settings.remote_url_replacements and settings.replacement_pairs() is None:
        click.echo(
            "Warning: remote_url_replacements has an odd number of entries and will be ignored",
            err=True,
        )


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
