"""
Configuration system using Pydantic for type-safe settings management.

Settings come from (highest priority first) explicit keyword arguments,
``REPO_LOCATOR_*`` environment variables, and an optional YAML file.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from repo_locator.exceptions import ConfigurationError

# Project-level configuration file looked up in the project base directory
PROJECT_CONFIG_FILENAME = ".repo-locator.yaml"

REPLACEMENT_SEPARATOR = re.compile(r"\s*,\s*")


def parse_replacements(value: str) -> list[tuple[str, str]] | None:
    """Parse a comma-separated list of find/replace strings into pairs.

    Whitespace around commas and at both ends is ignored and trailing empty
    entries are dropped.

    Returns:
        List of (find, replace) pairs, or None when the list has an odd
        number of entries. An empty string is a single empty entry and
        therefore also yields None.

    Example:
        >>> parse_replacements("internal.example.com, github.com")
        [('internal.example.com', 'github.com')]
        >>> parse_replacements("a,b,c") is None
        True
    """
    entries = REPLACEMENT_SEPARATOR.split(value.strip())
    while len(entries) > 1 and entries[-1] == "":
        entries.pop()

    if len(entries) % 2 != 0:
        return None

    return [(entries[i], entries[i + 1]) for i in range(0, len(entries), 2)]


class LocatorSettings(BaseSettings):
    """Repository lookup settings.

    This class provides methods for loading from YAML files with environment
    variable interpolation.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPO_LOCATOR_",
        case_sensitive=False,
        frozen=True,
    )

    default_branch_name: str = Field(
        default="main", description="Branch used when the local branch does not exist on the remote"
    )
    remote_url_replacements: str = Field(
        default="",
        description="Comma-separated find/replace pairs applied to the remote URL, "
        "e.g. 'internal.example.com,github.com'",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    p4_executable: str = Field(default="p4", description="Name or path of the Perforce command line client")
    p4_timeout: float = Field(default=10.0, gt=0, le=300, description="Seconds to wait for each p4 command")

    @field_validator("default_branch_name")
    @classmethod
    def validate_default_branch(cls, v: str) -> str:
        """Ensure the default branch name is not empty."""
        if not v or not v.strip():
            raise ValueError("default_branch_name must not be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    def replacement_pairs(self) -> list[tuple[str, str]] | None:
        """Parsed remote URL replacements, or None when malformed."""
        return parse_replacements(self.remote_url_replacements)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> LocatorSettings:
        """Load settings from YAML file with environment variable interpolation.

        Supports ${VAR_NAME} syntax for environment variable substitution.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            LocatorSettings instance

        Raises:
            ConfigurationError: If config file is invalid or missing
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            yaml_content = config_file.read_text()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            yaml_content = cls._interpolate_env_vars(yaml_content)
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment variable reference in config: {e}") from e

        try:
            config_dict = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        try:
            return cls(**config_dict)
        except Exception as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}") from e

    @classmethod
    def for_project(cls, base_path: str | Path) -> LocatorSettings:
        """Load the project's settings file if there is one, defaults otherwise."""
        config_file = Path(base_path) / PROJECT_CONFIG_FILENAME
        if config_file.is_file():
            return cls.from_yaml(config_file)
        return cls()

    @staticmethod
    def _interpolate_env_vars(content: str) -> str:
        """Interpolate ${VAR_NAME} placeholders with environment variables.

        Supports two syntaxes:
        - ${VAR_NAME} - Required environment variable (raises if not set)
        - ${VAR_NAME:-default} - Optional with default value

        Raises:
            ValueError: If a required environment variable is not set

        Note:
            YAML comment lines (starting with #) are preserved unchanged.
        """
        pattern = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2)
            value = os.getenv(var_name)

            if value is not None:
                return value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable {var_name} is not set")

        def process_line(line: str) -> str:
            stripped = line.lstrip()
            if stripped.startswith("#"):
                return line
            return pattern.sub(replace_var, line)

        return "\n".join(process_line(line) for line in content.split("\n"))
