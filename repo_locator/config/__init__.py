"""Configuration for repo-locator."""

from repo_locator.config.settings import PROJECT_CONFIG_FILENAME, LocatorSettings, parse_replacements

__all__ = ["LocatorSettings", "PROJECT_CONFIG_FILENAME", "parse_replacements"]
