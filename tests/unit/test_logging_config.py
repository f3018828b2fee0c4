"""Unit tests for logging configuration."""

import pytest
import structlog

from repo_locator.resolver import RepositoryInfoResolver
from repo_locator.utils.logging_config import configure_default_logging


@pytest.fixture
def unconfigured_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


class TestDefaultLogging:
    """Tests for the configuration applied to library callers."""

    def test_debug_events_dropped(self, unconfigured_structlog, capsys):
        """Test a resolver used as a library does not print debug events."""
        RepositoryInfoResolver([])
        log = structlog.get_logger("repo_locator.test")

        log.debug("p4_info_unavailable", path="/tmp/a.go")
        log.warning("repo_info_failed", file="/tmp/a.go")

        out = capsys.readouterr().out
        assert "p4_info_unavailable" not in out
        assert "repo_info_failed" in out

    def test_existing_configuration_kept(self, unconfigured_structlog):
        wrapper = structlog.make_filtering_bound_logger(0)
        structlog.configure(wrapper_class=wrapper)

        configure_default_logging()

        assert structlog.get_config()["wrapper_class"] is wrapper
