"""Unit tests for Git discovery.

Tests cover:
- Listing remotes
- Remote preference order (origin > upstream > first)
- Current branch and detached HEAD
- Remote branch lookup
- Work tree detection and non-repository paths
"""

from unittest.mock import Mock, PropertyMock, patch

import pytest
from git.exc import InvalidGitRepositoryError

from repo_locator.git.discovery import GitDiscovery
from repo_locator.git.exceptions import NoRemotesError, NotGitRepositoryError


def make_remote(name: str, url: str, branches: tuple[str, ...] = ()) -> Mock:
    remote = Mock()
    remote.name = name
    remote.url = url
    refs = []
    for branch in branches:
        ref = Mock()
        ref.remote_head = branch
        refs.append(ref)
    remote.refs = refs
    return remote


class TestGitDiscoveryRemotes:
    """Tests for listing and selecting remotes."""

    @patch("repo_locator.git.discovery.git.Repo")
    def test_list_remotes(self, mock_repo_class):
        """Test every remote is listed with its configured URL."""
        mock_repo = Mock()
        mock_repo.remotes = [
            make_remote("origin", "git@github.com:owner/repo.git"),
            make_remote("mirror", "ssh://git@mirror.example.com/owner/repo.git"),
            make_remote("upstream", "https://github.com/upstream/repo.git"),
            make_remote("local", "file:///srv/repo"),
        ]
        mock_repo_class.return_value = mock_repo

        remotes = GitDiscovery().list_remotes()

        assert [r.name for r in remotes] == ["origin", "mirror", "upstream", "local"]
        assert remotes[3].url == "file:///srv/repo"

    @patch("repo_locator.git.discovery.git.Repo")
    def test_get_remote_single(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = [make_remote("fork", "git@github.com:me/repo.git")]
        mock_repo_class.return_value = mock_repo

        assert GitDiscovery().get_remote().name == "fork"

    @patch("repo_locator.git.discovery.git.Repo")
    def test_get_remote_prefers_origin(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = [
            make_remote("upstream", "git@github.com:upstream/repo.git"),
            make_remote("origin", "git@github.com:owner/repo.git"),
        ]
        mock_repo_class.return_value = mock_repo

        assert GitDiscovery().get_remote().name == "origin"

    @patch("repo_locator.git.discovery.git.Repo")
    def test_get_remote_prefers_upstream_over_others(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = [
            make_remote("fork", "git@github.com:fork/repo.git"),
            make_remote("upstream", "git@github.com:upstream/repo.git"),
        ]
        mock_repo_class.return_value = mock_repo

        assert GitDiscovery().get_remote().name == "upstream"

    @patch("repo_locator.git.discovery.git.Repo")
    def test_get_remote_falls_back_to_first(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = [
            make_remote("fork", "git@github.com:fork/repo.git"),
            make_remote("backup", "git@backup.com:owner/repo.git"),
        ]
        mock_repo_class.return_value = mock_repo

        assert GitDiscovery().get_remote().name == "fork"

    @patch("repo_locator.git.discovery.git.Repo")
    def test_get_remote_by_name(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = [
            make_remote("origin", "git@github.com:owner/repo.git"),
            make_remote("upstream", "git@github.com:upstream/repo.git"),
        ]
        mock_repo_class.return_value = mock_repo

        assert GitDiscovery().get_remote("upstream").url == "git@github.com:upstream/repo.git"

    @patch("repo_locator.git.discovery.git.Repo")
    def test_get_remote_unknown_name(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = [make_remote("origin", "git@github.com:owner/repo.git")]
        mock_repo_class.return_value = mock_repo

        with pytest.raises(ValueError, match="Remote 'nope' not found"):
            GitDiscovery().get_remote("nope")

    @patch("repo_locator.git.discovery.git.Repo")
    def test_get_remote_none_configured(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = []
        mock_repo_class.return_value = mock_repo

        with pytest.raises(NoRemotesError):
            GitDiscovery().get_remote()


class TestGitDiscoveryBranches:
    """Tests for branch lookups."""

    @patch("repo_locator.git.discovery.git.Repo")
    def test_current_branch(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.active_branch.name = "feature-x"
        mock_repo_class.return_value = mock_repo

        assert GitDiscovery().current_branch() == "feature-x"

    @patch("repo_locator.git.discovery.git.Repo")
    def test_current_branch_detached(self, mock_repo_class):
        """Test detached HEAD yields no branch."""
        mock_repo = Mock()
        type(mock_repo).active_branch = PropertyMock(side_effect=TypeError("HEAD is a detached symbolic reference"))
        mock_repo_class.return_value = mock_repo

        assert GitDiscovery().current_branch() is None

    @patch("repo_locator.git.discovery.git.Repo")
    def test_remote_branch_exists(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = [
            make_remote("origin", "git@github.com:owner/repo.git", branches=("main",)),
            make_remote("upstream", "git@github.com:up/repo.git", branches=("main", "feature-x")),
        ]
        mock_repo_class.return_value = mock_repo

        discovery = GitDiscovery()

        assert discovery.remote_branch_exists("feature-x")
        assert not discovery.remote_branch_exists("feature-y")


class TestGitDiscoveryRepository:
    """Tests for repository detection."""

    @patch("repo_locator.git.discovery.git.Repo")
    def test_not_a_repository(self, mock_repo_class, tmp_path):
        mock_repo_class.side_effect = InvalidGitRepositoryError(str(tmp_path))

        discovery = GitDiscovery(tmp_path)

        assert not discovery.is_repository()
        with pytest.raises(NotGitRepositoryError):
            discovery.list_remotes()

    @patch("repo_locator.git.discovery.git.Repo")
    def test_bare_repository_has_no_work_tree(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.working_tree_dir = None
        mock_repo_class.return_value = mock_repo

        discovery = GitDiscovery()

        assert not discovery.is_repository()
        assert discovery.working_tree_dir is None

    @patch("repo_locator.git.discovery.git.Repo")
    def test_file_path_searches_from_parent(self, mock_repo_class, tmp_path):
        """Test discovery for a file opens the repository from its directory."""
        file = tmp_path / "a.go"
        file.write_text("package main\n")
        mock_repo = Mock()
        mock_repo.working_tree_dir = str(tmp_path)
        mock_repo_class.return_value = mock_repo

        discovery = GitDiscovery(file)

        assert discovery.working_tree_dir == tmp_path
        mock_repo_class.assert_called_once_with(tmp_path.resolve(), search_parent_directories=True)

    @patch("repo_locator.git.discovery.git.Repo")
    def test_repo_cached(self, mock_repo_class):
        mock_repo = Mock()
        mock_repo.remotes = []
        mock_repo_class.return_value = mock_repo

        discovery = GitDiscovery()
        discovery.list_remotes()
        discovery.list_remotes()

        mock_repo_class.assert_called_once()
