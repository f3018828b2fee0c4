"""repo-locator: find where a file lives in version control.

Resolves the VCS type, canonical remote URL, branch and repository-relative
path of a file in a Git or Perforce workspace.
"""

from repo_locator.enums import VCSType
from repo_locator.models import ProjectContext, RepoInfo, Resolution
from repo_locator.resolver import RepositoryInfoResolver, apply_url_replacements, get_repo_info

__version__ = "0.1.0"

__all__ = [
    "VCSType",
    "RepoInfo",
    "Resolution",
    "ProjectContext",
    "RepositoryInfoResolver",
    "apply_url_replacements",
    "get_repo_info",
]
