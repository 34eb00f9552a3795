"""Version control integration for stale-branch-cleaner."""

from stale_branch_cleaner.vcs.exceptions import (
    LaunchError,
    NoTargetError,
    NotARepositoryError,
    RepositoryNotFoundError,
    VCSError,
)

__all__ = [
    "LaunchError",
    "NoTargetError",
    "NotARepositoryError",
    "RepositoryNotFoundError",
    "VCSError",
]
