"""Git implementation for stale-branch-cleaner."""

from stale_branch_cleaner.vcs.git.branch_analyzer import (
    find_stale_branches,
    parse_branch_line,
    parse_branch_listing,
)
from stale_branch_cleaner.vcs.git.manager import GitManager, resolve_repository
from stale_branch_cleaner.vcs.git.runner import GitCommandRunner

__all__ = [
    "GitCommandRunner",
    "GitManager",
    "find_stale_branches",
    "parse_branch_line",
    "parse_branch_listing",
    "resolve_repository",
]
