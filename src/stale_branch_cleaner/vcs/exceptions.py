"""VCS exceptions for stale-branch-cleaner.

Only failures that abort a run are raised. Problems reported by git itself
(stderr output) and unparseable listing lines are folded into the report
instead.
"""


class VCSError(Exception):
    """Base exception for all VCS-related errors."""


class NotARepositoryError(VCSError):
    """Raised when a directory is not a valid repository."""


class RepositoryNotFoundError(NotARepositoryError):
    """Raised when the target directory does not exist."""


class NoTargetError(VCSError):
    """Raised when no repository directory could be resolved."""


class LaunchError(VCSError):
    """Raised when the git executable cannot be started."""
