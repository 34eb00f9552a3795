"""Top-level models for stale-branch-cleaner."""

from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, Field


class CommandResult(NamedTuple):
    """Result of a single git invocation."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        """Check if the command exited with status 0.

        Returns:
            True if the command succeeded
        """
        return self.exit_code == 0


class BranchRecord(BaseModel):
    """One local branch parsed from `git branch -vv` output."""

    name: str = Field(description="Branch name, without the '*' or '+' marker")
    is_current: bool = Field(default=False, description="Branch is checked out in this worktree")
    in_other_worktree: bool = Field(default=False, description="Branch is checked out in another worktree")
    upstream: str | None = Field(default=None, description="Upstream tracking ref, e.g. 'origin/main'")
    gone: bool = Field(default=False, description="Upstream tracking ref was deleted on the remote")


class CleanupResult(BaseModel):
    """Result of a stale branch cleanup run."""

    success: bool
    repo_path: Path | None = None
    report_lines: list[str] = Field(default_factory=list)
    stale_branches: list[str] = Field(default_factory=list)
    deleted_branches: list[str] = Field(default_factory=list)
    dry_run: bool = False
    no_target: bool = False
    error_message: str | None = None

    @property
    def failed_deletions(self) -> list[str]:
        """Stale branches whose delete command did not succeed.

        Returns:
            Branch names in detection order
        """
        if self.dry_run:
            return []
        return [name for name in self.stale_branches if name not in self.deleted_branches]

    def render(self) -> str:
        """Render the report as a single block of text.

        Returns:
            Report lines joined with newlines
        """
        return "\n".join(self.report_lines)
