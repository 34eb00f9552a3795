"""Git operations manager."""

from pathlib import Path

import git

from stale_branch_cleaner.models import CommandResult
from stale_branch_cleaner.vcs.exceptions import RepositoryNotFoundError
from stale_branch_cleaner.vcs.git.runner import GitCommandRunner


def resolve_repository(path: str | Path) -> Path | None:
    """Find the working tree root of the repository containing a path.

    A file path is resolved through its parent directory.

    Args:
        path: Directory (or file) inside the repository

    Returns:
        Working tree root, or None if path is not inside a non-bare Git repository

    Raises:
        RepositoryNotFoundError: If path does not exist
    """
    target = Path(path).expanduser()
    if not target.exists():
        msg = f"Directory not found: {target}"
        raise RepositoryNotFoundError(msg)

    if target.is_file():
        target = target.parent

    try:
        repo = git.Repo(target, search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError):
        return None

    try:
        working_tree_dir = repo.working_tree_dir
    finally:
        repo.close()

    if working_tree_dir is None:
        return None
    return Path(working_tree_dir)


class GitManager:
    """Manages the Git operations needed to clean stale branches."""

    def __init__(
        self,
        repo_path: str | Path,
        git_executable: str = "git",
        timeout: float | None = 120.0,
    ) -> None:
        """Initialize Git manager.

        Args:
            repo_path: Path to the repository working tree
            git_executable: Name or path of the git executable
            timeout: Seconds before a git command is killed (None disables)
        """
        self.repo_path = Path(repo_path)
        self.runner = GitCommandRunner(self.repo_path, git_executable=git_executable, timeout=timeout)

    def fetch_prune(self, report: list[str] | None = None) -> CommandResult:
        """Remove remote-tracking refs that no longer exist on the remote.

        Args:
            report: Optional report receiving stderr output

        Returns:
            Result of `git fetch --prune`
        """
        return self.runner.run(["fetch", "--prune"], report)

    def list_branches(self, report: list[str] | None = None) -> CommandResult:
        """List local branches with their tracking status.

        Args:
            report: Optional report receiving stderr output

        Returns:
            Result of `git branch -vv`
        """
        return self.runner.run(["branch", "-vv"], report)

    def delete_branch(self, name: str, report: list[str] | None = None) -> CommandResult:
        """Force-delete a local branch, even if it has unmerged commits.

        Args:
            name: Branch to delete
            report: Optional report receiving stderr output

        Returns:
            Result of `git branch -D <name>`
        """
        return self.runner.run(["branch", "-D", name], report)
