"""Synchronous git command execution."""

import logging
from pathlib import Path

import git
from git.exc import GitCommandNotFound

from stale_branch_cleaner.models import CommandResult
from stale_branch_cleaner.vcs.exceptions import LaunchError

logger = logging.getLogger(__name__)

# Fail instead of waiting for credentials that nobody will type
NON_INTERACTIVE_ENV = {"GIT_TERMINAL_PROMPT": "0"}


class GitCommandRunner:
    """Runs git commands in a repository working directory.

    Each call blocks until the child exits (or the timeout kills it), with
    stdout and stderr captured in full. A non-zero exit status is reported in
    the returned CommandResult rather than raised.
    """

    def __init__(
        self,
        repo_path: str | Path,
        git_executable: str = "git",
        timeout: float | None = 120.0,
    ) -> None:
        """Initialize the runner.

        Args:
            repo_path: Working directory for every command
            git_executable: Name or path of the git executable
            timeout: Seconds before a command is killed (None disables)
        """
        self.repo_path = Path(repo_path)
        self.git_executable = git_executable
        self.timeout = timeout
        self._git = git.Git(self.repo_path)

    def run(self, args: list[str], report: list[str] | None = None) -> CommandResult:
        """Run git with the given arguments.

        Args:
            args: Arguments passed to git, e.g. ["branch", "-vv"]
            report: Optional report; non-empty stderr is appended to it

        Returns:
            CommandResult with exit code, stdout and stderr

        Raises:
            LaunchError: If the git executable could not be started
        """
        command = [self.git_executable, *args]
        logger.debug(f"Running {' '.join(command)} in {self.repo_path}")

        try:
            exit_code, stdout, stderr = self._git.execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
                kill_after_timeout=self.timeout,
                env=NON_INTERACTIVE_ENV,
            )
        except (GitCommandNotFound, OSError) as e:
            msg = f"Unable to start {self.git_executable!r} in {self.repo_path}: {e}"
            raise LaunchError(msg) from e

        result = CommandResult(exit_code=exit_code, stdout=stdout or "", stderr=stderr or "")
        logger.debug(f"{' '.join(command)} exited with status {result.exit_code}")

        if report is not None:
            append_stderr(report, result)

        return result


def append_stderr(report: list[str], result: CommandResult) -> None:
    """Append a command's stderr to a report.

    Git writes regular progress output (e.g. pruned refs) to stderr, so only
    output from a failed command is labelled as an error.

    Args:
        report: Report lines to extend
        result: Result of the command
    """
    stderr = result.stderr.strip()
    if not stderr:
        return

    if result.success:
        report.extend(f"  {line}" for line in stderr.splitlines())
    else:
        report.append(f"Error: {stderr}")
