"""Stale branch cleanup orchestration."""

import logging
from pathlib import Path

from stale_branch_cleaner.config import CleanerConfig
from stale_branch_cleaner.models import CleanupResult
from stale_branch_cleaner.vcs.exceptions import NoTargetError
from stale_branch_cleaner.vcs.git.branch_analyzer import find_stale_branches
from stale_branch_cleaner.vcs.git.manager import GitManager

logger = logging.getLogger(__name__)

NO_TARGET_MESSAGE = "No repository is currently open."
PRUNING_HEADING = "Pruning remote references..."
NO_STALE_BRANCHES_MESSAGE = "No stale branches found."
CLEANUP_COMPLETE_MESSAGE = "Cleanup complete!"
DRY_RUN_COMPLETE_MESSAGE = "Dry run complete, no branches were deleted."
ERROR_PREFIX = "Error cleaning stale branches"


class StaleBranchCleaner:
    """Orchestrates the stale branch cleanup workflow.

    Coordinates:
    - Pruning remote-tracking refs
    - Listing local branches with tracking status
    - Detecting branches whose upstream is gone
    - Force-deleting each of them

    Construct one per invocation; it keeps no state between runs.
    """

    def __init__(self, config: CleanerConfig | None = None) -> None:
        """Initialize the cleaner.

        Args:
            config: Application configuration (default: loaded from environment)
        """
        self.config = config or CleanerConfig()

    def create_git_manager(self, repo_path: Path) -> GitManager:
        """Create the Git manager used for one run.

        Args:
            repo_path: Repository working tree

        Returns:
            GitManager configured from this cleaner's settings
        """
        return GitManager(
            repo_path,
            git_executable=self.config.git_executable,
            timeout=self.config.command_timeout,
        )

    def clean(self, repo_path: Path | None, dry_run: bool | None = None) -> CleanupResult:
        """Delete local branches whose upstream tracking branch is gone.

        Workflow:
        1. Prune remote-tracking refs (`git fetch --prune`)
        2. List local branches (`git branch -vv`)
        3. Detect branches marked ': gone]'
        4. Force-delete each one (`git branch -D <name>`) unless dry_run

        Deletions are not transactional: if the run fails midway, branches
        already deleted stay deleted.

        Args:
            repo_path: Repository working tree, or None if none was resolved
            dry_run: Report stale branches without deleting them
                (default: the configured value)

        Returns:
            CleanupResult holding the report and the affected branches
        """
        if dry_run is None:
            dry_run = self.config.dry_run

        report: list[str] = []
        stale_branches: list[str] = []
        deleted_branches: list[str] = []

        try:
            target = self._require_target(repo_path)
            git_manager = self.create_git_manager(target)

            report.append(PRUNING_HEADING)
            git_manager.fetch_prune(report)

            listing = git_manager.list_branches(report)
            stale_branches = find_stale_branches(listing.stdout)
            logger.debug(f"Found {len(stale_branches)} stale branches in {target}")

            if not stale_branches:
                report.extend(["", NO_STALE_BRANCHES_MESSAGE])
                return CleanupResult(success=True, repo_path=target, report_lines=report, dry_run=dry_run)

            report.extend(["", f"Found {len(stale_branches)} stale branch(es):"])

            for branch in stale_branches:
                if dry_run:
                    report.append(f"  Would delete: {branch}")
                    continue

                report.append(f"  Deleting: {branch}")
                result = git_manager.delete_branch(branch, report)
                if result.success:
                    deleted_branches.append(branch)

            report.extend(["", DRY_RUN_COMPLETE_MESSAGE if dry_run else CLEANUP_COMPLETE_MESSAGE])

            return CleanupResult(
                success=True,
                repo_path=target,
                report_lines=report,
                stale_branches=stale_branches,
                deleted_branches=deleted_branches,
                dry_run=dry_run,
            )

        except NoTargetError as e:
            return CleanupResult(
                success=True,
                report_lines=[str(e)],
                dry_run=dry_run,
                no_target=True,
            )

        except Exception as e:
            logger.debug("Stale branch cleanup failed", exc_info=True)
            return CleanupResult(
                success=False,
                repo_path=repo_path,
                report_lines=report,
                stale_branches=stale_branches,
                deleted_branches=deleted_branches,
                dry_run=dry_run,
                error_message=f"{ERROR_PREFIX}: {e}",
            )

    def _require_target(self, repo_path: Path | None) -> Path:
        """Ensure a repository was resolved.

        Args:
            repo_path: Resolved repository, or None

        Returns:
            The repository path

        Raises:
            NoTargetError: If no repository was resolved
        """
        if repo_path is None:
            raise NoTargetError(NO_TARGET_MESSAGE)
        return repo_path
