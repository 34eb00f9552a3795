"""Stale branch cleanup functionality."""

from stale_branch_cleaner.cleanup.orchestrator import StaleBranchCleaner
from stale_branch_cleaner.models import CleanupResult

__all__ = [
    "CleanupResult",
    "StaleBranchCleaner",
]
