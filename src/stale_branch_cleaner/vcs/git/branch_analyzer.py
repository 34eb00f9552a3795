"""Git branch listing analysis for identifying stale branches.

Parses the output of `git branch -vv`, which prints one line per local branch:

    * main        1a2b3c4 [origin/main] Latest commit
      feature-a   5d6e7f8 [origin/feature-a: gone] Old work
    + feature-b   9a8b7c6 (/path/to/worktree) [origin/feature-b] Other worktree

A branch is stale when its tracking annotation reads `<upstream>: gone]`.
"""

import logging
import re

from stale_branch_cleaner.models import BranchRecord

logger = logging.getLogger(__name__)

GONE_MARKER = ": gone]"
CURRENT_BRANCH_MARKER = "*"
WORKTREE_BRANCH_MARKER = "+"

# Characters git never allows in a branch name, plus the "(HEAD detached ...)" pseudo-entry
_INVALID_NAME = re.compile(r"^\(|[:\[]")

# Optional commit hash and worktree path, then "[upstream]" or "[upstream: status]"
_TRACKING_ANNOTATION = re.compile(r"^(?:[0-9a-f]{4,}\s+)?(?:\([^)]*\)\s+)?\[(?P<upstream>[^\]:\s]+)(?::[^\]]*)?\]")


def parse_branch_line(line: str) -> BranchRecord | None:
    """Parse a single line of `git branch -vv` output.

    Args:
        line: One line of the listing

    Returns:
        Parsed BranchRecord, or None for blank or malformed lines
    """
    tokens = line.split()
    if not tokens:
        return None

    marker = tokens[0] if tokens[0] in (CURRENT_BRANCH_MARKER, WORKTREE_BRANCH_MARKER) else None
    fields = tokens[1:] if marker else tokens

    if not fields or _INVALID_NAME.search(fields[0]):
        logger.debug(f"Skipping malformed branch line: {line!r}")
        return None

    name = fields[0]

    # Text following the name: hash, optional worktree path, tracking info, subject
    head_count = 2 if marker else 1
    parts = line.split(None, head_count)
    remainder = parts[head_count] if len(parts) > head_count else ""
    match = _TRACKING_ANNOTATION.match(remainder)

    return BranchRecord(
        name=name,
        is_current=marker == CURRENT_BRANCH_MARKER,
        in_other_worktree=marker == WORKTREE_BRANCH_MARKER,
        upstream=match.group("upstream") if match else None,
        gone=GONE_MARKER in line,
    )


def parse_branch_listing(listing: str) -> list[BranchRecord]:
    """Parse the full output of `git branch -vv`.

    Args:
        listing: Raw stdout of the command

    Returns:
        Branch records in listing order (blank and malformed lines skipped)
    """
    records: list[BranchRecord] = []
    for line in listing.splitlines():
        record = parse_branch_line(line)
        if record is not None:
            records.append(record)
    return records


def find_stale_branches(listing: str) -> list[str]:
    """Find branches whose upstream tracking branch is gone.

    Order follows the listing and names are not deduplicated.

    Args:
        listing: Raw stdout of `git branch -vv`

    Returns:
        Names of stale branches
    """
    return [record.name for record in parse_branch_listing(listing) if record.gone]
