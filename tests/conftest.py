"""Shared fixtures for tests that drive a real git executable."""

import os
from pathlib import Path

# Collect the suite on machines without git; those tests are skipped.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import git  # noqa: E402
import pytest  # noqa: E402

FEATURE_BRANCHES = ("feature-a", "feature-b", "feature-c")


@pytest.fixture
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide a commit identity independent of the user's git config."""
    for role in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{role}_NAME", "Test User")
        monkeypatch.setenv(f"GIT_{role}_EMAIL", "test@example.com")


@pytest.fixture
def origin_repo(tmp_path: Path, git_identity: None) -> git.Repo:
    """Create a repository acting as the remote, with a few feature branches.

    Args:
        tmp_path: Pytest temporary directory fixture
        git_identity: Commit identity fixture

    Returns:
        The origin repository
    """
    repo = git.Repo.init(tmp_path / "origin")

    readme = Path(repo.working_tree_dir) / "README.md"
    readme.write_text("hello\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    for name in FEATURE_BRANCHES:
        repo.create_head(name)

    return repo


@pytest.fixture
def cloned_repo(tmp_path: Path, origin_repo: git.Repo) -> git.Repo:
    """Clone the origin and track every feature branch locally.

    Args:
        tmp_path: Pytest temporary directory fixture
        origin_repo: Remote repository fixture

    Returns:
        The cloned repository
    """
    clone = git.Repo.clone_from(origin_repo.working_tree_dir, tmp_path / "clone")

    for name in FEATURE_BRANCHES:
        clone.git.branch("--track", name, f"origin/{name}")

    return clone


@pytest.fixture
def stale_repo(origin_repo: git.Repo, cloned_repo: git.Repo) -> git.Repo:
    """Clone whose feature-a and feature-b were deleted on the origin.

    Args:
        origin_repo: Remote repository fixture
        cloned_repo: Cloned repository fixture

    Returns:
        The cloned repository
    """
    origin_repo.delete_head("feature-a", force=True)
    origin_repo.delete_head("feature-b", force=True)
    return cloned_repo
