"""Command-line interface for stale-branch-cleaner."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from stale_branch_cleaner import __version__
from stale_branch_cleaner.cleanup.orchestrator import StaleBranchCleaner
from stale_branch_cleaner.config import CleanerConfig, ConfigurationError
from stale_branch_cleaner.models import CleanupResult
from stale_branch_cleaner.vcs.exceptions import VCSError
from stale_branch_cleaner.vcs.git.manager import resolve_repository

app = typer.Typer(
    name="stale-branch-cleaner",
    help="Delete local Git branches whose upstream branch is gone",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

# Help text constants
VERBOSE_OUTPUT_HELP = "Verbose output"


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration.

    Log records go to stderr so stdout carries only the report.

    Args:
        verbose: If True, enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )

    # GitPython logs every command it runs at DEBUG
    if not verbose:
        logging.getLogger("git").setLevel(logging.WARNING)


def _display_result(result: CleanupResult) -> None:
    """Display a cleanup result.

    Exactly one message is shown: the report, or the error.

    Args:
        result: Cleanup result to display
    """
    if not result.success:
        err_console.print(f"[red]{escape(result.error_message or 'Stale branch cleanup failed')}[/red]")
        sys.exit(1)

    if result.no_target:
        console.print(f"[yellow]{escape(result.render())}[/yellow]")
        return

    console.print(result.render(), markup=False, highlight=False, soft_wrap=True)


@app.command()
def clean(
    repo_path: Path = typer.Argument(..., help="Path to the repository (or any directory inside it)"),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="List stale branches without deleting them",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Seconds before a git command is killed, 0 disables (overrides config)",
    ),
    git_executable: str | None = typer.Option(
        None,
        "--git",
        help="Name or path of the git executable (overrides config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=VERBOSE_OUTPUT_HELP,
    ),
) -> None:
    """Prune remote refs and delete local branches whose upstream is gone."""
    setup_logging(verbose)

    try:
        # Load configuration, CLI flags take precedence
        overrides: dict[str, str | float] = {}
        if timeout is not None:
            overrides["command_timeout"] = timeout
        if git_executable is not None:
            overrides["git_executable"] = git_executable
        config = CleanerConfig(**overrides)

        target = resolve_repository(repo_path)

        cleaner = StaleBranchCleaner(config)
        result = cleaner.clean(target, dry_run=dry_run or config.dry_run)

    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)
    except VCSError as e:
        err_console.print(f"[red]Repository error: {escape(str(e))}[/red]")
        sys.exit(1)
    except Exception as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            err_console.print_exception()
        sys.exit(1)

    _display_result(result)


@app.command()
def config() -> None:
    """Show current configuration."""
    try:
        cfg = CleanerConfig()
        console.print("[bold]Current Configuration:[/bold]\n")
        console.print(f"  Git executable: {escape(cfg.git_executable)}")
        if cfg.command_timeout is None:
            console.print("  Command timeout: disabled")
        else:
            console.print(f"  Command timeout: {cfg.command_timeout:g}s")
        console.print(f"  Dry run by default: {cfg.dry_run}")
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        sys.exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"stale-branch-cleaner version {__version__}")


if __name__ == "__main__":
    app()
