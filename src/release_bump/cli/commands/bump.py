"""Implementation of the 'bump' command.

The bump command reads a batch of commits, computes the next version and
prints it together with the commits grouped for release notes. Nothing is
written to disk.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from release_bump.cli.input import load_commits
from release_bump.config import CommitsConfig, ReleaseBumpConfig, load_config
from release_bump.core.engine import bump
from release_bump.exceptions import (
    CommitInputError,
    ConfigNotFoundError,
    ConfigValidationError,
    VersionParseError,
)

if TYPE_CHECKING:
    from rich.console import Console

    from release_bump.core.commits import Commit
    from release_bump.core.engine import BumpResult


def run_bump(
    base_version: str,
    commits_file: str | None,
    allowed_types: str | None,
    path: str | None,
    as_json: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Run the bump command.

    Args:
        base_version: Last released version
        commits_file: JSON file with the commits, ``None`` or ``"-"`` for stdin
        allowed_types: Comma-separated commit types overriding the configuration
        path: Optional path to the project directory holding pyproject.toml
        as_json: Print the machine-readable result instead of tables
        console: Console for standard output
        err_console: Console for error output
    """
    project_path = Path(path) if path else Path.cwd()

    # Load configuration
    try:
        config = load_config(project_path)
    except ConfigNotFoundError:
        config = ReleaseBumpConfig()
    except ConfigValidationError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    commits_config = config.commits
    if allowed_types:
        commits_config = CommitsConfig.from_csv(allowed_types) or commits_config

    # Read commits
    try:
        commits = load_commits(_read_input(commits_file))
    except OSError as e:
        err_console.print(f"[red]Error reading commits:[/] {escape(str(e))}")
        raise SystemExit(1) from e
    except CommitInputError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    try:
        result = bump(base_version, commits, commits_config)
    except VersionParseError as e:
        err_console.print(f"[red]Invalid version format:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if as_json:
        console.print_json(
            data={
                "updatedVersion": result.updated_version,
                "classifiedCommits": result.classified_commits.to_dict(),
            }
        )
        return

    _print_commits(commits, console)
    _print_result(result, console)


def _read_input(commits_file: str | None) -> str:
    if commits_file is None or commits_file == "-":
        return sys.stdin.read()
    return Path(commits_file).read_text(encoding="utf-8")


def _print_commits(commits: list[Commit], console: Console) -> None:
    if not commits:
        console.print("[yellow]No new commits found.[/]")
        return

    console.print("[bold]New commits found:[/]")
    for commit in commits:
        subject = commit.message.partition("\n")[0]
        console.print(f"  - [cyan]{escape(commit.short_id)}[/]: {escape(subject)}", highlight=False)


def _print_result(result: BumpResult, console: Console) -> None:
    base = result.base_version.without_build()
    if result.changed:
        summary = f"Updating from [cyan]{base}[/] to [green]{result.updated_version}[/]"
    else:
        summary = f"[yellow]No releasable changes found.[/] Version stays at [cyan]{base}[/]"

    console.print()
    console.print(Panel(summary, title="[bold]Release Version[/]", border_style="green"))

    for category, commits in result.classified_commits.items():
        if not commits:
            continue
        table = Table(title=category.label, title_justify="left", show_header=True)
        table.add_column("Commit", style="cyan", no_wrap=True)
        table.add_column("Type", style="magenta")
        table.add_column("Subject")
        table.add_column("Pre-release", justify="center")
        for commit in commits:
            table.add_row(
                escape(commit.short_id),
                commit.type,
                escape(commit.message.partition("\n")[0]),
                "yes" if commit.prerelease else "",
            )
        console.print(table)
