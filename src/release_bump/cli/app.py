"""Typer application for release-bump."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from release_bump import __version__
from release_bump.cli.commands.bump import run_bump
from release_bump.cli.log import configure_logging

app = typer.Typer(
    name="release-bump",
    help="Compute the next semantic version from conventional commits.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"release-bump {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Compute the next semantic version from conventional commits."""


@app.command("bump")
def bump_command(
    base_version: Annotated[str, typer.Argument(help="Last released version, e.g. 1.2.3")],
    commits_file: Annotated[
        str | None,
        typer.Argument(help="JSON file with the commits (oldest first); '-' reads stdin"),
    ] = None,
    allowed_types: Annotated[
        str | None,
        typer.Option(
            "--allowed-types",
            "-t",
            help="Comma-separated commit types to consider (overrides configuration)",
        ),
    ] = None,
    path: Annotated[
        str | None,
        typer.Option("--path", "-p", help="Project directory containing pyproject.toml"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", "-j", help="Print the result as JSON")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log classification decisions")
    ] = False,
) -> None:
    """Compute the next version and group commits for release notes."""
    configure_logging(err_console, verbose=verbose)
    run_bump(
        base_version=base_version,
        commits_file=commits_file,
        allowed_types=allowed_types,
        path=path,
        as_json=as_json,
        console=console,
        err_console=err_console,
    )
