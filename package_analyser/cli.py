"""CLI entry point: parse options once, run the pipeline, report errors."""

import sys
from pathlib import Path
from typing import Optional

import click
import typer

from .config import load_config
from .engine import run
from .errors import PackageAnalyserError
from .logging_config import setup_logging

app = typer.Typer(
    help="Analyses packages to give a 100ft view of how they look.",
    add_completion=False,
)


def _fail(err: Exception) -> None:
    """Print the error to stderr and exit 1."""
    typer.echo(click.style("Error: ", fg="red", bold=True) + str(err), err=True)
    raise typer.Exit(1)


@app.command()
def main(
    locator: str = typer.Argument(..., help="Local directory, or github.com/<owner>/<repo>[/<path>]"),
    toggle: bool = typer.Option(False, "--toggle", "-t", help="Placeholder toggle (no effect)"),
    bins: Optional[int] = typer.Option(None, "--bins", "-b", min=1, help="Histogram bins (default: 5)"),
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1, help="Longest bar in characters (default: 20)"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Parallel GitHub file fetches (default: 1)"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML config file"
    ),
    token: Optional[str] = typer.Option(
        None, "--token", envvar="GITHUB_TOKEN", show_default=False, help="GitHub token (env: GITHUB_TOKEN)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
) -> None:
    """Report exported functions per file, totals and imports for a Go package."""
    logger = setup_logging(verbose)
    try:
        config = load_config(config_path).with_overrides(
            bins=bins, bar_width=width, workers=workers, token=token
        )
        logger.debug("config: bins=%d width=%d workers=%d", config.bins, config.bar_width, config.workers)
        run(locator, config, sys.stdout)
    except PackageAnalyserError as e:
        logger.debug("run failed", exc_info=True)
        _fail(e)


def _main() -> None:
    app()


if __name__ == "__main__":
    _main()
