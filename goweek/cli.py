"""Command line entrypoint: generate, or commit and push, the weekly report."""

import logging
from typing import Optional

import typer

from . import __version__
from .commit import commit_reports
from .config import load_config, resolve_profile_dir
from .exceptions import GoWeekError
from .utils.utils import get_logger, set_log_level
from .weekly_report import create_weekly_report

logger = get_logger(__name__)

app = typer.Typer(
    name="goweek",
    help="generate your weekly report with one click",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"goweek {__version__}")
        raise typer.Exit()


@app.command()
def main(
    git: bool = typer.Option(
        False,
        "--git",
        "-g",
        help="git add, commit and push the weekly report",
    ),
    last_week: bool = typer.Option(
        False,
        "--last-week",
        "-l",
        help="generate the weekly report of last week",
    ),
    profile_dir: Optional[str] = typer.Option(
        None,
        "--profile-dir",
        envvar="GOWEEK_PROFILE_DIR",
        help="Directory holding config.json and template.md (default: ~/.goweek).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """Generate this week's report from the template, or push pending reports with --git."""
    if verbose:
        set_log_level(logging.DEBUG)

    profile_dir = profile_dir or resolve_profile_dir()
    logger.debug("Using profile directory %s", profile_dir)

    try:
        if git:
            commit_reports(load_config(profile_dir), echo=typer.echo)
        else:
            create_weekly_report(profile_dir, last_week=last_week, echo=typer.echo)
    except (GoWeekError, OSError) as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)


def run():
    """Typer entrypoint used by the console script and ``python -m goweek``."""
    app()
