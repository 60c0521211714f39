"""Command-line entry point for the Laravel EOL check."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import click
import requests
from rich.console import Console

from ..composer import COMPOSER_LOCK_FILE, load_installed_version
from ..config import load_settings
from ..console import create_console, print_error
from ..eol_api import fetch_lifecycle_feed, find_cycle, latest_major
from ..exceptions import LaravelEolError
from ..logging_config import logger, setup_logging
from ..models import RenderConfig
from ..report import ReportRenderer
from ..status import EXIT_OK, EXIT_SETUP_ERROR, evaluate_status, exit_code_for


def run_check(
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
    project_dir: Optional[Union[str, Path]] = None,
    now: Optional[datetime] = None,
    session: Optional[requests.Session] = None,
) -> int:
    """
    Run the EOL check and print the report.

    Every input is gathered before anything is printed, so a setup error
    leaves stdout empty and prints one line to stderr.

    Args:
        console: Console for the report (defaults to stdout)
        err_console: Console for fatal errors (defaults to stderr)
        project_dir: Directory holding composer.lock (defaults to the cwd)
        now: Reference time for day counts (defaults to datetime.now())
        session: Optional requests.Session for the feed request

    Returns:
        Process exit code
    """
    console = console or create_console()
    err_console = err_console or create_console(stderr=True)
    project_path = Path(project_dir) if project_dir else Path.cwd()

    try:
        settings = load_settings()
        setup_logging(settings.log_level, settings.log_json)

        logger.info("Analyzing Laravel installation...")
        installed = load_installed_version(project_path / COMPOSER_LOCK_FILE)
        logger.info(f"Detected Laravel {installed.full} (major {installed.major})")

        logger.info("Fetching EOL data from endoflife.date...")
        feed = fetch_lifecycle_feed(session=session)
        record = find_cycle(feed, installed.major)
        upgrade_target = latest_major(feed)
    except LaravelEolError as e:
        logger.debug(f"Aborting: {type(e).__name__}: {e}")
        print_error(str(e), err_console)
        return EXIT_SETUP_ERROR

    status = evaluate_status(record, now)
    renderer = ReportRenderer(console, RenderConfig(project_path=project_path))
    renderer.render(installed, record, status, upgrade_target)

    if record is None:
        logger.info(f"No release cycle {installed.major} in EOL data")
        return EXIT_OK
    return exit_code_for(status)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Report end-of-life status for the Laravel version in ./composer.lock.

    \b
    Exit codes:
      0  supported, or no EOL data for this version
      1  security support ends in less than 90 days
      2  end of life has passed
      3  setup error (composer.lock, network or feed problem)
    """
    ctx.exit(run_check())


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
