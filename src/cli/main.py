"""foodtruck-finder CLI (Typer).

Running the command with no subcommand fetches the schedule, keeps the
trucks open right now and prints them page by page.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.console_printer import PagedPrinter, no_prompt
from adapters.sfgov_source import SfGovTruckSource
from cli import doctor
from cli.ui_components import (
    fetch_error_message,
    make_page_prompt,
    print_error,
    settings_error_message,
)
from core.config import AppSettings
from core.domain.errors import DatasetError, FetchError, ParseHourError
from core.interfaces.source import TruckSource
from core.logging_utils import configure_logging
from core.services.clock import current_moment
from core.services.truck_pipeline import build_report

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="List the San Francisco food trucks that are open right now.",
)
app.command(name="doctor")(doctor.run)

_console = Console()


def _make_source(settings: AppSettings) -> TruckSource:
    return SfGovTruckSource(settings)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    page_size: int | None = typer.Option(
        None,
        "--page-size",
        min=1,
        help="Rows per page (default: FOODTRUCK_PAGE_SIZE or 10).",
    ),
    no_pause: bool = typer.Option(
        False,
        "--no-pause",
        help="Print every row without waiting for Enter between pages.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Debug logging on stderr.",
    ),
) -> None:
    """Print the food trucks open right now, 10 at a time."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_console, settings_error_message(exc))
        raise typer.Exit(code=1)
    ctx.obj = settings
    configure_logging(logging.DEBUG if verbose else settings.log_level_value())

    if ctx.invoked_subcommand is not None:
        return

    source = _make_source(settings)
    try:
        records = asyncio.run(source.fetch())
    except FetchError as exc:
        print_error(_console, fetch_error_message(exc))
        raise typer.Exit(code=1)
    except DatasetError as exc:
        logger.debug("Unusable dataset", exc_info=True)
        print_error(_console, f"The food truck data could not be read: {exc}")
        raise typer.Exit(code=1)

    moment = current_moment()
    try:
        report = build_report(records, now_hour=moment.hour, now_day=moment.day)
    except ParseHourError as exc:
        print_error(_console, f"The food truck data contains an invalid hour: {exc.token!r}")
        raise typer.Exit(code=1)

    printer = PagedPrinter(
        _console,
        prompt=no_prompt if no_pause else make_page_prompt(_console),
        page_size=page_size or settings.page_size,
        col_buffer=settings.col_buffer,
    )
    printer.print_header(report.name_width)
    printer.print_paged(report.rows, report.name_width)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
