"""CLI UI components (Rich).

Visual details (tables, error messages, the page prompt) live here so the
command functions only wire things together.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.console_printer import Prompt
from core.config import AppSettings
from core.domain.errors import FetchError
from core.services.clock import Moment

_DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def make_page_prompt(console: Console) -> Prompt:
    """Build the prompt used between pages: wait for one line on stdin.

    The line content is ignored. End of input counts as an acknowledgment,
    so piping the output never hangs.
    """

    def wait_for_enter() -> None:
        try:
            console.input("")
        except EOFError:
            pass

    return wait_for_enter


def fetch_error_message(exc: FetchError) -> str:
    detail = exc.status_code if exc.status_code is not None else exc
    return f"There is currently some error ({detail}) fetching the data please try again later..."


def settings_error_message(exc: ValidationError) -> str:
    fields = sorted({".".join(str(part) for part in error["loc"]) or "settings" for error in exc.errors()})
    return (
        f"Invalid configuration ({', '.join(fields)}): "
        "check the FOODTRUCK_* environment variables or the .env file."
    )


def print_error(console: Console, message: str) -> None:
    """Print a user-facing error verbatim (no markup interpretation)."""

    console.print(message, markup=False, highlight=False, emoji=False, soft_wrap=True)


def build_settings_table(settings: AppSettings, moment: Moment) -> Table:
    """Table with the effective configuration, used by `doctor`."""

    table = Table(title="foodtruck-finder Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Dataset URL", "OK", settings.dataset_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Page size", "OK", str(settings.page_size))
    table.add_row("Column buffer", "OK", str(settings.col_buffer))
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("Local clock", "OK", f"hour={moment.hour} day={moment.day} ({_DAY_NAMES[moment.day]})")
    return table
