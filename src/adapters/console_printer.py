"""Paginated console output.

Rows are written verbatim (no Rich markup, no highlighting, no wrapping) so
the columns line up exactly as computed by the formatter. Between pages the
printer calls `prompt`, which blocks until the user acknowledges.
"""

from __future__ import annotations

from typing import Callable, Sequence

from rich.console import Console

from core.domain.models import DisplayRow
from core.services.formatter import DEFAULT_COL_BUFFER, format_header, format_row

Prompt = Callable[[], None]

DEFAULT_PAGE_SIZE = 10


def no_prompt() -> None:
    """Prompt that resolves immediately (non-interactive runs, tests)."""


class PagedPrinter:
    """Writes the truck table to a Rich console, page by page."""

    def __init__(
        self,
        console: Console,
        *,
        prompt: Prompt = no_prompt,
        page_size: int = DEFAULT_PAGE_SIZE,
        col_buffer: int = DEFAULT_COL_BUFFER,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._console = console
        self._prompt = prompt
        self._page_size = page_size
        self._col_buffer = col_buffer

    def _write(self, line: str) -> None:
        self._console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def print_header(self, name_width: int) -> None:
        self._write(format_header(name_width, self._col_buffer))

    def print_paged(self, rows: Sequence[DisplayRow], name_width: int) -> int:
        """Write every row, pausing before rows 11, 21, 31...

        Returns the number of times the prompt was issued.
        """

        pauses = 0
        for i, row in enumerate(rows):
            if i != 0 and i % self._page_size == 0:
                self._prompt()
                pauses += 1
            self._write(format_row(row, name_width, self._col_buffer))
        return pauses


def print_paged(
    rows: Sequence[DisplayRow],
    name_width: int,
    page_size: int = DEFAULT_PAGE_SIZE,
    prompt: Prompt = no_prompt,
    *,
    console: Console | None = None,
    col_buffer: int = DEFAULT_COL_BUFFER,
) -> int:
    """Functional shortcut over `PagedPrinter.print_paged`."""

    printer = PagedPrinter(
        console or Console(),
        prompt=prompt,
        page_size=page_size,
        col_buffer=col_buffer,
    )
    return printer.print_paged(rows, name_width)
