"""Projection, ordering and column alignment of open trucks."""

from __future__ import annotations

from typing import Iterable, Sequence

from core.domain.models import DisplayRow, RawTruckRecord

DEFAULT_COL_BUFFER = 4
NAME_HEADER = "NAME"
ADDRESS_HEADER = "ADDRESS"


def project(records: Iterable[RawTruckRecord]) -> list[DisplayRow]:
    """Keep only what gets printed: the name and the address."""

    return [DisplayRow(applicant=r.applicant, location=r.location) for r in records]


def sort_rows(rows: Iterable[DisplayRow]) -> list[DisplayRow]:
    """Sort by applicant, then by location on ties.

    Plain ordinal string comparison; `sorted` is stable so fully equal rows
    keep their relative order.
    """

    return sorted(rows, key=lambda row: (row.applicant, row.location))


def max_name_width(rows: Sequence[DisplayRow]) -> int:
    return max((len(row.applicant) for row in rows), default=0)


def padding(name_width: int, text: str, col_buffer: int = DEFAULT_COL_BUFFER) -> int:
    """Number of spaces written after `text` in the first column.

    Never less than `1 + col_buffer`, so the header stays readable when every
    name is shorter than `NAME`.
    """

    return max(name_width - len(text) + 1 + col_buffer, 1 + col_buffer)


def format_row(row: DisplayRow, name_width: int, col_buffer: int = DEFAULT_COL_BUFFER) -> str:
    spaces = " " * padding(name_width, row.applicant, col_buffer)
    return f"{row.applicant}{spaces}{row.location}"


def format_header(name_width: int, col_buffer: int = DEFAULT_COL_BUFFER) -> str:
    spaces = " " * padding(name_width, NAME_HEADER, col_buffer)
    return f"{NAME_HEADER}{spaces}{ADDRESS_HEADER}"
