"""Open-now filter.

The filter is pure: the caller injects the current hour and day, so the same
inputs always give the same output and tests never touch the clock.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import RawTruckRecord
from core.services.hours import parse_hour


def is_open(record: RawTruckRecord, now_hour: int, now_day: int) -> bool:
    """Return True when `record` is open at `now_hour` on `now_day`.

    Both bounds are inclusive. Windows crossing midnight are not supported:
    a `10PM`-`2AM` window never matches.
    """

    start = parse_hour(record.starttime)
    end = parse_hour(record.endtime)
    return start <= now_hour <= end and record.dayorder == now_day


def filter_open(
    records: Iterable[RawTruckRecord],
    now_hour: int,
    now_day: int,
) -> list[RawTruckRecord]:
    """Keep the records open right now, preserving their input order."""

    return [record for record in records if is_open(record, now_hour, now_day)]
