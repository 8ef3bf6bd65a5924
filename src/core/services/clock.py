"""Local clock access.

The dataset numbers days 0 = Sunday ... 6 = Saturday, while
`datetime.weekday()` starts at 0 = Monday.
"""

from __future__ import annotations

from datetime import datetime
from typing import NamedTuple


class Moment(NamedTuple):
    hour: int
    day: int


def dataset_day(moment: datetime) -> int:
    """Day of week of `moment` in the dataset numbering (0 = Sunday)."""

    return (moment.weekday() + 1) % 7


def current_moment(now: datetime | None = None) -> Moment:
    """Current local `(hour, day)`; pass `now` to pin the clock."""

    now = now or datetime.now()
    return Moment(hour=now.hour, day=dataset_day(now))
