"""Open-trucks pipeline.

Chains the pure stages (filter -> project -> sort -> width) so every entry
point (CLI, tests) builds the report the same way. Printing stays outside.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from core.domain.models import DisplayRow, RawTruckRecord
from core.services.formatter import max_name_width, project, sort_rows
from core.services.open_filter import filter_open

logger = logging.getLogger(__name__)


@dataclass
class OpenTrucksReport:
    """Sorted rows ready to print plus the width of the name column."""

    rows: list[DisplayRow] = field(default_factory=list)
    name_width: int = 0

    def __len__(self) -> int:
        return len(self.rows)


def build_report(
    records: Sequence[RawTruckRecord],
    *,
    now_hour: int,
    now_day: int,
) -> OpenTrucksReport:
    """Filter `records` down to the trucks open at `(now_hour, now_day)`."""

    open_records = filter_open(records, now_hour, now_day)
    logger.debug(
        "%d of %d records open at hour=%d day=%d",
        len(open_records),
        len(records),
        now_hour,
        now_day,
    )
    for record in open_records:
        logger.debug(
            "open: %s (%s %s-%s)",
            record.applicant,
            record.dayofweekstr or f"day {record.dayorder}",
            record.starttime,
            record.endtime,
        )

    rows = sort_rows(project(open_records))
    return OpenTrucksReport(rows=rows, name_width=max_name_width(rows))
