"""Contract for food truck data sources."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import RawTruckRecord


@runtime_checkable
class TruckSource(Protocol):
    """Minimal contract for something that yields truck records.

    Design rules:
    - `fetch` is asynchronous because it typically does I/O (HTTP).
    - It is called exactly once per run; failures raise `FetchError` or
      `DatasetError` instead of returning partial data.
    """

    async def fetch(self) -> list[RawTruckRecord]:
        """Download and validate the full list of records."""

        ...
