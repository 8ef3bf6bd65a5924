"""Data source: SF Mobile Food Schedule (data.sfgov.org).

One GET per run, no retry. The whole payload is validated up front so the
pipeline never sees a half-parsed record.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import DatasetError, FetchError
from core.domain.models import RawTruckRecord
from core.interfaces.source import TruckSource

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[RawTruckRecord])


class SfGovTruckSource(TruckSource):
    """Downloads the schedule from the configured dataset URL."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._settings.dataset_url

    async def fetch(self) -> list[RawTruckRecord]:
        logger.info("Fetching %s", self.url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as exc:
            logger.debug("Request to %s failed", self.url, exc_info=True)
            raise FetchError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            logger.info("Dataset request answered HTTP %d", response.status_code)
            raise FetchError(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise DatasetError("Dataset response is not valid JSON") from exc

        records = parse_records(payload)
        logger.info("Fetched %d records", len(records))
        return records


def parse_records(payload: Any) -> list[RawTruckRecord]:
    """Validate a decoded JSON payload into records."""

    if not isinstance(payload, list):
        raise DatasetError(f"Expected a JSON array, got {type(payload).__name__}")
    try:
        return _RECORDS.validate_python(payload)
    except ValidationError as exc:
        raise DatasetError(f"Dataset contains invalid records: {exc.error_count()} error(s)") from exc
