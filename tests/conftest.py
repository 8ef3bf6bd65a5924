"""Shared test fixtures."""

import io

import pytest
from rich.console import Console

from core.domain.models import DisplayRow, RawTruckRecord


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep the developer's env vars and .env file out of the tests."""
    for name in (
        "FOODTRUCK_DATASET_URL",
        "FOODTRUCK_HTTP_TIMEOUT_SECONDS",
        "FOODTRUCK_USER_AGENT",
        "FOODTRUCK_PAGE_SIZE",
        "FOODTRUCK_COL_BUFFER",
        "FOODTRUCK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_record():
    def _make(
        applicant="Taco Bus",
        location="1 Market St",
        starttime="9AM",
        endtime="5PM",
        dayorder=3,
    ):
        return RawTruckRecord(
            applicant=applicant,
            location=location,
            starttime=starttime,
            endtime=endtime,
            dayorder=dayorder,
        )

    return _make


@pytest.fixture
def make_rows():
    def _make(n):
        return [DisplayRow(applicant=f"Truck {i:02d}", location=f"{i} Main St") for i in range(n)]

    return _make


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console(buffer):
    return Console(file=buffer, width=80)
