"""Tests for the open-now filter."""

import pytest

from core.domain.errors import ParseHourError
from core.services.open_filter import filter_open, is_open


@pytest.mark.parametrize(
    "now_hour, now_day, expected",
    [
        (9, 3, True),
        (12, 3, True),
        (17, 3, True),
        (8, 3, False),
        (18, 3, False),
        (12, 2, False),
        (12, 4, False),
    ],
)
def test_nine_to_five_window(make_record, now_hour, now_day, expected):
    record = make_record(starttime="9AM", endtime="5PM", dayorder=3)
    assert is_open(record, now_hour, now_day) is expected


def test_window_crossing_midnight_never_matches(make_record):
    record = make_record(starttime="10PM", endtime="2AM", dayorder=5)
    for hour in (22, 23, 0, 1, 2):
        assert not is_open(record, hour, 5)


def test_filter_preserves_input_order(make_record):
    records = [
        make_record(applicant="Zeta", dayorder=3),
        make_record(applicant="Closed", dayorder=1),
        make_record(applicant="Alpha", dayorder=3),
        make_record(applicant="Late", starttime="6PM", endtime="9PM", dayorder=3),
        make_record(applicant="Mid", dayorder=3),
    ]

    result = filter_open(records, 10, 3)

    assert [r.applicant for r in result] == ["Zeta", "Alpha", "Mid"]
    # Order-preserving subsequence of the input.
    positions = [records.index(r) for r in result]
    assert positions == sorted(positions)


def test_filter_empty():
    assert filter_open([], 10, 3) == []


def test_filter_accepts_iterables(make_record):
    records = (make_record() for _ in range(3))
    assert len(filter_open(records, 9, 3)) == 3


def test_malformed_hour_is_fatal(make_record):
    records = [make_record(), make_record(endtime="late")]
    with pytest.raises(ParseHourError):
        filter_open(records, 10, 3)
