"""Tests for local clock helpers."""

from datetime import datetime

from core.services.clock import Moment, current_moment, dataset_day


def test_sunday_is_zero():
    # 2024-06-02 was a Sunday.
    assert dataset_day(datetime(2024, 6, 2)) == 0
    assert dataset_day(datetime(2024, 6, 3)) == 1
    assert dataset_day(datetime(2024, 6, 8)) == 6


def test_current_moment_pinned():
    assert current_moment(datetime(2024, 6, 5, 17, 59)) == Moment(hour=17, day=3)


def test_current_moment_uses_local_clock():
    moment = current_moment()
    assert 0 <= moment.hour <= 23
    assert 0 <= moment.day <= 6
