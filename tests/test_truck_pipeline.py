"""Tests for the open-trucks pipeline."""

import logging

from core.domain.models import DisplayRow, RawTruckRecord
from core.services.truck_pipeline import OpenTrucksReport, build_report


def test_open_trucks_sorted_alphabetically(make_record):
    records = [
        make_record(applicant="Bob's BBQ", location="Main St"),
        make_record(applicant="Amy's Tacos", location="Pine St"),
    ]

    report = build_report(records, now_hour=12, now_day=3)

    assert report.rows == [
        DisplayRow(applicant="Amy's Tacos", location="Pine St"),
        DisplayRow(applicant="Bob's BBQ", location="Main St"),
    ]
    assert report.name_width == len("Amy's Tacos")
    assert len(report) == 2


def test_closed_trucks_do_not_count_towards_width(make_record):
    records = [
        make_record(applicant="A Very Long Closed Truck Name", dayorder=0),
        make_record(applicant="Short", dayorder=3),
    ]

    report = build_report(records, now_hour=12, now_day=3)

    assert [r.applicant for r in report.rows] == ["Short"]
    assert report.name_width == 5


def test_nothing_open(make_record):
    report = build_report([make_record()], now_hour=3, now_day=3)
    assert report == OpenTrucksReport()
    assert report.name_width == 0


def test_open_trucks_logged_with_day_name(caplog):
    records = [
        RawTruckRecord(
            applicant="Taco Bus",
            location="1 Market St",
            starttime="9AM",
            endtime="5PM",
            dayorder="3",
            dayofweekstr="Wednesday",
        ),
    ]

    with caplog.at_level(logging.DEBUG, logger="core.services.truck_pipeline"):
        build_report(records, now_hour=12, now_day=3)

    assert "open: Taco Bus (Wednesday 9AM-5PM)" in caplog.text


def test_open_trucks_logged_without_day_name(caplog, make_record):
    with caplog.at_level(logging.DEBUG, logger="core.services.truck_pipeline"):
        build_report([make_record(applicant="Curry Up Now")], now_hour=12, now_day=3)

    assert "open: Curry Up Now (day 3 9AM-5PM)" in caplog.text
