import os
import sys
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from utils import FixedClock, parse_date, parse_datetime, parse_period
from utils.formats import (
    format_date,
    format_duration,
    format_local_datetime,
    format_timestamp,
    format_zoned_datetime,
)

PARIS = ZoneInfo("Europe/Paris")
CLOCK = FixedClock(datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc))


def test_format_date_pads_sentinel_year():
    assert format_date(date(2019, 1, 1)) == "2019-01-01"
    assert format_date(date(1, 3, 4)) == "0001-03-04"


def test_format_local_and_zoned_datetime():
    dt = datetime(2019, 1, 1, 23, 30, 5, tzinfo=PARIS)
    assert format_local_datetime(dt) == "2019-01-01 23:30:05"
    assert format_zoned_datetime(dt) == "2019-01-01 23:30:05 CET"
    assert format_zoned_datetime(datetime(2019, 7, 1, 8, 0, tzinfo=PARIS)) == "2019-07-01 08:00:00 CEST"


def test_format_timestamp_is_utc():
    dt = datetime(2019, 1, 1, 13, 0, 0, 123456, tzinfo=PARIS)
    assert format_timestamp(dt) == "2019-01-01T12:00:00Z"


def test_zoned_formats_need_aware_values():
    with pytest.raises(ValueError):
        format_timestamp(datetime(2019, 1, 1))
    with pytest.raises(ValueError):
        format_zoned_datetime(datetime(2019, 1, 1))


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(seconds=45), "45s"),
        (timedelta(minutes=1, seconds=30), "1m 30s"),
        (timedelta(hours=2, minutes=5, seconds=9), "2h 5m"),
        (timedelta(hours=1), "1h 0m"),
        (timedelta(days=9), "9d 0h"),
        (timedelta(days=3, hours=4, minutes=59), "3d 4h"),
        (timedelta(), "0s"),
        (timedelta(minutes=-90), "-1h 30m"),
    ],
)
def test_format_duration_shows_two_most_significant_units(value, expected):
    assert format_duration(value) == expected


def test_date_export_reads_back():
    for text in ["Jan 1st, 2019", "2020/02/29", "December 31 1999"]:
        value = parse_date(text)
        assert parse_date(format_date(value)) == value


def test_local_datetime_export_reads_back():
    for text in ["23:30 2019-01-01", "4:30:29pm Jan 5 2020", "2d"]:
        value = parse_datetime(text, zone=PARIS, clock=CLOCK)
        again = parse_datetime(format_local_datetime(value), zone=PARIS, clock=CLOCK)
        assert again == value
        assert again.utcoffset() == value.utcoffset()


def test_duration_export_reads_back():
    for text in ["1w2d", "3h30m", "90s", "2d4h"]:
        value = parse_period(text)
        assert parse_period(format_duration(value)) == value
