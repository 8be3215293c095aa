"""Utility helpers used across the bot."""

from .clock import ClockProvider, FixedClock, SystemClock
from .datetime_utils import (
    OMITTED_YEAR,
    ZoneNotFound,
    in_zone_leniently,
    parse_date,
    parse_datetime,
    parse_period,
    resolve_zone,
    year_omitted,
)

__all__ = [
    "ClockProvider",
    "FixedClock",
    "OMITTED_YEAR",
    "SystemClock",
    "ZoneNotFound",
    "in_zone_leniently",
    "parse_date",
    "parse_datetime",
    "parse_period",
    "resolve_zone",
    "year_omitted",
]
