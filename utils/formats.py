"""Canonical text forms for parsed values.

Dates and local date-times written here are read back unchanged by
:func:`utils.parse_date` and :func:`utils.parse_datetime`, and durations by
:func:`utils.parse_period` as long as nothing hides below the two units shown.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def _require_aware(value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("an aware datetime is required")


def format_date(value: date) -> str:
    """``yyyy-MM-dd``, zero padded even for the omitted-year sentinel."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_local_datetime(value: datetime) -> str:
    """``yyyy-MM-dd HH:mm:ss`` using the wall time of *value*."""
    return f"{format_date(value)} {value.hour:02d}:{value.minute:02d}:{value.second:02d}"


def format_zoned_datetime(value: datetime) -> str:
    """Local wall time followed by the zone abbreviation (``CET``, ``UTC``)."""
    _require_aware(value)
    return f"{format_local_datetime(value)} {value.tzname()}"


def format_timestamp(value: datetime) -> str:
    """UTC instant such as ``2019-01-01T12:00:00Z``."""
    _require_aware(value)
    utc = value.astimezone(timezone.utc)
    return f"{format_date(utc)}T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}Z"


def format_duration(value: timedelta) -> str:
    """Show the two most significant units: ``3d 4h``, ``2h 5m``, ``1m 30s``, ``45s``."""
    if value < timedelta():
        return "-" + format_duration(-value)

    total_seconds = value // timedelta(seconds=1)
    days, rest = divmod(total_seconds, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)

    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    if minutes > 0:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"
