"""Date and time helper utilities.

Three entry points turn user-typed text into values:

* :func:`parse_period` for compact durations such as ``"1w2d3h"``;
* :func:`parse_date` for calendar dates such as ``"Jan 1st, 2019"``;
* :func:`parse_datetime` for instants such as ``"4:30pm"``, ``"2d"`` or
  ``"23:30 2019-01-01"``, resolved in a timezone.

Each returns ``None`` when the text is not understood. Only a ``None`` text
is treated as a programming error.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Callable, Iterator, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .clock import ClockProvider, SystemClock
from .patterns import DATETIME_PATTERNS, TIME_PATTERNS, date_patterns, first_match

log = logging.getLogger(__name__)

# Year stored in dates parsed without one ("Jan 1" -> 0001-01-01).
OMITTED_YEAR = 1
_DATE_TEMPLATE = date(OMITTED_YEAR, 1, 1)

MAX_PERIOD_DIGITS = 6

PERIOD_UNITS: dict[str, timedelta] = {
    "w": timedelta(weeks=1),
    "d": timedelta(days=1),
    "h": timedelta(hours=1),
    "m": timedelta(minutes=1),
    "s": timedelta(seconds=1),
}

# Only strip suffixes glued to a number, "August" keeps its "st".
_ORDINAL_SUFFIX = re.compile(r"([0-9]+)(st|nd|rd|th)")


class ZoneNotFound(ValueError):
    """Raised when a timezone identifier is not in the tz database."""


def _require_text(text: Optional[str]) -> str:
    if text is None:
        raise TypeError("text must be a string, not None")
    return text


# Letters, non-spacing marks, decimal digits and connector punctuation
_WORD_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Mn", "Nd", "Pc"})


def _is_word_char(ch: str) -> bool:
    return unicodedata.category(ch) in _WORD_CATEGORIES


def _period_tokens(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(amount, unit)`` pairs from left to right.

    A token is a run of at most six digits followed by one word character.
    Runs that are too long, or that are followed by punctuation, give up
    their last digit as the unit, which no caller accepts.
    """
    i, n = 0, len(text)
    while i < n:
        if not text[i].isdecimal():
            i += 1
            continue
        end = i
        while end < n and end - i < MAX_PERIOD_DIGITS and text[end].isdecimal():
            end += 1
        if end < n and _is_word_char(text[end]):
            yield int(text[i:end]), text[end]
            i = end + 1
        elif end - i > 1:
            yield int(text[i:end - 1]), text[end - 1]
            i = end
        else:
            i += 1


def parse_period(text: str) -> timedelta | None:
    """Convert compact duration tokens into a :class:`timedelta`.

    ``"1w2d"`` gives nine days, ``"90m"`` an hour and a half and
    ``"1h 30m"`` the same. Units are ``w``, ``d``, ``h``, ``m`` and ``s``.
    Any other unit rejects the whole text. A total of zero is reported as
    ``None``, like text with no tokens at all.
    """

    text = _require_text(text)
    total = timedelta()
    try:
        for amount, unit in _period_tokens(text):
            length = PERIOD_UNITS.get(unit)
            if length is None:
                return None
            total += length * amount
    except OverflowError:
        log.debug("Period %r overflows", text)
        return None

    if not total:
        return None
    return total


def resolve_zone(zone: str | tzinfo | None) -> tzinfo:
    """Turn a zone argument into a ``tzinfo``; ``None`` means UTC."""
    if zone is None:
        return timezone.utc
    if isinstance(zone, tzinfo):
        return zone
    name = zone.strip()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ZoneNotFound(f"Unknown timezone: {name!r}") from exc


def in_zone_leniently(local: datetime, zone: tzinfo) -> datetime:
    """Attach *zone* to a naive wall time, always producing a real instant.

    A repeated wall time (clocks going back) maps to its earlier occurrence.
    A skipped wall time (clocks going forward) is pushed forward by the
    length of the gap, so 02:30 on a spring-forward night becomes 03:30.
    """
    aware = local.replace(tzinfo=zone, fold=0)
    try:
        return aware.astimezone(timezone.utc).astimezone(zone)
    except OverflowError:
        # The UTC side falls off the calendar (year 1 east of Greenwich).
        # No transitions exist that far back, so the wall time stands.
        return aware


def year_omitted(value: date) -> bool:
    """Whether *value* came from a template without a year."""
    return value.year == OMITTED_YEAR


def _match_date(text: str, allow_omitted_year: bool, template, finish=None):
    normalized = _ORDINAL_SUFFIX.sub(r"\1", text)
    return first_match(date_patterns(allow_omitted_year), normalized, template, finish)


def parse_date(text: str, allow_omitted_year: bool = False) -> date | None:
    """Parse a calendar date such as ``"Jan 1st, 2019"`` or ``"2019-01-01"``.

    With *allow_omitted_year*, ``"Jan 1"`` or ``"01/01"`` are accepted too and
    come back with :data:`OMITTED_YEAR`. Check with :func:`year_omitted`.
    """

    text = _require_text(text)
    return _match_date(text, allow_omitted_year, _DATE_TEMPLATE)


def parse_datetime(
    text: str,
    nudge_to_past: bool = False,
    zone: str | tzinfo | None = None,
    clock: ClockProvider | None = None,
) -> datetime | None:
    """Parse *text* into an aware ``datetime`` expressed in *zone*.

    Relative durations (``"2d"``) count back from now. Bare times
    (``"4:30 PM"``) land on today, or on yesterday when *nudge_to_past* is
    set and today's occurrence is still ahead. Date and time combinations
    and bare dates (at midnight) are tried afterwards. An omitted year means
    the current one.
    """

    text = _require_text(text)
    zone = resolve_zone(zone)
    clock = clock or SystemClock()

    now = clock.now().astimezone(zone).replace(tzinfo=None)
    midnight = datetime.combine(now.date(), time())

    def resolve(value: datetime) -> datetime:
        return in_zone_leniently(value, zone)

    def nudge_and_resolve(value: datetime) -> datetime:
        # Calendar-day shift on the wall time, DST is settled by resolve()
        if nudge_to_past and value > now:
            value -= timedelta(days=1)
        return resolve(value)

    def relative() -> datetime | None:
        duration = parse_period(text)
        if duration is None:
            return None
        try:
            start = resolve(now).astimezone(timezone.utc)
            return (start - duration).astimezone(zone)
        except OverflowError:
            log.debug("Period %r reaches outside the calendar", text)
            return None

    steps: tuple[tuple[str, Callable[[], datetime | None]], ...] = (
        ("relative", relative),
        ("time", lambda: first_match(TIME_PATTERNS, text, midnight, nudge_and_resolve)),
        ("date and time", lambda: first_match(DATETIME_PATTERNS, text, midnight, resolve)),
        ("date", lambda: _match_date(text, True, midnight, resolve)),
    )
    for name, step in steps:
        result = step()
        if result is not None:
            log.debug("Parsed %r as %s: %s", text, name, result)
            return result
    return None
