"""Ordered format templates for dates and times.

Templates use a small, locale-free token language (``yyyy``, ``MMMM``,
``MMM``, ``MM``, ``d``, ``H``/``HH``, ``h``/``hh``, ``mm``, ``ss``, ``tt``);
every other character is a literal. A template must consume the whole input.
Fields a template does not mention are copied from a *template value*, which
is how callers detect what the user actually typed.

The tables below are evaluated in declared order and the first template that
produces a value wins, so stricter, year-bearing layouts come before the
looser ones that could match the same text by accident.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Iterable, Optional, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T", date, datetime)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

_MONTH_LOOKUP = {name.lower(): idx for idx, name in enumerate(MONTH_NAMES, start=1)}
_MONTH_LOOKUP.update({abbr.lower(): idx for idx, abbr in enumerate(MONTH_ABBREVIATIONS, start=1)})

# (letter, repeat count) -> regex fragment
_TOKENS: dict[tuple[str, int], str] = {
    ("y", 4): r"(?P<year>[0-9]{4})",
    ("M", 4): "(?P<month_name>" + "|".join(MONTH_NAMES) + ")",
    ("M", 3): "(?P<month_name>" + "|".join(MONTH_ABBREVIATIONS) + ")",
    ("M", 2): r"(?P<month>[0-9]{2})",
    ("d", 1): r"(?P<day>[0-9]{1,2})",
    ("d", 2): r"(?P<day>[0-9]{2})",
    ("H", 1): r"(?P<hour>[0-9]{1,2})",
    ("H", 2): r"(?P<hour>[0-9]{2})",
    ("h", 1): r"(?P<hour12>[0-9]{1,2})",
    ("h", 2): r"(?P<hour12>[0-9]{2})",
    ("m", 2): r"(?P<minute>[0-9]{2})",
    ("s", 2): r"(?P<second>[0-9]{2})",
    ("t", 2): r"(?P<meridiem>AM|PM)",
}
_TOKEN_LETTERS = frozenset(letter for letter, _ in _TOKENS)


class PatternError(ValueError):
    """Raised when a template string uses an unsupported token."""


def _compile_template(text: str) -> re.Pattern[str]:
    parts: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch not in _TOKEN_LETTERS:
            parts.append(re.escape(ch))
            i += 1
            continue
        run = 1
        while i + run < len(text) and text[i + run] == ch:
            run += 1
        fragment = _TOKENS.get((ch, run))
        if fragment is None:
            raise PatternError(f"Unsupported token {ch * run!r} in template {text!r}")
        parts.append(fragment)
        i += run
    # ASCII-only case folding keeps look-alikes such as "ſ" out of month names
    return re.compile("".join(parts), re.IGNORECASE | re.ASCII)


@dataclass(frozen=True, slots=True)
class FormatPattern:
    """A literal template and its compiled matcher."""

    text: str
    regex: re.Pattern[str]

    @classmethod
    def compile(cls, text: str) -> "FormatPattern":
        return cls(text=text, regex=_compile_template(text))

    def parse(self, value: str, template: T) -> Optional[T]:
        """Match *value* and fill the missing fields from *template*.

        Returns ``None`` when the text does not fit the layout. Raises
        :class:`ValueError` when it fits but names an impossible value
        (``"Feb 30"``, ``"13 PM"``, ``"25:00"``).
        """
        match = self.regex.fullmatch(value)
        if match is None:
            return None
        fields = {k: v for k, v in match.groupdict().items() if v is not None}

        changes: dict[str, int] = {}
        if "year" in fields:
            changes["year"] = int(fields["year"])
        if "month_name" in fields:
            changes["month"] = _MONTH_LOOKUP[fields["month_name"].lower()]
        elif "month" in fields:
            changes["month"] = int(fields["month"])
        if "day" in fields:
            changes["day"] = int(fields["day"])
        if "hour" in fields:
            changes["hour"] = int(fields["hour"])
        elif "hour12" in fields:
            hour = int(fields["hour12"])
            if not 1 <= hour <= 12:
                raise ValueError(f"hour {hour} is out of range for a 12-hour clock")
            hour %= 12
            if fields.get("meridiem", "").upper() == "PM":
                hour += 12
            changes["hour"] = hour
        if "minute" in fields:
            changes["minute"] = int(fields["minute"])
        if "second" in fields:
            changes["second"] = int(fields["second"])

        # Apply the date fields together so an intermediate state such as
        # "Feb 31" never has to exist on its own.
        return template.replace(**changes)


def first_match(
    patterns: Iterable[FormatPattern],
    text: str,
    template: T,
    finish: Callable[[T], Optional[datetime]] | None = None,
):
    """Return the value of the first pattern that parses *text*.

    *finish* post-processes a parsed value (zone resolution, nudging); a
    :class:`ValueError` or :class:`OverflowError` from parsing or finishing
    counts as that template failing and the walk carries on.
    """
    for pattern in patterns:
        try:
            value = pattern.parse(text, template)
            if value is not None and finish is not None:
                value = finish(value)
        except (ValueError, OverflowError) as exc:
            log.debug("Template %r rejected %r: %s", pattern.text, text, exc)
            continue
        if value is not None:
            log.debug("Template %r matched %r", pattern.text, text)
            return value
    return None


def _build(texts: Iterable[str]) -> tuple[FormatPattern, ...]:
    return tuple(FormatPattern.compile(t) for t in texts)


DATE_TEMPLATES = (
    "MMM d yyyy",    # Jan 1 2019
    "MMM d, yyyy",   # Jan 1, 2019
    "MMMM d yyyy",   # January 1 2019
    "MMMM d, yyyy",  # January 1, 2019
    "yyyy-MM-dd",    # 2019-01-01
    "yyyy MM dd",    # 2019 01 01
    "yyyy/MM/dd",    # 2019/01/01
)

YEARLESS_DATE_TEMPLATES = (
    "MMM d",         # Jan 1
    "MMMM d",        # January 1
    "MM-dd",         # 01-01
    "MM dd",         # 01 01
    "MM/dd",         # 01/01
)

TIME_TEMPLATES = (
    "H:mm",          # 4:30
    "HH:mm",         # 23:30
    "H:mm:ss",       # 4:30:29
    "HH:mm:ss",      # 23:30:29
    "h tt",          # 2 PM
    "htt",           # 2PM
    "h:mm tt",       # 4:30 PM
    "h:mmtt",        # 4:30PM
    "h:mm:ss tt",    # 4:30:29 PM
    "h:mm:sstt",     # 4:30:29PM
    "hh:mm tt",      # 11:30 PM
    "hh:mmtt",       # 11:30PM
    "hh:mm:ss tt",   # 11:30:29 PM
    "hh:mm:sstt",    # 11:30:29PM
)

ARRANGEMENTS = (
    "{time}, {date}",
    "{date}, {time}",
    "{time} {date}",
    "{date} {time}",
)


def _combined_templates() -> list[str]:
    combined = []
    for time_text in TIME_TEMPLATES:
        for date_text in DATE_TEMPLATES + YEARLESS_DATE_TEMPLATES:
            for arrangement in ARRANGEMENTS:
                combined.append(arrangement.format(time=time_text, date=date_text))
    return combined


DATE_PATTERNS = _build(DATE_TEMPLATES)
YEARLESS_DATE_PATTERNS = _build(YEARLESS_DATE_TEMPLATES)
TIME_PATTERNS = _build(TIME_TEMPLATES)
DATETIME_PATTERNS = _build(_combined_templates())


def date_patterns(allow_omitted_year: bool = False) -> tuple[FormatPattern, ...]:
    """Date-only patterns, year-bearing first."""
    if allow_omitted_year:
        return DATE_PATTERNS + YEARLESS_DATE_PATTERNS
    return DATE_PATTERNS
