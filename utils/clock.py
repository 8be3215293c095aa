"""Clock sources used to anchor relative and time-only parsing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol


class ClockProvider(Protocol):
    def now(self) -> datetime:
        """Return the current instant as an aware ``datetime``."""


class SystemClock:
    """Reads the host clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Always returns the same instant. Handy in tests and replays."""

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise ValueError("FixedClock needs an aware datetime")

    def now(self) -> datetime:
        return self.instant
