from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from ..core.constants import ISO_DATE_FORMAT


class Clock(Protocol):
    """Source of "now" for code that must not read the system clock directly."""

    def now(self) -> datetime:
        raise NotImplementedError

    def today(self) -> date:
        raise NotImplementedError


class SystemClock:
    """Current local time."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return self.now().date()


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to one instant (tests, replaying exports)."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_local_naive(value: datetime) -> datetime:
    """Drop tzinfo after converting to local time, so values compare with SystemClock."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)
