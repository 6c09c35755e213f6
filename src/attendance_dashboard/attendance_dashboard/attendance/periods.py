from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from ..core.constants import WEEK_PERIOD_DAYS
from ..core.enums import Period
from .model import AttendanceEvent


def period_bounds(period: Period, today: date) -> Tuple[Optional[date], Optional[date]]:
    """Inclusive (start, end) of a reporting period; (None, None) means unbounded."""

    if period == Period.TODAY:
        return today, today
    if period == Period.WEEK:
        return today - timedelta(days=WEEK_PERIOD_DAYS - 1), today
    if period == Period.MONTH:
        return today.replace(day=1), today
    return None, None


def filter_events_by_period(events: Iterable[AttendanceEvent], period: Period, today: date) -> List[AttendanceEvent]:
    start, end = period_bounds(period, today)
    if start is None or end is None:
        return list(events)

    out = []
    for event in events:
        day = event.event_day
        # Undated events cannot be placed in a bounded window.
        if day is not None and start <= day <= end:
            out.append(event)
    return out
