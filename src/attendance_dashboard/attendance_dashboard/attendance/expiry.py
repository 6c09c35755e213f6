"""Presence expiry.

A PRESENT mark only holds for a limited time after it was made; once it is
older than the TTL the student reads as ABSENT again and the mark time is
cleared, the same reset the backend applies on its schedule.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from ..common.clock import to_local_naive
from ..core.enums import AttendanceStatus
from .model import AttendanceEvent


def is_presence_expired(event: AttendanceEvent, *, now: datetime, ttl_hours: Optional[int]) -> bool:
    if not ttl_hours or event.status != AttendanceStatus.PRESENT or event.marked_at is None:
        return False
    return to_local_naive(now) - to_local_naive(event.marked_at) >= timedelta(hours=int(ttl_hours))


def expire_stale_presence(
    events: Iterable[AttendanceEvent],
    *,
    now: datetime,
    ttl_hours: Optional[int],
) -> List[AttendanceEvent]:
    out = []
    for event in events:
        if is_presence_expired(event, now=now, ttl_hours=ttl_hours):
            event = replace(
                event,
                status=AttendanceStatus.ABSENT,
                marked_at=None,
                attendance_date=event.attendance_date or event.marked_date,
            )
        out.append(event)
    return out
