from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ..common.clock import Clock, SystemClock
from ..core.enums import AttendanceStatus
from ..students.model import Student
from ..subjects.model import Subject
from .model import AttendanceEvent, AttendanceRow, AttendanceStats
from .policies.base import OverlayPolicy
from .policies.last_in_list import LastInListPolicy


def compute_stats(rows: Sequence[AttendanceRow]) -> AttendanceStats:
    """Counts and integer present-rate of any row sequence.

    The rate rounds half up, so 1 of 8 present is 13 and 1 of 200 is 1.
    """

    total = len(rows)
    present = sum(1 for r in rows if r.status == AttendanceStatus.PRESENT)
    rate = (present * 200 + total) // (2 * total) if total else 0
    return AttendanceStats(total=total, present=present, absent=total - present, rate=rate)


def overlay_event(row: AttendanceRow, event: AttendanceEvent) -> AttendanceRow:
    """Apply one event to a row; an event without any date keeps the row's date."""

    return replace(
        row,
        status=event.status,
        date=event.marked_date or row.date,
        last_updated=event.last_updated,
    )


class AttendanceReconciler:
    """Builds dense attendance tables from a roster and sparse events.

    Every roster entry yields exactly one row, in roster order, starting as
    ABSENT on today's date. Events overlay matching rows according to the
    overlay policy; events that match no row are ignored.
    """

    def __init__(self, *, clock: Optional[Clock] = None, policy: Optional[OverlayPolicy] = None):
        self._clock = clock or SystemClock()
        self._policy = policy or LastInListPolicy()

    @property
    def policy(self) -> OverlayPolicy:
        return self._policy

    def reconcile(self, subjects: Sequence[Subject], events: Iterable[AttendanceEvent]) -> List[AttendanceRow]:
        today = self._clock.today()
        rows = [
            AttendanceRow(
                subject_id=s.id,
                subject_name=s.name,
                subject_code=s.code,
                status=AttendanceStatus.ABSENT,
                date=today,
            )
            for s in subjects
        ]
        return self._overlay(rows, [s.id for s in subjects], events, key=lambda e: e.subject_id)

    def reconcile_roster(
        self,
        students: Sequence[Student],
        events: Iterable[AttendanceEvent],
        *,
        subject: Subject,
    ) -> List[AttendanceRow]:
        """Teacher view: one row per student for a single subject."""

        today = self._clock.today()
        rows = [
            AttendanceRow(
                subject_id=subject.id,
                subject_name=subject.name,
                subject_code=subject.code,
                status=AttendanceStatus.ABSENT,
                date=today,
                student_id=st.id,
                student_name=st.name,
            )
            for st in students
        ]
        subject_events = (e for e in events if e.subject_id == subject.id)
        return self._overlay(rows, [st.id for st in students], subject_events, key=lambda e: e.student_id)

    def _overlay(
        self,
        rows: List[AttendanceRow],
        keys: List[int],
        events: Iterable[AttendanceEvent],
        *,
        key: Callable[[AttendanceEvent], Optional[int]],
    ) -> List[AttendanceRow]:
        # A key repeated in the roster maps to every position it occupies.
        positions: Dict[int, List[int]] = {}
        for index, k in enumerate(keys):
            positions.setdefault(k, []).append(index)

        winners: Dict[int, AttendanceEvent] = {}
        for event in events:
            k = key(event)
            if k is None or k not in positions:
                continue
            if not self._policy.should_replace(current=winners.get(k), candidate=event):
                continue
            winners[k] = event
            for index in positions[k]:
                rows[index] = overlay_event(rows[index], event)
        return rows
