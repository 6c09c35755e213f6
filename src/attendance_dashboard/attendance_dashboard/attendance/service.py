from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence, Union

from ..common.clock import Clock, SystemClock
from ..common.validators import require_choice, require_enum, require_positive_id
from ..core.constants import DEFAULT_PRESENCE_TTL_HOURS, DEFAULT_SORT_FIELD, STATUS_FILTER_ALL
from ..core.enums import AttendanceStatus, Period, SortDirection
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from ..subjects.repository import SubjectRepository
from .expiry import expire_stale_presence
from .model import AttendanceEvent, AttendanceRow, AttendanceStats
from .periods import filter_events_by_period
from .reconciler import AttendanceReconciler, compute_stats
from .repository import AttendanceEventRepository
from .table import SORT_FIELDS, filter_rows, sort_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceOverview:
    rows: List[AttendanceRow]
    stats: AttendanceStats

    def to_dict(self) -> dict:
        return {"rows": [r.to_dict() for r in self.rows], "stats": self.stats.to_dict()}


@dataclass(frozen=True)
class SubjectCount:
    subject_id: int
    subject_name: str
    present: int


@dataclass(frozen=True)
class DashboardSummary:
    day: date
    total_students: int
    total_subjects: int
    present_total: int
    absent_total: int
    rate: int
    per_subject: List[SubjectCount]

    def to_dict(self) -> dict:
        return {
            "date": self.day.isoformat(),
            "totalStudents": self.total_students,
            "totalSubjects": self.total_subjects,
            "presentTotal": self.present_total,
            "absentTotal": self.absent_total,
            "rate": self.rate,
            "perSubject": {c.subject_name: c.present for c in self.per_subject},
        }


class AttendanceDashboardService:
    """Use cases behind the student and teacher dashboards.

    Fetches both inputs completely through the repositories, then runs one
    reconciliation over them.
    """

    def __init__(
        self,
        subjects: SubjectRepository,
        students: StudentRepository,
        events: AttendanceEventRepository,
        *,
        reconciler: Optional[AttendanceReconciler] = None,
        clock: Optional[Clock] = None,
        presence_ttl_hours: Optional[int] = DEFAULT_PRESENCE_TTL_HOURS,
    ):
        self._subjects = subjects
        self._students = students
        self._events = events
        self._clock = clock or SystemClock()
        self._reconciler = reconciler or AttendanceReconciler(clock=self._clock)
        self._presence_ttl_hours = presence_ttl_hours

    def _effective(self, events: Sequence[AttendanceEvent]) -> List[AttendanceEvent]:
        return expire_stale_presence(events, now=self._clock.now(), ttl_hours=self._presence_ttl_hours)

    def student_overview(self, student_id: int, *, period: Union[str, Period] = Period.ALL) -> AttendanceOverview:
        student_id = require_positive_id(student_id, "student_id")
        period = require_enum(period, Period, "period")

        if self._students.get_by_id(student_id) is None:
            raise NotFoundError(f"Student {student_id} not found")

        subjects = list(self._subjects.list_all())
        events = self._effective(self._events.get_for_student(student_id))
        events = filter_events_by_period(events, period, self._clock.today())

        rows = self._reconciler.reconcile(subjects, events)
        logger.info("Overview for student %s (%s): %d subjects, %d events", student_id, period.value, len(rows), len(events))
        return AttendanceOverview(rows=rows, stats=compute_stats(rows))

    def subject_roster(self, subject_id: int, *, day: Optional[date] = None) -> AttendanceOverview:
        subject_id = require_positive_id(subject_id, "subject_id")
        day = day or self._clock.today()

        subject = self._subjects.get_by_id(subject_id)
        if subject is None:
            raise NotFoundError(f"Subject {subject_id} not found")

        students = list(self._students.list_all())
        events = self._effective(self._events.get_for_subject_and_date(subject_id, day))

        rows = self._reconciler.reconcile_roster(students, events, subject=subject)
        logger.info("Roster for subject %s on %s: %d students", subject_id, day.isoformat(), len(rows))
        return AttendanceOverview(rows=rows, stats=compute_stats(rows))

    def dashboard_summary(self, *, day: Optional[date] = None) -> DashboardSummary:
        day = day or self._clock.today()
        subjects = list(self._subjects.list_all())
        students = list(self._students.list_all())
        events = self._effective(self._events.get_for_date(day))

        present = [e for e in events if e.status == AttendanceStatus.PRESENT]
        present_students = {e.student_id for e in present if e.student_id is not None}
        per_subject = [
            SubjectCount(
                subject_id=s.id,
                subject_name=s.name,
                present=sum(1 for e in present if e.subject_id == s.id),
            )
            for s in subjects
        ]

        total_students = len(students)
        present_total = len(present_students)
        rate = (present_total * 200 + total_students) // (2 * total_students) if total_students else 0
        return DashboardSummary(
            day=day,
            total_students=total_students,
            total_subjects=len(subjects),
            present_total=present_total,
            absent_total=max(0, total_students - present_total),
            rate=min(rate, 100),
            per_subject=per_subject,
        )

    def table_view(
        self,
        rows: Sequence[AttendanceRow],
        *,
        status_filter: str = STATUS_FILTER_ALL,
        search_term: str = "",
        sort_field: str = DEFAULT_SORT_FIELD,
        direction: Union[str, SortDirection] = SortDirection.ASC,
    ) -> AttendanceOverview:
        """Filtered and sorted rows; stats always describe the full, unfiltered set."""

        status_text = str(getattr(status_filter, "value", status_filter))
        if status_text.lower() == STATUS_FILTER_ALL:
            status_filter = STATUS_FILTER_ALL
        else:
            status_filter = require_enum(status_text.upper(), AttendanceStatus, "status_filter")
        sort_field = require_choice(sort_field, SORT_FIELDS.keys(), "sort_field")
        direction = require_enum(str(getattr(direction, "value", direction)).lower(), SortDirection, "direction")

        visible = sort_rows(filter_rows(rows, status_filter, search_term), sort_field, direction)
        return AttendanceOverview(rows=visible, stats=compute_stats(rows))
