from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.clock import to_local_naive
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain fact: a student was marked `status` for a subject.

    Everything the backend may leave out is an explicit Optional; the
    properties below are the only place those gaps get defaulted.
    """

    subject_id: int
    status: AttendanceStatus
    marked_at: Optional[datetime] = None
    attendance_date: Optional[date] = None
    updated_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    student_id: Optional[int] = None
    student_name: Optional[str] = None
    marked_by: Optional[int] = None
    event_id: Optional[int] = None

    @property
    def last_updated(self) -> Optional[datetime]:
        return self.updated_at or self.created_at

    @property
    def marked_date(self) -> Optional[date]:
        """Calendar date the mark applies to (marked_at, else the attendance date)."""
        if self.marked_at is not None:
            return to_local_naive(self.marked_at).date()
        return self.attendance_date

    @property
    def event_day(self) -> Optional[date]:
        """Best known day of the event, used for date and period filters."""
        day = self.marked_date
        if day is None and self.last_updated is not None:
            day = to_local_naive(self.last_updated).date()
        return day


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model: one resolved line of an attendance table."""

    subject_id: int
    subject_name: str
    subject_code: Optional[str]
    status: AttendanceStatus
    date: date
    last_updated: Optional[datetime] = None
    student_id: Optional[int] = None
    student_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "subjectId": self.subject_id,
            "subject": self.subject_name,
            "subjectCode": self.subject_code,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "status": self.status.value,
            "date": self.date.isoformat(),
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
        }


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    present: int
    absent: int
    rate: int

    def to_dict(self) -> dict:
        return {"total": self.total, "present": self.present, "absent": self.absent, "rate": self.rate}
