from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceEvent


class AttendanceEventRepository(Protocol):
    """Read access to the backend's attendance feeds."""

    def get_for_student(self, student_id: int) -> Sequence[AttendanceEvent]:
        """`GET /students/{id}/attendance`: one student's events across subjects."""

        raise NotImplementedError

    def get_for_date(self, day: date) -> Sequence[AttendanceEvent]:
        """`GET /attendance/today`: every student's events for one day."""

        raise NotImplementedError

    def get_for_subject_and_date(self, subject_id: int, day: date) -> Sequence[AttendanceEvent]:
        """Events of one subject on one day, as the teacher attendance screen reads them."""

        raise NotImplementedError
