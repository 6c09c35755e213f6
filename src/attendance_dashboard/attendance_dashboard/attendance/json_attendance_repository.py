from __future__ import annotations

import logging
from datetime import date
from typing import List, Sequence

from ..common.payloads import parse_payloads
from ..datastore.json_store import JsonDataStore
from .model import AttendanceEvent
from .repository import AttendanceEventRepository
from .schema import AttendanceEventPayload

logger = logging.getLogger(__name__)


class JsonAttendanceRepository(AttendanceEventRepository):
    """Attendance events from `attendance.json`, kept in file order."""

    RESOURCE = "attendance"

    def __init__(self, store: JsonDataStore):
        self._store = store

    def _all(self) -> List[AttendanceEvent]:
        payloads = parse_payloads(AttendanceEventPayload, self._store.load(self.RESOURCE), resource=self.RESOURCE)
        return [p.to_domain() for p in payloads]

    def get_for_student(self, student_id: int) -> Sequence[AttendanceEvent]:
        events = [e for e in self._all() if e.student_id == int(student_id)]
        logger.debug("Student %s has %d attendance events", student_id, len(events))
        return events

    def get_for_date(self, day: date) -> Sequence[AttendanceEvent]:
        return [e for e in self._all() if e.event_day == day]

    def get_for_subject_and_date(self, subject_id: int, day: date) -> Sequence[AttendanceEvent]:
        return [e for e in self.get_for_date(day) if e.subject_id == int(subject_id)]
