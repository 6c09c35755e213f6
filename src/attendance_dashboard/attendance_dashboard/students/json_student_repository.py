from __future__ import annotations

from typing import Optional, Sequence

from ..common.payloads import parse_payloads
from ..datastore.json_store import JsonDataStore
from .model import Student
from .repository import StudentRepository
from .schema import StudentPayload


class JsonStudentRepository(StudentRepository):
    RESOURCE = "students"

    def __init__(self, store: JsonDataStore):
        self._store = store

    def list_all(self) -> Sequence[Student]:
        payloads = parse_payloads(StudentPayload, self._store.load(self.RESOURCE), resource=self.RESOURCE)
        return [p.to_domain() for p in payloads]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        for student in self.list_all():
            if student.id == int(student_id):
                return student
        return None
