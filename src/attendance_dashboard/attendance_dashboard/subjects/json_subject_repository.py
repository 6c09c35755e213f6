from __future__ import annotations

from typing import Optional, Sequence

from ..common.payloads import parse_payloads
from ..datastore.json_store import JsonDataStore
from .model import Subject
from .repository import SubjectRepository
from .schema import SubjectPayload


class JsonSubjectRepository(SubjectRepository):
    RESOURCE = "subjects"

    def __init__(self, store: JsonDataStore):
        self._store = store

    def list_all(self) -> Sequence[Subject]:
        payloads = parse_payloads(SubjectPayload, self._store.load(self.RESOURCE), resource=self.RESOURCE)
        return [p.to_domain() for p in payloads]

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        for subject in self.list_all():
            if subject.id == int(subject_id):
                return subject
        return None
