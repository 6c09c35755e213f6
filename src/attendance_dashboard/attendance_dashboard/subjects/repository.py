from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    """Read access to the backend's `GET /subjects` resource."""

    def list_all(self) -> Sequence[Subject]:
        raise NotImplementedError

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        raise NotImplementedError
