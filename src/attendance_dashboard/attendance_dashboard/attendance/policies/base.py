from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import AttendanceEvent


class OverlayPolicy(ABC):
    """Strategy Pattern: decide which of several events for one row wins."""

    name: str = ""

    @abstractmethod
    def should_replace(self, *, current: Optional[AttendanceEvent], candidate: AttendanceEvent) -> bool:
        """Return True when `candidate` must overwrite the row `current` produced.

        `current` is None while the row still holds its ABSENT default.
        """

        raise NotImplementedError
