from __future__ import annotations

from typing import Optional

from ..model import AttendanceEvent
from .base import OverlayPolicy


class LastInListPolicy(OverlayPolicy):
    """Iteration order wins: every later event overwrites the row."""

    name = "last_in_list"

    def should_replace(self, *, current: Optional[AttendanceEvent], candidate: AttendanceEvent) -> bool:
        return True
