from __future__ import annotations

from typing import Optional

from ...common.clock import to_local_naive
from ..model import AttendanceEvent
from .base import OverlayPolicy


class LatestMarkedPolicy(OverlayPolicy):
    """Most recent `marked_at` wins.

    When either side has no `marked_at` the comparison is undecidable and
    iteration order applies, as it does for equal timestamps.
    """

    name = "latest_marked"

    def should_replace(self, *, current: Optional[AttendanceEvent], candidate: AttendanceEvent) -> bool:
        if current is None or current.marked_at is None or candidate.marked_at is None:
            return True
        return to_local_naive(candidate.marked_at) >= to_local_naive(current.marked_at)
