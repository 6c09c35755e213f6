from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance mark as stored by the backend."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Period(str, Enum):
    """Reporting window offered by the student dashboard."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"
