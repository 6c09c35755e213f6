from __future__ import annotations

import locale
from datetime import date, datetime
from enum import Enum
from typing import List, Sequence, Tuple, Union

from ..core.constants import DEFAULT_SORT_FIELD, STATUS_FILTER_ALL
from ..core.enums import AttendanceStatus, SortDirection
from .model import AttendanceRow

# Column name (as the table header calls it) -> AttendanceRow attribute.
SORT_FIELDS = {
    "subject": "subject_name",
    "subjectCode": "subject_code",
    "student": "student_name",
    "studentName": "student_name",
    "date": "date",
    "status": "status",
    "lastUpdated": "last_updated",
}


def _field_text(row: AttendanceRow, field: str) -> str:
    attr = SORT_FIELDS.get(field)
    value = getattr(row, attr) if attr else None
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value).replace("\x00", "")


def filter_rows(
    rows: Sequence[AttendanceRow],
    status_filter: Union[str, AttendanceStatus] = STATUS_FILTER_ALL,
    search_term: str = "",
) -> List[AttendanceRow]:
    """Keep rows matching the status filter and the free-text search.

    The search is a case-insensitive substring match on subject name or
    student name; an empty term matches everything.
    """

    needle = (search_term or "").lower()
    out: List[AttendanceRow] = []
    for row in rows:
        if status_filter != STATUS_FILTER_ALL and row.status != status_filter:
            continue
        if needle and not (
            needle in (row.subject_name or "").lower() or needle in (row.student_name or "").lower()
        ):
            continue
        out.append(row)
    return out


def _collation_key(text: str) -> Tuple[str, str]:
    # case-folded text orders first, the exact text breaks ties
    return locale.strxfrm(text.casefold()), locale.strxfrm(text)


def sort_rows(
    rows: Sequence[AttendanceRow],
    field: str = DEFAULT_SORT_FIELD,
    direction: Union[str, SortDirection] = SortDirection.ASC,
) -> List[AttendanceRow]:
    """Stable, locale-aware sort on the stringified field value.

    Unknown fields read as empty strings for every row, which leaves the input
    order untouched.
    """

    descending = str(getattr(direction, "value", direction)).lower() == SortDirection.DESC.value
    return sorted(rows, key=lambda r: _collation_key(_field_text(r, field)), reverse=descending)


def toggle_direction(current_field: str, current_direction: SortDirection, clicked_field: str) -> Tuple[str, SortDirection]:
    """Header click: same column flips the direction, another column starts ascending."""

    if clicked_field == current_field:
        flipped = SortDirection.DESC if current_direction == SortDirection.ASC else SortDirection.ASC
        return current_field, flipped
    return clicked_field, SortDirection.ASC
