from __future__ import annotations

import csv
import io
from typing import Sequence

from .model import AttendanceRow

CSV_FIELDS = [
    "subject_id",
    "subject_name",
    "subject_code",
    "student_id",
    "student_name",
    "status",
    "date",
    "last_updated",
]


def export_rows_csv(rows: Sequence[AttendanceRow]) -> bytes:
    """Serialize rows to CSV bytes.

    Encoded as UTF-8 with BOM so spreadsheet tools pick the right charset.
    """

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
    writer.writeheader()
    for r in rows:
        writer.writerow(
            {
                "subject_id": r.subject_id,
                "subject_name": r.subject_name,
                "subject_code": r.subject_code or "",
                "student_id": "" if r.student_id is None else r.student_id,
                "student_name": r.student_name or "",
                "status": r.status.value,
                "date": r.date.strftime("%Y-%m-%d"),
                "last_updated": r.last_updated.strftime("%Y-%m-%d %H:%M:%S") if r.last_updated else "",
            }
        )
    return out.getvalue().encode("utf-8-sig")
