"""Write a consistent sample data directory.

Produces subjects.json, students.json and attendance.json in the shape the
backend endpoints return, so the CLI can be tried without a backend.
"""

from __future__ import annotations

import argparse
import importlib
import random
import sys
from datetime import date, datetime, time, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.common.clock import parse_iso_date
from src.attendance_dashboard.attendance_dashboard.datastore.json_store import JsonDataStore, data_dir_config

SUBJECTS = [
    ("Math", "MATH101"),
    ("Science", "SCI201"),
    ("English", "ENG301"),
    ("History", "HIS401"),
    ("Computer Science", "CS501"),
    ("Physics", "PHY601"),
]

STUDENTS = [
    ("alice", "Alice Johnson"),
    ("bob", "Bob Brown"),
    ("carol", "Carol Davis"),
    ("david", "David Wilson"),
    ("emma", "Emma Martinez"),
]

TEACHER_ID = 1


def build_attendance(*, days: int, end_date: date, present_ratio: float, rng: random.Random) -> list[dict]:
    events = []
    event_id = 1
    for offset in reversed(range(days)):
        day = end_date - timedelta(days=offset)
        for student_id, _ in enumerate(STUDENTS, start=2):
            for subject_id, _ in enumerate(SUBJECTS, start=1):
                # Not every subject meets every day.
                if rng.random() < 0.3:
                    continue
                present = rng.random() < present_ratio
                stamp = datetime.combine(day, time(8, 0)) + timedelta(minutes=rng.randint(0, 240))
                events.append(
                    {
                        "id": event_id,
                        "studentId": student_id,
                        "subjectId": subject_id,
                        "status": "PRESENT" if present else "ABSENT",
                        "date": day.isoformat(),
                        "markedAt": stamp.isoformat() if present else None,
                        "markedBy": TEACHER_ID,
                        "updatedAt": stamp.isoformat(),
                    }
                )
                event_id += 1
    return events


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate sample subjects, students and attendance exports.")
    parser.add_argument("--out", type=Path, default=None, help="Target directory (default: DATA_DIR from settings)")
    parser.add_argument("--days", type=int, default=7, help="How many days to backfill including end date (default 7)")
    parser.add_argument("--end-date", type=parse_iso_date, default=None, help="End date in YYYY-MM-DD (default today)")
    parser.add_argument("--present-ratio", type=float, default=0.8, help="Share of PRESENT marks (default 0.8)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    out_dir = args.out or Path(settings.DATA_DIR)
    store = JsonDataStore(data_dir_config(out_dir))
    rng = random.Random(args.seed)

    subjects = [{"id": i, "name": name, "code": code} for i, (name, code) in enumerate(SUBJECTS, start=1)]
    students = [{"id": i, "name": name, "username": username} for i, (username, name) in enumerate(STUDENTS, start=2)]
    attendance = build_attendance(
        days=max(1, args.days),
        end_date=args.end_date or date.today(),
        present_ratio=min(max(args.present_ratio, 0.0), 1.0),
        rng=rng,
    )

    store.save("subjects", subjects)
    store.save("students", students)
    store.save("attendance", attendance)

    print(f"OK: {len(subjects)} subjects, {len(students)} students, {len(attendance)} events -> {store.root}")


if __name__ == "__main__":
    main()
