from __future__ import annotations

from datetime import date, datetime

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceEvent, AttendanceRow
from src.attendance_dashboard.attendance_dashboard.attendance.reconciler import AttendanceReconciler, compute_stats
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.subjects.model import Subject

PRESENT = AttendanceStatus.PRESENT
ABSENT = AttendanceStatus.ABSENT


def _row(status: AttendanceStatus, subject_id: int = 1) -> AttendanceRow:
    return AttendanceRow(
        subject_id=subject_id,
        subject_name=f"S{subject_id}",
        subject_code=None,
        status=status,
        date=date(2024, 1, 1),
    )


def test_math_physics_scenario(fixed_clock):
    subjects = [Subject(id=1, name="Math"), Subject(id=2, name="Physics")]
    events = [AttendanceEvent(subject_id=1, status=PRESENT, attendance_date=date(2024, 1, 10))]

    rows = AttendanceReconciler(clock=fixed_clock).reconcile(subjects, events)

    assert [(r.subject_id, r.status, r.date) for r in rows] == [
        (1, PRESENT, date(2024, 1, 10)),
        (2, ABSENT, fixed_clock.today()),
    ]
    stats = compute_stats(rows)
    assert (stats.total, stats.present, stats.absent, stats.rate) == (2, 1, 1, 50)


def test_empty_roster_yields_no_rows_and_zero_stats(fixed_clock):
    events = [AttendanceEvent(subject_id=1, status=PRESENT), AttendanceEvent(subject_id=2, status=ABSENT)]

    rows = AttendanceReconciler(clock=fixed_clock).reconcile([], events)

    assert rows == []
    stats = compute_stats(rows)
    assert (stats.total, stats.present, stats.absent, stats.rate) == (0, 0, 0, 0)


def test_row_count_matches_roster_regardless_of_events(fixed_clock, subjects):
    reconciler = AttendanceReconciler(clock=fixed_clock)
    many = [AttendanceEvent(subject_id=(i % 5) + 1, status=PRESENT) for i in range(40)]

    assert len(reconciler.reconcile(subjects, [])) == len(subjects)
    assert len(reconciler.reconcile(subjects, many)) == len(subjects)


def test_unmatched_subjects_default_to_absent_today_without_timestamp(fixed_clock, subjects):
    rows = AttendanceReconciler(clock=fixed_clock).reconcile(subjects, [AttendanceEvent(subject_id=99, status=PRESENT)])

    assert all(r.status == ABSENT for r in rows)
    assert all(r.date == date(2024, 1, 15) for r in rows)
    assert all(r.last_updated is None for r in rows)


def test_last_event_in_iteration_order_wins(fixed_clock, subjects):
    events = [
        AttendanceEvent(subject_id=2, status=PRESENT, marked_at=datetime(2024, 1, 12, 8, 0)),
        AttendanceEvent(subject_id=2, status=ABSENT, attendance_date=date(2024, 1, 11)),
    ]

    rows = AttendanceReconciler(clock=fixed_clock).reconcile(subjects, events)

    physics = rows[1]
    assert physics.status == ABSENT
    assert physics.date == date(2024, 1, 11)


def test_last_updated_falls_back_to_created_at(fixed_clock, subjects):
    created = datetime(2024, 1, 10, 8, 0)
    updated = datetime(2024, 1, 10, 9, 0)
    events = [
        AttendanceEvent(subject_id=1, status=PRESENT, created_at=created),
        AttendanceEvent(subject_id=3, status=PRESENT, created_at=created, updated_at=updated),
    ]

    rows = AttendanceReconciler(clock=fixed_clock).reconcile(subjects, events)

    assert rows[0].last_updated == created
    assert rows[1].last_updated is None
    assert rows[2].last_updated == updated


def test_event_without_any_date_keeps_row_date(fixed_clock, subjects):
    rows = AttendanceReconciler(clock=fixed_clock).reconcile(subjects, [AttendanceEvent(subject_id=1, status=PRESENT)])

    assert rows[0].status == PRESENT
    assert rows[0].date == fixed_clock.today()


def test_subject_order_is_preserved(fixed_clock):
    subjects = [Subject(id=7, name="Zoology"), Subject(id=3, name="Art"), Subject(id=5, name="Music")]
    events = [AttendanceEvent(subject_id=5, status=PRESENT), AttendanceEvent(subject_id=7, status=PRESENT)]

    rows = AttendanceReconciler(clock=fixed_clock).reconcile(subjects, events)

    assert [r.subject_id for r in rows] == [7, 3, 5]
    assert [r.subject_name for r in rows] == ["Zoology", "Art", "Music"]


def test_duplicate_subject_ids_keep_one_row_per_entry(fixed_clock):
    subjects = [Subject(id=1, name="Math"), Subject(id=1, name="Math")]

    rows = AttendanceReconciler(clock=fixed_clock).reconcile(subjects, [AttendanceEvent(subject_id=1, status=PRESENT)])

    assert len(rows) == 2
    assert all(r.status == PRESENT for r in rows)


def test_roster_reconciles_students_for_one_subject(fixed_clock, students, subjects):
    math = subjects[0]
    events = [
        AttendanceEvent(subject_id=1, student_id=11, status=PRESENT, marked_at=datetime(2024, 1, 15, 8, 5)),
        AttendanceEvent(subject_id=2, student_id=10, status=PRESENT),
        AttendanceEvent(subject_id=1, student_id=404, status=PRESENT),
    ]

    rows = AttendanceReconciler(clock=fixed_clock).reconcile_roster(students, events, subject=math)

    assert [r.student_id for r in rows] == [10, 11, 12]
    assert [r.status for r in rows] == [ABSENT, PRESENT, ABSENT]
    assert {r.subject_id for r in rows} == {1}
    assert rows[1].student_name == "Bob Smith"


def test_stats_rate_rounds_half_up():
    rows = [_row(PRESENT)] + [_row(ABSENT)] * 7

    stats = compute_stats(rows)

    assert stats.rate == 13  # 12.5 -> 13


def test_stats_counts_always_add_up():
    rows = [_row(PRESENT), _row(ABSENT), _row(PRESENT)]

    stats = compute_stats(rows)

    assert stats.present + stats.absent == stats.total == 3
    assert stats.rate == 67


def test_stats_all_present_is_100():
    assert compute_stats([_row(PRESENT), _row(PRESENT)]).rate == 100
