from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.json_attendance_repository import JsonAttendanceRepository
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.core.exceptions import InvalidInputError, ValidationError
from src.attendance_dashboard.attendance_dashboard.datastore.json_store import JsonDataStore, data_dir_config
from src.attendance_dashboard.attendance_dashboard.students.json_student_repository import JsonStudentRepository
from src.attendance_dashboard.attendance_dashboard.subjects.json_subject_repository import JsonSubjectRepository


@pytest.fixture
def store(tmp_path):
    return JsonDataStore(data_dir_config(tmp_path))


def test_subjects_are_read_in_file_order(store, write_export):
    write_export(
        "subjects",
        [
            {"id": 2, "name": "Physics", "code": "PHY101", "createdAt": "2024-01-01T00:00:00"},
            {"id": 1, "name": "Math"},
        ],
    )

    repo = JsonSubjectRepository(store)

    assert [(s.id, s.name, s.code) for s in repo.list_all()] == [(2, "Physics", "PHY101"), (1, "Math", None)]
    assert repo.get_by_id(1).name == "Math"
    assert repo.get_by_id(3) is None


def test_missing_export_reads_as_empty(store):
    assert list(JsonSubjectRepository(store).list_all()) == []


def test_students_fall_back_to_username_for_name(store, write_export):
    write_export("students", [{"id": 10, "username": "alice"}, {"id": 11, "name": "Bob Smith", "username": "bob"}])

    students = JsonStudentRepository(store).list_all()

    assert [s.name for s in students] == ["alice", "Bob Smith"]


def test_student_without_any_name_is_invalid(store, write_export):
    write_export("students", [{"id": 10}])

    with pytest.raises(InvalidInputError):
        JsonStudentRepository(store).list_all()


def test_flat_event_payload(store, write_export):
    write_export(
        "attendance",
        [
            {
                "id": 5,
                "studentId": "10",
                "subjectId": "1",
                "status": "present",
                "markedAt": "2024-01-10T08:15:00",
                "updatedAt": "2024-01-10T08:15:00",
                "markedBy": 3,
            }
        ],
    )

    [event] = JsonAttendanceRepository(store).get_for_student(10)

    assert event.subject_id == 1
    assert event.status == AttendanceStatus.PRESENT
    assert event.marked_at == datetime(2024, 1, 10, 8, 15)
    assert event.last_updated == datetime(2024, 1, 10, 8, 15)
    assert event.marked_by == 3
    assert event.event_id == 5


def test_entity_event_payload_with_nested_refs(store, write_export):
    write_export(
        "attendance",
        [
            {
                "id": 6,
                "student": {"id": 11, "username": "bob", "createdAt": "2024-01-01T00:00:00"},
                "subject": {"id": 2, "name": "Physics", "code": "PHY101"},
                "status": "ABSENT",
                "date": "2024-01-15",
                "markedAt": None,
                "markedBy": {"id": 3, "name": "John Smith"},
                "updatedAt": "2024-01-15T09:00:00",
            }
        ],
    )

    [event] = JsonAttendanceRepository(store).get_for_date(date(2024, 1, 15))

    assert event.subject_id == 2
    assert event.student_id == 11
    assert event.student_name == "bob"
    assert event.marked_by == 3
    assert event.marked_at is None
    assert event.marked_date == date(2024, 1, 15)


def test_get_for_date_matches_date_only_mark(store, write_export):
    write_export(
        "attendance",
        [
            {"studentId": 10, "subjectId": 1, "status": "PRESENT", "markedAt": "2024-01-10"},
            {"studentId": 10, "subjectId": 2, "status": "PRESENT", "markedAt": "2024-01-11T10:00:00"},
        ],
    )

    events = JsonAttendanceRepository(store).get_for_date(date(2024, 1, 10))

    assert [e.subject_id for e in events] == [1]


def test_event_without_subject_is_rejected_with_position(store, write_export):
    write_export(
        "attendance",
        [
            {"studentId": 10, "subjectId": 1, "status": "PRESENT"},
            {"studentId": 10, "status": "PRESENT"},
        ],
    )

    with pytest.raises(InvalidInputError) as exc:
        JsonAttendanceRepository(store).get_for_student(10)

    assert "attendance[1]" in str(exc.value)


def test_unknown_status_is_rejected(store, write_export):
    write_export("attendance", [{"subjectId": 1, "status": "LATE"}])

    with pytest.raises(ValidationError):
        JsonAttendanceRepository(store).get_for_student(10)


def test_export_must_be_an_array(store, tmp_path):
    (tmp_path / "subjects.json").write_text('{"id": 1}', encoding="utf-8")

    with pytest.raises(InvalidInputError):
        JsonSubjectRepository(store).list_all()


def test_broken_json_is_reported(store, tmp_path):
    (tmp_path / "subjects.json").write_text("[{", encoding="utf-8")

    with pytest.raises(InvalidInputError):
        JsonSubjectRepository(store).list_all()


def test_get_for_subject_and_date(store, write_export):
    write_export(
        "attendance",
        [
            {"studentId": 10, "subjectId": 1, "status": "PRESENT", "markedAt": "2024-01-10T08:00:00"},
            {"studentId": 11, "subjectId": 2, "status": "PRESENT", "markedAt": "2024-01-10T08:05:00"},
            {"studentId": 11, "subjectId": 1, "status": "ABSENT", "date": "2024-01-11"},
        ],
    )

    events = JsonAttendanceRepository(store).get_for_subject_and_date(1, date(2024, 1, 10))

    assert [(e.student_id, e.subject_id) for e in events] == [(10, 1)]


def test_only_calendar_dates_are_read_as_midnight(store, write_export):
    write_export(
        "attendance",
        [
            {"studentId": 10, "subjectId": 1, "status": "PRESENT", "markedAt": "2024-01-10"},
            {"studentId": 10, "subjectId": 2, "status": "PRESENT", "markedAt": "1704844800"},
        ],
    )

    first, second = JsonAttendanceRepository(store).get_for_student(10)

    assert first.marked_at == datetime(2024, 1, 10, 0, 0)
    assert second.marked_at is not None
    assert second.marked_at.year == 2024
