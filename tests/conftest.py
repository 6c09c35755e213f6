from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from src.attendance_dashboard.attendance_dashboard.common.clock import FixedClock
from src.attendance_dashboard.attendance_dashboard.students.model import Student
from src.attendance_dashboard.attendance_dashboard.subjects.model import Subject


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 9, 30, 0)


@pytest.fixture
def fixed_clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def subjects() -> list[Subject]:
    return [
        Subject(id=1, name="Math", code="MATH101"),
        Subject(id=2, name="Physics", code="PHY101"),
        Subject(id=3, name="Chemistry", code="CHEM101"),
    ]


@pytest.fixture
def students() -> list[Student]:
    return [
        Student(id=10, name="Alice Johnson", username="alice"),
        Student(id=11, name="Bob Smith", username="bob"),
        Student(id=12, name="Carol White", username="carol"),
    ]


@pytest.fixture
def write_export(tmp_path):
    """Write `<resource>.json` into a temporary data directory."""

    def _write(resource: str, items) -> Path:
        path = tmp_path / f"{resource}.json"
        path.write_text(json.dumps(items), encoding="utf-8")
        return path

    return _write
