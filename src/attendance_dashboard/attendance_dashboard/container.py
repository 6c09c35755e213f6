from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .attendance.factory import OverlayPolicyFactory
from .attendance.json_attendance_repository import JsonAttendanceRepository
from .attendance.reconciler import AttendanceReconciler
from .attendance.service import AttendanceDashboardService
from .common.clock import Clock, SystemClock
from .core.constants import DEFAULT_OVERLAY_POLICY, DEFAULT_PRESENCE_TTL_HOURS
from .datastore.json_store import JsonDataStore, data_dir_config
from .students.json_student_repository import JsonStudentRepository
from .subjects.json_subject_repository import JsonSubjectRepository


@dataclass(frozen=True)
class Container:
    store: JsonDataStore

    subjects_repo: JsonSubjectRepository
    students_repo: JsonStudentRepository
    attendance_repo: JsonAttendanceRepository

    reconciler: AttendanceReconciler
    dashboard_service: AttendanceDashboardService


def build_container(
    *,
    data_dir: Union[str, Path],
    overlay_policy: str = DEFAULT_OVERLAY_POLICY,
    presence_ttl_hours: Optional[int] = DEFAULT_PRESENCE_TTL_HOURS,
    clock: Optional[Clock] = None,
) -> Container:
    clock = clock or SystemClock()
    store = JsonDataStore.get_instance(data_dir_config(data_dir))

    subjects_repo = JsonSubjectRepository(store)
    students_repo = JsonStudentRepository(store)
    attendance_repo = JsonAttendanceRepository(store)

    reconciler = AttendanceReconciler(clock=clock, policy=OverlayPolicyFactory().for_name(overlay_policy))
    dashboard_service = AttendanceDashboardService(
        subjects_repo,
        students_repo,
        attendance_repo,
        reconciler=reconciler,
        clock=clock,
        presence_ttl_hours=presence_ttl_hours,
    )

    return Container(
        store=store,
        subjects_repo=subjects_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        reconciler=reconciler,
        dashboard_service=dashboard_service,
    )
