"""Example: use the service layer directly (no CLI).

Builds the container from the active settings module and prints one
student's overview.
"""

import importlib

from config import get_settings_module

from src.attendance_dashboard.attendance_dashboard.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        data_dir=settings.DATA_DIR,
        overlay_policy=settings.OVERLAY_POLICY,
        presence_ttl_hours=settings.PRESENCE_TTL_HOURS,
    )
    overview = container.dashboard_service.student_overview(student_id=2)
    for row in overview.rows:
        print(f"{row.subject_name:<20} {row.status.value:<8} {row.date.isoformat()}")
    print(overview.stats.to_dict())


if __name__ == "__main__":
    main()
