from __future__ import annotations

import argparse
import importlib
import json
import locale
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.export import export_rows_csv
from .attendance.factory import OverlayPolicyFactory
from .attendance.service import AttendanceDashboardService, AttendanceOverview
from .attendance.table import SORT_FIELDS
from .common.clock import parse_iso_date
from .container import build_container
from .core.constants import DEFAULT_SORT_FIELD, STATUS_FILTER_ALL
from .core.enums import AttendanceStatus, Period, SortDirection
from .core.exceptions import DomainError

logger = logging.getLogger("attendance_dashboard")


def _add_source_args(p: argparse.ArgumentParser) -> None:
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--student-id", type=int, help="Per-subject rows for one student")
    source.add_argument("--subject-id", type=int, help="Per-student rows for one subject (teacher view)")
    p.add_argument("--period", choices=[x.value for x in Period], default=Period.ALL.value, help="Student view window")
    p.add_argument("--date", type=parse_iso_date, default=None, help="Teacher view day, YYYY-MM-DD (default today)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attendance-dashboard",
        description="Build attendance tables and statistics from exported backend data.",
    )
    parser.add_argument("--data-dir", default=None, help="Directory with subjects.json, students.json, attendance.json")
    parser.add_argument("--policy", choices=OverlayPolicyFactory().names(), default=None, help="Which event wins per row")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("overview", help="A student's attendance per subject")
    p.add_argument("--student-id", type=int, required=True)
    p.add_argument("--period", choices=[x.value for x in Period], default=Period.ALL.value)

    p = sub.add_parser("roster", help="One subject's attendance per student for a day")
    p.add_argument("--subject-id", type=int, required=True)
    p.add_argument("--date", type=parse_iso_date, default=None)

    p = sub.add_parser("summary", help="Teacher dashboard totals for a day")
    p.add_argument("--date", type=parse_iso_date, default=None)

    p = sub.add_parser("table", help="Filtered and sorted attendance table")
    _add_source_args(p)
    p.add_argument("--status", choices=[STATUS_FILTER_ALL] + [s.value for s in AttendanceStatus], default=STATUS_FILTER_ALL)
    p.add_argument("--search", default="")
    p.add_argument("--sort", choices=list(SORT_FIELDS), default=DEFAULT_SORT_FIELD)
    p.add_argument("--direction", choices=[d.value for d in SortDirection], default=SortDirection.ASC.value)

    p = sub.add_parser("export-csv", help="Attendance rows as CSV")
    _add_source_args(p)
    p.add_argument("--output", type=Path, default=None, help="Write to a file instead of stdout")

    return parser


def configure_logging(settings) -> None:
    level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def _use_system_collation() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.warning("System locale unavailable; sorting falls back to code point order")


def _overview_for(service: AttendanceDashboardService, args: argparse.Namespace) -> AttendanceOverview:
    if args.student_id is not None:
        return service.student_overview(args.student_id, period=args.period)
    return service.subject_roster(args.subject_id, day=args.date)


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def run(args: argparse.Namespace, settings) -> int:
    data_dir = args.data_dir or getattr(settings, "DATA_DIR", "data")
    container = build_container(
        data_dir=data_dir,
        overlay_policy=args.policy or getattr(settings, "OVERLAY_POLICY", None),
        presence_ttl_hours=getattr(settings, "PRESENCE_TTL_HOURS", None),
    )
    service = container.dashboard_service

    if getattr(settings, "DEBUG", False):
        logger.debug(
            "settings=%s data_dir=%s policy=%s",
            settings.__name__,
            container.store.root,
            container.reconciler.policy.name,
        )

    if args.command == "overview":
        _print_json(service.student_overview(args.student_id, period=args.period).to_dict())
    elif args.command == "roster":
        _print_json(service.subject_roster(args.subject_id, day=args.date).to_dict())
    elif args.command == "summary":
        _print_json(service.dashboard_summary(day=args.date).to_dict())
    elif args.command == "table":
        overview = _overview_for(service, args)
        view = service.table_view(
            overview.rows,
            status_filter=args.status,
            search_term=args.search,
            sort_field=args.sort,
            direction=args.direction,
        )
        _print_json(view.to_dict())
    elif args.command == "export-csv":
        data = export_rows_csv(_overview_for(service, args).rows)
        if args.output:
            args.output.write_bytes(data)
            logger.info("Wrote %d bytes to %s", len(data), args.output)
        else:
            sys.stdout.buffer.write(data)
            sys.stdout.flush()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = build_parser().parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    configure_logging(settings)
    _use_system_collation()

    try:
        return run(args, settings)
    except DomainError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
