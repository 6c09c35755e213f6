from src.attendance_dashboard.attendance_dashboard.main import main

if __name__ == "__main__":
    raise SystemExit(main())
