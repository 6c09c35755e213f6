import os

DATA_DIR = os.getenv("DATA_DIR", "/var/lib/attendance-dashboard")

OVERLAY_POLICY = os.getenv("OVERLAY_POLICY", "last_in_list")

PRESENCE_TTL_HOURS = int(os.getenv("PRESENCE_TTL_HOURS", "12"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
