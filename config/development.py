import os

# Directory holding subjects.json, students.json and attendance.json
DATA_DIR = os.getenv("DATA_DIR", "data")

# last_in_list (backend order wins) or latest_marked (newest markedAt wins)
OVERLAY_POLICY = os.getenv("OVERLAY_POLICY", "last_in_list")

# PRESENT marks older than this read as ABSENT; 0 disables expiry
PRESENCE_TTL_HOURS = int(os.getenv("PRESENCE_TTL_HOURS", "12"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
