import os

DATA_DIR = os.getenv("DATA_DIR", "tests/data")

OVERLAY_POLICY = "last_in_list"

# 0 disables presence expiry
PRESENCE_TTL_HOURS = 0

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
