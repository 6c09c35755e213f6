"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STATUS_FILTER_ALL = "all"
DEFAULT_SORT_FIELD = "subject"
DEFAULT_OVERLAY_POLICY = "last_in_list"
DEFAULT_PRESENCE_TTL_HOURS = 12
WEEK_PERIOD_DAYS = 7
ISO_DATE_FORMAT = "%Y-%m-%d"
