"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"
CHART_DATE_FORMAT = "%b %d"

DEFAULT_PAGE_LIMIT = 100
DEFAULT_API_TIMEOUT_SECONDS = 15
DEFAULT_FETCH_WORKERS = 3
MAX_FETCH_PAGES = 500

TREND_CHART_DAYS = 7
EMPLOYEE_CHART_DAYS = 14
LEAVE_CHART_TOP = 5

RECENT_ACTIVITY_PER_KIND = 5
RECENT_ACTIVITY_LIMIT = 8
