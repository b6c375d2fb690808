"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_SESSION_DAYS = 7

# Generated attendance
PRESENT_THRESHOLD = 0.80
LATE_THRESHOLD = 0.95
OPEN_DAY_THRESHOLD = 0.5
PRESENT_CHECKIN_HOUR = 8
PRESENT_CHECKIN_MAX_MINUTES = 15
PRESENT_CHECKOUT_MAX_EXTRA_MINUTES = 30
LATE_CHECKIN_HOUR = 9
LATE_MIN_MINUTES = 15
LATE_MAX_MINUTES = 60
WORK_HOURS = 8

# Generated leaves
LEAVE_WINDOW_MONTHS = 6
MAX_LEAVES_PER_MONTH = 2
LEAVE_MAX_DAY = 28
LEAVE_REJECT_THRESHOLD = 0.2

# Stored check-ins after this time are late
LATE_AFTER = time(9, 0)

UNSET_TIME = "–"
EMPLOYEE_ID_PATTERN = r"^K\d{5}$"
DEFAULT_PROFILE_IMAGE = "/placeholder.svg"

# Dashboard ratios
QUICK_STATS_WORKED_RATIO = 0.7
QUICK_STATS_SICK_RATIO = 0.05
QUICK_STATS_PERSONAL_RATIO = 0.1
QUICK_STATS_ABSENT_RATIO = 0.05
ADMIN_PRESENT_RATIO = 0.7
ADMIN_LATE_RATIO = 0.1
ADMIN_ABSENT_RATIO = 0.1
ADMIN_ON_LEAVE_RATIO = 0.1
