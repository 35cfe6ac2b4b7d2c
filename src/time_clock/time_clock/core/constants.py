"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "UTC"
DEFAULT_STANDARD_WORK_HOURS = 8
DEFAULT_EMPLOYEE_TABLE = "employees"
DEFAULT_ATTENDANCE_TABLE = "attendance_log"

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

PUNCH_ACTION = "punch"
GET_EMPLOYEES_ACTION = "getEmployees"
