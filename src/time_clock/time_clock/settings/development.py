import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_clock"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Timezone used to decide "today" and the clock time of each punch.
TIMEZONE = os.getenv("TIMEZONE", "UTC")
# A finished session at or above this many hours is "On Time".
STANDARD_WORK_HOURS = float(os.getenv("STANDARD_WORK_HOURS", "8"))

EMPLOYEE_TABLE = os.getenv("EMPLOYEE_TABLE", "employees")
ATTENDANCE_TABLE = os.getenv("ATTENDANCE_TABLE", "attendance_log")
