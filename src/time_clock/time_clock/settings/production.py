import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "time_clock"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_clock"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TIMEZONE = os.getenv("TIMEZONE", "UTC")
STANDARD_WORK_HOURS = float(os.getenv("STANDARD_WORK_HOURS", "8"))

EMPLOYEE_TABLE = os.getenv("EMPLOYEE_TABLE", "employees")
ATTENDANCE_TABLE = os.getenv("ATTENDANCE_TABLE", "attendance_log")
