from datetime import date, datetime, time, timedelta

from src.time_clock.time_clock.common.datetime_utils import normalize_date_value, normalize_time_value
from src.time_clock.time_clock.common.responses import ApiResponse


def test_normalize_date_value():
    assert normalize_date_value(date(2026, 2, 2)) == "2026-02-02"
    assert normalize_date_value(datetime(2026, 2, 2, 23, 59)) == "2026-02-02"
    assert normalize_date_value(" 2026-02-02 ") == "2026-02-02"
    assert normalize_date_value(None) == ""


def test_normalize_time_value():
    assert normalize_time_value(time(7, 5)) == "07:05"
    assert normalize_time_value(timedelta(hours=17, minutes=15)) == "17:15"
    assert normalize_time_value(" 09:00 ") == "09:00"
    assert normalize_time_value(None) == ""
    assert normalize_time_value("08:30:00") == "08:30"
    assert normalize_time_value("8:05:00.000000") == "08:05"
    assert normalize_time_value("nine") == "nine"


def test_envelope_omits_employees_unless_listing():
    assert ApiResponse.fail("nope").to_dict() == {"success": False, "message": "nope"}
    assert ApiResponse.ok("done").to_dict() == {"success": True, "message": "done"}
    assert ApiResponse.ok("list", employees=("A", "B")).to_dict() == {
        "success": True,
        "message": "list",
        "employees": ["A", "B"],
    }
    assert ApiResponse.ok("empty", employees=[]).to_dict()["employees"] == []
