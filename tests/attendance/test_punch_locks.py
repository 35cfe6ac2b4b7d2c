from __future__ import annotations

import threading
import time
from datetime import datetime

from src.time_clock.time_clock.attendance.locks import PunchLockRegistry
from src.time_clock.time_clock.attendance.service import PunchService
from src.time_clock.time_clock.core.exceptions import DuplicatePunchError


def test_registry_drops_entries_after_release():
    locks = PunchLockRegistry()
    with locks.hold("Jane Smith", "2026-02-02"):
        assert len(locks) == 1
    assert len(locks) == 0


def test_same_key_is_mutually_exclusive():
    locks = PunchLockRegistry()
    inside = []
    overlap = []

    def worker():
        with locks.hold("Jane Smith ", "2026-02-02"):
            if inside:
                overlap.append(True)
            inside.append(1)
            time.sleep(0.01)
            inside.pop()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert overlap == []
    assert len(locks) == 0


def test_different_keys_do_not_block_each_other():
    locks = PunchLockRegistry()
    with locks.hold("Jane Smith", "2026-02-02"):
        acquired = threading.Event()

        def other():
            with locks.hold("John Doe", "2026-02-02"):
                acquired.set()

        t = threading.Thread(target=other)
        t.start()
        assert acquired.wait(timeout=2)
        t.join()


class SlowLedger:
    """Ledger with a gap between read and write, wide enough to expose a race."""

    def __init__(self, inner):
        self._inner = inner

    def find_today_record(self, employee_name, work_date):
        rec = self._inner.find_today_record(employee_name, work_date)
        time.sleep(0.01)
        return rec

    def append_record(self, **kwargs):
        return self._inner.append_record(**kwargs)

    def update_record(self, record_id, **kwargs):
        return self._inner.update_record(record_id, **kwargs)


def test_concurrent_punch_ins_create_one_record(attendance_repo, directory):
    svc = PunchService(SlowLedger(attendance_repo), directory)
    now = datetime(2026, 2, 2, 9, 0)
    outcomes = []
    guard = threading.Lock()

    def worker():
        try:
            svc.punch("Jane Smith", "1990-07-22", "in", now=now)
            result = "ok"
        except DuplicatePunchError:
            result = "dup"
        with guard:
            outcomes.append(result)

    threads = [threading.Thread(target=worker) for _ in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["dup"] * 5 + ["ok"]
    assert len(attendance_repo.rows) == 1
