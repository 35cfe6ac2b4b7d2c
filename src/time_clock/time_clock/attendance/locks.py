from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Tuple

_Key = Tuple[str, str]


class PunchLockRegistry:
    """One mutex per (employee name, work date).

    Serializes the find-then-append-or-update sequence for a single employee's
    day inside this process. Entries are reference counted and dropped once no
    request holds or waits on them.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[_Key, threading.Lock] = {}
        self._refs: Dict[_Key, int] = {}

    @contextmanager
    def hold(self, employee_name: str, work_date: str) -> Iterator[None]:
        key = (employee_name.strip(), work_date)
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._refs[key] = self._refs.get(key, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._refs[key] -= 1
                if self._refs[key] == 0:
                    del self._refs[key]
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
