from __future__ import annotations

import threading
from collections import Counter
from datetime import datetime

from dtr_payroll.core.enums import ScanAction


def _scan_concurrently(service, person_id: int, n: int, now: datetime):
    barrier = threading.Barrier(n)
    results = []
    errors = []
    lock = threading.Lock()

    def worker():
        try:
            barrier.wait()
            r = service.record_scan(person_id, now=now)
            with lock:
                results.append(r)
        except Exception as exc:  # surfaced by the assertions below
            with lock:
                errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    return results, errors


def test_two_simultaneous_scans_give_one_in_and_one_out(people_repo, attendance_repo, attendance_service):
    p = people_repo.add("A")
    attendance_repo.race_window = 0.05
    same_instant = datetime(2026, 2, 2, 8, 0, 0, 123000)

    results, errors = _scan_concurrently(attendance_service, p.person_id, 2, same_instant)

    assert errors == []
    assert sorted(r.action.value for r in results) == ["IN", "OUT"]
    [ev] = attendance_repo.events()
    assert ev.out_time == same_instant


def test_many_concurrent_scans_never_leave_two_open_events(people_repo, attendance_repo, attendance_service):
    p = people_repo.add("A")
    attendance_repo.race_window = 0.005

    results, errors = _scan_concurrently(attendance_service, p.person_id, 8, datetime(2026, 2, 2, 9, 0, 0))

    assert errors == []
    counts = Counter(r.action for r in results)
    assert counts[ScanAction.IN] == 4
    assert counts[ScanAction.OUT] == 4
    assert all(ev.out_time is not None for ev in attendance_repo.events())


def test_scans_for_different_people_do_not_interfere(people_repo, attendance_repo, attendance_service):
    a = people_repo.add("A")
    b = people_repo.add("B")
    attendance_repo.race_window = 0.01
    now = datetime(2026, 2, 2, 8, 0, 0)

    threads = [
        threading.Thread(target=attendance_service.record_scan, args=(pid,), kwargs={"now": now})
        for pid in (a.person_id, b.person_id)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert attendance_service.is_clocked_in(a.person_id)
    assert attendance_service.is_clocked_in(b.person_id)
