import threading
import time

from app.core.locks import KeyedLocks, registry_locks
from app.services.risk_registry import update_risk_data
from tests.constants import OWNER


def test_lock_entries_are_dropped_after_writes(db, clock) -> None:
    for i in range(500):
        update_risk_data(db, f"0x{i + 1:040x}", 10, 10, 10, OWNER, clock.now())
    assert len(registry_locks) == 0


def test_entry_lives_only_while_held() -> None:
    locks = KeyedLocks()
    with locks.hold("a", "b"):
        assert len(locks) == 2
        with locks.hold("c"):
            assert len(locks) == 3
    assert len(locks) == 0


def test_entry_is_released_when_body_raises() -> None:
    locks = KeyedLocks()
    try:
        with locks.hold("a"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert len(locks) == 0
    with locks.hold("a"):
        pass


def test_same_key_writers_run_one_at_a_time() -> None:
    locks = KeyedLocks()
    active = []
    overlaps = []

    def writer() -> None:
        with locks.hold("token"):
            active.append(1)
            if len(active) > 1:
                overlaps.append(True)
            time.sleep(0.01)
            active.pop()

    threads = [threading.Thread(target=writer) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert overlaps == []
    assert len(locks) == 0
