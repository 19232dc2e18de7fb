import threading
from contextlib import contextmanager


class KeyedLocks:
    """One lock per key so writes to the same record run one at a time.

    Entries are reference counted and dropped once no writer holds or waits
    on them, so the map only ever holds keys with in-flight writes.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[str, list] = {}  # key -> [lock, users]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def _acquire_entry(self, key: str) -> threading.Lock:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [threading.Lock(), 0]
            entry[1] += 1
            return entry[0]

    def _release_entry(self, key: str) -> None:
        with self._guard:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    @contextmanager
    def hold(self, *keys: str):
        # Sorted acquisition keeps two multi-key writers from deadlocking
        ordered = sorted(set(keys))
        locks = [self._acquire_entry(k) for k in ordered]
        acquired = []
        try:
            for lock in locks:
                lock.acquire()
                acquired.append(lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()
            for key in ordered:
                self._release_entry(key)


registry_locks = KeyedLocks()
session_locks = KeyedLocks()
