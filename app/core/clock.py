import time


class Clock:
    """Integer-second wall clock, the service's stand-in for block time."""

    def now(self) -> int:
        return int(time.time())


class ManualClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000):
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> int:
        self._now += seconds
        return self._now


_clock = Clock()


def get_clock() -> Clock:
    return _clock
