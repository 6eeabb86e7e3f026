import time
from dataclasses import dataclass


class MonotonicClock:
    """Wall-clock source backed by time.monotonic()."""

    def now(self):
        return time.monotonic()


class FrameClock:
    """A clock that only moves when told to.

    The env advances it by 1/FPS per step so rounds play out identically
    regardless of how fast the host calls step().
    """

    def __init__(self, start=0.0):
        self._now = float(start)

    def now(self):
        return self._now

    def advance(self, dt):
        if dt < 0:
            raise ValueError(f"cannot move a clock backwards (dt={dt})")
        self._now += dt


@dataclass(frozen=True)
class Timer:
    """Countdown from `start` for `duration` seconds on `clock`.

    Timers never change once built; restarting means building a new one
    with Timer.begin().
    """

    clock: object
    start: float
    duration: float

    @classmethod
    def begin(cls, clock, duration):
        return cls(clock=clock, start=clock.now(), duration=float(duration))

    @property
    def elapsed(self):
        return max(0.0, self.clock.now() - self.start)

    @property
    def time_left(self):
        return max(0.0, self.duration - self.elapsed)

    @property
    def finished(self):
        return self.time_left == 0.0
