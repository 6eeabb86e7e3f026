from collections import deque
from dataclasses import dataclass

from .settings import REVEAL_DURATION
from .timer import Timer


@dataclass(frozen=True)
class RevealRecord:
    x: int
    y: int
    timer: Timer


class RevealWindow:
    """
    FIFO of timed reveals, oldest first.

    Keeps at most `capacity` cells on show. Each tick() evicts at most one
    record: the head goes once the queue is over capacity or once its own
    timer has run out. The owner is responsible for hiding the evicted
    cell again.
    """

    def __init__(self, capacity, clock, duration=REVEAL_DURATION):
        if capacity < 1:
            raise ValueError(f"reveal capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.clock = clock
        self.duration = duration
        self._records = deque()

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def register(self, x, y):
        record = RevealRecord(x, y, Timer.begin(self.clock, self.duration))
        self._records.append(record)
        return record

    def tick(self):
        """Pops and returns the head record if it is due, else None."""
        if not self._records:
            return None
        if len(self._records) > self.capacity or self._records[0].timer.finished:
            return self._records.popleft()
        return None
