import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from lost_n_found.grid import Direction, Empty, Grid, Hint, Solution, Trap
from lost_n_found.timer import FrameClock


class ScriptedRng:
    """Hands out pre-scripted integers in order, like rng.integers(low, high)."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high):
        value = self.values.pop(0)
        assert low <= value < high, f"scripted {value} outside [{low}, {high})"
        self.calls.append((low, high))
        return value


LAYOUT_CHARS = {
    "S": Solution,
    "T": Trap,
    ".": Empty,
    "<": lambda: Hint(Direction.LEFT),
    "^": lambda: Hint(Direction.UP),
    ">": lambda: Hint(Direction.RIGHT),
    "v": lambda: Hint(Direction.DOWN),
}


def make_grid(rows, clock, max_revealed=6):
    """Builds a grid from rows of layout characters, e.g. ["S<", ".T"]."""
    contents = [LAYOUT_CHARS[ch]() for row in rows for ch in row]
    return Grid(len(rows[0]), len(rows), contents, max_revealed, clock)


@pytest.fixture
def clock():
    return FrameClock()
