"""
Grid generation and the cell store.

A grid holds exactly one Solution. Every other cell is a Hint pointing
towards it, an Empty blank, or a Trap. Cells are stored flat in row-major
order (index = width * y + x).
"""

import enum
from dataclasses import dataclass

from .reveal_window import RevealWindow
from .settings import CONTENT_SLOTS, EMPTY_SLOTS, TRAP_SLOTS


class Direction(enum.Enum):
    LEFT = (-1, 0)
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def delta(self):
        return self.value

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


class TrapKind(enum.Enum):
    CONFUSION = "confusion"


@dataclass(frozen=True)
class Solution:
    pass


@dataclass(frozen=True)
class Hint:
    direction: Direction


@dataclass(frozen=True)
class Trap:
    kind: TrapKind = TrapKind.CONFUSION


@dataclass(frozen=True)
class Empty:
    pass


@dataclass
class Cell:
    content: object
    revealed: bool = False


def hint_direction(dx, dy):
    """Direction that moves a cell displaced by (dx, dy) back towards the solution.

    The axis with the bigger displacement wins, ties go horizontal.
    """
    if dx == 0 and dy == 0:
        raise ValueError("no hint direction for the solution cell itself")
    if abs(dx) >= abs(dy):
        return Direction.LEFT if dx > 0 else Direction.RIGHT
    return Direction.UP if dy > 0 else Direction.DOWN


def _draw_content(rng, dx, dy):
    slot = int(rng.integers(0, CONTENT_SLOTS))
    if slot < TRAP_SLOTS:
        return Trap(TrapKind.CONFUSION)
    if slot < TRAP_SLOTS + EMPTY_SLOTS:
        return Empty()
    return Hint(hint_direction(dx, dy))


class Grid:
    def __init__(self, width, height, contents, max_revealed, clock):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid needs a positive size, got {width}x{height}")
        contents = list(contents)
        if len(contents) != width * height:
            raise ValueError(f"expected {width * height} cells, got {len(contents)}")

        solutions = [i for i, c in enumerate(contents) if isinstance(c, Solution)]
        if len(solutions) != 1:
            raise ValueError(f"a grid holds exactly one solution, got {len(solutions)}")

        self.width = width
        self.height = height
        self.max_revealed = max_revealed
        self._cells = [Cell(content) for content in contents]
        self._solution = (solutions[0] % width, solutions[0] // width)
        self.window = RevealWindow(max_revealed, clock)

    @classmethod
    def generate(cls, width, height, rng, max_revealed, clock):
        """Builds a random grid.

        `rng` only needs an integers(low, high) method; the env passes its
        numpy Generator.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"grid needs a positive size, got {width}x{height}")
        sx = int(rng.integers(0, width))
        sy = int(rng.integers(0, height))

        contents = []
        for row in range(height):
            for col in range(width):
                if (col, row) == (sx, sy):
                    contents.append(Solution())
                else:
                    contents.append(_draw_content(rng, col - sx, row - sy))
        return cls(width, height, contents, max_revealed, clock)

    @property
    def solution(self):
        return self._solution

    def _index(self, x, y):
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return None
        return self.width * y + x

    def cell(self, x, y):
        index = self._index(x, y)
        if index is None:
            return None
        return self._cells[index]

    def reveal(self, x, y):
        """Shows cell (x, y) and returns its content, or None off the grid.

        Every successful reveal is queued in the window with a fresh timer,
        repeats included.
        """
        cell = self.cell(x, y)
        if cell is None:
            return None
        cell.revealed = True
        self.window.register(x, y)
        return cell.content

    def tick(self):
        """Runs one window eviction. Returns the (x, y) hidden, if any."""
        record = self.window.tick()
        if record is None:
            return None
        self._cells[self.width * record.y + record.x].revealed = False
        return record.x, record.y

    def __iter__(self):
        for index, cell in enumerate(self._cells):
            yield index % self.width, index // self.width, cell

    def __len__(self):
        return len(self._cells)

    def revealed_count(self):
        return sum(1 for cell in self._cells if cell.revealed)
