"""
One level's play loop.

A Round is Playing until the solution is found (WIN) or the round clock
runs out (LOSE). It then shows its end-of-round message for a while and
finally hands the outcome back from tick(). Nothing on the grid changes
once an outcome is set.
"""

import enum
import logging
from dataclasses import dataclass

from . import difficulty
from .grid import Cell, Grid, Hint, Solution, Trap, TrapKind
from .settings import CONFUSION_DURATION, CONFUSION_FLICKER_PERIOD, MESSAGE_DURATION
from .timer import Timer
from .xform import grid_origin, surface_to_grid

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True)
class PointerSample:
    """Pointer state for one tick, in surface coordinates."""

    clicked: bool
    surface_x: int
    surface_y: int


def displayed_direction(true_direction, confusion_active, phase):
    """Direction to show for a hint; flipped while confused and in phase."""
    if confusion_active and phase:
        return true_direction.opposite
    return true_direction


def flicker_phase(timer, period=CONFUSION_FLICKER_PERIOD):
    """True for the first half of every period since `timer` started."""
    return (timer.elapsed % period) < period / 2


@dataclass(frozen=True)
class RoundSnapshot:
    level: int
    width: int
    height: int
    origin: tuple
    cells: tuple
    time_left: float
    outcome: object
    flicker: bool
    hovered: object

    def cell(self, x, y):
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return None
        return self.cells[self.width * y + x]

    def displayed_content(self, x, y):
        """Content as the player should see it, with the confusion flip applied."""
        cell = self.cell(x, y)
        if cell is None:
            return None
        if isinstance(cell.content, Hint):
            return Hint(displayed_direction(cell.content.direction, self.flicker, True))
        return cell.content


class Round:
    def __init__(self, level, grid, clock, origin=(0, 0), duration=None):
        self.level = level
        self.grid = grid
        self.clock = clock
        self.origin = origin
        if duration is None:
            duration = difficulty.round_duration(level)
        self.timer = Timer.begin(clock, duration)

        self.outcome = None
        self.message_timer = None
        self.frozen_time_left = None
        self.confusion = None
        self.hovered = None

    @classmethod
    def new(cls, level, rng, clock, surface_cols=0, surface_rows=0):
        """Sizes and generates a fresh grid for `level`, centred on the surface."""
        width, height = difficulty.grid_size(level)
        grid = Grid.generate(width, height, rng, difficulty.reveal_capacity(level), clock)
        origin = grid_origin(width, height, surface_cols, surface_rows)
        logger.debug("level %d: %dx%d grid, solution at %s", level, width, height, grid.solution)
        return cls(level, grid, clock, origin)

    @property
    def playing(self):
        return self.outcome is None

    @property
    def confused(self):
        return self.confusion is not None and not self.confusion.finished

    @property
    def time_left(self):
        if self.frozen_time_left is not None:
            return self.frozen_time_left
        return self.timer.time_left

    @property
    def flicker(self):
        # Losing always shows the truth
        if self.outcome is Outcome.LOSE or not self.confused:
            return False
        return flicker_phase(self.confusion)

    def cell_at(self, surface_x, surface_y):
        """Grid coordinates under a surface point, or None off the grid."""
        x, y = surface_to_grid(surface_x, surface_y, *self.origin)
        if self.grid.cell(x, y) is None:
            return None
        return x, y

    def tick(self, sample=None):
        """Advances the round by one frame.

        Returns the Outcome once the end-of-round message has run out,
        None until then.
        """
        if sample is not None:
            self.hovered = self.cell_at(sample.surface_x, sample.surface_y)

        if self.outcome is not None:
            if self.message_timer.finished:
                return self.outcome
            return None

        self.grid.tick()

        if self.timer.finished:
            self._finish(Outcome.LOSE, 0.0)
        elif sample is not None and sample.clicked and self.hovered is not None:
            self._click(*self.hovered)

        if self.confusion is not None and self.confusion.finished:
            self.confusion = None
        return None

    def _click(self, x, y):
        content = self.grid.reveal(x, y)
        if isinstance(content, Solution):
            self._finish(Outcome.WIN, self.timer.time_left)
        elif isinstance(content, Trap) and content.kind is TrapKind.CONFUSION:
            logger.debug("level %d: confusion trap at (%d, %d)", self.level, x, y)
            self.confusion = Timer.begin(self.clock, CONFUSION_DURATION)

    def _finish(self, outcome, time_left):
        self.outcome = outcome
        self.frozen_time_left = time_left
        self.message_timer = Timer.begin(self.clock, MESSAGE_DURATION)
        logger.info("level %d: %s with %.1fs left", self.level, outcome.value, time_left)

    def snapshot(self):
        return RoundSnapshot(
            level=self.level,
            width=self.grid.width,
            height=self.grid.height,
            origin=self.origin,
            cells=tuple(Cell(cell.content, cell.revealed) for _, _, cell in self.grid),
            time_left=self.time_left,
            outcome=self.outcome,
            flicker=self.flicker,
            hovered=self.hovered,
        )
