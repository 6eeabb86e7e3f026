from .game import Game
from .grid import Cell, Direction, Empty, Grid, Hint, Solution, Trap, TrapKind
from .reveal_window import RevealRecord, RevealWindow
from .round import Outcome, PointerSample, Round, RoundSnapshot, displayed_direction
from .timer import FrameClock, MonotonicClock, Timer
from .xform import grid_to_surface, surface_to_grid

__all__ = [
    "Cell",
    "Direction",
    "Empty",
    "FrameClock",
    "Game",
    "Grid",
    "Hint",
    "MonotonicClock",
    "Outcome",
    "PointerSample",
    "RevealRecord",
    "RevealWindow",
    "Round",
    "RoundSnapshot",
    "Solution",
    "Timer",
    "Trap",
    "TrapKind",
    "displayed_direction",
    "grid_to_surface",
    "surface_to_grid",
]
