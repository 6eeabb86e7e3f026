"""Level-indexed difficulty curves. Level 1 is the first round."""

from .settings import (
    BASE_GRID_SIZE,
    BASE_REVEAL_CAPACITY,
    BASE_ROUND_DURATION,
    GRID_GROWTH_STEP_LEVELS,
    GRID_MAX_GROWTH,
    REVEAL_CAPACITY_MAX_CUT,
    REVEAL_CAPACITY_STEP_LEVELS,
    ROUND_DURATION_GRACE_LEVELS,
    ROUND_DURATION_MAX_CUT,
    ROUND_DURATION_STEP,
    ROUND_DURATION_STEP_LEVELS,
)


def _check_level(level):
    if level < 1:
        raise ValueError(f"levels start at 1, got {level}")


def round_duration(level):
    """Seconds on the round clock. Starts shrinking after level 6."""
    _check_level(level)
    step = (level - min(level, ROUND_DURATION_GRACE_LEVELS)) // ROUND_DURATION_STEP_LEVELS
    cut = min(step * ROUND_DURATION_STEP, ROUND_DURATION_MAX_CUT)
    return BASE_ROUND_DURATION - cut


def grid_size(level):
    """(width, height) of the grid, one bigger each way every 3 levels."""
    _check_level(level)
    growth = min(level // GRID_GROWTH_STEP_LEVELS, GRID_MAX_GROWTH)
    base_w, base_h = BASE_GRID_SIZE
    return base_w + growth, base_h + growth


def reveal_capacity(level):
    _check_level(level)
    cut = min(level // REVEAL_CAPACITY_STEP_LEVELS, REVEAL_CAPACITY_MAX_CUT)
    return BASE_REVEAL_CAPACITY - cut
