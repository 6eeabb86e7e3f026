import numpy as np
import pytest

from conftest import ScriptedRng, make_grid
from lost_n_found.grid import Direction, Empty, Grid, Hint, Solution, Trap, TrapKind, hint_direction
from lost_n_found.settings import REVEAL_DURATION


@pytest.mark.parametrize("dx, dy, expected", [
    (3, 0, Direction.LEFT),
    (-3, 0, Direction.RIGHT),
    (0, 2, Direction.UP),
    (0, -2, Direction.DOWN),
    (2, -2, Direction.LEFT),    # ties go horizontal
    (-2, 2, Direction.RIGHT),
    (1, -4, Direction.DOWN),
    (-1, 4, Direction.UP),
])
def test_hint_direction(dx, dy, expected):
    assert hint_direction(dx, dy) is expected


def test_hint_direction_needs_a_displacement():
    with pytest.raises(ValueError):
        hint_direction(0, 0)


def test_direction_opposites():
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.RIGHT.opposite is Direction.LEFT
    assert Direction.DOWN.opposite is Direction.UP


@pytest.mark.parametrize("width, height", [(1, 1), (1, 7), (15, 10), (25, 20)])
@pytest.mark.parametrize("seed", [0, 1, 42])
def test_generate_places_exactly_one_solution(width, height, seed, clock):
    grid = Grid.generate(width, height, np.random.default_rng(seed), 6, clock)
    solutions = [(x, y) for x, y, cell in grid if isinstance(cell.content, Solution)]
    assert solutions == [grid.solution]
    assert len(grid) == width * height


@pytest.mark.parametrize("seed", range(5))
def test_following_a_hint_closes_in_on_the_dominant_axis(seed, clock):
    grid = Grid.generate(25, 20, np.random.default_rng(seed), 6, clock)
    sx, sy = grid.solution
    for x, y, cell in grid:
        if not isinstance(cell.content, Hint):
            continue
        dx, dy = x - sx, y - sy
        step_x, step_y = cell.content.direction.delta
        if abs(dx) >= abs(dy):
            assert step_y == 0
            assert abs(dx + step_x) < abs(dx)
        else:
            assert step_x == 0
            assert abs(dy + step_y) < abs(dy)


def test_generate_maps_slots_to_contents(clock):
    # solution at (0, 0), then one slot per remaining cell in row-major order
    rng = ScriptedRng([0, 0, 0, 1, 2, 3, 9])
    grid = Grid.generate(6, 1, rng, 6, clock)

    assert isinstance(grid.cell(0, 0).content, Solution)
    assert grid.cell(1, 0).content == Trap(TrapKind.CONFUSION)
    assert isinstance(grid.cell(2, 0).content, Empty)
    assert isinstance(grid.cell(3, 0).content, Empty)
    assert grid.cell(4, 0).content == Hint(Direction.LEFT)
    assert grid.cell(5, 0).content == Hint(Direction.LEFT)
    assert rng.calls[:2] == [(0, 6), (0, 1)]
    assert all(call == (0, 10) for call in rng.calls[2:])


def test_generated_cells_start_hidden(clock):
    grid = Grid.generate(15, 10, np.random.default_rng(3), 6, clock)
    assert grid.revealed_count() == 0


def test_slot_distribution_is_roughly_one_two_seven(clock):
    grid = Grid.generate(25, 20, np.random.default_rng(7), 6, clock)
    contents = [cell.content for _, _, cell in grid]
    traps = sum(isinstance(c, Trap) for c in contents)
    empties = sum(isinstance(c, Empty) for c in contents)
    hints = sum(isinstance(c, Hint) for c in contents)
    assert traps + empties + hints == len(contents) - 1
    assert 20 <= traps <= 80
    assert 60 <= empties <= 140
    assert 290 <= hints <= 410


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_size_is_rejected(width, height, clock):
    with pytest.raises(ValueError):
        Grid.generate(width, height, np.random.default_rng(0), 6, clock)


def test_grid_must_hold_exactly_one_solution(clock):
    with pytest.raises(ValueError):
        make_grid(["S.", ".S"], clock)
    with pytest.raises(ValueError):
        make_grid(["..", ".."], clock)


def test_out_of_range_reads_are_misses(clock):
    grid = make_grid(["S<", "^T"], clock)
    assert grid.cell(-1, 0) is None
    assert grid.cell(2, 0) is None
    assert grid.cell(0, 2) is None
    assert grid.reveal(5, 5) is None
    assert len(grid.window) == 0


def test_indexing_is_row_major(clock):
    grid = make_grid(["S<.", "^T>"], clock)
    assert grid.solution == (0, 0)
    assert isinstance(grid.cell(1, 1).content, Trap)
    assert grid.cell(2, 1).content == Hint(Direction.RIGHT)


def test_reveal_returns_content_and_queues_every_time(clock):
    grid = make_grid(["S<", "^T"], clock)
    assert grid.reveal(1, 0) == Hint(Direction.LEFT)
    assert grid.reveal(1, 0) == Hint(Direction.LEFT)
    assert grid.cell(1, 0).revealed
    assert [(r.x, r.y) for r in grid.window] == [(1, 0), (1, 0)]


def test_tick_hides_expired_reveals(clock):
    grid = make_grid(["S<", "^T"], clock)
    grid.reveal(0, 1)
    assert grid.tick() is None

    clock.advance(REVEAL_DURATION)
    assert grid.tick() == (0, 1)
    assert not grid.cell(0, 1).revealed
    assert len(grid.window) == 0


def test_tick_hides_oldest_when_over_capacity(clock):
    grid = make_grid(["S<.", "^T>"], clock, max_revealed=2)
    grid.reveal(1, 0)
    grid.reveal(2, 0)
    grid.reveal(0, 1)
    assert grid.revealed_count() == 3

    assert grid.tick() == (1, 0)
    assert grid.revealed_count() == 2
    assert grid.tick() is None
