# tests/test_maze.py
from collections import deque

from conftest import make_grid
from algoviz.core.grid import Grid
from algoviz.core.maze import MazeGenerator
from algoviz.core.types import CellType


def _generate(rows, cols, seed):
    grid = Grid(rows, cols)
    maze = MazeGenerator()
    maze.init(grid, seed=seed)
    start = maze.begin()
    steps = 0
    while maze.is_generating:
        maze.step()
        steps += 1
        assert steps < 100_000, "maze generation did not terminate"
    return grid, start


def _reachable(grid, start):
    seen = {start.coord}
    q = deque([start])
    while q:
        cell = q.popleft()
        for n in grid.neighbors(cell):
            if n.type is CellType.EMPTY and n.coord not in seen:
                seen.add(n.coord)
                q.append(n)
    return seen


def test_every_open_cell_reachable_from_seed():
    grid, start = _generate(11, 15, seed=42)
    open_cells = {c.coord for c in grid.cells if c.type is CellType.EMPTY}
    assert start.coord in open_cells
    assert _reachable(grid, start) == open_cells


def test_maze_is_a_spanning_tree_of_even_cells():
    grid, start = _generate(11, 15, seed=7)
    assert start.row % 2 == 0 and start.col % 2 == 0
    rooms = [c for c in grid.cells if c.row % 2 == 0 and c.col % 2 == 0]
    assert all(c.type is CellType.EMPTY for c in rooms)
    # k rooms joined by k - 1 knocked-out walls
    assert grid.count(CellType.EMPTY) == 2 * len(rooms) - 1


def test_same_seed_same_maze():
    a, _ = _generate(9, 9, seed=123)
    b, _ = _generate(9, 9, seed=123)
    assert [c.type for c in a.cells] == [c.type for c in b.cells]


def test_begin_walls_in_and_drops_endpoints():
    grid = make_grid(5, 5, start=(0, 0), end=(4, 4))
    maze = MazeGenerator()
    maze.init(grid, seed=1)
    maze.begin()
    assert grid.start is None and grid.end is None
    assert grid.count(CellType.EMPTY) == 1
    assert grid.count(CellType.WALL) == 24
    assert maze.is_generating


def test_step_without_begin_is_noop():
    grid = Grid(5, 5)
    maze = MazeGenerator()
    maze.init(grid, seed=1)
    maze.step()
    assert not maze.is_generating
    assert grid.count(CellType.EMPTY) == 25


def test_tiny_grid_finishes():
    grid, start = _generate(1, 1, seed=0)
    assert start.coord == (0, 0)
    assert grid.count(CellType.EMPTY) == 1
