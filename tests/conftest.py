# tests/conftest.py
import os
import sys

# Ensure project root (where algoviz/ lives) is on sys.path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from algoviz.core.grid import Grid
from algoviz.core.types import CellType


def make_grid(rows, cols, start=None, end=None, walls=(), weights=()):
    grid = Grid(rows, cols)
    if start is not None:
        grid.set_cell_type(start[0], start[1], CellType.START)
    if end is not None:
        grid.set_cell_type(end[0], end[1], CellType.END)
    for r, c in walls:
        grid.set_cell_type(r, c, CellType.WALL)
    for r, c in weights:
        grid.set_cell_type(r, c, CellType.WEIGHT)
    return grid


def run_to_end(engine, limit=100_000):
    """Step until done; returns the number of step() calls."""
    steps = 0
    while not engine.is_done:
        engine.step()
        steps += 1
        assert steps <= limit, f"{engine.name} did not finish"
    return steps
