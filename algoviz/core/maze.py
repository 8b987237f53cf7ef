# algoviz/core/maze.py
#!/usr/bin/env python3
"""
Randomized recursive-backtracker maze carver.

begin() walls off the whole grid, opens one even-coordinate seed cell and
pushes it. Each step() looks two cells away from the carver (top of stack)
for cells still walled in; it opens one at random together with the wall
between, or backtracks when there is none.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from algoviz.core.grid import Grid
from algoviz.core.types import Cell, CellType

logger = logging.getLogger(__name__)

# up, down, left, right by two cells
CARVE_OFFSETS = [(-2, 0), (2, 0), (0, -2), (0, 2)]


@dataclass
class MazeGenerator:
    name: str = "Maze"

    grid: Optional[Grid] = None
    stack: List[Cell] = field(default_factory=list)
    is_generating: bool = False
    rng: random.Random = field(default_factory=random.Random)

    def init(self, grid: Grid, seed: Optional[int] = None) -> None:
        self.grid = grid
        self.rng = random.Random(seed)
        self.reset()

    def reset(self) -> None:
        self.stack = []
        self.is_generating = False

    @property
    def is_done(self) -> bool:
        return not self.is_generating

    def begin(self) -> Optional[Cell]:
        """Wall in the grid and carve the seed cell; returns the seed."""
        if self.grid is None:
            return None
        self.reset()
        grid = self.grid
        grid.fill_with_walls()
        r = self.rng.randrange(max(1, grid.rows // 2)) * 2
        c = self.rng.randrange(max(1, grid.cols // 2)) * 2
        seed = grid.cell(r, c)
        grid.mark(seed, CellType.EMPTY)
        self.stack.append(seed)
        self.is_generating = True
        logger.debug(f"maze: carving from {seed.coord} on a {grid.rows}x{grid.cols} grid")
        return seed

    def _uncarved(self, cell: Cell) -> List[Cell]:
        out: List[Cell] = []
        for dr, dc in CARVE_OFFSETS:
            r, c = cell.row + dr, cell.col + dc
            if self.grid.is_valid(r, c) and self.grid.cell(r, c).type is CellType.WALL:
                out.append(self.grid.cell(r, c))
        return out

    def step(self) -> None:
        if not self.is_generating or not self.stack:
            self.is_generating = False
            return

        current = self.stack[-1]
        options = self._uncarved(current)
        if options:
            nxt = self.rng.choice(options)
            wall_r = current.row + (nxt.row - current.row) // 2
            wall_c = current.col + (nxt.col - current.col) // 2
            self.grid.set_cell_type(wall_r, wall_c, CellType.EMPTY)
            self.grid.mark(nxt, CellType.EMPTY)
            self.stack.append(nxt)
        else:
            self.stack.pop()
            if not self.stack:
                self.is_generating = False
                logger.info("maze: generation finished")

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "depth": len(self.stack),
            "generating": self.is_generating,
        }
