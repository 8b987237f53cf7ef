# algoviz/core/search_base.py
#!/usr/bin/env python3
"""
Shared state for the step-wise grid searches (BFS, DFS, Dijkstra, A*).

Implements the algorithm API the viewer drives:
- init(grid)  - bind the grid and reset
- start()     - clear the last run's overlay, reset, seed the frontier
- step()      - one frontier pop plus its full neighbour expansion

Progress goes idle -> searching -> complete (found) | complete (no path).
Parents live in a flat list indexed by row * cols + col.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from algoviz.core.grid import Grid
from algoviz.core.types import Cell, CellType

logger = logging.getLogger(__name__)


@dataclass
class SearchAlgo:
    name: str = "Search"

    grid: Optional[Grid] = None
    diagonal: bool = False

    parent: List[Optional[int]] = field(default_factory=list)
    is_searching: bool = False
    is_complete: bool = False
    no_path_exists: bool = False
    current_line: int = 0
    nodes_visited: int = 0
    path_cost: int = 0
    current: Optional[Cell] = None
    path: List[Cell] = field(default_factory=list)  # start excluded, end included

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        self.is_searching = False
        self.is_complete = False
        self.no_path_exists = False
        self.current_line = 0
        self.nodes_visited = 0
        self.path_cost = 0
        self.current = None
        self.path = []
        self.parent = [None] * (len(self.grid) if self.grid is not None else 0)
        self._reset_frontier()

    def start(self) -> bool:
        """Begin a fresh search; False if the grid lacks a Start or an End."""
        if self.grid is None:
            return False
        if self.grid.start is None or self.grid.end is None:
            logger.warning(f"{self.name}: place a start and an end cell first")
            return False
        self.grid.clear_path()
        self.reset()
        self._seed(self.grid.start)
        self.is_searching = True
        logger.debug(f"{self.name}: searching from {self.grid.start.coord} to {self.grid.end.coord}")
        return True

    @property
    def is_done(self) -> bool:
        return self.is_complete

    def step(self) -> None:
        if not self.is_searching or self.is_complete:
            return
        self._expand()

    # -------------------- per-algorithm hooks --------------------

    def _reset_frontier(self) -> None:
        raise NotImplementedError

    def _seed(self, start: Cell) -> None:
        raise NotImplementedError

    def _expand(self) -> None:
        raise NotImplementedError

    # -------------------- helpers --------------------

    def _idx(self, cell: Cell) -> int:
        return self.grid.index(cell)

    def live_path(self) -> List[Cell]:
        """Best known route from Start to the node last popped, Start excluded."""
        if self.grid is None or self.current is None:
            return []
        return list(reversed(self.grid.trace(self.current, self.parent)))

    def _finish_found(self, end: Cell) -> None:
        self.current = end
        self.path = list(reversed(self.grid.trace(end, self.parent)))
        self.path_cost = sum(c.cost for c in self.path)
        for c in self.path:
            if c is not end:
                self.grid.mark(c, CellType.PATH)
        self.is_complete = True
        self.is_searching = False
        logger.info(f"{self.name}: path found, cost {self.path_cost}, {self.nodes_visited} nodes visited")

    def _finish_no_path(self, line: int) -> None:
        self.no_path_exists = True
        self.is_complete = True
        self.is_searching = False
        self.current_line = line
        logger.info(f"{self.name}: no path after {self.nodes_visited} nodes visited")

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "nodes_visited": self.nodes_visited,
            "path_cost": self.path_cost,
            "path_len": len(self.path),
            "complete": self.is_complete,
            "no_path": self.no_path_exists,
            "line": self.current_line,
        }
