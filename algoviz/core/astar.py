# algoviz/core/astar.py
#!/usr/bin/env python3
"""
A* search, one expansion per step() for animation.

Heuristic:
- Manhattan distance to the End cell, unscaled.

Tie-breaking in the PQ:
- (f, h, -g, seq, idx): lower f, then lower h, then deeper g, then FIFO by seq.
"""

from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple
import heapq

from algoviz.core.search_base import SearchAlgo
from algoviz.core.types import Cell, CellType


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


@dataclass
class AStarAlgo(SearchAlgo):
    name: str = "A* Search"

    # Internal state
    open_pq: List[Tuple[float, int, float, int, int]] = field(default_factory=list)
    g: List[float] = field(default_factory=list)
    seq: int = 0  # monotonic counter for PQ stability

    # -------------------- lifecycle --------------------

    def _reset_frontier(self) -> None:
        self.open_pq = []
        self.g = [inf] * len(self.parent)
        self.seq = 0

    def _seed(self, start: Cell) -> None:
        s = self._idx(start)
        self.g[s] = 0
        h0 = self._h(start)
        heapq.heappush(self.open_pq, (h0, h0, 0, self._bump(), s))

    # -------------------- helpers --------------------

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _h(self, c: Cell) -> int:
        if self.grid is None or self.grid.end is None:
            return 0
        return manhattan(c, self.grid.end)

    # -------------------- main stepping logic --------------------

    def _expand(self) -> None:
        """
        Run ONE A* expansion step:
          - Pop the lowest-f node.
          - If goal, trace the path and finish.
          - Else relax neighbours with edge cost = cost of the cell entered.
        """
        grid = self.grid
        self.current_line = 2  # while openSet is not empty
        if not self.open_pq:
            self._finish_no_path(17)
            return

        self.current_line = 3  # current = node in openSet with lowest fCost
        _, _, _, _, ui = heapq.heappop(self.open_pq)
        u = grid.cells[ui]
        self.nodes_visited += 1
        self.current = u

        self.current_line = 4  # if current == goal
        if u is grid.end:
            self._finish_found(u)
            self.current_line = 5
            return

        # Ignore stale pops
        if u.type is CellType.VISITED:
            return
        if u is not grid.start:
            grid.mark(u, CellType.VISITED)

        self.current_line = 7  # for each neighbor of current
        for v in grid.neighbors(u, self.diagonal):
            if v.type in (CellType.WALL, CellType.VISITED):
                continue
            vi = self._idx(v)
            self.current_line = 8  # tentative_gCost = gCost[current] + cost
            tentative = self.g[ui] + v.cost
            self.current_line = 9  # if tentative_gCost < gCost[neighbor]
            if tentative < self.g[vi]:
                self.current_line = 10
                self.parent[vi] = ui
                self.current_line = 11
                self.g[vi] = tentative
                h = self._h(v)
                self.current_line = 12  # fCost = gCost + hCost
                heapq.heappush(self.open_pq, (tentative + h, h, -tentative, self._bump(), vi))
                self.current_line = 13  # openSet.add(neighbor)

    # -------------------- metrics --------------------

    def metrics(self) -> dict:
        m = super().metrics()
        m["open_size"] = len(self.open_pq)
        return m
