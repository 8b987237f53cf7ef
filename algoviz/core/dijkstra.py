# algoviz/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple
import heapq

from algoviz.core.search_base import SearchAlgo
from algoviz.core.types import Cell, CellType


@dataclass
class DijkstraAlgo(SearchAlgo):
    name: str = "Dijkstra"

    open_pq: List[Tuple[float, int, int]] = field(default_factory=list)  # (dist, seq, idx)
    dist: List[float] = field(default_factory=list)
    seq: int = 0

    def _reset_frontier(self) -> None:
        self.open_pq = []
        self.dist = [inf] * len(self.parent)
        self.seq = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _seed(self, start: Cell) -> None:
        s = self._idx(start)
        self.dist[s] = 0
        heapq.heappush(self.open_pq, (0, self._bump(), s))

    def _expand(self) -> None:
        grid = self.grid
        self.current_line = 3  # while Q is not empty
        if not self.open_pq:
            self._finish_no_path(14)
            return

        self.current_line = 4  # u = vertex in Q with min dist[u]
        _, _, ui = heapq.heappop(self.open_pq)
        u = grid.cells[ui]
        self.nodes_visited += 1
        self.current = u
        self.current_line = 5  # remove u from Q

        if u is grid.end:
            self._finish_found(u)
            return

        # stale entry, u was already settled at a lower cost
        if u.type is CellType.VISITED:
            return
        if u is not grid.start:
            grid.mark(u, CellType.VISITED)

        self.current_line = 6  # for each neighbor v of u
        for v in grid.neighbors(u, self.diagonal):
            if v.type is CellType.WALL:
                continue
            vi = self._idx(v)
            self.current_line = 7  # alt = dist[u] + length(u, v)
            alt = self.dist[ui] + v.cost
            self.current_line = 8  # if alt < dist[v]
            if alt < self.dist[vi]:
                self.current_line = 9
                self.dist[vi] = alt
                self.current_line = 10  # prev[v] = u
                self.parent[vi] = ui
                heapq.heappush(self.open_pq, (alt, self._bump(), vi))

    def metrics(self) -> dict:
        m = super().metrics()
        m["open_size"] = len(self.open_pq)
        return m
