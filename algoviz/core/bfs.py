# algoviz/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-first search, one dequeue per step().

Neighbours are marked Visited when enqueued. The End is checked both when a
node is dequeued and while scanning neighbours, so a search usually stops one
pop earlier than a dequeue-only check would.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from algoviz.core.search_base import SearchAlgo
from algoviz.core.types import Cell, CellType


@dataclass
class BFSAlgo(SearchAlgo):
    name: str = "BFS"

    queue: Deque[Cell] = field(default_factory=deque)

    def _reset_frontier(self) -> None:
        self.queue = deque()

    def _seed(self, start: Cell) -> None:
        self.queue.append(start)

    def _expand(self) -> None:
        grid = self.grid
        if not self.queue:
            self._finish_no_path(16)  # return PathNotFound
            return

        self.current_line = 4  # while Q is not empty
        u = self.queue.popleft()
        self.nodes_visited += 1
        self.current = u
        self.current_line = 5  # current = Q.dequeue()

        self.current_line = 6  # if current is end
        if u is grid.end:
            self._finish_found(u)
            self.current_line = 7
            return

        self.current_line = 9  # for each neighbor of current
        for w in grid.neighbors(u, self.diagonal):
            self.current_line = 10  # if neighbor is not visited
            if w is grid.end:
                self.parent[self._idx(w)] = self._idx(u)
                self._finish_found(w)
                self.current_line = 7
                return
            if w.type is CellType.EMPTY:
                self.current_line = 11  # mark neighbor as visited
                grid.mark(w, CellType.VISITED)
                self.parent[self._idx(w)] = self._idx(u)
                self.queue.append(w)
                self.current_line = 12  # Q.enqueue(neighbor)
