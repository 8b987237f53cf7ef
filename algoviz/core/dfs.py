# algoviz/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search with an explicit stack.

Empty neighbours are pushed without de-duplication, so a cell can sit on the
stack more than once; it is only marked Visited when popped while still Empty.
"""

from dataclasses import dataclass, field
from typing import List

from algoviz.core.search_base import SearchAlgo
from algoviz.core.types import Cell, CellType


@dataclass
class DFSAlgo(SearchAlgo):
    name: str = "DFS"

    stack: List[Cell] = field(default_factory=list)

    def _reset_frontier(self) -> None:
        self.stack = []

    def _seed(self, start: Cell) -> None:
        self.stack.append(start)

    def _expand(self) -> None:
        grid = self.grid
        self.current_line = 3  # while S is not empty
        if not self.stack:
            self._finish_no_path(15)
            return

        u = self.stack.pop()
        self.nodes_visited += 1
        self.current = u
        self.current_line = 4  # current = S.pop()

        if u.type is CellType.EMPTY:
            self.current_line = 6  # mark current as visited
            grid.mark(u, CellType.VISITED)

        self.current_line = 10  # for each neighbor of current
        for w in grid.neighbors(u, self.diagonal):
            self.current_line = 7  # if current is end
            if w is grid.end:
                self.parent[self._idx(w)] = self._idx(u)
                self._finish_found(w)
                self.current_line = 8
                return
            if w.type is CellType.EMPTY:
                self.parent[self._idx(w)] = self._idx(u)
                self.stack.append(w)
                self.current_line = 11  # S.push(neighbor)
