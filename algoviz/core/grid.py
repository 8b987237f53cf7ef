# algoviz/core/grid.py
#!/usr/bin/env python3
"""
Pathfinding grid: a flat arena of typed cells.

- Cells live in `cells`, indexed by row * cols + col.
- `start` / `end` are back-references into that list, never copies.
- Only one Start and one End exist at any time; `set_cell_type` keeps it so.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from algoviz.core.errors import GridError
from algoviz.core.types import CELL_COSTS, Cell, CellType

# up, down, left, right, up-left, up-right, down-left, down-right
NEIGHBOR_OFFSETS = [(-1, 0), (1, 0), (0, -1), (0, 1), (-1, -1), (-1, 1), (1, -1), (1, 1)]


@dataclass(eq=False)
class Grid:
    rows: int
    cols: int
    cells: List[Cell] = field(default_factory=list)
    start: Optional[Cell] = None
    end: Optional[Cell] = None

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise GridError(f"grid needs at least one cell, got {self.rows}x{self.cols}")
        if not self.cells:
            self.cells = [Cell(r, c) for r in range(self.rows) for c in range(self.cols)]

    @classmethod
    def from_pixels(cls, width: int, height: int, cell_size: int) -> "Grid":
        return cls(rows=height // cell_size, cols=width // cell_size)

    # -------------------- access --------------------

    def is_valid(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def cell(self, r: int, c: int) -> Cell:
        if not self.is_valid(r, c):
            raise GridError(f"cell ({r}, {c}) outside {self.rows}x{self.cols} grid")
        return self.cells[r * self.cols + c]

    def index(self, cell: Cell) -> int:
        return cell.row * self.cols + cell.col

    def __len__(self) -> int:
        return len(self.cells)

    def count(self, cell_type: CellType) -> int:
        return sum(1 for c in self.cells if c.type is cell_type)

    def neighbors(self, cell: Cell, diagonal: bool = False) -> Iterator[Cell]:
        """In-bounds neighbours in fixed order; the four diagonals only if asked."""
        offsets = NEIGHBOR_OFFSETS if diagonal else NEIGHBOR_OFFSETS[:4]
        for dr, dc in offsets:
            r, c = cell.row + dr, cell.col + dc
            if self.is_valid(r, c):
                yield self.cells[r * self.cols + c]

    def trace(self, cell: Optional[Cell], parent: Sequence[Optional[int]]) -> List[Cell]:
        """Cells from `cell` back to (but excluding) Start along the parent arena."""
        out: List[Cell] = []
        seen = set()
        cur = cell
        while cur is not None and cur is not self.start:
            idx = self.index(cur)
            if idx in seen:
                break
            seen.add(idx)
            out.append(cur)
            p = parent[idx] if idx < len(parent) else None
            cur = self.cells[p] if p is not None else None
        return out

    # -------------------- mutation --------------------

    def set_cell_type(self, row: int, col: int, cell_type: CellType) -> None:
        node = self.cell(row, col)

        # drop the role before the type changes so no reference dangles
        if node is self.start:
            self.start = None
        if node is self.end:
            self.end = None

        if cell_type is CellType.START and self.start is not None:
            self._demote(self.start)
            self.start = None
        if cell_type is CellType.END and self.end is not None:
            self._demote(self.end)
            self.end = None

        node.type = cell_type
        cost = CELL_COSTS[cell_type]
        if cost is not None:
            node.cost = cost

        if cell_type is CellType.START:
            self.start = node
        elif cell_type is CellType.END:
            self.end = node

    def _demote(self, node: Cell) -> None:
        node.type = CellType.EMPTY
        node.cost = 1

    def mark(self, cell: Cell, cell_type: CellType) -> None:
        self.set_cell_type(cell.row, cell.col, cell_type)

    def reset(self) -> None:
        self.start = None
        self.end = None
        for c in self.cells:
            self.set_cell_type(c.row, c.col, CellType.EMPTY)

    def clear_walls(self) -> None:
        for c in self.cells:
            if c.type is CellType.WALL:
                self.set_cell_type(c.row, c.col, CellType.EMPTY)

    def clear_path(self) -> None:
        """Visited/path cells go back to what they were before the search."""
        for c in self.cells:
            if c.type in (CellType.VISITED, CellType.PATH):
                self.set_cell_type(c.row, c.col, CellType.WEIGHT if c.is_weight else CellType.EMPTY)

    def clear_weights(self) -> None:
        for c in self.cells:
            if c.type is CellType.WEIGHT:
                self.set_cell_type(c.row, c.col, CellType.EMPTY)

    def fill_with_walls(self) -> None:
        self.start = None
        self.end = None
        for c in self.cells:
            self.set_cell_type(c.row, c.col, CellType.WALL)

    def clear_maze(self) -> None:
        for c in self.cells:
            if c is not self.start and c is not self.end:
                self.set_cell_type(c.row, c.col, CellType.EMPTY)

    def finalize_maze(self) -> None:
        for c in self.cells:
            if c.type is CellType.VISITED:
                self.set_cell_type(c.row, c.col, CellType.EMPTY)
