# algoviz/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)


class CellType(Enum):
    EMPTY = "empty"
    START = "start"
    END = "end"
    WALL = "wall"
    VISITED = "visited"
    PATH = "path"
    WEIGHT = "weight"


# None = keep the cell's current cost (visited/path cells remember if they were mud)
CELL_COSTS = {
    CellType.EMPTY: 1,
    CellType.START: 1,
    CellType.END: 1,
    CellType.WALL: 1,
    CellType.VISITED: None,
    CellType.PATH: None,
    CellType.WEIGHT: 5,
}


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    type: CellType = CellType.EMPTY
    cost: int = 1

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_weight(self) -> bool:
        return self.cost > 1


class BarMark(Enum):
    """How a bar should be highlighted after the last step."""
    COMPARE = "compare"
    SWAP = "swap"
    PIVOT = "pivot"
    MERGED = "merged"


@dataclass
class MergeJob:
    left: int
    mid: int
    right: int
    i: int
    j: int
    k: int


@dataclass(frozen=True)
class QuickSortJob:
    low: int
    high: int
