# algoviz/core/registry.py
#!/usr/bin/env python3
"""Algorithm tags and the table that builds a fresh engine for each."""

from enum import Enum
from typing import Callable, Dict, Union

from algoviz.core.astar import AStarAlgo
from algoviz.core.bfs import BFSAlgo
from algoviz.core.bubble_sort import BubbleSort
from algoviz.core.dfs import DFSAlgo
from algoviz.core.dijkstra import DijkstraAlgo
from algoviz.core.errors import ConfigError
from algoviz.core.insertion_sort import InsertionSort
from algoviz.core.merge_sort import MergeSort
from algoviz.core.quick_sort import QuickSort
from algoviz.core.search_base import SearchAlgo
from algoviz.core.selection_sort import SelectionSort
from algoviz.core.sort_base import SortAlgo

Engine = Union[SortAlgo, SearchAlgo]


class Algorithm(str, Enum):
    BUBBLE = "Bubble Sort"
    SELECTION = "Selection Sort"
    INSERTION = "Insertion Sort"
    MERGE = "Merge Sort"
    QUICK = "Quick Sort"
    BFS = "BFS"
    DFS = "DFS"
    ASTAR = "A* Search"
    DIJKSTRA = "Dijkstra"

    @property
    def is_sort(self) -> bool:
        return self in SORTING_ALGORITHMS

    @property
    def is_weighted(self) -> bool:
        """Only the cost-aware searches take Weight cells into account."""
        return self in (Algorithm.ASTAR, Algorithm.DIJKSTRA)


SORTING_ALGORITHMS = (
    Algorithm.BUBBLE,
    Algorithm.SELECTION,
    Algorithm.INSERTION,
    Algorithm.MERGE,
    Algorithm.QUICK,
)

PATHFINDING_ALGORITHMS = (
    Algorithm.BFS,
    Algorithm.DFS,
    Algorithm.ASTAR,
    Algorithm.DIJKSTRA,
)

ALGORITHM_DISPATCH_TABLE: Dict[Algorithm, Callable[[], Engine]] = {
    Algorithm.BUBBLE: BubbleSort,
    Algorithm.SELECTION: SelectionSort,
    Algorithm.INSERTION: InsertionSort,
    Algorithm.MERGE: MergeSort,
    Algorithm.QUICK: QuickSort,
    Algorithm.BFS: BFSAlgo,
    Algorithm.DFS: DFSAlgo,
    Algorithm.ASTAR: AStarAlgo,
    Algorithm.DIJKSTRA: DijkstraAlgo,
}

_ALIASES = {
    "bubble": Algorithm.BUBBLE,
    "selection": Algorithm.SELECTION,
    "insertion": Algorithm.INSERTION,
    "merge": Algorithm.MERGE,
    "quick": Algorithm.QUICK,
    "bfs": Algorithm.BFS,
    "dfs": Algorithm.DFS,
    "astar": Algorithm.ASTAR,
    "a*": Algorithm.ASTAR,
    "dijkstra": Algorithm.DIJKSTRA,
}


def parse_algorithm(value: Union[str, Algorithm]) -> Algorithm:
    """Accepts the display label ("A* Search") or a short alias ("astar", "quick")."""
    if isinstance(value, Algorithm):
        return value
    key = value.strip()
    for algo in Algorithm:
        if key.lower() == algo.value.lower():
            return algo
    short = key.lower().replace("_", " ").replace("-", " ").split()
    if short and short[0] in _ALIASES:
        return _ALIASES[short[0]]
    raise ConfigError(f"unknown algorithm {value!r}; choose one of: "
                      + ", ".join(a.value for a in Algorithm))


def make_engine(algo: Algorithm) -> Engine:
    return ALGORITHM_DISPATCH_TABLE[algo]()
