# algoviz/core/sort_base.py
#!/usr/bin/env python3
"""
Shared state for the step-wise sorting engines.

Lifecycle (same shape as the search engines):
- init(arr)  - bind the shared array and reset
- reset()    - back to the start state, counters zeroed
- start()    - reset against the array's current contents
- step()     - exactly one primitive operation (compare / swap / write)

The array is owned by the caller and mutated in place. Calling step() before
init() or after the sort finished does nothing.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from algoviz.core.types import BarMark


@dataclass
class SortAlgo:
    name: str = "Sort"

    arr: Optional[List[int]] = None
    is_sorted: bool = False
    current_line: int = 0
    comparisons: int = 0
    array_accesses: int = 0

    # presentation: marks from the last step, and indices in their final slot
    marks: Dict[int, BarMark] = field(default_factory=dict)
    settled: Set[int] = field(default_factory=set)

    # -------------------- lifecycle --------------------

    def init(self, arr: List[int]) -> None:
        self.arr = arr
        self.reset()

    def reset(self) -> None:
        self.is_sorted = False
        self.current_line = 0
        self.comparisons = 0
        self.array_accesses = 0
        self.marks.clear()
        self.settled.clear()
        self._reset_state()

    def start(self) -> bool:
        self.reset()
        return self.arr is not None

    def _reset_state(self) -> None:
        raise NotImplementedError

    def step(self) -> None:
        raise NotImplementedError

    @property
    def is_done(self) -> bool:
        return self.is_sorted

    # -------------------- helpers --------------------

    def _finish(self) -> None:
        self.is_sorted = True
        self.marks.clear()
        self.settled.update(range(len(self.arr or [])))

    def _swap(self, a: int, b: int) -> None:
        self.array_accesses += 4  # two reads, two writes
        self.arr[a], self.arr[b] = self.arr[b], self.arr[a]

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "comparisons": self.comparisons,
            "array_accesses": self.array_accesses,
            "sorted": self.is_sorted,
            "line": self.current_line,
        }
