# algoviz/core/selection_sort.py
#!/usr/bin/env python3
"""
Selection Sort in two phases per outer pass: scan for the minimum one
comparison at a time, then swap it into the sorted boundary.
"""

from dataclasses import dataclass

from algoviz.core.sort_base import SortAlgo
from algoviz.core.types import BarMark


@dataclass
class SelectionSort(SortAlgo):
    name: str = "Selection Sort"

    i: int = 0
    j: int = 1
    min_idx: int = 0
    finding_min: bool = True

    def _reset_state(self) -> None:
        self.i = 0
        self.j = 1
        self.min_idx = 0
        self.finding_min = True

    def step(self) -> None:
        if self.arr is None:
            return
        if self.is_sorted:
            self.current_line = 11  # end procedure
            return

        self.marks.clear()
        self.current_line = 2  # for i = 0 to n - 1
        n = len(self.arr)
        if n < 2:
            self._finish()
            return

        if self.finding_min:
            self.current_line = 4  # for j = i + 1 to n
            if self.j < n:
                self.marks[self.j] = self.marks[self.min_idx] = BarMark.COMPARE
                self.current_line = 5  # if A[j] < A[minIndex]
                self.comparisons += 1
                self.array_accesses += 2
                if self.arr[self.j] < self.arr[self.min_idx]:
                    self.current_line = 6  # minIndex = j
                    self.min_idx = self.j
                self.j += 1
            else:
                self.finding_min = False
            return

        self.current_line = 9  # swap(A[i], A[minIndex])
        self._swap(self.min_idx, self.i)
        self.marks[self.i] = self.marks[self.min_idx] = BarMark.SWAP
        self.settled.add(self.i)
        self.i += 1

        if self.i >= n - 1:
            self._finish()
            return

        self.min_idx = self.i
        self.j = self.i + 1
        self.finding_min = True
        self.current_line = 3  # minIndex = i
