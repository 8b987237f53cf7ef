# algoviz/core/bubble_sort.py
#!/usr/bin/env python3
"""
Bubble Sort: one comparison (plus its swap, if any) per step().

A pass that makes no swap ends the sort right away. The step that closes a
pass also performs the first comparison of the next one.
"""

from dataclasses import dataclass

from algoviz.core.sort_base import SortAlgo
from algoviz.core.types import BarMark


@dataclass
class BubbleSort(SortAlgo):
    name: str = "Bubble Sort"

    i: int = 0  # passes completed
    j: int = 0  # left index of the current pair
    swapped: bool = False

    def _reset_state(self) -> None:
        self.i = 0
        self.j = 0
        self.swapped = False

    def step(self) -> None:
        if self.arr is None:
            return
        if self.is_sorted:
            self.current_line = 12  # end procedure
            return

        self.marks.clear()
        self.current_line = 2  # repeat
        n = len(self.arr)
        if n < 2:
            self._finish()
            return

        if self.j >= n - self.i - 1:
            self.current_line = 10  # n = n - 1
            self.settled.add(n - 1 - self.i)
            if not self.swapped:
                self._finish()
                return
            self.swapped = False
            self.i += 1
            self.j = 0
            self.current_line = 3  # swapped = false

        if self.i >= n - 1:
            self._finish()
            return

        j = self.j
        self.current_line = 4  # for i = 1 to n-1
        self.marks[j] = self.marks[j + 1] = BarMark.COMPARE

        self.current_line = 5  # if A[i-1] > A[i]
        self.comparisons += 1
        self.array_accesses += 2
        if self.arr[j] > self.arr[j + 1]:
            self.current_line = 6  # swap
            self._swap(j, j + 1)
            self.marks[j] = self.marks[j + 1] = BarMark.SWAP
            self.swapped = True
            self.current_line = 7  # swapped = true

        self.j += 1
