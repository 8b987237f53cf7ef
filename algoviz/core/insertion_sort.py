# algoviz/core/insertion_sort.py
#!/usr/bin/env python3

from dataclasses import dataclass

from algoviz.core.sort_base import SortAlgo
from algoviz.core.types import BarMark


@dataclass
class InsertionSort(SortAlgo):
    name: str = "Insertion Sort"

    i: int = 1
    j: int = 0
    key: int = 0
    key_picked_up: bool = False

    def _reset_state(self) -> None:
        self.i = 1
        self.j = 0
        self.key = 0
        self.key_picked_up = False

    def step(self) -> None:
        if self.arr is None:
            return
        if self.is_sorted:
            self.current_line = 10  # end procedure
            return

        self.marks.clear()
        self.current_line = 1  # for i = 1 to length(A) - 1
        n = len(self.arr)
        if n < 2:
            self._finish()
            return

        if not self.key_picked_up:
            self.current_line = 2  # key = A[i]
            self.key = self.arr[self.i]
            self.array_accesses += 1
            self.current_line = 3  # j = i - 1
            self.j = self.i - 1
            self.key_picked_up = True

        self.marks[self.i] = BarMark.COMPARE
        if self.j >= 0:
            self.marks[self.j] = BarMark.COMPARE

        self.current_line = 4  # while j >= 0 and A[j] > key
        shift = False
        if self.j >= 0:
            self.comparisons += 1
            self.array_accesses += 1
            shift = self.arr[self.j] > self.key

        if shift:
            self.current_line = 5  # A[j+1] = A[j]
            self.arr[self.j + 1] = self.arr[self.j]
            self.array_accesses += 2
            self.marks[self.j + 1] = BarMark.SWAP
            self.current_line = 6  # j = j - 1
            self.j -= 1
            return

        self.current_line = 8  # A[j+1] = key
        self.arr[self.j + 1] = self.key
        self.array_accesses += 1
        self.marks[self.j + 1] = BarMark.SWAP
        self.i += 1
        if self.i >= n:
            self._finish()
            return
        self.key_picked_up = False
