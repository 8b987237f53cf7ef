# algoviz/core/quick_sort.py
#!/usr/bin/env python3
"""
Iterative Quick Sort with the Lomuto partition.

A stack of QuickSortJob ranges stands in for the recursion. A step either
opens the next partition (pop a job, read the pivot, then scan once), scans
one element against the pivot, or closes the partition by swapping the pivot
into place and pushing the sub-ranges that still hold two or more elements.
"""

from dataclasses import dataclass, field
from typing import List

from algoviz.core.sort_base import SortAlgo
from algoviz.core.types import BarMark, QuickSortJob


@dataclass
class QuickSort(SortAlgo):
    name: str = "Quick Sort"

    jobs: List[QuickSortJob] = field(default_factory=list)
    needs_partition: bool = True

    # scratch for the partition in progress
    low: int = 0
    high: int = 0
    pivot: int = 0
    i: int = -1
    j: int = 0

    def _reset_state(self) -> None:
        self.jobs = []
        self.needs_partition = True
        n = len(self.arr or [])
        self.low, self.high = 0, n - 1
        self.pivot = 0
        self.i, self.j = -1, 0
        if n > 1:
            self.jobs.append(QuickSortJob(0, n - 1))
        elif self.arr is not None:
            self._finish()

    def step(self) -> None:
        if self.arr is None:
            return
        if self.is_sorted:
            self.current_line = 15
            return

        self.marks.clear()
        self.current_line = 1  # if low < high
        if not self.jobs and self.needs_partition:
            self._finish()
            return

        arr = self.arr
        if self.needs_partition:
            self.current_line = 2  # p = partition(A, low, high)
            job = self.jobs.pop()
            self.low, self.high = job.low, job.high
            self.pivot = arr[self.high]
            self.array_accesses += 1
            self.i = self.low - 1
            self.j = self.low
            self.needs_partition = False
            self.current_line = 8  # pivot = A[high]

        self.marks[self.high] = BarMark.PIVOT
        if self.i >= self.low:
            self.marks[self.i] = BarMark.COMPARE
        if self.j < self.high:
            self.marks[self.j] = BarMark.COMPARE

        self.current_line = 10  # for j = low to high - 1
        if self.j < self.high:
            self.current_line = 11  # if A[j] < pivot
            self.comparisons += 1
            self.array_accesses += 1
            if arr[self.j] < self.pivot:
                self.i += 1
                self.current_line = 12  # i = i + 1
                self._swap(self.i, self.j)
                self.marks[self.i] = self.marks[self.j] = BarMark.SWAP
                self.current_line = 13  # swap(A[i], A[j])
            self.j += 1
            return

        p = self.i + 1
        self._swap(p, self.high)
        self.settled.add(p)
        self.current_line = 16  # swap(A[i+1], A[high])

        self.current_line = 3  # quickSort(A, low, p - 1)
        if self.low < p - 1:
            self.jobs.append(QuickSortJob(self.low, p - 1))
        elif self.low == p - 1:
            self.settled.add(self.low)

        self.current_line = 4  # quickSort(A, p + 1, high)
        if p + 1 < self.high:
            self.jobs.append(QuickSortJob(p + 1, self.high))
        elif p + 1 == self.high:
            self.settled.add(self.high)

        self.needs_partition = True
