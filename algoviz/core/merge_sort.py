# algoviz/core/merge_sort.py
#!/usr/bin/env python3
"""
Iterative bottom-up Merge Sort.

reset() precomputes every merge (widths 1, 2, 4, ...) as a MergeJob and
stacks them so the first one generated sits on top. Each step() moves one
element of the top job from the `temp_array` snapshot into the live array; once a
job's two runs are exhausted the merged range is copied back into `temp_array`
for the next width and the job is popped.
"""

from dataclasses import dataclass, field
from typing import List

from algoviz.core.sort_base import SortAlgo
from algoviz.core.types import BarMark, MergeJob


def plan_merges(n: int) -> List[MergeJob]:
    """Bottom-up merge jobs in execution order."""
    jobs: List[MergeJob] = []
    size = 1
    while size <= n - 1:
        left = 0
        while left < n - 1:
            mid = min(left + size - 1, n - 1)
            right = min(left + 2 * size - 1, n - 1)
            jobs.append(MergeJob(left=left, mid=mid, right=right, i=left, j=mid + 1, k=left))
            left += 2 * size
        size *= 2
    return jobs


@dataclass
class MergeSort(SortAlgo):
    name: str = "Merge Sort"

    jobs: List[MergeJob] = field(default_factory=list)  # top of stack is jobs[-1]
    temp_array: List[int] = field(default_factory=list)

    def _reset_state(self) -> None:
        arr = self.arr or []
        self.temp_array = list(arr)
        self.jobs = list(reversed(plan_merges(len(arr))))

    def step(self) -> None:
        if self.arr is None:
            return
        if self.is_sorted:
            self.current_line = 7
            return

        self.marks.clear()
        self.current_line = 2  # for width = 1 to n-1
        if not self.jobs:
            self._finish()
            return

        self.current_line = 3  # for left = 0 to n-1
        job = self.jobs[-1]
        for idx in range(job.left, job.right + 1):
            self.marks[idx] = BarMark.COMPARE

        self.current_line = 6  # merge(A, left, mid, right)
        arr, temp = self.arr, self.temp_array
        left_live = job.i <= job.mid
        right_live = job.j <= job.right

        if left_live and right_live:
            self.comparisons += 1
            self.array_accesses += 2
            if temp[job.i] <= temp[job.j]:
                arr[job.k] = temp[job.i]
                job.i += 1
            else:
                arr[job.k] = temp[job.j]
                job.j += 1
            self.array_accesses += 2
            self.marks[job.k] = BarMark.SWAP
            job.k += 1
        elif left_live:
            arr[job.k] = temp[job.i]
            self.array_accesses += 2
            self.marks[job.k] = BarMark.SWAP
            job.i += 1
            job.k += 1
        elif right_live:
            arr[job.k] = temp[job.j]
            self.array_accesses += 2
            self.marks[job.k] = BarMark.SWAP
            job.j += 1
            job.k += 1
        else:
            for idx in range(job.left, job.right + 1):
                temp[idx] = arr[idx]
                self.array_accesses += 2
                self.marks[idx] = BarMark.MERGED
            self.jobs.pop()
