# algoviz/core/pseudocode.py
#!/usr/bin/env python3
"""Reference pseudocode per algorithm. An engine's `current_line` indexes into its listing."""

from typing import Dict, List

PSEUDOCODE: Dict[str, List[str]] = {
    "Bubble Sort": [
        "procedure bubbleSort(A)",
        " n = length(A)",
        " repeat",
        "  swapped = false",
        "  for i = 1 to n-1 do",
        "   if A[i-1] > A[i] then",
        "    swap(A[i-1], A[i])",
        "    swapped = true",
        "   end if",
        "  end for",
        "  n = n - 1",
        " until not swapped",
        "end procedure",
    ],
    "Selection Sort": [
        "procedure selectionSort(A)",
        " n = length(A)",
        " for i = 0 to n - 1 do",
        "  minIndex = i",
        "  for j = i + 1 to n do",
        "   if A[j] < A[minIndex] then",
        "    minIndex = j",
        "   end if",
        "  end for",
        "  swap(A[i], A[minIndex])",
        " end for",
        "end procedure",
    ],
    "Insertion Sort": [
        "procedure insertionSort(A)",
        " for i = 1 to length(A) - 1 do",
        "  key = A[i]",
        "  j = i - 1",
        "  while j >= 0 and A[j] > key do",
        "   A[j+1] = A[j]",
        "   j = j - 1",
        "  end while",
        "  A[j+1] = key",
        " end for",
        "end procedure",
    ],
    "Merge Sort": [
        "procedure mergeSort(A)",
        " for curr_size = 1 to n-1 by 2*curr_size",
        "  for left_start = 0 to n-1 by 2*curr_size",
        "   mid = ...",
        "   right_end = ...",
        "   merge(A,left_start,mid,right_end)",
        "  end for",
        " end for",
        "end procedure",
    ],
    "Quick Sort": [
        "procedure quickSort(A,low,high)",
        " if low < high",
        "  p = partition(A, low, high)",
        "  quickSort(A, low, p - 1)",
        "  quickSort(A, p + 1, high)",
        " end if",
        "end procedure",
        "procedure partition(A,low,high)",
        " pivot = A[high]",
        " i = low - 1",
        " for j = low to high - 1",
        "  if A[j] < pivot",
        "   i++",
        "   swap(A[i], A[j])",
        "  end if",
        " end for",
        " swap(A[i+1], A[high])",
        " return i + 1",
        "end procedure",
    ],
    "BFS": [
        "procedure BFS(graph,start,end)",
        " let Q be a queue",
        " Q.enqueue(start)",
        " mark start as visited",
        " while Q is not empty do",
        "  current = Q.dequeue()",
        "  if current is end then",
        "   return PathFound",
        "  end if",
        "  for each neighbor of current do",
        "   if neighbor is not visited then",
        "     mark neighbor as visited",
        "     Q.enqueue(neighbor)",
        "   end if",
        "  end for",
        " end while",
        " return PathNotFound",
        "end procedure",
    ],
    "DFS": [
        "procedure DFS(graph,start,end)",
        " let S be a stack",
        " S.push(start)",
        " while S is not empty do",
        "  current = S.pop()",
        "  if current is not visited then",
        "    mark current as visited",
        "    if current is end then",
        "      return PathFound",
        "    end if",
        "    for each neighbor of current do",
        "      S.push(neighbor)",
        "    end for",
        "  end if",
        " end while",
        " return PathNotFound",
        "end procedure",
    ],
    "A* Search": [
        "procedure A*(start, goal)",
        " openSet.add(start)",
        " while openSet is not empty",
        "  current = node in openSet with lowest fCost",
        "  if current == goal",
        "    return PathFound",
        "  end if",
        "  for each neighbor of current",
        "   tentative_gCost = gCost[current] + cost(neighbor)",
        "   if tentative_gCost < gCost[neighbor]",
        "    parent[neighbor] = current",
        "    gCost[neighbor] = tentative_gCost",
        "    fCost[neighbor] = gCost + heuristic",
        "    openSet.add(neighbor)",
        "   end if",
        "  end for",
        " end while",
        " return PathNotFound",
        "end procedure",
    ],
    "Dijkstra": [
        "procedure Dijkstra(graph, start, end)",
        " dist[source] = 0",
        " create vertex priority queue Q",
        " while Q is not empty",
        "  u = vertex in Q with min distance",
        "  remove u from Q",
        "  for each neighbor v of u",
        "   alt = dist[u] + length(u, v)",
        "   if alt < dist[v]",
        "    dist[v] = alt",
        "    prev[v] = u",
        "   end if",
        "  end for",
        " end while",
        "end procedure",
    ],
}


def lines_for(name: str) -> List[str]:
    return PSEUDOCODE.get(name, [])
