"""Directed search from the target back to the start.

The queue is ordered by Manhattan distance to the start alone, with the
largest distance popped first. Nothing accumulates path cost, so this is a
greedy best-first walk and the route it finds is not guaranteed shortest.
Equal scores pop the larger linear index first.
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Set, Tuple

from .grid import Grid
from .types import Point, SEARCH_STEPS


def manhattan(a: Point, b: Point) -> int:
    return a.manhattan_distance(b)


def reconstruct_path(previous: Dict[int, Point], start: Point, target: Point, width: int) -> List[Point]:
    # Walks predecessors from start; start is excluded, target is the last entry
    path: List[Point] = []
    current = start
    while current != target:
        came_from = previous[current.x + current.y * width]
        path.append(came_from)
        current = came_from
    return path


def priority_search(grid: Grid) -> List[Point]:
    previous: Dict[int, Point] = {}
    visited: Set[int] = set()

    # heapq is a min-heap: negate (score, index) to pop the largest pair first
    next_heap: List[Tuple[int, int]] = []
    seed = grid.target
    heapq.heappush(next_heap, (-manhattan(seed, grid.start), -grid.index_of(seed)))

    while next_heap:
        _, neg_index = heapq.heappop(next_heap)
        index = -neg_index
        current = grid.point_of(index)
        visited.add(index)

        if current == grid.start:
            return reconstruct_path(previous, grid.start, grid.target, grid.width)

        for neighbor in grid.neighbors(current, SEARCH_STEPS):
            n_index = grid.index_of(neighbor)
            if grid.is_wall(neighbor) or n_index in visited:
                continue
            previous[n_index] = current
            visited.add(n_index)
            heapq.heappush(next_heap, (-manhattan(neighbor, grid.start), -n_index))

    return []
