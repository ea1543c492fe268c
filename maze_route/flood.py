from __future__ import annotations

from collections import deque
from typing import Deque, List, Set

from .grid import Grid
from .types import Point, FLOOD_STEPS


def flood_fill(grid: Grid) -> List[Point]:
    """Explore outward from the start cell in FIFO order.

    Returns the closed list: every processed cell in the order it was
    processed. Stops as soon as the target has been processed, so the
    result is the region explored so far and not a route.
    """
    open_set: Deque[Point] = deque([grid.start])
    # Cells that are or have been in the open queue
    seen: Set[Point] = {grid.start}
    closed_set: List[Point] = []

    while open_set:
        current = open_set.popleft()
        closed_set.append(current)

        if current == grid.target:
            break

        for nxt in grid.neighbors(current, FLOOD_STEPS):
            if nxt in seen or grid.is_wall(nxt):
                continue
            seen.add(nxt)
            open_set.append(nxt)

    return closed_set
