"""Maze route package.

Exposes public APIs for parsing mazes, finding routes and drawing them.
"""

from typing import Callable, Dict, List

from .types import (
    Point,
    CellState,
    Link,
)
from .grid import Grid, GridFormatError, parse_grid, read_grid, load_grid_from_file
from .flood import flood_fill
from .search import priority_search
from .render import render_path

ALGORITHMS: Dict[str, Callable[[Grid], List[Point]]] = {
    "search": priority_search,
    "flood": flood_fill,
}


def solve(grid: Grid, mode: str = "search") -> List[Point]:
    try:
        algorithm = ALGORITHMS[mode]
    except KeyError:
        raise ValueError(f"unknown mode {mode!r}; expected one of: {', '.join(ALGORITHMS)}") from None
    return algorithm(grid)


__all__ = [
    "Point",
    "CellState",
    "Link",
    "Grid",
    "GridFormatError",
    "parse_grid",
    "read_grid",
    "load_grid_from_file",
    "flood_fill",
    "priority_search",
    "render_path",
    "ALGORITHMS",
    "solve",
]
