from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from typing import Tuple


class CellState(Enum):
    EMPTY = auto()
    WALL = auto()


class Link(IntFlag):
    """Per-cell connectivity bits written by the path encoder."""

    NONE = 0
    UP = 1
    LEFT = 2
    RIGHT = 4
    DOWN = 8
    VISITED = 16


DIRECTIONS = Link.UP | Link.LEFT | Link.RIGHT | Link.DOWN


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def manhattan_distance(self, other: "Point") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def move(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)


# Cardinal movement deltas (y grows downwards, row 0 is the first text line)
NORTH = (0, -1)
EAST = (1, 0)
SOUTH = (0, 1)
WEST = (-1, 0)

CARDINAL_STEPS = (NORTH, EAST, SOUTH, WEST)
# Flood fill expands y+1 first, then x+1, y-1, x-1
FLOOD_STEPS = (SOUTH, EAST, NORTH, WEST)
# Directed search expands east, south, west, north
SEARCH_STEPS = (EAST, SOUTH, WEST, NORTH)
