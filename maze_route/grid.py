from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple

from .types import CellState, Point, CARDINAL_STEPS


class GridFormatError(ValueError):
    """Raised when maze text cannot be turned into a Grid."""

    def __init__(self, message: str, x: Optional[int] = None, y: Optional[int] = None, char: Optional[str] = None):
        super().__init__(message)
        self.x = x
        self.y = y
        self.char = char


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    cells: Tuple[CellState, ...]
    start: Point
    target: Point

    def index_of(self, point: Point) -> int:
        # No bounds check: callers test in_bounds first
        return point.x + point.y * self.width

    def point_of(self, index: int) -> Point:
        return Point(index % self.width, index // self.width)

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def cell_at(self, point: Point) -> CellState:
        return self.cells[self.index_of(point)]

    def is_wall(self, point: Point) -> bool:
        return self.cell_at(point) == CellState.WALL

    def neighbors(self, point: Point, steps: Sequence[Tuple[int, int]] = CARDINAL_STEPS) -> List[Point]:
        """Orthogonal neighbors of ``point`` that lie inside the grid, in ``steps`` order."""
        result: List[Point] = []
        for dx, dy in steps:
            nxt = point.move(dx, dy)
            if self.in_bounds(nxt):
                result.append(nxt)
        return result


CHAR_TO_CELL = {
    "#": CellState.WALL,
    " ": CellState.EMPTY,
    "s": CellState.EMPTY,  # start (placed on an empty cell)
    "t": CellState.EMPTY,  # target (placed on an empty cell)
}


def parse_grid(text: str) -> Grid:
    """Build a Grid from maze text.

    One line per row. Rows shorter than the longest one are padded with
    empty cells, so a ragged row is passable past its drawn length.
    When ``s`` or ``t`` appears more than once the last one wins.
    """
    # Only "\n" ends a row; any other control character is a format error
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    height = len(lines)
    width = max((len(line) for line in lines), default=0)
    if height == 0 or width == 0:
        raise GridFormatError("empty maze")

    cells: List[CellState] = [CellState.EMPTY] * (width * height)
    start: Point | None = None
    target: Point | None = None

    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            cell = CHAR_TO_CELL.get(ch)
            if cell is None:
                raise GridFormatError(f"invalid character at ({x}, {y})", x=x, y=y, char=ch)
            cells[x + y * width] = cell
            if ch == "s":
                start = Point(x, y)
            elif ch == "t":
                target = Point(x, y)

    if start is None:
        raise GridFormatError("maze must define a start 's'")
    if target is None:
        raise GridFormatError("maze must define a target 't'")

    return Grid(
        width=width,
        height=height,
        cells=tuple(cells),
        start=start,
        target=target,
    )


def read_grid(stream: TextIO) -> Grid:
    return parse_grid(stream.read())


def load_grid_from_file(path: str | Path) -> Grid:
    text = Path(path).read_text(encoding="utf-8")
    return parse_grid(text)
