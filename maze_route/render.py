"""
render.py

Draw a route back onto its maze as ASCII line-art.

Each path cell gets a Link mask: VISITED plus one direction bit for every
orthogonal neighbour it is connected to along the path. The mask picks the
glyph:

- 'o' visited, no connections (hub / isolated point)
- '|' and '-' straight runs and dead ends
- '/' for UP+LEFT and RIGHT+DOWN turns
- '\\' for UP+RIGHT and LEFT+DOWN turns
- '+' three or four connections (a path that crosses itself)

A cell listed more than once keeps the bits of every visit, so a path that
runs through itself shows a junction instead of losing earlier links.

Start and target always draw as 's' and 't'. Walls draw as '#', or 'X' when
a path runs through them.

Usage:
    from maze_route import parse_grid, priority_search
    from maze_route.render import render_path

    grid = parse_grid(open('maze.txt', encoding='utf-8').read())
    print(render_path(grid, priority_search(grid)), end='')
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .grid import Grid
from .types import CellState, Link, Point, DIRECTIONS

DEFAULT_SYMBOLS: Dict[str, str] = {
    # cells
    'start': 's',
    'target': 't',
    'wall': '#',
    'crossed_wall': 'X',
    'blank': ' ',
    # path
    'hub': 'o',
    'vertical': '|',
    'horizontal': '-',
    'slash': '/',
    'backslash': '\\',
    'junction': '+',
}

# Direction bits of a visited cell -> symbol name
GLYPHS: Dict[Link, str] = {
    Link.NONE: 'hub',
    Link.UP: 'vertical',
    Link.DOWN: 'vertical',
    Link.UP | Link.DOWN: 'vertical',
    Link.LEFT: 'horizontal',
    Link.RIGHT: 'horizontal',
    Link.LEFT | Link.RIGHT: 'horizontal',
    Link.UP | Link.LEFT: 'slash',
    Link.RIGHT | Link.DOWN: 'slash',
    Link.UP | Link.RIGHT: 'backslash',
    Link.LEFT | Link.DOWN: 'backslash',
    Link.UP | Link.LEFT | Link.RIGHT: 'junction',
    Link.UP | Link.LEFT | Link.DOWN: 'junction',
    Link.UP | Link.RIGHT | Link.DOWN: 'junction',
    Link.LEFT | Link.RIGHT | Link.DOWN: 'junction',
    DIRECTIONS: 'junction',
}


class GlyphError(RuntimeError):
    """A Link mask the encoder can never produce."""


def compute_intersections(grid: Grid, path: Iterable[Point]) -> List[Link]:
    intersections: List[Link] = [Link.NONE] * (grid.width * grid.height)
    prev_index: Optional[int] = None

    for point in path:
        if not grid.in_bounds(point):
            # Skip stray waypoints and break the chain
            prev_index = None
            continue

        index = grid.index_of(point)
        intersections[index] |= Link.VISITED

        if prev_index is not None:
            if index == prev_index - grid.width:
                intersections[index] |= Link.DOWN
                intersections[prev_index] |= Link.UP
            elif index == prev_index - 1 and point.x < grid.width - 1:
                intersections[index] |= Link.RIGHT
                intersections[prev_index] |= Link.LEFT
            elif index == prev_index + 1 and point.x > 0:
                intersections[index] |= Link.LEFT
                intersections[prev_index] |= Link.RIGHT
            elif index == prev_index + grid.width:
                intersections[index] |= Link.UP
                intersections[prev_index] |= Link.DOWN
        prev_index = index

    return intersections


def glyph_for(mask: Link, symbols: Optional[Dict[str, str]] = None) -> str:
    syms = dict(DEFAULT_SYMBOLS)
    if symbols:
        syms.update(symbols)
    if mask == Link.NONE:
        return syms['blank']
    if not mask & Link.VISITED:
        raise GlyphError(f"direction bits without a visited cell: {mask!r}")
    return syms[GLYPHS[mask & DIRECTIONS]]


def render_path(grid: Grid, path: Iterable[Point], symbols: Optional[Dict[str, str]] = None) -> str:
    syms = dict(DEFAULT_SYMBOLS)
    if symbols:
        syms.update(symbols)

    intersections = compute_intersections(grid, path)
    lines: List[str] = []
    for y in range(grid.height):
        row: List[str] = []
        for x in range(grid.width):
            point = Point(x, y)
            mask = intersections[grid.index_of(point)]
            if grid.cell_at(point) == CellState.WALL:
                row.append(syms['wall'] if mask == Link.NONE else syms['crossed_wall'])
            elif point == grid.start:
                row.append(syms['start'])
            elif point == grid.target:
                row.append(syms['target'])
            else:
                row.append(glyph_for(mask, syms))
        lines.append(''.join(row) + '\n')
    return ''.join(lines)
