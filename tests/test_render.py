import pytest

from maze_route.grid import parse_grid
from maze_route.render import GlyphError, compute_intersections, glyph_for, render_path
from maze_route.search import priority_search
from maze_route.types import Link, Point


def test_straight_horizontal_run():
    grid = parse_grid("s   t")
    path = [Point(1, 0), Point(2, 0), Point(3, 0)]
    masks = compute_intersections(grid, path)
    assert masks[2] == Link.VISITED | Link.LEFT | Link.RIGHT
    assert masks[1] == Link.VISITED | Link.RIGHT
    assert masks[3] == Link.VISITED | Link.LEFT
    assert render_path(grid, path) == "s---t\n"


def test_round_trip_rendering():
    grid = parse_grid("s  #\n # #\n  t\n")
    out = render_path(grid, priority_search(grid))
    assert out == "s  #\n|# #\n\\-t \n"
    lines = out.splitlines()
    assert lines[0][0] == "s"
    assert lines[2][2] == "t"
    assert lines[0][3] == "#" and lines[1][1] == "#" and lines[1][3] == "#"


def test_turn_glyphs():
    grid = parse_grid("s  \n   \n  t")
    path = priority_search(grid)
    assert render_path(grid, path) == "s  \n|  \n\\-t\n"


def test_no_route_keeps_markers_and_walls():
    grid = parse_grid("s#t")
    assert render_path(grid, []) == "s#t\n"


def test_out_of_bounds_points_are_skipped():
    grid = parse_grid("s   t")
    path = [Point(1, 0), Point(99, 0), Point(2, 0), Point(-1, 0), Point(3, 0)]
    masks = compute_intersections(grid, path)
    assert masks[1] == Link.VISITED
    assert masks[2] == Link.VISITED
    assert render_path(grid, path) == "sooot\n"


def test_no_adjacency_across_row_boundary():
    grid = parse_grid("s  \n  t")
    # Index 2 and 3 are consecutive but sit on different rows
    masks = compute_intersections(grid, [Point(2, 0), Point(0, 1)])
    assert masks[2] == Link.VISITED
    assert masks[3] == Link.VISITED


def test_path_through_wall_is_flagged():
    grid = parse_grid("s#t")
    assert render_path(grid, [Point(1, 0)]) == "sXt\n"


def test_self_crossing_path_draws_junction():
    grid = parse_grid("s  \n   \n  t")
    path = [Point(1, 0), Point(1, 1), Point(1, 2), Point(0, 1), Point(1, 1), Point(2, 1)]
    assert render_path(grid, path) == "s| \n-+-\n |t\n"


def test_rendering_is_idempotent():
    grid = parse_grid("s    \n # # \n    t")
    path = priority_search(grid)
    assert render_path(grid, path) == render_path(grid, path)


def test_symbol_overrides():
    grid = parse_grid("s#  t")
    out = render_path(grid, [Point(2, 0), Point(3, 0)], symbols={"horizontal": "=", "wall": "@"})
    assert out == "s@==t\n"


def test_glyph_table():
    assert glyph_for(Link.NONE) == " "
    assert glyph_for(Link.VISITED) == "o"
    assert glyph_for(Link.VISITED | Link.UP | Link.DOWN) == "|"
    assert glyph_for(Link.VISITED | Link.RIGHT | Link.DOWN) == "/"
    assert glyph_for(Link.VISITED | Link.LEFT | Link.DOWN) == "\\"
    assert glyph_for(Link.VISITED | Link.UP | Link.LEFT | Link.RIGHT | Link.DOWN) == "+"


def test_direction_without_visited_is_an_internal_error():
    with pytest.raises(GlyphError):
        glyph_for(Link.UP | Link.LEFT)


def test_glyph_for_partial_symbol_overrides():
    assert glyph_for(Link.VISITED, {"hub": "*"}) == "*"
    assert glyph_for(Link.VISITED | Link.UP, {"hub": "*"}) == "|"
    assert glyph_for(Link.NONE, {"hub": "*"}) == " "
