from __future__ import annotations

import argparse
import sys
from typing import List

from . import ALGORITHMS, solve
from .grid import GridFormatError, load_grid_from_file, read_grid
from .render import render_path


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find a route through an ASCII maze and draw it.")
    parser.add_argument("maze", nargs="?", default="-", help="Path to maze file (stdin when omitted or '-')")
    parser.add_argument("--mode", choices=sorted(ALGORITHMS), default="search", help="Traversal to run")
    parser.add_argument("--stats", action="store_true", help="Print the traversal size to stderr")
    args = parser.parse_args(argv)

    try:
        if args.maze == "-":
            grid = read_grid(sys.stdin)
        else:
            grid = load_grid_from_file(args.maze)
    except GridFormatError as e:
        print(e, file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError):
        print(f"input file not valid: {args.maze}", file=sys.stderr)
        return 1

    path = solve(grid, args.mode)
    if args.stats:
        print(f"mode={args.mode} cells={len(path)}", file=sys.stderr)
    sys.stdout.write(render_path(grid, path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
