"""Console front end: read a puzzle (9 lines of 9 tokens, '-' for blanks), solve it, print the boxed grid with counters and elapsed time."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli --input puzzle.txt
#   python -m apps.cli.solve_cli < puzzle.txt
#   python -m apps.cli.solve_cli --input puzzle.txt --json --indexed
#
# Exit status: 0 solved, 1 no solution, 2 malformed input.

import argparse
import json
import logging
import sys
from pathlib import Path

from solver.sudoku_tools import PuzzleFormatError, format_grid, parse_grid_text, solve_tool

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


def read_puzzle(path):
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(args, out=None):
    out = out or sys.stdout
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    try:
        grid = parse_grid_text(read_puzzle(args.input))
    except (OSError, PuzzleFormatError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    payload = solve_tool(grid, indexed=args.indexed)
    if args.json:
        print(json.dumps(payload, indent=2), file=out)
    else:
        shown = payload["solution"] if payload["solved"] else grid
        if not payload["solved"]:
            print("No solution found.", file=out)
        print(format_grid(shown, payload["stats"]), file=out)
        print(f"\nElapsed: {payload['elapsed_ms']:.0f} ms\n", file=out)
    return EXIT_SOLVED if payload["solved"] else EXIT_NO_SOLUTION


def build_parser():
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku read as 9 lines of 9 tokens ('-' = blank).")
    ap.add_argument("--input", type=str, default=None, help="Puzzle file (default: stdin)")
    ap.add_argument("--json", action="store_true", help="Print the solve payload as JSON")
    ap.add_argument("--indexed", action="store_true", help="Hash-index the dead-state registry")
    ap.add_argument("--verbose", action="store_true", help="Log forced placements and dead states")
    return ap


def run():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    run()
