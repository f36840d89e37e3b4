from __future__ import annotations
"""Tool-friendly helpers around the search engine: text parsing and rendering, sanity check,
candidates view and a solve call that reports counters and timing. Used by the CLI and the API.
"""

# sudoku_tools.py
import time
from typing import Dict, Iterable, List, Optional

from types_sudoku import Grid, SolvePayload, SolveStats

from .board import Board
from .search import SearchEngine
from .solver_core import HOUSES, candidates_map, propagate_candidates, rc_to_key

BLANK_TOKENS = ("-", ".", "0")
BORDER = "+-------+-------+-------+"


class PuzzleFormatError(ValueError):
    """Input text is not 9 lines of 9 tokens ('1'..'9' or '-')."""


def parse_grid_text(text: str) -> Grid:
    """Read 9 lines of 9 space-separated tokens; '-' marks an empty cell."""
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if len(lines) != 9:
        raise PuzzleFormatError(f"expected 9 lines, got {len(lines)}")
    grid: Grid = []
    for i, line in enumerate(lines, 1):
        tokens = line.split()
        if len(tokens) != 9:
            raise PuzzleFormatError(f"line {i}: expected 9 tokens, got {len(tokens)}")
        row = []
        for j, tok in enumerate(tokens, 1):
            if tok in BLANK_TOKENS:
                row.append(0)
            elif len(tok) == 1 and tok in "123456789":
                row.append(int(tok))
            else:
                raise PuzzleFormatError(f"line {i}, column {j}: invalid token {tok!r}")
        grid.append(row)
    return grid


def format_grid(grid: Optional[Grid], stats: Optional[SolveStats] = None) -> str:
    """Boxed rendering; empty cells show as '-'. With stats, the closing border carries
    'free - evaluated - repeated'.
    """
    if grid is None:
        grid = [[0] * 9 for _ in range(9)]
    out = [BORDER]
    free = 0
    for r, row in enumerate(grid):
        parts = []
        for c, v in enumerate(row):
            parts.append(str(v) if v else "-")
            if not v:
                free += 1
            if c in (2, 5):
                parts.append("|")
        out.append("| " + " ".join(parts) + " |")
        if r in (2, 5):
            out.append(BORDER)
    if stats is not None:
        out.append(f"{BORDER} {free:02d} - {stats['evaluated']} - {stats['repeated']}")
    else:
        out.append(BORDER)
    return "\n".join(out)


UNIT_LABEL = {"row": "r", "col": "c", "box": "b"}


def duplicates_in_unit(vals) -> set:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report givens overwritten in `current` and digits repeated within a row, column or box."""
    issues = []
    for r in range(9):
        for c in range(9):
            given = original[r][c]
            if given != 0 and current[r][c] not in (0, given):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": given, "found": current[r][c]})
    # rows, then columns, then boxes
    for kind in ("row", "col", "box"):
        for _, index, cells in (h for h in HOUSES if h[0] == kind):
            vals = [current[r][c] for r, c in cells]
            dups = duplicates_in_unit(vals)
            if dups:
                issues.append({
                    "type": "duplicate",
                    "unit": f"{UNIT_LABEL[kind]}{index + 1}",
                    "digits": sorted(dups),
                    "cells": [rc_to_key(r, c) for (r, c), v in zip(cells, vals) if v in dups],
                })
    return {"ok": len(issues) == 0, "issues": issues}


def is_solved(grid: Grid) -> bool:
    if any(v == 0 for row in grid for v in row):
        return False
    return sanity_check(grid, grid)["ok"]


def compute_candidates_tool(current: Grid) -> Dict:
    """Candidates of each empty cell after one full propagation pass. Returns {'candidates': {'r1c2': [1,2,5], ...}}."""
    board = Board.from_grid(current)
    propagate_candidates(board)
    return {"candidates": candidates_map(board)}


def solve_tool(current: Iterable[Iterable], indexed: bool = False) -> SolvePayload:
    engine = SearchEngine(indexed=indexed)
    t0 = time.perf_counter()
    solution = engine.solve(current)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    return {
        "solved": solution is not None,
        "solution": solution,
        "stats": engine.stats(),
        "elapsed_ms": round(elapsed_ms, 3),
    }


def grid_to_lines(grid: Grid) -> List[str]:
    """Inverse of parse_grid_text: one line of 9 tokens per row."""
    return [" ".join(str(v) if v else "-" for v in row) for row in grid]
