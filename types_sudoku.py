# types_sudoku.py
from __future__ import annotations

from typing import Optional, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Position = tuple[int, int]
"""A (row, col) coordinate, 0-based, as used inside the search engine."""

Snapshot = tuple[int, ...]
"""81 cell values in row-major order (0 = empty); the key of the dead-state registry."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class SolveStats(TypedDict):
    """Instrumentation counters of one solve; no meaning beyond diagnostics."""

    evaluated: int  # board states that went through propagation
    repeated: int  # states short-circuited by the dead-state registry
    forced: int  # forced placements written
    branches: int  # speculative placements tried
    dead_states: int  # entries in the registry when the solve ended


class SolvePayload(TypedDict):
    """Tool/API response of a solve request."""

    solved: bool
    solution: Optional[Grid]
    stats: SolveStats
    elapsed_ms: float
