"""Depth-first search over region claims with forced placements and a registry of dead board states."""

# search.py
# Each recursive frame owns a private clone of the board:
#   propagate -> feasibility -> claims -> forced placements (repeat until none)
#   -> branch over the remaining claims, smallest first, undoing on failure.
# A state that fails the feasibility check or exhausts its claims is recorded as dead.

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .board import Board
from .hypotheses import Hypothesis, generate_hypotheses
from .solver_core import conflicts, is_feasible, propagate_candidates
from types_sudoku import Grid, Snapshot, SolveStats

logger = logging.getLogger(__name__)


class DeadStateRegistry:
    """Append-only store of board snapshots known to have no solution.

    Lookups scan the list for an exact match. With ``indexed=True`` a set of the same
    snapshots answers the lookup instead; the answers are identical.
    """

    def __init__(self, indexed: bool = False):
        self.indexed = indexed
        self._states: list[Snapshot] = []
        self._index: set[Snapshot] = set()

    def add(self, snapshot: Snapshot) -> None:
        self._states.append(snapshot)
        if self.indexed:
            self._index.add(snapshot)

    def __contains__(self, snapshot: Snapshot) -> bool:
        if self.indexed:
            return snapshot in self._index
        for state in self._states:
            if state == snapshot:
                return True
        return False

    def __len__(self) -> int:
        return len(self._states)

    def clear(self) -> None:
        self._states.clear()
        self._index.clear()


class SearchEngine:
    def __init__(self, indexed: bool = False):
        self.dead_states = DeadStateRegistry(indexed=indexed)
        self.reset()

    def reset(self) -> None:
        self.dead_states.clear()
        self.evaluated = 0
        self.repeated = 0
        self.forced = 0
        self.branches = 0

    def stats(self) -> SolveStats:
        return {
            "evaluated": self.evaluated,
            "repeated": self.repeated,
            "forced": self.forced,
            "branches": self.branches,
            "dead_states": len(self.dead_states),
        }

    def solve(self, grid: Iterable[Iterable]) -> Optional[Grid]:
        """Solve a 9x9 grid ('-', 0 or None for blanks). Returns the filled grid, or None
        when the puzzle has no solution.
        """
        self.reset()
        board = Board.from_grid(grid)
        logger.info("solving board with %d free cells", board.free_count)
        result = self.search(board)
        logger.info(
            "%s: %d states evaluated, %d repeated, %d forced, %d branches",
            "solved" if result is not None else "no solution",
            self.evaluated,
            self.repeated,
            self.forced,
            self.branches,
        )
        return result

    def mark_dead(self, board: Board) -> None:
        logger.debug("dead state registered (free=%d)", board.free_count)
        self.dead_states.add(board.snapshot())

    def search(self, board: Board) -> Optional[Grid]:
        """One frame of the search. The caller's board is never modified."""
        if board.snapshot() in self.dead_states:
            self.repeated += 1
            return None
        self.evaluated += 1

        tab = board.clone()
        hypotheses: list[Hypothesis] = []
        while True:
            propagate_candidates(tab)
            if not is_feasible(tab):
                self.mark_dead(tab)
                return None

            hypotheses = generate_hypotheses(tab)
            placed = 0
            used = 0
            for hyp in hypotheses:
                if hyp.size != 1:
                    break
                used += 1
                r, c = hyp.positions[0]
                if not tab.cell(r, c).is_empty:
                    continue
                if conflicts(tab, r, c, hyp.digit):
                    # two forced claims put the same digit in one house
                    self.mark_dead(tab)
                    return None
                tab.place((r, c), hyp.digit)
                self.forced += 1
                placed += 1
                logger.debug("forced r%dc%d = %d (%s)", r + 1, c + 1, hyp.digit, hyp.region)
            del hypotheses[:used]

            if tab.free_count == 0:
                return tab.to_grid()
            if placed == 0:
                break

        assert tab.check_invariants()
        for hyp in hypotheses:
            for pos in hyp.positions:
                tab.place(pos, hyp.digit)
                self.branches += 1
                if tab.free_count == 0:
                    return tab.to_grid()

                result = self.search(tab)
                if result is not None:
                    return result

                tab.undo(pos)

        self.mark_dead(tab)
        return None


def solve(grid: Iterable[Iterable], indexed: bool = False) -> Optional[Grid]:
    return SearchEngine(indexed=indexed).solve(grid)
