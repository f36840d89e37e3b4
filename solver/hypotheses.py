"""Region claims: for each digit still missing from a house, the cells of that house that can still take it."""

# hypotheses.py
# Generation order is digit-major: for d in 1..9 -> boxes, rows, columns.
# The list is kept sorted by number of positions (ascending); ties keep generation order.

from __future__ import annotations

from dataclasses import dataclass, field

from .board import DIGITS, Board
from .solver_core import HOUSES, has_candidate
from types_sudoku import Position


@dataclass
class Hypothesis:
    digit: int
    region: str  # e.g. 'box4', 'row0', 'col8'; bookkeeping only
    positions: list[Position] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.positions)

    def same_claim(self, other: "Hypothesis") -> bool:
        return self.digit == other.digit and self.positions == other.positions


def insert_sorted(hyp: Hypothesis, hypotheses: list[Hypothesis]) -> bool:
    """Insert after every entry with size <= hyp.size. Returns False if an identical claim
    (same digit, same ordered positions) is already in the list.
    """
    pos = 0
    for other in hypotheses:
        if other.same_claim(hyp):
            return False
        if other.size <= hyp.size:
            pos += 1
    hypotheses.insert(pos, hyp)
    return True


def generate_hypotheses(board: Board) -> list[Hypothesis]:
    """Build the ordered claim list for a propagated board."""
    hypotheses: list[Hypothesis] = []
    for d in DIGITS:
        for kind, index, cells in HOUSES:
            if any(board.value(r, c) == d for r, c in cells):
                continue
            hyp = Hypothesis(d, f"{kind}{index}", [(r, c) for r, c in cells if has_candidate(board, r, c, d)])
            insert_sorted(hyp, hypotheses)
    return hypotheses
