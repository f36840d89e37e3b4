"""Core Sudoku utilities used by the search engine: index math, house iterators, candidate propagation and the feasibility check."""

# solver_core.py
# - candidate computation (base elimination against row / col / box)
# - locked candidates, pointing (box -> row, box -> col) and claiming (row -> box, col -> box)
# - feasibility: every pending digit of every house keeps a position
# Coordinates are 0-based (row, col); cell keys for tool output are 1-based ('r1c1').

from __future__ import annotations

from .board import DIGITS, EMPTY, Board
from types_sudoku import Candidates, Position


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def which_box(r: int, c: int) -> int:
    return 3 * (r // 3) + (c // 3)


def unit_cells_row(r: int) -> list[Position]:
    return [(r, c) for c in range(9)]


def unit_cells_col(c: int) -> list[Position]:
    return [(r, c) for r in range(9)]


def unit_cells_box(b: int) -> list[Position]:
    r0 = 3 * (b // 3)
    c0 = 3 * (b % 3)
    return [(r0 + i, c0 + j) for i in range(3) for j in range(3)]


# (kind, index, cells) for the 27 houses, boxes first, then rows, then columns
HOUSES: list[tuple[str, int, list[Position]]] = (
    [("box", b, unit_cells_box(b)) for b in range(9)]
    + [("row", r, unit_cells_row(r)) for r in range(9)]
    + [("col", c, unit_cells_col(c)) for c in range(9)]
)


def row_values(board: Board, r: int) -> set:
    return {board.value(r, c) for c in range(9)} - {EMPTY}


def col_values(board: Board, c: int) -> set:
    return {board.value(r, c) for r in range(9)} - {EMPTY}


def box_values(board: Board, r: int, c: int) -> set:
    return {board.value(rr, cc) for rr, cc in unit_cells_box(which_box(r, c))} - {EMPTY}


def has_candidate(board: Board, r: int, c: int, d: int) -> bool:
    cell = board.cell(r, c)
    return cell.value == EMPTY and d in cell.candidates


def conflicts(board: Board, r: int, c: int, d: int) -> bool:
    """True if digit d is already placed in the row, column or box of (r, c)."""
    return d in row_values(board, r) or d in col_values(board, c) or d in box_values(board, r, c)


def compute_base_candidates(board: Board) -> None:
    for r in range(9):
        for c in range(9):
            cell = board.cell(r, c)
            if cell.value == EMPTY:
                used = box_values(board, r, c) | row_values(board, r) | col_values(board, c)
                cell.candidates = {d for d in DIGITS if d not in used}


def eliminate_locked_pointing(board: Board) -> int:
    """If in a box a digit's candidates lie in a single row (or column), eliminate that digit
    from the rest of that row (or column) outside the box. Returns the number of eliminations.
    """
    removed = 0
    for b in range(9):
        cells = unit_cells_box(b)
        for d in DIGITS:
            locs = [(r, c) for (r, c) in cells if has_candidate(board, r, c, d)]
            if not locs:
                continue
            rows = {r for r, _ in locs}
            cols = {c for _, c in locs}
            if len(rows) == 1:
                r = rows.pop()
                for c in range(9):
                    if c // 3 != b % 3 and has_candidate(board, r, c, d):
                        board.cell(r, c).candidates.discard(d)
                        removed += 1
            if len(cols) == 1:
                c = cols.pop()
                for r in range(9):
                    if r // 3 != b // 3 and has_candidate(board, r, c, d):
                        board.cell(r, c).candidates.discard(d)
                        removed += 1
    return removed


def eliminate_locked_claiming_rows(board: Board) -> int:
    """If in a row a digit's candidates are confined to a single box, eliminate that digit
    from the other rows of that box.
    """
    removed = 0
    for r in range(9):
        for d in DIGITS:
            boxes = {which_box(r, c) for c in range(9) if has_candidate(board, r, c, d)}
            if len(boxes) != 1:
                continue
            for rr, cc in unit_cells_box(boxes.pop()):
                if rr != r and has_candidate(board, rr, cc, d):
                    board.cell(rr, cc).candidates.discard(d)
                    removed += 1
    return removed


def eliminate_locked_claiming_cols(board: Board) -> int:
    """Column version of eliminate_locked_claiming_rows."""
    removed = 0
    for c in range(9):
        for d in DIGITS:
            boxes = {which_box(r, c) for r in range(9) if has_candidate(board, r, c, d)}
            if len(boxes) != 1:
                continue
            for rr, cc in unit_cells_box(boxes.pop()):
                if cc != c and has_candidate(board, rr, cc, d):
                    board.cell(rr, cc).candidates.discard(d)
                    removed += 1
    return removed


def propagate_candidates(board: Board) -> int:
    """Recompute the candidates of every empty cell, then run one pass of the locked-candidate
    eliminations (pointing, then claiming by rows, then claiming by columns).

    Mutates the board in place and returns how many candidates the eliminations removed.
    Running it again without a placement in between changes nothing.
    """
    compute_base_candidates(board)
    removed = eliminate_locked_pointing(board)
    removed += eliminate_locked_claiming_rows(board)
    removed += eliminate_locked_claiming_cols(board)
    return removed


def house_is_feasible(board: Board, cells: list[Position]) -> bool:
    placed = [board.value(r, c) for r, c in cells if board.value(r, c) != EMPTY]
    if len(placed) != len(set(placed)):
        return False
    for d in DIGITS:
        if d in placed:
            continue
        if not any(has_candidate(board, r, c, d) for r, c in cells):
            return False
    return True


def is_feasible(board: Board) -> bool:
    """Every digit pending in every house must keep at least one candidate position,
    and no house may hold the same digit twice.
    """
    return all(house_is_feasible(board, cells) for _, _, cells in HOUSES)


def candidates_map(board: Board) -> Candidates:
    """Tool-friendly view of the current candidates: {'r1c2': [1, 2, 5], ...}."""
    return {
        rc_to_key(r, c): sorted(board.cell(r, c).candidates)
        for r, c in board.empty_positions()
    }
