"""Board state for the search engine: cells with a value and a candidate set, plus the free-cell count."""

# board.py
# Cell value 0 = empty. Coordinates inside the engine are 0-based (row, col).

from __future__ import annotations

from typing import Iterable, Iterator

from types_sudoku import Grid, Position, Snapshot

EMPTY = 0
DIGITS = tuple(range(1, 10))


def normalize_value(raw) -> int:
    """Map an input symbol to a digit or EMPTY. '-' (and anything not 1..9) is empty."""
    if isinstance(raw, bool):
        return EMPTY
    if isinstance(raw, int):
        return raw if 1 <= raw <= 9 else EMPTY
    if isinstance(raw, str) and len(raw.strip()) == 1 and raw.strip() in "123456789":
        return int(raw.strip())
    return EMPTY


class Cell:
    __slots__ = ("value", "candidates")

    def __init__(self, value: int = EMPTY):
        self.value = value
        self.candidates: set[int] = set() if value != EMPTY else set(DIGITS)

    @property
    def is_empty(self) -> bool:
        return self.value == EMPTY

    def place(self, digit: int) -> None:
        # a filled cell has no pending candidates
        self.value = digit
        self.candidates = set()

    def clear(self) -> None:
        self.value = EMPTY
        self.candidates = set(DIGITS)

    def __repr__(self) -> str:
        if self.value:
            return f"Cell({self.value})"
        return f"Cell(-, {sorted(self.candidates)})"


class Board:
    """9x9 grid of Cells. Owned by exactly one search frame at a time."""

    def __init__(self, cells: list[list[Cell]]):
        self.cells = cells
        self.free_count = sum(1 for row in cells for cell in row if cell.is_empty)

    @classmethod
    def from_grid(cls, grid: Iterable[Iterable]) -> "Board":
        rows = [list(row) for row in grid]
        if len(rows) != 9 or any(len(row) != 9 for row in rows):
            raise ValueError("grid must be 9 rows of 9 cells")
        return cls([[Cell(normalize_value(v)) for v in row] for row in rows])

    def clone(self) -> "Board":
        """Copy of the values only; candidates start full and are recomputed by propagation."""
        return Board([[Cell(cell.value) for cell in row] for row in self.cells])

    def cell(self, r: int, c: int) -> Cell:
        return self.cells[r][c]

    def value(self, r: int, c: int) -> int:
        return self.cells[r][c].value

    def place(self, pos: Position, digit: int) -> None:
        r, c = pos
        assert self.cells[r][c].is_empty, f"placing {digit} over filled cell {pos}"
        self.cells[r][c].place(digit)
        self.free_count -= 1

    def undo(self, pos: Position) -> None:
        r, c = pos
        assert not self.cells[r][c].is_empty, f"undo on empty cell {pos}"
        self.cells[r][c].clear()
        self.free_count += 1

    def empty_positions(self) -> Iterator[Position]:
        for r in range(9):
            for c in range(9):
                if self.cells[r][c].is_empty:
                    yield (r, c)

    def snapshot(self) -> Snapshot:
        return tuple(cell.value for row in self.cells for cell in row)

    def to_grid(self) -> Grid:
        return [[cell.value for cell in row] for row in self.cells]

    def check_invariants(self) -> bool:
        free = 0
        for row in self.cells:
            for cell in row:
                if cell.is_empty:
                    free += 1
                elif cell.candidates:
                    return False
        return free == self.free_count

    def __repr__(self) -> str:
        return f"Board(free={self.free_count})"
