# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def grid_from_string(s):
    return [[int(ch) for ch in s[r * 9:(r + 1) * 9]] for r in range(9)]


EASY = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"
EASY_SOLUTION = "483921657967345821251876493548132976729564138136798245372689514814253769695417382"

# 17 clues, unique solution
HARD = "400000805030000000000700000020000060000080400000010000000603070500200000104000000"
HARD_SOLUTION = "417369825632158947958724316825437169791586432346912758289643571573291684164875293"


@pytest.fixture
def easy_grid():
    return grid_from_string(EASY)


@pytest.fixture
def easy_solution():
    return grid_from_string(EASY_SOLUTION)


@pytest.fixture
def hard_grid():
    return grid_from_string(HARD)


@pytest.fixture
def hard_solution():
    return grid_from_string(HARD_SOLUTION)


@pytest.fixture
def empty_grid():
    return [[0] * 9 for _ in range(9)]
