# tests/test_hypotheses.py
from solver.board import Board
from solver.hypotheses import Hypothesis, generate_hypotheses, insert_sorted
from solver.solver_core import propagate_candidates

HOUSE_OFFSET = {"box": 0, "row": 9, "col": 18}


def generation_key(hyp):
    kind, index = hyp.region[:3], int(hyp.region[3:])
    return hyp.digit * 27 + HOUSE_OFFSET[kind] + index


def test_insert_sorted_keeps_ties_in_arrival_order():
    hyps = [
        Hypothesis(1, "box0", [(0, 0)]),
        Hypothesis(1, "row1", [(1, 0), (1, 1)]),
        Hypothesis(2, "row2", [(2, 0), (2, 1)]),
        Hypothesis(3, "col0", [(0, 0), (1, 0), (2, 0)]),
    ]
    new = Hypothesis(4, "col1", [(0, 1), (1, 1)])
    assert insert_sorted(new, hyps)
    assert hyps.index(new) == 3
    smallest = Hypothesis(5, "box8", [(8, 8)])
    insert_sorted(smallest, hyps)
    assert hyps.index(smallest) == 1


def test_insert_sorted_suppresses_same_claim():
    hyps = [Hypothesis(7, "box0", [(0, 1), (0, 2)])]
    assert not insert_sorted(Hypothesis(7, "row0", [(0, 1), (0, 2)]), hyps)
    assert len(hyps) == 1 and hyps[0].region == "box0"
    # same cells, other digit: a different claim
    assert insert_sorted(Hypothesis(8, "row0", [(0, 1), (0, 2)]), hyps)


def test_generated_list_is_sorted_and_stable(hard_grid):
    board = Board.from_grid(hard_grid)
    propagate_candidates(board)
    hyps = generate_hypotheses(board)
    assert hyps
    sizes = [h.size for h in hyps]
    assert sizes == sorted(sizes)
    for a, b in zip(hyps, hyps[1:]):
        if a.size == b.size:
            assert generation_key(a) < generation_key(b)


def test_generated_claims_match_candidates(hard_grid):
    board = Board.from_grid(hard_grid)
    propagate_candidates(board)
    for hyp in generate_hypotheses(board):
        for r, c in hyp.positions:
            assert board.value(r, c) == 0
            assert hyp.digit in board.cell(r, c).candidates


def test_no_claim_for_placed_digit(easy_solution):
    board = Board.from_grid(easy_solution)
    propagate_candidates(board)
    assert generate_hypotheses(board) == []


def test_single_blank_gives_one_claim(easy_solution):
    missing = easy_solution[4][4]
    easy_solution[4][4] = 0
    board = Board.from_grid(easy_solution)
    propagate_candidates(board)
    hyps = generate_hypotheses(board)
    # box, row and column claims are identical; only the box claim is kept
    assert len(hyps) == 1
    assert hyps[0].digit == missing
    assert hyps[0].positions == [(4, 4)]
    assert hyps[0].region == "box4"
