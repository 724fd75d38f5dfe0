import pytest

from flipbot.ai.evaluator import Evaluator
from flipbot.ai.selector import MoveSelector
from flipbot.othello import rules
from flipbot.othello.board import BLACK, WHITE, Board

# White can take a1 by flipping b1, besides the four regular opening replies.
BOARD_CORNER_AVAILABLE = Board.from_string(
    """
    . x o . . . . .
    . . . . . . . .
    . . . . . . . .
    . . . o x . . .
    . . . x o . . .
    . . . . . . . .
    . . . . . . . .
    . . . . . . . .
    """
)


@pytest.fixture
def selector() -> MoveSelector:
    return MoveSelector(Evaluator(), early_game_discs=20, flip_penalty=3)


def test_opening_ties_pick_first_move(selector: MoveSelector) -> None:
    # The four opening moves are symmetric, so they all score the same.
    ranked = selector.rank_moves(Board.start(), BLACK)
    assert ranked == [((2, 3), 11), ((3, 2), 11), ((4, 5), 11), ((5, 4), 11)]
    assert selector.best_move(Board.start(), BLACK) == (2, 3)


def test_early_game_flip_penalty() -> None:
    no_penalty = MoveSelector(Evaluator(), early_game_discs=0, flip_penalty=3)
    assert no_penalty.score_move(Board.start(), (2, 3), BLACK) == 14

    large_penalty = MoveSelector(Evaluator(), early_game_discs=20, flip_penalty=100)
    assert large_penalty.score_move(Board.start(), (2, 3), BLACK) == 14 - 100


def test_takes_corner(selector: MoveSelector) -> None:
    moves = rules.legal_moves(BOARD_CORNER_AVAILABLE, WHITE)
    assert (0, 0) in moves
    assert len(moves) > 1

    assert selector.best_move(BOARD_CORNER_AVAILABLE, WHITE) == (0, 0)


def test_no_legal_moves(selector: MoveSelector) -> None:
    assert selector.best_move(Board.empty(), WHITE) is None
    assert selector.best_move(Board.from_string("x" * 64), WHITE) is None
    assert selector.rank_moves(Board.empty(), BLACK) == []


def test_best_move_does_not_modify_board(selector: MoveSelector) -> None:
    board = BOARD_CORNER_AVAILABLE.copy()
    selector.best_move(board, WHITE)
    assert board == BOARD_CORNER_AVAILABLE


def test_best_move_is_highest_ranked(selector: MoveSelector) -> None:
    board = BOARD_CORNER_AVAILABLE
    ranked = selector.rank_moves(board, BLACK)
    best_score = max(score for _, score in ranked)
    first_best = next(move for move, score in ranked if score == best_score)

    assert selector.best_move(board, BLACK) == first_best


def test_best_move_is_deterministic(selector: MoveSelector) -> None:
    board = BOARD_CORNER_AVAILABLE
    assert selector.best_move(board, BLACK) == selector.best_move(board, BLACK)
