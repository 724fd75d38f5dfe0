import pytest
from typing import Optional

from flipbot.othello import rules
from flipbot.othello.board import BLACK, WHITE, Board
from flipbot.othello.game import GameState, PieceCount
from flipbot.othello.position import Position, all_positions


@pytest.fixture
def state() -> GameState:
    return GameState.new()


def test_new(state: GameState) -> None:
    assert state.board == Board.start()
    assert state.current_player == BLACK
    assert state.moves == []
    assert state.last_move() is None
    assert state.count_pieces() == PieceCount(black=2, white=2)


def test_make_move(state: GameState) -> None:
    assert state.make_move((2, 3), BLACK)

    assert state.board.get_square((2, 3)) == BLACK
    assert state.board.get_square((3, 3)) == BLACK
    assert state.count_pieces() == PieceCount(black=4, white=1)
    assert state.current_player == WHITE
    assert state.last_move() == (2, 3)


@pytest.mark.parametrize(
    ["pos", "player"],
    [
        pytest.param((0, 0), BLACK, id="no-captures"),
        pytest.param((3, 3), BLACK, id="occupied"),
        pytest.param((2, 3), WHITE, id="wrong-color"),
        pytest.param((8, 8), BLACK, id="off-board"),
    ],
)
def test_make_move_illegal(state: GameState, pos: Position, player: int) -> None:
    assert not state.make_move(pos, player)

    assert state.board == Board.start()
    assert state.current_player == BLACK
    assert state.moves == []


def test_make_move_changes_only_move_and_flips(state: GameState) -> None:
    # Follow the first legal move for a number of plies.
    for _ in range(20):
        player = state.current_player
        moves = state.legal_moves(player)

        if not moves:
            state.pass_turn()
            continue

        move = moves[0]
        before = state.board.copy()
        total_before = state.count_pieces().total()
        flipped = rules.flippable(before, move, player)

        assert state.make_move(move, player)
        assert state.count_pieces().total() == total_before + 1

        for pos in all_positions():
            if pos == move or pos in flipped:
                assert state.board.get_square(pos) == player
            else:
                assert state.board.get_square(pos) == before.get_square(pos)


def test_legal_moves(state: GameState) -> None:
    assert state.legal_moves(BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert state.has_moves(WHITE)


def test_pass_turn(state: GameState) -> None:
    state.pass_turn()
    assert state.current_player == WHITE
    assert state.board == Board.start()

    state.pass_turn()
    assert state.current_player == BLACK


@pytest.mark.parametrize(
    ["board", "expected"],
    [
        pytest.param(Board.start(), False, id="start"),
        pytest.param(Board.from_string("x" * 32 + "o" * 32), True, id="full"),
        pytest.param(Board.empty(), True, id="empty"),
        pytest.param(Board.from_string("x" + "." * 63), True, id="black-only"),
        pytest.param(
            Board.from_string("x.o" + "." * 61), True, id="no-line-possible"
        ),
    ],
)
def test_is_terminal(board: Board, expected: bool) -> None:
    assert GameState(board, BLACK).is_terminal() == expected
    assert GameState(board, WHITE).is_terminal() == expected


def test_is_board_full() -> None:
    assert GameState(Board.from_string("x" * 64), BLACK).is_board_full()
    assert not GameState.new().is_board_full()


@pytest.mark.parametrize(
    ["string", "expected"],
    [
        pytest.param("x" * 40 + "o" * 24, BLACK, id="black-wins"),
        pytest.param("x" * 20 + "o" * 44, WHITE, id="white-wins"),
        pytest.param("x" * 32 + "o" * 32, None, id="draw"),
    ],
)
def test_winner(string: str, expected: Optional[int]) -> None:
    assert GameState(Board.from_string(string), BLACK).winner() == expected


def test_piece_count() -> None:
    count = PieceCount(black=3, white=5)
    assert count.total() == 8
    assert repr(count) == "PieceCount(black=3, white=5)"

    with pytest.raises(TypeError):
        count == (3, 5)
