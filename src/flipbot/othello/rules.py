from __future__ import annotations

from itertools import count

from flipbot.othello.board import BLACK, WHITE, Board, opponent
from flipbot.othello.position import DIRECTIONS, Position, all_positions, is_on_board


def flippable(board: Board, pos: Position, player: int) -> set[Position]:
    """
    Returns the opponent discs that would be flipped if `player` places a disc on `pos`.
    An empty set means the move is not legal.
    """
    assert player in [BLACK, WHITE]

    if not is_on_board(pos) or not board.is_empty_square(pos):
        return set()

    row, col = pos
    other = opponent(player)
    flipped: set[Position] = set()

    for dr, dc in DIRECTIONS:
        line: list[Position] = []

        for d in count(1):
            square_pos = (row + dr * d, col + dc * d)

            if not is_on_board(square_pos):
                break

            square = board.get_square(square_pos)

            if square == other:
                line.append(square_pos)
                continue

            if square == player and line:
                flipped.update(line)
            break

    return flipped


def is_legal(board: Board, pos: Position, player: int) -> bool:
    return len(flippable(board, pos, player)) > 0


def legal_moves(board: Board, player: int) -> list[Position]:
    # Row-major order matters: move selection breaks ties on the first move.
    return [pos for pos in all_positions() if is_legal(board, pos, player)]


def has_legal_moves(board: Board, player: int) -> bool:
    return any(is_legal(board, pos, player) for pos in all_positions())


def apply_move(board: Board, pos: Position, player: int) -> set[Position]:
    """
    Places a disc and flips in place. Returns the flipped discs,
    the board is left untouched if that set is empty.
    """
    flipped = flippable(board, pos, player)

    if not flipped:
        return flipped

    board.set_square(pos, player)
    for flipped_pos in flipped:
        board.set_square(flipped_pos, player)

    return flipped


def simulate_move(board: Board, pos: Position, player: int) -> tuple[Board, int]:
    child = board.copy()
    flipped = apply_move(child, pos, player)
    return child, len(flipped)
