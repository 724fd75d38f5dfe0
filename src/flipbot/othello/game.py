from __future__ import annotations

from typing import Optional

from flipbot.othello import rules
from flipbot.othello.board import BLACK, WHITE, Board, opponent
from flipbot.othello.position import Position


class PieceCount:
    def __init__(self, black: int, white: int) -> None:
        self.black = black
        self.white = white

    def total(self) -> int:
        return self.black + self.white

    def __repr__(self) -> str:
        return f"PieceCount(black={self.black}, white={self.white})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PieceCount):
            raise TypeError(f"Cannot compare PieceCount with {type(other)}")

        return (self.black, self.white) == (other.black, other.white)


class GameState:
    """
    Live game: the board and the color to move.
    All mutation goes through `make_move()` and `pass_turn()`.
    """

    def __init__(self, board: Board, current_player: int) -> None:
        assert current_player in [BLACK, WHITE]

        self.board = board
        self.current_player = current_player
        self.moves: list[Position] = []

    @classmethod
    def new(cls) -> GameState:
        return GameState(Board.start(), BLACK)

    def __repr__(self) -> str:
        return f"GameState({self.board!r}, {self.current_player})"

    def make_move(self, pos: Position, player: int) -> bool:
        flipped = rules.apply_move(self.board, pos, player)

        if not flipped:
            return False

        self.moves.append(pos)
        self.current_player = opponent(player)
        return True

    def pass_turn(self) -> None:
        self.current_player = opponent(self.current_player)

    def legal_moves(self, player: int) -> list[Position]:
        return rules.legal_moves(self.board, player)

    def has_moves(self, player: int) -> bool:
        return rules.has_legal_moves(self.board, player)

    def last_move(self) -> Optional[Position]:
        if not self.moves:
            return None
        return self.moves[-1]

    def count_pieces(self) -> PieceCount:
        return PieceCount(self.board.count(BLACK), self.board.count(WHITE))

    def is_board_full(self) -> bool:
        return self.board.is_full()

    def is_terminal(self) -> bool:
        return not (self.has_moves(BLACK) or self.has_moves(WHITE))

    def winner(self) -> Optional[int]:
        pieces = self.count_pieces()

        if pieces.black > pieces.white:
            return BLACK
        if pieces.white > pieces.black:
            return WHITE
        return None
