from __future__ import annotations

from typing import Optional

from flipbot.ai.selector import MoveSelector
from flipbot.othello.game import GameState, PieceCount
from flipbot.othello.position import Position

_selector = MoveSelector()


def new_game() -> GameState:
    return GameState.new()


def legal_moves(state: GameState, player: int) -> list[Position]:
    return state.legal_moves(player)


def make_move(state: GameState, pos: Position, player: int) -> bool:
    """Returns False for illegal moves, the game state is not changed in that case."""
    return state.make_move(pos, player)


def best_move(state: GameState, player: int) -> Optional[Position]:
    return _selector.best_move(state.board, player)


def count_pieces(state: GameState) -> PieceCount:
    return state.count_pieces()


def is_terminal(state: GameState) -> bool:
    return state.is_terminal()
