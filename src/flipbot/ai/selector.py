from __future__ import annotations

from typing import Optional

from flipbot import config
from flipbot.ai.evaluator import Evaluator
from flipbot.othello import rules
from flipbot.othello.board import Board
from flipbot.othello.position import Position


class MoveSelector:
    """
    Greedy one-ply move choice: every legal move is tried on a copy of the board
    and the resulting position is scored by the evaluator.
    """

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        early_game_discs: int = config.EARLY_GAME_DISCS,
        flip_penalty: int = config.FLIP_PENALTY,
    ) -> None:
        if evaluator is None:
            evaluator = Evaluator()

        self.evaluator = evaluator
        self.early_game_discs = early_game_discs
        self.flip_penalty = flip_penalty

    def score_move(self, board: Board, move: Position, player: int) -> int:
        child, flip_count = rules.simulate_move(board, move, player)
        score = self.evaluator.evaluate(child, player)

        if board.count_discs() < self.early_game_discs:
            score -= flip_count * self.flip_penalty

        return score

    def rank_moves(self, board: Board, player: int) -> list[tuple[Position, int]]:
        return [
            (move, self.score_move(board, move, player))
            for move in rules.legal_moves(board, player)
        ]

    def best_move(self, board: Board, player: int) -> Optional[Position]:
        best: Optional[Position] = None
        best_score = 0

        for move, score in self.rank_moves(board, player):
            # Strictly greater: the first move in row-major order wins ties.
            if best is None or score > best_score:
                best = move
                best_score = score

        return best
