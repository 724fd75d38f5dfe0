from __future__ import annotations

from typing import Callable, Optional

from flipbot.othello import rules
from flipbot.othello.board import BLACK, EMPTY, WHITE, Board, opponent
from flipbot.othello.position import (
    CORNERS,
    Position,
    all_positions,
    is_corner,
    is_edge,
    neighbours,
)

# For each corner: its X-square (diagonal neighbour) and C-squares (orthogonal neighbours).
CORNER_REGIONS: dict[Position, tuple[Position, tuple[Position, Position]]] = {
    (0, 0): ((1, 1), ((0, 1), (1, 0))),
    (0, 7): ((1, 6), ((0, 6), (1, 7))),
    (7, 0): ((6, 1), ((6, 0), (7, 1))),
    (7, 7): ((6, 6), ((6, 7), (7, 6))),
}


class EvaluationWeights:
    """
    Tuned heuristic constants. Only their ordering matters:
    corner > edge > central > interior > C-square > X-square.
    """

    def __init__(
        self,
        corner: int = 10000,
        x_square: int = -700,
        c_square: int = -500,
        edge: int = 10,
        central: int = 3,
        interior: int = -5,
        stable_corner: int = 50,
        stable_edge: int = 20,
        stable_interior: int = 20,
        unstable_interior: int = -10,
        frontier: int = -5,
        non_frontier: int = 10,
        mobility: int = 3,
        parity: int = 50,
    ) -> None:
        self.corner = corner
        self.x_square = x_square
        self.c_square = c_square
        self.edge = edge
        self.central = central
        self.interior = interior
        self.stable_corner = stable_corner
        self.stable_edge = stable_edge
        self.stable_interior = stable_interior
        self.unstable_interior = unstable_interior
        self.frontier = frontier
        self.non_frontier = non_frontier
        self.mobility = mobility
        self.parity = parity


def has_empty_neighbour(board: Board, pos: Position) -> bool:
    return any(board.get_square(n) == EMPTY for n in neighbours(pos))


class Evaluator:
    def __init__(self, weights: Optional[EvaluationWeights] = None) -> None:
        if weights is None:
            weights = EvaluationWeights()
        self.weights = weights

    def evaluate(self, board: Board, player: int) -> int:
        """Score `board` from the point of view of `player`, higher is better."""
        assert player in [BLACK, WHITE]

        return (
            self.static_score(board, player)
            + self.stability_score(board, player)
            + self.frontier_score(board, player)
            + self.mobility_score(board, player)
            + self.parity_score(board)
        )

    def static_value(self, board: Board, pos: Position) -> int:
        w = self.weights

        if is_corner(pos):
            return w.corner

        # X- and C-squares are only dangerous while their corner is still open.
        for corner in CORNERS:
            if board.get_square(corner) != EMPTY:
                continue

            x_square, c_squares = CORNER_REGIONS[corner]
            if pos == x_square:
                return w.x_square
            if pos in c_squares:
                return w.c_square

        if is_edge(pos):
            return w.edge

        row, col = pos
        if 2 <= row <= 5 and 2 <= col <= 5:
            return w.central

        return w.interior

    def stability_value(self, board: Board, pos: Position) -> int:
        w = self.weights

        if is_corner(pos):
            return w.stable_corner

        if is_edge(pos):
            return w.stable_edge

        if has_empty_neighbour(board, pos):
            return w.unstable_interior

        return w.stable_interior

    def frontier_value(self, board: Board, pos: Position) -> int:
        if has_empty_neighbour(board, pos):
            return self.weights.frontier
        return self.weights.non_frontier

    def _sum_per_square(
        self, board: Board, player: int, value_func: Callable[[Board, Position], int]
    ) -> int:
        other = opponent(player)
        score = 0

        for pos in all_positions():
            square = board.get_square(pos)

            if square == player:
                score += value_func(board, pos)
            elif square == other:
                score -= value_func(board, pos)

        return score

    def static_score(self, board: Board, player: int) -> int:
        return self._sum_per_square(board, player, self.static_value)

    def stability_score(self, board: Board, player: int) -> int:
        return self._sum_per_square(board, player, self.stability_value)

    def frontier_score(self, board: Board, player: int) -> int:
        return self._sum_per_square(board, player, self.frontier_value)

    def mobility_score(self, board: Board, player: int) -> int:
        my_moves = len(rules.legal_moves(board, player))
        opp_moves = len(rules.legal_moves(board, opponent(player)))
        return (my_moves - opp_moves) * self.weights.mobility

    def parity_score(self, board: Board) -> int:
        # Same sign for both players: it is a tempo proxy, not a per-disc term.
        if board.count_empties() % 2 == 1:
            return self.weights.parity
        return -self.weights.parity
