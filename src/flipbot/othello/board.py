from __future__ import annotations

from flipbot.othello.position import COLS, ROWS, Position, all_positions, is_on_board

BLACK = -1
WHITE = 1
EMPTY = 0

# Fixed seats: the human always plays black and moves first.
HUMAN = BLACK
COMPUTER = WHITE

SQUARE_CHARS = {
    EMPTY: ".",
    BLACK: "x",
    WHITE: "o",
}


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def color_name(color: int) -> str:
    assert color in [BLACK, WHITE]
    return "Black" if color == BLACK else "White"


class Board:
    """
    Board stores the 8x8 grid of squares in row-major order.
    It has no notion of whose turn it is, see GameState for that.
    """

    def __init__(self, squares: list[int]) -> None:
        if len(squares) != ROWS * COLS:
            raise ValueError(f"Expected {ROWS * COLS} squares, got {len(squares)}")

        self.squares = squares

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * ROWS * COLS)

    @classmethod
    def start(cls) -> Board:
        board = cls.empty()
        board.set_square((3, 3), WHITE)
        board.set_square((4, 4), WHITE)
        board.set_square((3, 4), BLACK)
        board.set_square((4, 3), BLACK)
        return board

    @classmethod
    def from_string(cls, string: str) -> Board:
        chars = "".join(string.split())

        if len(chars) != ROWS * COLS:
            raise ValueError(f"Expected {ROWS * COLS} squares, got {len(chars)}")

        lookup = {char: square for square, char in SQUARE_CHARS.items()}
        squares: list[int] = []

        for char in chars.lower():
            try:
                squares.append(lookup[char])
            except KeyError:
                raise ValueError(f'Invalid square character "{char}"')

        return Board(squares)

    def copy(self) -> Board:
        return Board(self.squares[:])

    def get_square(self, pos: Position) -> int:
        assert is_on_board(pos)
        row, col = pos
        return self.squares[row * COLS + col]

    def set_square(self, pos: Position, color: int) -> None:
        assert is_on_board(pos)
        assert color in [BLACK, WHITE, EMPTY]
        row, col = pos
        self.squares[row * COLS + col] = color

    def is_empty_square(self, pos: Position) -> bool:
        return self.get_square(pos) == EMPTY

    def count(self, color: int) -> int:
        assert color in [BLACK, WHITE]
        return self.squares.count(color)

    def count_discs(self) -> int:
        return ROWS * COLS - self.count_empties()

    def count_empties(self) -> int:
        return self.squares.count(EMPTY)

    def is_full(self) -> bool:
        return self.count_empties() == 0

    def __repr__(self) -> str:
        return f'Board.from_string("{"".join(SQUARE_CHARS[s] for s in self.squares)}")'

    def __str__(self) -> str:
        lines = ["  a b c d e f g h"]
        for row in range(ROWS):
            chars = [SQUARE_CHARS[self.get_square((row, col))] for col in range(COLS)]
            lines.append(f"{row + 1} " + " ".join(chars))
        return "\n".join(lines)

    def show(self) -> None:
        print(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.squares == other.squares

    def __hash__(self) -> int:  # pragma: nocover
        return hash(tuple(self.squares))

    def get_positions(self, color: int) -> list[Position]:
        assert color in [BLACK, WHITE, EMPTY]
        return [pos for pos in all_positions() if self.get_square(pos) == color]
