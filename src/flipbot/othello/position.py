from __future__ import annotations

from typing import Iterable

ROWS = 8
COLS = 8

# (row, col)
Position = tuple[int, int]

DIRECTIONS: tuple[Position, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

CORNERS: tuple[Position, ...] = ((0, 0), (0, 7), (7, 0), (7, 7))


def is_on_board(pos: Position) -> bool:
    row, col = pos
    return row in range(ROWS) and col in range(COLS)


def all_positions() -> list[Position]:
    """All 64 positions in row-major order."""
    return [(row, col) for row in range(ROWS) for col in range(COLS)]


def neighbours(pos: Position) -> list[Position]:
    row, col = pos
    result: list[Position] = []
    for dr, dc in DIRECTIONS:
        neighbour = (row + dr, col + dc)
        if is_on_board(neighbour):
            result.append(neighbour)
    return result


def is_corner(pos: Position) -> bool:
    return pos in CORNERS


def is_edge(pos: Position) -> bool:
    row, col = pos
    return row in [0, ROWS - 1] or col in [0, COLS - 1]


def position_to_field(pos: Position) -> str:
    if not is_on_board(pos):
        raise ValueError(f"Position {pos} is not on the board")

    row, col = pos
    return "abcdefgh"[col] + "12345678"[row]


def positions_to_fields(positions: Iterable[Position]) -> str:
    return " ".join(position_to_field(pos) for pos in positions)


def field_to_position(field: str) -> Position:
    if len(field) != 2:
        raise ValueError(f'Invalid move length "{len(field)}"')

    field = field.lower()

    if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
        raise ValueError(f'Invalid field "{field}"')

    col = ord(field[0]) - ord("a")
    row = ord(field[1]) - ord("1")
    return (row, col)
