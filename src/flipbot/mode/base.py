from pygame.event import Event
from typing import Any

from flipbot.arguments import Arguments
from flipbot.othello.board import Board
from flipbot.othello.position import Position


class BaseMode:
    def __init__(self, args: Arguments):
        pass

    def on_event(self, event: Event) -> None:
        pass

    def on_frame(self, ticks: int) -> None:
        pass

    def on_move(self, move: Position) -> None:
        pass

    def get_board(self) -> Board:
        raise NotImplementedError

    def get_turn(self) -> int:
        raise NotImplementedError

    def get_message(self) -> str:
        return ""

    def get_ui_details(self) -> dict[str, Any]:
        return {}
