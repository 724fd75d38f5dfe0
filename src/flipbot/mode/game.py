import pygame
from pygame.event import Event
from typing import Any, Optional

from flipbot.arguments import Arguments
from flipbot.mode.base import BaseMode
from flipbot.othello.board import HUMAN, Board
from flipbot.othello.position import Position
from flipbot.session import Session


class GameMode(BaseMode):
    """Human (black) against the computer (white)."""

    def __init__(self, args: Arguments) -> None:
        self.think_delay_ms = args.think_delay_ms
        self.session = Session(verbose=args.verbose)

        # Tick count at which the computer will play its move.
        self.computer_move_due: Optional[int] = None

    def on_event(self, event: Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_RIGHT:
                self.on_mouse_right_click(event)

    def on_move(self, move: Position) -> None:
        if self.session.is_over:
            self.restart()
            return

        self.session.play_human(move)

    def on_frame(self, ticks: int) -> None:
        if not self.session.is_computer_turn():
            self.computer_move_due = None
            return

        if self.computer_move_due is None:
            self.computer_move_due = ticks + self.think_delay_ms
            return

        if ticks >= self.computer_move_due:
            self.computer_move_due = None
            self.session.play_computer()

    def on_mouse_right_click(self, event: Event) -> None:
        self.restart()

    def restart(self) -> None:
        self.computer_move_due = None
        self.session.restart()

    def get_board(self) -> Board:
        return self.session.state.board

    def get_turn(self) -> int:
        return self.session.state.current_player

    def get_message(self) -> str:
        return self.session.message

    def get_ui_details(self) -> dict[str, Any]:
        ui_details: dict[str, Any] = {}

        last_move = self.session.state.last_move()
        if last_move is not None:
            ui_details["played_move"] = last_move

        if self.session.is_human_turn():
            ui_details["legal_moves"] = set(self.session.state.legal_moves(HUMAN))

        return ui_details
