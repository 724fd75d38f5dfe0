from __future__ import annotations

from typing import Optional

from flipbot import engine
from flipbot.othello.board import COMPUTER, HUMAN, color_name
from flipbot.othello.game import GameState
from flipbot.othello.position import Position, position_to_field

MESSAGE_INVALID_MOVE = "You can't place a disc there."


class Session:
    """
    Drives one human vs computer game on top of the engine.
    Owns turn passing and game end detection, which the engine leaves to its caller.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.state = engine.new_game()
        self.message = ""
        self.is_over = False
        self.update_turn_message()

    def restart(self) -> None:
        self.state = engine.new_game()
        self.is_over = False
        self.update_turn_message()

    def is_human_turn(self) -> bool:
        return not self.is_over and self.state.current_player == HUMAN

    def is_computer_turn(self) -> bool:
        return not self.is_over and self.state.current_player == COMPUTER

    def update_turn_message(self) -> None:
        if self.state.current_player == HUMAN:
            self.message = "Your turn (Black)"
        else:
            self.message = "Computer's turn (White)"

    def play_human(self, pos: Position) -> bool:
        if not self.is_human_turn():
            return False

        if not engine.make_move(self.state, pos, HUMAN):
            self.message = MESSAGE_INVALID_MOVE
            return False

        self.advance()
        return True

    def play_computer(self) -> Optional[Position]:
        if not self.is_computer_turn():
            return None

        move = engine.best_move(self.state, COMPUTER)

        if move is None:
            # Only reachable if advance() was skipped, pass like the human would.
            self.state.pass_turn()
        else:
            if self.verbose:
                print(f"Computer plays {position_to_field(move)}")
            engine.make_move(self.state, move, COMPUTER)

        self.advance()
        return move

    def advance(self) -> None:
        """Checks for game end and passes the turn if the side to move is stuck."""
        if engine.is_terminal(self.state) or self.state.is_board_full():
            self.finish()
            return

        if engine.legal_moves(self.state, self.state.current_player):
            self.update_turn_message()
            return

        # Not terminal, so the opponent is guaranteed to have a move after the pass.
        player = self.state.current_player
        self.state.pass_turn()
        self.message = f"{color_name(player)} has no legal moves and passes."

        if self.verbose:
            print(self.message)

    def finish(self) -> None:
        self.is_over = True
        self.message = self.result_message()

        if self.verbose:
            print(self.message)

    def result_message(self) -> str:
        pieces = engine.count_pieces(self.state)
        winner = self.state.winner()

        if winner == HUMAN:
            verdict = "You win!"
        elif winner == COMPUTER:
            verdict = "The computer wins!"
        else:
            verdict = "It's a draw!"

        return f"Game over! Black: {pieces.black}, White: {pieces.white}. {verdict}"
