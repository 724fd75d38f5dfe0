import typer
from typing import Annotated

from flipbot import config
from flipbot.ai.selector import MoveSelector
from flipbot.othello.board import COMPUTER, HUMAN
from flipbot.othello.position import (
    field_to_position,
    position_to_field,
    positions_to_fields,
)
from flipbot.session import Session

QUIT_WORDS = ["q", "quit", "exit"]


class TerminalGame:
    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose
        # Session output would repeat what the loop below already prints.
        self.session = Session(verbose=False)
        self.selector = MoveSelector()

    def show_candidates(self) -> None:
        board = self.session.state.board
        for move, score in self.selector.rank_moves(board, COMPUTER):
            print(f"  {position_to_field(move)}: {score}")

    def play_computer_turn(self) -> None:
        if self.verbose:
            self.show_candidates()

        move = self.session.play_computer()
        if move is not None:
            print(f"Computer plays {position_to_field(move)}")

    def play_human_turn(self) -> bool:
        """Returns False when the player wants to stop."""
        legal_moves = self.session.state.legal_moves(HUMAN)
        print(f"Legal moves: {positions_to_fields(legal_moves)}")

        field = typer.prompt("Your move").strip()

        if field.lower() in QUIT_WORDS:
            return False

        try:
            move = field_to_position(field)
        except ValueError as e:
            print(f"Error: {e}")
            return True

        self.session.play_human(move)
        return True

    def __call__(self) -> None:
        while not self.session.is_over:
            self.session.state.board.show()
            print(self.session.message)

            if self.session.is_computer_turn():
                self.play_computer_turn()
                continue

            if not self.play_human_turn():
                return

        self.session.state.board.show()
        print(self.session.message)


app = typer.Typer()


@app.command()
def main(verbose: Annotated[bool, typer.Option("-v")] = config.VERBOSE) -> None:
    TerminalGame(verbose)()


if __name__ == "__main__":
    app()
