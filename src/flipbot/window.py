import pygame
from pygame.event import Event
from typing import Optional

from flipbot.arguments import Arguments
from flipbot.mode.game import GameMode
from flipbot.othello.board import BLACK, WHITE
from flipbot.othello.position import COLS, ROWS, Position, all_positions

BOARD_WIDTH_PX = 600
BOARD_HEIGHT_PX = 600

SQUARE_SIZE = BOARD_WIDTH_PX // COLS
DISC_RADIUS = SQUARE_SIZE // 2 - 5
MOVE_INDICATOR_RADIUS = SQUARE_SIZE // 8

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)
COLOR_PLAYED_MOVE = (255, 0, 0)

FRAME_RATE = 60


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, args: Arguments) -> None:
        pygame.init()
        self.args = args
        self.mode = GameMode(args)

        self.screen = pygame.display.set_mode((BOARD_WIDTH_PX, BOARD_HEIGHT_PX))
        self.clock = pygame.time.Clock()
        self.caption = ""

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    move = self.get_move_from_event(event)
                except NonMoveEvent:
                    self.mode.on_event(event)
                else:
                    self.mode.on_move(move)

            self.mode.on_frame(pygame.time.get_ticks())
            self.draw()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_board_square_center(self, pos: Position) -> tuple[int, int]:
        row, col = pos

        x = col * SQUARE_SIZE + SQUARE_SIZE // 2
        y = row * SQUARE_SIZE + SQUARE_SIZE // 2

        return (x, y)

    def draw_disc(self, pos: Position, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(pos)
        pygame.draw.circle(self.screen, color, center, DISC_RADIUS)

    def draw_move_indicator(self, pos: Position, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(pos)
        pygame.draw.circle(self.screen, color, center, MOVE_INDICATOR_RADIUS)

    def draw_grid(self) -> None:
        for i in range(1, ROWS):
            offset = i * SQUARE_SIZE
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (0, offset), (BOARD_WIDTH_PX, offset)
            )
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (offset, 0), (offset, BOARD_HEIGHT_PX)
            )

    def update_caption(self) -> None:
        caption = "Flipbot"
        message = self.mode.get_message()
        if message:
            caption += " - " + message

        if caption != self.caption:
            pygame.display.set_caption(caption)
            self.caption = caption

    def draw(self) -> None:
        board = self.mode.get_board()

        ui_details = self.mode.get_ui_details()
        legal_moves: set[Position] = ui_details.pop("legal_moves", set())
        played_move: Optional[Position] = ui_details.pop("played_move", None)

        if ui_details:
            print(
                "WARNING: found unused ui details key(s): "
                + ", ".join(sorted(ui_details))
            )

        if self.mode.get_turn() == WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        self.screen.fill(COLOR_BACKGROUND)
        self.draw_grid()

        for pos in all_positions():
            square = board.get_square(pos)

            if square == WHITE:
                self.draw_disc(pos, COLOR_WHITE_DISC)
            elif square == BLACK:
                self.draw_disc(pos, COLOR_BLACK_DISC)
            elif pos in legal_moves:
                self.draw_move_indicator(pos, turn_color)

            if played_move == pos:
                self.draw_move_indicator(pos, COLOR_PLAYED_MOVE)

        self.update_caption()
        pygame.display.flip()

    def get_move_from_event(self, event: Event) -> Position:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // SQUARE_SIZE
        row: int = y // SQUARE_SIZE

        if not (row in range(ROWS) and col in range(COLS)):
            raise NonMoveEvent

        return (row, col)
