import logging
import pygame
from pygame.event import Event
from typing import Optional, Type

from kappa_othello.arguments import Arguments
from kappa_othello.mode.base import BaseMode
from kappa_othello.othello.board import BLACK, COLS, ROWS, WHITE, Square

logger = logging.getLogger(__name__)

BOARD_WIDTH_PX = 600
BOARD_HEIGHT_PX = 600
INFO_HEIGHT_PX = 80

SQUARE_SIZE = BOARD_WIDTH_PX // COLS
DISC_RADIUS = SQUARE_SIZE // 2 - 5
MOVE_INDICATOR_RADIUS = SQUARE_SIZE // 8

FONT_SIZE = 32

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)
COLOR_INFO_BACKGROUND = (32, 32, 32)
COLOR_INFO_TEXT = (230, 230, 230)
COLOR_PLAYED_MOVE = (255, 0, 0)
COLOR_FLIPPED = (128, 128, 128)


FRAME_RATE = 60


class NonMoveEvent(Exception):
    pass


class Window:
    def __init__(self, mode_type: Type[BaseMode], args: Arguments) -> None:
        pygame.init()
        self.args = args
        self.mode = mode_type(args)

        self.screen = pygame.display.set_mode(
            (BOARD_WIDTH_PX, BOARD_HEIGHT_PX + INFO_HEIGHT_PX)
        )
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, FONT_SIZE)

        pygame.display.set_caption("Kappa Othello")

    def run(self) -> None:
        running = True
        event: Optional[Event] = None

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

            self.mode.on_frame(event)
            self.draw()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_board_square_center(self, square: Square) -> tuple[int, int]:
        col, row = square

        x = col * SQUARE_SIZE + SQUARE_SIZE // 2
        y = row * SQUARE_SIZE + SQUARE_SIZE // 2

        return (x, y)

    def draw_disc(self, square: Square, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(square)
        pygame.draw.circle(self.screen, color, center, DISC_RADIUS)

    def draw_move_indicator(self, square: Square, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(square)
        pygame.draw.circle(self.screen, color, center, MOVE_INDICATOR_RADIUS)

    def draw_marker(self, square: Square, color: tuple[int, int, int]) -> None:
        center = self.get_board_square_center(square)
        radius = (SQUARE_SIZE / 2) - 8
        pygame.draw.circle(self.screen, color, center, radius, 2)

    def draw_text(self, text: str, center: tuple[int, int]) -> None:
        text_surface = self.font.render(text, True, COLOR_INFO_TEXT)
        text_rect = text_surface.get_rect()
        text_rect.center = center
        self.screen.blit(text_surface, text_rect.topleft)

    def draw(self) -> None:
        board = self.mode.get_board()

        ui_details = self.mode.get_ui_details()
        valid_moves: set[Square] = ui_details.pop("valid_moves", set())
        played_move: Optional[Square] = ui_details.pop("played_move", None)
        flipped: set[Square] = ui_details.pop("flipped", set())
        status: str = ui_details.pop("status", "")
        score: dict[int, int] = ui_details.pop("score", {})
        difficulty: str = ui_details.pop("difficulty", "")

        if ui_details:
            logger.warning(
                "found unused ui details key(s): " + ", ".join(sorted(ui_details))
            )

        self.screen.fill(COLOR_BACKGROUND)

        for i in range(1, COLS):
            offset = i * SQUARE_SIZE
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (offset, 0), (offset, BOARD_HEIGHT_PX)
            )
            pygame.draw.line(
                self.screen, COLOR_GRID_LINE, (0, offset), (BOARD_WIDTH_PX, offset)
            )

        for y in range(ROWS):
            for x in range(COLS):
                square = board.get_square(x, y)

                if square == WHITE:
                    self.draw_disc((x, y), COLOR_WHITE_DISC)
                elif square == BLACK:
                    self.draw_disc((x, y), COLOR_BLACK_DISC)
                elif (x, y) in valid_moves:
                    self.draw_move_indicator((x, y), COLOR_BLACK_DISC)

                if played_move == (x, y):
                    self.draw_marker((x, y), COLOR_PLAYED_MOVE)
                elif (x, y) in flipped:
                    self.draw_marker((x, y), COLOR_FLIPPED)

        self.draw_info(status, score, difficulty)

        pygame.display.flip()

    def draw_info(self, status: str, score: dict[int, int], difficulty: str) -> None:
        pygame.draw.rect(
            self.screen,
            COLOR_INFO_BACKGROUND,
            ((0, BOARD_HEIGHT_PX), (BOARD_WIDTH_PX, INFO_HEIGHT_PX)),
        )

        self.draw_text(status, (BOARD_WIDTH_PX // 2, BOARD_HEIGHT_PX + 22))

        score_text = (
            f"Black {score.get(BLACK, 0)} - White {score.get(WHITE, 0)}"
            f"    ({difficulty}, N: new game, D: difficulty)"
        )
        self.draw_text(score_text, (BOARD_WIDTH_PX // 2, BOARD_HEIGHT_PX + 58))

    def get_move_from_event(self, event: Event) -> Square:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        col: int = x // SQUARE_SIZE
        row: int = y // SQUARE_SIZE

        if not (row in range(ROWS) and col in range(COLS)):
            raise NonMoveEvent

        return (col, row)
