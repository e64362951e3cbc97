import pygame
from pygame.event import Event
from typing import Optional

from reversi.config import MESSAGE_SECONDS, SQUARE_SIZE_PX
from reversi.frontend.base import BaseFrontend
from reversi.othello.board import BLACK, COLS, ROWS, WHITE, Move
from reversi.othello.game import Game

GAP_SIZE_PX = 5
PADDING_PX = 5
FOOTER_HEIGHT_PX = 30

BOARD_WIDTH_PX = COLS * SQUARE_SIZE_PX + (COLS - 1) * GAP_SIZE_PX
BOARD_HEIGHT_PX = ROWS * SQUARE_SIZE_PX + (ROWS - 1) * GAP_SIZE_PX

DISC_RADIUS = SQUARE_SIZE_PX // 2 - PADDING_PX
MOVE_INDICATOR_RADIUS = SQUARE_SIZE_PX // 8

MESSAGE_WIDTH_PX = BOARD_WIDTH_PX - 80
MESSAGE_HEIGHT_PX = 80

FOOTER_FONT_SIZE = 20
MESSAGE_FONT_SIZE = 60

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 0, 0)
COLOR_SQUARE = (0, 136, 0)
COLOR_MESSAGE_BOX = (200, 200, 200)
COLOR_FOOTER_TEXT = (255, 255, 255)

FRAME_RATE = 30


class NonMoveEvent(Exception):
    pass


def get_move_from_position(x: int, y: int) -> Move:
    # Clicks on a gap land on the square above or left of it.
    row = y // (SQUARE_SIZE_PX + GAP_SIZE_PX)
    col = x // (SQUARE_SIZE_PX + GAP_SIZE_PX)

    if not (row in range(ROWS) and col in range(COLS)):
        raise NonMoveEvent

    return row, col


def get_move_from_event(event: Event) -> Move:
    if event.type != pygame.MOUSEBUTTONDOWN:
        raise NonMoveEvent

    if event.button != pygame.BUTTON_LEFT:
        raise NonMoveEvent

    x, y = event.pos
    return get_move_from_position(x, y)


class Window(BaseFrontend):
    def __init__(self) -> None:
        pygame.init()

        self.screen = pygame.display.set_mode(
            (BOARD_WIDTH_PX, BOARD_HEIGHT_PX + FOOTER_HEIGHT_PX)
        )
        self.clock = pygame.time.Clock()

        # Message text and the number of frames it remains visible.
        self.message: Optional[str] = None
        self.message_frames = 0

        pygame.display.set_caption("Reversi")

    def render(self, game: Game) -> None:
        self.draw(game)

    def get_action(self, game: Game) -> Optional[Move]:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    return None

                try:
                    move = get_move_from_event(event)
                except NonMoveEvent:
                    continue

                # Clicks are ignored while a message covers the board.
                if self.message_frames == 0:
                    return move

            self.draw(game)
            self.clock.tick(FRAME_RATE)

    def show_message(self, message: str) -> None:
        self.message = message
        self.message_frames = MESSAGE_SECONDS * FRAME_RATE

    def finish(self, game: Game) -> None:
        # Keep showing the final board until the window is closed.
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    return

            self.draw(game)
            self.clock.tick(FRAME_RATE)

    def get_square_rect(self, move: Move) -> pygame.Rect:
        row, col = move
        x = col * (SQUARE_SIZE_PX + GAP_SIZE_PX)
        y = row * (SQUARE_SIZE_PX + GAP_SIZE_PX)
        return pygame.Rect(x, y, SQUARE_SIZE_PX, SQUARE_SIZE_PX)

    def draw_disc(self, move: Move, color: tuple[int, int, int]) -> None:
        center = self.get_square_rect(move).center
        pygame.draw.circle(self.screen, color, center, DISC_RADIUS)

    def draw_move_indicator(self, move: Move, color: tuple[int, int, int]) -> None:
        center = self.get_square_rect(move).center
        pygame.draw.circle(self.screen, color, center, MOVE_INDICATOR_RADIUS)

    def draw_footer(self, game: Game) -> None:
        player = "WHITE" if game.turn == WHITE else "BLACK"

        font = pygame.font.Font(None, FOOTER_FONT_SIZE)
        text_surface = font.render(
            f"CURRENT PLAYER: {player}", True, COLOR_FOOTER_TEXT
        )
        text_rect = text_surface.get_rect()
        text_rect.midleft = (10, BOARD_HEIGHT_PX + FOOTER_HEIGHT_PX // 2)
        self.screen.blit(text_surface, text_rect.topleft)

    def draw_message(self, count_down: bool) -> None:
        if self.message_frames == 0 or self.message is None:
            return

        box = pygame.Rect(0, 0, MESSAGE_WIDTH_PX, MESSAGE_HEIGHT_PX)
        box.center = (BOARD_WIDTH_PX // 2, BOARD_HEIGHT_PX // 2)
        pygame.draw.rect(self.screen, COLOR_MESSAGE_BOX, box)

        font = pygame.font.Font(None, MESSAGE_FONT_SIZE)
        text_surface = font.render(self.message, True, COLOR_BLACK_DISC)
        text_rect = text_surface.get_rect()
        text_rect.center = box.center
        self.screen.blit(text_surface, text_rect.topleft)

        if count_down:
            self.message_frames -= 1

    def draw(self, game: Game) -> None:
        if game.turn == WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        valid_moves: set[Move] = set()
        if not game.is_over:
            valid_moves = set(game.valid_moves())

        self.screen.fill(COLOR_BACKGROUND)

        for row, squares in enumerate(game.board.rows()):
            for col, square in enumerate(squares):
                move = (row, col)
                pygame.draw.rect(self.screen, COLOR_SQUARE, self.get_square_rect(move))

                if square == WHITE:
                    self.draw_disc(move, COLOR_WHITE_DISC)
                elif square == BLACK:
                    self.draw_disc(move, COLOR_BLACK_DISC)
                elif move in valid_moves:
                    self.draw_move_indicator(move, turn_color)

        self.draw_footer(game)
        # The result message stays up once the game is over.
        self.draw_message(count_down=not game.is_over)

        pygame.display.flip()
