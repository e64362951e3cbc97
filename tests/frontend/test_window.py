import pygame
import pytest
from typing import Iterator

from reversi.config import MESSAGE_SECONDS
from reversi.frontend.window import (
    BOARD_HEIGHT_PX,
    BOARD_WIDTH_PX,
    FRAME_RATE,
    GAP_SIZE_PX,
    SQUARE_SIZE_PX,
    NonMoveEvent,
    Window,
    get_move_from_event,
    get_move_from_position,
)
from reversi.othello.board import Board
from reversi.othello.game import Game

STEP = SQUARE_SIZE_PX + GAP_SIZE_PX


@pytest.mark.parametrize(
    ["x", "y", "expected"],
    [
        pytest.param(0, 0, (0, 0), id="top-left"),
        pytest.param(SQUARE_SIZE_PX - 1, 0, (0, 0), id="first-square-edge"),
        pytest.param(STEP, 0, (0, 1), id="second-column"),
        pytest.param(0, STEP, (1, 0), id="second-row"),
        pytest.param(4 * STEP + 3, 3 * STEP + 10, (3, 4), id="center"),
        pytest.param(BOARD_WIDTH_PX - 1, BOARD_HEIGHT_PX - 1, (7, 7), id="bottom-right"),
    ],
)
def test_get_move_from_position_ok(x: int, y: int, expected: tuple[int, int]) -> None:
    assert get_move_from_position(x, y) == expected


@pytest.mark.parametrize(
    ["x", "y"],
    [
        pytest.param(0, BOARD_HEIGHT_PX + GAP_SIZE_PX + 10, id="footer"),
        pytest.param(8 * STEP, 0, id="right-of-board"),
    ],
)
def test_get_move_from_position_error(x: int, y: int) -> None:
    with pytest.raises(NonMoveEvent):
        get_move_from_position(x, y)


def test_get_move_from_event_left_click() -> None:
    event = pygame.event.Event(
        pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(STEP * 2, STEP * 5)
    )
    assert get_move_from_event(event) == (5, 2)


@pytest.mark.parametrize(
    ["event"],
    [
        pytest.param(
            pygame.event.Event(
                pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_RIGHT, pos=(0, 0)
            ),
            id="right-click",
        ),
        pytest.param(
            pygame.event.Event(pygame.MOUSEBUTTONUP, button=pygame.BUTTON_LEFT, pos=(0, 0)),
            id="button-up",
        ),
        pytest.param(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), id="key"),
    ],
)
def test_get_move_from_event_non_move(event: pygame.event.Event) -> None:
    with pytest.raises(NonMoveEvent):
        get_move_from_event(event)


@pytest.fixture()
def window(monkeypatch: pytest.MonkeyPatch) -> Iterator[Window]:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")

    window = Window()
    pygame.event.clear()
    yield window
    pygame.quit()


def post_left_click(x: int, y: int) -> None:
    pygame.event.post(
        pygame.event.Event(
            pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(x, y)
        )
    )


def test_show_message_counts_down(window: Window) -> None:
    game = Game()
    window.show_message("Invalid move!")

    frames = MESSAGE_SECONDS * FRAME_RATE
    assert window.message == "Invalid move!"
    assert window.message_frames == frames

    window.draw(game)
    assert window.message_frames == frames - 1

    for _ in range(frames - 1):
        window.draw(game)
    assert window.message_frames == 0

    window.draw(game)
    assert window.message_frames == 0


def test_result_message_stays_after_game_over(window: Window) -> None:
    game = Game(Board.empty())
    window.show_message("It's a Tie!")

    for _ in range(MESSAGE_SECONDS * FRAME_RATE + 5):
        window.draw(game)

    assert window.message_frames == MESSAGE_SECONDS * FRAME_RATE


def test_get_action_click(window: Window) -> None:
    post_left_click(STEP * 2, STEP * 3)
    assert window.get_action(Game()) == (3, 2)


def test_get_action_ignores_click_during_message(window: Window) -> None:
    window.show_message("Still your turn!")
    post_left_click(STEP * 2, STEP * 3)
    pygame.event.post(pygame.event.Event(pygame.QUIT))

    assert window.get_action(Game()) is None


def test_run_finished_game(window: Window) -> None:
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game = window.run(Game(Board.empty()))

    assert game.is_over
    assert window.message == "It's a Tie!"
