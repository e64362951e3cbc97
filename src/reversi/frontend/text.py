from __future__ import annotations

import re
from typing import Optional

from reversi.frontend.base import BaseFrontend, winner_message
from reversi.othello.board import Board, Move
from reversi.othello.game import COLOR_NAMES, Game
from reversi.othello.rules import is_move_valid

COLUMN_LABELS = "ABCDEFGH"

# A digit row and a letter column, in either order: 2E, e2, 3c, C3
input_regex = re.compile(r"^([0-7][A-Ha-h])$|^([A-Ha-h][0-7])$")


def is_malformed_input(text: str) -> bool:
    return input_regex.fullmatch(text) is None


def parse_input(text: str) -> Move:
    if is_malformed_input(text):
        raise ValueError(f'Malformed move "{text}"')

    if text[0].isdigit():
        row, column = text[0], text[1]
    else:
        column, row = text[0], text[1]

    return int(row), COLUMN_LABELS.index(column.upper())


def format_board(board: Board) -> str:
    header = "    " + COLUMN_LABELS
    rows = [f"{row_id} [ {row} ] {row_id}" for row_id, row in enumerate(board.to_strings())]
    return "\n".join([header, *rows, header])


class TextFrontend(BaseFrontend):
    def render(self, game: Game) -> None:
        print(format_board(game.board))

    def get_action(self, game: Game) -> Optional[Move]:
        while True:
            print(f"{COLOR_NAMES[game.turn]}'s Turn. Enter move: ", end="", flush=True)

            try:
                text = input().strip()
            except EOFError:
                return None

            if text.lower() == "quit":
                return None

            if is_malformed_input(text):
                print("Malformed input! Try again.")
                continue

            move = parse_input(text)

            if not is_move_valid(game.board, game.turn, move):
                print("Invalid move! Try again.")
                continue

            return move

    def show_message(self, message: str) -> None:
        print(message)

    def announce_winner(self, game: Game) -> None:
        if game.winner is None:
            print("Game over. Tie!")
        else:
            print(f"Game over. {winner_message(game.winner)}")
