from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from reversi.othello.board import BLACK, WHITE, Board, Move, opposite
from reversi.othello.rules import (
    count_pieces,
    is_game_over,
    is_move_valid,
    place_piece,
    valid_moves,
    winner,
)

logger = logging.getLogger(__name__)

COLOR_NAMES = {BLACK: "Black", WHITE: "White"}


class GameFinished(Exception):
    pass


class MoveResult(Enum):
    INVALID = "invalid"
    PLAYED = "played"
    STILL_YOUR_TURN = "still_your_turn"
    GAME_OVER = "game_over"


class Game:
    """
    Game is the session state of one game: the current board and whose turn it is.
    It applies moves through the rules module and decides who moves next.
    """

    def __init__(self, board: Optional[Board] = None, turn: int = BLACK) -> None:
        assert turn in [BLACK, WHITE]

        if board is None:
            board = Board.start()

        self.board = board
        self.turn = turn
        self.move_count = 0
        self.is_over = False
        self.winner: Optional[int] = None

        if is_game_over(board):
            self._finish()
        elif not valid_moves(board, turn):
            logger.info(
                f"{COLOR_NAMES[turn]} has no moves, "
                f"{COLOR_NAMES[opposite(turn)]} starts"
            )
            self.turn = opposite(turn)

    def play(self, move: Move) -> MoveResult:
        if self.is_over:
            raise GameFinished

        if not is_move_valid(self.board, self.turn, move):
            logger.debug(f"Rejected move {move} for {COLOR_NAMES[self.turn]}")
            return MoveResult.INVALID

        self.board = place_piece(self.board, self.turn, move)
        self.move_count += 1
        logger.debug(f"{COLOR_NAMES[self.turn]} played {move}")

        # Game end is checked before the opponent's moves, otherwise a board
        # where nobody can move would keep handing the turn back.
        if is_game_over(self.board):
            self._finish()
            return MoveResult.GAME_OVER

        if not valid_moves(self.board, opposite(self.turn)):
            logger.info(
                f"{COLOR_NAMES[opposite(self.turn)]} has no moves, "
                f"{COLOR_NAMES[self.turn]} moves again"
            )
            return MoveResult.STILL_YOUR_TURN

        self.turn = opposite(self.turn)
        return MoveResult.PLAYED

    def _finish(self) -> None:
        self.is_over = True
        self.winner = winner(self.board)

        if self.winner is None:
            logger.info(f"Game over after {self.move_count} moves: tie")
        else:
            logger.info(
                f"Game over after {self.move_count} moves: "
                f"{COLOR_NAMES[self.winner]} wins "
                f"{self.count(self.winner)}-{self.count(opposite(self.winner))}"
            )

    def valid_moves(self) -> list[Move]:
        return valid_moves(self.board, self.turn)

    def count(self, piece: int) -> int:
        return count_pieces(self.board, piece)
