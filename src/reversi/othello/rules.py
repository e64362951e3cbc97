from __future__ import annotations

from itertools import count
from typing import Optional

from reversi.othello.board import (
    BLACK,
    COLS,
    DIRECTIONS,
    EMPTY,
    ROWS,
    WHITE,
    Board,
    Move,
    is_on_board,
)


def is_flippable(
    board: Board, piece: int, move: Move, direction: tuple[int, int]
) -> bool:
    """
    Walks outward from `move` in `direction`, starting one square away.
    Returns True if a run of at least one opponent disc is closed off by a disc of `piece`.
    The square of `move` itself is never inspected.
    """
    move_row, move_col = move
    d_row, d_col = direction

    for distance in count(1):
        row = move_row + d_row * distance
        col = move_col + d_col * distance

        if not is_on_board(row, col):
            return False

        square = board.get_square(row, col)

        if square == EMPTY:
            return False

        if square == piece:
            # Own disc right next to the move: nothing in between to flip.
            return distance > 1

    raise AssertionError("unreachable")  # pragma: nocover


def is_move_valid(board: Board, piece: int, move: Move) -> bool:
    row, col = move

    if not is_on_board(row, col):
        return False

    if board.get_square(row, col) != EMPTY:
        return False

    return any(
        is_flippable(board, piece, move, direction) for direction in DIRECTIONS.values()
    )


def valid_moves(board: Board, piece: int) -> list[Move]:
    return [
        (row, col)
        for row in range(ROWS)
        for col in range(COLS)
        if is_move_valid(board, piece, (row, col))
    ]


def place_piece(board: Board, piece: int, move: Move) -> Board:
    """
    Returns the board after `piece` plays `move`, or `board` itself if the move is invalid.
    """
    if not is_move_valid(board, piece, move):
        return board

    move_row, move_col = move
    squares = list(board.squares)
    squares[move_row * COLS + move_col] = piece

    for d_row, d_col in DIRECTIONS.values():
        # Flippability is decided on the board as it was before the move.
        if not is_flippable(board, piece, move, (d_row, d_col)):
            continue

        for distance in count(1):
            row = move_row + d_row * distance
            col = move_col + d_col * distance

            if board.get_square(row, col) == piece:
                break

            squares[row * COLS + col] = piece

    return Board(squares)


def is_game_over(board: Board) -> bool:
    return not (valid_moves(board, WHITE) or valid_moves(board, BLACK))


def count_pieces(board: Board, piece: int) -> int:
    return board.squares.count(piece)


def winner(board: Board) -> Optional[int]:
    white = count_pieces(board, WHITE)
    black = count_pieces(board, BLACK)

    if white > black:
        return WHITE
    if black > white:
        return BLACK
    return None
