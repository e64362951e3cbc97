from __future__ import annotations

from typing import Iterable

ROWS = 8
COLS = 8

BLACK = -1
WHITE = 1
EMPTY = 0

SQUARE_VALUES = (BLACK, WHITE, EMPTY)

SQUARE_CHARS = {BLACK: "B", WHITE: "W", EMPTY: "."}

# (d_row, d_col), clockwise starting north.
DIRECTIONS = {
    "N": (-1, 0),
    "NE": (-1, 1),
    "E": (0, 1),
    "SE": (1, 1),
    "S": (1, 0),
    "SW": (1, -1),
    "W": (0, -1),
    "NW": (-1, -1),
}

Move = tuple[int, int]


def opposite(piece: int) -> int:
    assert piece in [BLACK, WHITE]
    return -piece


def is_on_board(row: int, col: int) -> bool:
    if not (isinstance(row, int) and isinstance(col, int)):
        return False
    return 0 <= row < ROWS and 0 <= col < COLS


class Board:
    """
    Board is an immutable 8x8 grid of squares, stored row-major.
    Methods that change a square return a new Board.
    """

    def __init__(self, squares: Iterable[int]) -> None:
        squares = tuple(squares)

        if len(squares) != ROWS * COLS:
            raise ValueError(f"Board needs {ROWS * COLS} squares, got {len(squares)}")

        for square in squares:
            if square not in SQUARE_VALUES:
                raise ValueError(f'Invalid square value "{square}"')

        self.squares = squares

    @classmethod
    def start(cls) -> Board:
        squares = [EMPTY] * ROWS * COLS
        squares[3 * COLS + 3] = squares[4 * COLS + 4] = WHITE
        squares[3 * COLS + 4] = squares[4 * COLS + 3] = BLACK
        return Board(squares)

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * ROWS * COLS)

    @classmethod
    def from_squares(cls, squares: list[int]) -> Board:
        return Board(squares)

    @classmethod
    def from_strings(cls, rows: list[str]) -> Board:
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        chars_to_square = {char: square for square, char in SQUARE_CHARS.items()}
        squares: list[int] = []

        for row in rows:
            if len(row) != COLS:
                raise ValueError(f'Invalid row length in "{row}"')

            for char in row.upper():
                try:
                    squares.append(chars_to_square[char])
                except KeyError:
                    raise ValueError(f'Invalid square character "{char}"')

        return Board(squares)

    def __repr__(self) -> str:
        return f"Board({self.to_strings()})"

    def get_square(self, row: int, col: int) -> int:
        if not is_on_board(row, col):
            raise ValueError(f"Square ({row}, {col}) is not on the board")
        return self.squares[row * COLS + col]

    def set_square(self, row: int, col: int, square: int) -> Board:
        if not is_on_board(row, col):
            raise ValueError(f"Square ({row}, {col}) is not on the board")

        squares = list(self.squares)
        squares[row * COLS + col] = square
        return Board(squares)

    def rows(self) -> list[tuple[int, ...]]:
        return [self.squares[row * COLS : (row + 1) * COLS] for row in range(ROWS)]

    def to_strings(self) -> list[str]:
        return ["".join(SQUARE_CHARS[square] for square in row) for row in self.rows()]

    def __hash__(self) -> int:
        return hash(self.squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.squares == other.squares


def initialize_board() -> Board:
    return Board.start()
