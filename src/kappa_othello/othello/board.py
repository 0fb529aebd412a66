from __future__ import annotations

from itertools import count
from typing import Iterable, Optional

ROWS = 8
COLS = 8

BLACK = -1
WHITE = 1
EMPTY = 0

DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

# (x, y) with origin top-left: x is the column, y is the row.
Square = tuple[int, int]


class InvalidMove(Exception):
    pass


def opponent(color: int) -> int:
    if color not in [BLACK, WHITE]:
        raise ValueError(f'Unknown color "{color}"')
    return -color


def is_on_board(x: int, y: int) -> bool:
    return x in range(COLS) and y in range(ROWS)


class Board:
    """
    Board stores the 8x8 grid of squares, row-major.
    It does not know whose turn it is, the game controller tracks that.
    Moves are applied in place.
    """

    def __init__(self, squares: list[int]) -> None:
        if len(squares) != ROWS * COLS:
            raise ValueError(f"Expected {ROWS * COLS} squares, got {len(squares)}")

        for square in squares:
            if square not in [BLACK, WHITE, EMPTY]:
                raise ValueError(f'Unknown square value "{square}"')

        self.squares = squares

    @classmethod
    def start(cls) -> Board:
        board = cls.empty()
        board.set_square(3, 3, WHITE)
        board.set_square(4, 4, WHITE)
        board.set_square(4, 3, BLACK)
        board.set_square(3, 4, BLACK)
        return board

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * ROWS * COLS)

    @classmethod
    def from_squares(cls, squares: list[int]) -> Board:
        return Board(list(squares))

    @classmethod
    def from_string(cls, string: str) -> Board:
        """
        Parse a board from text, one character per square in row-major order:
        X for black, O for white and - for empty. Whitespace is ignored.
        """

        chars = "".join(string.split())
        if len(chars) != ROWS * COLS:
            raise ValueError(f"Expected {ROWS * COLS} squares, got {len(chars)}")

        squares: list[int] = []
        for char in chars.upper():
            if char == "X":
                squares.append(BLACK)
            elif char == "O":
                squares.append(WHITE)
            elif char == "-":
                squares.append(EMPTY)
            else:
                raise ValueError(f'Invalid square character "{char}"')

        return Board(squares)

    def to_string(self) -> str:
        chars = {BLACK: "X", WHITE: "O", EMPTY: "-"}
        return "".join(chars[square] for square in self.squares)

    def copy(self) -> Board:
        return Board(list(self.squares))

    def __repr__(self) -> str:
        return f'Board("{self.to_string()}")'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.squares == other.squares

    def __hash__(self) -> int:  # pragma: nocover
        return hash(tuple(self.squares))

    def get_square(self, x: int, y: int) -> int:
        if not is_on_board(x, y):
            raise ValueError(f"Square ({x}, {y}) is not on the board")
        return self.squares[COLS * y + x]

    def set_square(self, x: int, y: int, color: int) -> None:
        if not is_on_board(x, y):
            raise ValueError(f"Square ({x}, {y}) is not on the board")
        if color not in [BLACK, WHITE, EMPTY]:
            raise ValueError(f'Unknown color "{color}"')
        self.squares[COLS * y + x] = color

    def flips_for(self, x: int, y: int, color: int) -> set[Square]:
        """
        Returns the opponent discs that placing a disc of `color` on (x, y) would flip.
        Each direction is walked independently, a run of opponent discs only counts
        when it is closed off by a disc of `color`.
        """

        opp = opponent(color)
        flipped: set[Square] = set()

        for dx, dy in DIRECTIONS:
            flipped_line: list[Square] = []

            for d in count(1):
                cur_x = x + dx * d
                cur_y = y + dy * d

                if not is_on_board(cur_x, cur_y):
                    break

                square = self.squares[COLS * cur_y + cur_x]

                if square == opp:
                    flipped_line.append((cur_x, cur_y))
                    continue

                if square == color:
                    flipped.update(flipped_line)

                break

        return flipped

    def is_legal(self, x: int, y: int, color: int) -> bool:
        if not is_on_board(x, y):
            return False

        if self.squares[COLS * y + x] != EMPTY:
            return False

        return len(self.flips_for(x, y, color)) > 0

    def apply(self, x: int, y: int, color: int) -> set[Square]:
        if not self.is_legal(x, y, color):
            raise InvalidMove(f"Cannot place {color_name(color)} on ({x}, {y})")

        flipped = self.flips_for(x, y, color)

        self.squares[COLS * y + x] = color
        for flip_x, flip_y in flipped:
            self.squares[COLS * flip_y + flip_x] = color

        return flipped

    def legal_moves(self, color: int) -> list[Square]:
        moves: list[Square] = []
        for y in range(ROWS):
            for x in range(COLS):
                if self.is_legal(x, y, color):
                    moves.append((x, y))
        return moves

    def has_moves(self, color: int) -> bool:
        for y in range(ROWS):
            for x in range(COLS):
                if self.is_legal(x, y, color):
                    return True
        return False

    def is_game_end(self) -> bool:
        return not (self.has_moves(BLACK) or self.has_moves(WHITE))

    def count(self, color: int) -> int:
        if color not in [BLACK, WHITE, EMPTY]:
            raise ValueError(f'Unknown color "{color}"')
        return self.squares.count(color)

    def score(self) -> dict[int, int]:
        return {BLACK: self.count(BLACK), WHITE: self.count(WHITE)}

    def count_discs(self) -> int:
        return ROWS * COLS - self.count_empties()

    def count_empties(self) -> int:
        return self.count(EMPTY)

    def show(self, color: Optional[int] = None) -> None:
        print("+-a-b-c-d-e-f-g-h-+")
        for y in range(ROWS):
            print("{} ".format(y + 1), end="")

            for x in range(COLS):
                square = self.get_square(x, y)

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif color is not None and self.is_legal(x, y, color):
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def square_to_field(cls, square: Square) -> str:
        x, y = square
        if not is_on_board(x, y):
            raise ValueError(f"Square ({x}, {y}) is not on the board")
        return "abcdefgh"[x] + "12345678"[y]

    @classmethod
    def squares_to_fields(cls, squares: Iterable[Square]) -> str:
        return " ".join(cls.square_to_field(square) for square in squares)

    @classmethod
    def field_to_square(cls, field: str) -> Square:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return (x, y)


def color_name(color: int) -> str:
    if color == BLACK:
        return "black"
    if color == WHITE:
        return "white"
    raise ValueError(f'Unknown color "{color}"')
