"""The Board holds the position (which piece stands where). It is a plain value: copy it before a what-if simulation."""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import EmptySquareError, InvalidLayoutError
from src.core.shared_types import Side
from src.engine.pieces import Piece
from src.engine.square import BOARD_DIMENSIONS, Square, all_squares

STANDARD_LAYOUT = "rlbqhblr/pppppppp/8/8/8/8/PPPPPPPP/RWBQHBWR"

# digits a layout row may use for a run of empty squares
EMPTY_RUN_DIGITS = "12345678"


@dataclass
class Board:
    # only occupied squares are stored: a missing key is an empty cell
    cells: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_layout(STANDARD_LAYOUT)

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from a placement string.

        Rows are separated by slashes, the top row (row 0) comes first.
        ex. standard starting position:
        rlbqhblr/pppppppp/8/8/8/8/PPPPPPPP/RWBQHBWR
        means:
        * Blue pieces (lower case) fill the top row, starting with a rook on (0, 0)
        * Blue pawns cover row 1, Yellow pawns row 6
        * rows 2 through 5 have 8 consecutive empty squares
        * Yellow pieces (upper case) fill the bottom row
        """
        rows = layout.strip().split("/")
        if len(rows) != BOARD_DIMENSIONS[1]:
            raise InvalidLayoutError(
                f"Layout needs {BOARD_DIMENSIONS[1]} rows, got {len(rows)}: {layout!r}"
            )

        cells: dict[Square, Piece] = {}
        for row, row_layout in enumerate(rows):
            col = 0
            for character in row_layout:
                if character.isdigit():
                    # A number denotes the amount of empty squares after each other
                    if character not in EMPTY_RUN_DIGITS:
                        raise InvalidLayoutError(
                            f"Row {row} has an invalid empty square count {character!r}: {row_layout!r}"
                        )
                    col += int(character)
                    continue
                if col >= BOARD_DIMENSIONS[0]:
                    raise InvalidLayoutError(
                        f"Row {row} describes more than {BOARD_DIMENSIONS[0]} squares: {row_layout!r}"
                    )
                cells[Square(col, row)] = Piece.from_layout(character)
                col += 1
            if col != BOARD_DIMENSIONS[0]:
                raise InvalidLayoutError(
                    f"Row {row} describes {col} squares instead of {BOARD_DIMENSIONS[0]}: {row_layout!r}"
                )
        return cls(cells)

    def to_layout(self) -> str:
        return "/".join(self._row_to_layout(row) for row in range(BOARD_DIMENSIONS[1]))

    def _row_to_layout(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[0]):
            piece = self.piece(Square(col, row))
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(piece.to_layout())

        # an entirely empty row is still written as a number
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.cells.get(square.checked())

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def is_occupied_by(self, square: Square, side: Side) -> bool:
        piece = self.piece(square)
        return piece is not None and piece.side == side

    def occupied(self) -> list[tuple[Square, Piece]]:
        """Every piece with its square, in row-major order"""
        return [(sq, self.cells[sq]) for sq in all_squares() if sq in self.cells]

    def locate_side(self, side: Side) -> list[Square]:
        return [square for square, piece in self.occupied() if piece.side == side]

    def locate_kind(self, kind: str, side: Side) -> list[Square]:
        return [
            square
            for square, piece in self.occupied()
            if piece.kind == kind and piece.side == side
        ]

    def place(self, square: Square, piece: Piece) -> None:
        """Setting up a position. The mutator and legality filter only ever call this on a copy."""
        self.cells[square.checked()] = piece

    def remove(self, square: Square) -> Optional[Piece]:
        return self.cells.pop(square.checked(), None)

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Move whatever stands on from_square (capturing anything on to_square). No rules checked."""
        piece = self.remove(from_square)
        if piece is None:
            raise EmptySquareError(f"No piece to move on {from_square.to_algebraic()}.")
        self.place(to_square, piece)

    def copy(self) -> Self:
        return deepcopy(self)
