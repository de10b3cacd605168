"""
A square on the board plus the offset arithmetic every move generator shares.

(placed in its own module as multiple other modules need to import it)

Coordinates: column grows to the right, row grows downwards, (0, 0) is the top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import OutOfBoundsError

# Columns x rows
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]


@dataclass(frozen=True, order=True)
class Square:
    col: int
    row: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation as shown on screen: 'a8' is the top-left (0, 0), 'h1' the bottom-right (7, 7)"""
        if len(sq) != 2 or not sq[0].isalpha() or not sq[1].isdigit():
            raise OutOfBoundsError(f"Cannot interpret {sq!r} as a square name.")
        square = cls(ord(sq[0].lower()) - ord("a"), BOARD_DIMENSIONS[1] - int(sq[1]))
        return square.checked()

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{BOARD_DIMENSIONS[1] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.col < BOARD_DIMENSIONS[0]) and (
            0 <= self.row < BOARD_DIMENSIONS[1]
        )

    def checked(self) -> Square:
        """Return the square itself, or raise when it lies off the board"""
        if not self.is_within_bounds():
            raise OutOfBoundsError(
                f"Square ({self.col}, {self.row}) is outside of the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )
        return self

    def offset(self, delta: Vector) -> Square:
        """The square reached by stepping once along `delta`. May lie off the board: check with is_within_bounds()."""
        dc, dr = delta
        return Square(self.col + dc, self.row + dr)

    @property
    def index(self) -> int:
        """Row-major index, a canonical key for ordering and deduplication"""
        return self.row * BOARD_DIMENSIONS[0] + self.col


def all_squares() -> list[Square]:
    """Every square on the board, in row-major order"""
    return [
        Square(col, row)
        for row in range(BOARD_DIMENSIONS[1])
        for col in range(BOARD_DIMENSIONS[0])
    ]
