"""
Type definitions used across layers
"""

from enum import StrEnum


class Side(StrEnum):
    """The two players. Yellow starts at the bottom of the board, Blue at the top."""

    YELLOW = "yellow"
    BLUE = "blue"

    @property
    def opponent(self) -> "Side":
        return Side.BLUE if self == Side.YELLOW else Side.YELLOW


class PieceKind(StrEnum):
    """
    The kinds that ship with the standard catalog.

    NOTE: Pieces store their kind as a plain string, so a custom catalog can add kinds that are not listed here.
    """

    PAWN = "P"
    ROOK = "R"
    BISHOP = "B"
    QUEEN = "Q"
    KNIGHT = "N"
    HERO = "H"
    WIZARD = "W"
    LEAPER = "L"
