"""Defines the pieces that stand on the board"""

from dataclasses import dataclass, replace
from typing import Self

from src.core.exceptions import InvalidLayoutError
from src.core.shared_types import Side

# Each side's own back rank. Yellow sits at the bottom, Blue at the top.
HOME_ROW: dict[Side, int] = {Side.YELLOW: 7, Side.BLUE: 0}

# Row a side's pawns start on (the one allowing a double step)
PAWN_START_ROW: dict[Side, int] = {Side.YELLOW: 6, Side.BLUE: 1}

# Yellow moves up the board (towards row 0), Blue moves down
FORWARD: dict[Side, int] = {Side.YELLOW: -1, Side.BLUE: 1}


def promotion_row(side: Side) -> int:
    """The opposing back rank, where pawns of `side` get promoted"""
    return HOME_ROW[side.opponent]


@dataclass(frozen=True)
class Piece:
    kind: str
    side: Side
    has_moved: bool = False

    @classmethod
    def from_layout(cls, character: str) -> Self:
        """upper case: Yellow pieces, lower case: Blue pieces. The letter itself is the kind."""
        if not character.isalpha():
            raise InvalidLayoutError(f"Invalid piece character: {character!r}")
        side = Side.YELLOW if character.isupper() else Side.BLUE
        return cls(character.upper(), side)

    def to_layout(self) -> str:
        return self.kind.upper() if self.side == Side.YELLOW else self.kind.lower()

    def moved(self) -> Self:
        return replace(self, has_moved=True)

    def promote_to(self, new_kind: str) -> Self:
        """Same side, new kind. Keeps the has_moved flag."""
        return replace(self, kind=new_kind)
