"""
Piece catalog: which movement pattern belongs to which piece kind.

Pure data. The move generators in moves.py turn a descriptor into destination squares.
Adding a piece kind means adding an entry here (or calling `PieceCatalog.extended`); only a piece with truly
new semantics needs a new SpecialTag plus a generator registered in moves.SPECIAL_RULES.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Self

from src.core.exceptions import UnknownPieceKindError
from src.core.shared_types import PieceKind
from src.engine.square import Vector


class SpecialTag(Enum):
    PAWN = "pawn"
    LEADER_STEP = "leader_step"
    KNIGHT_JUMP = "knight_jump"


@dataclass(frozen=True)
class Slider:
    """Repeats each direction until blocked"""

    directions: tuple[Vector, ...]


@dataclass(frozen=True)
class Leaper:
    """Single fixed jump per offset, may jump over pieces"""

    offsets: tuple[Vector, ...]


@dataclass(frozen=True)
class Compound:
    """Union of the squares reachable by each of its parts"""

    parts: tuple[Slider | Leaper, ...]


@dataclass(frozen=True)
class Special:
    """Handled by a dedicated generator instead of generic geometry"""

    tag: SpecialTag


MovementDescriptor = Slider | Leaper | Compound | Special


ORTHOGONALS: tuple[Vector, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONALS: tuple[Vector, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
KNIGHT_OFFSETS: tuple[Vector, ...] = (
    (1, 2),
    (2, 1),
    (-1, 2),
    (-2, 1),
    (1, -2),
    (2, -1),
    (-1, -2),
    (-2, -1),
)
DABBABA_OFFSETS: tuple[Vector, ...] = ((2, 0), (-2, 0), (0, 2), (0, -2))


STANDARD_PIECES: dict[str, MovementDescriptor] = {
    PieceKind.PAWN: Special(SpecialTag.PAWN),
    PieceKind.ROOK: Slider(ORTHOGONALS),
    PieceKind.BISHOP: Slider(DIAGONALS),
    PieceKind.QUEEN: Slider(ORTHOGONALS + DIAGONALS),
    PieceKind.KNIGHT: Special(SpecialTag.KNIGHT_JUMP),
    PieceKind.HERO: Special(SpecialTag.LEADER_STEP),
    # Wizard: bishop + knight
    PieceKind.WIZARD: Compound((Slider(DIAGONALS), Leaper(KNIGHT_OFFSETS))),
    # Leaper: jumps exactly two squares orthogonally
    PieceKind.LEAPER: Leaper(DABBABA_OFFSETS),
}


class PieceCatalog:
    """
    Read-only mapping from piece kind to movement descriptor.
    ---

    Also names the two kinds the rules treat specially:
    * leader_kind: the piece the check detector keeps safe
    * promotion_kind: what a pawn turns into on the far rank (the strongest slider, queen equivalent)
    """

    def __init__(
        self,
        entries: Mapping[str, MovementDescriptor],
        leader_kind: str = PieceKind.HERO,
        promotion_kind: str = PieceKind.QUEEN,
    ) -> None:
        if promotion_kind not in entries:
            raise UnknownPieceKindError(
                f"Promotion kind {promotion_kind!r} is not part of the catalog."
            )
        self._entries: Mapping[str, MovementDescriptor] = MappingProxyType(
            {str(kind): descriptor for kind, descriptor in entries.items()}
        )
        self._leader_kind = str(leader_kind)
        self._promotion_kind = str(promotion_kind)

    @property
    def leader_kind(self) -> str:
        return self._leader_kind

    @property
    def promotion_kind(self) -> str:
        return self._promotion_kind

    def lookup(self, kind: str) -> MovementDescriptor:
        try:
            return self._entries[kind]
        except KeyError:
            raise UnknownPieceKindError(
                f"Piece kind {kind!r} is not registered. Known kinds: {','.join(self._entries)}"
            ) from None

    def __contains__(self, kind: object) -> bool:
        return kind in self._entries

    def kinds(self) -> list[str]:
        return list(self._entries)

    def is_pawn(self, kind: str) -> bool:
        return self._entries.get(kind) == Special(SpecialTag.PAWN)

    def extended(self, entries: Mapping[str, MovementDescriptor]) -> Self:
        """A new catalog with extra (or overridden) kinds. The original stays untouched."""
        return type(self)(
            {**self._entries, **entries},
            leader_kind=self.leader_kind,
            promotion_kind=self.promotion_kind,
        )

    def with_roles(self, leader_kind: str, promotion_kind: str) -> Self:
        """A new catalog with the same entries but other leader/promotion kinds"""
        return type(self)(
            self._entries, leader_kind=leader_kind, promotion_kind=promotion_kind
        )


DEFAULT_CATALOG = PieceCatalog(STANDARD_PIECES)
