"""
Geometry/Base movement rules

Key idea: Use strategy pattern to map every movement descriptor (and every special tag) onto a generator function.

All generators return pseudo-legal destinations: squares the piece could reach by its movement pattern and occupancy rules.
Whether the move exposes the mover's own leader is checked later (see legality.py).
"""

import logging
from typing import Any, Callable, Optional, Protocol

from src.core.exceptions import UnknownPieceKindError
from src.engine.catalog import (
    DEFAULT_CATALOG,
    KNIGHT_OFFSETS,
    Compound,
    Leaper,
    PieceCatalog,
    Slider,
    Special,
    SpecialTag,
)
from src.engine.pieces import FORWARD, PAWN_START_ROW, Piece
from src.engine.square import Square, Vector

logger = logging.getLogger(__name__)


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: tuple[Vector, ...]
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    We walk along every direction until we hit another piece or the edge of the board.
    The first occupied square is included only if it holds an opponent's piece (a capture), then the ray stops either way.
    """
    mover = board.piece(square)
    assert mover is not None

    destinations: list[Square] = []
    for direction in directions:
        target_square = square.offset(direction)
        while target_square.is_within_bounds():
            occupant = board.piece(target_square)
            if occupant is not None:
                if occupant.side != mover.side:
                    destinations.append(target_square)
                break
            destinations.append(target_square)
            target_square = target_square.offset(direction)
    return destinations


def single_step_move(
    square: Square, board: Board, deltas: tuple[Vector, ...]
) -> list[Square]:
    """Raycasting is for sliders. This is the equivalent for leapers: one jump per delta, own pieces block the landing square only"""
    mover = board.piece(square)
    assert mover is not None

    destinations: list[Square] = []
    for delta in deltas:
        target_square = square.offset(delta)
        if not target_square.is_within_bounds():
            continue
        occupant = board.piece(target_square)
        if occupant is None or occupant.side != mover.side:
            destinations.append(target_square)
    return destinations


def compound_move(
    square: Square, board: Board, parts: tuple[Slider | Leaper, ...]
) -> list[Square]:
    """Union of the parts' destinations. Deduplicated on the row-major index, first occurrence wins."""
    seen: set[int] = set()
    destinations: list[Square] = []
    for part in parts:
        for target_square in DESCRIPTOR_RULES[type(part)](square, board, part):
            if target_square.index in seen:
                continue
            seen.add(target_square.index)
            destinations.append(target_square)
    return destinations


def candidate_pawn_moves(square: Square, board: Board) -> list[Square]:
    """
    A pawn:
    - moves a single square forward onto an empty square
    - can move two squares when standing on its side's starting row, if both squares are empty
    - takes diagonally forward, but only when an opponent's piece stands there (no en passant)

    NOTE: the double step looks at the row, not at has_moved. A pawn put back on its starting row may double step again.
    """
    pawn = board.piece(square)
    assert pawn is not None
    forward = FORWARD[pawn.side]

    destinations: list[Square] = []
    one_step = square.offset((0, forward))
    if one_step.is_within_bounds() and board.piece(one_step) is None:
        destinations.append(one_step)

        two_steps = one_step.offset((0, forward))
        on_start_row = square.row == PAWN_START_ROW[pawn.side]
        if (
            on_start_row
            and two_steps.is_within_bounds()
            and board.piece(two_steps) is None
        ):
            destinations.append(two_steps)

    for dc in (-1, 1):
        target_square = square.offset((dc, forward))
        if not target_square.is_within_bounds():
            continue
        occupant = board.piece(target_square)
        if occupant is not None and occupant.side != pawn.side:
            destinations.append(target_square)
    return destinations


def candidate_knight_moves(square: Square, board: Board) -> list[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(square, board, KNIGHT_OFFSETS)


def candidate_leader_moves(square: Square, board: Board) -> list[Square]:
    """The leader moves a single square in any direction"""
    leader_deltas: tuple[Vector, ...] = (
        (1, 0),
        (-1, 0),
        (0, 1),
        (0, -1),
        (1, 1),
        (1, -1),
        (-1, 1),
        (-1, -1),
    )
    return single_step_move(square, board, leader_deltas)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
SpecialMovesFn = Callable[[Square, Board], list[Square]]
SPECIAL_RULES: dict[SpecialTag, SpecialMovesFn] = {
    SpecialTag.PAWN: candidate_pawn_moves,
    SpecialTag.KNIGHT_JUMP: candidate_knight_moves,
    SpecialTag.LEADER_STEP: candidate_leader_moves,
}

DescriptorMovesFn = Callable[[Square, Board, Any], list[Square]]
DESCRIPTOR_RULES: dict[type, DescriptorMovesFn] = {
    Slider: lambda square, board, slider: raycasting_move(
        square, board, slider.directions
    ),
    Leaper: lambda square, board, leaper: single_step_move(
        square, board, leaper.offsets
    ),
    Compound: lambda square, board, compound: compound_move(
        square, board, compound.parts
    ),
    Special: lambda square, board, special: SPECIAL_RULES[special.tag](square, board),
}


def pseudo_legal_moves(
    board: Board, square: Square, catalog: PieceCatalog = DEFAULT_CATALOG
) -> list[Square]:
    """
    Destinations for the piece standing on `square`, ignoring whether its own leader ends up attacked.
    ---

    An empty square or a kind the catalog does not know yields no moves.
    Off-board squares raise OutOfBoundsError.
    """
    piece = board.piece(square)
    if piece is None:
        return []

    try:
        descriptor = catalog.lookup(piece.kind)
    except UnknownPieceKindError:
        logger.warning(
            "No movement rules for %r on %s, treating it as immovable",
            piece.kind,
            square.to_algebraic(),
        )
        return []

    return DESCRIPTOR_RULES[type(descriptor)](square, board, descriptor)
