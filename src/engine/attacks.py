"""
Attack / check detection
---

"Is the leader of this side in the line of sight of any enemy piece?"

Rather than inverting every movement rule, we simply ask each enemy piece for its pseudo-legal destinations.
Custom pieces need no extra code for that. Cost is O(pieces x generator cost).
"""

import logging
from typing import Optional

from src.core.shared_types import Side
from src.engine.board import Board
from src.engine.catalog import DEFAULT_CATALOG, PieceCatalog
from src.engine.moves import pseudo_legal_moves
from src.engine.square import Square

logger = logging.getLogger(__name__)


def find_leader(
    board: Board, side: Side, catalog: PieceCatalog = DEFAULT_CATALOG
) -> Optional[Square]:
    """First leader of `side` in row-major order, None if the side has none"""
    leaders = board.locate_kind(catalog.leader_kind, side)
    return leaders[0] if leaders else None


def is_square_attacked(
    board: Board,
    square: Square,
    by_side: Side,
    catalog: PieceCatalog = DEFAULT_CATALOG,
) -> bool:
    """Can any piece of `by_side` move onto `square`?"""
    square.checked()
    for attacker_square in board.locate_side(by_side):
        if square in pseudo_legal_moves(board, attacker_square, catalog):
            logger.debug(
                "%s attacked from %s", square.to_algebraic(), attacker_square.to_algebraic()
            )
            return True
    return False


def is_leader_attacked(
    board: Board, side: Side, catalog: PieceCatalog = DEFAULT_CATALOG
) -> bool:
    """
    Is the leader of `side` under attack?

    NOTE: A board without a leader for that side is not an error: it is simply not in check.
    """
    leader_square = find_leader(board, side, catalog)
    if leader_square is None:
        return False
    return is_square_attacked(board, leader_square, side.opponent, catalog)
