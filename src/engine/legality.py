"""
Legality filter: pseudo-legal moves minus the ones that leave the mover's own leader attacked.

Every candidate is tried on a copy of the board. The board passed in by the caller is never modified.
"""

import logging

from src.core.shared_types import Side
from src.engine.attacks import is_leader_attacked
from src.engine.board import Board
from src.engine.catalog import DEFAULT_CATALOG, PieceCatalog
from src.engine.moves import pseudo_legal_moves
from src.engine.square import Square

logger = logging.getLogger(__name__)


def is_move_legal(
    board: Board,
    from_square: Square,
    to_square: Square,
    side: Side,
    catalog: PieceCatalog = DEFAULT_CATALOG,
) -> bool:
    """
    Return True if the move does not leave the leader of `side` attacked

    plan:
    1. Copy the board
    2. make the candidate move (whatever stood on the target square is simply gone)
    3. determine if the leader is attacked on the new board
    """
    simulated = board.copy()
    simulated.move_piece(from_square, to_square)
    return not is_leader_attacked(simulated, side, catalog)


def legal_moves(
    board: Board, square: Square, catalog: PieceCatalog = DEFAULT_CATALOG
) -> list[Square]:
    """Legal destinations for the piece on `square`. Empty square (or unknown kind): no moves."""
    piece = board.piece(square)
    if piece is None:
        return []

    candidates = pseudo_legal_moves(board, square, catalog)
    moves = [
        destination
        for destination in candidates
        if is_move_legal(board, square, destination, piece.side, catalog)
    ]
    if len(moves) != len(candidates):
        logger.debug(
            "%s on %s: %d of %d candidate moves would expose the leader",
            piece.kind,
            square.to_algebraic(),
            len(candidates) - len(moves),
            len(candidates),
        )
    return moves


def get_legal_moves(
    board: Board,
    square: Square,
    side_to_move: Side,
    catalog: PieceCatalog = DEFAULT_CATALOG,
) -> list[Square]:
    """
    What the presentation layer calls when a piece gets selected.

    Selecting an empty square, or a piece of the side that is not to move, gives no moves.
    """
    piece = board.piece(square)
    if piece is None or piece.side != side_to_move:
        return []
    return legal_moves(board, square, catalog)


def all_legal_moves(
    board: Board, side: Side, catalog: PieceCatalog = DEFAULT_CATALOG
) -> dict[Square, list[Square]]:
    """Legal moves of every piece of `side`, keyed by the square it stands on. Pieces without moves are left out."""
    moves_by_square: dict[Square, list[Square]] = {}
    for square in board.locate_side(side):
        moves = legal_moves(board, square, catalog)
        if moves:
            moves_by_square[square] = moves
    return moves_by_square
