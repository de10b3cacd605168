"""Applying a (validated) move: produces the next board, the previous one stays as it was."""

import logging

from src.core.exceptions import EmptySquareError
from src.engine.board import Board
from src.engine.catalog import DEFAULT_CATALOG, PieceCatalog
from src.engine.pieces import promotion_row
from src.engine.square import Square

logger = logging.getLogger(__name__)


def is_promotion_move(
    board: Board,
    from_square: Square,
    to_square: Square,
    catalog: PieceCatalog = DEFAULT_CATALOG,
) -> bool:
    """check if a pawn lands on the opposing back rank with this move"""
    piece = board.piece(from_square)
    to_square.checked()
    if piece is None:
        return False
    return catalog.is_pawn(piece.kind) and to_square.row == promotion_row(piece.side)


def apply_move(
    board: Board,
    from_square: Square,
    to_square: Square,
    catalog: PieceCatalog = DEFAULT_CATALOG,
) -> Board:
    """
    Return the board after the move.
    ---

    The move must already be validated (see legality.py). This:
    1. moves the piece and marks it as moved (anything on the target square is captured)
    2. clears the source square
    3. promotes a pawn reaching the opposing back rank into the catalog's promotion kind

    Toggling the side to move is up to the caller.
    """
    piece = board.piece(from_square)
    if piece is None:
        raise EmptySquareError(
            f"Cannot move from {from_square.to_algebraic()}: the square is empty."
        )

    promote = is_promotion_move(board, from_square, to_square, catalog)
    new_board = board.copy()
    new_board.remove(from_square)
    moved_piece = piece.moved()
    if promote:
        moved_piece = moved_piece.promote_to(catalog.promotion_kind)
        logger.debug(
            "%s pawn promoted to %s on %s",
            piece.side,
            catalog.promotion_kind,
            to_square.to_algebraic(),
        )
    new_board.place(to_square, moved_piece)
    return new_board
