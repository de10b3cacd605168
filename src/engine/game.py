"""
The Game class is the caller-side bookkeeping around the rules engine:
it keeps the current board and whose turn it is, and swaps in a new board after every accepted move.

The engine itself (moves / legality / mutator) is stateless. Nothing here detects the end of the game.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import EmptySquareError, IllegalMoveError, NotYourTurnError
from src.core.shared_types import Side
from src.engine.attacks import is_leader_attacked
from src.engine.board import Board
from src.engine.catalog import DEFAULT_CATALOG, PieceCatalog
from src.engine.legality import get_legal_moves, legal_moves
from src.engine.mutator import apply_move, is_promotion_move
from src.engine.square import Square

logger = logging.getLogger(__name__)


@dataclass
class Game:
    board: Board
    side_to_move: Side = Side.YELLOW
    catalog: PieceCatalog = DEFAULT_CATALOG
    starting_layout: Optional[str] = None
    first_to_move: Side = Side.YELLOW

    @classmethod
    def new_game(
        cls,
        layout: Optional[str] = None,
        catalog: Optional[PieceCatalog] = None,
        first_to_move: Side = Side.YELLOW,
    ) -> Self:
        """Start a game from the standard setup, or from the given layout string"""
        board = Board.from_layout(layout) if layout else Board.starting_position()
        return cls(
            board=board,
            side_to_move=first_to_move,
            catalog=catalog or DEFAULT_CATALOG,
            starting_layout=board.to_layout(),
            first_to_move=first_to_move,
        )

    def reset(self) -> None:
        """Back to the position the game started from, with the side that opened the game to move"""
        self.board = (
            Board.from_layout(self.starting_layout)
            if self.starting_layout
            else Board.starting_position()
        )
        self.side_to_move = self.first_to_move

    def legal_moves(self, square: Square) -> list[Square]:
        """Legal destinations for the piece on `square`. Nothing for an empty square or a piece not on turn."""
        return get_legal_moves(self.board, square, self.side_to_move, self.catalog)

    def is_in_check(self, side: Optional[Side] = None) -> bool:
        """Is the leader of `side` (default: the side to move) attacked?"""
        return is_leader_attacked(self.board, side or self.side_to_move, self.catalog)

    def is_promotion(self, from_square: Square, to_square: Square) -> bool:
        return is_promotion_move(self.board, from_square, to_square, self.catalog)

    def make_move(self, from_square: Square, to_square: Square) -> Board:
        """
        Attempt to make a move
        -----

        1. there must be a piece, and it must be yours
        2. the destination must be one of its legal moves
        3. replace the board, hand the turn to the opponent
        """
        piece = self.board.piece(from_square)
        if piece is None:
            raise EmptySquareError(
                f"There is no piece on {from_square.to_algebraic()} to move."
            )

        if piece.side != self.side_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.side_to_move} to make a move first."
            )

        if to_square not in legal_moves(self.board, from_square, self.catalog):
            raise IllegalMoveError(
                f"Move not allowed: {from_square.to_algebraic()} -> {to_square.to_algebraic()}"
            )

        promoted = is_promotion_move(self.board, from_square, to_square, self.catalog)
        self.board = apply_move(self.board, from_square, to_square, self.catalog)
        logger.info(
            "%s moved %s from %s to %s",
            piece.side,
            piece.kind,
            from_square.to_algebraic(),
            to_square.to_algebraic(),
        )
        if promoted:
            logger.info(
                "%s promoted to %s on %s",
                piece.kind,
                self.catalog.promotion_kind,
                to_square.to_algebraic(),
            )
        self.side_to_move = self.side_to_move.opponent
        return self.board
