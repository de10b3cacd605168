"""Orchestration between the presentation layer's request models and the rules engine (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    ApplyMoveRequest,
    ApplyMoveResponse,
    BoardModel,
    LeaderStatusRequest,
    LeaderStatusResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    SquareModel,
)
from src.core.config import Settings, get_settings
from src.engine.attacks import is_leader_attacked
from src.engine.board import Board
from src.engine.catalog import DEFAULT_CATALOG, PieceCatalog
from src.engine.legality import get_legal_moves
from src.engine.mutator import apply_move, is_promotion_move

logger = logging.getLogger(__name__)


class EngineService:
    """Stateless: every request carries the board it is about, every response carries a fresh one."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[PieceCatalog] = None,
    ) -> None:
        self.settings = settings or get_settings()
        # a catalog passed in brings its own leader and promotion kinds
        self.catalog = catalog or DEFAULT_CATALOG.with_roles(
            leader_kind=self.settings.leader_kind,
            promotion_kind=self.settings.promotion_kind,
        )

    def new_board(self) -> BoardModel:
        """The configured starting position"""
        board = Board.from_layout(self.settings.starting_layout)
        return BoardModel.from_board(board)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """A piece got selected: which squares can it move to?"""
        board = request.board.to_board()
        moves = get_legal_moves(
            board, request.square.to_square(), request.side_to_move, self.catalog
        )
        return LegalMovesResponse(
            square=request.square,
            side_to_move=request.side_to_move,
            legal_moves=[SquareModel.from_square(square) for square in moves],
        )

    def apply_move(self, request: ApplyMoveRequest) -> ApplyMoveResponse:
        """
        A highlighted destination got picked.
        ----
        The move is expected to come out of legal_moves(): it is applied as is.
        """
        board = request.board.to_board()
        from_square = request.from_square.to_square()
        to_square = request.to_square.to_square()

        promoted = is_promotion_move(board, from_square, to_square, self.catalog)
        new_board = apply_move(board, from_square, to_square, self.catalog)
        logger.debug(
            "Applied %s -> %s (promoted=%s)",
            from_square.to_algebraic(),
            to_square.to_algebraic(),
            promoted,
        )
        return ApplyMoveResponse(
            board=BoardModel.from_board(new_board), promoted=promoted
        )

    def leader_status(self, request: LeaderStatusRequest) -> LeaderStatusResponse:
        """For an "in check" indicator"""
        board = request.board.to_board()
        return LeaderStatusResponse(
            side=request.side,
            leader_attacked=is_leader_attacked(board, request.side, self.catalog),
        )
