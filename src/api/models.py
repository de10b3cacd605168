"""Requests and Response models for the presentation layer"""

from typing import Self

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Side
from src.engine.board import Board
from src.engine.pieces import Piece
from src.engine.square import BOARD_DIMENSIONS, Square


# --- SHARED MODELS ---
class SquareModel(BaseModel):
    col: int
    row: int

    @field_validator("col", "row")
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        # both dimensions are 8 wide, one check covers col and row
        if not 0 <= value < max(BOARD_DIMENSIONS):
            raise InvalidRequestError(f"Coordinate {value} lies outside of the board.")
        return value

    @classmethod
    def from_square(cls, square: Square) -> Self:
        return cls(col=square.col, row=square.row)

    def to_square(self) -> Square:
        return Square(self.col, self.row)


class PieceModel(BaseModel):
    kind: str
    side: Side
    has_moved: bool = False

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, value: str) -> str:
        if len(value) != 1 or not value.isalpha():
            raise InvalidRequestError(
                f"Piece kind must be a single letter, got {value!r}."
            )
        return value.upper()


class PlacedPieceModel(BaseModel):
    square: SquareModel
    piece: PieceModel


class BoardModel(BaseModel):
    pieces: list[PlacedPieceModel]

    @model_validator(mode="after")
    def validate_unique_squares(self) -> Self:
        squares = [(placed.square.col, placed.square.row) for placed in self.pieces]
        if len(squares) != len(set(squares)):
            raise InvalidRequestError("Two pieces cannot share a square.")
        return self

    @classmethod
    def from_board(cls, board: Board) -> Self:
        return cls(
            pieces=[
                PlacedPieceModel(
                    square=SquareModel.from_square(square),
                    piece=PieceModel(
                        kind=piece.kind, side=piece.side, has_moved=piece.has_moved
                    ),
                )
                for square, piece in board.occupied()
            ]
        )

    def to_board(self) -> Board:
        board = Board.empty()
        for placed in self.pieces:
            board.place(
                placed.square.to_square(),
                Piece(placed.piece.kind, placed.piece.side, placed.piece.has_moved),
            )
        return board


# --- REQUEST MODELS ---
class LegalMovesRequest(BaseModel):
    board: BoardModel
    square: SquareModel
    side_to_move: Side


class ApplyMoveRequest(BaseModel):
    board: BoardModel
    from_square: SquareModel
    to_square: SquareModel

    @model_validator(mode="after")
    def validate_distinct_squares(self) -> Self:
        if self.from_square == self.to_square:
            raise InvalidRequestError("A move needs two different squares.")
        return self


class LeaderStatusRequest(BaseModel):
    board: BoardModel
    side: Side


# --- RESPONSE MODELS ---
class LegalMovesResponse(BaseModel):
    square: SquareModel
    side_to_move: Side
    legal_moves: list[SquareModel]


class ApplyMoveResponse(BaseModel):
    board: BoardModel
    promoted: bool


class LeaderStatusResponse(BaseModel):
    side: Side
    leader_attacked: bool
