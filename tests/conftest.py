"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.engine.board import Board
from src.engine.pieces import Piece
from src.engine.square import Square

# (col, row) -> layout character (upper case: Yellow, lower case: Blue)
Placements = dict[tuple[int, int], str]


@pytest.fixture
def board_with_pieces() -> Callable[[Placements], Board]:
    """Call the inner function with the pieces to place, e.g. {(4, 7): "H", (4, 0): "r"}"""

    def _create_board(placements: Placements) -> Board:
        board = Board.empty()
        for (col, row), character in placements.items():
            board.place(Square(col, row), Piece.from_layout(character))
        return board

    return _create_board


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()
