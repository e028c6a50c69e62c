"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmoves.core.board import Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def place(empty_board: Board) -> Callable[[str, Color, PieceType], Position]:
    """Put a piece on ``empty_board`` by square name and return its position."""

    def _place(square: str, color: Color, piece_type: PieceType) -> Position:
        position = Position.parse(square)
        empty_board.add_piece(position, Piece(color, piece_type))
        return position

    return _place
