"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Position, piece_moves

    board = Board.initial()
    for move in piece_moves(board, Position.parse("g1")):
        print(move)
"""

from chessmoves.core.board import Board, BoardQuery
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.move_generator import (
    EmptySquareError,
    MoveGenerationError,
    MoveGenerator,
    UnknownPieceError,
    directions_for,
    generate_pseudo_legal_moves,
    piece_moves,
    piece_moves_strict,
)
from chessmoves.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessmoves.core.piece import Piece
from chessmoves.core.position import BOARD_SIZE, Position, is_on_board

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Value objects
    "BOARD_SIZE",
    "Move",
    "Piece",
    "Position",
    "is_on_board",
    # Board
    "Board",
    "BoardQuery",
    # Generation
    "MoveGenerator",
    "directions_for",
    "generate_pseudo_legal_moves",
    "piece_moves",
    "piece_moves_strict",
    # Errors
    "EmptySquareError",
    "MoveGenerationError",
    "UnknownPieceError",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
