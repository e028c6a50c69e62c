"""Tests for FEN piece-placement notation."""

import pytest

from chessmoves.core.board import Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position


class TestPlacementParsing:
    def test_starting_placement_matches_initial_board(self) -> None:
        assert board_from_placement(STARTING_PLACEMENT) == Board.initial()

    def test_full_fen_record_accepted(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert board.piece_at(Position.parse("a1")) == Piece(Color.WHITE, PieceType.ROOK)
        assert board.piece_at(Position.parse("e8")) == Piece(Color.BLACK, PieceType.KING)
        assert len(list(board.pieces())) == 3

    def test_serialise_starting_board(self) -> None:
        assert board_to_placement(Board.initial()) == STARTING_PLACEMENT

    def test_serialise_sparse_board(self) -> None:
        text = "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8"
        assert board_to_placement(board_from_placement(text)) == text

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "x7/8/8/8/8/8/8/8",
        ],
    )
    def test_invalid_placement(self, text: str) -> None:
        with pytest.raises(ValueError):
            board_from_placement(text)
