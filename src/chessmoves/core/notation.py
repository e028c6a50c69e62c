"""FEN piece-placement parsing and serialisation."""

from __future__ import annotations

from chessmoves.core.board import Board
from chessmoves.core.piece import Piece
from chessmoves.core.position import BOARD_SIZE, Position

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str) -> Board:
    """Parse the piece-placement field of a FEN string into a :class:`Board`.

    A full FEN record is accepted too; only its first field is read.
    """
    fields = text.split()
    if not fields:
        raise ValueError(f"Empty FEN placement: {text!r}")
    placement = fields[0]

    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {text!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_SIZE - rank_idx
        column = 1
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {text!r}")
                column += step
            else:
                if column > BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {text!r}")
                board.add_piece(Position(row, column), Piece.from_char(ch))
                column += 1
            if column > BOARD_SIZE + 1:
                raise ValueError(f"Invalid FEN rank width: {text!r}")
        if column != BOARD_SIZE + 1:
            raise ValueError(f"Invalid FEN rank width: {text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to the FEN piece-placement field."""
    rows: list[str] = []
    for row in range(BOARD_SIZE, 0, -1):
        empty = 0
        text = ""
        for column in range(1, BOARD_SIZE + 1):
            piece = board.piece_at(Position(row, column))
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)
