"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.position import BOARD_SIZE, Position, all_positions

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardQuery(Protocol):
    """Read-only surface the move generator needs from a board."""

    def piece_at(self, position: Position) -> Piece | None:
        """Piece occupying *position*, or ``None`` if the square is empty."""
        ...


class Board:
    """Mutable 8x8 board indexed by :class:`Position`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        # [row-1][column-1] -> piece or None
        self._squares: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def piece_at(self, position: Position) -> Piece | None:
        return self._squares[position.row - 1][position.column - 1]

    def add_piece(self, position: Position, piece: Piece) -> None:
        """Place *piece* on *position*, replacing whatever was there."""
        self._squares[position.row - 1][position.column - 1] = piece

    def remove_piece(self, position: Position) -> Piece | None:
        """Clear *position* and return the piece that stood there."""
        piece = self.piece_at(position)
        self._squares[position.row - 1][position.column - 1] = None
        return piece

    def __getitem__(self, position: Position) -> Piece | None:
        return self.piece_at(position)

    def __setitem__(self, position: Position, piece: Piece | None) -> None:
        self._squares[position.row - 1][position.column - 1] = piece

    def is_empty(self, position: Position) -> bool:
        return self.piece_at(position) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares in row-major order, optionally filtered by *color*."""
        for position in all_positions():
            piece = self.piece_at(position)
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            yield position, piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = [row.copy() for row in self._squares]
        return b

    def clear(self) -> None:
        self._squares = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for column in range(1, BOARD_SIZE + 1):
            b.add_piece(Position(2, column), Piece(Color.WHITE, PieceType.PAWN))
            b.add_piece(Position(7, column), Piece(Color.BLACK, PieceType.PAWN))

        for column, pt in enumerate(_BACK_RANK, start=1):
            b.add_piece(Position(1, column), Piece(Color.WHITE, pt))
            b.add_piece(Position(8, column), Piece(Color.BLACK, pt))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE, 0, -1):
            cells = []
            for column in range(1, BOARD_SIZE + 1):
                p = self.piece_at(Position(row, column))
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
