"""Pseudo-legal move generation for a single piece.

Moves are geometrically valid and respect occupancy and capture rules, but
are not checked against leaving the mover's own king in check.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.position import Position, all_positions

if TYPE_CHECKING:
    from chessmoves.core.board import BoardQuery
    from chessmoves.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

Direction: TypeAlias = tuple[int, int]  # (drow, dcol)

ROOK_DIRS: tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[Direction, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS
KING_OFFSETS: tuple[Direction, ...] = QUEEN_DIRS

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
)

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.QUEEN,
    PieceType.ROOK,
)

# Per color: forward row step, double-step start row, promotion row.
_PAWN_FORWARD: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 7}
_PAWN_PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 8, Color.BLACK: 1}

_PIECE_DIRS: dict[PieceType, tuple[Direction, ...]] = {
    PieceType.ROOK: ROOK_DIRS,
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
    PieceType.KING: KING_OFFSETS,
    PieceType.KNIGHT: KNIGHT_OFFSETS,
}


class MoveGenerationError(ValueError):
    """Raised by the strict generator when a square cannot produce moves."""


class EmptySquareError(MoveGenerationError):
    """No piece stands on the requested square."""


class UnknownPieceError(MoveGenerationError):
    """The piece has an unrecognised color or type."""


# -- Direction-set selection ------------------------------------------------


def pawn_directions(color: Color, row: int) -> tuple[Direction, ...]:
    """Forward vectors first (double step only from the start row), then captures."""
    forward = _PAWN_FORWARD.get(color)
    if forward is None:
        return ()
    if row == _PAWN_START_ROW[color]:
        return ((forward, 0), (2 * forward, 0), (forward, 1), (forward, -1))
    return ((forward, 0), (forward, 1), (forward, -1))


def directions_for(piece: Piece, position: Position) -> tuple[Direction, ...]:
    """Ordered direction vectors for *piece* standing on *position*.

    An unrecognised color or piece type yields no directions at all.
    """
    if not piece.is_recognised:
        return ()
    if piece.piece_type == PieceType.PAWN:
        return pawn_directions(piece.color, position.row)
    return _PIECE_DIRS[piece.piece_type]


# -- Generator ----------------------------------------------------------------


class MoveGenerator:
    """Generates pseudo-legal moves against a read-only board.

    Holds nothing but the board reference, so one instance may be shared
    across threads as long as the board is not mutated meanwhile.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardQuery) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def piece_moves(self, position: Position) -> list[Move]:
        """All pseudo-legal moves for the piece on *position*.

        An empty square or an unrecognised piece produces no moves.
        """
        piece = self._board.piece_at(position)
        if piece is None:
            _LOGGER.debug("No piece on %s; generating no moves", position)
            return []

        directions = directions_for(piece, position)
        if not directions:
            _LOGGER.debug(
                "Unrecognised piece %r on %s; generating no moves", piece, position
            )
            return []

        handler = self._HANDLERS[piece.piece_type]
        moves: list[Move] = []
        handler(self, position, piece.color, directions, moves)
        return moves

    def piece_moves_strict(self, position: Position) -> list[Move]:
        """Like :meth:`piece_moves`, but raise instead of returning nothing."""
        piece = self._board.piece_at(position)
        if piece is None:
            raise EmptySquareError(f"No piece on {position}")
        if not piece.is_recognised:
            raise UnknownPieceError(f"Unrecognised piece on {position}: {piece!r}")
        return self.piece_moves(position)

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """Pseudo-legal moves of every *color* piece, scanning row by row."""
        moves: list[Move] = []
        board = self._board
        for position in all_positions():
            piece = board.piece_at(position)
            if piece is not None and piece.color == color:
                moves.extend(self.piece_moves(position))
        return moves

    # -- Movement families (private) ----------------------------------------

    def _gen_sliding(
        self,
        start: Position,
        color: Color,
        directions: tuple[Direction, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for drow, dcol in directions:
            target = start.offset(drow, dcol)
            while target is not None:
                occupant = board.piece_at(target)
                if occupant is None:
                    moves.append(Move(start, target))
                    target = target.offset(drow, dcol)
                    continue
                if occupant.color != color:
                    moves.append(Move(start, target))
                break

    def _gen_single_step(
        self,
        start: Position,
        color: Color,
        directions: tuple[Direction, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for drow, dcol in directions:
            target = start.offset(drow, dcol)
            if target is None:
                continue
            occupant = board.piece_at(target)
            if occupant is None or occupant.color != color:
                moves.append(Move(start, target))

    def _gen_pawn(
        self,
        start: Position,
        color: Color,
        directions: tuple[Direction, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        promotion_row = _PAWN_PROMOTION_ROW[color]

        # Pushes: never capture; a blocked square ends the push sequence.
        for drow, dcol in directions:
            if dcol != 0:
                continue
            target = start.offset(drow, dcol)
            if target is None:
                continue
            if board.piece_at(target) is not None:
                break
            _append_pawn_move(start, target, promotion_row, moves)

        # Captures: only onto an opposing piece.
        for drow, dcol in directions:
            if dcol == 0:
                continue
            target = start.offset(drow, dcol)
            if target is None:
                continue
            occupant = board.piece_at(target)
            if occupant is not None and occupant.color != color:
                _append_pawn_move(start, target, promotion_row, moves)

    _HANDLERS: dict[
        PieceType,
        Callable[[MoveGenerator, Position, Color, tuple[Direction, ...], list[Move]], None],
    ] = {
        PieceType.ROOK: _gen_sliding,
        PieceType.BISHOP: _gen_sliding,
        PieceType.QUEEN: _gen_sliding,
        PieceType.KING: _gen_single_step,
        PieceType.KNIGHT: _gen_single_step,
        PieceType.PAWN: _gen_pawn,
    }


def _append_pawn_move(
    start: Position, target: Position, promotion_row: int, moves: list[Move]
) -> None:
    if target.row == promotion_row:
        for pt in PROMOTION_TYPES:
            moves.append(Move(start, target, pt))
    else:
        moves.append(Move(start, target))


# -- Functional entry points ------------------------------------------------


def piece_moves(board: BoardQuery, position: Position) -> list[Move]:
    """Pseudo-legal moves for the piece on *position* of *board*."""
    return MoveGenerator(board).piece_moves(position)


def piece_moves_strict(board: BoardQuery, position: Position) -> list[Move]:
    """Fail-fast variant of :func:`piece_moves`.

    Raises:
        EmptySquareError: *position* holds no piece.
        UnknownPieceError: the piece's color or type is unrecognised.
    """
    return MoveGenerator(board).piece_moves_strict(position)


def generate_pseudo_legal_moves(board: BoardQuery, color: Color) -> list[Move]:
    """Pseudo-legal moves for every piece of *color* on *board*."""
    return MoveGenerator(board).generate_pseudo_legal_moves(color)
