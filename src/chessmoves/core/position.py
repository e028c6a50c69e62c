"""Board coordinates.

Rows and columns are 1-indexed:
    row 1 is White's back rank, row 8 is Black's;
    column 1 is the a-file, column 8 is the h-file.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"
_RANKS = "12345678"


def is_on_board(row: int, column: int) -> bool:
    """Check whether (row, column) lies on the 8x8 board."""
    return 1 <= row <= BOARD_SIZE and 1 <= column <= BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, column) board square."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not is_on_board(self.row, self.column):
            raise ValueError(f"Off-board position: ({self.row!r}, {self.column!r})")

    # ── Navigation ───────────────────────────────────────────────────────

    def offset(self, drow: int, dcol: int) -> Position | None:
        """Square shifted by (drow, dcol), or ``None`` if it leaves the board."""
        row = self.row + drow
        column = self.column + dcol
        if not is_on_board(row, column):
            return None
        return Position(row, column)

    # ── Notation ─────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Square name, e.g. Position(4, 5) → 'e4'."""
        return _FILES[self.column - 1] + _RANKS[self.row - 1]

    @property
    def name(self) -> str:
        return str(self)

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse square name, e.g. 'e4' → Position(4, 5)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(name[1]) + 1, _FILES.index(name[0]) + 1)


def all_positions() -> list[Position]:
    """Every board square, row 1 to 8, column 1 to 8 within each row."""
    return [
        Position(row, column)
        for row in range(1, BOARD_SIZE + 1)
        for column in range(1, BOARD_SIZE + 1)
    ]
