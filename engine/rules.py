"""Rules helpers for 8x8 English draughts."""

from __future__ import annotations

from typing import List, Optional, Tuple

from engine.pieces import PieceKind, Side, is_king, side_of

BOARD_SIZE = 8
COLUMN_LETTERS = "abcdefgh"

Position = Tuple[int, int]
Direction = Tuple[int, int]

# Row-major generation order relies on this ordering staying fixed.
DIAGONALS: Tuple[Direction, ...] = ((1, -1), (1, 1), (-1, -1), (-1, 1))


def in_bounds(pos: Position) -> bool:
    """Return whether a position is inside the board."""
    row, col = pos
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark_square(pos: Position) -> bool:
    """Return whether a square is one of the playable dark squares."""
    row, col = pos
    return (row + col) % 2 == 1


def forward_direction(side: Side) -> int:
    """Row step a man of ``side`` advances by."""
    return 1 if side is Side.RED else -1


def promotion_row(side: Side) -> int:
    """Farthest rank for ``side``, where its men are crowned."""
    return BOARD_SIZE - 1 if side is Side.RED else 0


def home_row(side: Side) -> int:
    return 0 if side is Side.RED else BOARD_SIZE - 1


def move_directions(kind: PieceKind) -> List[Direction]:
    """Diagonal steps available to a piece of the given kind."""
    side = side_of(kind)
    if side is None:
        return []
    if is_king(kind):
        return list(DIAGONALS)
    forward = forward_direction(side)
    return [direction for direction in DIAGONALS if direction[0] == forward]


def step(pos: Position, direction: Direction, distance: int = 1) -> Position:
    row, col = pos
    return (row + direction[0] * distance, col + direction[1] * distance)


def is_valid_notation(text: str) -> bool:
    """Return whether text names a square, e.g. ``b6``."""
    if not isinstance(text, str) or len(text) != 2:
        return False
    column, row = text[0], text[1]
    return column in COLUMN_LETTERS and row in "12345678"


def notation_to_position(text: str) -> Optional[Position]:
    """Convert ``a1``..``h8`` to a zero-based (row, col); None if malformed."""
    if not is_valid_notation(text):
        return None
    return (int(text[1]) - 1, COLUMN_LETTERS.index(text[0]))


def position_to_notation(pos: Position) -> str:
    """Convert a zero-based (row, col) to algebraic notation."""
    row, col = pos
    if not in_bounds(pos):
        raise ValueError(f"Position off board: {pos}")
    return f"{COLUMN_LETTERS[col]}{row + 1}"
