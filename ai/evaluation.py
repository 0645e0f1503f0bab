"""Static position evaluation."""

from __future__ import annotations

from engine.board import Board
from engine.pieces import PieceKind, Side, is_king, side_of
from engine.rules import home_row

MAN_VALUE = 100
KING_VALUE = 160
ADVANCE_BONUS = 5


def piece_value(kind: PieceKind, row: int) -> int:
    """Worth of one piece standing on ``row``, from its owner's view."""
    side = side_of(kind)
    if side is None:
        return 0
    if is_king(kind):
        return KING_VALUE
    advanced = abs(row - home_row(side))
    return MAN_VALUE + ADVANCE_BONUS * advanced


def evaluate(board: Board, perspective: Side = Side.BLACK) -> int:
    """Material plus advancement; positive favors ``perspective``.

    The side to move does not affect the score.
    """
    score = 0
    for row, col in board.iter_positions():
        kind = board.get_cell((row, col))
        side = side_of(kind)
        if side is None:
            continue
        value = piece_value(kind, row)
        score += value if side is perspective else -value
    return score
