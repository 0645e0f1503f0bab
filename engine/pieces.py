"""Piece definitions for English draughts."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, Optional


class Side(str, Enum):
    """Player side."""

    RED = "red"
    BLACK = "black"

    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.RED else Side.RED


class PieceKind(IntEnum):
    """Content of a single board square."""

    EMPTY = 0
    RED = 1
    BLACK = 2
    RED_KING = 3
    BLACK_KING = 4


PIECE_SIDE: Dict[PieceKind, Optional[Side]] = {
    PieceKind.EMPTY: None,
    PieceKind.RED: Side.RED,
    PieceKind.BLACK: Side.BLACK,
    PieceKind.RED_KING: Side.RED,
    PieceKind.BLACK_KING: Side.BLACK,
}

PIECE_SYMBOL: Dict[PieceKind, str] = {
    PieceKind.EMPTY: ".",
    PieceKind.RED: "r",
    PieceKind.BLACK: "b",
    PieceKind.RED_KING: "R",
    PieceKind.BLACK_KING: "B",
}

_MAN: Dict[Side, PieceKind] = {
    Side.RED: PieceKind.RED,
    Side.BLACK: PieceKind.BLACK,
}

_KING: Dict[Side, PieceKind] = {
    Side.RED: PieceKind.RED_KING,
    Side.BLACK: PieceKind.BLACK_KING,
}


def side_of(kind: PieceKind) -> Optional[Side]:
    """Return the owner of a piece, or None for an empty square."""
    return PIECE_SIDE[PieceKind(kind)]


def is_king(kind: PieceKind) -> bool:
    return kind in (PieceKind.RED_KING, PieceKind.BLACK_KING)


def man_of(side: Side) -> PieceKind:
    return _MAN[side]


def promote(kind: PieceKind) -> PieceKind:
    """Crown a man; kings and empty squares are returned unchanged."""
    side = side_of(kind)
    if side is None:
        return PieceKind(kind)
    return _KING[side]


def demote(kind: PieceKind) -> PieceKind:
    side = side_of(kind)
    if side is None:
        return PieceKind(kind)
    return _MAN[side]
