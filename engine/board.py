"""Draughts board state, legal move generation, and move application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from engine.pieces import PIECE_SYMBOL, PieceKind, Side, demote, is_king, man_of, promote, side_of
from engine.rules import (
    BOARD_SIZE,
    COLUMN_LETTERS,
    Position,
    in_bounds,
    is_dark_square,
    move_directions,
    position_to_notation,
    promotion_row,
    step,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """A single ply: one diagonal step or one single jump."""

    start: Position
    end: Position
    is_jump: bool = False
    captured: Tuple[Position, ...] = ()

    def __str__(self) -> str:
        sep = "x" if self.is_jump else "-"
        return f"{position_to_notation(self.start)}{sep}{position_to_notation(self.end)}"


@dataclass(frozen=True)
class _UndoRecord:
    move: Move
    captured_kinds: Tuple[PieceKind, ...]
    promoted: bool


class Board:
    """8x8 draughts board with an explicit side-to-move flag."""

    size: int = BOARD_SIZE

    def __init__(self, turn: Side = Side.RED, setup: bool = True) -> None:
        self.current_turn = turn
        self.grid = np.zeros((self.size, self.size), dtype=np.int8)
        self._history: List[_UndoRecord] = []
        if setup:
            self._place_initial_pieces()

    @classmethod
    def empty(cls, turn: Side = Side.RED) -> "Board":
        """Board with no pieces on it."""
        return cls(turn=turn, setup=False)

    def _place_initial_pieces(self) -> None:
        for row, col in self.iter_positions():
            if not is_dark_square((row, col)):
                continue
            if row < 3:
                self.grid[row, col] = PieceKind.RED
            elif row >= self.size - 3:
                self.grid[row, col] = PieceKind.BLACK

    def clone(self) -> "Board":
        """Copy the board, turn and undo records."""
        cloned = Board.__new__(Board)
        cloned.current_turn = self.current_turn
        cloned.grid = self.grid.copy()
        cloned._history = list(self._history)
        return cloned

    def iter_positions(self) -> Iterable[Position]:
        """Yield all board positions in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col)

    def get_cell(self, pos: Position) -> PieceKind:
        row, col = pos
        return PieceKind(int(self.grid[row, col]))

    def set_cell(self, pos: Position, kind: PieceKind) -> None:
        row, col = pos
        self.grid[row, col] = kind

    def count_pieces(self, side: Side) -> int:
        """Number of men and kings ``side`` has on the board."""
        count = 0
        for pos in self.iter_positions():
            if side_of(self.get_cell(pos)) is side:
                count += 1
        return count

    def encode(self) -> bytes:
        """Raw cell contents, used as a transposition key."""
        return self.grid.tobytes()

    # Move generation.

    def piece_moves(self, pos: Position) -> List[Move]:
        """Moves for the piece on ``pos`` regardless of whose turn it is.

        Captures suppress the piece's simple moves.
        """
        if not in_bounds(pos):
            return []
        kind = self.get_cell(pos)
        side = side_of(kind)
        if side is None:
            return []

        jumps: List[Move] = []
        steps: List[Move] = []
        for direction in move_directions(kind):
            adjacent = step(pos, direction)
            if not in_bounds(adjacent):
                continue
            neighbor = self.get_cell(adjacent)
            if neighbor is PieceKind.EMPTY:
                steps.append(Move(start=pos, end=adjacent))
                continue
            if side_of(neighbor) is side:
                continue
            landing = step(pos, direction, 2)
            if in_bounds(landing) and self.get_cell(landing) is PieceKind.EMPTY:
                jumps.append(Move(start=pos, end=landing, is_jump=True, captured=(adjacent,)))
        return jumps if jumps else steps

    def legal_moves_from(self, pos: Position) -> List[Move]:
        """Moves for the piece on ``pos`` if it belongs to the side to move."""
        if not in_bounds(pos):
            return []
        if side_of(self.get_cell(pos)) is not self.current_turn:
            return []
        return self.piece_moves(pos)

    def legal_moves(self, side: Optional[Side] = None) -> List[Move]:
        """Generate all legal moves for ``side`` (default: side to move).

        When any piece can capture, only captures are legal.
        """
        if side is None:
            side = self.current_turn
        jumps: List[Move] = []
        steps: List[Move] = []
        for pos in self.iter_positions():
            if side_of(self.get_cell(pos)) is not side:
                continue
            for move in self.piece_moves(pos):
                if move.is_jump:
                    jumps.append(move)
                else:
                    steps.append(move)
        return jumps if jumps else steps

    def has_legal_move(self, side: Side) -> bool:
        for pos in self.iter_positions():
            if side_of(self.get_cell(pos)) is side and self.piece_moves(pos):
                return True
        return False

    def is_game_over(self) -> bool:
        """True when either side has no legal move."""
        return not self.has_legal_move(Side.RED) or not self.has_legal_move(Side.BLACK)

    def winner(self) -> Optional[Side]:
        """Side that wins because the side to move is stuck, if any."""
        if self.has_legal_move(self.current_turn):
            return None
        return self.current_turn.opponent()

    # Move application.

    def apply_move(self, move: Move) -> bool:
        """Apply a legal move and switch turn.

        Returns False without touching the board if the move is not legal
        for the side to move.
        """
        if move not in self.legal_moves_from(move.start):
            LOGGER.debug("Rejected illegal move %s for %s", move, self.current_turn.value)
            return False
        self.push_move(move)
        return True

    def push_move(self, move: Move) -> None:
        """Apply a move without legality checks."""
        moving = self.get_cell(move.start)
        side = side_of(moving)
        if side is None:
            raise ValueError(f"No piece on {move.start} for move {move}")

        captured_kinds = tuple(self.get_cell(pos) for pos in move.captured)
        for pos in move.captured:
            self.set_cell(pos, PieceKind.EMPTY)

        promoted = not is_king(moving) and move.end[0] == promotion_row(side)
        self.set_cell(move.start, PieceKind.EMPTY)
        self.set_cell(move.end, promote(moving) if promoted else moving)

        self._history.append(_UndoRecord(move=move, captured_kinds=captured_kinds, promoted=promoted))
        self.current_turn = self.current_turn.opponent()

    def undo_move(self, move: Move) -> None:
        """Revert ``move``, which must be the most recently applied one."""
        self.current_turn = self.current_turn.opponent()
        moving = self.get_cell(move.end)
        side = side_of(moving)
        if side is None:
            raise ValueError(f"No piece on {move.end} to undo {move}")

        record: Optional[_UndoRecord] = None
        if self._history and self._history[-1].move == move:
            record = self._history.pop()

        if record is not None:
            promoted = record.promoted
            captured_kinds = record.captured_kinds
        else:
            # No record: captured pieces were men of the opponent.
            promoted = is_king(moving) and move.end[0] == promotion_row(side)
            captured_kinds = tuple(man_of(side.opponent()) for _ in move.captured)

        self.set_cell(move.end, PieceKind.EMPTY)
        self.set_cell(move.start, demote(moving) if promoted else moving)
        for pos, kind in zip(move.captured, captured_kinds):
            self.set_cell(pos, kind)

    def render_ascii(self) -> str:
        """Return a human-readable board, rank 8 at the top."""
        lines: List[str] = []
        for row in range(self.size - 1, -1, -1):
            row_cells = [PIECE_SYMBOL[self.get_cell((row, col))] for col in range(self.size)]
            lines.append(f"{row + 1}  " + " ".join(row_cells))
        lines.append("   " + " ".join(COLUMN_LETTERS))
        return "\n".join(lines)
