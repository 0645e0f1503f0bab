"""Minimax AI with alpha-beta pruning for draughts."""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from ai.base_ai import BaseAI
from ai.evaluation import evaluate
from engine.board import Board, Move
from engine.pieces import Side

LOGGER = logging.getLogger(__name__)

EASY, MEDIUM, HARD = 1, 2, 3

DIFFICULTY_DEPTHS: Dict[int, int] = {
    EASY: 2,
    MEDIUM: 4,
    HARD: 6,
}


def depth_for_difficulty(difficulty: int) -> int:
    """Search depth for a difficulty level; unknown levels play at medium."""
    return DIFFICULTY_DEPTHS.get(difficulty, DIFFICULTY_DEPTHS[MEDIUM])


class MinimaxAI(BaseAI):
    """Depth-limited alpha-beta search over single-step moves."""

    def __init__(
        self,
        difficulty: int = MEDIUM,
        depth: Optional[int] = None,
        use_transposition: bool = True,
        maximizing_side: Side = Side.BLACK,
        debug_top_k: int = 3,
    ) -> None:
        self.difficulty = difficulty
        self.depth = depth if depth is not None else depth_for_difficulty(difficulty)
        self.use_transposition = use_transposition
        self.maximizing_side = maximizing_side
        self.debug_top_k = max(1, debug_top_k)
        self._ttable: Dict[bytes, int] = {}
        self.nodes = 0
        self.cache_hits = 0

    def choose_move(self, board: Board) -> Optional[Move]:
        return self._search_root(board, self.depth)

    def best_move(self, board: Board, difficulty: Optional[int] = None) -> Optional[Move]:
        """Pick the best move for the side to move at the difficulty's depth."""
        depth = self.depth if difficulty is None else depth_for_difficulty(difficulty)
        return self._search_root(board, depth)

    def _search_root(self, board: Board, depth: int) -> Optional[Move]:
        legal_moves = board.legal_moves()
        if not legal_moves:
            LOGGER.info("No legal moves for %s", board.current_turn.value)
            return None

        self._ttable.clear()
        self.nodes = 0
        self.cache_hits = 0
        mover = board.current_turn
        sign = 1 if mover is self.maximizing_side else -1
        child_maximizing = mover.opponent() is self.maximizing_side

        best_score = -math.inf
        best_move: Optional[Move] = None
        diagnostics: List[Tuple[Move, int]] = []

        for move in legal_moves:
            board.push_move(move)
            try:
                value = self.minimax(board, depth - 1, child_maximizing, -math.inf, math.inf)
            finally:
                board.undo_move(move)
            score = sign * value
            diagnostics.append((move, score))
            # Strict comparison keeps the first of equally scored moves.
            if score > best_score:
                best_score = score
                best_move = move

        self._log_diagnostics(diagnostics, best_move)
        LOGGER.debug(
            "Minimax depth=%d selected %s score=%s nodes=%d cache_hits=%d",
            depth,
            best_move,
            best_score,
            self.nodes,
            self.cache_hits,
        )
        return best_move

    def _log_diagnostics(self, diagnostics: List[Tuple[Move, int]], chosen: Optional[Move]) -> None:
        """Emit top-k candidate breakdown when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        ranked = sorted(diagnostics, key=lambda item: item[1], reverse=True)
        for idx, (move, score) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug("Candidate #%d move=%s score=%d chosen=%s", idx, move, score, move == chosen)

    def minimax(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
    ) -> int:
        """Alpha-beta value of ``board`` from ``maximizing_side``'s view.

        Cached values are keyed on the cells alone, so a value found at a
        shallower depth is reused for deeper queries.
        """
        self.nodes += 1
        if self.use_transposition:
            key = board.encode()
            cached = self._ttable.get(key)
            if cached is not None:
                self.cache_hits += 1
                return cached

        if depth <= 0 or board.is_game_over():
            score = evaluate(board, self.maximizing_side)
            if self.use_transposition:
                self._ttable[key] = score
            return score

        side = self.maximizing_side if maximizing else self.maximizing_side.opponent()
        ordered = self._order_moves(board.legal_moves(side))

        if maximizing:
            best = -math.inf
            for move in ordered:
                board.push_move(move)
                try:
                    score = self.minimax(board, depth - 1, False, alpha, beta)
                finally:
                    board.undo_move(move)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
        else:
            best = math.inf
            for move in ordered:
                board.push_move(move)
                try:
                    score = self.minimax(board, depth - 1, True, alpha, beta)
                finally:
                    board.undo_move(move)
                best = min(best, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break

        result = int(best)
        if self.use_transposition:
            self._ttable[key] = result
        return result

    @staticmethod
    def _order_moves(moves: List[Move]) -> List[Move]:
        """Captures first; stable so generation order breaks ties."""
        return sorted(moves, key=lambda move: not move.is_jump)
