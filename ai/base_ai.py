"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from engine.board import Board, Move


class BaseAI(ABC):
    """Abstract AI strategy contract."""

    @abstractmethod
    def choose_move(self, board: Board) -> Optional[Move]:
        """Choose a legal move for the side to move, or None if it has none."""
        raise NotImplementedError
