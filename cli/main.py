"""CLI entrypoint for playing draughts against the AI."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from ai.minimax_ai import DIFFICULTY_DEPTHS, MinimaxAI
from engine.board import Board, Move
from engine.pieces import Side
from engine.rules import notation_to_position, position_to_notation

InputFn = Callable[[str], str]

INSTRUCTIONS = """
Welcome to AI Checkers!
Instructions:
- Red pieces are r, black pieces are b
- Uppercase letters (R/B) represent kings
- Enter squares in algebraic notation (e.g. 'b6')
- Type 'quit' to end the game
"""


class QuitGame(Exception):
    """Raised when the player asks to leave the game."""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play checkers in terminal.")
    parser.add_argument(
        "--difficulty",
        type=int,
        default=None,
        choices=sorted(DIFFICULTY_DEPTHS),
        help="1 easy, 2 medium, 3 hard (prompted when omitted)",
    )
    parser.add_argument(
        "--human-side",
        type=str,
        default="red",
        choices=["red", "black"],
        help="Which side the human controls",
    )
    parser.add_argument(
        "--no-transposition",
        action="store_true",
        help="Disable the search transposition cache",
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args(argv)


def _read(prompt: str, input_fn: InputFn) -> str:
    text = input_fn(prompt).strip()
    if text.lower() in {"quit", "exit"}:
        raise QuitGame()
    return text


def prompt_difficulty(input_fn: InputFn = input) -> int:
    """Ask until the player enters a difficulty between 1 and 3."""
    while True:
        print("Select difficulty level:")
        print("1. Easy")
        print("2. Medium")
        print("3. Hard")
        choice = _read("Enter choice (1-3): ", input_fn)
        if choice.isdigit() and int(choice) in DIFFICULTY_DEPTHS:
            return int(choice)


def prompt_player_move(board: Board, input_fn: InputFn = input) -> Move:
    """Ask for a piece and a destination until a legal move is chosen."""
    while True:
        start = notation_to_position(_read("Select a piece to move (or 'quit'): ", input_fn))
        if start is None:
            print("Invalid position. Use format like 'b6'.")
            continue

        moves = board.legal_moves_from(start)
        if not moves:
            print("No valid moves for this piece. Choose another.")
            continue

        print("Possible moves (type 'x' to pick another piece):")
        print(" ".join(position_to_notation(move.end) for move in moves))
        answer = _read("Enter move: ", input_fn)
        if answer.lower() == "x":
            continue

        end = notation_to_position(answer)
        chosen = next((move for move in moves if move.end == end), None)
        if chosen is None:
            print("Invalid move. Try again.")
            continue
        return chosen


def run_cli(argv: Optional[List[str]] = None, input_fn: InputFn = input) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    logger = logging.getLogger("checkers.cli")

    print(INSTRUCTIONS)
    try:
        difficulty = args.difficulty if args.difficulty is not None else prompt_difficulty(input_fn)
    except QuitGame:
        print("Exiting game.")
        return

    human_side = Side.RED if args.human_side == "red" else Side.BLACK
    board = Board()
    ai = MinimaxAI(
        difficulty=difficulty,
        use_transposition=not args.no_transposition,
        maximizing_side=human_side.opponent(),
    )
    logger.info(
        "Starting game. Human=%s AI=%s depth=%d",
        human_side.value,
        human_side.opponent().value,
        ai.depth,
    )

    while True:
        print()
        print(board.render_ascii())
        print(f"Turn: {board.current_turn.value}")

        winner = board.winner()
        if winner is not None:
            print(f"{winner.value.capitalize()} wins!")
            break

        if board.current_turn is human_side:
            print(f"\nYour turn ({human_side.value.capitalize()})")
            try:
                move = prompt_player_move(board, input_fn)
            except QuitGame:
                print("Exiting game.")
                break
            board.apply_move(move)
        else:
            print(f"\nAI's turn ({board.current_turn.value.capitalize()})")
            ai_move = ai.choose_move(board)
            if ai_move is None:
                break
            print(f"AI moves from {position_to_notation(ai_move.start)} to {position_to_notation(ai_move.end)}")
            board.apply_move(ai_move)


if __name__ == "__main__":
    run_cli()
