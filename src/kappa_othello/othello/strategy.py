from __future__ import annotations

import logging
import random
from typing import Optional

from kappa_othello.othello.board import Board, Square, color_name

logger = logging.getLogger(__name__)

EASY = "easy"
HARD = "hard"

DIFFICULTIES = [EASY, HARD]

# Indexed as WEIGHTS[y][x].
# Corners are worth taking, squares next to an empty corner give it away.
WEIGHTS = [
    [100, -20, 10, 5, 5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [10, -2, -1, -1, -1, -1, -2, 10],
    [5, -2, -1, -1, -1, -1, -2, 5],
    [5, -2, -1, -1, -1, -1, -2, 5],
    [10, -2, -1, -1, -1, -1, -2, 10],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [100, -20, 10, 5, 5, 10, -20, 100],
]


def parse_difficulty(string: str) -> str:
    difficulty = string.strip().lower()
    if difficulty not in DIFFICULTIES:
        raise ValueError(
            f'Unknown difficulty "{string}", expected one of: {", ".join(DIFFICULTIES)}'
        )
    return difficulty


class BaseOpponent:
    difficulty = ""

    def select_move(self, board: Board, color: int) -> Optional[Square]:
        """Returns the move to play for `color`, or None when it has to pass."""
        raise NotImplementedError


class RandomOpponent(BaseOpponent):
    difficulty = EASY

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def select_move(self, board: Board, color: int) -> Optional[Square]:
        moves = board.legal_moves(color)
        if not moves:
            return None

        move = self.rng.choice(moves)
        logger.debug(
            f"Random move for {color_name(color)}: {Board.square_to_field(move)}"
        )
        return move


class HeuristicOpponent(BaseOpponent):
    """
    Looks one ply ahead: every legal move is scored by the square weight plus the
    number of discs it flips, and the best one is played. Replies are not considered,
    so it will happily give away a corner two moves later.
    """

    difficulty = HARD

    @classmethod
    def evaluate(cls, board: Board, x: int, y: int, color: int) -> int:
        return WEIGHTS[y][x] + len(board.flips_for(x, y, color))

    def select_move(self, board: Board, color: int) -> Optional[Square]:
        best_move: Optional[Square] = None
        best_score = 0

        # Strict comparison keeps the first move in row-major order on ties.
        for x, y in board.legal_moves(color):
            score = self.evaluate(board, x, y, color)
            if best_move is None or score > best_score:
                best_move = (x, y)
                best_score = score

        if best_move is not None:
            logger.debug(
                f"Heuristic move for {color_name(color)}: "
                f"{Board.square_to_field(best_move)} (score {best_score})"
            )

        return best_move


def get_opponent(
    difficulty: str, rng: Optional[random.Random] = None
) -> BaseOpponent:
    difficulty = parse_difficulty(difficulty)

    if difficulty == HARD:
        return HeuristicOpponent()
    return RandomOpponent(rng)
