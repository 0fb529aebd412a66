from __future__ import annotations

import logging
import random
from typing import Optional

from kappa_othello.othello.board import (
    BLACK,
    WHITE,
    Board,
    InvalidMove,
    Square,
    color_name,
)
from kappa_othello.othello.strategy import (
    EASY,
    BaseOpponent,
    get_opponent,
    parse_difficulty,
)

logger = logging.getLogger(__name__)

# The human always plays black and moves first.
PLAYER = BLACK
COMPUTER = WHITE

# Phases
PLAYER_TO_MOVE = "PlayerToMove"
COMPUTER_TO_MOVE = "ComputerToMove"
GAME_OVER = "GameOver"

# Status message keys, translated by the presentation layer.
STATUS_PLAYER_TO_MOVE = "PlayerToMove"
STATUS_COMPUTER_THINKING = "ComputerThinking"
STATUS_COMPUTER_PASSED = "ComputerPassed"
STATUS_PLAYER_MUST_PASS = "PlayerMustPass"
STATUS_PLAYER_WINS = "PlayerWins"
STATUS_COMPUTER_WINS = "ComputerWins"
STATUS_DRAW = "Draw"

# Results
PLAYER_WIN = "PlayerWin"
COMPUTER_WIN = "ComputerWin"
DRAW = "Draw"

RESULT_STATUSES = {
    PLAYER_WIN: STATUS_PLAYER_WINS,
    COMPUTER_WIN: STATUS_COMPUTER_WINS,
    DRAW: STATUS_DRAW,
}


class GameNotOver(Exception):
    pass


class Ply:
    def __init__(
        self, color: int, square: Optional[Square], flipped: set[Square]
    ) -> None:
        self.color = color
        self.square = square
        self.flipped = flipped

    def is_pass(self) -> bool:
        return self.square is None

    def __repr__(self) -> str:
        if self.square is None:
            return f"Ply({color_name(self.color)}, pass)"
        return f"Ply({color_name(self.color)}, {Board.square_to_field(self.square)})"


class Game:
    """
    Turn controller for one game of the human (black) against the computer (white).

    Commands return False when they are rejected and never modify the game in that
    case. The presentation layer calls `player_move()` on clicks and
    `advance_computer()` from a timer once the phase is COMPUTER_TO_MOVE.
    """

    def __init__(
        self,
        difficulty: str = EASY,
        opponent: Optional[BaseOpponent] = None,
        board: Optional[Board] = None,
    ) -> None:
        self.difficulty = parse_difficulty(difficulty)
        self.opponent = opponent or get_opponent(self.difficulty)
        self.board = board or Board.start()

        self.phase = PLAYER_TO_MOVE
        self.current_player = PLAYER
        self.status = STATUS_PLAYER_TO_MOVE
        self.active = True
        self.plies: list[Ply] = []
        self.last_forced_passes = 0

        # Only reachable when starting from a custom board.
        if self.board.is_game_end():
            self._finish()
        elif not self.board.has_moves(PLAYER):
            self._record(PLAYER, None, set())
            self._set_phase(COMPUTER_TO_MOVE, STATUS_PLAYER_MUST_PASS)

    @classmethod
    def new(cls, difficulty: str, rng: Optional[random.Random] = None) -> Game:
        return Game(difficulty, get_opponent(difficulty, rng))

    def __repr__(self) -> str:
        return f"Game({self.difficulty}, {self.phase}, {self.board})"

    def is_game_over(self) -> bool:
        return self.phase == GAME_OVER

    def accepts_input(self) -> bool:
        return self.active and self.phase == PLAYER_TO_MOVE

    def legal_moves(self, color: int = PLAYER) -> list[Square]:
        return self.board.legal_moves(color)

    def score(self) -> dict[int, int]:
        return self.board.score()

    def result(self) -> str:
        if self.phase != GAME_OVER:
            raise GameNotOver

        score = self.score()
        if score[PLAYER] > score[COMPUTER]:
            return PLAYER_WIN
        if score[COMPUTER] > score[PLAYER]:
            return COMPUTER_WIN
        return DRAW

    def last_move(self) -> Optional[Ply]:
        for ply in reversed(self.plies):
            if not ply.is_pass():
                return ply
        return None

    def forced_passes(self) -> int:
        """Number of times the player had to pass during the last computer turn."""
        return self.last_forced_passes

    def close(self) -> None:
        self.active = False

    def player_move(self, x: int, y: int) -> bool:
        if not self._check_command(PLAYER_TO_MOVE, "player move"):
            return False

        try:
            flipped = self.board.apply(x, y, PLAYER)
        except InvalidMove:
            logger.debug(f"Rejected player move: ({x}, {y}) is not a legal move")
            return False

        self._record(PLAYER, (x, y), flipped)

        if self.board.is_game_end():
            self._finish()
        else:
            self._set_phase(COMPUTER_TO_MOVE, STATUS_COMPUTER_THINKING)

        return True

    def advance_computer(self) -> bool:
        """
        Plays the computer's turn. When the player is left without moves the player
        passes and the computer moves again, until either the player can move or
        the game ends.
        """

        if not self._check_command(COMPUTER_TO_MOVE, "computer move"):
            return False

        self.last_forced_passes = 0

        while True:
            if not self.board.has_moves(COMPUTER):
                self._record(COMPUTER, None, set())

                if self.board.has_moves(PLAYER):
                    self._set_phase(PLAYER_TO_MOVE, STATUS_COMPUTER_PASSED)
                else:
                    self._finish()
                return True

            move = self.opponent.select_move(self.board, COMPUTER)
            assert move is not None

            x, y = move
            flipped = self.board.apply(x, y, COMPUTER)
            self._record(COMPUTER, move, flipped)

            if self.board.is_game_end():
                self._finish()
                return True

            if self.board.has_moves(PLAYER):
                self._set_phase(PLAYER_TO_MOVE, STATUS_PLAYER_TO_MOVE)
                return True

            self._record(PLAYER, None, set())
            self.last_forced_passes += 1
            self.status = STATUS_PLAYER_MUST_PASS

    def _check_command(self, phase: str, command: str) -> bool:
        if not self.active:
            logger.debug(f"Rejected {command}: game is closed")
            return False

        if self.phase == GAME_OVER:
            logger.debug(f"Rejected {command}: game is over")
            return False

        if self.phase != phase:
            logger.debug(f"Rejected {command}: phase is {self.phase}")
            return False

        return True

    def _record(
        self, color: int, square: Optional[Square], flipped: set[Square]
    ) -> None:
        ply = Ply(color, square, flipped)
        self.plies.append(ply)

        if square is None:
            logger.debug(f"{color_name(color).capitalize()} passes")
        else:
            logger.debug(
                f"{color_name(color).capitalize()} plays "
                f"{Board.square_to_field(square)}, flipping {len(flipped)}"
            )

    def _set_phase(self, phase: str, status: str) -> None:
        self.phase = phase
        self.status = status

        if phase == PLAYER_TO_MOVE:
            self.current_player = PLAYER
        elif phase == COMPUTER_TO_MOVE:
            self.current_player = COMPUTER

    def _finish(self) -> None:
        self.phase = GAME_OVER
        result = self.result()
        self.status = RESULT_STATUSES[result]

        score = self.score()
        logger.info(
            f"Game over: {result}, black {score[BLACK]} - white {score[WHITE]}"
        )
