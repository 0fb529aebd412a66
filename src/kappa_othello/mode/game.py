from __future__ import annotations

import logging
import pygame
from pygame.event import Event
import random
from typing import Any, Optional

from kappa_othello.arguments import Arguments
from kappa_othello.messages import get_message
from kappa_othello.mode.base import BaseMode
from kappa_othello.othello.board import Board, Square
from kappa_othello.othello.game import (
    COMPUTER_TO_MOVE,
    PLAYER,
    STATUS_PLAYER_MUST_PASS,
    Game,
)
from kappa_othello.othello.strategy import EASY, HARD

logger = logging.getLogger(__name__)


class PendingComputerMove:
    def __init__(self, game: Game, due_ms: int) -> None:
        self.game = game
        self.due_ms = due_ms

    def is_due(self, now_ms: int) -> bool:
        return now_ms >= self.due_ms


class GameMode(BaseMode):
    """
    Plays against the computer. The computer replies after a short delay, a turn in
    which the player had to pass keeps input locked a bit longer so the pass message
    can be read.
    """

    def __init__(self, args: Arguments) -> None:
        self.args = args
        self.difficulty = args.difficulty
        self.rng = random.Random(args.seed)

        self.game = Game.new(self.difficulty, self.rng)
        self.pending: Optional[PendingComputerMove] = None
        self.locked_until_ms = 0

    def new_game(self) -> None:
        self.game.close()
        self.game = Game.new(self.difficulty, self.rng)
        self.pending = None
        self.locked_until_ms = 0
        logger.info(f"New game, difficulty {self.difficulty}")

    def toggle_difficulty(self) -> None:
        if self.difficulty == EASY:
            self.difficulty = HARD
        else:
            self.difficulty = EASY
        self.new_game()

    def on_event(self, event: Event) -> None:
        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_n:
            self.new_game()
        elif event.key == pygame.K_d:
            self.toggle_difficulty()

    def on_move(self, move: Square) -> None:
        if self.game.is_game_over():
            # Restart game
            self.new_game()
            return

        if self.is_locked():
            return

        x, y = move
        if not self.game.player_move(x, y):
            return

        if self.game.phase == COMPUTER_TO_MOVE:
            self.schedule_computer(self.args.timing.computer_delay_ms)

    def on_frame(self, event: Optional[Event]) -> None:
        pending = self.pending
        if pending is None or not pending.is_due(pygame.time.get_ticks()):
            return

        self.pending = None

        # Game was replaced while the computer was thinking.
        if pending.game is not self.game:
            return

        if not self.game.advance_computer():
            return

        if self.game.forced_passes():
            self.locked_until_ms = (
                pygame.time.get_ticks() + self.args.timing.pass_delay_ms
            )

    def schedule_computer(self, delay_ms: int) -> None:
        self.pending = PendingComputerMove(
            self.game, pygame.time.get_ticks() + delay_ms
        )

    def is_locked(self) -> bool:
        return pygame.time.get_ticks() < self.locked_until_ms

    def get_status(self) -> str:
        if self.is_locked() and not self.game.is_game_over():
            return STATUS_PLAYER_MUST_PASS
        return self.game.status

    def get_board(self) -> Board:
        return self.game.board

    def get_ui_details(self) -> dict[str, Any]:
        details: dict[str, Any] = {
            "status": get_message(self.get_status(), self.args.language),
            "score": self.game.score(),
            "difficulty": self.difficulty,
        }

        last_move = self.game.last_move()
        if last_move is not None:
            details["played_move"] = last_move.square
            details["flipped"] = last_move.flipped

        if self.game.accepts_input() and not self.is_locked():
            details["valid_moves"] = set(self.game.legal_moves(PLAYER))

        return details
