from __future__ import annotations

import random
import time
from typing import Callable

from kappa_othello.arguments import Arguments
from kappa_othello.messages import get_message
from kappa_othello.othello.board import BLACK, WHITE, Board
from kappa_othello.othello.game import (
    COMPUTER_TO_MOVE,
    PLAYER,
    STATUS_PLAYER_MUST_PASS,
    Game,
)

QUIT_COMMANDS = ["q", "quit", "exit"]
NEW_GAME_COMMANDS = ["n", "new"]


class TerminalGame:
    """Plays a game in the terminal, moves are typed as fields such as "d3"."""

    def __init__(
        self,
        args: Arguments,
        read_line: Callable[[str], str] = input,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.args = args
        self.read_line = read_line
        self.sleep = sleep
        self.rng = random.Random(args.seed)
        self.game = Game.new(args.difficulty, self.rng)

    def message(self, status: str) -> str:
        return get_message(status, self.args.language)

    def show(self) -> None:
        self.game.board.show(PLAYER if self.game.accepts_input() else None)
        score = self.game.score()
        print(f"Black {score[BLACK]} - White {score[WHITE]}")
        print(self.message(self.game.status))

    def new_game(self) -> None:
        self.game.close()
        self.game = Game.new(self.args.difficulty, self.rng)

    def __call__(self) -> None:
        self.show()

        while True:
            if self.game.phase == COMPUTER_TO_MOVE:
                self.sleep(self.args.timing.computer_delay_ms / 1000)
                self.game.advance_computer()

                if self.game.forced_passes():
                    print(self.message(STATUS_PLAYER_MUST_PASS))
                    self.sleep(self.args.timing.pass_delay_ms / 1000)

                self.show()
                continue

            try:
                line = self.read_line("> ").strip().lower()
            except EOFError:
                return

            if line in QUIT_COMMANDS:
                return

            if line in NEW_GAME_COMMANDS or (self.game.is_game_over() and line):
                self.new_game()
                self.show()
                continue

            try:
                x, y = Board.field_to_square(line)
            except ValueError as e:
                print(e)
                continue

            if not self.game.player_move(x, y):
                moves = Board.squares_to_fields(self.game.legal_moves(PLAYER))
                print(f'Cannot play "{line}", legal moves: {moves}')
                continue

            self.show()
