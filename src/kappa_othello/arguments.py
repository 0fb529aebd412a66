from __future__ import annotations

from typing import Optional

from kappa_othello import config


class TimingArguments:
    def __init__(self, computer_delay_ms: int, pass_delay_ms: int) -> None:
        self.computer_delay_ms = computer_delay_ms
        self.pass_delay_ms = pass_delay_ms


class Arguments:
    def __init__(
        self,
        difficulty: str,
        seed: Optional[int],
        language: str,
        timing: TimingArguments,
    ) -> None:
        self.difficulty = difficulty
        self.seed = seed
        self.language = language
        self.timing = timing

    @classmethod
    def from_config(cls) -> Arguments:
        return Arguments(
            config.get_difficulty(),
            config.get_seed(),
            config.get_language(),
            TimingArguments(config.get_computer_delay_ms(), config.get_pass_delay_ms()),
        )
