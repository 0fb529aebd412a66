# Don't complain about setting env var in the middle of imports.
# ruff: noqa: E402

import logging
import os
import typer
from typing import Optional

from kappa_othello import config
from kappa_othello.arguments import Arguments
from kappa_othello.messages import LANGUAGES
from kappa_othello.othello.strategy import parse_difficulty
from kappa_othello.terminal import TerminalGame

# Disable pygame start-up text.
# This needs to be before first pygame import.
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from kappa_othello.mode.game import GameMode
from kappa_othello.window import Window


def setup_logging() -> None:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arguments(
    difficulty: Optional[str], seed: Optional[int], language: Optional[str]
) -> Arguments:
    args = Arguments.from_config()

    if difficulty is not None:
        try:
            args.difficulty = parse_difficulty(difficulty)
        except ValueError as e:
            raise typer.BadParameter(str(e))

    if seed is not None:
        args.seed = seed

    if language is not None:
        if language not in LANGUAGES:
            languages = ", ".join(LANGUAGES)
            raise typer.BadParameter(
                f'Unknown language "{language}", expected one of: {languages}'
            )
        args.language = language

    return args


def gui() -> None:
    def command(
        difficulty: Optional[str] = typer.Option(None, "-d"),
        seed: Optional[int] = typer.Option(None, "-s"),
        language: Optional[str] = typer.Option(None, "-l"),
    ) -> None:
        setup_logging()
        args = build_arguments(difficulty, seed, language)
        Window(GameMode, args).run()

    typer.run(command)


def play() -> None:
    def command(
        difficulty: Optional[str] = typer.Option(None, "-d"),
        seed: Optional[int] = typer.Option(None, "-s"),
        language: Optional[str] = typer.Option(None, "-l"),
        no_delay: bool = typer.Option(False, "--no-delay"),
    ) -> None:
        setup_logging()
        args = build_arguments(difficulty, seed, language)

        if no_delay:
            args.timing.computer_delay_ms = 0
            args.timing.pass_delay_ms = 0

        TerminalGame(args)()

    typer.run(command)
