import logging
import os
from dotenv import load_dotenv
from typing import Optional

from kappa_othello.messages import LANGUAGES
from kappa_othello.othello.strategy import parse_difficulty

load_dotenv()


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got "{raw}"')

    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")

    return value


def get_difficulty() -> str:
    return parse_difficulty(os.getenv("KAPPA_DIFFICULTY", "easy"))


def get_computer_delay_ms() -> int:
    return _get_int("KAPPA_COMPUTER_DELAY_MS", 1000)


def get_pass_delay_ms() -> int:
    return _get_int("KAPPA_PASS_DELAY_MS", 1500)


def get_seed() -> Optional[int]:
    raw = os.getenv("KAPPA_SEED")
    if raw is None or raw == "":
        return None

    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'KAPPA_SEED must be an integer, got "{raw}"')


def get_language() -> str:
    language = os.getenv("KAPPA_LANGUAGE", "en")
    if language not in LANGUAGES:
        raise ValueError(
            f'Unknown language "{language}", expected one of: {", ".join(LANGUAGES)}'
        )
    return language


def get_log_level() -> int:
    name = os.getenv("KAPPA_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f'Unknown log level "{name}"')
    return level
