from kappa_othello.othello.game import (
    STATUS_COMPUTER_PASSED,
    STATUS_COMPUTER_THINKING,
    STATUS_COMPUTER_WINS,
    STATUS_DRAW,
    STATUS_PLAYER_MUST_PASS,
    STATUS_PLAYER_TO_MOVE,
    STATUS_PLAYER_WINS,
)

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        STATUS_PLAYER_TO_MOVE: "Your turn (black)",
        STATUS_COMPUTER_THINKING: "Kappa is thinking...",
        STATUS_COMPUTER_PASSED: "Kappa passed",
        STATUS_PLAYER_MUST_PASS: "You have no moves. You pass.",
        STATUS_PLAYER_WINS: 'You win! Kappa: "I yield..."',
        STATUS_COMPUTER_WINS: 'Kappa wins! Kappa: "You need more training."',
        STATUS_DRAW: 'Draw! Kappa: "A fine match."',
    },
    "ja": {
        STATUS_PLAYER_TO_MOVE: "あなたの番です (黒)",
        STATUS_COMPUTER_THINKING: "カッパ思考中...",
        STATUS_COMPUTER_PASSED: "カッパはパスしました",
        STATUS_PLAYER_MUST_PASS: "あなたの打つ場所がありません。パスです。",
        STATUS_PLAYER_WINS: "あなたの勝ちです！カッパ「参りました...」",
        STATUS_COMPUTER_WINS: "カッパの勝ちです！カッパ「まだまだ修行が足りぬのう」",
        STATUS_DRAW: "引き分けです！カッパ「良い勝負であった」",
    },
}

LANGUAGES = sorted(MESSAGES)


def get_message(status: str, language: str = "en") -> str:
    try:
        messages = MESSAGES[language]
    except KeyError:
        raise ValueError(f'Unknown language "{language}"')

    return messages[status]
