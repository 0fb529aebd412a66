import pytest
import random

from kappa_othello.othello.board import BLACK, WHITE, Board
from kappa_othello.othello.game import (
    COMPUTER,
    COMPUTER_TO_MOVE,
    COMPUTER_WIN,
    DRAW,
    GAME_OVER,
    PLAYER,
    PLAYER_TO_MOVE,
    PLAYER_WIN,
    STATUS_COMPUTER_PASSED,
    STATUS_COMPUTER_THINKING,
    STATUS_COMPUTER_WINS,
    STATUS_DRAW,
    STATUS_PLAYER_MUST_PASS,
    STATUS_PLAYER_TO_MOVE,
    STATUS_PLAYER_WINS,
    Game,
    GameNotOver,
)
from kappa_othello.othello.strategy import EASY, HARD, HeuristicOpponent

# After black takes a1, white has discs left but no moves, black can still play d5.
COMPUTER_MUST_PASS = """
-OX-----
--------
--------
--------
XOO-----
--------
--------
--------
"""

# Black can't move. White takes c1, black still can't move, white plays b6 and
# then black can reply on a6 or a8.
PLAYER_PASS_THEN_MOVE = """
OX------
--------
--------
--------
--------
--X-----
-X------
-O------
"""

# Black can't move. White takes c1 and then c8, which removes every black disc.
PLAYER_PASS_THEN_GAME_OVER = """
OX------
--------
--------
--------
--------
--------
--------
OX------
"""


def full_board(black_rows: int) -> Board:
    rows = black_rows * 8
    return Board.from_string("X" * rows + "O" * (64 - rows))


def test_new_game() -> None:
    game = Game.new(EASY)

    assert game.board == Board.start()
    assert game.phase == PLAYER_TO_MOVE
    assert game.current_player == PLAYER == BLACK
    assert game.status == STATUS_PLAYER_TO_MOVE
    assert game.accepts_input()
    assert not game.is_game_over()
    assert game.legal_moves() == [(3, 2), (2, 3), (5, 4), (4, 5)]
    assert game.score() == {BLACK: 2, WHITE: 2}
    assert game.plies == []

    with pytest.raises(GameNotOver):
        game.result()


def test_unknown_difficulty() -> None:
    with pytest.raises(ValueError):
        Game("impossible")


def test_player_move() -> None:
    game = Game(HARD)

    assert game.player_move(2, 3)

    assert game.phase == COMPUTER_TO_MOVE
    assert game.current_player == COMPUTER == WHITE
    assert game.status == STATUS_COMPUTER_THINKING
    assert not game.accepts_input()
    assert game.score() == {BLACK: 4, WHITE: 1}

    ply = game.last_move()
    assert ply is not None
    assert ply.color == BLACK
    assert ply.square == (2, 3)
    assert ply.flipped == {(3, 3)}


@pytest.mark.parametrize(
    ["x", "y"],
    [
        pytest.param(0, 0, id="no-flips"),
        pytest.param(3, 3, id="occupied"),
        pytest.param(8, 0, id="off-board"),
    ],
)
def test_player_move_illegal(x: int, y: int) -> None:
    game = Game(HARD)

    assert not game.player_move(x, y)

    assert game.board == Board.start()
    assert game.phase == PLAYER_TO_MOVE
    assert game.status == STATUS_PLAYER_TO_MOVE
    assert game.plies == []


def test_player_move_out_of_turn() -> None:
    game = Game(HARD)
    game.player_move(2, 3)
    board = game.board.copy()

    assert not game.player_move(2, 2)

    assert game.board == board
    assert game.phase == COMPUTER_TO_MOVE
    assert game.status == STATUS_COMPUTER_THINKING


def test_advance_computer_without_pending_turn() -> None:
    game = Game(HARD)

    assert not game.advance_computer()

    assert game.board == Board.start()
    assert game.phase == PLAYER_TO_MOVE


def test_advance_computer_hard() -> None:
    game = Game(HARD)
    game.player_move(2, 3)

    # Three replies score 0, c3 comes first in row-major order.
    assert game.advance_computer()

    assert game.board.get_square(2, 2) == WHITE
    assert game.board.get_square(3, 3) == WHITE
    assert game.score() == {BLACK: 3, WHITE: 3}
    assert game.phase == PLAYER_TO_MOVE
    assert game.current_player == PLAYER
    assert game.status == STATUS_PLAYER_TO_MOVE
    assert game.accepts_input()
    assert game.forced_passes() == 0

    # Only one computer turn per player move.
    assert not game.advance_computer()


def test_computer_passes() -> None:
    game = Game(HARD, board=Board.from_string(COMPUTER_MUST_PASS))
    assert game.phase == PLAYER_TO_MOVE

    assert game.player_move(0, 0)
    assert game.phase == COMPUTER_TO_MOVE
    board = game.board.copy()

    assert game.advance_computer()

    assert game.board == board
    assert game.phase == PLAYER_TO_MOVE
    assert game.status == STATUS_COMPUTER_PASSED
    assert game.accepts_input()
    assert game.plies[-1].color == WHITE
    assert game.plies[-1].is_pass()
    assert game.legal_moves(PLAYER) == [(3, 4)]

    # Black takes the last white discs, ending the game.
    assert game.player_move(3, 4)

    assert game.is_game_over()
    assert game.phase == GAME_OVER
    assert game.status == STATUS_PLAYER_WINS
    assert game.result() == PLAYER_WIN
    assert game.score() == {BLACK: 7, WHITE: 0}


def test_player_forced_pass_then_move() -> None:
    game = Game(HARD, board=Board.from_string(PLAYER_PASS_THEN_MOVE))

    # Black has no moves on this board, so the game starts with a pass.
    assert game.phase == COMPUTER_TO_MOVE
    assert game.status == STATUS_PLAYER_MUST_PASS
    assert game.plies[0].is_pass()
    assert not game.accepts_input()

    assert game.advance_computer()

    assert [ply.square for ply in game.plies] == [None, (2, 0), None, (1, 5)]
    assert [ply.color for ply in game.plies] == [BLACK, WHITE, BLACK, WHITE]
    assert game.forced_passes() == 1
    assert game.phase == PLAYER_TO_MOVE
    assert game.status == STATUS_PLAYER_TO_MOVE
    assert game.legal_moves(PLAYER) == [(0, 5), (0, 7)]
    assert game.score() == {BLACK: 1, WHITE: 6}


def test_player_forced_pass_then_game_over() -> None:
    game = Game(HARD, board=Board.from_string(PLAYER_PASS_THEN_GAME_OVER))
    assert game.phase == COMPUTER_TO_MOVE

    assert game.advance_computer()

    assert game.forced_passes() == 1
    assert game.is_game_over()
    assert game.status == STATUS_COMPUTER_WINS
    assert game.result() == COMPUTER_WIN
    assert game.score() == {BLACK: 0, WHITE: 6}


@pytest.mark.parametrize(
    ["black_rows", "expected_result", "expected_status"],
    [
        pytest.param(5, PLAYER_WIN, STATUS_PLAYER_WINS, id="player-win"),
        pytest.param(3, COMPUTER_WIN, STATUS_COMPUTER_WINS, id="computer-win"),
        pytest.param(4, DRAW, STATUS_DRAW, id="draw"),
    ],
)
def test_game_over_result(
    black_rows: int, expected_result: str, expected_status: str
) -> None:
    game = Game(EASY, board=full_board(black_rows))

    assert game.is_game_over()
    assert game.result() == expected_result
    assert game.status == expected_status
    assert not game.accepts_input()


def test_game_over_rejects_commands() -> None:
    game = Game(EASY, board=full_board(4))

    assert not game.player_move(0, 0)
    assert not game.advance_computer()
    assert game.board == full_board(4)


def test_closed_game_rejects_commands() -> None:
    game = Game(HARD)
    game.player_move(2, 3)
    board = game.board.copy()

    game.close()

    assert not game.advance_computer()
    assert game.board == board
    assert game.phase == COMPUTER_TO_MOVE
    assert not game.accepts_input()


def test_custom_opponent() -> None:
    opponent = HeuristicOpponent()
    game = Game(EASY, opponent=opponent)
    assert game.opponent is opponent


@pytest.mark.parametrize(
    ["difficulty", "seed"],
    [
        pytest.param(EASY, 1, id="easy-1"),
        pytest.param(EASY, 2, id="easy-2"),
        pytest.param(HARD, 3, id="hard-3"),
        pytest.param(HARD, 4, id="hard-4"),
    ],
)
def test_full_game(difficulty: str, seed: int) -> None:
    rng = random.Random(seed)
    game = Game.new(difficulty, random.Random(seed + 100))

    for _ in range(200):
        if game.is_game_over():
            break

        if game.phase == PLAYER_TO_MOVE:
            moves = game.legal_moves(PLAYER)
            assert moves
            x, y = rng.choice(moves)
            assert game.player_move(x, y)
        else:
            assert game.advance_computer()

        score = game.score()
        assert score[BLACK] + score[WHITE] + game.board.count_empties() == 64
        assert game.accepts_input() == (game.phase == PLAYER_TO_MOVE)

    assert game.is_game_over()
    assert game.board.is_game_end()

    score = game.score()
    if score[BLACK] > score[WHITE]:
        assert game.result() == PLAYER_WIN
    elif score[WHITE] > score[BLACK]:
        assert game.result() == COMPUTER_WIN
    else:
        assert game.result() == DRAW
