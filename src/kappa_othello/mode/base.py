from pygame.event import Event
from typing import Any, Optional

from kappa_othello.arguments import Arguments
from kappa_othello.othello.board import Board, Square


class BaseMode:
    def __init__(self, args: Arguments):
        pass

    def on_event(self, event: Event) -> None:
        pass

    def on_frame(self, event: Optional[Event]) -> None:
        pass

    def on_move(self, move: Square) -> None:
        pass

    def get_board(self) -> Board:
        raise NotImplementedError

    def get_ui_details(self) -> dict[str, Any]:
        return {}
