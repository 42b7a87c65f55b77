"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import Enum

from backend.models.board import Board
from backend.models.coordinate import Coordinate


class Phase(Enum):
    NO_SELECTION = "no_selection"
    ONE_SELECTED = "one_selected"
    GAME_OVER = "game_over"


class GameState:
    """Holds the current board, the pending selection and the move counter."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.selected: Coordinate | None = None
        self.is_game_over: bool = False

    @property
    def phase(self) -> Phase:
        if self.is_game_over:
            return Phase.GAME_OVER
        if self.selected is None:
            return Phase.NO_SELECTION
        return Phase.ONE_SELECTED

    # -- selection ------------------------------------------------------------

    def select(self, coordinate: Coordinate) -> None:
        self.selected = coordinate

    def clear_selection(self) -> None:
        self.selected = None

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def check_game_over(self) -> bool:
        self.is_game_over = self.board.is_game_over()
        return self.is_game_over
