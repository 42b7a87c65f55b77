"""Output side of a game session — what a frontend must be able to show."""

from __future__ import annotations

from typing import Protocol

from backend.models.board import TileColor
from backend.models.coordinate import Coordinate


class GameView(Protocol):
    """Receives render updates pushed by :class:`GamePlay`.

    ``grid`` is always a private copy (``grid[x][y]``); views may keep it.
    """

    def apply_board(self, grid: list[list[TileColor]]) -> None: ...

    def apply_selection(self, coordinate: Coordinate | None) -> None: ...

    def apply_move_count(self, moves: int) -> None: ...

    def apply_game_over(self, message: str) -> None: ...


class NullView:
    """A view that ignores every update."""

    def apply_board(self, grid: list[list[TileColor]]) -> None:
        pass

    def apply_selection(self, coordinate: Coordinate | None) -> None:
        pass

    def apply_move_count(self, moves: int) -> None:
        pass

    def apply_game_over(self, message: str) -> None:
        pass
