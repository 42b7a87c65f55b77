"""Shared state and key handling for the terminal frontends.

Both CLI frontends keep the latest snapshot pushed by the game in a
:class:`TerminalView` and move a keyboard cursor over the board; pressing
Space / Enter forwards the cursor cell to :meth:`GamePlay.select`.
"""

from __future__ import annotations

from backend.engine.gamegenerator import SUPPORTED_SIZES
from backend.engine.gameplay import GamePlay
from backend.models.board import TileColor
from backend.models.coordinate import Coordinate

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}

_SIZE_KEYS: dict[str, int] = {str(s): s for s in SUPPORTED_SIZES}


class TerminalView:
    """Remembers what the game last pushed so the screen can be redrawn."""

    def __init__(self) -> None:
        self.grid: list[list[TileColor]] = []
        self.selected: Coordinate | None = None
        self.moves: int = 0
        self.message: str = ""
        self.cursor = Coordinate(0, 0)

    # -- GameView -------------------------------------------------------------

    def apply_board(self, grid: list[list[TileColor]]) -> None:
        self.grid = grid
        size = len(grid)
        if not self.cursor.within(size):
            self.cursor = Coordinate(0, 0)

    def apply_selection(self, coordinate: Coordinate | None) -> None:
        self.selected = coordinate

    def apply_move_count(self, moves: int) -> None:
        self.moves = moves

    def apply_game_over(self, message: str) -> None:
        self.message = message

    # -- helpers --------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.grid)

    def move_cursor(self, key: str) -> None:
        dx, dy = _CURSOR_STEPS[key]
        self.cursor = Coordinate(
            (self.cursor.x + dx) % self.size,
            (self.cursor.y + dy) % self.size,
        )


def handle_key(game: GamePlay, view: TerminalView, key: str) -> bool:
    """Apply one action string to the game.  Returns False to quit."""
    if key == "quit":
        return False

    if key in _CURSOR_STEPS:
        view.move_cursor(key)
    elif key == "select":
        view.message = ""
        game.select(view.cursor)
    elif key == "restart":
        view.message = ""
        game.new_game(game.size)
    elif key in _SIZE_KEYS:
        view.message = ""
        game.new_game(_SIZE_KEYS[key])
    return True
