"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import random
import sys

from backend.engine.gamegenerator import DEFAULT_SIZE, SUPPORTED_SIZES
from backend.engine.gameplay import GamePlay
from backend.models.board import TileColor
from backend.models.coordinate import Coordinate
from frontend.cli.input_handler import get_key
from frontend.cli.session import TerminalView, handle_key


# -- ANSI helpers -------------------------------------------------------------

_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_TILE_BG: dict[TileColor, str] = {
    TileColor.RED: "\033[41m",
    TileColor.BLUE: "\033[44m",
    TileColor.GREEN: "\033[42m",
    TileColor.YELLOW: "\033[43m",
    TileColor.ORANGE: "\033[48;5;208m",
    TileColor.WHITE: "\033[47m",
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_cell(view: TerminalView, coordinate: Coordinate) -> str:
    color = view.grid[coordinate.x][coordinate.y]
    if coordinate == view.selected:
        mark = "**"
    elif coordinate == view.cursor:
        mark = "[]"
    else:
        mark = "  "
    return f"{_TILE_BG[color]}\033[30;1m {mark} {_R}"


def _render_board(view: TerminalView) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + ("----+" * view.size)
    lines: list[str] = [sep]
    for y in range(view.size):
        cells = [_render_cell(view, Coordinate(x, y)) for x in range(view.size)]
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _draw(view: TerminalView, games_played: int) -> None:
    _clear()
    print(f"  {_C}=== Rubik Board ({view.size}×{view.size}) ==={_R}")
    print()
    print(_render_board(view))
    print()
    print(f"  {_Y}{view.moves}{_R} moves   {_Y}{games_played}{_R} games won")
    if view.message:
        print()
        for line in view.message.splitlines():
            print(f"  {_BOLD}{line}{_R}")
    print()
    sizes = "/".join(str(s) for s in SUPPORTED_SIZES)
    print(
        f"  {_DIM}Arrows/WASD cursor   Space/Enter select   "
        f"{sizes} new game   R restart   Q quit{_R}"
    )


# -- public entry point -------------------------------------------------------


def run(size: int = DEFAULT_SIZE, seed: int | None = None) -> None:
    """Play in the plain terminal until the player quits."""
    view = TerminalView()
    rng = random.Random(seed) if seed is not None else None
    game = GamePlay(size, view=view, rng=rng)

    while True:
        _draw(view, game.games_played)
        if not handle_key(game, view, get_key()):
            break

    _clear()
    print(f"\n  {_C}Goodbye!{_R}\n")
