"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and session logic as the vanilla CLI.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import DEFAULT_SIZE, SUPPORTED_SIZES
from backend.engine.gameplay import GamePlay
from backend.models.board import TileColor
from backend.models.coordinate import Coordinate
from frontend.cli.input_handler import get_key
from frontend.cli.session import TerminalView, handle_key

console = Console()

_TILE_STYLE: dict[TileColor, str] = {
    TileColor.RED: "on red",
    TileColor.BLUE: "on blue",
    TileColor.GREEN: "on green",
    TileColor.YELLOW: "on yellow",
    TileColor.ORANGE: "on dark_orange",
    TileColor.WHITE: "on white",
}


# -- board rendering ----------------------------------------------------------


def _render_board(view: TerminalView) -> Table:
    """Return a Rich Table representing the colour grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(view.size):
        table.add_column(width=4, justify="center")

    for y in range(view.size):
        cells: list[Text] = []
        for x in range(view.size):
            coordinate = Coordinate(x, y)
            style = f"bold black {_TILE_STYLE[view.grid[x][y]]}"
            if coordinate == view.selected:
                cells.append(Text(" ** ", style=style))
            elif coordinate == view.cursor:
                cells.append(Text(" [] ", style=style))
            else:
                cells.append(Text("    ", style=style))
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw(view: TerminalView, games_played: int) -> None:
    console.clear()

    stats = Text()
    stats.append(str(view.moves), style="bold yellow")
    stats.append(" moves", style="dim")
    stats.append(f"   {games_played}", style="bold yellow")
    stats.append(" games won", style="dim")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  cursor   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("/".join(str(s) for s in SUPPORTED_SIZES), style="bold cyan")
    controls.append("  new game   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts = [Align.center(_render_board(view)), Text(""), Align.center(stats)]
    if view.message:
        parts.append(Align.center(Text(f"\n{view.message}", style="bold green")))

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Rubik Board  {view.size}×{view.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


# -- public entry point -------------------------------------------------------


def run(size: int = DEFAULT_SIZE, seed: int | None = None) -> None:
    """Launch the Rich CLI."""
    view = TerminalView()
    rng = random.Random(seed) if seed is not None else None
    game = GamePlay(size, view=view, rng=rng)

    while True:
        _draw(view, game.games_played)
        if not handle_key(game, view, get_key()):
            break

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
