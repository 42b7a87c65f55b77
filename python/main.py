#!/usr/bin/env python3
"""Rubik Board colour-shift puzzle.

Usage::

    python main.py                   # interactive menu
    python main.py -f rich -s 3      # Rich terminal, 3×3
    python main.py -f pygame         # Pygame GUI
    python main.py -f pyqt --seed 7  # PyQt GUI, reproducible boards
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import DEFAULT_SIZE, SUPPORTED_SIZES  # noqa: E402
from backend.models.board import MIN_SIZE  # noqa: E402

logger = logging.getLogger("rubik_board")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _ask_size() -> int:
    sizes = ", ".join(str(s) for s in SUPPORTED_SIZES)
    raw = input(f"  Grid size ({sizes}; default {DEFAULT_SIZE}): ").strip()
    if not raw:
        return DEFAULT_SIZE
    try:
        size = int(raw)
        if size < MIN_SIZE:
            raise ValueError
    except ValueError:
        print(f"  Invalid size — using {DEFAULT_SIZE}.")
        size = DEFAULT_SIZE
    return size


def _launch(frontend: Frontend, size: int, seed: Optional[int]) -> None:
    logger.info("Launching %s frontend (%d×%d, seed=%s)", frontend.value, size, size, seed)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(size=size, seed=seed)


def _menu_loop(seed: Optional[int]) -> None:
    choices = {
        "1": Frontend.vanilla,
        "2": Frontend.rich,
        "3": Frontend.pygame,
        "4": Frontend.pyqt,
    }
    while True:
        print()
        print("  ====================================")
        print("         R U B I K   B O A R D        ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame GUI)")
        print("  4.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in choices:
            _launch(choices[choice], _ask_size(), seed)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE,
        envvar="RUBIK_BOARD_SIZE",
        help=f"Grid size (at least {MIN_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="RUBIK_BOARD_SEED",
        help="Seed for reproducible board layouts.",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose",
        count=True,
        help="Log more (-v info, -vv debug).",
    ),
) -> None:
    """Rubik Board colour-shift puzzle."""
    _configure_logging(verbose)

    if frontend is None:
        _menu_loop(seed)
        return

    _launch(frontend, size, seed)


if __name__ == "__main__":
    app()
