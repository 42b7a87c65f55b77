"""Shared fixtures: scripted shuffles and a view that records every push."""

from __future__ import annotations

from typing import Any

import pytest

from backend.models.board import Board, TileColor
from backend.models.coordinate import Coordinate

R, B, G = TileColor.RED, TileColor.BLUE, TileColor.GREEN
Y, O, W = TileColor.YELLOW, TileColor.ORANGE, TileColor.WHITE


class ScriptedShuffle:
    """Stands in for ``random``: each call reorders the list by the next script entry.

    ``None`` leaves the list untouched (coordinates stay in x-major order).
    """

    def __init__(self, *orders: list[int] | None) -> None:
        self.orders = list(orders)
        self.calls = 0

    def shuffle(self, x: list[Any]) -> None:
        order = self.orders[self.calls]
        self.calls += 1
        if order is not None:
            x[:] = [x[i] for i in order]


class RecordingView:
    """Collects ``(kind, payload)`` tuples in the order they were pushed."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def apply_board(self, grid: list[list[TileColor]]) -> None:
        self.events.append(("board", grid))

    def apply_selection(self, coordinate: Coordinate | None) -> None:
        self.events.append(("selection", coordinate))

    def apply_move_count(self, moves: int) -> None:
        self.events.append(("moves", moves))

    def apply_game_over(self, message: str) -> None:
        self.events.append(("game_over", message))

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]

    def last(self, kind: str) -> Any:
        return [payload for k, payload in self.events if k == kind][-1]


# The unshuffled 2×2 layout is solved (every row uniform); swapping the last
# two coordinates yields a checkerboard, which is unsolved.
CHECKER_2X2 = [0, 1, 3, 2]


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def checker_rng() -> ScriptedShuffle:
    return ScriptedShuffle(CHECKER_2X2, CHECKER_2X2, CHECKER_2X2)


@pytest.fixture
def board_3x3() -> Board:
    """
    y0: R B G
    y1: Y O W
    y2: B G R
    """
    return Board.from_rows([
        [R, B, G],
        [Y, O, W],
        [B, G, R],
    ])


@pytest.fixture
def scripted():
    """Factory for :class:`ScriptedShuffle` instances."""
    return ScriptedShuffle
