"""Generates randomised, unsolved colour boards."""

from __future__ import annotations

import logging
import random
from typing import Any, Protocol

from backend.models.board import MIN_SIZE, Board, TileColor
from backend.models.coordinate import Coordinate

logger = logging.getLogger(__name__)

SUPPORTED_SIZES: tuple[int, ...] = (2, 3, 4, 6)
DEFAULT_SIZE = 4


class ShuffleSource(Protocol):
    """Anything that can shuffle a list in place (``random``, ``random.Random``)."""

    def shuffle(self, x: list[Any]) -> None: ...


class GameGenerator:
    """Scatters ``size`` colours ``size`` times each across the board."""

    @staticmethod
    def colors(size: int) -> list[TileColor]:
        """Return one colour per line, cycling through the palette."""
        palette = list(TileColor)
        return [palette[i % len(palette)] for i in range(size)]

    @staticmethod
    def layout(size: int, rng: ShuffleSource | None = None) -> Board:
        """Return a random board, which may happen to be solved already."""
        if size < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}.")
        rng = rng if rng is not None else random
        colors = GameGenerator.colors(size)

        coordinates = [Coordinate(x, y) for x in range(size) for y in range(size)]
        rng.shuffle(coordinates)

        assignment = {
            coordinate: colors[i % size] for i, coordinate in enumerate(coordinates)
        }
        return Board.from_mapping(size, assignment)

    @staticmethod
    def generate(size: int, rng: ShuffleSource | None = None) -> Board:
        """Return a random board that is *not* already solved."""
        attempts = 1
        board = GameGenerator.layout(size, rng)
        while board.is_game_over():
            logger.debug("Generated %d×%d board is already solved, re-rolling", size, size)
            attempts += 1
            board = GameGenerator.layout(size, rng)
        logger.debug("Generated %d×%d board after %d attempt(s)", size, size, attempts)
        return board
