"""Grid positions and the four shift directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


@dataclass(frozen=True)
class Coordinate:
    """A cell position on the board.

    ``x`` selects the column and ``y`` the row; ``y`` grows downward.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coordinates must be non-negative, got ({self.x}, {self.y}).")

    def direction_to(self, other: Coordinate) -> Direction | None:
        """Return the direction associated with *other*, or ``None``.

        Only the four orthogonal neighbours of ``self`` yield a direction::

            other one column right  -> LEFT
            other one column left   -> RIGHT
            other one row below     -> UP
            other one row above     -> DOWN

        Diagonal, identical and distant coordinates are not adjacent.
        """
        if self.y == other.y:
            if self.x == other.x - 1:
                return Direction.LEFT
            if self.x == other.x + 1:
                return Direction.RIGHT
        elif self.x == other.x:
            if self.y == other.y - 1:
                return Direction.UP
            if self.y == other.y + 1:
                return Direction.DOWN
        return None

    def is_adjacent(self, other: Coordinate) -> bool:
        return self.direction_to(other) is not None

    def within(self, size: int) -> bool:
        return self.x < size and self.y < size

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
