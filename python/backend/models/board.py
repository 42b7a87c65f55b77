"""Board model for the colour-shift puzzle."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.models.coordinate import Coordinate, Direction

MIN_SIZE = 2


class TileColor(StrEnum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    WHITE = "white"


@dataclass
class Board:
    """Represents the square board of coloured tiles.

    Tiles are stored column-major: ``tiles[x][y]`` is the colour at
    ``Coordinate(x, y)``.  A move rotates one full column or row by one cell.
    """

    size: int
    tiles: list[list[TileColor]]

    def __post_init__(self) -> None:
        if self.size < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}, got {self.size}.")
        if len(self.tiles) != self.size or any(
            len(column) != self.size for column in self.tiles
        ):
            raise ValueError(
                f"Expected {self.size} columns of {self.size} tiles for a "
                f"{self.size}×{self.size} board."
            )

    def __setattr__(self, name: str, value: object) -> None:
        # size is fixed once set; tiles stay mutable for the shifts.
        if name == "size" and "size" in self.__dict__:
            raise AttributeError("Board size cannot change after construction.")
        super().__setattr__(name, value)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_mapping(cls, size: int, colors: Mapping[Coordinate, TileColor]) -> Board:
        """Create a board from a ``Coordinate -> TileColor`` mapping.

        Every coordinate in ``[0, size)²`` must be present.
        """
        missing = [
            Coordinate(x, y)
            for x in range(size)
            for y in range(size)
            if Coordinate(x, y) not in colors
        ]
        if missing or len(colors) != size * size:
            raise ValueError(
                f"Mapping does not cover a {size}×{size} board "
                f"({len(missing)} cells missing, {len(colors)} given)."
            )
        tiles = [[colors[Coordinate(x, y)] for y in range(size)] for x in range(size)]
        return cls(size=size, tiles=tiles)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[TileColor]]) -> Board:
        """Create a board from a row-major listing (``rows[y][x]``).

        Example::

            Board.from_rows([
                [TileColor.RED, TileColor.GREEN],
                [TileColor.BLUE, TileColor.YELLOW],
            ])
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError(f"Expected {size} tiles in every row.")
        tiles = [[rows[y][x] for y in range(size)] for x in range(size)]
        return cls(size=size, tiles=tiles)

    # -- moves ----------------------------------------------------------------

    def make_move(self, direction: Direction, index: int) -> None:
        """Shift column or row *index* one cell in *direction*, wrapping around.

        ``UP``/``DOWN`` address a column, ``LEFT``/``RIGHT`` a row.
        """
        shifts = {
            Direction.UP: self.move_up,
            Direction.DOWN: self.move_down,
            Direction.LEFT: self.move_left,
            Direction.RIGHT: self.move_right,
        }
        shifts[direction](index)

    def move_up(self, col: int) -> None:
        """The top tile wraps to the bottom, all others move up one row."""
        column = self.tiles[self._check_index(col)]
        column.append(column.pop(0))

    def move_down(self, col: int) -> None:
        """The bottom tile wraps to the top, all others move down one row."""
        column = self.tiles[self._check_index(col)]
        column.insert(0, column.pop())

    def move_left(self, row: int) -> None:
        """The leftmost tile wraps to the right end, all others move left."""
        self._check_index(row)
        first = self.tiles[0][row]
        for x in range(self.size - 1):
            self.tiles[x][row] = self.tiles[x + 1][row]
        self.tiles[self.size - 1][row] = first

    def move_right(self, row: int) -> None:
        """The rightmost tile wraps to the left end, all others move right."""
        self._check_index(row)
        last = self.tiles[self.size - 1][row]
        for x in range(self.size - 1, 0, -1):
            self.tiles[x][row] = self.tiles[x - 1][row]
        self.tiles[0][row] = last

    # -- queries --------------------------------------------------------------

    def is_game_over(self) -> bool:
        """Check whether any column or any row holds a single colour."""
        if any(_uniform(column) for column in self.tiles):
            return True
        return any(
            _uniform(self.tiles[x][y] for x in range(self.size))
            for y in range(self.size)
        )

    def tile(self, coordinate: Coordinate) -> TileColor:
        return self.tiles[coordinate.x][coordinate.y]

    def contains(self, coordinate: Coordinate) -> bool:
        return coordinate.within(self.size)

    def get_grid(self) -> list[list[TileColor]]:
        """Return a copy of the tiles that callers may freely mutate."""
        return [column[:] for column in self.tiles]

    def color_counts(self) -> Counter[TileColor]:
        return Counter(color for column in self.tiles for color in column)

    def pretty(self) -> str:
        """One text line per row, tiles separated by tabs."""
        return "\n".join(
            "\t".join(self.tiles[x][y].name for x in range(self.size))
            for y in range(self.size)
        )

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.get_grid())

    # -- helpers --------------------------------------------------------------

    def _check_index(self, index: int) -> int:
        if not 0 <= index < self.size:
            raise IndexError(
                f"Line index {index} out of range for a {self.size}×{self.size} board."
            )
        return index


def _uniform(line: Iterable[TileColor]) -> bool:
    it = iter(line)
    first = next(it)
    return all(color == first for color in it)
