from __future__ import annotations

import pytest

from backend.models.coordinate import Coordinate, Direction


@pytest.mark.parametrize(
    ("start", "target", "expected"),
    [
        (Coordinate(1, 1), Coordinate(2, 1), Direction.LEFT),
        (Coordinate(1, 1), Coordinate(0, 1), Direction.RIGHT),
        (Coordinate(1, 1), Coordinate(1, 2), Direction.UP),
        (Coordinate(1, 1), Coordinate(1, 0), Direction.DOWN),
        (Coordinate(0, 1), Coordinate(0, 0), Direction.DOWN),
        (Coordinate(0, 0), Coordinate(0, 1), Direction.UP),
    ],
)
def test_direction_to_adjacent(start: Coordinate, target: Coordinate, expected: Direction) -> None:
    assert start.direction_to(target) is expected


@pytest.mark.parametrize(
    "target",
    [
        Coordinate(1, 1),  # identical
        Coordinate(2, 2),  # diagonal
        Coordinate(0, 0),  # diagonal
        Coordinate(3, 1),  # two columns away
        Coordinate(1, 3),  # two rows away
    ],
)
def test_direction_to_not_adjacent(target: Coordinate) -> None:
    start = Coordinate(1, 1)
    assert start.direction_to(target) is None
    assert not start.is_adjacent(target)


def test_direction_is_asymmetric() -> None:
    a, b = Coordinate(2, 3), Coordinate(3, 3)
    assert a.direction_to(b) is Direction.LEFT
    assert b.direction_to(a) is Direction.RIGHT


def test_coordinates_compare_by_value() -> None:
    assert Coordinate(1, 2) == Coordinate(1, 2)
    assert len({Coordinate(1, 2), Coordinate(1, 2), Coordinate(2, 1)}) == 2


def test_negative_coordinate_rejected() -> None:
    with pytest.raises(ValueError):
        Coordinate(-1, 0)


def test_within() -> None:
    assert Coordinate(2, 2).within(3)
    assert not Coordinate(3, 0).within(3)
    assert not Coordinate(0, 3).within(3)


def test_vertical_directions() -> None:
    assert Direction.UP.is_vertical and Direction.DOWN.is_vertical
    assert not Direction.LEFT.is_vertical and not Direction.RIGHT.is_vertical
