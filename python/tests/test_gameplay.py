"""Selection state machine and move orchestration."""

from __future__ import annotations

import logging
import random

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Phase
from backend.models.board import Board, TileColor
from backend.models.coordinate import Coordinate, Direction

R, B, G = TileColor.RED, TileColor.BLUE, TileColor.GREEN
Y, O, W = TileColor.YELLOW, TileColor.ORANGE, TileColor.WHITE


# -- scenarios ----------------------------------------------------------------


def test_adjacent_pair_shifts_column(view) -> None:
    board = Board(size=2, tiles=[[R, B], [G, Y]])
    game = GamePlay.from_board(board, view=view)

    assert game.select(Coordinate(0, 0)) is None
    assert game.phase is Phase.ONE_SELECTED

    direction = game.select(Coordinate(0, 1))

    assert direction is Direction.DOWN
    assert game.grid == [[B, R], [G, Y]]
    assert game.moves == 1
    assert game.selected is None
    assert game.phase is Phase.NO_SELECTION
    assert not game.is_game_over


def test_diagonal_click_restarts_selection(view) -> None:
    board = Board(size=2, tiles=[[R, B], [G, Y]])
    game = GamePlay.from_board(board, view=view)

    game.select(Coordinate(0, 0))
    assert game.select(Coordinate(1, 1)) is None

    assert game.selected == Coordinate(1, 1)
    assert game.phase is Phase.ONE_SELECTED
    assert game.moves == 0
    assert game.grid == [[R, B], [G, Y]]


def test_non_adjacent_click_equals_fresh_click(board_3x3: Board) -> None:
    restarted = GamePlay.from_board(board_3x3.copy())
    restarted.select(Coordinate(0, 0))
    restarted.select(Coordinate(2, 2))
    restarted.select(Coordinate(2, 1))

    fresh = GamePlay.from_board(board_3x3.copy())
    fresh.select(Coordinate(2, 2))
    fresh.select(Coordinate(2, 1))

    assert restarted.grid == fresh.grid
    assert restarted.moves == fresh.moves == 1
    assert restarted.selected is fresh.selected is None


def test_second_click_on_same_cell_keeps_it_selected(board_3x3: Board, view) -> None:
    game = GamePlay.from_board(board_3x3, view=view)
    game.select(Coordinate(1, 1))
    game.select(Coordinate(1, 1))

    assert game.selected == Coordinate(1, 1)
    assert game.moves == 0
    assert view.events[-2:] == [
        ("selection", None),
        ("selection", Coordinate(1, 1)),
    ]


@pytest.mark.parametrize(
    ("target", "direction"),
    [
        (Coordinate(2, 1), Direction.RIGHT),
        (Coordinate(0, 1), Direction.LEFT),
        (Coordinate(1, 0), Direction.UP),
        (Coordinate(1, 2), Direction.DOWN),
    ],
)
def test_selected_tile_lands_on_clicked_cell(
    board_3x3: Board, target: Coordinate, direction: Direction
) -> None:
    game = GamePlay.from_board(board_3x3)
    game.select(Coordinate(1, 1))

    assert game.select(target) is direction
    assert game.grid[target.x][target.y] is O
    assert game.moves == 1


def test_row_move_leaves_other_rows_untouched(board_3x3: Board) -> None:
    game = GamePlay.from_board(board_3x3)
    game.select(Coordinate(2, 0))
    game.select(Coordinate(1, 0))  # row 0 shifts left

    assert [game.grid[x][0] for x in range(3)] == [B, G, R]
    assert [game.grid[x][1] for x in range(3)] == [Y, O, W]


# -- render updates -----------------------------------------------------------


def test_new_session_pushes_initial_render(checker_rng, view) -> None:
    game = GamePlay(2, view=view, rng=checker_rng)

    assert view.kinds() == ["board", "selection", "moves"]
    assert view.last("board") == game.grid
    assert view.last("selection") is None
    assert view.last("moves") == 0


def test_move_pushes_board_selection_and_count(board_3x3: Board, view) -> None:
    game = GamePlay.from_board(board_3x3, view=view)
    view.events.clear()

    game.select(Coordinate(1, 1))
    game.select(Coordinate(1, 2))

    assert view.kinds() == ["selection", "board", "selection", "moves"]
    assert view.events[0] == ("selection", Coordinate(1, 1))
    assert view.last("board") == game.grid
    assert view.last("selection") is None
    assert view.last("moves") == 1


def test_pushed_grid_is_a_snapshot(board_3x3: Board, view) -> None:
    game = GamePlay.from_board(board_3x3, view=view)
    pushed = view.last("board")
    pushed[0][0] = W

    assert game.grid[0][0] is R


# -- game over ----------------------------------------------------------------


def test_winning_move_reports_and_restarts(checker_rng, view) -> None:
    board = Board(size=2, tiles=[[R, B], [B, R]])
    game = GamePlay.from_board(board, view=view, rng=checker_rng)
    view.events.clear()

    game.select(Coordinate(0, 0))
    game.select(Coordinate(0, 1))  # column 0 becomes [B, R] -> row 0 is all blue

    assert view.kinds() == [
        "selection",
        "board", "selection", "moves",
        "game_over",
        "board", "selection", "moves",
    ]
    assert view.events[2:4] == [("selection", None), ("moves", 1)]
    assert view.last("game_over") == "Game over!\nMoves: 1"
    assert view.last("moves") == 0

    assert game.results == [1]
    assert game.games_played == 1
    assert game.moves == 0
    assert game.phase is Phase.NO_SELECTION
    assert game.size == 2
    assert not Board(size=2, tiles=game.grid).is_game_over()


def test_clicks_ignored_while_game_over(board_3x3: Board, view) -> None:
    game = GamePlay.from_board(board_3x3, view=view)
    game.state.is_game_over = True
    view.events.clear()

    assert game.select(Coordinate(0, 0)) is None
    assert game.selected is None
    assert view.events == []


def test_game_over_message_counts_every_move(view) -> None:
    board = Board.from_rows([
        [R, R, B],
        [B, G, R],
        [G, B, G],
    ])
    game = GamePlay.from_board(board, view=view, rng=random.Random(5))

    game.select(Coordinate(0, 2))
    game.select(Coordinate(1, 2))  # row 2 right
    game.select(Coordinate(1, 2))
    game.select(Coordinate(0, 2))  # row 2 left again
    assert game.moves == 2
    assert not game.is_game_over

    game.select(Coordinate(2, 1))
    game.select(Coordinate(2, 0))  # column 2 up -> row 0 is all red

    assert view.last("game_over") == "Game over!\nMoves: 3"
    assert game.results == [3]
    assert game.moves == 0
    assert game.size == 3


# -- new game -----------------------------------------------------------------


def test_new_game_resets_session(board_3x3: Board, view) -> None:
    game = GamePlay.from_board(board_3x3, view=view, rng=random.Random(3))
    game.select(Coordinate(1, 1))
    game.select(Coordinate(1, 2))
    game.select(Coordinate(0, 0))

    game.new_game(4)

    assert game.size == 4
    assert game.moves == 0
    assert game.selected is None
    assert game.phase is Phase.NO_SELECTION
    assert not game.is_game_over
    assert view.events[-3:] == [
        ("board", game.grid),
        ("selection", None),
        ("moves", 0),
    ]


@pytest.mark.parametrize("size", [2, 3, 4, 6, 8])
def test_any_size_from_two_is_accepted(size: int) -> None:
    game = GamePlay(size, rng=random.Random(size))
    assert game.size == size
    assert len(game.grid) == size
    assert not game.is_game_over


@pytest.mark.parametrize("size", [0, 1, -3])
def test_invalid_new_game_size_fails_fast(size: int) -> None:
    with pytest.raises(ValueError):
        GamePlay(size)


def test_out_of_bounds_click_fails_fast(board_3x3: Board) -> None:
    game = GamePlay.from_board(board_3x3)
    with pytest.raises(ValueError):
        game.select(Coordinate(3, 0))
    assert game.selected is None


def test_seeded_sessions_are_reproducible() -> None:
    first = GamePlay(4, rng=random.Random(11))
    second = GamePlay(4, rng=random.Random(11))
    assert first.grid == second.grid


def test_committed_move_logs_board(board_3x3: Board, caplog) -> None:
    game = GamePlay.from_board(board_3x3)
    with caplog.at_level(logging.DEBUG, logger="backend.engine.gameplay.game"):
        game.select(Coordinate(1, 1))
        game.select(Coordinate(1, 2))

    expected = "RED\tGREEN\tGREEN\nYELLOW\tBLUE\tWHITE\nBLUE\tORANGE\tRED"
    assert f"Board after move 1:\n{expected}" in caplog.text
