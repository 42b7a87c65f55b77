"""Core gameplay logic — turns cell selections into moves and checks the win condition."""

from __future__ import annotations

import logging

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamegenerator.generator import ShuffleSource
from backend.engine.gameplay.view import GameView, NullView
from backend.engine.gamestate import GameState, Phase
from backend.models.board import MIN_SIZE, Board, TileColor
from backend.models.coordinate import Coordinate, Direction

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a game session.

    Owns the board, the pending selection and the move counter, and pushes
    every change to ``view``.  Two selections of adjacent cells make a move;
    a non-adjacent second selection starts over from that cell.
    """

    def __init__(
        self,
        size: int,
        view: GameView | None = None,
        rng: ShuffleSource | None = None,
    ) -> None:
        self.view: GameView = view if view is not None else NullView()
        self.results: list[int] = []
        self._rng = rng
        self.new_game(size)

    @classmethod
    def from_board(
        cls,
        board: Board,
        view: GameView | None = None,
        rng: ShuffleSource | None = None,
    ) -> "GamePlay":
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj.view = view if view is not None else NullView()
        obj.results = []
        obj._rng = rng
        obj._start(board)
        return obj

    # -- input events ---------------------------------------------------------

    def new_game(self, size: int) -> None:
        """Discard the current board and start over on a fresh, unsolved one."""
        if size < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}, got {size}.")
        self._start(GameGenerator.generate(size, self._rng))
        logger.info("New %d×%d game started", size, size)

    def select(self, coordinate: Coordinate) -> Direction | None:
        """Handle a click on *coordinate*.

        Returns the direction of the committed move, or ``None`` if the click
        only (re)started a selection or was ignored.
        """
        if not self.state.board.contains(coordinate):
            raise ValueError(
                f"Coordinate {coordinate} is outside the {self.size}×{self.size} board."
            )

        while True:
            state = self.state
            if state.phase is Phase.GAME_OVER:
                return None

            if state.phase is Phase.NO_SELECTION:
                state.select(coordinate)
                self.view.apply_selection(coordinate)
                return None

            direction = coordinate.direction_to(state.selected)
            if direction is not None:
                self._make_move(direction, state.selected)
                return direction

            logger.debug(
                "%s is not adjacent to %s, restarting selection",
                coordinate,
                state.selected,
            )
            state.clear_selection()
            self.view.apply_selection(None)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.state.board.size

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def selected(self) -> Coordinate | None:
        return self.state.selected

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    @property
    def grid(self) -> list[list[TileColor]]:
        return self.state.board.get_grid()

    @property
    def games_played(self) -> int:
        return len(self.results)

    # -- helpers --------------------------------------------------------------

    def _start(self, board: Board) -> None:
        self.state = GameState(board)
        self.view.apply_board(board.get_grid())
        self.view.apply_selection(None)
        self.view.apply_move_count(0)

    def _make_move(self, direction: Direction, selected: Coordinate) -> None:
        state = self.state

        # The line is always the one through the first selection.
        index = selected.x if direction.is_vertical else selected.y
        state.board.make_move(direction, index)

        state.clear_selection()
        state.increment_moves()
        logger.debug("Moved %s line %d (move %d)", direction.value, index, state.moves)
        logger.debug("Board after move %d:\n%s", state.moves, state.board.pretty())

        self.view.apply_board(state.board.get_grid())
        self.view.apply_selection(None)
        self.view.apply_move_count(state.moves)

        if state.check_game_over():
            self._game_over()

    def _game_over(self) -> None:
        moves = self.state.moves
        self.results.append(moves)
        logger.info("Game over after %d moves", moves)
        self.view.apply_game_over(f"Game over!\nMoves: {moves}")
        self.new_game(self.size)
