"""PyQt6 GUI frontend — a grid of tile buttons with a new-game menu.

The window rebuilds its button grid whenever the board size changes and
shows a message box when a game is won.
"""

from __future__ import annotations

import random
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gamegenerator import DEFAULT_SIZE, SUPPORTED_SIZES
from backend.engine.gameplay import GamePlay
from backend.models.board import TileColor
from backend.models.coordinate import Coordinate

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_TEXT = "#cdd6f4"
_PINK = "#f5c2e7"
_PEACH = "#fab387"
_OVERLAY0 = "#6c7086"

_TILE_CSS: dict[TileColor, str] = {
    TileColor.RED: "#dc322f",
    TileColor.BLUE: "#2663d2",
    TileColor.GREEN: "#40b450",
    TileColor.YELLOW: "#f0d23c",
    TileColor.ORANGE: "#f58c1e",
    TileColor.WHITE: "#f0f0f0",
}

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""


def _tile_css(color: TileColor, selected: bool) -> str:
    border = _PEACH if selected else _MANTLE
    return (
        f"QPushButton{{background:{_TILE_CSS[color]};"
        f"border:5px solid {border};border-radius:8px;}}"
    )


class _MainWindow(QMainWindow):
    """Main window; also serves as the :class:`GameView` of the session."""

    def __init__(self, default_size: int, seed: int | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Rubik Board")
        self.setStyleSheet(_GLOBAL_CSS)

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)
        self.setCentralWidget(page)

        self._frame = QFrame()
        self._frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(self._frame)
        self._grid.setSpacing(4)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._moves_lbl = QLabel()
        self._moves_lbl.setFont(QFont("Helvetica", 13))
        self._moves_lbl.setStyleSheet(f"color:{_PINK};")
        root.addWidget(self._moves_lbl)

        hint = QLabel("Click two adjacent tiles to shift     R  restart     Esc  quit")
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self._build_menu()

        self._btns: list[list[QPushButton]] = []
        self._tiles: list[list[TileColor]] = []
        self._selected: Coordinate | None = None

        rng = random.Random(seed) if seed is not None else None
        self.game = GamePlay(default_size, view=self, rng=rng)

    # -- menu ---

    def _build_menu(self) -> None:
        menu = self.menuBar().addMenu("Game")
        new_game = menu.addMenu("New game")
        for s in SUPPORTED_SIZES:
            action = QAction(f"{s}×{s}", self)
            action.triggered.connect(lambda _, sz=s: self.game.new_game(sz))
            new_game.addAction(action)
        menu.addSeparator()
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        menu.addAction(quit_action)

    # -- GameView ---

    def apply_board(self, grid: list[list[TileColor]]) -> None:
        if len(grid) != len(self._btns):
            self._rebuild_grid(len(grid))
        self._tiles = grid
        self._sync()

    def apply_selection(self, coordinate: Coordinate | None) -> None:
        self._selected = coordinate
        self._sync()

    def apply_move_count(self, moves: int) -> None:
        self._moves_lbl.setText(f"{moves} moves")

    def apply_game_over(self, message: str) -> None:
        QMessageBox.information(self, "Rubik Board", message)

    # -- helpers ---

    def _rebuild_grid(self, size: int) -> None:
        for row in self._btns:
            for b in row:
                self._grid.removeWidget(b)
                b.deleteLater()

        tile_px = max(48, min(96, 420 // size))
        self._btns = []
        for x in range(size):
            column: list[QPushButton] = []
            for y in range(size):
                b = QPushButton()
                b.setFixedSize(tile_px, tile_px)
                b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                b.setCursor(Qt.CursorShape.PointingHandCursor)
                b.clicked.connect(lambda _, cx=x, cy=y: self.game.select(Coordinate(cx, cy)))
                self._grid.addWidget(b, y, x)
                column.append(b)
            self._btns.append(column)
        self.adjustSize()

    def _sync(self) -> None:
        for x, column in enumerate(self._tiles):
            for y, color in enumerate(column):
                selected = self._selected == Coordinate(x, y)
                self._btns[x][y].setStyleSheet(_tile_css(color, selected))

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_R:
            self.game.new_game(self.game.size)
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = DEFAULT_SIZE, seed: int | None = None) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(size, seed)
    window.show()
    qapp.exec()
