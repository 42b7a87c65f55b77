"""Pygame GUI frontend — fully self-contained.

Click a tile, then an adjacent tile, to shift its row or column.
Size buttons above the board start a new game.
"""

from __future__ import annotations

import random

import pygame

from backend.engine.gamegenerator import DEFAULT_SIZE, SUPPORTED_SIZES
from backend.engine.gameplay import GamePlay
from backend.models.board import TileColor
from backend.models.coordinate import Coordinate

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_GREEN = (166, 227, 161)
COL_PEACH = (250, 179, 135)
COL_PINK = (245, 194, 231)

TILE_COLORS: dict[TileColor, tuple[int, int, int]] = {
    TileColor.RED: (220, 50, 47),
    TileColor.BLUE: (38, 99, 210),
    TileColor.GREEN: (64, 180, 80),
    TileColor.YELLOW: (240, 210, 60),
    TileColor.ORANGE: (245, 140, 30),
    TileColor.WHITE: (240, 240, 240),
}

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 720
TILE_GAP = 6
MARGIN = 20
BOARD_TOP = 110
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    """Window, input loop, and :class:`GameView` implementation in one."""

    def __init__(self, default_size: int, seed: int | None = None) -> None:
        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Rubik Board")
        self._clock = pygame.time.Clock()

        # Fonts
        self._f_big = pygame.font.SysFont("Helvetica", 30, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        # Snapshot pushed by the game
        self._grid: list[list[TileColor]] = []
        self._selected: Coordinate | None = None
        self._moves = 0
        self._message = ""

        self._build_size_btns()
        rng = random.Random(seed) if seed is not None else None
        self._game = GamePlay(default_size, view=self, rng=rng)

    # ── GameView ────────────────────────────────────────────────────────────

    def apply_board(self, grid: list[list[TileColor]]) -> None:
        self._grid = grid

    def apply_selection(self, coordinate: Coordinate | None) -> None:
        self._selected = coordinate

    def apply_move_count(self, moves: int) -> None:
        self._moves = moves

    def apply_game_over(self, message: str) -> None:
        self._message = message

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_size_btns(self) -> None:
        bw, bh, gap = 80, 36, 8
        total_w = len(SUPPORTED_SIZES) * bw + (len(SUPPORTED_SIZES) - 1) * gap
        sx = _cx(total_w)

        self._size_btns: dict[int, _Btn] = {}
        for i, s in enumerate(SUPPORTED_SIZES):
            self._size_btns[s] = _Btn(
                (sx + i * (bw + gap), 56, bw, bh),
                f"{s}×{s}",
                self._f_btn_sm,
            )

    # ── helpers ─────────────────────────────────────────────────────────────

    def _tile_layout(self) -> tuple[int, int, int, int]:
        """Return (tile_px, origin_x, origin_y, total_px) for current game."""
        sz = len(self._grid)
        tile_px = (BOARD_MAX - (sz + 1) * TILE_GAP) // sz
        total = sz * tile_px + (sz + 1) * TILE_GAP
        ox = _cx(total) + TILE_GAP
        oy = BOARD_TOP + TILE_GAP
        return tile_px, ox, oy, total

    def _tile_rect(self, coordinate: Coordinate, tpx: int, ox: int, oy: int) -> pygame.Rect:
        return pygame.Rect(
            ox + coordinate.x * (tpx + TILE_GAP),
            oy + coordinate.y * (tpx + TILE_GAP),
            tpx,
            tpx,
        )

    def _tile_at(self, pos: tuple[int, int]) -> Coordinate | None:
        tpx, ox, oy, _ = self._tile_layout()
        sz = len(self._grid)
        for x in range(sz):
            for y in range(sz):
                coordinate = Coordinate(x, y)
                if self._tile_rect(coordinate, tpx, ox, oy).collidepoint(pos):
                    return coordinate
        return None

    def _new_game(self, size: int) -> None:
        self._message = ""
        self._game.new_game(size)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw(self) -> None:
        self._surf.fill(COL_BASE)
        sz = len(self._grid)
        tpx, ox, oy, total = self._tile_layout()

        _blit_center(
            self._surf,
            self._f_title.render(f"Rubik Board  {sz}×{sz}", True, COL_TEXT),
            16,
        )

        for s, btn in self._size_btns.items():
            btn.bg = COL_GREEN if s == sz else COL_SURFACE0
            btn.fg = COL_BASE if s == sz else COL_TEXT
            btn.draw(self._surf)

        # board bg
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(_cx(total), BOARD_TOP, total, total),
            border_radius=10,
        )

        # tiles
        for x in range(sz):
            for y in range(sz):
                coordinate = Coordinate(x, y)
                rect = self._tile_rect(coordinate, tpx, ox, oy)
                pygame.draw.rect(
                    self._surf, TILE_COLORS[self._grid[x][y]], rect, border_radius=6
                )
                if coordinate == self._selected:
                    pygame.draw.rect(
                        self._surf, COL_PEACH, rect, width=5, border_radius=6
                    )

        y = BOARD_TOP + total + 14
        _blit_center(
            self._surf,
            self._f_body.render(
                f"{self._moves} moves   {self._game.games_played} games won",
                True,
                COL_PINK,
            ),
            y,
        )
        y += 28

        for line in self._message.splitlines():
            _blit_center(self._surf, self._f_big.render(line, True, COL_GREEN), y)
            y += 36

        _blit_center(
            self._surf,
            self._f_small.render(
                "Click two adjacent tiles to shift     R  restart     Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            WIN_H - 28,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _handle(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._size_btns.values():
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for s, b in self._size_btns.items():
                if b.hit(ev.pos):
                    self._new_game(s)
                    return True
            coordinate = self._tile_at(ev.pos)
            if coordinate is not None:
                self._message = ""
                self._game.select(coordinate)
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                self._new_game(self._game.size)
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT or not self._handle(ev):
                    running = False
                    break

            self._draw()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(size: int = DEFAULT_SIZE, seed: int | None = None) -> None:
    """Launch the Pygame GUI."""
    app = PygameApp(size, seed)
    app.run_loop()
