"""
Rendering helpers for the pygame front-end.

- Pre-render one cell Surface per shape colour and blit it.
- Pre-render the static background (walls, preview frame, stats panel).
- Cache the locked blocks in a board Surface; rebuild it only on lock/line clear.
- Cache stats text; re-render only when the values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, List, Optional
from tetro_board import Board
from tetro_layout import Dims
from tetro_piece import Piece

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (200,80,200),
    "J": (235,215,70),
    "L": (90,200,110),
    "S": (80,210,220),
    "Z": (60,170,80),
    "O": (230,80,80),
    "T": (80,110,235),
}
BG = (10,10,14)
FG = (220,220,220)
DIM = (150,150,165)
WALL = (70,70,80)
FLASH = (245,245,245)

TITLE = [
    " _____ _____ _____ _____ _____ ____  _____ _____ _____ _____ _____ _____ ",
    "|_   _|   __|_   _| __  |     |    \\| __  |     |  _  |  _  |   __| __  |",
    "  | | |   __| | | |    -|  |  |  |  |    -|  |  |   __|   __|   __|    -|",
    "  |_| |_____| |_| |__|__|_____|____/|__|__|_____|__|  |__|  |_____|__|__|",
]


@dataclass
class StatsCache:
    score: int = -1
    speed: float = -1.0
    score_s: Optional[pygame.Surface] = None
    speed_s: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, mono: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.mono = mono
        self._make_static()
        self._make_cells()
        self.stats = StatsCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    # ---------- Static background (walls + frames) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        pygame.draw.rect(self.bg, WALL, (d.board_x - d.wall, d.board_y, d.wall, d.board_h + d.wall))
        pygame.draw.rect(self.bg, WALL, (d.board_x + d.board_w, d.board_y, d.wall, d.board_h + d.wall))
        pygame.draw.rect(self.bg, WALL, (d.board_x, d.board_y + d.board_h, d.board_w, d.wall))
        pygame.draw.rect(self.bg, FG, (d.preview_x, d.preview_y, d.preview_w, d.preview_w), 1)
        pygame.draw.rect(self.bg, FG, (d.panel_x, d.panel_y, d.panel_w, d.board_h), 1)

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[t] = s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: Board):
        """Rebuilds the locked blocks surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board.grid):
            for x, t in enumerate(row):
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x*c + 1, y*c + 1))

    def flash_rows(self, screen: pygame.Surface, rows: List[int]):
        d = self.dims
        for r in rows:
            pygame.draw.rect(screen, FLASH, (d.board_x, d.board_y + r*d.cell, d.board_w, d.cell))

    # ---------- Game screen ----------
    def draw_piece(self, screen: pygame.Surface, p: Piece, ox: int, oy: int):
        c = self.dims.cell
        for cell in p.cells:
            screen.blit(self.cell_surf[p.shape], (ox + cell.col*c + 1, oy + cell.row*c + 1))

    def draw_game(self, screen: pygame.Surface, current: Piece, preview: Piece, score: int, speed: float):
        d = self.dims
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        self.draw_piece(screen, current, d.board_x, d.board_y)
        self.draw_piece(screen, preview, d.preview_x, d.preview_y)
        self.draw_stats(screen, score, speed)

    def draw_stats(self, screen: pygame.Surface, score: int, speed: float):
        d = self.dims
        f = self.mono
        if score != self.stats.score:
            self.stats.score = score
            self.stats.score_s = f.render(f"{score:010d}", True, FG)
        if speed != self.stats.speed:
            self.stats.speed = speed
            self.stats.speed_s = f.render(f"{speed:.2g}x", True, FG)
        x = d.panel_x + 16
        third = d.board_h // 3
        screen.blit(f.render("SCORE:", True, DIM), (x, d.panel_y + third - 24))
        screen.blit(self.stats.score_s, (x, d.panel_y + third))
        screen.blit(f.render("SPEED:", True, DIM), (x, d.panel_y + 2*third - 24))
        screen.blit(self.stats.speed_s, (x, d.panel_y + 2*third))

    # ---------- Menus ----------
    def _centered(self, screen: pygame.Surface, font: pygame.font.Font, text: str, y: int, col=FG):
        s = font.render(text, True, col)
        screen.blit(s, s.get_rect(midtop=(self.dims.total_w // 2, y)))

    def draw_title(self, screen: pygame.Surface):
        h = self.dims.total_h
        screen.fill(BG)
        for i, line in enumerate(TITLE):
            self._centered(screen, self.mono, line, h // 3 + i * self.mono.get_linesize())
        self._centered(screen, self.font,
                       "Press [RET] to play, [S] to display the rankings, or [Q] to quit.", h * 2 // 3)

    def draw_rankings(self, screen: pygame.Surface, pairs: List[Tuple[str, int]]):
        h = self.dims.total_h
        screen.fill(BG)
        self._centered(screen, self.font, "TOP-10 RANKINGS", h // 6)
        y = h // 6 + 40
        for name, score in pairs:
            self._centered(screen, self.mono, f"{name}  {score:010d}", y); y += self.mono.get_linesize()
        self._centered(screen, self.font,
                       "Press [T] to go back to the Title Screen or [Q] to quit.", y + 24)

    def draw_popup(self, screen: pygame.Surface, msg: str, y: Optional[int] = None):
        s = self.font.render(msg, True, FG)
        box = s.get_rect(center=(self.dims.total_w // 2, y if y is not None else self.dims.total_h // 2))
        frame = box.inflate(32, 32)
        pygame.draw.rect(screen, BG, frame)
        pygame.draw.rect(screen, FG, frame, 1)
        screen.blit(s, box)

    def draw_name_entry(self, screen: pygame.Surface, name: str, cursor: int):
        h = self.dims.total_h
        self.draw_popup(screen, "You made it into the Top-10! Insert your initials. Press [RET] to end.",
                        h // 2 - 80)
        w = self.mono.size("W")[0]
        s = self.mono.render(name, True, FG)
        box = s.get_rect(center=(self.dims.total_w // 2, h * 2 // 3))
        pygame.draw.rect(screen, BG, box.inflate(40, 40))
        pygame.draw.rect(screen, FG, box.inflate(40, 40), 1)
        screen.blit(s, box)
        pygame.draw.line(screen, FG, (box.x + cursor*w, box.bottom + 2), (box.x + (cursor+1)*w, box.bottom + 2), 2)
