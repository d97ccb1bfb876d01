
"""
Rendering for the well, the active piece and the side panel.

- Static background (grid + panel frame) is pre-rendered once per Dims.
- Locked blocks live on a cached surface rebuilt only when Stack.version moves.
- HUD text surfaces are re-rendered only when their values change.
Every cell goes through draw_rect(), the single rectangle sink.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Optional, Tuple
from tetris_layout import Dims, COLS, ROWS
from tetris_board import Stack, ghost
from tetris_piece import Piece

TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    interval: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    speed_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self._make_static()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_version = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    def redraw_static(self, screen: pygame.Surface):
        screen.blit(self.bg, (0,0))

    # ---------- Rectangle sink ----------
    @staticmethod
    def draw_rect(surface: pygame.Surface, x: int, y: int, w: int, h: int,
                  color: Tuple[int,int,int], width: int = 0):
        pygame.draw.rect(surface, color, pygame.Rect(x, y, w, h).inflate(-2, -2), width)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, stack: Stack):
        """Rebuilds the locked-blocks surface from the stack."""
        self.board_surface.fill((0,0,0,0))
        for b in stack:
            self.draw_rect(self.board_surface, *b.rect(self.dims.cell), b.color)
        self._board_version = stack.version

    def blit_board_surface(self, screen: pygame.Surface, stack: Stack):
        if stack.version != self._board_version:
            self.rebuild_board_surface(stack)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))

    # ---------- Active piece + ghost ----------
    def draw_piece(self, screen: pygame.Surface, piece: Piece, outline: bool = False):
        for b in piece.blocks:
            if b.y < 0:
                continue
            x, y, w, h = self.dims.to_screen(b.rect(self.dims.cell))
            if outline:
                self.draw_rect(screen, x+2, y+2, w-4, h-4, b.color, 2)
            else:
                self.draw_rect(screen, x, y, w, h, b.color)

    def draw_round(self, screen: pygame.Surface, state):
        self.redraw_static(screen)
        self.blit_board_surface(screen, state.stack)
        if state.active is not None:
            self.draw_piece(screen, ghost(state.stack, state.active), outline=True)
            self.draw_piece(screen, state.active)
        self.draw_panel_hud(screen, state.score, state.lines, state.fall_interval_ms)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, lines: int, interval: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Points: {score}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        if interval != self.hud.interval:
            self.hud.interval = interval
            self.hud.speed_s = f.render(f"Fall: {interval} ms", True, TEXT)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.speed_s, (d.panel_x + 12, d.panel_y + 92))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM_TEXT),
                f.render("↓ Soft drop", True, DIM_TEXT),
                f.render("↑ Rotate", True, DIM_TEXT),
            ]
        y = d.panel_y + 140
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    # ---------- Menu ----------
    def draw_menu(self, screen: pygame.Surface, last_score: Optional[int], best_score: int):
        d = self.dims
        self.redraw_static(screen)
        cx = d.board_x + d.board_w // 2
        cy = d.board_y + d.board_h // 2
        lines = [(self.big_font, "TETRIS", (230,240,255)),
                 (self.font, "Enter to play", TEXT),
                 (self.font, "F1 settings", DIM_TEXT)]
        if last_score is not None:
            lines.append((self.font, f"Last: {last_score}   Best: {best_score}", TEXT))
        y = cy - 60
        for font, text, col in lines:
            surf = font.render(text, True, col)
            screen.blit(surf, surf.get_rect(center=(cx, y)))
            y += 40
