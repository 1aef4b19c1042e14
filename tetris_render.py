
"""
Drawing for the Tetris window.

- Board cells and the falling piece are flat squares looked up by cell value.
- The score line is cached and re-rendered only when the value changes.
"""
from __future__ import annotations
import pygame
from typing import Dict, List, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import type_id

PALETTE: Dict[str, Tuple[int,int,int]] = {
    "T": (255,13,114),
    "O": (13,194,255),
    "L": (13,255,114),
    "J": (245,56,255),
    "I": (255,142,13),
    "S": (255,225,56),
    "Z": (56,119,255),
}

# Indexed by cell value; 0 is empty and never drawn
COLORS: List[Optional[Tuple[int,int,int]]] = [None] * (len(PALETTE) + 1)
for _t, _col in PALETTE.items():
    COLORS[type_id(_t)] = _col

class Renderer:
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_cells()
        self._score = -1
        self._score_s: Optional[pygame.Surface] = None

    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for v, col in enumerate(COLORS):
            if col is None: continue
            s = pygame.Surface((c, c))
            s.fill(col)
            self.cell_surf[v] = s

    def draw_matrix(self, screen: pygame.Surface, matrix, ox: int, oy: int):
        d = self.dims
        for y, row in enumerate(matrix):
            for x, v in enumerate(row):
                if v and oy + y >= 0:
                    screen.blit(self.cell_surf[v], (d.board_x + (ox + x)*d.cell, d.board_y + (oy + y)*d.cell))

    def draw_score(self, screen: pygame.Surface, score: int):
        if score != self._score:
            self._score = score
            self._score_s = self.font.render(f"Score: {score}", True, (255,255,255))
        rect = self._score_s.get_rect(center=(self.dims.total_w // 2, self.dims.score_h // 2))
        screen.blit(self._score_s, rect)

    def draw(self, screen: pygame.Surface, game):
        screen.fill((0,0,0))
        self.draw_matrix(screen, game.board, 0, 0)
        p = game.player
        self.draw_matrix(screen, p.shape, p.x, p.y)
        self.draw_score(screen, game.score)
