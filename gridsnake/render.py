from __future__ import annotations

import pygame

from gridsnake.config import BG, BODY_COLOR, FOOD_COLOR, HAZARD_COLOR, HEAD_COLOR, TEXT_COLOR
from gridsnake.game import Snapshot
from gridsnake.geometry import GridGeometry, Vec2


class Renderer:
    def __init__(self, geometry: GridGeometry, caption: str = "Snake Game") -> None:
        self.geometry = geometry
        pygame.init()
        self._window = pygame.display.set_mode((geometry.board_width, geometry.board_height))
        pygame.display.set_caption(caption)
        self._font = pygame.font.SysFont("Helvetica", 24, bold=True)

    def _rect(self, cell: Vec2) -> pygame.Rect:
        px, py = self.geometry.to_pixels(cell)
        size = self.geometry.cell_size
        return pygame.Rect(px, py, size, size)

    def draw(self, snapshot: Snapshot) -> None:
        self._window.fill(BG)
        if snapshot.running:
            self._draw_board(snapshot)
        else:
            self._draw_game_over()
        pygame.display.flip()

    def _draw_board(self, snapshot: Snapshot) -> None:
        pygame.draw.ellipse(self._window, FOOD_COLOR, self._rect(snapshot.food))

        for i, cell in enumerate(snapshot.body):
            color = HEAD_COLOR if i == 0 else BODY_COLOR
            pygame.draw.rect(self._window, color, self._rect(cell))

        for cell, active in snapshot.hazards:
            if active:
                pygame.draw.ellipse(self._window, HAZARD_COLOR, self._rect(cell))

    def _draw_game_over(self) -> None:
        title = self._font.render("Game Over", True, TEXT_COLOR)
        center = (self.geometry.board_width // 2, self.geometry.board_height // 2)
        self._window.blit(title, title.get_rect(center=center))

    def close(self) -> None:
        pygame.quit()
