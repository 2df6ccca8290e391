from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gridsnake.geometry import GridGeometry, Vec2

# ----- Colors (renderer only) -----
BG = (0, 0, 0)
FOOD_COLOR = (0, 255, 0)
HEAD_COLOR = (255, 0, 0)
BODY_COLOR = (255, 255, 255)
HAZARD_COLOR = (255, 200, 0)
TEXT_COLOR = (255, 255, 255)

# Segments 1..4 never count as a self-collision. Kept as the reference game
# tuned it; changing it changes which deaths happen.
SELF_COLLISION_EXEMPT = 4


@dataclass
class Config:
    board_width: int = 600
    board_height: int = 600
    cell_size: int = 10
    tick_ms: int = 40
    hazard_count: int = 3
    initial_length: int = 3
    start_cell: Vec2 = (10, 10)
    seed: Optional[int] = None

    def geometry(self) -> GridGeometry:
        return GridGeometry(self.board_width, self.board_height, self.cell_size)

    def validate(self) -> None:
        geometry = self.geometry()
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.hazard_count < 0:
            raise ValueError(f"hazard_count must not be negative, got {self.hazard_count}")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be at least 1, got {self.initial_length}")
        x, y = self.start_cell
        tail = (x - (self.initial_length - 1), y)
        if not (geometry.contains(self.start_cell) and geometry.contains(tail)):
            raise ValueError(
                f"initial body from {self.start_cell} with length {self.initial_length} "
                f"does not fit a {geometry.width_cells}x{geometry.height_cells} board"
            )
