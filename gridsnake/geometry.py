from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Vec2 = Tuple[int, int]


def add_pos(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


class Heading(Enum):
    """Unit direction applied to the head each tick (screen coordinates, y grows down)."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def offset(self) -> Vec2:
        return self.value

    @property
    def opposite(self) -> "Heading":
        dx, dy = self.value
        return Heading((-dx, -dy))

    def is_opposite(self, other: "Heading") -> bool:
        return other is self.opposite


@dataclass(frozen=True)
class GridGeometry:
    """Board dimensions in pixels and cells.

    The simulation works purely in cell coordinates; pixel values only matter to
    renderers and to anyone describing positions the way the screen sees them.
    """

    board_width: int = 600
    board_height: int = 600
    cell_size: int = 10

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        for name in ("board_width", "board_height"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
            if value % self.cell_size:
                raise ValueError(
                    f"{name}={value} is not a multiple of cell_size={self.cell_size}"
                )

    @property
    def width_cells(self) -> int:
        return self.board_width // self.cell_size

    @property
    def height_cells(self) -> int:
        return self.board_height // self.cell_size

    def contains(self, cell: Vec2) -> bool:
        x, y = cell
        return 0 <= x < self.width_cells and 0 <= y < self.height_cells

    def to_pixels(self, cell: Vec2) -> Vec2:
        return cell[0] * self.cell_size, cell[1] * self.cell_size

    def to_cell(self, pixels: Vec2) -> Vec2:
        return pixels[0] // self.cell_size, pixels[1] // self.cell_size
