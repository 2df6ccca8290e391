from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from gridsnake.geometry import Vec2
from gridsnake.spawn import SpawnPlacer


@dataclass
class Hazard:
    cell: Vec2
    active: bool = True


class HazardSet:
    """Fixed number of poison cells, spawned once and never respawned."""

    def __init__(self, hazards: Optional[List[Hazard]] = None) -> None:
        self._hazards: List[Hazard] = list(hazards or [])

    @classmethod
    def spawn(cls, placer: SpawnPlacer, count: int = 3) -> "HazardSet":
        if count < 0:
            raise ValueError(f"hazard count must not be negative, got {count}")
        return cls([Hazard(placer.place_random_cell()) for _ in range(count)])

    def __len__(self) -> int:
        return len(self._hazards)

    def __iter__(self) -> Iterator[Hazard]:
        return iter(self._hazards)

    def active_cells(self) -> List[Vec2]:
        return [hazard.cell for hazard in self._hazards if hazard.active]

    def hit(self, cell: Vec2) -> bool:
        # flags stay set; a hit ends the game so nothing is ever respawned
        return any(hazard.active and hazard.cell == cell for hazard in self._hazards)

    def as_tuples(self) -> Tuple[Tuple[Vec2, bool], ...]:
        return tuple((hazard.cell, hazard.active) for hazard in self._hazards)
