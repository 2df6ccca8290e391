from __future__ import annotations

import logging
import random
from typing import Optional

from gridsnake.geometry import GridGeometry, Vec2

logger = logging.getLogger(__name__)


class SpawnPlacer:
    """Uniform random cells for food and hazards.

    Occupancy is not checked: a spawned cell may land on the body, on the food or
    on another hazard.
    """

    def __init__(
        self,
        geometry: GridGeometry,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.geometry = geometry
        self.random = rng if rng is not None else random.Random(seed)

    def place_random_cell(self) -> Vec2:
        x = self.random.randrange(self.geometry.width_cells)
        y = self.random.randrange(self.geometry.height_cells)
        logger.debug("Spawned cell at (%d, %d)", x, y)
        return x, y
