from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from gridsnake.body import SnakeBody
from gridsnake.config import SELF_COLLISION_EXEMPT, Config
from gridsnake.geometry import GridGeometry, Heading, Vec2
from gridsnake.hazards import HazardSet
from gridsnake.spawn import SpawnPlacer

logger = logging.getLogger(__name__)


class GameOverReason(Enum):
    WALL = "wall"
    SELF = "self"
    HAZARD = "hazard"


@dataclass(frozen=True)
class Snapshot:
    body: Tuple[Vec2, ...]
    food: Vec2
    hazards: Tuple[Tuple[Vec2, bool], ...]
    running: bool
    reason: Optional[GameOverReason]
    score: int

    @property
    def head(self) -> Vec2:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)


class GameSession:
    """One game from spawn to game over.

    Each tick checks the head as it stands after the previous move, in a fixed
    order (food, hazards, walls and self), and only then moves the body. The
    first fatal check stops the session for good; later ticks do nothing.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or Config()
        self.config.validate()
        self.geometry: GridGeometry = self.config.geometry()
        self.placer = SpawnPlacer(self.geometry, rng=rng, seed=self.config.seed)

        self.body = SnakeBody.straight(
            self.config.start_cell, self.config.initial_length, Heading.RIGHT
        )
        self.food: Vec2 = self.placer.place_random_cell()
        self.hazards = HazardSet.spawn(self.placer, self.config.hazard_count)
        self.score = 0
        self.running = True
        self.reason: Optional[GameOverReason] = None
        self.ticks = 0

    def request_heading(self, heading: Heading) -> None:
        if not self.running:
            return
        self.body.set_heading(heading)

    def tick(self) -> bool:
        if not self.running:
            return False

        self.ticks += 1
        self._check_food()
        if self._check_hazards() or self._check_collision():
            logger.info(
                "Game over after %d ticks: %s (score=%d)",
                self.ticks,
                self.reason.value,
                self.score,
            )
            return False

        self.body.advance()
        return True

    def _check_food(self) -> None:
        if self.body.head != self.food:
            return
        self.body.grow()
        self.score += 1
        self.food = self.placer.place_random_cell()
        logger.debug("Food eaten at %s, target length %d", self.body.head, self.body.target_length)

    def _check_hazards(self) -> bool:
        if self.hazards.hit(self.body.head):
            self._end(GameOverReason.HAZARD)
            return True
        return False

    def _check_collision(self) -> bool:
        if not self.geometry.contains(self.body.head):
            self._end(GameOverReason.WALL)
            return True
        if self.body.collides_with_self(SELF_COLLISION_EXEMPT):
            self._end(GameOverReason.SELF)
            return True
        return False

    def _end(self, reason: GameOverReason) -> None:
        self.running = False
        self.reason = reason

    def snapshot(self) -> Snapshot:
        return Snapshot(
            body=self.body.segments,
            food=self.food,
            hazards=self.hazards.as_tuples(),
            running=self.running,
            reason=self.reason,
            score=self.score,
        )
