from __future__ import annotations

from typing import Iterable, Optional

import pygame

from gridsnake.game import GameSession
from gridsnake.geometry import Heading

KEY_HEADINGS = {
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
    pygame.K_UP: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
}


def heading_for_key(key: int) -> Optional[Heading]:
    return KEY_HEADINGS.get(key)


class InputRouter:
    """Turns pygame events into heading requests on a session."""

    def __init__(self, session: GameSession) -> None:
        self.session = session

    def handle(self, events: Iterable) -> bool:
        """Process events. Return False when the window was closed."""
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                heading = heading_for_key(event.key)
                if heading is not None:
                    self.session.request_heading(heading)
        return True
