from __future__ import annotations

from typing import Optional

from gridsnake.game import GameSession


class TickDriver:
    """Fires `GameSession.tick()` once per fixed period.

    `update` is called from the main loop with a millisecond clock. Missed periods
    are not replayed: however long the loop stalled, one call fires at most one
    tick. Once the session stops running the driver never fires again.
    """

    def __init__(self, session: GameSession, tick_ms: Optional[int] = None) -> None:
        self.session = session
        self.tick_ms = tick_ms if tick_ms is not None else session.config.tick_ms
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        self.last_tick: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.session.running

    def start(self, now_ms: int) -> None:
        self.last_tick = now_ms

    def update(self, now_ms: int) -> bool:
        """Return True if a tick was fired by this call."""
        if not self.active:
            return False
        if self.last_tick is None:
            self.start(now_ms)
            return False
        if now_ms - self.last_tick < self.tick_ms:
            return False
        self.last_tick = now_ms
        self.session.tick()
        return True
