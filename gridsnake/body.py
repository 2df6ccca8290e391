from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Iterable, Tuple

from gridsnake.geometry import Heading, Vec2, add_pos


class SnakeBody:
    """Ordered segments, head at index 0, plus the current heading.

    Heading changes may come from another thread than the tick loop; they are
    serialised with a lock and the last accepted request wins.
    """

    def __init__(self, segments: Iterable[Vec2], heading: Heading = Heading.RIGHT) -> None:
        self._segments: Deque[Vec2] = deque(segments)
        if not self._segments:
            raise ValueError("snake body needs at least one segment")
        self._heading = heading
        self._pending_growth = 0
        self._lock = threading.Lock()

    @classmethod
    def straight(cls, head: Vec2, length: int, heading: Heading = Heading.RIGHT) -> "SnakeBody":
        """Body laid out in a line trailing behind `head`, opposite to `heading`."""
        if length < 1:
            raise ValueError(f"length must be at least 1, got {length}")
        back = heading.opposite.offset
        segments = [head]
        for _ in range(length - 1):
            segments.append(add_pos(segments[-1], back))
        return cls(segments, heading)

    @property
    def head(self) -> Vec2:
        return self._segments[0]

    @property
    def segments(self) -> Tuple[Vec2, ...]:
        return tuple(self._segments)

    @property
    def heading(self) -> Heading:
        with self._lock:
            return self._heading

    @property
    def target_length(self) -> int:
        return len(self._segments) + self._pending_growth

    def __len__(self) -> int:
        return len(self._segments)

    def set_heading(self, heading: Heading) -> bool:
        with self._lock:
            if heading.is_opposite(self._heading):
                return False
            self._heading = heading
            return True

    def grow(self) -> None:
        self._pending_growth += 1

    def advance(self) -> Vec2:
        new_head = add_pos(self._segments[0], self.heading.offset)
        self._segments.appendleft(new_head)
        if self._pending_growth:
            self._pending_growth -= 1
        else:
            self._segments.pop()
        return new_head

    def collides_with_self(self, exempt: int) -> bool:
        """True if the head sits on a segment whose index is greater than `exempt`."""
        head = self._segments[0]
        return any(
            segment == head
            for index, segment in enumerate(self._segments)
            if index > exempt
        )
