"""Snake representation and heading logic."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) values; y grows downward."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def is_opposite(self, other: Direction) -> bool:
        """Return True if *other* would be an instant 180° reversal."""
        return self.opposite is other

    @classmethod
    def from_vector(cls, dx: int, dy: int) -> Direction | None:
        """Return the heading for a unit vector, or ``None`` if not one."""
        try:
            return cls((dx, dy))
        except ValueError:
            return None


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake does not
    know its heading; the engine owns the direction slots.
    """

    def __init__(
        self,
        start_x: int,
        start_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.body: deque[tuple[int, int]] = deque()
        for i in range(length):
            self.body.append(
                (start_x - direction.dx * i, start_y - direction.dy * i),
            )

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self, direction: Direction) -> tuple[int, int]:
        """Compute the next head position without moving."""
        x, y = self.head
        return x + direction.dx, y + direction.dy

    def push_head(self, cell: tuple[int, int]) -> None:
        """Insert a new head segment."""
        self.body.appendleft(cell)

    def drop_tail(self) -> tuple[int, int]:
        """Remove and return the tail segment."""
        return self.body.pop()

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body
