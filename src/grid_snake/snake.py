"""Snake representation and movement logic."""

from __future__ import annotations

import enum

from grid_snake.grid import GridPosition


class Direction(enum.Enum):
    """Movement directions with ``(dx, dy)`` values.

    ``NONE`` is the resting state of a snake that has not received any
    input yet.
    """

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction that would cause an instant 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.NONE: Direction.NONE,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered list of ``(x, y)`` body segments.

    The head is ``segments[0]``; the tail is ``segments[-1]``. A new snake
    is a single segment at rest; the first accepted direction starts it
    moving and later changes are buffered until the next :meth:`advance`.
    """

    def __init__(self, start_x: int = 7, start_y: int = 7) -> None:
        self.segments: list[GridPosition] = [GridPosition(start_x, start_y)]
        self.direction = Direction.NONE
        self.pending_direction = Direction.NONE
        self.started = False
        self.score = 0

    @property
    def head(self) -> GridPosition:
        """Return the head coordinate."""
        return self.segments[0]

    @property
    def tail(self) -> GridPosition:
        """Return the tail coordinate."""
        return self.segments[-1]

    def __len__(self) -> int:
        return len(self.segments)

    def set_direction(self, requested: Direction) -> bool:
        """Request a direction change, ignoring 180° reversals.

        Before the snake has started, the request takes effect at once.
        Afterwards it is buffered and replaces any earlier buffered
        request. Returns ``True`` if the request was accepted.
        """
        if requested is Direction.NONE:
            return False
        if requested is self.direction.opposite or requested is self.direction:
            return False
        if not self.started:
            self.direction = requested
            self.started = True
        else:
            self.pending_direction = requested
        return True

    def next_head(self) -> GridPosition:
        """Compute the head position one cell along the active direction."""
        dx, dy = self.direction.value
        x, y = self.head
        return GridPosition(x + dx, y + dy)

    def advance(self) -> GridPosition | None:
        """Move the snake one cell forward.

        Applies the buffered direction first. Returns the vacated tail
        cell, or ``None`` if the snake is not moving.
        """
        if not self.started or self.direction is Direction.NONE:
            return None
        if self.pending_direction is not Direction.NONE:
            self.direction = self.pending_direction
            self.pending_direction = Direction.NONE
        self.segments.insert(0, self.next_head())
        return self.segments.pop()

    def grow(self, vacated: GridPosition | None = None) -> None:
        """Lengthen the snake by one segment.

        *vacated* is the cell the last :meth:`advance` gave up; putting
        it back keeps the tail where it was on the tick food is eaten.
        Without it the current tail is duplicated.
        """
        self.segments.append(vacated if vacated is not None else self.tail)

    def occupies(self, position: GridPosition) -> bool:
        """Check whether any segment lies on *position*."""
        return position in self.segments

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return any(seg == head for seg in self.segments[1:])

    def check_collision(self, grid_size: int) -> bool:
        """Check for a wall hit or self-collision in the current position."""
        x, y = self.head
        if not (0 <= x < grid_size and 0 <= y < grid_size):
            return True
        return self.self_collision()

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "segments": [list(seg) for seg in self.segments],
            "direction": self.direction.name,
            "pending_direction": self.pending_direction.name,
            "started": self.started,
            "score": self.score,
        }
