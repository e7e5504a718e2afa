"""Turn validation and the single-slot input inbox."""

from __future__ import annotations

import logging

from pixel_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

# Browser key codes and key names accepted from input sources.
_KEY_CODES: dict[int, Direction] = {
    37: Direction.LEFT,
    38: Direction.UP,
    39: Direction.RIGHT,
    40: Direction.DOWN,
}

_KEY_NAMES: dict[str, Direction] = {
    "arrowleft": Direction.LEFT,
    "arrowup": Direction.UP,
    "arrowright": Direction.RIGHT,
    "arrowdown": Direction.DOWN,
    "left": Direction.LEFT,
    "up": Direction.UP,
    "right": Direction.RIGHT,
    "down": Direction.DOWN,
    "l": Direction.LEFT,
    "u": Direction.UP,
    "r": Direction.RIGHT,
    "d": Direction.DOWN,
}


def parse_direction(code: object) -> Direction | None:
    """Map a direction event to a :class:`Direction`.

    Accepts ``Direction`` members, arrow key codes, and key names
    (case-insensitive). Anything else yields ``None``.
    """
    if isinstance(code, Direction):
        return code
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return _KEY_CODES.get(code)
    if isinstance(code, str):
        return _KEY_NAMES.get(code.strip().lower())
    return None


class InputGate:
    """Decides whether a requested turn may replace the current velocity.

    A turn is admitted when the chain has not scored yet, or when both:

    * the current velocity travels along the requested direction's
      perpendicular axis, so the chain can never reverse onto its own
      axis; and
    * the last head displacement along the requested axis is not one step
      the opposite way, which would mean the chain has not yet moved
      away from the segment behind its head since a previous turn.
    """

    def __init__(self, step: int = 1) -> None:
        self.step = step

    def admits(
        self,
        direction: Direction,
        snake: Snake,
        velocity: Direction,
        score: int,
    ) -> bool:
        if score == 0:
            return True
        if velocity.component(direction.cross_axis) == 0:
            return False
        neck = snake.neck
        if neck is None:
            return True
        axis = direction.axis
        moved = getattr(snake.head, axis) - getattr(neck, axis)
        return moved != -direction.component(axis) * self.step


class DirectionInbox:
    """Holds the latest pending direction until the next tick takes it."""

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: Direction | None = None

    def put(self, direction: Direction) -> None:
        """Store *direction*, replacing anything not yet consumed."""
        self._pending = direction

    def peek(self) -> Direction | None:
        return self._pending

    def take(self) -> Direction | None:
        """Return and clear the pending direction."""
        pending, self._pending = self._pending, None
        return pending

    def __bool__(self) -> bool:
        return self._pending is not None
